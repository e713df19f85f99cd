#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/builder.py
"""Build semantic tree nodes from mistune tokens.

The builder owns the single mapping from token type to node class. Every
token type the tokenizer can emit has a handler here; anything else raises
``UnsupportedTokenKindError`` so grammar gaps surface immediately instead of
silently dropping content.

Nodes are built bottom-up: a container's children are converted first and
the container derives its ``plaintext`` from them.

"""

from __future__ import annotations

import logging
from typing import Any, Callable

from docmark.ast.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    DocsLink,
    Em,
    GlossaryLink,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    RawHtml,
    Strong,
    Table,
    Text,
)
from docmark.constants import DEFAULT_HIGHLIGHT_LANGUAGE
from docmark.exceptions import UnsupportedTokenKindError
from docmark.utils.highlight import Highlighter
from docmark.utils.text import decode_character_references

logger = logging.getLogger(__name__)

Token = dict[str, Any]

# Structural tokens that carry no content
IGNORED_TOKEN_TYPES = frozenset({"blank_line"})


def _flatten(nodes: list[Node]) -> str:
    return "".join(node.plaintext for node in nodes)


class TreeBuilder:
    """Convert mistune AST tokens into semantic tree nodes.

    Parameters
    ----------
    highlighter : Highlighter
        Callable turning source code into highlighted HTML
    highlight_language : str, default "rust"
        Code blocks tagged with this language are highlighted; code spans
        are always highlighted as this language

    Examples
    --------
        >>> builder = TreeBuilder(highlighter=lambda code: code)
        >>> node = builder.build({"type": "thematic_break"})
        >>> node.plaintext
        '---'

    """

    def __init__(self, highlighter: Highlighter, highlight_language: str = DEFAULT_HIGHLIGHT_LANGUAGE):
        """Register one handler per supported token type."""
        self._highlight = highlighter
        self.highlight_language = highlight_language
        self._handlers: dict[str, Callable[[Token], Node]] = {
            # Block-level tokens
            "heading": self._build_heading,
            "paragraph": self._build_paragraph,
            "block_text": self._build_block_text,
            "block_code": self._build_code_block,
            "block_quote": self._build_block_quote,
            "list": self._build_list,
            "list_item": self._build_list_item,
            "table": self._build_table,
            "thematic_break": self._build_horizontal_rule,
            "block_html": self._build_raw_html,
            # Inline tokens
            "text": self._build_text,
            "softbreak": self._build_soft_break,
            "strong": self._build_strong,
            "emphasis": self._build_em,
            "codespan": self._build_code_span,
            "link": self._build_link,
            "image": self._build_image,
            "linebreak": self._build_line_break,
            "inline_html": self._build_raw_html,
            # Cross-reference extensions
            "docs_link": self._build_docs_link,
            "glossary_link": self._build_glossary_link,
        }

    @property
    def supported_token_types(self) -> frozenset[str]:
        """Token types this builder converts into nodes."""
        return frozenset(self._handlers)

    def build(self, token: Token) -> Node:
        """Build exactly one node from ``token``.

        Parameters
        ----------
        token : dict
            Mistune token with a ``type`` key

        Returns
        -------
        Node
            The node for this token, with all children built

        Raises
        ------
        UnsupportedTokenKindError
            If no node variant exists for the token type

        """
        token_type = token.get("type", "")
        handler = self._handlers.get(token_type)
        if handler is None:
            raise UnsupportedTokenKindError(token_type, token=token)
        return handler(token)

    def build_all(self, tokens: list[Token]) -> list[Node]:
        """Build nodes for a token sequence.

        Content-free structural tokens are skipped and adjacent plain text
        leaves are merged into one ``Text`` node.

        """
        nodes: list[Node] = []
        for token in tokens:
            if token.get("type") in IGNORED_TOKEN_TYPES:
                continue
            node = self.build(token)
            previous = nodes[-1] if nodes else None
            if _is_text_leaf(node) and _is_text_leaf(previous):
                nodes[-1] = Text(content=previous.content + node.content)  # type: ignore[union-attr]
            else:
                nodes.append(node)
        return nodes

    def _children(self, token: Token) -> list[Node]:
        children = token.get("children", [])
        if not isinstance(children, list):
            return []
        return self.build_all(children)

    # ------------------------------------------------------------------
    # Block-level tokens
    # ------------------------------------------------------------------

    def _build_heading(self, token: Token) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Heading(content=tuple(self._children(token)), level=level)

    def _build_paragraph(self, token: Token) -> Paragraph:
        return Paragraph(content=tuple(self._children(token)))

    def _build_block_text(self, token: Token) -> Text:
        # Tight list item text; list items splice these children directly
        return Text(children=tuple(self._children(token)))

    def _build_code_block(self, token: Token) -> CodeBlock:
        """Build a code block, highlighting it when tagged with the highlighted language.

        Mistune keeps the final newline of the block; it is dropped so the
        content matches what was written between the fences.
        """
        code = token.get("raw", "")
        if code.endswith("\n"):
            code = code[:-1]

        attrs = token.get("attrs", {})
        info = attrs.get("info") if isinstance(attrs, dict) else None
        language = info.split(maxsplit=1)[0] if info and info.strip() else None

        if language == self.highlight_language:
            return CodeBlock(language=language, content=self._highlight(code), source=code)
        return CodeBlock(language=language, content=code, source=code)

    def _build_block_quote(self, token: Token) -> BlockQuote:
        """Build a block quote, lifting a leading heading into ``heading``."""
        children = [
            child for child in token.get("children", []) if child.get("type") not in IGNORED_TOKEN_TYPES
        ]
        heading = None
        if children and children[0].get("type") == "heading":
            heading = self.build(children[0]).plaintext
            children = children[1:]
        return BlockQuote(heading=heading, content=tuple(self.build_all(children)))

    def _build_list(self, token: Token) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        items = [self._build_list_item(child) for child in token.get("children", []) if child.get("type") == "list_item"]
        return List(ordered=bool(attrs.get("ordered", False)), items=tuple(items), start=attrs.get("start", 1))

    def _build_list_item(self, token: Token) -> ListItem:
        content: list[Node] = []
        for child in token.get("children", []):
            child_type = child.get("type")
            if child_type in IGNORED_TOKEN_TYPES:
                continue
            if child_type == "block_text":
                content.extend(self._children(child))
            else:
                content.append(self.build(child))
        return ListItem(content=tuple(content))

    def _build_table(self, token: Token) -> Table:
        """Build a table; cells become ``Text`` nodes holding their inline content.

        Row lengths are passed through without checking them against the
        header.
        """
        headers: list[str] = []
        rows: list[tuple[Node, ...]] = []

        for section in token.get("children", []):
            section_type = section.get("type")
            if section_type == "table_head":
                headers = [self._build_table_cell(cell).plaintext for cell in section.get("children", [])]
            elif section_type == "table_body":
                for row in section.get("children", []):
                    rows.append(tuple(self._build_table_cell(cell) for cell in row.get("children", [])))

        return Table(headers=tuple(headers), rows=tuple(rows))

    def _build_table_cell(self, token: Token) -> Text:
        return Text(children=tuple(self._children(token)))

    def _build_horizontal_rule(self, token: Token) -> HorizontalRule:
        return HorizontalRule()

    def _build_raw_html(self, token: Token) -> RawHtml:
        return RawHtml(content=token.get("raw", ""))

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _build_text(self, token: Token) -> Text:
        # mistune keeps entity references in text; code spans are left alone
        return Text(content=decode_character_references(token.get("raw", "")))

    def _build_soft_break(self, token: Token) -> Text:
        return Text(content="\n")

    def _build_strong(self, token: Token) -> Strong:
        return Strong(content=_flatten(self._children(token)))

    def _build_em(self, token: Token) -> Em:
        return Em(content=_flatten(self._children(token)))

    def _build_code_span(self, token: Token) -> CodeSpan:
        code = token.get("raw", "")
        return CodeSpan(content=self._highlight(code), source=code)

    def _build_link(self, token: Token) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(url=attrs.get("url", ""), text=_flatten(self._children(token)))

    def _build_image(self, token: Token) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # Alt text is in children, not attrs
        return Image(url=attrs.get("url", ""), alt=_flatten(self._children(token)))

    def _build_line_break(self, token: Token) -> LineBreak:
        return LineBreak()

    def _build_docs_link(self, token: Token) -> DocsLink:
        attrs = token["attrs"]
        return DocsLink(path=attrs["path"], url=attrs["url"])

    def _build_glossary_link(self, token: Token) -> GlossaryLink:
        attrs = token["attrs"]
        return GlossaryLink(
            term=attrs["term"],
            link_text=attrs["link_text"],
            name=attrs["name"],
            url=attrs["url"],
            desc=attrs["desc"],
        )


def _is_text_leaf(node: Node | None) -> bool:
    return isinstance(node, Text) and not node.children

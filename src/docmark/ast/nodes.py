#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/nodes.py
"""Semantic tree node classes.

This module defines the node hierarchy produced by the markdown compiler.
Every node is an immutable (frozen) dataclass carrying a derived
``plaintext`` field: the flattened textual content of the node and its
descendants, computed once from the already-built children at construction
time. Search indexing and heading anchors read ``plaintext`` instead of
re-walking the tree.

Node Hierarchy
--------------
All nodes inherit from the abstract ``Node`` class and are tagged with a
member of the closed ``NodeKind`` enumeration.

Block-level nodes:
    - Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table
    - HorizontalRule, RawHtml

Inline nodes:
    - Text, Strong, Em, CodeSpan
    - Link, Image, LineBreak, RawHtml
    - DocsLink, GlossaryLink (resolved cross-references)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from docmark.utils.text import normalize_link_url, slugify


class NodeKind(str, Enum):
    """Closed set of node variants.

    The value doubles as the suffix of the ``visit_*`` method a visitor must
    provide and as the ``type`` tag in serialized trees.
    """

    TEXT = "text"
    STRONG = "strong"
    EM = "em"
    BLOCK_QUOTE = "block_quote"
    TABLE = "table"
    HORIZONTAL_RULE = "horizontal_rule"
    LIST = "list"
    LIST_ITEM = "list_item"
    IMAGE = "image"
    CODE_BLOCK = "code_block"
    CODE_SPAN = "code_span"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LINK = "link"
    DOCS_LINK = "docs_link"
    GLOSSARY_LINK = "glossary_link"
    LINE_BREAK = "line_break"
    RAW_HTML = "raw_html"


def _join(nodes: tuple[Node, ...], separator: str) -> str:
    return separator.join(node.plaintext for node in nodes)


@dataclass(frozen=True)
class Node(ABC):
    """Base class for all semantic tree nodes.

    Subclasses implement ``_flatten`` to derive ``plaintext`` from their own
    fields; ``__post_init__`` stores the result once.

    """

    kind: ClassVar[NodeKind]
    plaintext: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compute the flattened text of this node."""
        object.__setattr__(self, "plaintext", self._flatten())

    @abstractmethod
    def _flatten(self) -> str:
        """Return the flattened textual content of this node."""

    def _freeze(self, name: str) -> None:
        """Store a child sequence field as a tuple."""
        object.__setattr__(self, name, tuple(getattr(self, name)))

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with ``visit_<kind>`` methods

        Returns
        -------
        Any
            Result of the matching visit method

        """
        return getattr(visitor, f"visit_{self.kind.value}")(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Plain text, optionally wrapping inline children.

    A leaf ``Text`` holds its string in ``content``. Table cells are ``Text``
    nodes whose ``children`` hold the cell's inline markup.

    Parameters
    ----------
    content : str, default ""
        Literal text for a leaf node
    children : tuple of Node, default ()
        Nested inline nodes

    """

    content: str = ""
    children: tuple[Node, ...] = ()

    kind = NodeKind.TEXT

    def __post_init__(self) -> None:
        self._freeze("children")
        super().__post_init__()

    def _flatten(self) -> str:
        if self.children:
            return _join(self.children, "")
        return self.content


@dataclass(frozen=True)
class Strong(Node):
    """Strong emphasis; holds the flattened text of its span."""

    content: str = ""

    kind = NodeKind.STRONG

    def _flatten(self) -> str:
        return self.content


@dataclass(frozen=True)
class Em(Node):
    """Emphasis; holds the flattened text of its span."""

    content: str = ""

    kind = NodeKind.EM

    def _flatten(self) -> str:
        return self.content


@dataclass(frozen=True)
class CodeSpan(Node):
    """Inline code.

    Parameters
    ----------
    content : str
        Highlighted HTML for the span
    source : str or None, default None
        The code as written; defaults to ``content``

    """

    content: str
    source: Optional[str] = None

    kind = NodeKind.CODE_SPAN

    def __post_init__(self) -> None:
        if self.source is None:
            object.__setattr__(self, "source", self.content)
        super().__post_init__()

    def _flatten(self) -> str:
        return self.source or ""


@dataclass(frozen=True)
class Link(Node):
    """Standard markdown link.

    Site-relative targets are rooted on construction: ``relative/path``
    becomes ``/relative/path`` while ``http(s)://``, ``/`` and ``#`` targets
    are kept as written.

    Parameters
    ----------
    url : str
        Link target
    text : str
        Flattened display text

    """

    url: str
    text: str

    kind = NodeKind.LINK

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", normalize_link_url(self.url))
        super().__post_init__()

    def _flatten(self) -> str:
        return self.text


@dataclass(frozen=True)
class DocsLink(Node):
    """Link to the API documentation of a symbol.

    Parameters
    ----------
    path : str
        Symbol path as written, e.g. ``core::module::func``
    url : str
        Resolved documentation url, or ``#`` when the path is unknown

    """

    path: str
    url: str

    kind = NodeKind.DOCS_LINK

    def _flatten(self) -> str:
        return self.path


@dataclass(frozen=True)
class GlossaryLink(Node):
    """Link to a glossary or basis term.

    Parameters
    ----------
    term : str
        Term key as written
    link_text : str
        Display text: the explicit ``{...}`` override, else the resolved name
    name : str
        Resolved term name (the raw term when unresolved)
    url : str
        Resolved url, or ``#`` when unresolved
    desc : str
        Resolved description, or the missing-term message

    """

    term: str
    link_text: str
    name: str
    url: str
    desc: str

    kind = NodeKind.GLOSSARY_LINK

    def _flatten(self) -> str:
        return self.link_text


@dataclass(frozen=True)
class Image(Node):
    """Image reference."""

    url: str
    alt: str = ""

    kind = NodeKind.IMAGE

    def _flatten(self) -> str:
        return self.alt


@dataclass(frozen=True)
class LineBreak(Node):
    """Hard line break."""

    kind = NodeKind.LINE_BREAK

    def _flatten(self) -> str:
        return "\n"


@dataclass(frozen=True)
class RawHtml(Node):
    """HTML passed through verbatim, block or inline."""

    content: str

    kind = NodeKind.RAW_HTML

    def _flatten(self) -> str:
        return self.content


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Heading(Node):
    """Heading (h1-h6) with an anchor id derived from its text.

    Parameters
    ----------
    content : tuple of Node
        Inline nodes of the heading
    level : int, default 1
        Heading level, 1 to 6

    Attributes
    ----------
    id : str
        ``slugify(plaintext)``

    Raises
    ------
    ValueError
        If ``level`` is outside 1-6

    """

    content: tuple[Node, ...] = ()
    level: int = 1
    id: str = field(init=False, compare=False)

    kind = NodeKind.HEADING

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        self._freeze("content")
        super().__post_init__()
        object.__setattr__(self, "id", slugify(self.plaintext))

    def _flatten(self) -> str:
        return _join(self.content, "")


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph of inline nodes."""

    content: tuple[Node, ...] = ()

    kind = NodeKind.PARAGRAPH

    def __post_init__(self) -> None:
        self._freeze("content")
        super().__post_init__()

    def _flatten(self) -> str:
        return _join(self.content, "")


@dataclass(frozen=True)
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    language : str or None
        Info-string language tag
    content : str
        Code to display; highlighted HTML when ``language`` is the
        highlighted language
    source : str or None, default None
        The code as written; defaults to ``content``

    """

    language: Optional[str]
    content: str
    source: Optional[str] = None

    kind = NodeKind.CODE_BLOCK

    def __post_init__(self) -> None:
        if self.source is None:
            object.__setattr__(self, "source", self.content)
        super().__post_init__()

    def _flatten(self) -> str:
        return self.source or ""


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quote, optionally titled by a leading heading.

    Parameters
    ----------
    heading : str or None
        Text of the quote's first heading, if it opened with one
    content : tuple of Node
        The remaining block nodes

    """

    heading: Optional[str] = None
    content: tuple[Node, ...] = ()

    kind = NodeKind.BLOCK_QUOTE

    def __post_init__(self) -> None:
        self._freeze("content")
        super().__post_init__()

    def _flatten(self) -> str:
        prefix = f"{self.heading}\n" if self.heading else ""
        return prefix + _join(self.content, "\n")


@dataclass(frozen=True)
class ListItem(Node):
    """Single list item."""

    content: tuple[Node, ...] = ()

    kind = NodeKind.LIST_ITEM

    def __post_init__(self) -> None:
        self._freeze("content")
        super().__post_init__()

    def _flatten(self) -> str:
        return _join(self.content, " ")


@dataclass(frozen=True)
class List(Node):
    """Ordered or bullet list.

    Parameters
    ----------
    ordered : bool
        True for numbered lists
    items : tuple of ListItem
        The list items
    start : int, default 1
        First number of an ordered list

    """

    ordered: bool = False
    items: tuple[ListItem, ...] = ()
    start: int = 1

    kind = NodeKind.LIST

    def __post_init__(self) -> None:
        self._freeze("items")
        super().__post_init__()

    def _flatten(self) -> str:
        return _join(self.items, "\n")


@dataclass(frozen=True)
class Table(Node):
    """Pipe table.

    Row lengths are not checked against the header; ragged rows are kept as
    written.

    Parameters
    ----------
    headers : tuple of str
        Header labels
    rows : tuple of tuple of Node
        Body rows, one node per cell

    """

    headers: tuple[str, ...] = ()
    rows: tuple[tuple[Node, ...], ...] = ()

    kind = NodeKind.TABLE

    def __post_init__(self) -> None:
        self._freeze("headers")
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))
        super().__post_init__()

    def _flatten(self) -> str:
        body = "\n".join(_join(row, "\t") for row in self.rows)
        return "\t".join(self.headers) + "\n" + body


@dataclass(frozen=True)
class HorizontalRule(Node):
    """Thematic break."""

    kind = NodeKind.HORIZONTAL_RULE

    def _flatten(self) -> str:
        return "---"


NODE_TYPES: dict[NodeKind, type[Node]] = {
    cls.kind: cls
    for cls in (
        Text,
        Strong,
        Em,
        BlockQuote,
        Table,
        HorizontalRule,
        List,
        ListItem,
        Image,
        CodeBlock,
        CodeSpan,
        Heading,
        Paragraph,
        Link,
        DocsLink,
        GlossaryLink,
        LineBreak,
        RawHtml,
    )
}


def get_node_children(node: Node) -> list[Node]:
    """Return the direct child nodes of ``node`` in document order.

    Table cells are returned row by row. Leaf nodes return an empty list.

    """
    if isinstance(node, (Heading, Paragraph, BlockQuote, ListItem)):
        return list(node.content)
    if isinstance(node, Text):
        return list(node.children)
    if isinstance(node, List):
        return list(node.items)
    if isinstance(node, Table):
        return [cell for row in node.rows for cell in row]
    return []

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/renderers/html.py
"""HTML rendering of compiled documents.

This module provides the HtmlRenderer class, which turns a node sequence
into an HTML fragment for page templates. Cross-reference nodes render as
plain anchors: symbol links show the bracketed path, glossary links carry
the term name and description as a tooltip. Unresolved references keep
their ``#`` target so content gaps stay visible on staging pages.

"""

from __future__ import annotations

from html import escape
from typing import Iterable, Optional

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
from docmark.ast.visitors import NodeVisitor
from docmark.exceptions import RenderingError
from docmark.options.html import HtmlRendererOptions


class HtmlRenderer(NodeVisitor):
    """Render semantic nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from docmark.ast import DocsLink, Paragraph
        >>> HtmlRenderer().render([Paragraph(content=(DocsLink("mod::fn", "/docs/mod/fn"),))])
        '<p><a class="docs-link" href="/docs/mod/fn">[mod::fn]</a></p>\\n'

    """

    def __init__(self, options: Optional[HtmlRendererOptions] = None):
        """Initialize the renderer with options."""
        self.options = options or HtmlRendererOptions()
        self._output: list[str] = []

    def render(self, nodes: Iterable[Node]) -> str:
        """Render ``nodes`` and return the HTML.

        Raises
        ------
        RenderingError
            If an item is not a semantic tree node

        """
        self._output = []
        for node in nodes:
            self._render_node(node)
        return "".join(self._output)

    def _render_node(self, node: Node) -> None:
        if not isinstance(node, Node):
            raise RenderingError(f"Cannot render {type(node).__name__} as HTML", rendering_stage="dispatch")
        node.accept(self)

    def _render_children(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self._render_node(node)

    # Inline nodes

    def visit_text(self, node: Text) -> None:
        if node.children:
            self._render_children(node.children)
        else:
            self._output.append(escape(node.content, quote=False))

    def visit_strong(self, node: Strong) -> None:
        self._output.append(f"<strong>{escape(node.content, quote=False)}</strong>")

    def visit_em(self, node: Em) -> None:
        self._output.append(f"<em>{escape(node.content, quote=False)}</em>")

    def visit_code_span(self, node: CodeSpan) -> None:
        # Content is highlighter output and already escaped
        self._output.append(f"<code>{node.content}</code>")

    def visit_link(self, node: Link) -> None:
        self._output.append(f'<a href="{escape(node.url)}">{escape(node.text, quote=False)}</a>')

    def visit_docs_link(self, node: DocsLink) -> None:
        self._output.append(f'<a class="docs-link" href="{escape(node.url)}">[{escape(node.path, quote=False)}]</a>')

    def visit_glossary_link(self, node: GlossaryLink) -> None:
        title_attr = ""
        if self.options.glossary_tooltips:
            title_attr = f' title="{escape(f"{node.name}: {node.desc}")}"'
        text = escape(node.link_text, quote=False)
        self._output.append(f'<a class="glossary-link" href="{escape(node.url)}"{title_attr}>{text}</a>')

    def visit_image(self, node: Image) -> None:
        self._output.append(f'<img src="{escape(node.url)}" alt="{escape(node.alt)}">')

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append("<br>\n")

    def visit_raw_html(self, node: RawHtml) -> None:
        self._output.append(node.content)

    # Block nodes

    def visit_heading(self, node: Heading) -> None:
        id_attr = f' id="{node.id}"' if self.options.heading_anchors and node.id else ""
        self._output.append(f"<h{node.level}{id_attr}>")
        self._render_children(node.content)
        self._output.append(f"</h{node.level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        self._output.append("<p>")
        self._render_children(node.content)
        self._output.append("</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        class_attr = f' class="language-{escape(node.language)}"' if node.language else ""
        # Highlighted blocks differ from their source; plain ones still need escaping
        content = node.content if node.content != node.source else escape(node.content, quote=False)
        self._output.append(f"<pre><code{class_attr}>{content}</code></pre>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._output.append("<blockquote>\n")
        if node.heading:
            self._output.append(f'<p class="blockquote-heading">{escape(node.heading, quote=False)}</p>\n')
        self._render_children(node.content)
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
        self._output.append(f"<{tag}{start_attr}>\n")
        self._render_children(node.items)
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        self._output.append("<li>")
        self._render_children(node.content)
        self._output.append("</li>\n")

    def visit_table(self, node: Table) -> None:
        self._output.append("<table>\n<thead>\n<tr>")
        for header in node.headers:
            self._output.append(f"<th>{escape(header, quote=False)}</th>")
        self._output.append("</tr>\n</thead>\n<tbody>\n")
        for row in node.rows:
            self._output.append("<tr>")
            for cell in row:
                self._output.append("<td>")
                self._render_node(cell)
                self._output.append("</td>")
            self._output.append("</tr>\n")
        self._output.append("</tbody>\n</table>\n")

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        self._output.append("<hr>\n")


def render_html(nodes: Iterable[Node], options: Optional[HtmlRendererOptions] = None) -> str:
    """Render ``nodes`` to HTML with a fresh renderer."""
    return HtmlRenderer(options).render(nodes)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/visitors.py
"""Visitor pattern base class for semantic tree traversal.

Renderers, search indexers and other consumers of the tree subclass
``NodeVisitor`` and implement one ``visit_<kind>`` method per node kind.
``Node.accept`` dispatches on the node's ``kind`` tag, so a visitor missing a
method fails loudly instead of silently skipping nodes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    Paragraph,
    RawHtml,
    Strong,
    Table,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for semantic tree visitors.

    Examples
    --------
    Count the symbol links in a page:

        >>> class DocsLinkCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def generic_visit(self, node):
        ...         for child in get_node_children(node):
        ...             child.accept(self)
        ...     def visit_docs_link(self, node):
        ...         self.count += 1
        ...     # remaining visit_* methods delegate to generic_visit

    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_em(self, node: Em) -> Any:
        """Visit an Em node."""

    @abstractmethod
    def visit_code_span(self, node: CodeSpan) -> Any:
        """Visit a CodeSpan node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_docs_link(self, node: DocsLink) -> Any:
        """Visit a DocsLink node."""

    @abstractmethod
    def visit_glossary_link(self, node: GlossaryLink) -> Any:
        """Visit a GlossaryLink node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""

    @abstractmethod
    def visit_raw_html(self, node: RawHtml) -> Any:
        """Visit a RawHtml node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""

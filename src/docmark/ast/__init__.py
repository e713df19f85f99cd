#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/__init__.py
"""Semantic tree produced by the markdown compiler.

This package exposes the node classes, the visitor base class, the token to
node builder and helpers for walking and serializing trees.
"""

from docmark.ast.builder import TreeBuilder
from docmark.ast.nodes import (
    NODE_TYPES,
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
    NodeKind,
    Paragraph,
    RawHtml,
    Strong,
    Table,
    Text,
    get_node_children,
)
from docmark.ast.serialization import dict_to_node, json_to_nodes, node_to_dict, nodes_to_json
from docmark.ast.utils import HeadingEntry, extract_headings, find_nodes, iter_nodes
from docmark.ast.visitors import NodeVisitor

__all__ = [
    "NODE_TYPES",
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "DocsLink",
    "Em",
    "GlossaryLink",
    "Heading",
    "HeadingEntry",
    "HorizontalRule",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeKind",
    "NodeVisitor",
    "Paragraph",
    "RawHtml",
    "Strong",
    "Table",
    "Text",
    "TreeBuilder",
    "dict_to_node",
    "extract_headings",
    "find_nodes",
    "get_node_children",
    "iter_nodes",
    "json_to_nodes",
    "node_to_dict",
    "nodes_to_json",
]

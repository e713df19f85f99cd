#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/utils.py
"""Helpers for walking compiled node sequences.

Functions
---------
iter_nodes : Depth-first iteration over nodes and their descendants
find_nodes : Collect nodes of one kind
extract_headings : Table-of-contents entries for a page

"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

from docmark.ast.nodes import Heading, Node, NodeKind, get_node_children


class HeadingEntry(NamedTuple):
    """One table-of-contents entry."""

    level: int
    id: str
    text: str


def iter_nodes(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node in ``nodes`` and its descendants, depth first, in document order."""
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(get_node_children(node)))


def find_nodes(nodes: Iterable[Node], kind: NodeKind) -> list[Node]:
    """Return all nodes of ``kind`` found anywhere in ``nodes``."""
    return [node for node in iter_nodes(nodes) if node.kind is kind]


def extract_headings(nodes: Iterable[Node], max_level: int = 6) -> list[HeadingEntry]:
    """Collect the headings of a page for a table of contents.

    Parameters
    ----------
    nodes : iterable of Node
        Compiled page
    max_level : int, default 6
        Deepest heading level to include

    Returns
    -------
    list of HeadingEntry
        ``(level, id, text)`` in document order

    """
    return [
        HeadingEntry(node.level, node.id, node.plaintext)
        for node in iter_nodes(nodes)
        if isinstance(node, Heading) and node.level <= max_level
    ]

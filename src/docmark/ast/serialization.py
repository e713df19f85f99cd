#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/serialization.py
"""JSON serialization for semantic trees.

Page templates consume compiled documents as plain data. Each node becomes a
dict tagged with its ``type`` (the ``NodeKind`` value); child nodes nest as
dicts and child sequences as lists. Derived fields (``plaintext`` and a
heading's ``id``) are written out for consumers but ignored when loading,
since nodes recompute them.

Examples
--------
    >>> from docmark.ast import Heading, Text
    >>> from docmark.ast.serialization import nodes_to_json, json_to_nodes
    >>> data = nodes_to_json([Heading(content=(Text("Title"),), level=1)])
    >>> json_to_nodes(data)[0].id
    'title'

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any, Iterable

from docmark.ast.nodes import NODE_TYPES, Heading, Node, NodeKind
from docmark.exceptions import ValidationError


def _encode(value: Any) -> Any:
    if isinstance(value, Node):
        return node_to_dict(value)
    if isinstance(value, tuple):
        return [_encode(item) for item in value]
    return value


def _decode(value: Any) -> Any:
    if isinstance(value, dict):
        return dict_to_node(value)
    if isinstance(value, list):
        return tuple(_decode(item) for item in value)
    return value


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to plain data.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        ``{"type": ..., <fields>..., "plaintext": ...}``

    """
    result: dict[str, Any] = {"type": node.kind.value}
    for f in fields(node):
        if f.init:
            result[f.name] = _encode(getattr(node, f.name))
    result["plaintext"] = node.plaintext
    if isinstance(node, Heading):
        result["id"] = node.id
    return result


def dict_to_node(data: dict[str, Any]) -> Node:
    """Rebuild a node from ``node_to_dict`` output.

    Raises
    ------
    ValidationError
        If the type tag is missing or unknown, or fields don't match

    """
    type_tag = data.get("type")
    try:
        node_class = NODE_TYPES[NodeKind(type_tag)]
    except ValueError as e:
        raise ValidationError(
            f"Unknown node type: {type_tag!r}", parameter_name="type", parameter_value=type_tag, original_error=e
        ) from e

    kwargs = {f.name: _decode(data[f.name]) for f in fields(node_class) if f.init and f.name in data}
    try:
        return node_class(**kwargs)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Invalid fields for {type_tag} node: {e}", parameter_name=str(type_tag), original_error=e
        ) from e


def nodes_to_json(nodes: Iterable[Node], indent: int | None = None) -> str:
    """Serialize a node sequence to a JSON array string."""
    return json.dumps([node_to_dict(node) for node in nodes], indent=indent, ensure_ascii=False)


def json_to_nodes(json_str: str) -> list[Node]:
    """Load a node sequence written by ``nodes_to_json``.

    Raises
    ------
    ValidationError
        If the JSON is malformed or is not an array of nodes

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", original_error=e) from e
    if not isinstance(data, list):
        raise ValidationError("Expected a JSON array of nodes", parameter_value=type(data).__name__)
    return [dict_to_node(item) for item in data]

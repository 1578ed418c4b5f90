#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/ast/serialization.py
"""JSON serialization and deserialization for document trees.

This is the exchange format between a tree producer and the transcoder.
Each node is a JSON object::

    {
        "kind": "headline",
        "properties": {"level": 1, "title": [{"kind": "plain-text", ...}]},
        "children": [...],
        "source_location": {"format": "org", "line": 3}
    }

Node lists stored in the ``title`` and ``tag`` properties are serialized
recursively. Parent references are not serialized; they are rebuilt when
the tree is loaded.

Examples
--------
    >>> from org2confluence.ast.builder import document, paragraph
    >>> json_str = ast_to_json(document(paragraph("Hello")))
    >>> json_to_ast(json_str).children[0].kind.value
    'paragraph'

"""

from __future__ import annotations

import json
import logging
from typing import Any

from org2confluence.ast.nodes import SECONDARY_PROPERTIES, Node, NodeKind, SourceLocation
from org2confluence.exceptions import ParsingError

logger = logging.getLogger(__name__)

_VALID_KINDS = {kind.value for kind in NodeKind}


def _serialize_source_location(location: SourceLocation) -> dict[str, Any]:
    result: dict[str, Any] = {"format": location.format}
    if location.line is not None:
        result["line"] = location.line
    if location.column is not None:
        result["column"] = location.column
    if location.file is not None:
        result["file"] = location.file
    if location.metadata:
        result["metadata"] = location.metadata
    return result


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to plain dictionaries.

    Parameters
    ----------
    node : Node
        Node to serialize

    Returns
    -------
    dict
        JSON-compatible representation of the subtree

    """
    properties: dict[str, Any] = {}
    for key, value in node.properties.items():
        if key in SECONDARY_PROPERTIES and isinstance(value, list):
            properties[key] = [ast_to_dict(item) if isinstance(item, Node) else item for item in value]
        else:
            properties[key] = value

    result: dict[str, Any] = {"kind": node.kind.value, "properties": properties}
    if node.children:
        result["children"] = [ast_to_dict(child) for child in node.children]
    if node.source_location is not None:
        result["source_location"] = _serialize_source_location(node.source_location)
    return result


def _deserialize_source_location(data: Any) -> SourceLocation | None:
    if not data:
        return None
    if not isinstance(data, dict) or "format" not in data:
        raise ParsingError(f"Invalid source_location: {data!r}")
    return SourceLocation(
        format=data["format"],
        line=data.get("line"),
        column=data.get("column"),
        file=data.get("file"),
        metadata=data.get("metadata", {}),
    )


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to a node tree.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ParsingError on unknown node kinds.
        If False, replace unknown nodes with empty plain text (logged).

    Returns
    -------
    Node
        Reconstructed node with parent references attached

    Raises
    ------
    ParsingError
        If the data is not a node object, or has an unknown kind in strict mode

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}")

    kind = data.get("kind")
    if not kind:
        raise ParsingError("Node object must contain a 'kind' field")

    if kind not in _VALID_KINDS:
        if strict_mode:
            raise ParsingError(f"Unknown node kind: {kind}")
        logger.warning("Unknown node kind '%s', replacing with empty text", kind)
        return Node(NodeKind.PLAIN_TEXT, {"value": ""})

    raw_properties = data.get("properties") or {}
    if not isinstance(raw_properties, dict):
        raise ParsingError(f"Properties of '{kind}' node must be an object")

    properties: dict[str, Any] = {}
    for key, value in raw_properties.items():
        if key in SECONDARY_PROPERTIES and isinstance(value, list):
            properties[key] = [
                dict_to_ast(item, strict_mode=strict_mode) if isinstance(item, dict) else item for item in value
            ]
        else:
            properties[key] = value

    children = [dict_to_ast(child, strict_mode=strict_mode) for child in data.get("children") or []]
    return Node(
        NodeKind(kind),
        properties,
        children,
        source_location=_deserialize_source_location(data.get("source_location")),
    )


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node tree to a JSON string.

    Parameters
    ----------
    node : Node
        Root node to serialize
    indent : int or None, default None
        JSON indentation; None produces compact output

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Load a node tree from a JSON string.

    Parameters
    ----------
    json_str : str
        JSON text produced by :func:`ast_to_json` or a compatible producer
    strict_mode : bool, default True
        Passed through to :func:`dict_to_ast`

    Returns
    -------
    Node
        Root node of the loaded tree

    Raises
    ------
    ParsingError
        If the JSON is malformed or does not describe a node tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON document tree: {e}", original_error=e) from e
    return dict_to_ast(data, strict_mode=strict_mode)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/ast/utils.py
"""Utility functions for working with tree nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
list_item_depth : Nesting depth of a list item

Examples
--------
Extract text from a headline title:

    >>> from org2confluence.ast.builder import bold, headline
    >>> node = headline(1, ["Hello ", bold("world")])
    >>> extract_text(node.secondary("title"))
    'Hello world'

"""

from __future__ import annotations

from typing import Union

from org2confluence.ast.nodes import Node, NodeKind

_TEXT_VALUE_KINDS = frozenset({NodeKind.PLAIN_TEXT, NodeKind.VERBATIM, NodeKind.CODE})


def extract_text(node_or_nodes: Union[Node, list[Node]]) -> str:
    """Extract plain text from a node or list of nodes.

    Values of plain-text, verbatim and code nodes are concatenated in
    document order; object ``post_blank`` spacing is honoured so that
    ``*bold* text`` extracts as ``bold text``.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, list):
        return "".join(extract_text(node) for node in node_or_nodes)

    node = node_or_nodes
    if node.kind in _TEXT_VALUE_KINDS:
        text = str(node.get("value", ""))
    else:
        text = "".join(extract_text(child) for child in node.children)
    if not node.kind.is_element and node.post_blank:
        text += " " * node.post_blank
    return text


def list_item_depth(node: Node) -> int:
    """Return the nesting depth of a list item.

    Walks the parent chain starting from ``node`` itself for as long as
    nodes are items or plain lists, counting items along the way. A
    top-level item, or a detached item with no parent, has depth 0; a node
    outside any list yields -1.

    Parameters
    ----------
    node : Node
        The list item (or any node) to measure

    Returns
    -------
    int
        Number of item ancestors strictly above an item, or -1

    Examples
    --------
        >>> from org2confluence.ast.builder import item, plain_list
        >>> outer = plain_list("unordered", item("a", plain_list("unordered", item("b"))))
        >>> inner_item = outer.children[0].children[1].children[0]
        >>> list_item_depth(inner_item)
        1

    """
    depth = -1
    current: Node | None = node
    while current is not None and current.kind in (NodeKind.ITEM, NodeKind.PLAIN_LIST):
        if current.kind is NodeKind.ITEM:
            depth += 1
        current = current.parent
    return depth

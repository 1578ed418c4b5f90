#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/ast/__init__.py
"""Document tree module.

This module provides the tree representation consumed by the transcoder:

- nodes: the tagged-variant node and the closed set of node kinds
- builder: factory helpers for constructing trees
- index: whole-tree queries (ids, headline numbers, table headers, footnotes)
- serialization: JSON exchange format
- utils: text extraction and list depth

Examples
--------
    >>> from org2confluence.ast import NodeKind, TreeIndex
    >>> from org2confluence.ast.builder import document, headline, paragraph
    >>> doc = document(headline(1, "Title", paragraph("Hello world")))
    >>> TreeIndex(doc).headline_number(doc.children[0])
    '1'

"""

from __future__ import annotations

from org2confluence.ast.index import DocumentIndex, TreeIndex
from org2confluence.ast.nodes import (
    OBJECT_KINDS,
    SECONDARY_PROPERTIES,
    Node,
    NodeKind,
    SourceLocation,
    enclosing_element,
    find_enclosing,
    link_parents,
)
from org2confluence.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from org2confluence.ast.utils import extract_text, list_item_depth

__all__ = [
    "DocumentIndex",
    "Node",
    "NodeKind",
    "OBJECT_KINDS",
    "SECONDARY_PROPERTIES",
    "SourceLocation",
    "TreeIndex",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "enclosing_element",
    "extract_text",
    "find_enclosing",
    "json_to_ast",
    "link_parents",
    "list_item_depth",
]

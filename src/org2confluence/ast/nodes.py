#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/ast/nodes.py
"""Node model for structured document trees.

This module defines the tagged-variant node used to represent an Org-style
document tree. Every node carries a kind tag, a mapping of kind-specific
properties, an ordered list of children and a weak back-reference to its
parent.

Node Kinds
----------
Elements are block-level constructs that end with a newline when rendered:
    - document, headline, section, paragraph
    - plain-list, item, table, table-row
    - src-block, example-block, fixed-width
    - property-drawer, node-property, quote-block
    - footnote-definition, horizontal-rule

Objects are inline constructs:
    - plain-text, bold, italic, underline, strike-through, verbatim, code
    - link, target, timestamp, footnote-reference, table-cell, line-break

The parent back-reference is navigation only: it is held through
:mod:`weakref` so a node never keeps its ancestors alive.

"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional


class NodeKind(str, Enum):
    """Closed set of node kinds understood by the transcoder."""

    DOCUMENT = "document"
    HEADLINE = "headline"
    SECTION = "section"
    PARAGRAPH = "paragraph"
    PLAIN_LIST = "plain-list"
    ITEM = "item"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    SRC_BLOCK = "src-block"
    EXAMPLE_BLOCK = "example-block"
    FIXED_WIDTH = "fixed-width"
    PROPERTY_DRAWER = "property-drawer"
    NODE_PROPERTY = "node-property"
    QUOTE_BLOCK = "quote-block"
    FOOTNOTE_DEFINITION = "footnote-definition"
    HORIZONTAL_RULE = "horizontal-rule"
    LINK = "link"
    TARGET = "target"
    TIMESTAMP = "timestamp"
    FOOTNOTE_REFERENCE = "footnote-reference"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE_THROUGH = "strike-through"
    VERBATIM = "verbatim"
    CODE = "code"
    PLAIN_TEXT = "plain-text"
    LINE_BREAK = "line-break"

    @property
    def is_element(self) -> bool:
        """Return True for block-level kinds."""
        return self not in OBJECT_KINDS

    @property
    def renders_children(self) -> bool:
        """Return False for kinds whose children are not transcoded in place.

        Footnote definitions, and inline footnote references holding their
        definition as children, are rendered once from the footnotes section
        and only when referenced.
        """
        return self not in (NodeKind.FOOTNOTE_REFERENCE, NodeKind.FOOTNOTE_DEFINITION)


OBJECT_KINDS = frozenset(
    {
        NodeKind.TABLE_CELL,
        NodeKind.LINK,
        NodeKind.TARGET,
        NodeKind.TIMESTAMP,
        NodeKind.FOOTNOTE_REFERENCE,
        NodeKind.BOLD,
        NodeKind.ITALIC,
        NodeKind.UNDERLINE,
        NodeKind.STRIKE_THROUGH,
        NodeKind.VERBATIM,
        NodeKind.CODE,
        NodeKind.PLAIN_TEXT,
        NodeKind.LINE_BREAK,
    }
)

# Properties whose values are lists of nodes (secondary strings)
SECONDARY_PROPERTIES = ("title", "tag")


@dataclass
class SourceLocation:
    """Source location information for tree nodes.

    Parameters
    ----------
    format : str
        Source format (e.g., 'org')
    line : int or None, default = None
        Line number in source document
    column : int or None, default = None
        Column number in source document
    file : str or None, default = None
        Source file name
    metadata : dict, default = empty dict
        Additional producer-specific location information

    """

    format: str
    line: Optional[int] = None
    column: Optional[int] = None
    file: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        """Return a short human-readable location such as ``notes.org:12:3``."""
        parts = [self.file or ""]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(part for part in parts if part)


@dataclass(eq=False)
class Node:
    """A single element of a structured document tree.

    Nodes compare by identity so they can key the lookup tables built by
    the document index and the export context.

    Parameters
    ----------
    kind : NodeKind or str
        Kind tag of the node
    properties : dict, default = empty dict
        Kind-specific properties (strings, enums, nested node lists)
    children : list of Node, default = empty list
        Ordered child nodes
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    Examples
    --------
        >>> from org2confluence.ast.nodes import Node, NodeKind
        >>> para = Node(NodeKind.PARAGRAPH, children=[Node("plain-text", {"value": "hi"})])
        >>> para.children[0].parent is para
        True

    """

    kind: NodeKind
    properties: dict[str, Any] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None
    _parent_ref: Optional[weakref.ReferenceType[Node]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Coerce the kind tag and attach parent references."""
        self.kind = NodeKind(self.kind)
        for child in self.children:
            child._parent_ref = weakref.ref(self)
        for name in SECONDARY_PROPERTIES:
            for secondary in self.properties.get(name) or ():
                if isinstance(secondary, Node):
                    secondary._parent_ref = weakref.ref(self)

    @property
    def parent(self) -> Optional[Node]:
        """Return the parent node, or None for a root or detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def post_blank(self) -> int:
        """Blank lines (elements) or spaces (objects) following this node."""
        return int(self.properties.get("post_blank", 0) or 0)

    def get(self, name: str, default: Any = None) -> Any:
        """Return a property value."""
        return self.properties.get(name, default)

    def append(self, child: Node) -> Node:
        """Append a child and attach its parent reference.

        Returns
        -------
        Node
            The appended child, for chaining

        """
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child

    def secondary(self, name: str) -> list[Node]:
        """Return the node list stored in a secondary property (``title``, ``tag``)."""
        value = self.properties.get(name)
        if not value:
            return []
        return [item for item in value if isinstance(item, Node)]

    def iter_ancestors(self) -> Iterator[Node]:
        """Yield ancestors from the parent up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in document order.

        Secondary properties are visited before children, matching the order
        in which they appear in the source text.
        """
        yield self
        for name in SECONDARY_PROPERTIES:
            for secondary in self.secondary(name):
                yield from secondary.walk()
        for child in self.children:
            yield from child.walk()


def link_parents(root: Node) -> Node:
    """Re-attach parent references throughout a tree.

    Useful after a tree has been assembled by mutating ``children`` lists
    directly rather than through :meth:`Node.append`.

    Parameters
    ----------
    root : Node
        Root of the tree to fix up

    Returns
    -------
    Node
        The same root node

    """
    for name in SECONDARY_PROPERTIES:
        for secondary in root.secondary(name):
            secondary._parent_ref = weakref.ref(root)
            link_parents(secondary)
    for child in root.children:
        child._parent_ref = weakref.ref(root)
        link_parents(child)
    return root


def find_enclosing(node: Node, *kinds: NodeKind) -> Optional[Node]:
    """Return the nearest ancestor whose kind is one of ``kinds``."""
    for ancestor in node.iter_ancestors():
        if ancestor.kind in kinds:
            return ancestor
    return None


def enclosing_element(node: Node) -> Optional[Node]:
    """Return the nearest ancestor that is an element rather than an object."""
    for ancestor in node.iter_ancestors():
        if ancestor.kind.is_element:
            return ancestor
    return None

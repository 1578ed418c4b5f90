#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/ast/builder.py
"""Builder helpers for constructing document trees.

This module provides one factory function per node kind plus two helper
classes for structures that need bookkeeping (nested lists, tables with a
header rule). Plain strings are promoted to ``plain-text`` nodes wherever
inline content is expected and to paragraphs wherever block content is
expected.

Examples
--------
    >>> from org2confluence.ast.builder import document, headline, paragraph, bold
    >>> doc = document(
    ...     headline(1, "Intro", paragraph("Some ", bold("bold"), " text")),
    ... )

"""

from __future__ import annotations

import re
from typing import Any, Optional, Sequence, Union

from org2confluence.ast.nodes import Node, NodeKind
from org2confluence.constants import CheckboxState, ListType

Inline = Union[str, Node]
Block = Union[str, Node]

_SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):(.*)$", re.DOTALL)

# Link types recognised in raw links; other "word:" prefixes stay fuzzy
KNOWN_LINK_TYPES = frozenset(
    {"attachment", "confluence", "doi", "file", "ftp", "help", "http", "https", "id", "info", "mailto", "news", "shell"}
)


def _inline(parts: Sequence[Inline]) -> list[Node]:
    return [text(part) if isinstance(part, str) else part for part in parts]


def _blocks(parts: Sequence[Block]) -> list[Node]:
    return [paragraph(part) if isinstance(part, str) else part for part in parts]


# ============================================================================
# Structural elements
# ============================================================================


def document(*children: Block, **properties: Any) -> Node:
    """Create the root ``document`` node."""
    return Node(NodeKind.DOCUMENT, properties, _blocks(children))


def headline(
    level: int,
    title: Union[Inline, Sequence[Inline]],
    *children: Block,
    todo_keyword: Optional[str] = None,
    tags: Optional[Sequence[str]] = None,
    custom_id: Optional[str] = None,
    id: Optional[str] = None,
    **properties: Any,
) -> Node:
    """Create a ``headline`` node.

    Body blocks preceding the first sub-headline are grouped into a
    ``section`` child, mirroring how Org places headline contents.

    Parameters
    ----------
    level : int
        Headline level (number of stars)
    title : str, Node or sequence of them
        Headline title
    *children : str or Node
        Body blocks and sub-headlines
    todo_keyword : str, optional
        TODO keyword such as ``TODO`` or ``DONE``
    tags : sequence of str, optional
        Headline tags
    custom_id : str, optional
        ``CUSTOM_ID`` property value
    id : str, optional
        ``ID`` property value

    """
    title_parts = [title] if isinstance(title, (str, Node)) else list(title)
    props: dict[str, Any] = {"level": level, "title": _inline(title_parts)}
    if todo_keyword:
        props["todo_keyword"] = todo_keyword
    if tags:
        props["tags"] = list(tags)
    if custom_id:
        props["custom_id"] = custom_id
    if id:
        props["id"] = id
    props.update(properties)

    nodes: list[Node] = []
    pending: list[Node] = []
    for child in _blocks(children):
        if child.kind in (NodeKind.HEADLINE, NodeKind.SECTION):
            if pending:
                nodes.append(section(*pending))
                pending = []
            nodes.append(child)
        else:
            pending.append(child)
    if pending:
        nodes.append(section(*pending))
    return Node(NodeKind.HEADLINE, props, nodes)


def section(*children: Block, **properties: Any) -> Node:
    """Create a ``section`` node."""
    return Node(NodeKind.SECTION, properties, _blocks(children))


def paragraph(*content: Inline, **properties: Any) -> Node:
    """Create a ``paragraph`` node from inline content."""
    return Node(NodeKind.PARAGRAPH, properties, _inline(content))


def plain_list(list_type: ListType, *items: Node, **properties: Any) -> Node:
    """Create a ``plain-list`` node of the given type."""
    if list_type not in ("ordered", "unordered", "descriptive"):
        raise ValueError(f"Unknown list type: {list_type}")
    return Node(NodeKind.PLAIN_LIST, {"type": list_type, **properties}, list(items))


def item(
    *content: Block,
    checkbox: Optional[CheckboxState] = None,
    tag: Optional[Union[Inline, Sequence[Inline]]] = None,
    **properties: Any,
) -> Node:
    """Create an ``item`` node; string content becomes paragraphs."""
    props: dict[str, Any] = dict(properties)
    if checkbox is not None:
        if checkbox not in ("on", "off", "partial"):
            raise ValueError(f"Unknown checkbox state: {checkbox}")
        props["checkbox"] = checkbox
    if tag is not None:
        tag_parts = [tag] if isinstance(tag, (str, Node)) else list(tag)
        props["tag"] = _inline(tag_parts)
    return Node(NodeKind.ITEM, props, _blocks(content))


def table(*rows: Node, **properties: Any) -> Node:
    """Create a ``table`` node."""
    return Node(NodeKind.TABLE, properties, list(rows))


def row(*cells: Union[Inline, Node], **properties: Any) -> Node:
    """Create a standard ``table-row``; strings become single-text cells."""
    nodes = [part if isinstance(part, Node) and part.kind is NodeKind.TABLE_CELL else cell(part) for part in cells]
    return Node(NodeKind.TABLE_ROW, {"type": "standard", **properties}, nodes)


def rule_row() -> Node:
    """Create a horizontal rule ``table-row`` separating row groups."""
    return Node(NodeKind.TABLE_ROW, {"type": "rule"})


def cell(*content: Inline) -> Node:
    """Create a ``table-cell`` from inline content."""
    return Node(NodeKind.TABLE_CELL, {}, _inline([part for part in content if part != ""]))


def src_block(value: str, language: Optional[str] = None, **properties: Any) -> Node:
    """Create a ``src-block`` node."""
    return Node(NodeKind.SRC_BLOCK, {"language": language, "value": value, **properties})


def example_block(value: str, **properties: Any) -> Node:
    """Create an ``example-block`` node."""
    return Node(NodeKind.EXAMPLE_BLOCK, {"value": value, **properties})


def fixed_width(value: str, **properties: Any) -> Node:
    """Create a ``fixed-width`` node."""
    return Node(NodeKind.FIXED_WIDTH, {"value": value, **properties})


def property_drawer(*pairs: tuple[str, Optional[str]], **properties: Any) -> Node:
    """Create a ``property-drawer`` holding one ``node-property`` per pair."""
    children = [Node(NodeKind.NODE_PROPERTY, {"key": key, "value": value}) for key, value in pairs]
    return Node(NodeKind.PROPERTY_DRAWER, properties, children)


def quote_block(*children: Block, **properties: Any) -> Node:
    """Create a ``quote-block`` node."""
    return Node(NodeKind.QUOTE_BLOCK, properties, _blocks(children))


def footnote_definition(label: str, *children: Block, **properties: Any) -> Node:
    """Create a ``footnote-definition`` element."""
    return Node(NodeKind.FOOTNOTE_DEFINITION, {"label": label, **properties}, _blocks(children))


def horizontal_rule(**properties: Any) -> Node:
    """Create a ``horizontal-rule`` node."""
    return Node(NodeKind.HORIZONTAL_RULE, properties)


# ============================================================================
# Objects
# ============================================================================


def text(value: str, **properties: Any) -> Node:
    """Create a ``plain-text`` node."""
    return Node(NodeKind.PLAIN_TEXT, {"value": value, **properties})


def bold(*content: Inline, **properties: Any) -> Node:
    """Create a ``bold`` node."""
    return Node(NodeKind.BOLD, properties, _inline(content))


def italic(*content: Inline, **properties: Any) -> Node:
    """Create an ``italic`` node."""
    return Node(NodeKind.ITALIC, properties, _inline(content))


def underline(*content: Inline, **properties: Any) -> Node:
    """Create an ``underline`` node."""
    return Node(NodeKind.UNDERLINE, properties, _inline(content))


def strike_through(*content: Inline, **properties: Any) -> Node:
    """Create a ``strike-through`` node."""
    return Node(NodeKind.STRIKE_THROUGH, properties, _inline(content))


def verbatim(value: str, **properties: Any) -> Node:
    """Create a ``verbatim`` node."""
    return Node(NodeKind.VERBATIM, {"value": value, **properties})


def code(value: str, **properties: Any) -> Node:
    """Create a ``code`` node."""
    return Node(NodeKind.CODE, {"value": value, **properties})


def line_break(**properties: Any) -> Node:
    """Create a ``line-break`` node."""
    return Node(NodeKind.LINE_BREAK, properties)


def target(value: str, **properties: Any) -> Node:
    """Create a ``target`` node (``<<value>>``)."""
    return Node(NodeKind.TARGET, {"value": value, **properties})


def timestamp(raw_value: str, **properties: Any) -> Node:
    """Create a ``timestamp`` node; inactive timestamps use square brackets."""
    timestamp_type = "inactive" if raw_value.startswith("[") else "active"
    return Node(NodeKind.TIMESTAMP, {"raw_value": raw_value, "type": timestamp_type, **properties})


def footnote_reference(label: Optional[str] = None, *definition: Inline, **properties: Any) -> Node:
    """Create a ``footnote-reference``.

    Passing definition content makes this an inline footnote; its content
    is rendered in the footnotes section, never at the reference site.
    """
    ref_type = "inline" if definition else "standard"
    return Node(NodeKind.FOOTNOTE_REFERENCE, {"label": label, "type": ref_type, **properties}, _inline(definition))


def link(raw_link: str, *description: Inline, link_type: Optional[str] = None, **properties: Any) -> Node:
    """Create a ``link`` node from a raw Org link.

    The link type is derived from the raw link when not given: ``#name``
    is a ``custom-id`` link, ``scheme:rest`` uses the scheme (``file``,
    ``id``, ``https`` ...), and anything else is a ``fuzzy`` link.

    Parameters
    ----------
    raw_link : str
        The link as written between the brackets
    *description : str or Node
        Optional description content
    link_type : str, optional
        Explicit link type overriding detection

    Examples
    --------
        >>> link("file:img/cat.png").get("path")
        'img/cat.png'
        >>> link("#install").get("type")
        'custom-id'

    """
    path = raw_link
    detected = "fuzzy"
    if raw_link.startswith("#"):
        detected, path = "custom-id", raw_link[1:]
    elif raw_link.startswith("<<") and raw_link.endswith(">>"):
        detected, path = "radio", raw_link[2:-2]
    else:
        match = _SCHEME_PATTERN.match(raw_link)
        if match and match.group(1).lower() in KNOWN_LINK_TYPES:
            detected = match.group(1).lower()
            path = match.group(2)
            if detected in ("http", "https", "ftp", "mailto", "news"):
                path = raw_link
    props: dict[str, Any] = {"type": link_type or detected, "path": path, "raw_link": raw_link}
    props.update(properties)
    return Node(NodeKind.LINK, props, _inline(description))


# ============================================================================
# Bookkeeping helpers
# ============================================================================


class ListBuilder:
    """Helper for building nested list structures by level.

    Parameters
    ----------
    list_type : {"ordered", "unordered", "descriptive"}, default "unordered"
        Type used for every list the builder creates

    Examples
    --------
    >>> builder = ListBuilder("ordered")
    >>> builder.add_item(1, "First")
    >>> builder.add_item(2, "Nested")
    >>> builder.add_item(1, "Second", checkbox="on")
    >>> lst = builder.get_list()

    """

    def __init__(self, list_type: ListType = "unordered"):
        """Initialize the builder with the list type to use."""
        self.list_type: ListType = list_type
        self.root = plain_list(list_type)
        self._stack: list[tuple[Node, int]] = [(self.root, 1)]

    def add_item(self, level: int, *content: Block, **item_properties: Any) -> Node:
        """Add an item at the given nesting level (1 is top-level).

        Raises
        ------
        ValueError
            If ``level`` is below 1 or skips a level without a parent item

        """
        if level < 1:
            raise ValueError(f"Level must be >= 1, got {level}")

        while self._stack[-1][1] > level:
            self._stack.pop()

        while self._stack[-1][1] < level:
            parent_list, current_level = self._stack[-1]
            if not parent_list.children:
                raise ValueError(f"Cannot nest to level {level} without a parent item at level {current_level}")
            nested = parent_list.children[-1].append(plain_list(self.list_type))
            self._stack.append((nested, current_level + 1))

        return self._stack[-1][0].append(item(*content, **item_properties))

    def get_list(self) -> Node:
        """Return the top-level ``plain-list`` node."""
        return self.root


class TableBuilder:
    """Helper for building tables with an optional header row group.

    Examples
    --------
    >>> builder = TableBuilder()
    >>> builder.add_row(["Name", "Age"])
    >>> builder.add_rule()
    >>> builder.add_row(["Alice", "30"])
    >>> tbl = builder.get_table()

    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self.table = table()

    def add_row(self, cells: Sequence[Union[Inline, Node]]) -> Node:
        """Append a standard row built from cell contents."""
        return self.table.append(row(*cells))

    def add_rule(self) -> Node:
        """Append a rule row; a rule after the first rows marks them as header."""
        return self.table.append(rule_row())

    def get_table(self) -> Node:
        """Return the constructed ``table`` node."""
        return self.table

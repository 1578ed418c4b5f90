#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/ast/index.py
"""Whole-tree queries used while transcoding.

Renderers never compute document-wide structure themselves. Instead they ask
a :class:`DocumentIndex` for identifiers, headline numbers, reference
labels, table header boundaries and footnote definitions. Any tree producer
can supply its own implementation; :class:`TreeIndex` computes everything
from the tree in a single document-order pass.

"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Optional, Protocol, runtime_checkable

from org2confluence.ast.nodes import Node, NodeKind
from org2confluence.ast.utils import extract_text
from org2confluence.constants import INLINE_IMAGE_EXTENSIONS, INLINE_IMAGE_LINK_TYPES, REFERENCE_LABEL_PREFIX

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentIndex(Protocol):
    """Read-only query interface over a document tree."""

    def resolve_id(self, identifier: str) -> Optional[Node]:
        """Return the headline carrying ``identifier`` as CUSTOM_ID or ID."""
        ...

    def resolve_fuzzy(self, target: str) -> Optional[Node]:
        """Return the headline, target or named element matching ``target``."""
        ...

    def headline_number(self, node: Node) -> str:
        """Return the hierarchical number of a headline, e.g. ``2.1``."""
        ...

    def headline_level(self, node: Node) -> int:
        """Return the level of a headline relative to the shallowest one."""
        ...

    def reference_label(self, node: Node) -> str:
        """Return a unique, stable anchor label for a node."""
        ...

    def is_inline_image(self, link: Node) -> bool:
        """Return True when a link should be displayed as an image."""
        ...

    def table_row_starts_header(self, row: Node) -> bool:
        """Return True when ``row`` is the first row of its table's header."""
        ...

    def table_row_ends_header(self, row: Node) -> bool:
        """Return True when ``row`` is the last row of its table's header."""
        ...

    def footnote_definition(self, reference: Node) -> Optional[Node]:
        """Return the node holding the definition for a footnote reference."""
        ...

    def footnote_definitions(self) -> list[tuple[str, Node]]:
        """Return ``(label, definition)`` pairs in document order."""
        ...


class TreeIndex:
    """Default :class:`DocumentIndex` computed from the tree itself.

    Parameters
    ----------
    root : Node
        Root of the document tree

    Examples
    --------
        >>> from org2confluence.ast.builder import document, headline
        >>> doc = document(headline(1, "One"), headline(1, "Two", headline(2, "Sub")))
        >>> index = TreeIndex(doc)
        >>> sub = doc.children[1].children[0]
        >>> index.headline_number(sub)
        '2.1'

    """

    def __init__(self, root: Node):
        """Index ``root`` and all of its descendants."""
        self.root = root
        self._headline_numbers: dict[Node, tuple[int, ...]] = {}
        self._labels: dict[Node, str] = {}
        self._used_labels: set[str] = set()
        self._label_counter = 0
        self._ids: dict[str, Node] = {}
        self._headline_titles: dict[str, Node] = {}
        self._named: dict[str, Node] = {}
        self._header_bounds: dict[Node, tuple[Optional[Node], Optional[Node]]] = {}
        self._definitions_by_label: dict[str, Node] = {}
        self._definitions: list[tuple[str, Node]] = []

        headline_levels = [int(node.get("level", 1)) for node in root.walk() if node.kind is NodeKind.HEADLINE]
        self._level_offset = (min(headline_levels) - 1) if headline_levels else 0

        self._index_tree()

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def _index_tree(self) -> None:
        counters: list[int] = []
        for node in self.root.walk():
            if node.kind is NodeKind.HEADLINE:
                level = self.headline_level(node)
                del counters[level:]
                while len(counters) < level:
                    counters.append(0)
                counters[level - 1] += 1
                self._headline_numbers[node] = tuple(counters)
                self._index_headline(node)
            elif node.kind is NodeKind.TARGET:
                value = str(node.get("value", ""))
                self._named.setdefault(value, node)
                self._assign_label(node, value)
            elif node.kind is NodeKind.TABLE:
                self._index_table(node)
            elif node.kind is NodeKind.FOOTNOTE_DEFINITION:
                self._register_definition(str(node.get("label") or ""), node)
            elif node.kind is NodeKind.FOOTNOTE_REFERENCE and node.children:
                self._register_definition(str(node.get("label") or ""), node)

            name = node.get("name")
            if name and node.kind is not NodeKind.TARGET:
                self._named.setdefault(str(name), node)
                self._assign_label(node, str(name))

    def _index_headline(self, node: Node) -> None:
        custom_id = node.get("custom_id")
        identifier = node.get("id")
        for key in (custom_id, identifier):
            if key:
                self._ids.setdefault(str(key), node)
        title = extract_text(node.secondary("title")).strip()
        if title:
            self._headline_titles.setdefault(title, node)
        self._assign_label(node, str(custom_id) if custom_id else None)

    def _index_table(self, table: Node) -> None:
        groups: list[list[Node]] = [[]]
        for table_row in table.children:
            if table_row.get("type") == "rule":
                if groups[-1]:
                    groups.append([])
            else:
                groups[-1].append(table_row)
        groups = [group for group in groups if group]
        if len(groups) > 1:
            header = groups[0]
            self._header_bounds[table] = (header[0], header[-1])
        else:
            self._header_bounds[table] = (None, None)

    def _register_definition(self, label: str, node: Node) -> None:
        if label:
            if label in self._definitions_by_label:
                logger.debug("Duplicate footnote definition for label %r ignored", label)
                return
            self._definitions_by_label[label] = node
        self._definitions.append((label, node))

    def _assign_label(self, node: Node, preferred: Optional[str]) -> str:
        if node in self._labels:
            return self._labels[node]
        if preferred and preferred not in self._used_labels:
            label = preferred
        else:
            label = self._next_generated_label()
        self._labels[node] = label
        self._used_labels.add(label)
        return label

    def _next_generated_label(self) -> str:
        while True:
            self._label_counter += 1
            candidate = f"{REFERENCE_LABEL_PREFIX}{self._label_counter}"
            if candidate not in self._used_labels:
                return candidate

    # ------------------------------------------------------------------
    # DocumentIndex interface
    # ------------------------------------------------------------------

    def resolve_id(self, identifier: str) -> Optional[Node]:
        """Return the headline whose CUSTOM_ID or ID equals ``identifier``."""
        return self._ids.get(identifier)

    def resolve_fuzzy(self, target: str) -> Optional[Node]:
        """Resolve a fuzzy link path.

        A leading ``*`` restricts the search to headline titles. Otherwise
        targets and named elements are tried first, then headline titles.
        """
        if target.startswith("*"):
            return self._headline_titles.get(target[1:].strip())
        return self._named.get(target) or self._headline_titles.get(target.strip())

    def headline_number(self, node: Node) -> str:
        """Return the dotted section number of a headline."""
        numbers = self._headline_numbers.get(node)
        if numbers is None:
            return ""
        return ".".join(str(number) for number in numbers)

    def headline_level(self, node: Node) -> int:
        """Return the headline level relative to the shallowest headline."""
        return max(1, int(node.get("level", 1)) - self._level_offset)

    def reference_label(self, node: Node) -> str:
        """Return the anchor label for ``node``, generating one if needed."""
        return self._assign_label(node, None)

    def is_inline_image(self, link: Node) -> bool:
        """Return True for description-less file/http links to image files."""
        if link.kind is not NodeKind.LINK or link.children:
            return False
        if str(link.get("type", "")) not in INLINE_IMAGE_LINK_TYPES:
            return False
        path = str(link.get("path", "")).split("?", 1)[0].split("#", 1)[0]
        return PurePosixPath(path).suffix.lower() in INLINE_IMAGE_EXTENSIONS

    def table_row_starts_header(self, row: Node) -> bool:
        """Return True for the first standard row of the header row group."""
        table = row.parent
        if table is None:
            return False
        start, _ = self._header_bounds.get(table, (None, None))
        return start is row

    def table_row_ends_header(self, row: Node) -> bool:
        """Return True for the last standard row of the header row group."""
        table = row.parent
        if table is None:
            return False
        _, end = self._header_bounds.get(table, (None, None))
        return end is row

    def footnote_definition(self, reference: Node) -> Optional[Node]:
        """Return the inline reference itself or the labelled definition."""
        if reference.children:
            return reference
        label = reference.get("label")
        if not label:
            return None
        return self._definitions_by_label.get(str(label))

    def footnote_definitions(self) -> list[tuple[str, Node]]:
        """Return every definition in document order."""
        return list(self._definitions)

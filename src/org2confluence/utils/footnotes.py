#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/utils/footnotes.py
"""Sequential footnote numbering shared across one export."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Hashable, Iterator, Optional

from org2confluence.ast.nodes import Node

logger = logging.getLogger(__name__)


def footnote_identity(reference: Node) -> Hashable:
    """Return the identity shared by every reference to the same footnote.

    Labelled references are identified by label; anonymous inline footnotes
    are unique to their reference node.
    """
    label = reference.get("label")
    if label:
        return str(label)
    return reference


@dataclass
class FootnoteEntry:
    """One numbered footnote: its number, identity and definition node."""

    number: int
    identity: Hashable
    definition: Optional[Node]


@dataclass
class FootnoteRegistry:
    """Assign footnote numbers in order of first reference.

    A footnote identity receives exactly one number, reused on every later
    reference.

    Examples
    --------
        >>> from org2confluence.ast.builder import footnote_reference
        >>> registry = FootnoteRegistry()
        >>> registry.register_reference(footnote_reference("a"), None)
        1
        >>> registry.register_reference(footnote_reference("b"), None)
        2
        >>> registry.register_reference(footnote_reference("a"), None)
        1

    """

    auto_number_start: int = 1
    _next_number: itertools.count = field(init=False, repr=False)
    _numbers: dict[Hashable, int] = field(default_factory=dict, init=False, repr=False)
    _entries: list[FootnoteEntry] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the number counter after dataclass initialization."""
        self._next_number = itertools.count(self.auto_number_start)

    def register_reference(self, reference: Node, definition: Optional[Node]) -> int:
        """Record a reference and return its footnote number."""
        identity = footnote_identity(reference)
        number = self._numbers.get(identity)
        if number is not None:
            return number

        number = next(self._next_number)
        self._numbers[identity] = number
        self._entries.append(FootnoteEntry(number=number, identity=identity, definition=definition))
        if definition is None:
            logger.debug("Footnote %s has no definition", reference.get("label") or number)
        return number

    def number_for(self, reference: Node) -> Optional[int]:
        """Return the number already assigned to a reference, if any."""
        return self._numbers.get(footnote_identity(reference))

    def __iter__(self) -> Iterator[FootnoteEntry]:
        """Iterate over entries in assignment order."""
        return iter(self._entries)

    def __len__(self) -> int:
        """Return the number of registered footnotes."""
        return len(self._entries)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/renderers/registry.py
"""Layered translator registries.

A registry maps node kinds to translator functions. A dialect registry is
derived from a base registry and only overrides the kinds that differ;
lookups consult the dialect first and fall back to its base, then to the
base's base, and so on.

Translators are plain functions ``(node, contents, context) -> str`` where
``contents`` is the already-rendered text of the node's children.

Examples
--------
    >>> from org2confluence.ast.nodes import NodeKind
    >>> base = TranslatorRegistry("base")
    >>> @base.register(NodeKind.BOLD)
    ... def bold(node, contents, context):
    ...     return contents.upper()
    >>> dialect = base.derive("dialect")
    >>> dialect.lookup(NodeKind.BOLD) is bold
    True

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from org2confluence.ast.nodes import NodeKind, SourceLocation
from org2confluence.exceptions import UnsupportedNodeKindError

if TYPE_CHECKING:
    from org2confluence.ast.nodes import Node
    from org2confluence.renderers.context import ExportContext

logger = logging.getLogger(__name__)

Translator = Callable[["Node", str, "ExportContext"], str]


class TranslatorRegistry:
    """Mapping of node kinds to translators with base-dialect fallback.

    Parameters
    ----------
    name : str
        Dialect name, used in error messages
    parent : TranslatorRegistry, optional
        Base dialect consulted when this registry has no translator

    """

    def __init__(self, name: str, parent: Optional[TranslatorRegistry] = None):
        """Create an empty registry layered over ``parent``."""
        self.name = name
        self.parent = parent
        self._translators: dict[NodeKind, Translator] = {}

    def __repr__(self) -> str:
        """Show the dialect chain."""
        return f"TranslatorRegistry({' -> '.join(layer.name for layer in self.layers())})"

    def register(self, *kinds: NodeKind) -> Callable[[Translator], Translator]:
        """Register the decorated function as translator for ``kinds``.

        Registering a kind this layer already defines replaces it.
        """

        def decorator(translator: Translator) -> Translator:
            for kind in kinds:
                self.add(kind, translator)
            return translator

        return decorator

    def add(self, kind: NodeKind, translator: Translator) -> None:
        """Register ``translator`` for ``kind`` in this layer."""
        self._translators[NodeKind(kind)] = translator

    def derive(self, name: str) -> TranslatorRegistry:
        """Create a dialect registry that falls back to this one."""
        return TranslatorRegistry(name, parent=self)

    def layers(self) -> Iterator[TranslatorRegistry]:
        """Yield this registry followed by each base registry."""
        layer: Optional[TranslatorRegistry] = self
        while layer is not None:
            yield layer
            layer = layer.parent

    def defines(self, kind: NodeKind) -> bool:
        """Return True when this layer itself (not a base) handles ``kind``."""
        return kind in self._translators

    def kinds(self) -> set[NodeKind]:
        """Return every kind handled by this registry or its bases."""
        handled: set[NodeKind] = set()
        for layer in self.layers():
            handled.update(layer._translators)
        return handled

    def lookup(self, kind: NodeKind, source_location: Optional[SourceLocation] = None) -> Translator:
        """Return the translator for ``kind``.

        Parameters
        ----------
        kind : NodeKind
            Node kind to dispatch
        source_location : SourceLocation, optional
            Location reported if dispatch fails

        Raises
        ------
        UnsupportedNodeKindError
            If neither this registry nor any base defines ``kind``

        """
        for layer in self.layers():
            translator = layer._translators.get(kind)
            if translator is not None:
                if layer is not self:
                    logger.debug("Dialect %s falls back to %s for %s", self.name, layer.name, kind.value)
                return translator
        raise UnsupportedNodeKindError(getattr(kind, "value", str(kind)), self.name, source_location)

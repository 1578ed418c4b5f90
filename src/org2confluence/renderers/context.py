#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/renderers/context.py
"""Per-export state and the recursive transcoding driver.

One :class:`ExportContext` exists per export run. It carries the renderer
options, the document index, the dialect registry and the two mutable
accumulators shared by all translators: the footnote registry and the
reference label table.

Transcoding is bottom-up and in document order: a node's secondary strings
(``title``, ``tag``) are rendered first, then its children, and only then is
its own translator called with the rendered child text.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from org2confluence.ast.index import DocumentIndex
from org2confluence.ast.nodes import SECONDARY_PROPERTIES, Node
from org2confluence.options.base import BaseRendererOptions
from org2confluence.renderers.registry import TranslatorRegistry
from org2confluence.utils.footnotes import FootnoteRegistry

logger = logging.getLogger(__name__)

_TRAILING_BLANKS = re.compile(r"(\n[ \t]*)*\Z")


def normalize_element(text: str, post_blank: int = 0) -> str:
    """End non-empty element output with one newline plus ``post_blank`` blank lines."""
    if not text:
        return ""
    return _TRAILING_BLANKS.sub("\n", text, count=1) + "\n" * post_blank


@dataclass
class ExportContext:
    """Shared state threaded through every translator call.

    Parameters
    ----------
    options : BaseRendererOptions
        Options of the renderer running the export
    index : DocumentIndex
        Whole-tree queries supplied by the tree producer
    registry : TranslatorRegistry
        Dialect registry used for dispatch

    """

    options: BaseRendererOptions
    index: DocumentIndex
    registry: TranslatorRegistry
    footnotes: FootnoteRegistry = field(default_factory=FootnoteRegistry)
    references: dict[Node, str] = field(default_factory=dict)
    _secondary: dict[tuple[Node, str], str] = field(default_factory=dict, repr=False)

    def transcode(self, node: Node) -> str:
        """Render ``node`` and its descendants with the dialect registry.

        Raises
        ------
        UnsupportedNodeKindError
            If no translator exists for a node in the subtree

        """
        translator = self.registry.lookup(node.kind, node.source_location)

        for name in SECONDARY_PROPERTIES:
            secondary = node.secondary(name)
            if secondary:
                self._secondary[(node, name)] = self.transcode_nodes(secondary)

        contents = self.transcode_nodes(node.children) if node.kind.renders_children else ""
        output = translator(node, contents, self)

        if node.kind.is_element:
            return normalize_element(output, node.post_blank)
        return output + " " * node.post_blank

    def transcode_nodes(self, nodes: Iterable[Node]) -> str:
        """Render a sequence of sibling nodes and concatenate the results."""
        return "".join(self.transcode(node) for node in nodes)

    def secondary(self, node: Node, name: str) -> str:
        """Return the rendered text of a secondary property such as ``title``.

        Falls back to rendering on demand when the node was not reached
        through :meth:`transcode`.
        """
        key = (node, name)
        if key not in self._secondary:
            self._secondary[key] = self.transcode_nodes(node.secondary(name))
        return self._secondary[key]

    def reference_label(self, node: Node) -> str:
        """Return the anchor label of ``node``, recording it in the reference table."""
        label = self.references.get(node)
        if label is None:
            label = self.index.reference_label(node)
            self.references[node] = label
        return label

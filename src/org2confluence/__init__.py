#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/__init__.py
"""org2confluence - render Org-style document trees as Confluence wiki markup.

The package takes an already-parsed document tree (headlines, paragraphs,
lists, tables, blocks, links, footnotes and inline markup) and transcodes it
bottom-up through a layered dialect registry. The Confluence dialect derives
from a plain-text base dialect and overrides the kinds whose markup differs.

Examples
--------
    >>> from org2confluence import to_confluence
    >>> from org2confluence.ast.builder import bold, document, paragraph
    >>> print(to_confluence(document(paragraph(bold("hi"))), with_toc=False), end="")
    *hi*

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from org2confluence.ast.index import DocumentIndex, TreeIndex
from org2confluence.ast.nodes import Node, NodeKind, SourceLocation
from org2confluence.exceptions import (
    InvalidOptionsError,
    Org2ConfluenceError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnresolvedReferenceError,
    UnsupportedNodeKindError,
    ValidationError,
)
from org2confluence.options import ConfluenceRendererOptions, PlainTextOptions
from org2confluence.renderers import ConfluenceRenderer, PlainTextRenderer

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _merge_options(options: Any, options_class: type, renderer_name: str, kwargs: dict[str, Any]) -> Any:
    if options is not None and not isinstance(options, options_class):
        raise InvalidOptionsError(renderer_name, options_class, type(options))
    if options is None:
        return options_class(**kwargs)
    return options.create_updated(**kwargs) if kwargs else options


def to_confluence(
    doc: Node,
    options: Optional[ConfluenceRendererOptions] = None,
    index: Optional[DocumentIndex] = None,
    **kwargs: Any,
) -> str:
    """Render a document tree as Confluence wiki markup.

    Parameters
    ----------
    doc : Node
        Root of the document tree
    options : ConfluenceRendererOptions, optional
        Rendering options; defaults are used when omitted
    index : DocumentIndex, optional
        Whole-tree queries from the tree producer; computed from ``doc``
        when omitted
    **kwargs
        Individual option overrides, e.g. ``with_toc=False``

    Returns
    -------
    str
        Confluence wiki markup ending with a single newline

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a ConfluenceRendererOptions instance
    UnsupportedNodeKindError
        If the tree contains a kind no dialect can render

    """
    resolved = _merge_options(options, ConfluenceRendererOptions, "confluence", kwargs)
    return ConfluenceRenderer(resolved).render_to_string(doc, index)


def to_plaintext(
    doc: Node,
    options: Optional[PlainTextOptions] = None,
    index: Optional[DocumentIndex] = None,
    **kwargs: Any,
) -> str:
    """Render a document tree as plain text.

    Parameters are the same as :func:`to_confluence`, with
    :class:`PlainTextOptions`.
    """
    resolved = _merge_options(options, PlainTextOptions, "plaintext", kwargs)
    return PlainTextRenderer(resolved).render_to_string(doc, index)


__all__ = [
    "__version__",
    "to_confluence",
    "to_plaintext",
    "ConfluenceRenderer",
    "PlainTextRenderer",
    "ConfluenceRendererOptions",
    "PlainTextOptions",
    "DocumentIndex",
    "TreeIndex",
    "Node",
    "NodeKind",
    "SourceLocation",
    "Org2ConfluenceError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeKindError",
    "UnresolvedReferenceError",
    "OutputWriteError",
]

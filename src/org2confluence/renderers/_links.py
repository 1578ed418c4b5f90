#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/renderers/_links.py
"""Link target resolution for the Confluence dialect.

Each link node is resolved once, at render time, into one of the
:data:`ResolvedTarget` variants. The variant decides the target text that
goes inside the link brackets.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Union

from org2confluence.ast.nodes import Node, NodeKind
from org2confluence.constants import CONFLUENCE_PAGE_LINK_PREFIX
from org2confluence.exceptions import UnresolvedReferenceError
from org2confluence.options.confluence import ConfluenceRendererOptions
from org2confluence.renderers.context import ExportContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class External:
    """Target emitted verbatim: URLs, mail addresses, page names."""

    raw: str

    def render(self) -> str:
        return self.raw


@dataclass(frozen=True)
class FileLocal:
    """Target pointing to a local file, reduced to its base name."""

    basename: str

    def render(self) -> str:
        return self.basename


@dataclass(frozen=True)
class InternalHeadline:
    """Target pointing to a headline by number or anchor label."""

    reference: str

    def render(self) -> str:
        return f"#{self.reference}"


@dataclass(frozen=True)
class InternalAnchor:
    """Target pointing to a non-headline anchor by reference label."""

    label: str

    def render(self) -> str:
        return f"#{self.label}"


@dataclass(frozen=True)
class Unresolved:
    """Internal target that could not be found; renders as nothing."""

    link_type: str
    path: str

    def render(self) -> str:
        return ""


ResolvedTarget = Union[External, FileLocal, InternalHeadline, InternalAnchor, Unresolved]


def _file_basename(path: str) -> str:
    # "file:img.png::*Heading" carries a search option after "::"
    return PurePosixPath(path.split("::", 1)[0]).name


def resolve_link(link: Node, context: ExportContext) -> ResolvedTarget:
    """Resolve the target of a link node.

    Parameters
    ----------
    link : Node
        A ``link`` node
    context : ExportContext
        Context of the running export; its index answers id and fuzzy lookups

    Returns
    -------
    ResolvedTarget
        The resolved variant

    """
    link_type = str(link.get("type") or "")
    path = str(link.get("path") or "")
    raw_link = str(link.get("raw_link") or path)
    index = context.index

    if link_type == "file":
        return FileLocal(_file_basename(path))

    if link_type in ("custom-id", "id"):
        headline = index.resolve_id(path)
        if headline is None:
            return Unresolved(link_type, path)
        return InternalHeadline(context.reference_label(headline))

    if link_type == "fuzzy":
        destination = index.resolve_fuzzy(path)
        if destination is None:
            return Unresolved(link_type, path)
        if destination.kind is NodeKind.HEADLINE:
            return InternalHeadline(index.headline_number(destination))
        return InternalAnchor(context.reference_label(destination))

    if raw_link.startswith(CONFLUENCE_PAGE_LINK_PREFIX):
        return External(raw_link[len(CONFLUENCE_PAGE_LINK_PREFIX):])
    if link_type == "confluence":
        return External(path)

    return External(raw_link)


def report_unresolved(link: Node, target: Unresolved, options: ConfluenceRendererOptions) -> None:
    """Report an unresolved internal link according to ``options``.

    Raises
    ------
    UnresolvedReferenceError
        If ``fail_on_unresolved_links`` is set

    """
    if options.warn_on_unresolved_links:
        location = f" at {link.source_location.describe()}" if link.source_location else ""
        logger.warning("Unresolved %s link %r%s; rendering empty target", target.link_type, target.path, location)
    if options.on_unresolved_link is not None:
        options.on_unresolved_link(link)
    if options.fail_on_unresolved_links:
        raise UnresolvedReferenceError(target.link_type, target.path)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that every dialect renderer
inherits from. A renderer owns a :class:`TranslatorRegistry` (its dialect)
and a frozen options object; it builds one :class:`ExportContext` per
export, transcodes the tree bottom-up and wraps the result in the dialect's
document template.

"""

from __future__ import annotations

import logging
import textwrap
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, ClassVar, Optional, Union

from org2confluence.ast.index import DocumentIndex, TreeIndex
from org2confluence.ast.nodes import Node
from org2confluence.exceptions import InvalidOptionsError
from org2confluence.options.base import BaseRendererOptions
from org2confluence.renderers.context import ExportContext
from org2confluence.renderers.registry import TranslatorRegistry
from org2confluence.utils.io_utils import write_content

logger = logging.getLogger(__name__)


def wrap_text(text: str, width: int) -> str:
    """Wrap text to specified line width.

    Parameters
    ----------
    text : str
        Text to wrap
    width : int
        Maximum line width (0 or negative means no wrapping)

    Returns
    -------
    str
        Wrapped text

    """
    if width <= 0:
        return text

    return textwrap.fill(text, width=width, break_long_words=False, break_on_hyphens=False)


class BaseRenderer(ABC):
    """Abstract base class for all dialect renderers.

    Subclasses set :attr:`registry` to their dialect registry and implement
    :meth:`apply_template`.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom dialect:

        >>> from org2confluence.ast.nodes import NodeKind
        >>> from org2confluence.renderers.plaintext import PLAINTEXT_TRANSLATORS
        >>> SHOUTING = PLAINTEXT_TRANSLATORS.derive("shouting")
        >>> @SHOUTING.register(NodeKind.PLAIN_TEXT)
        ... def shout(node, contents, context):
        ...     return str(node.get("value", "")).upper()
        >>> class ShoutingRenderer(BaseRenderer):
        ...     registry = SHOUTING
        ...     def apply_template(self, body, context):
        ...         return body

    """

    registry: ClassVar[TranslatorRegistry]
    options: BaseRendererOptions

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def apply_template(self, body: str, context: ExportContext) -> str:
        """Wrap the transcoded body in the dialect's document template.

        Parameters
        ----------
        body : str
            Transcoded document body
        context : ExportContext
            Context of the export, including accumulated footnotes

        Returns
        -------
        str
            Complete document text

        """
        pass

    def create_context(self, root: Node, index: Optional[DocumentIndex] = None) -> ExportContext:
        """Create the export context for rendering ``root``.

        Parameters
        ----------
        root : Node
            Root of the tree to export
        index : DocumentIndex, optional
            Whole-tree queries; a :class:`TreeIndex` is built when omitted

        """
        if index is None:
            index = TreeIndex(root)
        return ExportContext(options=self.options, index=index, registry=self.registry)

    def render_to_string(self, doc: Node, index: Optional[DocumentIndex] = None) -> str:
        """Render a tree to a string.

        Parameters
        ----------
        doc : Node
            Root node to render, usually a ``document``
        index : DocumentIndex, optional
            Whole-tree queries supplied by the tree producer

        Returns
        -------
        str
            Rendered text ending with a single newline

        Raises
        ------
        UnsupportedNodeKindError
            If the tree contains a kind the dialect cannot render
        UnresolvedReferenceError
            If strict link resolution is enabled and a link cannot be resolved

        """
        context = self.create_context(doc, index)
        logger.debug("Rendering %s tree with %s", doc.kind.value, self.registry.name)

        body = context.transcode(doc)
        if not self.options.body_only:
            body = self.apply_template(body, context)

        return body.rstrip() + "\n"

    def render(
        self,
        doc: Node,
        output: Union[str, Path, IO[bytes], IO[str]],
        index: Optional[DocumentIndex] = None,
    ) -> None:
        """Render a tree to a file path or stream.

        Parameters
        ----------
        doc : Node
            Root node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination
        index : DocumentIndex, optional
            Whole-tree queries supplied by the tree producer

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(doc, index), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("h1. Hello", buffer)
            >>> buffer.getvalue()
            'h1. Hello'

        """
        write_content(text, output)

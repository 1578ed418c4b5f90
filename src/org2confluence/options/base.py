#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for renderer options.

This module defines the foundation classes for the dialect-specific options
used by the renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from org2confluence.constants import (
    DEFAULT_BODY_ONLY,
    DEFAULT_LINE_LENGTH,
    DEFAULT_WITH_TOC,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build options from a configuration mapping, ignoring unknown keys.

        Keys may use dashes or underscores (``with-toc`` or ``with_toc``).
        """
        known = {f.name for f in fields(cls) if f.init}
        kwargs = {}
        for key, value in data.items():
            name = str(key).replace("-", "_")
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    with_toc : bool, default True
        Emit a table-of-contents marker before the body.
    body_only : bool, default False
        Render only the body: no table of contents and no footnotes section.
    line_length : int, default 0
        Fill paragraphs to this width; 0 disables wrapping.

    Notes
    -----
    Subclasses should define dialect-specific options as frozen dataclass fields.

    """

    with_toc: bool = field(
        default=DEFAULT_WITH_TOC,
        metadata={"help": "Emit a table-of-contents marker before the body", "importance": "core"},
    )
    body_only: bool = field(
        default=DEFAULT_BODY_ONLY,
        metadata={"help": "Render only the body, without table of contents or footnotes", "importance": "core"},
    )
    line_length: int = field(
        default=DEFAULT_LINE_LENGTH,
        metadata={"help": "Fill paragraphs to this width (0 disables wrapping)", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for base renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.line_length < 0:
            raise ValueError(f"line_length must be non-negative, got {self.line_length}")

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the org2confluence renderers.

Each dialect has its own frozen Options dataclass derived from
BaseRendererOptions.
"""

from __future__ import annotations

from org2confluence.options.base import BaseRendererOptions, CloneFrozenMixin
from org2confluence.options.confluence import ConfluenceRendererOptions
from org2confluence.options.plaintext import PlainTextOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConfluenceRendererOptions",
    "PlainTextOptions",
]

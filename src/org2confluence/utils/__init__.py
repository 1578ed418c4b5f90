#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/utils/__init__.py
"""Utility modules for org2confluence package.

This package contains text escaping, footnote numbering and output writing
helpers shared by the renderers.
"""

from org2confluence.utils.escape import escape_confluence
from org2confluence.utils.footnotes import FootnoteEntry, FootnoteRegistry, footnote_identity
from org2confluence.utils.io_utils import write_content

__all__ = [
    "escape_confluence",
    "FootnoteEntry",
    "FootnoteRegistry",
    "footnote_identity",
    "write_content",
]

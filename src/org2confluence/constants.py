#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the org2confluence library.

This module centralizes the literal markup tokens and default configuration
values used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Confluence Markup Tokens - Literal constructs of the wiki dialect
3. Rendering Defaults - Default option values
4. Tree Producer Defaults - Values used by the default document index
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

ListType = Literal["ordered", "unordered", "descriptive"]
CheckboxState = Literal["on", "off", "partial"]
TableRowType = Literal["standard", "rule"]

# =============================================================================
# Confluence Markup Tokens
# =============================================================================

CONFLUENCE_TOC_MARKER = "{toc}"
CONFLUENCE_FOOTNOTES_TITLE = "Footnotes"
CONFLUENCE_HORIZONTAL_RULE = "----"

CONFLUENCE_CHECKBOX_TOKENS: dict[str, str] = {
    "on": "*{{(X)}}*",
    "off": "*{{( )}}*",
    "partial": "*{{(-)}}*",
}

# Link types that point inside the document
INTERNAL_LINK_TYPES = frozenset({"custom-id", "id", "fuzzy"})

# Raw links carrying this prefix address a Confluence page by title
CONFLUENCE_PAGE_LINK_PREFIX = "confluence:"

# Confluence headings only go down to h6
CONFLUENCE_MAX_HEADING_LEVEL = 6

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_WITH_TOC = True
DEFAULT_WITH_TODO_KEYWORDS = True
DEFAULT_WITH_TAGS = False
DEFAULT_BODY_ONLY = False
DEFAULT_LINE_LENGTH = 0

DEFAULT_CONFLUENCE_SRC_THEME = "Emacs"
DEFAULT_CONFLUENCE_BLOCK_THEME = "Confluence"
DEFAULT_CONFLUENCE_LANGUAGE_ALIASES: dict[str, str] = {"sh": "bash"}

DEFAULT_WARN_ON_UNRESOLVED_LINKS = True
DEFAULT_FAIL_ON_UNRESOLVED_LINKS = False

DEFAULT_PLAINTEXT_BULLET = "-"
DEFAULT_PLAINTEXT_TABLE_CELL_SEPARATOR = " | "

# =============================================================================
# Tree Producer Defaults
# =============================================================================

INLINE_IMAGE_EXTENSIONS = frozenset(
    {".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".bmp", ".tif", ".tiff", ".xpm", ".pbm", ".pgm", ".ppm"}
)
INLINE_IMAGE_LINK_TYPES = frozenset({"file", "http", "https"})

REFERENCE_LABEL_PREFIX = "org"

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_ENV_VAR = "ORG2CONFLUENCE_CONFIG"
CONFIG_FILENAMES = [".org2confluence.toml", ".org2confluence.yaml", ".org2confluence.yml", ".org2confluence.json"]
PYPROJECT_TOOL_SECTION = "org2confluence"

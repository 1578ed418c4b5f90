#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the plain-text base dialect."""

from __future__ import annotations

from dataclasses import dataclass, field

from org2confluence.constants import DEFAULT_PLAINTEXT_BULLET, DEFAULT_PLAINTEXT_TABLE_CELL_SEPARATOR
from org2confluence.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    """Configuration options for plain-text rendering.

    Parameters
    ----------
    bullet : str, default "-"
        Marker used for unordered list items.
    table_cell_separator : str, default " | "
        Separator placed between table cells.

    """

    bullet: str = field(
        default=DEFAULT_PLAINTEXT_BULLET,
        metadata={"help": "Marker for unordered list items", "importance": "core"},
    )
    table_cell_separator: str = field(
        default=DEFAULT_PLAINTEXT_TABLE_CELL_SEPARATOR,
        metadata={"help": "Separator between table cells", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
        if not self.bullet:
            raise ValueError("bullet must be a non-empty string")

#  Copyright (c) 2025 Tom Villani, Ph.D.
# org2confluence/options/confluence.py
"""Configuration options for Confluence wiki markup rendering.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from org2confluence.ast.nodes import Node
from org2confluence.constants import (
    DEFAULT_CONFLUENCE_BLOCK_THEME,
    DEFAULT_CONFLUENCE_LANGUAGE_ALIASES,
    DEFAULT_CONFLUENCE_SRC_THEME,
    DEFAULT_FAIL_ON_UNRESOLVED_LINKS,
    DEFAULT_WARN_ON_UNRESOLVED_LINKS,
    DEFAULT_WITH_TAGS,
    DEFAULT_WITH_TODO_KEYWORDS,
)
from org2confluence.options.base import BaseRendererOptions

UnresolvedLinkHook = Callable[[Node], None]


@dataclass(frozen=True)
class ConfluenceRendererOptions(BaseRendererOptions):
    """Configuration options for Confluence wiki markup rendering.

    Parameters
    ----------
    with_todo_keywords : bool, default True
        Show headline TODO keywords as ``*{{TODO}}*`` before the title.
    with_tags : bool, default False
        Append headline tags as ``{{:tag1:tag2:}}``.
    language_aliases : dict, default {"sh": "bash"}
        Source-block language names mapped to Confluence language names.
        Languages without an alias are passed through unchanged.
    src_theme : str, default "Emacs"
        Code macro theme for source blocks.
    block_theme : str, default "Confluence"
        Code macro theme for example, fixed-width and property blocks.
    warn_on_unresolved_links : bool, default True
        Log a warning when an internal link resolves to nothing.
    fail_on_unresolved_links : bool, default False
        Raise UnresolvedReferenceError instead of rendering an empty target.
    on_unresolved_link : callable, optional
        Hook called with the link node whenever an internal link is unresolved.
        It does not change the rendered output.

    Examples
    --------
        >>> from org2confluence.options.confluence import ConfluenceRendererOptions
        >>> options = ConfluenceRendererOptions(with_toc=False, language_aliases={"sh": "bash", "elisp": "lisp"})

    """

    with_todo_keywords: bool = field(
        default=DEFAULT_WITH_TODO_KEYWORDS,
        metadata={"help": "Show headline TODO keywords", "cli_name": "no-todo-keywords", "importance": "core"},
    )
    with_tags: bool = field(
        default=DEFAULT_WITH_TAGS,
        metadata={"help": "Append headline tags after the title", "cli_name": "with-tags", "importance": "advanced"},
    )
    language_aliases: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CONFLUENCE_LANGUAGE_ALIASES),
        metadata={"help": "Map source block languages to Confluence languages (SRC=DST)", "importance": "core"},
    )
    src_theme: str = field(
        default=DEFAULT_CONFLUENCE_SRC_THEME,
        metadata={"help": "Code macro theme for source blocks", "importance": "advanced"},
    )
    block_theme: str = field(
        default=DEFAULT_CONFLUENCE_BLOCK_THEME,
        metadata={"help": "Code macro theme for example, fixed-width and property blocks", "importance": "advanced"},
    )
    warn_on_unresolved_links: bool = field(
        default=DEFAULT_WARN_ON_UNRESOLVED_LINKS,
        metadata={"help": "Log a warning for unresolved internal links", "importance": "advanced"},
    )
    fail_on_unresolved_links: bool = field(
        default=DEFAULT_FAIL_ON_UNRESOLVED_LINKS,
        metadata={"help": "Fail on unresolved internal links instead of rendering an empty target",
                  "importance": "advanced"},
    )
    on_unresolved_link: Optional[UnresolvedLinkHook] = field(
        default=None,
        compare=False,
        metadata={"help": "Callback invoked with each unresolved link node", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
        if not self.src_theme or not self.block_theme:
            raise ValueError("Code macro themes must be non-empty strings")
        if not isinstance(self.language_aliases, dict):
            raise ValueError(f"language_aliases must be a mapping, got {type(self.language_aliases).__name__}")

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Dialect renderers and the translator registries they dispatch through."""

from __future__ import annotations

from org2confluence.renderers.base import BaseRenderer
from org2confluence.renderers.confluence import CONFLUENCE_TRANSLATORS, ConfluenceRenderer
from org2confluence.renderers.context import ExportContext
from org2confluence.renderers.plaintext import PLAINTEXT_TRANSLATORS, PlainTextRenderer
from org2confluence.renderers.registry import Translator, TranslatorRegistry

__all__ = [
    "BaseRenderer",
    "ConfluenceRenderer",
    "PlainTextRenderer",
    "ExportContext",
    "Translator",
    "TranslatorRegistry",
    "CONFLUENCE_TRANSLATORS",
    "PLAINTEXT_TRANSLATORS",
]

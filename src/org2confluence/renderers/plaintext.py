#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/renderers/plaintext.py
"""Plain-text base dialect.

The plain-text dialect has a translator for every node kind and strips
markup down to readable text: headline titles are underlined, list items
use ``-`` bullets, table cells are separated by `` | `` and footnotes are
referenced as ``[n]``. Other dialects derive from
:data:`PLAINTEXT_TRANSLATORS` and override only what differs.

"""

from __future__ import annotations

import logging
from typing import Optional

from org2confluence.ast.nodes import Node, NodeKind
from org2confluence.ast.utils import extract_text, list_item_depth
from org2confluence.constants import INTERNAL_LINK_TYPES
from org2confluence.options.plaintext import PlainTextOptions
from org2confluence.renderers.base import BaseRenderer, wrap_text
from org2confluence.renderers.context import ExportContext
from org2confluence.renderers.registry import TranslatorRegistry

logger = logging.getLogger(__name__)

PLAINTEXT_TRANSLATORS = TranslatorRegistry("plaintext")

_CHECKBOX_MARKERS = {"on": "[X] ", "off": "[ ] ", "partial": "[-] "}


def _options(context: ExportContext) -> PlainTextOptions:
    options = context.options
    return options if isinstance(options, PlainTextOptions) else PlainTextOptions()


def _sibling_position(node: Node, kind: NodeKind) -> int:
    """Return the 1-based position of ``node`` among same-kind siblings."""
    parent = node.parent
    if parent is None:
        return 1
    position = 0
    for sibling in parent.children:
        if sibling.kind is kind:
            position += 1
        if sibling is node:
            break
    return position


@PLAINTEXT_TRANSLATORS.register(NodeKind.DOCUMENT, NodeKind.SECTION, NodeKind.PLAIN_LIST, NodeKind.TABLE)
def render_contents(node: Node, contents: str, context: ExportContext) -> str:
    """Render a container as its contents."""
    return contents


@PLAINTEXT_TRANSLATORS.register(NodeKind.HEADLINE)
def render_headline(node: Node, contents: str, context: ExportContext) -> str:
    """Render a headline as an underlined title followed by its contents."""
    title = context.secondary(node, "title").strip()
    keyword = node.get("todo_keyword")
    if keyword:
        title = f"{keyword} {title}"
    underline = ("=" if context.index.headline_level(node) == 1 else "-") * len(title)
    return f"{title}\n{underline}\n\n{contents}"


@PLAINTEXT_TRANSLATORS.register(NodeKind.PARAGRAPH)
def render_paragraph(node: Node, contents: str, context: ExportContext) -> str:
    """Render a paragraph, filled to ``line_length`` when set."""
    return wrap_text(contents, context.options.line_length)


@PLAINTEXT_TRANSLATORS.register(NodeKind.ITEM)
def render_item(node: Node, contents: str, context: ExportContext) -> str:
    """Render a list item with indentation, bullet, checkbox and tag."""
    depth = max(list_item_depth(node), 0)
    parent = node.parent
    list_type = parent.get("type") if parent is not None else "unordered"

    if list_type == "ordered":
        marker = f"{_sibling_position(node, NodeKind.ITEM)}."
    else:
        marker = _options(context).bullet

    parts = ["  " * depth, marker, " "]
    checkbox = node.get("checkbox")
    if checkbox in _CHECKBOX_MARKERS:
        parts.append(_CHECKBOX_MARKERS[checkbox])
    if list_type == "descriptive":
        parts.append(f"{context.secondary(node, 'tag').strip()} :: ")
    parts.append(contents.strip())
    return "".join(parts)


@PLAINTEXT_TRANSLATORS.register(NodeKind.TABLE_ROW)
def render_table_row(node: Node, contents: str, context: ExportContext) -> str:
    """Render a standard row as its cells; rule rows are dropped."""
    if node.get("type") == "rule":
        return ""
    return contents.rstrip()


@PLAINTEXT_TRANSLATORS.register(NodeKind.TABLE_CELL)
def render_table_cell(node: Node, contents: str, context: ExportContext) -> str:
    """Render a cell, preceded by the separator unless it is the first."""
    separator = "" if _sibling_position(node, NodeKind.TABLE_CELL) == 1 else _options(context).table_cell_separator
    return f"{separator}{contents.strip()}"


@PLAINTEXT_TRANSLATORS.register(NodeKind.SRC_BLOCK, NodeKind.EXAMPLE_BLOCK, NodeKind.FIXED_WIDTH)
def render_literal_block(node: Node, contents: str, context: ExportContext) -> str:
    """Render a literal block as its value."""
    return str(node.get("value") or "").rstrip()


@PLAINTEXT_TRANSLATORS.register(NodeKind.PROPERTY_DRAWER)
def render_property_drawer(node: Node, contents: str, context: ExportContext) -> str:
    return contents


@PLAINTEXT_TRANSLATORS.register(NodeKind.NODE_PROPERTY)
def render_node_property(node: Node, contents: str, context: ExportContext) -> str:
    """Render a property as ``KEY: value``."""
    key = node.get("key", "")
    value = node.get("value")
    return f"{key}: {value}" if value else f"{key}:"


@PLAINTEXT_TRANSLATORS.register(NodeKind.QUOTE_BLOCK)
def render_quote_block(node: Node, contents: str, context: ExportContext) -> str:
    """Render a quote block indented by two spaces."""
    return "\n".join(f"  {line}" if line else line for line in contents.rstrip("\n").split("\n"))


@PLAINTEXT_TRANSLATORS.register(NodeKind.FOOTNOTE_DEFINITION, NodeKind.TARGET)
def render_nothing(node: Node, contents: str, context: ExportContext) -> str:
    """Render nothing in place."""
    return ""


@PLAINTEXT_TRANSLATORS.register(NodeKind.HORIZONTAL_RULE)
def render_horizontal_rule(node: Node, contents: str, context: ExportContext) -> str:
    return "-----"


@PLAINTEXT_TRANSLATORS.register(NodeKind.LINK)
def render_link(node: Node, contents: str, context: ExportContext) -> str:
    """Render a link as its description, its path, or both."""
    link_type = node.get("type")
    if link_type == "radio":
        return contents
    raw_link = str(node.get("raw_link") or node.get("path") or "")
    if not contents:
        return raw_link
    if link_type in INTERNAL_LINK_TYPES:
        return contents
    return f"{contents} <{raw_link}>"


@PLAINTEXT_TRANSLATORS.register(NodeKind.TIMESTAMP)
def render_timestamp(node: Node, contents: str, context: ExportContext) -> str:
    return str(node.get("raw_value", ""))


@PLAINTEXT_TRANSLATORS.register(NodeKind.FOOTNOTE_REFERENCE)
def render_footnote_reference(node: Node, contents: str, context: ExportContext) -> str:
    """Render a footnote reference as ``[n]``."""
    number = context.footnotes.register_reference(node, context.index.footnote_definition(node))
    return f"[{number}]"


@PLAINTEXT_TRANSLATORS.register(
    NodeKind.BOLD, NodeKind.ITALIC, NodeKind.UNDERLINE, NodeKind.STRIKE_THROUGH
)
def render_emphasis(node: Node, contents: str, context: ExportContext) -> str:
    """Render emphasis as plain contents."""
    return contents


@PLAINTEXT_TRANSLATORS.register(NodeKind.VERBATIM, NodeKind.CODE, NodeKind.PLAIN_TEXT)
def render_value(node: Node, contents: str, context: ExportContext) -> str:
    return str(node.get("value", ""))


@PLAINTEXT_TRANSLATORS.register(NodeKind.LINE_BREAK)
def render_line_break(node: Node, contents: str, context: ExportContext) -> str:
    return "\n"


def render_definition(definition: Optional[Node], context: ExportContext) -> str:
    """Render the body of a footnote definition, trimmed.

    Parameters
    ----------
    definition : Node or None
        A ``footnote-definition`` element or an inline ``footnote-reference``
    context : ExportContext
        Context of the running export

    """
    if definition is None:
        return ""
    return context.transcode_nodes(definition.children).strip()


class PlainTextRenderer(BaseRenderer):
    """Render a tree as readable plain text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain-text rendering configuration options

    Examples
    --------
        >>> from org2confluence.ast.builder import document, headline, paragraph
        >>> doc = document(headline(1, "Intro", paragraph("Hello")))
        >>> print(PlainTextRenderer(PlainTextOptions(with_toc=False)).render_to_string(doc), end="")
        Intro
        =====
        <BLANKLINE>
        Hello

    """

    registry = PLAINTEXT_TRANSLATORS

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain-text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "plaintext")
        options = options or PlainTextOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainTextOptions = options

    def apply_template(self, body: str, context: ExportContext) -> str:
        """Add a table of contents and the footnotes list around ``body``."""
        parts: list[str] = []
        if self.options.with_toc:
            toc = self._table_of_contents(context)
            if toc:
                parts.append(toc + "\n\n")
        parts.append(body)

        entries = [f"[{entry.number}] {render_definition(entry.definition, context)}" for entry in context.footnotes]
        if entries:
            parts.append("\n\nFootnotes\n---------\n\n" + "\n".join(entries))
        return "".join(parts)

    @staticmethod
    def _table_of_contents(context: ExportContext) -> str:
        lines = []
        index = context.index
        root = getattr(index, "root", None)
        if root is None:
            return ""
        for node in root.walk():
            if node.kind is NodeKind.HEADLINE:
                indent = "  " * (index.headline_level(node) - 1)
                lines.append(f"{indent}{index.headline_number(node)} {extract_text(node.secondary('title')).strip()}")
        return "\n".join(lines)

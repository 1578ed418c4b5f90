#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/renderers/confluence.py
"""Confluence wiki markup rendering.

This module provides the Confluence dialect, derived from the plain-text
base dialect, and the :class:`ConfluenceRenderer` that applies it. The
dialect overrides every kind whose Confluence markup differs from plain
text; document, plain-list, node-property, footnote-definition and
line-break nodes are handled by the base dialect.

Markup produced:

- headlines ``h1.`` to ``h6.`` with an ``{anchor:...}`` macro
- lists with repeated ``#``/``-`` markers, one per nesting level
- tables with ``||`` header cells and ``|`` body cells
- ``{code}``, ``{quote}`` and ``{toc}`` macros
- footnotes as ``^[n|#fn_n]^`` superscript links plus a closing section

"""

from __future__ import annotations

import logging

from org2confluence.ast.nodes import Node, NodeKind, enclosing_element
from org2confluence.ast.utils import list_item_depth
from org2confluence.constants import (
    CONFLUENCE_CHECKBOX_TOKENS,
    CONFLUENCE_FOOTNOTES_TITLE,
    CONFLUENCE_HORIZONTAL_RULE,
    CONFLUENCE_MAX_HEADING_LEVEL,
    CONFLUENCE_TOC_MARKER,
)
from org2confluence.options.confluence import ConfluenceRendererOptions
from org2confluence.renderers._links import Unresolved, report_unresolved, resolve_link
from org2confluence.renderers.base import BaseRenderer, wrap_text
from org2confluence.renderers.context import ExportContext
from org2confluence.renderers.plaintext import PLAINTEXT_TRANSLATORS, render_definition
from org2confluence.utils.escape import escape_confluence

logger = logging.getLogger(__name__)

CONFLUENCE_TRANSLATORS = PLAINTEXT_TRANSLATORS.derive("confluence")


def _options(context: ExportContext) -> ConfluenceRendererOptions:
    options = context.options
    return options if isinstance(options, ConfluenceRendererOptions) else ConfluenceRendererOptions()


def code_macro(content: str, theme: str, language: str | None = None) -> str:
    """Wrap ``content`` in a ``{code}`` macro.

    Parameters
    ----------
    content : str
        Literal block text
    theme : str
        Confluence code theme
    language : str, optional
        Confluence language name; omitted from the macro when empty

    Returns
    -------
    str
        ``{code:theme=T|language=L}``, the content ending in a single
        newline, and a closing ``{code}`` line

    Examples
    --------
        >>> code_macro("echo hi", "Emacs", "bash")
        '{code:theme=Emacs|language=bash}\\necho hi\\n{code}\\n'

    """
    header = f"theme={theme}"
    if language:
        header += f"|language={language}"
    body = content.rstrip("\n") + "\n"
    return f"{{code:{header}}}\n{body}{{code}}\n"


# -----------------------------------------------------------------------------
# Elements
# -----------------------------------------------------------------------------


@CONFLUENCE_TRANSLATORS.register(NodeKind.HEADLINE)
def render_headline(node: Node, contents: str, context: ExportContext) -> str:
    """Render ``h<level>. {anchor:label} [*{{TODO}}* ]title`` and the contents."""
    options = _options(context)
    level = min(context.index.headline_level(node), CONFLUENCE_MAX_HEADING_LEVEL)
    anchor = f"{{anchor:{context.reference_label(node)}}}"

    keyword = node.get("todo_keyword")
    todo = f"*{{{{{keyword}}}}}* " if keyword and options.with_todo_keywords else ""

    title = context.secondary(node, "title").strip()
    tags = node.get("tags") or []
    if options.with_tags and tags:
        title += f" {{{{:{':'.join(tags)}:}}}}"

    return f"h{level}. {anchor} {todo}{title}\n{contents}"


@CONFLUENCE_TRANSLATORS.register(NodeKind.SECTION)
def render_section(node: Node, contents: str, context: ExportContext) -> str:
    return contents


@CONFLUENCE_TRANSLATORS.register(NodeKind.PARAGRAPH)
def render_paragraph(node: Node, contents: str, context: ExportContext) -> str:
    """Render a paragraph; its text was escaped at the plain-text leaves."""
    return wrap_text(contents, context.options.line_length)


@CONFLUENCE_TRANSLATORS.register(NodeKind.ITEM)
def render_item(node: Node, contents: str, context: ExportContext) -> str:
    """Render a list item.

    The marker repeats ``#`` (ordered) or ``-`` (otherwise) once per
    nesting level, then comes the optional checkbox token, the optional
    descriptive tag and the trimmed contents.
    """
    depth = list_item_depth(node)
    parent = node.parent
    list_type = parent.get("type") if parent is not None else "unordered"
    marker = ("#" if list_type == "ordered" else "-") * (depth + 1)

    parts = [marker, " "]
    checkbox = node.get("checkbox")
    if checkbox in CONFLUENCE_CHECKBOX_TOKENS:
        parts.append(CONFLUENCE_CHECKBOX_TOKENS[checkbox] + " ")
    if list_type == "descriptive":
        parts.append(f"*{context.secondary(node, 'tag').strip()}* - ")
    parts.append(contents.strip())
    return "".join(parts)


@CONFLUENCE_TRANSLATORS.register(NodeKind.TABLE)
def render_table(node: Node, contents: str, context: ExportContext) -> str:
    return contents


@CONFLUENCE_TRANSLATORS.register(NodeKind.TABLE_ROW)
def render_table_row(node: Node, contents: str, context: ExportContext) -> str:
    """Render a table row.

    Rule rows have no cells and vanish. The last header row gets an extra
    closing ``|`` so its final cell reads ``||``.
    """
    row = f"|{contents}" if contents else ""
    if context.index.table_row_ends_header(node):
        row += "|"
    return row.strip()


@CONFLUENCE_TRANSLATORS.register(NodeKind.TABLE_CELL)
def render_table_cell(node: Node, contents: str, context: ExportContext) -> str:
    """Render a cell as ``content|``, doubled to ``|content|`` in the first header row."""
    row = node.parent
    prefix = "|" if row is not None and context.index.table_row_starts_header(row) else ""
    text = contents.strip()
    return f"{prefix}{text or ' '}|"


@CONFLUENCE_TRANSLATORS.register(NodeKind.SRC_BLOCK)
def render_src_block(node: Node, contents: str, context: ExportContext) -> str:
    """Render a source block with the source theme and aliased language."""
    options = _options(context)
    language = node.get("language")
    if language:
        language = options.language_aliases.get(language, language)
    return code_macro(str(node.get("value") or ""), options.src_theme, language)


@CONFLUENCE_TRANSLATORS.register(NodeKind.EXAMPLE_BLOCK, NodeKind.FIXED_WIDTH)
def render_example_block(node: Node, contents: str, context: ExportContext) -> str:
    """Render an example or fixed-width block with the block theme."""
    value = str(node.get("value") or "").lstrip("\n")
    return code_macro(value, _options(context).block_theme)


@CONFLUENCE_TRANSLATORS.register(NodeKind.PROPERTY_DRAWER)
def render_property_drawer(node: Node, contents: str, context: ExportContext) -> str:
    """Render the drawer's ``KEY: value`` lines in a code block; empty drawers vanish."""
    if not contents.strip():
        return ""
    return code_macro(contents, _options(context).block_theme)


@CONFLUENCE_TRANSLATORS.register(NodeKind.QUOTE_BLOCK)
def render_quote_block(node: Node, contents: str, context: ExportContext) -> str:
    return f"{{quote}}\n{contents.rstrip(chr(10))}\n{{quote}}"


@CONFLUENCE_TRANSLATORS.register(NodeKind.HORIZONTAL_RULE)
def render_horizontal_rule(node: Node, contents: str, context: ExportContext) -> str:
    return CONFLUENCE_HORIZONTAL_RULE


# -----------------------------------------------------------------------------
# Objects
# -----------------------------------------------------------------------------


@CONFLUENCE_TRANSLATORS.register(NodeKind.LINK)
def render_link(node: Node, contents: str, context: ExportContext) -> str:
    """Render a link as ``[desc|target]``, ``[target]`` or ``!image!``.

    Radio links render their description only.
    """
    if node.get("type") == "radio":
        return contents

    target = resolve_link(node, context)
    if isinstance(target, Unresolved):
        report_unresolved(node, target, _options(context))

    if context.index.is_inline_image(node):
        opening, closing = "!", "!"
    else:
        opening, closing = "[", "]"

    destination = target.render()
    inner = f"{contents}|{destination}" if contents.strip() else destination
    return f"{opening}{inner}{closing}"


@CONFLUENCE_TRANSLATORS.register(NodeKind.TARGET)
def render_target(node: Node, contents: str, context: ExportContext) -> str:
    return f"{{anchor:{context.reference_label(node)}}}"


@CONFLUENCE_TRANSLATORS.register(NodeKind.TIMESTAMP)
def render_timestamp(node: Node, contents: str, context: ExportContext) -> str:
    """Render a timestamp; inactive ``[...]`` brackets become parentheses."""
    raw_value = str(node.get("raw_value", ""))
    if raw_value.startswith("["):
        return raw_value.replace("[", "(").replace("]", ")")
    return raw_value


@CONFLUENCE_TRANSLATORS.register(NodeKind.FOOTNOTE_REFERENCE)
def render_footnote_reference(node: Node, contents: str, context: ExportContext) -> str:
    """Render `` ^[n|#fn_n]^ ``, numbering the footnote on first reference."""
    number = context.footnotes.register_reference(node, context.index.footnote_definition(node))
    return f" ^[{number}|#fn_{number}]^ "


@CONFLUENCE_TRANSLATORS.register(NodeKind.BOLD)
def render_bold(node: Node, contents: str, context: ExportContext) -> str:
    return f"*{contents}*"


@CONFLUENCE_TRANSLATORS.register(NodeKind.ITALIC)
def render_italic(node: Node, contents: str, context: ExportContext) -> str:
    return f"_{contents}_"


@CONFLUENCE_TRANSLATORS.register(NodeKind.UNDERLINE)
def render_underline(node: Node, contents: str, context: ExportContext) -> str:
    return f"+{contents}+"


@CONFLUENCE_TRANSLATORS.register(NodeKind.STRIKE_THROUGH)
def render_strike_through(node: Node, contents: str, context: ExportContext) -> str:
    return f"-{contents}-"


@CONFLUENCE_TRANSLATORS.register(NodeKind.VERBATIM, NodeKind.CODE)
def render_monospace(node: Node, contents: str, context: ExportContext) -> str:
    """Render inline code as ``{{value}}``, never escaped."""
    return f"{{{{{node.get('value', '')}}}}}"


@CONFLUENCE_TRANSLATORS.register(NodeKind.PLAIN_TEXT)
def render_plain_text(node: Node, contents: str, context: ExportContext) -> str:
    """Render text, escaping it when it belongs to a paragraph."""
    value = str(node.get("value", ""))
    element = enclosing_element(node)
    if element is not None and element.kind is NodeKind.PARAGRAPH:
        return escape_confluence(value)
    return value


# -----------------------------------------------------------------------------
# Renderer
# -----------------------------------------------------------------------------


class ConfluenceRenderer(BaseRenderer):
    """Render a tree to Confluence wiki markup.

    Parameters
    ----------
    options : ConfluenceRendererOptions or None, default = None
        Confluence rendering configuration options

    Examples
    --------
        >>> from org2confluence.ast.builder import document, headline, paragraph
        >>> doc = document(headline(1, "Intro", paragraph("Hello")))
        >>> renderer = ConfluenceRenderer(ConfluenceRendererOptions(with_toc=False))
        >>> print(renderer.render_to_string(doc), end="")
        h1. {anchor:org1} Intro
        Hello

    """

    registry = CONFLUENCE_TRANSLATORS

    def __init__(self, options: ConfluenceRendererOptions | None = None):
        """Initialize the Confluence renderer with options."""
        BaseRenderer._validate_options_type(options, ConfluenceRendererOptions, "confluence")
        options = options or ConfluenceRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: ConfluenceRendererOptions = options

    def apply_template(self, body: str, context: ExportContext) -> str:
        """Add the ``{toc}`` macro and the footnotes section around ``body``."""
        parts: list[str] = []
        if self.options.with_toc:
            parts.append(f"{CONFLUENCE_TOC_MARKER}\n\n")
        parts.append(body)
        parts.append(self.render_footnote_section(context))
        return "".join(parts)

    @staticmethod
    def render_footnote_section(context: ExportContext) -> str:
        """Render the footnotes section, or an empty string when there are none.

        Definitions may themselves reference footnotes; those are numbered
        as they are met and listed after the footnotes already collected.
        """
        entries = []
        for entry in context.footnotes:
            text = render_definition(entry.definition, context)
            entries.append(f"  {entry.number}. {{anchor:fn_{entry.number}}} {text}")
        if not entries:
            return ""
        logger.debug("Rendering %d footnotes", len(entries))
        return f"\nh1. {CONFLUENCE_FOOTNOTES_TITLE}\n" + "\n".join(entries)

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the plain-text base dialect renderer."""

import pytest

from org2confluence.ast.builder import (
    bold,
    code,
    document,
    footnote_definition,
    footnote_reference,
    headline,
    item,
    link,
    paragraph,
    plain_list,
    property_drawer,
    quote_block,
    row,
    rule_row,
    src_block,
    table,
    target,
)
from org2confluence.exceptions import InvalidOptionsError
from org2confluence.options import ConfluenceRendererOptions, PlainTextOptions
from org2confluence.renderers.plaintext import PlainTextRenderer


def render(doc, **options) -> str:
    options.setdefault("with_toc", False)
    return PlainTextRenderer(PlainTextOptions(**options)).render_to_string(doc)


@pytest.mark.unit
class TestPlainTextRendering:
    """Tests for plain-text output of each kind."""

    def test_headline_underlined(self) -> None:
        """Test level-one titles are underlined with equals signs."""
        doc = document(headline(1, "Intro", paragraph("Hello")))
        assert render(doc) == "Intro\n=====\n\nHello\n"

    def test_subheadline_underlined_with_dashes(self) -> None:
        """Test deeper titles are underlined with dashes."""
        doc = document(headline(1, "A", headline(2, "Sub")))
        assert render(doc) == "A\n=\n\nSub\n---\n"

    def test_todo_keyword_prefix(self) -> None:
        """Test TODO keywords prefix the title."""
        assert render(document(headline(1, "Task", todo_keyword="TODO"))) == "TODO Task\n=========\n"

    def test_markup_stripped(self) -> None:
        """Test emphasis markers are removed."""
        assert render(document(paragraph("a ", bold("b"), " ", code("c")))) == "a b c\n"

    def test_unordered_list(self) -> None:
        """Test unordered items use the bullet option."""
        doc = document(plain_list("unordered", item("a"), item("b")))
        assert render(doc) == "- a\n- b\n"
        assert render(doc, bullet="*") == "* a\n* b\n"

    def test_ordered_list_numbers(self) -> None:
        """Test ordered items are numbered by position."""
        doc = document(plain_list("ordered", item("a"), item("b", checkbox="on")))
        assert render(doc) == "1. a\n2. [X] b\n"

    def test_nested_list_indented(self) -> None:
        """Test nested items are indented two spaces per level."""
        doc = document(plain_list("unordered", item("a", plain_list("unordered", item("b")))))
        assert render(doc) == "- a\n  - b\n"

    def test_descriptive_item(self) -> None:
        """Test descriptive items show tag and separator."""
        doc = document(plain_list("descriptive", item("def", tag="term")))
        assert render(doc) == "- term :: def\n"

    def test_table_cells_separated(self) -> None:
        """Test cells are joined by the separator and rules are dropped."""
        doc = document(table(row("a", "b"), rule_row(), row("c", "d")))
        assert render(doc) == "a | b\nc | d\n"
        assert render(doc, table_cell_separator="\t") == "a\tb\nc\td\n"

    def test_src_block_value(self) -> None:
        """Test literal blocks render their value."""
        assert render(document(src_block("echo hi\n", language="sh"))) == "echo hi\n"

    def test_property_drawer(self) -> None:
        """Test properties render as key/value lines."""
        assert render(document(property_drawer(("A", "1")))) == "A: 1\n"

    def test_quote_block_indented(self) -> None:
        """Test quotes are indented."""
        assert render(document(quote_block(paragraph("q")))) == "  q\n"

    def test_links(self) -> None:
        """Test link descriptions and targets."""
        doc = document(
            paragraph(link("https://example.com", "site")),
            paragraph(link("https://example.com")),
            paragraph(target("t"), link("t", "internal")),
        )
        assert render(doc) == "site <https://example.com>\nhttps://example.com\ninternal\n"

    def test_footnotes(self) -> None:
        """Test footnote markers and the closing list."""
        doc = document(paragraph("x", footnote_reference("n")), footnote_definition("n", "note"))
        result = render(doc)

        assert result.startswith("x[1]\n")
        assert result.endswith("Footnotes\n---------\n\n[1] note\n")

    def test_unreferenced_definition_with_reference(self) -> None:
        """Test references inside unreferenced definitions are never numbered."""
        doc = document(
            paragraph("x"),
            footnote_definition("a", paragraph("see", footnote_reference("b"))),
            footnote_definition("b", paragraph("inner")),
        )
        result = render(doc)

        assert "Footnotes" not in result
        assert "[1]" not in result

    def test_table_of_contents(self) -> None:
        """Test the table of contents lists numbered titles."""
        doc = document(headline(1, "A"), headline(1, "B", headline(2, "C")))
        result = PlainTextRenderer().render_to_string(doc)
        assert result.startswith("1 A\n2 B\n  2.1 C\n\n")

    def test_rejects_wrong_options_type(self) -> None:
        """Test Confluence options are rejected."""
        with pytest.raises(InvalidOptionsError):
            PlainTextRenderer(ConfluenceRendererOptions())  # type: ignore[arg-type]

    def test_empty_bullet_rejected(self) -> None:
        """Test option validation."""
        with pytest.raises(ValueError):
            PlainTextOptions(bullet="")

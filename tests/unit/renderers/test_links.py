#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for link target resolution."""

import pytest

from org2confluence.ast.builder import document, headline, link, paragraph, target
from org2confluence.exceptions import UnresolvedReferenceError
from org2confluence.options import ConfluenceRendererOptions
from org2confluence.renderers import ConfluenceRenderer
from org2confluence.renderers._links import (
    External,
    FileLocal,
    InternalAnchor,
    InternalHeadline,
    Unresolved,
    report_unresolved,
    resolve_link,
)


def _resolve(doc, link_node):
    context = ConfluenceRenderer().create_context(doc)
    return resolve_link(link_node, context)


@pytest.mark.unit
class TestResolveLink:
    """Tests for resolve_link variants."""

    def test_file_search_option_dropped(self) -> None:
        """Test file links keep only the base name of the path."""
        node = link("file:docs/guide.org::*Setup")
        doc = document(paragraph(node))
        assert _resolve(doc, node) == FileLocal("guide.org")

    def test_custom_id(self) -> None:
        """Test id links resolve to the headline anchor label."""
        node = link("#setup")
        doc = document(headline(1, "Setup", custom_id="setup"), paragraph(node))
        assert _resolve(doc, node) == InternalHeadline("setup")

    def test_fuzzy_headline_uses_number(self) -> None:
        """Test fuzzy links to headlines use the section number."""
        node = link("Second")
        doc = document(headline(1, "First"), headline(1, "Second"), paragraph(node))
        assert _resolve(doc, node) == InternalHeadline("2")

    def test_fuzzy_target_uses_label(self) -> None:
        """Test fuzzy links to targets use the anchor label."""
        node = link("spot")
        doc = document(paragraph(target("spot")), paragraph(node))
        assert _resolve(doc, node) == InternalAnchor("spot")

    def test_unresolved(self) -> None:
        """Test missing ids are reported as unresolved."""
        node = link("id:missing")
        doc = document(paragraph(node))
        result = _resolve(doc, node)
        assert result == Unresolved("id", "missing")
        assert result.render() == ""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("confluence:Team Home", "Team Home"),
            ("https://example.com/a", "https://example.com/a"),
            ("mailto:a@b.c", "mailto:a@b.c"),
        ],
    )
    def test_external(self, raw: str, expected: str) -> None:
        """Test external targets are emitted as written."""
        node = link(raw)
        doc = document(paragraph(node))
        assert _resolve(doc, node) == External(expected)

    def test_render_forms(self) -> None:
        """Test how each variant renders inside brackets."""
        assert InternalHeadline("1.2").render() == "#1.2"
        assert InternalAnchor("org3").render() == "#org3"
        assert FileLocal("a.png").render() == "a.png"


@pytest.mark.unit
class TestReportUnresolved:
    """Tests for unresolved link reporting."""

    def test_warning_includes_location(self, caplog) -> None:
        """Test the warning names the link."""
        node = link("Nowhere")
        report_unresolved(node, Unresolved("fuzzy", "Nowhere"), ConfluenceRendererOptions())
        assert "Unresolved fuzzy link 'Nowhere'" in caplog.text

    def test_hook_then_raise(self) -> None:
        """Test the hook runs before strict mode raises."""
        seen = []
        options = ConfluenceRendererOptions(
            warn_on_unresolved_links=False, fail_on_unresolved_links=True, on_unresolved_link=seen.append
        )
        node = link("Nowhere")
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            report_unresolved(node, Unresolved("fuzzy", "Nowhere"), options)
        assert seen == [node]
        assert exc_info.value.target == "Nowhere"

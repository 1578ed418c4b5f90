#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for footnote numbering."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from org2confluence.ast.builder import footnote_reference
from org2confluence.utils.footnotes import FootnoteRegistry, footnote_identity


@pytest.mark.unit
class TestFootnoteIdentity:
    """Tests for footnote identities."""

    def test_labelled_by_label(self) -> None:
        """Test labelled references share an identity."""
        assert footnote_identity(footnote_reference("a")) == footnote_identity(footnote_reference("a"))

    def test_anonymous_by_node(self) -> None:
        """Test anonymous inline footnotes are distinct."""
        first = footnote_reference(None, "x")
        second = footnote_reference(None, "x")
        assert footnote_identity(first) is first
        assert footnote_identity(first) != footnote_identity(second)


@pytest.mark.unit
class TestFootnoteRegistry:
    """Tests for FootnoteRegistry."""

    def test_numbers_reused(self) -> None:
        """Test a second reference reuses the number."""
        registry = FootnoteRegistry()
        assert registry.register_reference(footnote_reference("a"), None) == 1
        assert registry.register_reference(footnote_reference("b"), None) == 2
        assert registry.register_reference(footnote_reference("a"), None) == 1
        assert len(registry) == 2

    def test_entries_in_assignment_order(self) -> None:
        """Test iteration yields entries in numbering order."""
        registry = FootnoteRegistry()
        registry.register_reference(footnote_reference("z"), None)
        registry.register_reference(footnote_reference("a"), None)
        assert [(entry.number, entry.identity) for entry in registry] == [(1, "z"), (2, "a")]

    def test_number_for(self) -> None:
        """Test looking up numbers without registering."""
        registry = FootnoteRegistry()
        registry.register_reference(footnote_reference("a"), None)
        assert registry.number_for(footnote_reference("a")) == 1
        assert registry.number_for(footnote_reference("b")) is None

    def test_custom_start(self) -> None:
        """Test numbering can start elsewhere."""
        registry = FootnoteRegistry(auto_number_start=5)
        assert registry.register_reference(footnote_reference("a"), None) == 5

    @given(st.lists(st.sampled_from(["a", "b", "c", "d", "e"]), max_size=30))
    def test_first_reference_order(self, labels: list) -> None:
        """Test numbers follow the order of first reference."""
        registry = FootnoteRegistry()
        numbers = [registry.register_reference(footnote_reference(label), None) for label in labels]

        first_seen = list(dict.fromkeys(labels))
        assert numbers == [first_seen.index(label) + 1 for label in labels]
        assert [entry.identity for entry in registry] == first_seen

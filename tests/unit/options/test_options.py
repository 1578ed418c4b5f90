#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for renderer option dataclasses."""

import dataclasses

import pytest

from org2confluence.options import BaseRendererOptions, ConfluenceRendererOptions, PlainTextOptions


@pytest.mark.unit
class TestBaseRendererOptions:
    """Tests for shared option behaviour."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = BaseRendererOptions()
        assert options.with_toc is True
        assert options.body_only is False
        assert options.line_length == 0

    def test_frozen(self) -> None:
        """Test options cannot be mutated."""
        options = BaseRendererOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.with_toc = False  # type: ignore[misc]

    def test_create_updated(self) -> None:
        """Test cloning with overrides leaves the original untouched."""
        original = ConfluenceRendererOptions()
        updated = original.create_updated(with_toc=False)
        assert updated.with_toc is False
        assert original.with_toc is True
        assert isinstance(updated, ConfluenceRendererOptions)

    def test_negative_line_length_rejected(self) -> None:
        """Test line_length must be non-negative."""
        with pytest.raises(ValueError, match="line_length"):
            BaseRendererOptions(line_length=-1)


@pytest.mark.unit
class TestFromMapping:
    """Tests for building options from configuration mappings."""

    def test_dashed_keys(self) -> None:
        """Test dashed keys map to fields."""
        options = ConfluenceRendererOptions.from_mapping({"with-toc": False, "with_tags": True})
        assert options.with_toc is False
        assert options.with_tags is True

    def test_unknown_keys_ignored(self) -> None:
        """Test keys for other dialects are skipped."""
        options = PlainTextOptions.from_mapping({"bullet": "*", "src_theme": "RDark"})
        assert options.bullet == "*"

    def test_validation_runs(self) -> None:
        """Test mapped values are validated."""
        with pytest.raises(ValueError):
            ConfluenceRendererOptions.from_mapping({"src_theme": ""})


@pytest.mark.unit
class TestConfluenceRendererOptions:
    """Tests for Confluence options."""

    def test_defaults(self) -> None:
        """Test dialect defaults."""
        options = ConfluenceRendererOptions()
        assert options.with_todo_keywords is True
        assert options.with_tags is False
        assert options.language_aliases == {"sh": "bash"}
        assert options.src_theme == "Emacs"
        assert options.block_theme == "Confluence"
        assert options.fail_on_unresolved_links is False

    def test_alias_defaults_not_shared(self) -> None:
        """Test each instance gets its own alias mapping."""
        assert ConfluenceRendererOptions().language_aliases is not ConfluenceRendererOptions().language_aliases

    def test_aliases_must_be_mapping(self) -> None:
        """Test language_aliases type validation."""
        with pytest.raises(ValueError, match="language_aliases"):
            ConfluenceRendererOptions(language_aliases=["sh"])  # type: ignore[arg-type]

    def test_hook_ignored_in_comparison(self) -> None:
        """Test the unresolved link hook does not affect equality."""
        assert ConfluenceRendererOptions(on_unresolved_link=print) == ConfluenceRendererOptions()

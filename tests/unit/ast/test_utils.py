#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for tree utility functions."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from org2confluence.ast.builder import bold, code, item, paragraph, plain_list, text
from org2confluence.ast.utils import extract_text, list_item_depth


@pytest.mark.unit
class TestExtractText:
    """Tests for extract_text."""

    def test_nested_markup(self) -> None:
        """Test text is concatenated through markup."""
        assert extract_text(paragraph("a ", bold("b"), " ", code("c"))) == "a b c"

    def test_object_post_blank(self) -> None:
        """Test object trailing spaces are kept."""
        assert extract_text([bold("x", post_blank=1), text("y")]) == "x y"

    def test_element_post_blank_ignored(self) -> None:
        """Test element blank lines do not add spaces."""
        assert extract_text(paragraph("x", post_blank=2)) == "x"


def _nest(depth: int):
    """Build a list nested ``depth`` levels and return it with its innermost item."""
    innermost = item("leaf")
    node = plain_list("unordered", innermost)
    for _ in range(depth):
        node = plain_list("unordered", item("wrapper", node))
    return node, innermost


@pytest.mark.unit
class TestListItemDepth:
    """Tests for list_item_depth."""

    def test_top_level_item(self) -> None:
        """Test top-level items have depth zero."""
        lst = plain_list("unordered", item("a"))
        assert list_item_depth(lst.children[0]) == 0

    def test_detached_item(self) -> None:
        """Test an item without a parent counts itself, so its depth is zero."""
        assert list_item_depth(item("a")) == 0

    def test_outside_list(self) -> None:
        """Test nodes outside a list report -1."""
        assert list_item_depth(paragraph("x")) == -1

    @given(st.integers(min_value=0, max_value=8))
    def test_depth_counts_item_ancestors(self, depth: int) -> None:
        """Test depth equals the number of enclosing items."""
        root, innermost = _nest(depth)
        assert root.kind.value == "plain-list"
        assert list_item_depth(innermost) == depth

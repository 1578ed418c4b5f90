#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for tree nodes and navigation helpers."""

import gc

import pytest

from org2confluence.ast.builder import bold, document, headline, item, paragraph, plain_list, text
from org2confluence.ast.nodes import (
    OBJECT_KINDS,
    Node,
    NodeKind,
    SourceLocation,
    enclosing_element,
    find_enclosing,
    link_parents,
)


@pytest.mark.unit
class TestNodeKind:
    """Tests for the node kind enumeration."""

    def test_values_are_org_names(self) -> None:
        """Test kinds use their Org element names."""
        assert NodeKind("plain-list") is NodeKind.PLAIN_LIST
        assert NodeKind.STRIKE_THROUGH.value == "strike-through"

    def test_elements_and_objects(self) -> None:
        """Test the element/object classification."""
        assert NodeKind.PARAGRAPH.is_element
        assert NodeKind.TABLE_ROW.is_element
        assert not NodeKind.TABLE_CELL.is_element
        assert not NodeKind.BOLD.is_element
        assert all(not kind.is_element for kind in OBJECT_KINDS)

    def test_footnote_children_not_rendered(self) -> None:
        """Test footnote references and definitions keep their children out of place."""
        assert not NodeKind.FOOTNOTE_REFERENCE.renders_children
        assert not NodeKind.FOOTNOTE_DEFINITION.renders_children
        assert NodeKind.BOLD.renders_children

    def test_unknown_kind_rejected(self) -> None:
        """Test constructing a node with an unknown kind fails."""
        with pytest.raises(ValueError):
            Node("subscript")


@pytest.mark.unit
class TestNodeStructure:
    """Tests for parent links and traversal."""

    def test_children_get_parent(self) -> None:
        """Test children point back to their parent."""
        para = paragraph("a", bold("b"))
        assert all(child.parent is para for child in para.children)

    def test_secondary_nodes_get_parent(self) -> None:
        """Test title nodes point back to their headline."""
        node = headline(1, ["A", bold("B")])
        assert all(part.parent is node for part in node.secondary("title"))

    def test_parent_is_weak(self) -> None:
        """Test the parent reference does not keep the parent alive."""
        child = text("x")
        Node(NodeKind.PARAGRAPH, children=[child])
        gc.collect()
        assert child.parent is None

    def test_append_sets_parent(self) -> None:
        """Test append links the child and returns it."""
        para = paragraph()
        child = para.append(text("x"))
        assert child.parent is para
        assert para.children == [child]

    def test_iter_ancestors(self) -> None:
        """Test ancestors are yielded from the parent upward."""
        doc = document(paragraph(bold("x")))
        leaf = doc.children[0].children[0].children[0]
        assert [node.kind for node in leaf.iter_ancestors()] == [
            NodeKind.BOLD,
            NodeKind.PARAGRAPH,
            NodeKind.DOCUMENT,
        ]

    def test_walk_visits_title_before_children(self) -> None:
        """Test walk is pre-order with secondaries first."""
        doc = document(headline(1, "T", paragraph("p")))
        values = [node.get("value") for node in doc.walk() if node.kind is NodeKind.PLAIN_TEXT]
        assert values == ["T", "p"]

    def test_post_blank_defaults_to_zero(self) -> None:
        """Test post_blank reads the property with a zero default."""
        assert paragraph("x").post_blank == 0
        assert paragraph("x", post_blank=2).post_blank == 2

    def test_nodes_compare_by_identity(self) -> None:
        """Test equal-looking nodes are distinct keys."""
        a, b = text("x"), text("x")
        assert a != b
        assert len({a, b}) == 2

    def test_link_parents_repairs_tree(self) -> None:
        """Test link_parents fixes children added by list mutation."""
        para = paragraph()
        child = text("x")
        para.children.append(child)
        assert child.parent is None
        link_parents(para)
        assert child.parent is para

    def test_find_enclosing(self) -> None:
        """Test the nearest ancestor of a kind is found."""
        doc = document(plain_list("unordered", item(paragraph(bold("x")))))
        leaf = doc.children[0].children[0].children[0].children[0]
        assert find_enclosing(leaf, NodeKind.ITEM) is doc.children[0].children[0]
        assert find_enclosing(leaf, NodeKind.TABLE) is None

    def test_enclosing_element_skips_objects(self) -> None:
        """Test the nearest element ancestor skips inline objects."""
        doc = document(paragraph(bold("x")))
        leaf = doc.children[0].children[0].children[0]
        assert enclosing_element(leaf) is doc.children[0]


@pytest.mark.unit
class TestSourceLocation:
    """Tests for source locations."""

    def test_describe_full(self) -> None:
        """Test file, line and column are joined."""
        assert SourceLocation(format="org", line=3, column=7, file="a.org").describe() == "a.org:3:7"

    def test_describe_partial(self) -> None:
        """Test missing parts are skipped."""
        assert SourceLocation(format="org", line=3).describe() == "3"
        assert SourceLocation(format="org").describe() == ""

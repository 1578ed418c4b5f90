#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for layered translator registries and the export context."""

import logging

import pytest

from org2confluence.ast.builder import bold, document, paragraph, text
from org2confluence.ast.nodes import Node, NodeKind, SourceLocation
from org2confluence.exceptions import RenderingError, UnsupportedNodeKindError
from org2confluence.renderers import CONFLUENCE_TRANSLATORS, PLAINTEXT_TRANSLATORS, BaseRenderer
from org2confluence.renderers.context import normalize_element
from org2confluence.renderers.registry import TranslatorRegistry


def _upper(node, contents, context):
    return contents.upper()


def _lower(node, contents, context):
    return contents.lower()


@pytest.mark.unit
class TestTranslatorRegistry:
    """Tests for registration and lookup."""

    def test_lookup_own_translator(self) -> None:
        """Test a registered translator is returned."""
        registry = TranslatorRegistry("base")
        registry.add(NodeKind.BOLD, _upper)
        assert registry.lookup(NodeKind.BOLD) is _upper

    def test_register_decorator_multiple_kinds(self) -> None:
        """Test the decorator registers every kind given."""
        registry = TranslatorRegistry("base")

        @registry.register(NodeKind.BOLD, NodeKind.ITALIC)
        def emphasis(node, contents, context):
            return contents

        assert registry.lookup(NodeKind.BOLD) is emphasis
        assert registry.lookup(NodeKind.ITALIC) is emphasis

    def test_dialect_overrides_base(self) -> None:
        """Test a dialect translator wins over the base one."""
        base = TranslatorRegistry("base")
        base.add(NodeKind.BOLD, _upper)
        dialect = base.derive("dialect")
        dialect.add(NodeKind.BOLD, _lower)

        assert dialect.lookup(NodeKind.BOLD) is _lower
        assert base.lookup(NodeKind.BOLD) is _upper

    def test_fallback_to_base_logs_debug(self, caplog) -> None:
        """Test lookups fall back to the base dialect."""
        base = TranslatorRegistry("base")
        base.add(NodeKind.BOLD, _upper)
        dialect = base.derive("dialect")

        with caplog.at_level(logging.DEBUG, logger="org2confluence.renderers.registry"):
            assert dialect.lookup(NodeKind.BOLD) is _upper
        assert "falls back to base" in caplog.text

    def test_fallback_through_several_layers(self) -> None:
        """Test lookups walk the whole chain of bases."""
        base = TranslatorRegistry("base")
        base.add(NodeKind.BOLD, _upper)
        leaf = base.derive("middle").derive("leaf")
        assert leaf.lookup(NodeKind.BOLD) is _upper
        assert [layer.name for layer in leaf.layers()] == ["leaf", "middle", "base"]

    def test_unsupported_kind_raises(self) -> None:
        """Test dispatch failure names the kind and the dialect."""
        registry = TranslatorRegistry("base").derive("dialect")
        with pytest.raises(UnsupportedNodeKindError) as exc_info:
            registry.lookup(NodeKind.TABLE)

        assert exc_info.value.kind == "table"
        assert exc_info.value.dialect == "dialect"
        assert "table" in str(exc_info.value)

    def test_unsupported_kind_reports_location(self) -> None:
        """Test dispatch failure includes the source location."""
        location = SourceLocation(format="org", line=12, column=3, file="notes.org")
        with pytest.raises(UnsupportedNodeKindError) as exc_info:
            TranslatorRegistry("empty").lookup(NodeKind.BOLD, location)

        assert exc_info.value.source_location is location
        assert "notes.org:12:3" in str(exc_info.value)
        assert isinstance(exc_info.value, RenderingError)

    def test_defines_only_checks_own_layer(self) -> None:
        """Test defines ignores base layers."""
        base = TranslatorRegistry("base")
        base.add(NodeKind.BOLD, _upper)
        dialect = base.derive("dialect")
        assert base.defines(NodeKind.BOLD)
        assert not dialect.defines(NodeKind.BOLD)

    def test_kinds_includes_bases(self) -> None:
        """Test kinds lists translators from every layer."""
        base = TranslatorRegistry("base")
        base.add(NodeKind.BOLD, _upper)
        dialect = base.derive("dialect")
        dialect.add(NodeKind.ITALIC, _lower)
        assert dialect.kinds() == {NodeKind.BOLD, NodeKind.ITALIC}

    def test_register_replaces(self) -> None:
        """Test registering a kind twice keeps the last translator."""
        registry = TranslatorRegistry("base")
        registry.add(NodeKind.BOLD, _upper)
        registry.add(NodeKind.BOLD, _lower)
        assert registry.lookup(NodeKind.BOLD) is _lower

    def test_repr_shows_chain(self) -> None:
        """Test the repr lists the dialect chain."""
        assert repr(CONFLUENCE_TRANSLATORS) == "TranslatorRegistry(confluence -> plaintext)"


@pytest.mark.unit
class TestBuiltinDialects:
    """Tests for the shipped dialect registries."""

    def test_plaintext_covers_every_kind(self) -> None:
        """Test the base dialect can render any node kind."""
        assert PLAINTEXT_TRANSLATORS.kinds() == set(NodeKind)

    def test_confluence_derives_from_plaintext(self) -> None:
        """Test the Confluence dialect falls back to plain text."""
        assert CONFLUENCE_TRANSLATORS.parent is PLAINTEXT_TRANSLATORS
        assert not CONFLUENCE_TRANSLATORS.defines(NodeKind.DOCUMENT)
        assert CONFLUENCE_TRANSLATORS.defines(NodeKind.HEADLINE)
        assert CONFLUENCE_TRANSLATORS.lookup(NodeKind.LINE_BREAK) is PLAINTEXT_TRANSLATORS.lookup(
            NodeKind.LINE_BREAK
        )


class _EmptyRenderer(BaseRenderer):
    registry = TranslatorRegistry("empty")

    def apply_template(self, body, context):
        return body


class _ShoutingRenderer(BaseRenderer):
    registry = PLAINTEXT_TRANSLATORS.derive("shouting")

    def apply_template(self, body, context):
        return f"<<{body}>>"


@_ShoutingRenderer.registry.register(NodeKind.PLAIN_TEXT)
def _shout(node, contents, context):
    return str(node.get("value", "")).upper()


@pytest.mark.unit
class TestTranscoding:
    """Tests for the recursive transcoding driver."""

    def test_unsupported_kind_aborts_export(self) -> None:
        """Test an export fails with the offending kind and location."""
        doc = Node(
            NodeKind.DOCUMENT,
            children=[Node(NodeKind.PARAGRAPH, source_location=SourceLocation(format="org", line=4, file="a.org"))],
        )
        with pytest.raises(UnsupportedNodeKindError) as exc_info:
            _EmptyRenderer().render_to_string(doc)
        assert exc_info.value.kind == "document"

    def test_custom_dialect(self) -> None:
        """Test a derived dialect only overrides what it registers."""
        doc = document(paragraph("hi ", bold("there")))
        assert _ShoutingRenderer().render_to_string(doc) == "<<HI THERE\n>>\n"

    def test_context_transcode_fragment(self) -> None:
        """Test a context can transcode a single subtree."""
        doc = document(paragraph("a", bold("b")))
        from org2confluence.renderers import ConfluenceRenderer

        context = ConfluenceRenderer().create_context(doc)
        assert context.transcode(doc.children[0]) == "a*b*\n"
        assert context.transcode(doc.children[0].children[1]) == "*b*"

    def test_secondary_rendered_on_demand(self) -> None:
        """Test secondary strings render even outside a full pass."""
        from org2confluence.ast.builder import headline
        from org2confluence.renderers import ConfluenceRenderer

        doc = document(headline(1, ["A ", bold("B")]))
        context = ConfluenceRenderer().create_context(doc)
        assert context.secondary(doc.children[0], "title") == "A *B*"

    def test_reference_labels_recorded(self) -> None:
        """Test reference labels are cached in the context table."""
        from org2confluence.ast.builder import headline
        from org2confluence.renderers import ConfluenceRenderer

        doc = document(headline(1, "A", custom_id="a"))
        context = ConfluenceRenderer().create_context(doc)
        assert context.reference_label(doc.children[0]) == "a"
        assert context.references == {doc.children[0]: "a"}

    def test_footnote_reference_children_not_rendered_in_place(self) -> None:
        """Test inline footnote content stays out of the reference site."""
        from org2confluence.ast.builder import footnote_reference

        doc = document(paragraph("x", footnote_reference(None, text("secret"))))
        assert "secret" not in _ShoutingRenderer().render_to_string(doc).split("\n")[0]


@pytest.mark.unit
class TestNormalizeElement:
    """Tests for element output normalization."""

    def test_adds_single_newline(self) -> None:
        """Test a newline is appended when missing."""
        assert normalize_element("x") == "x\n"

    def test_collapses_trailing_newlines(self) -> None:
        """Test trailing blank lines collapse to one newline."""
        assert normalize_element("x\n\n  \n") == "x\n"

    def test_post_blank(self) -> None:
        """Test post_blank adds blank lines."""
        assert normalize_element("x", 2) == "x\n\n\n"

    def test_empty_stays_empty(self) -> None:
        """Test empty output is dropped, including post_blank."""
        assert normalize_element("", 3) == ""

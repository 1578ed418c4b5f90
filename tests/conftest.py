"""Pytest configuration and shared fixtures for the org2confluence test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from org2confluence.ast.builder import (
    bold,
    document,
    footnote_definition,
    footnote_reference,
    headline,
    item,
    link,
    paragraph,
    plain_list,
    src_block,
    table,
    row,
    rule_row,
    target,
)
from org2confluence.options import ConfluenceRendererOptions
from org2confluence.renderers import ConfluenceRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def renderer() -> ConfluenceRenderer:
    """Provide a Confluence renderer without the table of contents macro."""
    return ConfluenceRenderer(ConfluenceRendererOptions(with_toc=False))


@pytest.fixture
def sample_document():
    """Provide a small document exercising most node kinds.

    Returns
    -------
    Node
        Document with headlines, a list, a table, a source block, links
        and footnotes.

    """
    return document(
        headline(
            1,
            "Introduction",
            paragraph("Read ", bold("this"), " first", footnote_reference("a"), "."),
            plain_list("ordered", item("Install", checkbox="on"), item("Configure", checkbox="off")),
            todo_keyword="TODO",
            custom_id="intro",
        ),
        headline(
            1,
            "Usage",
            headline(
                2,
                "Details",
                paragraph("See ", link("*Introduction"), " and ", link("https://example.com", "the site"), "."),
                paragraph(target("here"), "Anchor text"),
                table(row("Name", "Value"), rule_row(), row("a", "1"), row("b", "")),
                src_block("echo hi\n", language="sh"),
            ),
        ),
        footnote_definition("a", paragraph("A footnote.")),
    )

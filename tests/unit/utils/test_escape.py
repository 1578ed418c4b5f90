#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for Confluence escaping."""

import pytest

from org2confluence.utils.escape import escape_confluence


@pytest.mark.unit
class TestEscapeConfluence:
    """Tests for escape_confluence."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("a~b", r"a\~b"),
            ("~~", r"\~\~"),
            ("plain", "plain"),
            ("", ""),
            ("*bold* _it_", "*bold* _it_"),
        ],
    )
    def test_escape(self, raw: str, expected: str) -> None:
        """Test only tildes are escaped."""
        assert escape_confluence(raw) == expected

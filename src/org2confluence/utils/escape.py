#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/utils/escape.py
"""Text escaping utilities for Confluence wiki markup.

"""

from __future__ import annotations

# Characters reserved by the dialect in running paragraph text
_CONFLUENCE_PARAGRAPH_ESCAPES = {
    "~": r"\~",
}


def escape_confluence(text: str) -> str:
    r"""Escape reserved Confluence characters in paragraph text.

    Confluence uses ``~text~`` for subscript, so a literal tilde in running
    text must be escaped. Code and verbatim values are never passed through
    this function.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for Confluence paragraphs

    Examples
    --------
        >>> escape_confluence("a~b")
        'a\\~b'
        >>> escape_confluence("no tildes")
        'no tildes'

    """
    if not text:
        return text

    result = text
    for char, escaped in _CONFLUENCE_PARAGRAPH_ESCAPES.items():
        result = result.replace(char, escaped)
    return result


__all__ = ["escape_confluence"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2confluence/utils/io_utils.py
"""I/O utilities for handling output destinations.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from org2confluence.exceptions import OutputWriteError


def _is_binary_stream(output: object) -> bool:
    # Concrete types first, then io base classes, then the mode attribute
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive
        UTF-8 encoded bytes.

    Raises
    ------
    OutputWriteError
        If a file path cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("h1. Title", buffer)
        >>> buffer.getvalue()
        'h1. Title'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(
                f"Could not write output to {output_path}: {e}", output_path=str(output_path), original_error=e
            ) from e
        return

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/utils/io_utils.py
"""Input and output helpers shared by the parser, renderer and CLI."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from plaintify.exceptions import OutputWriteError


def read_text(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
    """Load text from a path, raw bytes, a stream, or a literal string.

    A ``str`` names a file when it is short, single-line and points at an
    existing file; otherwise it is treated as the content itself.

    Parameters
    ----------
    input_data : str, Path, IO, or bytes
        Input to load

    Returns
    -------
    str
        Decoded text (UTF-8, BOM stripped, undecodable bytes replaced)

    """
    if isinstance(input_data, bytes):
        return input_data.decode("utf-8-sig", errors="replace")
    if isinstance(input_data, Path):
        return input_data.read_bytes().decode("utf-8-sig", errors="replace")
    if isinstance(input_data, str):
        # Linux has a 255 char limit for path components
        if len(input_data) <= 260 and "\n" not in input_data:
            try:
                path = Path(input_data)
                if path.is_file():
                    return path.read_bytes().decode("utf-8-sig", errors="replace")
            except OSError:
                pass
        return input_data

    data = input_data.read()
    if isinstance(data, bytes):
        return data.decode("utf-8-sig", errors="replace")
    return data


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a file path or a binary/text file-like object.

    Parameters
    ----------
    content : str
        Text to write (encoded as UTF-8 for binary destinations)
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    OutputWriteError
        If the destination file cannot be written
    TypeError
        If the output type is not supported

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["read_text", "write_content"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chromepdf/utils/io_utils.py
"""I/O utilities for render inputs and PDF outputs.

This module reads local HTML files for file renders and writes rendered PDF
bytes to a path or a binary file-like object.

"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Union

from chromepdf.exceptions import FileAccessError, FileNotFoundError


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a local file as text for rendering.

    Parameters
    ----------
    path : str or Path
        File to read
    encoding : str, default "utf-8"
        Text encoding of the file

    Returns
    -------
    str
        File contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the path is not a regular file, cannot be read, or cannot be decoded

    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(str(file_path))
    if not file_path.is_file():
        raise FileAccessError(str(file_path), message=f"Not a regular file: {file_path}")

    try:
        return file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileAccessError(
            str(file_path), message=f"File is not valid {encoding} text: {file_path}", original_error=e
        ) from e
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e


def write_content(content: bytes, output: Union[str, Path, IO[bytes]]) -> None:
    """Write rendered bytes to a file path or binary file-like object.

    Parameters
    ----------
    content : bytes
        Rendered PDF bytes
    output : str, Path or IO[bytes]
        Destination path (parent directories are created) or a binary
        file-like object

    Raises
    ------
    FileAccessError
        If the destination path cannot be written

    Examples
    --------
    >>> from io import BytesIO
    >>> buffer = BytesIO()
    >>> write_content(b"%PDF-1.7", buffer)
    >>> buffer.getvalue()
    b'%PDF-1.7'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(content)
        except OSError as e:
            raise FileAccessError(
                str(output_path), message=f"Cannot write output file: {output_path}", original_error=e
            ) from e
        return

    output.write(content)

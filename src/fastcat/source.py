#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/source.py
"""Line-oriented input sources.

The renderer consumes :class:`SourceLine` records (or plain strings). These
helpers produce them from in-memory text, text streams and files, always
streaming so large files are never read whole.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, Iterable, Iterator, Union

from fastcat.constants import DEFAULT_ENCODING, LARGE_FILE_THRESHOLD_BYTES, SMALL_FILE_THRESHOLD_BYTES
from fastcat.exceptions import FileAccessError
from fastcat.exceptions import FileNotFoundError as FastcatFileNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceLine:
    """One input line.

    Parameters
    ----------
    text : str
        Line content without its terminator
    line_number : int
        One-based line number
    is_end : bool, default False
        End-of-batch marker; consumers stop at the first marker

    """

    text: str
    line_number: int
    is_end: bool = False


SourceItem = Union[SourceLine, str]


class FileSize(str, Enum):
    """Size category of an input file."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


def classify_file_size(size_bytes: int) -> FileSize:
    """Classify a byte count as SMALL (< 1 MiB), MEDIUM (< 100 MiB) or LARGE."""
    if size_bytes < SMALL_FILE_THRESHOLD_BYTES:
        return FileSize.SMALL
    if size_bytes < LARGE_FILE_THRESHOLD_BYTES:
        return FileSize.MEDIUM
    return FileSize.LARGE


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


def iter_lines(lines: Iterable[str]) -> Iterator[SourceLine]:
    """Number an iterable of strings as source lines, starting at 1."""
    for number, line in enumerate(lines, start=1):
        yield SourceLine(_strip_terminator(line), number)


def iter_text_lines(text: str) -> Iterator[SourceLine]:
    """Split a block of text into source lines."""
    return iter_lines(text.splitlines())


def iter_stream_lines(stream: IO[str]) -> Iterator[SourceLine]:
    """Stream source lines from an open text stream such as ``sys.stdin``."""
    return iter_lines(stream)


def iter_file_lines(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> Iterator[SourceLine]:
    """Stream source lines from a file.

    Parameters
    ----------
    path : str or Path
        File to read
    encoding : str, default "utf-8"
        Text encoding of the file

    Yields
    ------
    SourceLine
        One record per line

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be opened or decoded

    """
    file_path = str(path)
    try:
        handle = open(file_path, "r", encoding=encoding, newline="")
    except FileNotFoundError as e:
        raise FastcatFileNotFoundError(file_path, original_error=e) from e
    except OSError as e:
        raise FileAccessError(file_path, original_error=e) from e

    logger.debug(f"Reading {file_path}")
    with handle:
        try:
            yield from iter_lines(handle)
        except UnicodeDecodeError as e:
            raise FileAccessError(file_path, message=f"Cannot decode {file_path} as {encoding}", original_error=e) from e


def file_size_category(path: Union[str, Path]) -> FileSize:
    """Return the size category of a file, treating unreadable sizes as SMALL."""
    try:
        return classify_file_size(os.path.getsize(path))
    except OSError:
        return FileSize.SMALL

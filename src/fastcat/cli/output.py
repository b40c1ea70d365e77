"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/fastcat/cli/output.py
import logging
import pydoc
import sys
from typing import IO, Iterable

from fastcat.exceptions import OutputWriteError, RenderingError
from fastcat.source import FileSize

logger = logging.getLogger(__name__)


def is_terminal(stream: IO[str] | None = None) -> bool:
    """Whether ``stream`` (default stdout) is attached to a terminal."""
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def should_use_pager(requested: bool | None, file_size: FileSize | None, stream: IO[str] | None = None) -> bool:
    """Determine if output should go through the pager.

    Parameters
    ----------
    requested : bool or None
        True for ``--pager``, False for ``--no-pager``, None when unset
    file_size : FileSize or None
        Size class of the input file; None for stdin
    stream : optional, default None
        Output stream; uses sys.stdout unless otherwise specified

    Returns
    -------
    bool
        True if the pager should be used

    Notes
    -----
    Without an explicit choice the pager is used only for LARGE files when
    the output stream is a terminal.

    """
    if requested is not None:
        return requested
    return file_size is FileSize.LARGE and is_terminal(stream)


def format_output(lines: Iterable[str]) -> str:
    """Join display lines into output text, one line terminator per line."""
    return "".join(f"{line}\n" for line in lines)


def write_output(content: str, stream: IO[str] | None = None) -> None:
    """Write rendered content to ``stream`` (default stdout).

    Raises
    ------
    BrokenPipeError
        If the reader closed the pipe; callers end quietly
    OutputWriteError
        If writing fails for any other reason

    """
    target = stream or sys.stdout
    try:
        target.write(content)
        target.flush()
    except BrokenPipeError:
        raise
    except OSError as e:
        raise OutputWriteError(getattr(target, "name", "<stdout>"), original_error=e) from e


def page_output(content: str) -> None:
    """Display content through the system pager.

    Raises
    ------
    RenderingError
        If the pager cannot be started

    """
    logger.debug("Paging output")
    try:
        pydoc.pager(content)
    except OSError as e:
        raise RenderingError(f"Pager failed: {e}", rendering_stage="pager", original_error=e) from e

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/fastcat/cli/processors.py
"""Per-input processing for the fastcat CLI.

Each input (file path or stdin) is rendered independently with its own
profile detection and written to stdout or the pager. A failing file is
reported and skipped; the exit code reflects the first failure.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Iterator

from fastcat.cli.builder import EXIT_SUCCESS, get_exit_code_for_exception
from fastcat.cli.output import format_output, page_output, should_use_pager, write_output
from fastcat.exceptions import FastcatError, RenderingError
from fastcat.options import RenderOptions
from fastcat.render import Renderer
from fastcat.source import FileSize, SourceLine, file_size_category, iter_file_lines, iter_stream_lines

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def resolve_inputs(parsed_args: argparse.Namespace) -> list[str]:
    """Return the inputs to process; stdin is spelled ``-``."""
    if parsed_args.echo or not parsed_args.files:
        return [STDIN_MARKER]
    return list(parsed_args.files)


def open_input(item: str, stdin: IO[str] | None = None) -> tuple[Iterator[SourceLine], str | None, FileSize | None]:
    """Open one input item.

    Returns
    -------
    tuple
        Line source, source name for profile detection (None for stdin) and
        size class (None for stdin)

    Raises
    ------
    FileError
        If the path cannot be read

    """
    if item == STDIN_MARKER:
        return iter_stream_lines(stdin or sys.stdin), None, None

    path = Path(item)
    lines = iter_file_lines(path)
    size = file_size_category(path) if path.is_file() else None
    return lines, item, size


def process_item(
    item: str,
    renderer: Renderer,
    pager: bool | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> None:
    """Render one input and deliver it to the output stream or the pager."""
    lines, source_name, size = open_input(item, stdin)
    result = renderer.render(lines, source_name)
    logger.debug(f"{item}: {result.mode.value} mode, {len(result.lines)} lines")

    content = format_output(result.texts)
    if should_use_pager(pager, size, stdout):
        page_output(content)
    else:
        write_output(content, stdout)


def process_inputs(
    parsed_args: argparse.Namespace,
    options: RenderOptions,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> int:
    """Render every input in order.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    options : RenderOptions
        Rendering configuration shared by all inputs
    stdin, stdout : optional
        Streams to use instead of ``sys.stdin`` and ``sys.stdout``

    Returns
    -------
    int
        0 when every input rendered, otherwise the exit code of the first failure

    """
    renderer = Renderer(options)
    exit_code = EXIT_SUCCESS

    for item in resolve_inputs(parsed_args):
        try:
            process_item(item, renderer, parsed_args.pager, stdin, stdout)
        except FastcatError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            logger.debug(f"Failed to process {item}", exc_info=True)
            if exit_code == EXIT_SUCCESS:
                exit_code = get_exit_code_for_exception(e)
            if isinstance(e, RenderingError):
                break

    return exit_code

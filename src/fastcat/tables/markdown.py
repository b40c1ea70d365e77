#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tables/markdown.py
"""Markdown (pipe) table detection, splitting and alignment.

This path is independent of the CSV parser: markdown rows are split on ``|``
with their own cell rules. A table block is a contiguous run of table lines;
separator rows (``|---|:--:|``) are recognized and dropped, and the renderer
generates its own separator after the header row.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from fastcat.constants import MARKDOWN_TABLE_SEPARATOR_CHARS

logger = logging.getLogger(__name__)

PIPE = "|"


@dataclass(frozen=True)
class MarkdownSegment:
    """A run of document lines that is either one table block or plain text.

    Parameters
    ----------
    lines : tuple[str, ...]
        Raw lines of the segment; separator rows are kept for table segments
    is_table : bool
        Whether the segment is a table block

    """

    lines: tuple[str, ...]
    is_table: bool


def is_md_table_separator(line: str) -> bool:
    """Whether a line is a table separator row.

    A separator contains only ``|``, ``-``, ``:`` and whitespace, with at least
    one pipe and one dash.
    """
    trimmed = line.strip()
    if not trimmed or PIPE not in trimmed or "-" not in trimmed:
        return False
    return all(char in MARKDOWN_TABLE_SEPARATOR_CHARS for char in trimmed)


def looks_like_md_table(line: str) -> bool:
    """Whether a line belongs to a markdown table.

    True for separator rows, for lines with two or more pipes, and for lines
    with a single interior pipe such as ``a|b`` (two cells without outer
    pipes). A single leading or trailing pipe alone is not a table line.
    """
    if is_md_table_separator(line):
        return True

    trimmed = line.strip()
    pipe_count = trimmed.count(PIPE)
    if pipe_count >= 2:
        return True
    return pipe_count == 1 and not trimmed.startswith(PIPE) and not trimmed.endswith(PIPE)


def parse_md_block(lines: Iterable[str]) -> list[str]:
    """Collect the table block at the start of ``lines``.

    Greedily takes lines while they look like table lines, dropping separator
    rows. The first non-table line ends the block; nothing after it is read.

    Parameters
    ----------
    lines : Iterable[str]
        Document lines starting at the candidate table

    Returns
    -------
    list[str]
        Raw data lines of the block (header first), without separator rows

    """
    block: list[str] = []
    for line in lines:
        if not looks_like_md_table(line):
            break
        if not is_md_table_separator(line):
            block.append(line)
    return block


def split_md_row(line: str) -> list[str]:
    """Split a table row into trimmed cell texts.

    A single leading pipe and a single trailing pipe are dropped before
    splitting, so ``| a | b |``, ``a | b`` and ``|a|b`` all give ``["a", "b"]``.
    """
    content = line.strip()
    if content.startswith(PIPE):
        content = content[1:]
    if content.endswith(PIPE):
        content = content[:-1]
    return [cell.strip() for cell in content.split(PIPE)]


def format_md_table(rows: Iterable[str]) -> list[str]:
    """Align table rows into padded pipe-table lines.

    Column widths are measured over every row first. Each row is emitted as
    ``| cell | cell |`` with cells left-aligned and short rows padded with
    empty cells. When there is more than one row, a separator sized to the
    columns is inserted after the first (header) row.

    Parameters
    ----------
    rows : Iterable[str]
        Raw data lines of one table block, without separator rows

    Returns
    -------
    list[str]
        Aligned lines; empty when ``rows`` is empty

    """
    parsed = [split_md_row(row) for row in rows]
    if not parsed:
        return []

    col_widths: list[int] = []
    for cells in parsed:
        for i, cell in enumerate(cells):
            if i >= len(col_widths):
                col_widths.append(len(cell))
            else:
                col_widths[i] = max(col_widths[i], len(cell))

    separator = PIPE + PIPE.join("-" * (width + 2) for width in col_widths) + PIPE

    formatted: list[str] = []
    for index, cells in enumerate(parsed):
        padded = cells + [""] * (len(col_widths) - len(cells))
        formatted.append("".join(f"| {cell.ljust(width)} " for cell, width in zip(padded, col_widths)) + PIPE)
        if index == 0 and len(parsed) > 1:
            formatted.append(separator)
    return formatted


def iter_md_segments(lines: Iterable[str]) -> Iterator[MarkdownSegment]:
    """Split document lines into table blocks and plain-text runs.

    A table block starts at a table line that is not a separator row and
    extends over every following table line.

    Parameters
    ----------
    lines : Iterable[str]
        All document lines

    Yields
    ------
    MarkdownSegment
        Segments in document order

    """
    all_lines = list(lines)
    plain: list[str] = []
    i = 0
    while i < len(all_lines):
        line = all_lines[i]
        if looks_like_md_table(line) and not is_md_table_separator(line):
            if plain:
                yield MarkdownSegment(tuple(plain), is_table=False)
                plain = []
            start = i
            while i < len(all_lines) and looks_like_md_table(all_lines[i]):
                i += 1
            logger.debug(f"Markdown table block at lines {start + 1}-{i}")
            yield MarkdownSegment(tuple(all_lines[start:i]), is_table=True)
        else:
            plain.append(line)
            i += 1
    if plain:
        yield MarkdownSegment(tuple(plain), is_table=False)


def align_md_tables(lines: Iterable[str]) -> list[str]:
    """Return document lines with every table block aligned."""
    output: list[str] = []
    for segment in iter_md_segments(lines):
        if segment.is_table:
            output.extend(format_md_table(parse_md_block(segment.lines)))
        else:
            output.extend(segment.lines)
    return output

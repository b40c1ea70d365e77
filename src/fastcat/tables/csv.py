#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tables/csv.py
"""Single-row parser for comma-delimited lines.

Rows are read with :mod:`csv` using a non-strict ``excel`` dialect: a field
starting with ``"`` is quoted, ``""`` inside it is a literal quote and any
other ``"`` closes the quoted part. Unterminated quotes consume the rest of
the line.

"""

from __future__ import annotations

import csv
from dataclasses import dataclass

from fastcat.exceptions import RenderingError

DELIMITER = ","
QUOTE = '"'


class RowDialect(csv.excel):
    """Comma-delimited, double-quote escaped and lenient about stray quotes."""

    delimiter = DELIMITER
    quotechar = QUOTE
    doublequote = True
    skipinitialspace = False
    strict = False


@dataclass(frozen=True)
class DelimitedCell:
    """One resolved cell of a delimited table.

    Parameters
    ----------
    value : str
        Logical cell content with quoting and escaping resolved
    row : int
        Zero-based row index
    col : int
        Zero-based column index

    """

    value: str
    row: int
    col: int


def looks_like_csv(line: str) -> bool:
    """Cheap CSV detector: at least one comma and at least one other character.

    Prose containing commas is accepted as well; callers rely on this exact
    heuristic.
    """
    comma_count = line.count(DELIMITER)
    return comma_count > 0 and len(line) - comma_count > 0


def parse_row(line: str, row_index: int = 0) -> list[DelimitedCell]:
    """Split one line into cells on unquoted commas.

    Parameters
    ----------
    line : str
        Line to split, without its line terminator
    row_index : int, default 0
        Row index stamped on every cell; assigned by the caller

    Returns
    -------
    list[DelimitedCell]
        Cells in column order. An empty line has no cells; ``n`` unquoted
        commas otherwise always give ``n + 1`` cells.

    Raises
    ------
    RenderingError
        If the csv reader rejects the line (e.g. a field over its size limit)

    """
    try:
        values = next(csv.reader([line], dialect=RowDialect), [])
    except csv.Error as e:
        raise RenderingError(
            f"Could not parse row {row_index + 1} as CSV: {e}", rendering_stage="csv", original_error=e
        ) from e
    return [DelimitedCell(value, row_index, col) for col, value in enumerate(values)]

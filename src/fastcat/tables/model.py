#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tables/model.py
"""Delimited table model and builder.

Column widths are only known once every row has been read, so the builder
materializes the whole table before any line can be rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from fastcat.source import SourceItem, SourceLine
from fastcat.tables.csv import DelimitedCell, parse_row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelimitedTable:
    """A fully buffered delimited table.

    Parameters
    ----------
    rows : tuple[tuple[DelimitedCell, ...], ...]
        Rows in input order; rows may be ragged
    col_widths : tuple[int, ...]
        Maximum cell width per column position, in code units

    """

    rows: tuple[tuple[DelimitedCell, ...], ...]
    col_widths: tuple[int, ...]

    @property
    def num_rows(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        """Number of columns: the widest row's cell count."""
        return len(self.col_widths)

    def row_values(self, row_index: int) -> list[str]:
        """Return a row's values padded with empty strings to ``num_cols``."""
        values = [cell.value for cell in self.rows[row_index]]
        values.extend([""] * (self.num_cols - len(values)))
        return values


def build_table(source: Iterable[SourceItem], max_rows: int = 0) -> DelimitedTable | None:
    """Parse every line of ``source`` into a delimited table.

    Parameters
    ----------
    source : Iterable[SourceLine | str]
        Input lines; reading stops at the first end marker
    max_rows : int, default 0
        Maximum number of rows to read; 0 reads until the source is exhausted

    Returns
    -------
    DelimitedTable or None
        The table, or None when no rows were produced

    """
    rows: list[tuple[DelimitedCell, ...]] = []
    col_widths: list[int] = []

    for item in source:
        if isinstance(item, SourceLine):
            if item.is_end:
                break
            text = item.text
        else:
            text = item

        if max_rows and len(rows) >= max_rows:
            break

        row = tuple(parse_row(text, row_index=len(rows)))
        for cell in row:
            width = len(cell.value)
            if cell.col >= len(col_widths):
                col_widths.append(width)
            else:
                col_widths[cell.col] = max(col_widths[cell.col], width)
        rows.append(row)

    if not rows:
        logger.debug("No rows parsed; no table built")
        return None

    logger.debug(f"Built table with {len(rows)} rows and {len(col_widths)} columns")
    return DelimitedTable(rows=tuple(rows), col_widths=tuple(col_widths))

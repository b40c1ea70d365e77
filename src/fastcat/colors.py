#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/colors.py
"""Deterministic column color assignment for rainbow tables."""

from __future__ import annotations

from fastcat.constants import ANSI_256_FOREGROUND, RAINBOW_PALETTE


def rainbow_code(column_index: int) -> int:
    """Return the 256-color palette number for a column.

    Parameters
    ----------
    column_index : int
        Zero-based column position

    Returns
    -------
    int
        ``RAINBOW_PALETTE[column_index % 12]``

    Raises
    ------
    ValueError
        If ``column_index`` is negative

    """
    if column_index < 0:
        raise ValueError(f"column_index must be non-negative, got {column_index}")
    return RAINBOW_PALETTE[column_index % len(RAINBOW_PALETTE)]


def rainbow_color(column_index: int) -> str:
    """Return the ANSI 256-color foreground escape for a column.

    The mapping depends only on the column position, never on cell content,
    and repeats every twelve columns.

    Parameters
    ----------
    column_index : int
        Zero-based column position

    Returns
    -------
    str
        Escape sequence of the form ``"\\033[38;5;<n>m"``

    """
    return ANSI_256_FOREGROUND.format(code=rainbow_code(column_index))

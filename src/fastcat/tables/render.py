#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tables/render.py
"""Boxed renderers for delimited tables.

Both renderers emit a horizontal rule, then every row followed by the rule
again::

    +-------+-----+
    | name  | age |
    +-------+-----+
    | Alice | 30  |
    +-------+-----+

The rainbow renderer keeps the same layout, draws the rules in gray and colors
each column with :func:`fastcat.colors.rainbow_color`. Short rows are padded
with empty cells.
"""

from __future__ import annotations

from fastcat.colors import rainbow_color
from fastcat.constants import ANSI_RESET, RAINBOW_RULE_COLOR
from fastcat.tables.model import DelimitedTable


def build_rule(col_widths: tuple[int, ...]) -> str:
    """Return the ``+-----+`` rule for the given column widths."""
    return "+" + "".join("-" * (width + 2) + "+" for width in col_widths)


def format_table(table: DelimitedTable) -> list[str]:
    """Render a table with plain ASCII borders.

    Parameters
    ----------
    table : DelimitedTable
        Table to render

    Returns
    -------
    list[str]
        Display lines, without terminators

    """
    rule = build_rule(table.col_widths)
    lines = [rule]
    for row_index in range(table.num_rows):
        cells = (
            f" {value.ljust(width)} |" for value, width in zip(table.row_values(row_index), table.col_widths)
        )
        lines.append("|" + "".join(cells))
        lines.append(rule)
    return lines


def format_rainbow_table(table: DelimitedTable) -> list[str]:
    """Render a table with one ANSI 256-color per column.

    Parameters
    ----------
    table : DelimitedTable
        Table to render

    Returns
    -------
    list[str]
        Display lines including ANSI escape sequences

    """
    rule = f"{RAINBOW_RULE_COLOR}{build_rule(table.col_widths)}{ANSI_RESET}"
    lines = [rule]
    for row_index in range(table.num_rows):
        cells = (
            f"|{rainbow_color(col)} {value.ljust(width)} {ANSI_RESET}"
            for col, (value, width) in enumerate(zip(table.row_values(row_index), table.col_widths))
        )
        lines.append("".join(cells) + "|")
        lines.append(rule)
    return lines

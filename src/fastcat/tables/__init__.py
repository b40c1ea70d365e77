#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Table parsing and rendering: delimited (CSV) tables and markdown pipe tables."""

from fastcat.tables.csv import DelimitedCell, looks_like_csv, parse_row
from fastcat.tables.markdown import (
    MarkdownSegment,
    align_md_tables,
    format_md_table,
    is_md_table_separator,
    iter_md_segments,
    looks_like_md_table,
    parse_md_block,
    split_md_row,
)
from fastcat.tables.model import DelimitedTable, build_table
from fastcat.tables.render import build_rule, format_rainbow_table, format_table

__all__ = [
    "DelimitedCell",
    "DelimitedTable",
    "MarkdownSegment",
    "align_md_tables",
    "build_rule",
    "build_table",
    "format_md_table",
    "format_rainbow_table",
    "format_table",
    "is_md_table_separator",
    "iter_md_segments",
    "looks_like_md_table",
    "looks_like_csv",
    "parse_md_block",
    "parse_row",
    "split_md_row",
]

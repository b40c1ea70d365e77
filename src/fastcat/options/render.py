#  Copyright (c) 2025 Tom Villani, Ph.D.

# fastcat/options/render.py
"""Configuration options for the render orchestrator.

This module defines the flat options record consumed by
:class:`fastcat.render.Renderer`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fastcat.constants import (
    DEFAULT_ALIGN_MARKDOWN_TABLES,
    DEFAULT_FORCE_TABLE_MODE,
    DEFAULT_LINE_NUMBERS,
    DEFAULT_MAX_TABLE_ROWS,
    DEFAULT_PROFILE_OVERRIDE,
    DEFAULT_RAINBOW_ENABLED,
    DEFAULT_THEME_ENABLED,
)
from fastcat.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration options for rendering one input stream.

    Parameters
    ----------
    profile_override : str or None, default None
        Explicit language profile name ("cpp", "c", "py", "md", "json", ...).
        Bypasses extension detection entirely. "csv" selects the table
        path; other unknown names render pass-through.
    theme_enabled : bool, default False
        Substitute the vim-like theme colors when decorating line output.
        Never affects table output.
    rainbow_enabled : bool, default False
        Always attempt a delimited table and render it with one color per
        column; falls back to line output when no rows were parsed.
    force_table_mode : bool, default False
        Render a boxed delimited table when the first input line looks like
        CSV.
    max_table_rows : int, default 0
        Maximum number of rows read into a delimited table. 0 means unbounded.
    align_markdown_tables : bool, default False
        Re-align markdown table blocks while rendering other lines normally.
        Markdown sources are aligned even when this is off.
    line_numbers : bool, default False
        Prefix line output with source line numbers.

    """

    profile_override: str | None = field(
        default=DEFAULT_PROFILE_OVERRIDE,
        metadata={
            "help": "Language profile to use instead of extension detection (c, cpp, py, md, json, csv)",
            "cli_name": "syntax",
            "cli_aliases": ("-s",),
            "metavar": "NAME",
        },
    )
    theme_enabled: bool = field(
        default=DEFAULT_THEME_ENABLED,
        metadata={"help": "Enable vim-like theme colors", "cli_name": "theme"},
    )
    rainbow_enabled: bool = field(
        default=DEFAULT_RAINBOW_ENABLED,
        metadata={
            "help": "Rainbow CSV with one 256-color per column",
            "cli_name": "rainbowcsv",
            "cli_aliases": ("--rainbow",),
        },
    )
    force_table_mode: bool = field(
        default=DEFAULT_FORCE_TABLE_MODE,
        metadata={
            "help": "Align and display CSV input as a boxed table",
            "cli_name": "align-csv",
            "cli_aliases": ("--csv-table",),
        },
    )
    max_table_rows: int = field(
        default=DEFAULT_MAX_TABLE_ROWS,
        metadata={
            "help": "Maximum rows read into a CSV table (0 = all rows)",
            "cli_name": "max-table-rows",
            "metavar": "N",
        },
    )
    align_markdown_tables: bool = field(
        default=DEFAULT_ALIGN_MARKDOWN_TABLES,
        metadata={
            "help": "Align markdown tables in any input (markdown sources are always aligned)",
            "cli_name": "align-md-table",
            "cli_aliases": ("--md-table",),
        },
    )
    line_numbers: bool = field(
        default=DEFAULT_LINE_NUMBERS,
        metadata={"help": "Show line numbers", "cli_name": "linenumber", "cli_aliases": ("-n",)},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``max_table_rows`` is negative.

        """
        if self.max_table_rows < 0:
            raise ValueError(f"max_table_rows must be non-negative, got {self.max_table_rows}")

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/render.py
"""Render orchestrator.

The :class:`Renderer` takes a batch of input lines and a :class:`RenderOptions`
record and chooses one of the rendering paths:

1. ``rainbow_enabled`` always tries a delimited table and renders it with
   rainbow columns, falling back to line output if no rows were parsed.
2. ``force_table_mode`` (or a ``*.csv``/``*.tsv`` source name, or the ``csv``
   syntax) renders a boxed table when the first line passes the CSV heuristic.
3. ``align_markdown_tables`` or a markdown profile aligns markdown table
   blocks and renders every other line on the line path.
4. Otherwise every line is tokenized with the active profile and decorated.

The theme only affects the line path. Table output is never numbered.

Examples
--------
    >>> from fastcat.options import RenderOptions
    >>> renderer = Renderer(RenderOptions(force_table_mode=True))
    >>> print("\\n".join(renderer.render_lines(["name,age", "Alice,30"])))
    +-------+-----+
    | name  | age |
    +-------+-----+
    | Alice | 30  |
    +-------+-----+

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from fastcat.constants import CSV_EXTENSIONS, CSV_SYNTAX_NAMES
from fastcat.exceptions import InvalidOptionsError
from fastcat.options import RenderOptions
from fastcat.profiles import LanguageProfile, ProfileKind, get_extension, resolve_profile
from fastcat.source import SourceItem, SourceLine
from fastcat.tables import (
    build_table,
    format_md_table,
    format_rainbow_table,
    format_table,
    iter_md_segments,
    looks_like_csv,
    parse_md_block,
)
from fastcat.theme import DEFAULT_THEME, VIM_THEME, Theme, format_line_number, render_tokens
from fastcat.tokenizers import get_tokenizer
from fastcat.tokens import Token

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    """Rendering path chosen for a batch."""

    LINES = "lines"
    TABLE = "table"
    RAINBOW_TABLE = "rainbow_table"
    MARKDOWN_TABLES = "markdown_tables"


@dataclass(frozen=True)
class RenderedLine:
    """One display line.

    Parameters
    ----------
    text : str
        Fully formatted display string, ANSI codes and gutter included
    tokens : tuple[Token, ...] or None
        Tokens of a line-path line; None for table output
    line_number : int or None
        Source line number of a line-path line

    """

    text: str
    tokens: tuple[Token, ...] | None = None
    line_number: int | None = None


@dataclass(frozen=True)
class RenderResult:
    """Output of one render call."""

    mode: RenderMode
    lines: tuple[RenderedLine, ...]
    profile: LanguageProfile | None = None

    @property
    def texts(self) -> list[str]:
        """Display strings of every output line."""
        return [line.text for line in self.lines]


def collect_batch(source: Iterable[SourceItem]) -> list[SourceLine]:
    """Read one batch of input, stopping at the first end marker.

    Plain strings are numbered from 1 in order.
    """
    batch: list[SourceLine] = []
    for item in source:
        if isinstance(item, SourceLine):
            if item.is_end:
                break
            batch.append(item)
        else:
            batch.append(SourceLine(item, len(batch) + 1))
    return batch


class Renderer:
    """Select and run the rendering path for input batches.

    Parameters
    ----------
    options : RenderOptions or None, default None
        Rendering configuration; defaults to ``RenderOptions()``

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`RenderOptions`

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with its options."""
        if options is not None and not isinstance(options, RenderOptions):
            raise InvalidOptionsError(
                component_name="Renderer",
                expected_type=RenderOptions,
                received_type=type(options),
            )
        self.options = options or RenderOptions()
        self.theme: Theme = VIM_THEME if self.options.theme_enabled else DEFAULT_THEME

    def resolve_profile(self, source_name: str | None = None) -> LanguageProfile | None:
        """Resolve the active profile for a source."""
        profile = resolve_profile(source_name, self.options.profile_override)
        if profile is None and self.options.profile_override is not None and not self._csv_syntax_requested():
            logger.warning(f"Unknown syntax {self.options.profile_override!r}; rendering without highlighting")
        return profile

    def render(self, source: Iterable[SourceItem], source_name: str | None = None) -> RenderResult:
        """Render one batch of input lines.

        Parameters
        ----------
        source : Iterable[SourceLine | str]
            Input lines; a ``SourceLine`` with ``is_end`` closes the batch
        source_name : str or None, default None
            Name used for profile detection and ``*.csv`` table selection

        Returns
        -------
        RenderResult
            Chosen mode, profile and display lines

        """
        batch = collect_batch(source)
        profile = self.resolve_profile(source_name)
        options = self.options

        if options.rainbow_enabled:
            table = build_table(batch, options.max_table_rows)
            if table is not None:
                logger.debug("Rendering rainbow table")
                return self._table_result(RenderMode.RAINBOW_TABLE, format_rainbow_table(table), profile)
            logger.debug("Rainbow table produced no rows; falling back to line output")
        elif self._wants_csv_table(batch, source_name):
            table = build_table(batch, options.max_table_rows)
            if table is not None:
                logger.debug("Rendering aligned CSV table")
                return self._table_result(RenderMode.TABLE, format_table(table), profile)
            logger.debug("CSV table produced no rows; falling back to line output")
        elif options.align_markdown_tables or (profile is not None and profile.kind is ProfileKind.MARKDOWN):
            return RenderResult(RenderMode.MARKDOWN_TABLES, tuple(self._render_markdown(batch, profile)), profile)

        return RenderResult(RenderMode.LINES, tuple(self._render_line_path(batch, profile)), profile)

    def render_lines(self, source: Iterable[SourceItem], source_name: str | None = None) -> list[str]:
        """Render a batch and return only the display strings."""
        return self.render(source, source_name).texts

    def _wants_csv_table(self, batch: list[SourceLine], source_name: str | None) -> bool:
        requested = (
            self.options.force_table_mode
            or self._csv_syntax_requested()
            or (source_name is not None and get_extension(source_name) in CSV_EXTENSIONS)
        )
        return requested and bool(batch) and looks_like_csv(batch[0].text)

    def _csv_syntax_requested(self) -> bool:
        override = self.options.profile_override
        return override is not None and override.strip().lower() in CSV_SYNTAX_NAMES

    @staticmethod
    def _table_result(mode: RenderMode, lines: list[str], profile: LanguageProfile | None) -> RenderResult:
        return RenderResult(mode, tuple(RenderedLine(line) for line in lines), profile)

    def _render_line_path(self, batch: Iterable[SourceLine], profile: LanguageProfile | None) -> list[RenderedLine]:
        tokenize = get_tokenizer(profile)
        gutter_theme = self.theme if self.options.theme_enabled else None
        rendered: list[RenderedLine] = []
        for line in batch:
            tokens = tuple(tokenize(line.text))
            text = render_tokens(tokens, self.theme)
            if self.options.line_numbers:
                text = format_line_number(line.line_number, gutter_theme) + text
            rendered.append(RenderedLine(text, tokens=tokens, line_number=line.line_number))
        return rendered

    def _render_markdown(self, batch: list[SourceLine], profile: LanguageProfile | None) -> list[RenderedLine]:
        rendered: list[RenderedLine] = []
        pos = 0
        for segment in iter_md_segments(line.text for line in batch):
            segment_lines = batch[pos : pos + len(segment.lines)]
            pos += len(segment.lines)
            if segment.is_table:
                rendered.extend(RenderedLine(line) for line in format_md_table(parse_md_block(segment.lines)))
            else:
                rendered.extend(self._render_line_path(segment_lines, profile))
        return rendered


def render_document(text: str, options: RenderOptions | None = None, source_name: str | None = None) -> str:
    """Render a block of text and join the display lines with newlines.

    Parameters
    ----------
    text : str
        Input text
    options : RenderOptions or None, default None
        Rendering configuration
    source_name : str or None, default None
        Name used for profile detection

    Returns
    -------
    str
        Rendered output without a trailing newline

    """
    return "\n".join(Renderer(options).render_lines(text.splitlines(), source_name))


__all__ = [
    "RenderMode",
    "RenderResult",
    "RenderedLine",
    "Renderer",
    "collect_batch",
    "render_document",
]

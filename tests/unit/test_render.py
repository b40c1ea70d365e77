"""Unit tests for the render orchestrator and its path calibration."""

import logging
import re

import pytest

from fastcat.constants import RAINBOW_RULE_COLOR
from fastcat.exceptions import InvalidOptionsError
from fastcat.options import RenderOptions
from fastcat.profiles import CPP_PROFILE, MARKDOWN_PROFILE
from fastcat.render import Renderer, RenderMode, collect_batch, render_document
from fastcat.source import SourceLine
from fastcat.tokens import TokenCategory

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

CSV_LINES = ["name,age", "Alice,30", "Bob,7"]


@pytest.mark.unit
class TestRendererSetup:
    """Test construction and option validation."""

    def test_default_options(self):
        """Test that a renderer without options uses the defaults."""
        assert Renderer().options == RenderOptions()

    def test_wrong_options_type(self):
        """Test that non-RenderOptions objects are rejected."""
        with pytest.raises(InvalidOptionsError):
            Renderer({"theme_enabled": True})

    def test_collect_batch_stops_at_end(self):
        """Test batching up to the end record."""
        batch = collect_batch([SourceLine("a", 1), SourceLine("", 0, is_end=True), SourceLine("b", 2)])
        assert [line.text for line in batch] == ["a"]

    def test_collect_batch_numbers_strings(self):
        """Test that plain strings are numbered in order."""
        assert [line.line_number for line in collect_batch(["x", "y"])] == [1, 2]


@pytest.mark.unit
class TestLinePath:
    """Test tokenized line output."""

    def test_pass_through(self):
        """Test that unknown sources render unchanged."""
        result = Renderer().render(["hello", "world"], "notes.txt")
        assert result.mode is RenderMode.LINES
        assert result.profile is None
        assert result.texts == ["hello", "world"]

    def test_profile_from_source_name(self):
        """Test profile detection from the source name."""
        result = Renderer().render(["#include <x>"], "main.c")
        assert result.profile is CPP_PROFILE
        assert result.lines[0].tokens[0].category is TokenCategory.PREPROCESSOR
        assert result.texts[0] != "#include <x>"
        assert ANSI_ESCAPE.sub("", result.texts[0]) == "#include <x>"

    def test_override(self):
        """Test that the profile override wins over the extension."""
        result = Renderer(RenderOptions(profile_override="md")).render(["# T"], "main.c")
        assert result.profile is MARKDOWN_PROFILE

    def test_unknown_override_warns(self, caplog):
        """Test that an unknown override logs a warning and renders plain."""
        with caplog.at_level(logging.WARNING, logger="fastcat.render"):
            result = Renderer(RenderOptions(profile_override="cobol")).render(["MOVE A TO B."], "x.c")
        assert result.texts == ["MOVE A TO B."]
        assert "cobol" in caplog.text

    def test_line_numbers(self):
        """Test the line-number gutter without theme."""
        result = Renderer(RenderOptions(line_numbers=True)).render(["a", "b"])
        assert result.texts == ["     1  a", "     2  b"]
        assert [line.line_number for line in result.lines] == [1, 2]

    def test_line_numbers_follow_source_numbers(self):
        """Test that source line numbers are used for the gutter."""
        result = Renderer(RenderOptions(line_numbers=True)).render([SourceLine("z", 41)])
        assert result.texts == ["    41  z"]

    def test_themed_line_numbers(self):
        """Test that the theme styles the gutter."""
        result = Renderer(RenderOptions(line_numbers=True, theme_enabled=True)).render(["a"])
        assert result.texts[0] == "\x1b[90m     1  \x1b[0ma"

    def test_theme_changes_decoration(self):
        """Test that the vim theme recolors JSON numbers."""
        plain = Renderer().render(['{"n": 1}'], "a.json").texts[0]
        themed = Renderer(RenderOptions(theme_enabled=True)).render(['{"n": 1}'], "a.json").texts[0]
        assert plain != themed
        assert ANSI_ESCAPE.sub("", plain) == ANSI_ESCAPE.sub("", themed) == '{"n": 1}'

    def test_empty_input(self):
        """Test that no input produces no output."""
        assert Renderer().render([]).lines == ()


@pytest.mark.unit
class TestTablePaths:
    """Test CSV and rainbow table selection."""

    def test_forced_table(self):
        """Test the boxed table when forced and the first line looks like CSV."""
        result = Renderer(RenderOptions(force_table_mode=True)).render(CSV_LINES)
        assert result.mode is RenderMode.TABLE
        assert result.texts[1] == "| name  | age |"
        assert len(result.texts) == 7

    def test_forced_table_falls_back(self):
        """Test that a non-CSV first line keeps line output."""
        result = Renderer(RenderOptions(force_table_mode=True)).render(["no commas here", "a,b"])
        assert result.mode is RenderMode.LINES
        assert result.texts == ["no commas here", "a,b"]

    def test_csv_source_name(self):
        """Test that ``*.csv`` sources render as tables without the flag."""
        result = Renderer().render(CSV_LINES, "people.CSV")
        assert result.mode is RenderMode.TABLE

    def test_csv_name_still_gated_by_heuristic(self):
        """Test that a ``*.csv`` source without commas stays line output."""
        assert Renderer().render(["single"], "x.csv").mode is RenderMode.LINES

    def test_tsv_source_name(self):
        """Test that ``*.tsv`` sources select the table path too."""
        assert Renderer().render(CSV_LINES, "people.tsv").mode is RenderMode.TABLE

    def test_csv_syntax_selects_table(self, caplog):
        """Test that ``csv`` as the syntax renders a boxed table without warning."""
        with caplog.at_level(logging.WARNING, logger="fastcat.render"):
            result = Renderer(RenderOptions(profile_override="CSV")).render(["a,b", "ccc,d"])
        assert result.mode is RenderMode.TABLE
        assert result.texts == ["+-----+---+", "| a   | b |", "+-----+---+", "| ccc | d |", "+-----+---+"]
        assert not caplog.records

    def test_rainbow_without_heuristic(self):
        """Test that rainbow mode builds a table even without commas."""
        result = Renderer(RenderOptions(rainbow_enabled=True)).render(["plain"])
        assert result.mode is RenderMode.RAINBOW_TABLE
        assert result.texts[0].startswith(RAINBOW_RULE_COLOR)

    def test_rainbow_empty_falls_back(self):
        """Test that rainbow mode with no rows falls back to line output."""
        result = Renderer(RenderOptions(rainbow_enabled=True)).render([])
        assert result.mode is RenderMode.LINES

    def test_rainbow_wins_over_forced_table(self):
        """Test calibration order."""
        options = RenderOptions(rainbow_enabled=True, force_table_mode=True)
        assert Renderer(options).render(CSV_LINES).mode is RenderMode.RAINBOW_TABLE

    def test_max_rows(self):
        """Test the row limit in table mode."""
        result = Renderer(RenderOptions(force_table_mode=True, max_table_rows=2)).render(CSV_LINES)
        assert len(result.texts) == 5

    def test_tables_never_numbered(self):
        """Test that line numbers do not apply to tables."""
        result = Renderer(RenderOptions(force_table_mode=True, line_numbers=True)).render(CSV_LINES)
        assert result.texts[0].startswith("+")


@pytest.mark.unit
class TestMarkdownTablePath:
    """Test document-level markdown table alignment."""

    def test_tables_aligned_and_text_tokenized(self, markdown_lines):
        """Test that tables are aligned while other lines keep the line path."""
        options = RenderOptions(align_markdown_tables=True)
        result = Renderer(options).render(markdown_lines, "doc.md")
        assert result.mode is RenderMode.MARKDOWN_TABLES
        assert result.texts[2:6] == [
            "| name  | qty |",
            "|-------|-----|",
            "| apple | 3   |",
            "| kiwi  | 12  |",
        ]
        heading = result.lines[0]
        assert heading.tokens[0].category is TokenCategory.HEADING
        assert result.lines[2].tokens is None

    def test_markdown_source_aligned_without_flag(self):
        """Test that a ``*.md`` source aligns its tables by default."""
        result = Renderer().render(["| a | bb |", "|---|---|", "| ccc | d |"], "README.md")
        assert result.mode is RenderMode.MARKDOWN_TABLES
        assert result.texts == ["| a   | bb |", "|-----|----|", "| ccc | d  |"]

    def test_markdown_syntax_aligned_without_flag(self):
        """Test that the markdown syntax override also aligns tables."""
        result = Renderer(RenderOptions(profile_override="md")).render(["a|b", "ccc|d"])
        assert result.texts == ["| a   | b |", "|-----|---|", "| ccc | d |"]

    def test_line_numbers_track_source(self, markdown_lines):
        """Test that text after a table keeps its source line number."""
        options = RenderOptions(align_markdown_tables=True, line_numbers=True)
        result = Renderer(options).render(markdown_lines)
        assert result.texts[-1] == "     8  Some **bold** text."

    def test_render_document(self):
        """Test the whole-text helper."""
        text = render_document("a|b\nccc|d", RenderOptions(align_markdown_tables=True))
        assert text == "| a   | b |\n|-----|---|\n| ccc | d |"

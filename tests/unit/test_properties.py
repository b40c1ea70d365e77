"""Property-based tests for the rendering core.

These tests use Hypothesis to check the invariants every tokenizer, parser
and renderer must hold for arbitrary input lines:

- Tokens of a line always concatenate back to the line, for every profile
- Unquoted fields survive a parse of their comma-joined line
- Column widths bound every cell and every boxed row has the same width
- Rainbow colors repeat every twelve columns
"""

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from fastcat.colors import rainbow_color
from fastcat.profiles import PROFILES
from fastcat.render import Renderer
from fastcat.tables import build_table, format_md_table, format_table, parse_row, split_md_row
from fastcat.tokenizers import get_tokenizer
from fastcat.tokens import join_tokens

# Single lines: no line terminators, no NUL (rejected by csv on Python 3.10)
line_text = st.text(alphabet=st.characters(blacklist_characters="\r\n\x00"), max_size=80)
code_like = st.text(alphabet=st.sampled_from(list('ab #/"\'\\`*_[]()!|-:.,{}0123456789 \t>+etrunl')), max_size=60)
plain_field = st.text(alphabet=st.characters(blacklist_characters=',"\r\n\x00'), max_size=12)

SUPPRESS = [HealthCheck.function_scoped_fixture]


@pytest.mark.unit
@pytest.mark.property
class TestTokenizerProperties:
    """Content preservation for every tokenizer."""

    @pytest.mark.parametrize("profile", [None, *PROFILES], ids=lambda p: p.name if p else "plain")
    @given(line=st.one_of(line_text, code_like))
    @settings(suppress_health_check=SUPPRESS)
    def test_tokens_concatenate_to_line(self, profile, line):
        """Test that token texts rebuild the exact input line."""
        tokens = get_tokenizer(profile)(line)
        assert join_tokens(tokens) == line

    @pytest.mark.parametrize("profile", PROFILES, ids=lambda p: p.name)
    @given(line=st.one_of(line_text, code_like))
    @settings(suppress_health_check=SUPPRESS)
    def test_no_empty_tokens_on_non_empty_lines(self, profile, line):
        """Test that non-empty lines never produce empty tokens."""
        if line:
            assert all(token.text for token in get_tokenizer(profile)(line))


@pytest.mark.unit
@pytest.mark.property
class TestTableProperties:
    """Delimited and markdown table invariants."""

    @given(fields=st.lists(plain_field, min_size=1, max_size=8))
    @settings(suppress_health_check=SUPPRESS)
    def test_unquoted_fields_round_trip(self, fields):
        """Test that plain fields are recovered from their joined line."""
        line = ",".join(fields)
        if line:
            assert [cell.value for cell in parse_row(line)] == fields

    @given(fields=st.lists(st.text(alphabet=st.characters(blacklist_characters="\"\r\n\x00"), max_size=12), min_size=2))
    @settings(suppress_health_check=SUPPRESS)
    def test_quoted_round_trip(self, fields):
        """Test that re-quoting cells that contain commas reproduces the row."""
        line = ",".join(f'"{field}"' if "," in field else field for field in fields)
        assert [cell.value for cell in parse_row(line)] == fields

    @given(line=line_text)
    @settings(suppress_health_check=SUPPRESS)
    def test_cell_count_matches_commas(self, line):
        """Test that unquoted lines give one more cell than commas."""
        if line and '"' not in line:
            assert len(parse_row(line)) == line.count(",") + 1

    @given(lines=st.lists(line_text, min_size=1, max_size=10))
    @settings(suppress_health_check=SUPPRESS)
    def test_widths_bound_cells(self, lines):
        """Test that each column width is the widest cell in that column."""
        table = build_table(lines)
        for col, width in enumerate(table.col_widths):
            cells = [row[col].value for row in table.rows if col < len(row)]
            assert width == max(len(value) for value in cells)

    @given(lines=st.lists(line_text, min_size=1, max_size=10))
    @settings(suppress_health_check=SUPPRESS)
    def test_boxed_rows_share_width(self, lines):
        """Test that every rendered table line has the same length."""
        rendered = format_table(build_table(lines))
        assert len(rendered) == 2 * len(lines) + 1
        assert len({len(line) for line in rendered}) == 1

    @given(rows=st.lists(st.lists(st.text(alphabet="abc xyz", max_size=6), min_size=1, max_size=4), min_size=1))
    @settings(suppress_health_check=SUPPRESS)
    def test_markdown_rows_aligned(self, rows):
        """Test that aligned markdown rows all have equal length and keep their cells."""
        lines = ["| " + " | ".join(cells) + " |" for cells in rows]
        aligned = format_md_table(lines)
        assert len({len(line) for line in aligned}) == 1
        data_lines = [line for i, line in enumerate(aligned) if not (i == 1 and len(rows) > 1)]
        for cells, line in zip(rows, data_lines):
            stripped = [cell.strip() for cell in cells]
            assert split_md_row(line)[: len(stripped)] == stripped


@pytest.mark.unit
@pytest.mark.property
class TestRenderProperties:
    """Orchestrator and color invariants."""

    @given(column=st.integers(min_value=0, max_value=10_000))
    @settings(suppress_health_check=SUPPRESS)
    def test_rainbow_periodicity(self, column):
        """Test that colors repeat every twelve columns."""
        assert rainbow_color(column) == rainbow_color(column + 12)

    @given(lines=st.lists(line_text, max_size=10))
    @settings(suppress_health_check=SUPPRESS)
    def test_pass_through_is_identity(self, lines):
        """Test that unknown sources render every line unchanged."""
        assert Renderer().render_lines(lines, "notes.txt") == lines

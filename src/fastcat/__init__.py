"""fastcat - a terminal text viewer core with syntax highlighting and table alignment.

fastcat turns lines of text into decorated display lines. Source code and data
files are tokenized per language profile and colored with ANSI escapes, while
delimited (CSV) input and markdown pipe tables can be re-rendered as aligned
boxed tables, optionally with one color per column.

Key Features
------------
- Extension-based language profiles (C/C++, Python, Markdown, JSON)
- Lossless per-line tokenizers: joining token texts reproduces the input line
- Quote-aware CSV row parsing into width-measured tables
- Plain and rainbow boxed table renderers
- Markdown table detection and alignment
- Static default and vim-like themes

Examples
--------
Render a CSV document as an aligned table:

    >>> from fastcat import RenderOptions, Renderer
    >>> renderer = Renderer(RenderOptions(force_table_mode=True))
    >>> lines = renderer.render_lines(["name,age", "Alice,30", "Bob,7"])
    >>> lines[1]
    '| name  | age |'

Highlight a line of Python:

    >>> from fastcat import detect, tokenize
    >>> [t.text for t in tokenize("x = 1  # one", detect("a.py"))]
    ['x = 1  ', '# one']

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "fastcat requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from fastcat.colors import rainbow_color
from fastcat.exceptions import (
    FastcatError,
    FileAccessError,
    FileError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from fastcat.options import RenderOptions
from fastcat.profiles import LanguageProfile, ProfileKind, detect, get_profile, resolve_profile
from fastcat.render import RenderedLine, RenderMode, Renderer, RenderResult, render_document
from fastcat.source import SourceLine, iter_file_lines, iter_lines, iter_stream_lines
from fastcat.tables import (
    DelimitedCell,
    DelimitedTable,
    align_md_tables,
    build_table,
    format_md_table,
    format_rainbow_table,
    format_table,
    looks_like_csv,
    looks_like_md_table,
    parse_md_block,
    parse_row,
    split_md_row,
)
from fastcat.theme import DEFAULT_THEME, VIM_THEME, Theme
from fastcat.tokenizers import get_tokenizer, tokenize
from fastcat.tokens import Token, TokenCategory

__all__ = [
    "__version__",
    # Rendering
    "Renderer",
    "RenderMode",
    "RenderResult",
    "RenderedLine",
    "RenderOptions",
    "render_document",
    # Profiles and tokenizers
    "LanguageProfile",
    "ProfileKind",
    "detect",
    "get_profile",
    "resolve_profile",
    "get_tokenizer",
    "tokenize",
    "Token",
    "TokenCategory",
    # Tables
    "DelimitedCell",
    "DelimitedTable",
    "parse_row",
    "looks_like_csv",
    "build_table",
    "format_table",
    "format_rainbow_table",
    "looks_like_md_table",
    "parse_md_block",
    "split_md_row",
    "format_md_table",
    "align_md_tables",
    "rainbow_color",
    # Themes
    "Theme",
    "DEFAULT_THEME",
    "VIM_THEME",
    # Sources
    "SourceLine",
    "iter_lines",
    "iter_stream_lines",
    "iter_file_lines",
    # Exceptions
    "FastcatError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileAccessError",
    "RenderingError",
    "OutputWriteError",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for fastcat.

This module centralizes the hardcoded values used across fastcat: ANSI escape
sequences, the rainbow palette, keyword tables, file extension sets and the
defaults of the rendering options.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. ANSI Escape Sequences - Raw terminal styling codes
3. Language Profiles - Extensions, aliases and keyword tables
4. Table Rendering - Palette and table defaults
5. Input Sources - File size thresholds
6. Rendering Defaults - Defaults for RenderOptions fields
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ProfileName = Literal["cpp", "python", "markdown", "json"]

# =============================================================================
# ANSI Escape Sequences
# =============================================================================

ANSI_RESET = "\033[0m"
ANSI_BRIGHT_BLACK = "\033[90m"

# 256-color foreground template: \033[38;5;<n>m
ANSI_256_FOREGROUND = "\033[38;5;{code}m"

# =============================================================================
# Language Profiles
# =============================================================================

# Extensions are compared lowercased, so ".C" folds into ".c".
CPP_EXTENSIONS = frozenset({".c", ".h", ".cpp", ".hpp", ".cxx", ".hxx", ".cc", ".hh"})
PYTHON_EXTENSIONS = frozenset({".py", ".pyw"})
MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})
JSON_EXTENSIONS = frozenset({".json"})

# Source names with these extensions are treated as delimited tables. The
# delimiter stays a comma, so a tab-only .tsv line fails the CSV check.
CSV_EXTENSIONS = frozenset({".csv", ".tsv"})

# Syntax names that select the delimited table path instead of a profile.
CSV_SYNTAX_NAMES = frozenset({"csv"})

PROFILE_ALIASES: dict[str, ProfileName] = {
    "c": "cpp",
    "cpp": "cpp",
    "c++": "cpp",
    "py": "python",
    "python": "python",
    "md": "markdown",
    "markdown": "markdown",
    "json": "json",
}

CPP_PREPROCESSOR_DIRECTIVES = (
    "#include",
    "#define",
    "#ifdef",
    "#ifndef",
    "#endif",
    "#else",
    "#elif",
    "#pragma",
)

CPP_KEYWORDS = (
    "int", "long", "short", "float", "double", "char", "void", "bool",
    "auto", "const", "static", "extern", "struct", "class", "enum",
    "union", "public", "private", "protected", "virtual", "override",
    "final", "inline", "constexpr", "mutable", "sizeof", "typedef",
    "namespace", "template", "typename", "using", "delete", "noexcept",
    "static_assert", "decltype", "return", "if", "else", "for", "while",
    "do", "switch", "case", "break", "continue", "new", "this", "try",
    "catch", "throw", "nullptr", "true", "false", "NULL", "explicit",
)

PYTHON_KEYWORDS = (
    "def", "class", "if", "elif", "else", "while", "for", "in", "try",
    "except", "finally", "with", "as", "import", "from", "return", "yield",
    "raise", "pass", "break", "continue", "lambda", "and", "or", "not",
    "is", "global", "nonlocal", "assert", "del", "async", "await",
    "True", "False", "None",
)

CPP_LINE_COMMENT = "//"
CPP_BLOCK_COMMENT = ("/*", "*/")
PYTHON_LINE_COMMENT = "#"
MARKDOWN_FENCE = "```"

JSON_LITERALS = ("true", "false", "null")
JSON_BRACKETS = frozenset("{}[]")

MARKDOWN_BULLET_MARKERS = frozenset("-*+")
MARKDOWN_TABLE_SEPARATOR_CHARS = frozenset("|-: \t")

# =============================================================================
# Table Rendering
# =============================================================================

# Hue-ordered 256-color palette: red -> orange -> yellow -> green -> blue -> purple.
RAINBOW_PALETTE: tuple[int, ...] = (
    196,  # red
    202,  # orange-red
    208,  # orange
    214,  # yellow-orange
    220,  # yellow
    226,  # lemon yellow
    46,  # green
    47,  # spring green
    39,  # deep sky blue
    45,  # turquoise blue
    165,  # magenta-purple
    171,  # orchid
)

RAINBOW_RULE_COLOR = ANSI_BRIGHT_BLACK

# =============================================================================
# Input Sources
# =============================================================================

SMALL_FILE_THRESHOLD_BYTES = 1024 * 1024
LARGE_FILE_THRESHOLD_BYTES = 100 * 1024 * 1024

DEFAULT_ENCODING = "utf-8"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_PROFILE_OVERRIDE: str | None = None
DEFAULT_THEME_ENABLED = False
DEFAULT_RAINBOW_ENABLED = False
DEFAULT_FORCE_TABLE_MODE = False
DEFAULT_MAX_TABLE_ROWS = 0
DEFAULT_ALIGN_MARKDOWN_TABLES = False
DEFAULT_LINE_NUMBERS = False

LINE_NUMBER_FORMAT = "{number:6d}  "

ENV_PREFIX = "FASTCAT_"

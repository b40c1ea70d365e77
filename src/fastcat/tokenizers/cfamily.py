#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tokenizers/cfamily.py
"""Tokenizer for C and C++ source lines.

Rules, in priority order:

1. A line starting with a preprocessor directive is one preprocessor token.
2. Double-quoted strings and single-quoted character literals are string
   tokens (backslash-escape aware, unterminated literals run to end of line).
3. ``//`` outside any literal starts a comment consuming the rest of the line.
4. Keywords in the remaining text are bold keyword tokens.

``/* ... */`` comments are not tracked; every line is tokenized on its own.
"""

from __future__ import annotations

from fastcat.constants import CPP_KEYWORDS, CPP_LINE_COMMENT, CPP_PREPROCESSOR_DIRECTIVES
from fastcat.tokenizers._scan import compile_keyword_pattern, scan_code
from fastcat.tokens import Token, TokenCategory

_KEYWORD_PATTERN = compile_keyword_pattern(CPP_KEYWORDS)


def tokenize_cfamily(line: str) -> list[Token]:
    """Tokenize one line of C-family code.

    Parameters
    ----------
    line : str
        Line to tokenize, without its line terminator

    Returns
    -------
    list[Token]
        Tokens concatenating to ``line``

    Examples
    --------
    >>> tokenize_cfamily("#include <x>")
    [Token(text='#include <x>', category=<TokenCategory.PREPROCESSOR: 'preprocessor'>, bold=False)]

    """
    if line.startswith(CPP_PREPROCESSOR_DIRECTIVES):
        return [Token(line, TokenCategory.PREPROCESSOR)]
    return scan_code(line, "\"'", CPP_LINE_COMMENT, _KEYWORD_PATTERN)

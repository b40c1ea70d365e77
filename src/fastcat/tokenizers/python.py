#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tokenizers/python.py
"""Tokenizer for Python source lines."""

from __future__ import annotations

from fastcat.constants import PYTHON_KEYWORDS, PYTHON_LINE_COMMENT
from fastcat.tokenizers._scan import compile_keyword_pattern, scan_code
from fastcat.tokens import Token, TokenCategory

_KEYWORD_PATTERN = compile_keyword_pattern(PYTHON_KEYWORDS)
_TRIPLE_QUOTES = ('"""', "'''")


def tokenize_python(line: str) -> list[Token]:
    """Tokenize one line of Python code.

    A line containing a triple-quote marker anywhere is colored wholesale as a
    string. This is a coarse approximation: lines inside a docstring that do
    not themselves contain the marker are tokenized as code.

    Otherwise single- and double-quoted strings are extracted in the order they
    appear, ``#`` outside a string starts a comment and keywords in the
    remaining text are colored bold.

    Parameters
    ----------
    line : str
        Line to tokenize, without its line terminator

    Returns
    -------
    list[Token]
        Tokens concatenating to ``line``

    """
    if any(marker in line for marker in _TRIPLE_QUOTES):
        return [Token(line, TokenCategory.STRING)]
    return scan_code(line, "\"'", PYTHON_LINE_COMMENT, _KEYWORD_PATTERN)

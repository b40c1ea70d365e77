#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tokenizers/_scan.py
"""Character-level scanning helpers shared by the tokenizers."""

from __future__ import annotations

import re
from typing import Iterable

from fastcat.tokens import Token, TokenCategory


def find_closing_quote(line: str, start: int) -> int:
    """Return the end index of the quoted literal opening at ``start``.

    The character at ``start`` is the opening quote. Backslash escapes skip the
    following character. An unterminated literal runs to the end of the line.

    Parameters
    ----------
    line : str
        Line being scanned
    start : int
        Index of the opening quote

    Returns
    -------
    int
        Index one past the closing quote, or ``len(line)`` if unterminated

    """
    quote = line[start]
    length = len(line)
    pos = start + 1
    while pos < length:
        char = line[pos]
        if char == "\\" and pos + 1 < length:
            pos += 2
        elif char == quote:
            return pos + 1
        else:
            pos += 1
    return length


def compile_keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    """Compile a word-boundary pattern matching any of ``keywords``.

    A keyword only matches when neither neighbor is alphanumeric or an
    underscore. Longer keywords are tried first.
    """
    alternatives = "|".join(re.escape(word) for word in sorted(set(keywords), key=len, reverse=True))
    return re.compile(rf"(?<![A-Za-z0-9_])(?:{alternatives})(?![A-Za-z0-9_])")


def emit(tokens: list[Token], text: str, category: TokenCategory | None = None, bold: bool = False) -> None:
    """Append a token unless its text is empty."""
    if text:
        tokens.append(Token(text, category, bold))


def emit_code(tokens: list[Token], text: str, keywords: re.Pattern[str]) -> None:
    """Append un-highlighted code text, splitting out bold keyword tokens."""
    pos = 0
    for match in keywords.finditer(text):
        emit(tokens, text[pos : match.start()])
        tokens.append(Token(match.group(), TokenCategory.KEYWORD, True))
        pos = match.end()
    emit(tokens, text[pos:])


def finish(tokens: list[Token], line: str) -> list[Token]:
    """Return ``tokens``, or a single plain token for lines that produced none."""
    return tokens if tokens else [Token(line)]


def scan_code(line: str, quotes: str, line_comment: str, keywords: re.Pattern[str]) -> list[Token]:
    """Tokenize one line of C-like or Python-like code.

    Scans left to right. Quoted literals become string tokens, a comment
    marker outside any literal consumes the rest of the line, and the plain
    text in between is split into keyword and unstyled tokens.

    Parameters
    ----------
    line : str
        Line to tokenize
    quotes : str
        Characters that open a quoted literal
    line_comment : str
        Single-line comment marker
    keywords : re.Pattern[str]
        Pattern from :func:`compile_keyword_pattern`

    Returns
    -------
    list[Token]
        Tokens concatenating to ``line``

    """
    tokens: list[Token] = []
    plain_start = 0
    pos = 0
    length = len(line)

    while pos < length:
        char = line[pos]
        if char in quotes:
            emit_code(tokens, line[plain_start:pos], keywords)
            end = find_closing_quote(line, pos)
            tokens.append(Token(line[pos:end], TokenCategory.STRING))
            pos = plain_start = end
        elif line.startswith(line_comment, pos):
            emit_code(tokens, line[plain_start:pos], keywords)
            tokens.append(Token(line[pos:], TokenCategory.COMMENT))
            return tokens
        else:
            pos += 1

    emit_code(tokens, line[plain_start:], keywords)
    return finish(tokens, line)

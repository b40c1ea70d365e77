#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tokenizers/json.py
"""Tokenizer for JSON lines."""

from __future__ import annotations

import re

from fastcat.constants import JSON_BRACKETS, JSON_LITERALS
from fastcat.tokenizers._scan import find_closing_quote, finish
from fastcat.tokens import Token, TokenCategory

_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")


def _is_key(line: str, end: int) -> bool:
    """Whether the next non-blank character after ``end`` is a colon."""
    pos = end
    while pos < len(line) and line[pos] in " \t":
        pos += 1
    return pos < len(line) and line[pos] == ":"


def tokenize_json(line: str) -> list[Token]:
    """Tokenize one line of JSON.

    Scans left to right: strings followed by ``:`` are keys, other strings are
    values; numbers, ``true``/``false``/``null`` and brackets get their own
    tokens; every other character is passed through as a single plain token.

    Parameters
    ----------
    line : str
        Line to tokenize, without its line terminator

    Returns
    -------
    list[Token]
        Tokens concatenating to ``line``

    """
    tokens: list[Token] = []
    pos = 0
    length = len(line)

    while pos < length:
        char = line[pos]

        if char == '"':
            end = find_closing_quote(line, pos)
            category = TokenCategory.KEY if _is_key(line, end) else TokenCategory.STRING
            tokens.append(Token(line[pos:end], category))
            pos = end
            continue

        if char.isascii() and (char.isdigit() or char == "-"):
            number = _NUMBER_RE.match(line, pos)
            if number:
                tokens.append(Token(number.group(), TokenCategory.NUMBER))
                pos = number.end()
                continue

        literal = next((word for word in JSON_LITERALS if line.startswith(word, pos)), None)
        if literal:
            tokens.append(Token(literal, TokenCategory.LITERAL, True))
            pos += len(literal)
            continue

        if char in JSON_BRACKETS:
            tokens.append(Token(char, TokenCategory.BRACKET, True))
        else:
            tokens.append(Token(char))
        pos += 1

    return finish(tokens, line)

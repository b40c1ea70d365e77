#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tokenizers/markdown.py
"""Tokenizer for Markdown lines.

Block-level rules are evaluated against the line with its leading whitespace
stripped, first match wins:

1. block quote (``>``)
2. fenced code delimiter (`````), colored bold as a whole
3. ATX heading (1-6 ``#`` followed by a space)
4. bullet list marker (``-``, ``*`` or ``+`` followed by a space)
5. ordered list marker (digits, ``.``, space)
6. table row
7. inline formatting: inline code, ``**`` bold, ``_`` italic, links and
   images

An inline delimiter extends to the next occurrence of its closing marker, or
to the end of the line when unterminated. Links and images are only styled
when complete; a dangling ``[`` is plain text. The leading whitespace is
always preserved in the token stream.
"""

from __future__ import annotations

import re

from fastcat.constants import MARKDOWN_BULLET_MARKERS, MARKDOWN_FENCE
from fastcat.tables.markdown import looks_like_md_table
from fastcat.tokenizers._scan import emit, finish
from fastcat.tokens import Token, TokenCategory

_HEADING_RE = re.compile(r"#{1,6} ")
_ORDERED_RE = re.compile(r"[0-9]+\. ")


def _table_tokens(tokens: list[Token], content: str) -> None:
    """Split a table row into pipe, separator-run and cell-text tokens."""
    pos = 0
    length = len(content)
    while pos < length:
        char = content[pos]
        if char == "|":
            tokens.append(Token(char, TokenCategory.BRACKET, True))
            pos += 1
            continue

        if char in "-:":
            end = pos
            while end < length and content[end] in "-: ":
                end += 1
            tokens.append(Token(content[pos:end], TokenCategory.STRUCTURAL))
            pos = end
            continue

        end = content.find("|", pos)
        if end < 0:
            end = length
        tokens.append(Token(content[pos:end]))
        pos = end


def _link_end(line: str, bracket: int) -> int | None:
    """Return the end index of ``[text](url)`` whose ``[`` is at ``bracket``."""
    bracket_end = line.find("]", bracket + 1)
    if bracket_end < 0 or bracket_end + 2 >= len(line) or line[bracket_end + 1] != "(":
        return None
    paren_end = line.find(")", bracket_end + 2)
    if paren_end < 0:
        return None
    return paren_end + 1


def _delimited_end(line: str, start: int, marker: str) -> int:
    """Return the end index of a span closed by the next ``marker``, or end of line."""
    close = line.find(marker, start + len(marker))
    if close < 0:
        return len(line)
    return close + len(marker)


def _inline_tokens(line: str, content_start: int) -> list[Token]:
    tokens: list[Token] = []
    plain_start = 0
    pos = content_start
    length = len(line)

    while pos < length:
        char = line[pos]
        end: int | None = None
        category: TokenCategory | None = None
        bold = False

        if char == "`":
            end, category = _delimited_end(line, pos, "`"), TokenCategory.CODE
        elif line.startswith("**", pos):
            end, category, bold = _delimited_end(line, pos, "**"), TokenCategory.STRONG, True
        elif char == "_":
            end, category = _delimited_end(line, pos, "_"), TokenCategory.EMPHASIS
        elif char == "[":
            end, category = _link_end(line, pos), TokenCategory.LINK
        elif line.startswith("![", pos):
            end, category = _link_end(line, pos + 1), TokenCategory.LINK

        if end is None:
            pos += 1
            continue

        emit(tokens, line[plain_start:pos])
        tokens.append(Token(line[pos:end], category, bold))
        pos = plain_start = end

    emit(tokens, line[plain_start:])
    return tokens


def tokenize_markdown(line: str) -> list[Token]:
    """Tokenize one line of Markdown.

    Parameters
    ----------
    line : str
        Line to tokenize, without its line terminator

    Returns
    -------
    list[Token]
        Tokens concatenating to ``line``

    """
    content = line.lstrip(" \t")
    content_start = len(line) - len(content)
    indent = line[:content_start]
    tokens: list[Token] = []

    if content.startswith(">"):
        emit(tokens, line[: content_start + 1], TokenCategory.STRUCTURAL)
        emit(tokens, line[content_start + 1 :], TokenCategory.QUOTE)
        return tokens

    if content.startswith(MARKDOWN_FENCE):
        emit(tokens, indent)
        emit(tokens, content, TokenCategory.FENCE, True)
        return tokens

    heading = _HEADING_RE.match(content)
    if heading:
        emit(tokens, indent)
        emit(tokens, heading.group(), TokenCategory.HEADING, True)
        emit(tokens, content[heading.end() :])
        return tokens

    if content[:1] in MARKDOWN_BULLET_MARKERS and content[1:2] == " ":
        emit(tokens, indent)
        emit(tokens, content[:2], TokenCategory.LIST_MARKER, True)
        emit(tokens, content[2:])
        return tokens

    ordered = _ORDERED_RE.match(content)
    if ordered:
        emit(tokens, indent)
        emit(tokens, ordered.group(), TokenCategory.LIST_MARKER)
        emit(tokens, content[ordered.end() :])
        return tokens

    if content.startswith("|") or looks_like_md_table(content):
        emit(tokens, indent)
        _table_tokens(tokens, content)
        return tokens

    return finish(_inline_tokens(line, content_start), line)

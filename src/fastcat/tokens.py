#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/tokens.py
"""Token model shared by all tokenizers.

A token is a contiguous run of one input line with an optional semantic
category and a boldness flag. The tokens produced for a line always
concatenate back to that exact line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class TokenCategory(str, Enum):
    """Semantic category of a styled token.

    Categories are resolved to concrete terminal styles by
    :class:`fastcat.theme.Theme`, so switching themes never requires
    re-tokenizing.
    """

    KEYWORD = "keyword"
    STRING = "string"
    KEY = "key"
    COMMENT = "comment"
    NUMBER = "number"
    LITERAL = "literal"
    BRACKET = "bracket"
    STRUCTURAL = "structural"
    PREPROCESSOR = "preprocessor"
    QUOTE = "quote"
    FENCE = "fence"
    HEADING = "heading"
    LIST_MARKER = "list_marker"
    CODE = "code"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    LINK = "link"


@dataclass(frozen=True)
class Token:
    """A styled, contiguous text run within one line.

    Parameters
    ----------
    text : str
        The exact characters of the run
    category : TokenCategory or None, default None
        Semantic category; None means unstyled text
    bold : bool, default False
        Whether the run is rendered bold in addition to its category style

    """

    text: str
    category: TokenCategory | None = None
    bold: bool = False

    @property
    def is_plain(self) -> bool:
        """Whether the token carries no styling at all."""
        return self.category is None and not self.bold


def join_tokens(tokens: Iterable[Token]) -> str:
    """Concatenate token texts back into the original line."""
    return "".join(token.text for token in tokens)

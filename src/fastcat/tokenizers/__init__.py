#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Per-profile line tokenizers.

Each tokenizer is a pure function ``(line) -> list[Token]`` with no state
carried between lines. The tokenizer for a profile is resolved once with
:func:`get_tokenizer`; ``None`` selects the pass-through tokenizer.

Examples
--------
    >>> from fastcat.profiles import get_profile
    >>> tokenize = get_tokenizer(get_profile("json"))
    >>> [t.text for t in tokenize('{"a": 1}')]
    ['{', '"a"', ':', ' ', '1', '}']

"""

from __future__ import annotations

from typing import Callable

from fastcat.profiles import LanguageProfile, ProfileKind
from fastcat.tokenizers.cfamily import tokenize_cfamily
from fastcat.tokenizers.json import tokenize_json
from fastcat.tokenizers.markdown import tokenize_markdown
from fastcat.tokenizers.python import tokenize_python
from fastcat.tokens import Token

Tokenizer = Callable[[str], list[Token]]


def tokenize_plain(line: str) -> list[Token]:
    """Return the whole line as one unstyled token."""
    return [Token(line)]


_TOKENIZERS: dict[ProfileKind, Tokenizer] = {
    ProfileKind.CPP: tokenize_cfamily,
    ProfileKind.PYTHON: tokenize_python,
    ProfileKind.MARKDOWN: tokenize_markdown,
    ProfileKind.JSON: tokenize_json,
}


def get_tokenizer(profile: LanguageProfile | None) -> Tokenizer:
    """Resolve the tokenizer function for a profile.

    Parameters
    ----------
    profile : LanguageProfile or None
        Active profile; None selects pass-through

    Returns
    -------
    Tokenizer
        Function mapping one line to its tokens

    """
    if profile is None:
        return tokenize_plain
    return _TOKENIZERS[profile.kind]


def tokenize(line: str, profile: LanguageProfile | None = None) -> list[Token]:
    """Tokenize a single line with the given profile."""
    return get_tokenizer(profile)(line)


__all__ = [
    "Tokenizer",
    "get_tokenizer",
    "tokenize",
    "tokenize_cfamily",
    "tokenize_json",
    "tokenize_markdown",
    "tokenize_plain",
    "tokenize_python",
]

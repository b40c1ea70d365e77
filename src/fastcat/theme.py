#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/theme.py
"""Static themes and token decoration.

A :class:`Theme` maps token categories to rich :class:`~rich.style.Style`
objects. Decoration renders each token to ANSI text using the standard
16-color system, so output does not depend on terminal detection.

Two themes ship with fastcat:

- ``DEFAULT_THEME`` reproduces the classic fastcat colors (keywords blue,
  strings yellow, comments dim, JSON keys magenta, numbers cyan, ...).
- ``VIM_THEME`` is the vim-like dark theme enabled with ``--theme``; it
  substitutes number and line-number colors and bolds keywords.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from rich.color import ColorSystem
from rich.style import Style

from fastcat.constants import LINE_NUMBER_FORMAT
from fastcat.tokens import Token, TokenCategory

_BOLD = Style(bold=True)


@dataclass(frozen=True)
class Theme:
    """Category-to-style mapping used to decorate tokens.

    Parameters
    ----------
    name : str
        Theme identifier
    styles : Mapping[TokenCategory, Style]
        Style for each category; categories absent from the mapping render
        unstyled
    line_number : Style
        Style of the line-number gutter

    """

    name: str
    styles: Mapping[TokenCategory, Style] = field(default_factory=dict)
    line_number: Style = field(default_factory=Style)

    def style_for(self, token: Token) -> Style | None:
        """Return the combined style of a token, or None for plain text."""
        style = self.styles.get(token.category) if token.category is not None else None
        if token.bold:
            style = style + _BOLD if style is not None else _BOLD
        return style

    def with_overrides(self, name: str, overrides: Mapping[TokenCategory, Style], **kwargs: Style) -> Theme:
        """Create a new theme substituting some category styles."""
        styles = dict(self.styles)
        styles.update(overrides)
        return Theme(name=name, styles=MappingProxyType(styles), line_number=kwargs.get("line_number", self.line_number))


DEFAULT_THEME = Theme(
    name="default",
    styles=MappingProxyType(
        {
            TokenCategory.KEYWORD: Style(color="blue"),
            TokenCategory.STRING: Style(color="yellow"),
            TokenCategory.KEY: Style(color="magenta"),
            TokenCategory.COMMENT: Style(dim=True),
            TokenCategory.NUMBER: Style(color="cyan"),
            TokenCategory.LITERAL: Style(color="green"),
            TokenCategory.BRACKET: Style(color="bright_red"),
            TokenCategory.STRUCTURAL: Style(dim=True),
            TokenCategory.PREPROCESSOR: Style(color="green"),
            TokenCategory.QUOTE: Style(color="cyan"),
            TokenCategory.FENCE: Style(color="green"),
            TokenCategory.HEADING: Style(color="blue"),
            TokenCategory.LIST_MARKER: Style(color="green"),
            TokenCategory.CODE: Style(color="yellow"),
            TokenCategory.STRONG: Style(bold=True),
            TokenCategory.EMPHASIS: Style(italic=True),
            TokenCategory.LINK: Style(color="cyan"),
        }
    ),
    line_number=Style(dim=True),
)

VIM_THEME = DEFAULT_THEME.with_overrides(
    "vim-dark",
    {
        TokenCategory.KEYWORD: Style(color="blue", bold=True),
        TokenCategory.STRING: Style(color="yellow"),
        TokenCategory.NUMBER: Style(color="magenta"),
        TokenCategory.COMMENT: Style(dim=True),
    },
    line_number=Style(color="bright_black"),
)


def render_text(text: str, style: Style | None) -> str:
    """Render text with a style as ANSI, or unchanged when unstyled."""
    if style is None or not text:
        return text
    return style.render(text, color_system=ColorSystem.STANDARD)


def render_token(token: Token, theme: Theme = DEFAULT_THEME) -> str:
    """Render one token to ANSI text."""
    return render_text(token.text, theme.style_for(token))


def render_tokens(tokens: Iterable[Token], theme: Theme = DEFAULT_THEME) -> str:
    """Render a line's tokens to one ANSI string."""
    return "".join(render_token(token, theme) for token in tokens)


def format_line_number(line_number: int, theme: Theme | None = None) -> str:
    """Return the line-number gutter, styled when a theme is given."""
    gutter = LINE_NUMBER_FORMAT.format(number=line_number)
    if theme is None:
        return gutter
    return render_text(gutter, theme.line_number)

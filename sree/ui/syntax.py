"""Syntax highlighting of code into styled spans."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.token import Token
from pygments.util import ClassNotFound

from sree.ui.text import Color, Span, Style

_BASE03 = (101, 115, 126)
_BASE05 = (192, 197, 206)
_BASE08 = (191, 97, 106)
_BASE09 = (208, 135, 112)
_BASE0A = (235, 203, 139)
_BASE0B = (163, 190, 140)
_BASE0C = (150, 181, 180)
_BASE0D = (143, 161, 179)
_BASE0E = (180, 142, 173)
_BASE0F = (171, 121, 103)

# A dark ocean-blue palette keyed by token type; lookups fall back to parents.
_OCEAN_DARK: dict[Any, tuple[int, int, int]] = {
    Token: _BASE05,
    Token.Comment: _BASE03,
    Token.Keyword: _BASE0E,
    Token.Keyword.Constant: _BASE09,
    Token.Keyword.Type: _BASE0A,
    Token.Name: _BASE05,
    Token.Name.Attribute: _BASE0D,
    Token.Name.Builtin: _BASE0C,
    Token.Name.Class: _BASE0A,
    Token.Name.Constant: _BASE09,
    Token.Name.Decorator: _BASE0D,
    Token.Name.Exception: _BASE0A,
    Token.Name.Function: _BASE0D,
    Token.Name.Namespace: _BASE0A,
    Token.Name.Tag: _BASE08,
    Token.Name.Variable: _BASE08,
    Token.Literal: _BASE09,
    Token.Literal.Number: _BASE09,
    Token.Literal.String: _BASE0B,
    Token.Literal.String.Escape: _BASE0C,
    Token.Literal.String.Regex: _BASE0C,
    Token.Literal.String.Interpol: _BASE0F,
    Token.Operator: _BASE05,
    Token.Operator.Word: _BASE0E,
    Token.Punctuation: _BASE05,
    Token.Generic.Deleted: _BASE08,
    Token.Generic.Inserted: _BASE0B,
    Token.Generic.Heading: _BASE0D,
    Token.Generic.Subheading: _BASE0D,
    Token.Error: _BASE08,
}


@lru_cache(maxsize=128)
def _lexer_for(lang: str) -> Lexer:
    """Find a lexer by name or alias, then by file extension, else plain text."""
    options = {"stripnl": False, "ensurenl": False}
    try:
        return get_lexer_by_name(lang, **options)
    except ClassNotFound:
        pass
    try:
        return get_lexer_for_filename(f"file.{lang}", **options)
    except ClassNotFound:
        return TextLexer(**options)


class SyntaxHighlighter:
    """Turns source code into spans coloured by token type."""

    def __init__(self) -> None:
        self._palette = dict(_OCEAN_DARK)

    def _color(self, token_type: Any) -> Color:
        current = token_type
        while current not in self._palette:
            current = current.parent
        return Color.rgb(*self._palette[current])

    def highlight(self, code: str, lang: str) -> list[Span]:
        """Coloured spans whose contents together spell out the code."""
        return [
            Span.styled(value, Style().fg(self._color(token_type)))
            for token_type, value in _lexer_for(lang).get_tokens(code)
            if value
        ]


@lru_cache(maxsize=1)
def _shared() -> SyntaxHighlighter:
    return SyntaxHighlighter()


def highlight_code(code: str, lang: str) -> list[Span]:
    """Highlight with a shared highlighter; empty output becomes one white span."""
    spans = _shared().highlight(code, lang)
    if not spans:
        spans.append(Span.styled(code, Style().fg(Color.WHITE)))
    return spans
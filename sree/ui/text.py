"""Styled terminal text primitives: colours, modifiers, styles, spans and lines."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Flag, auto
from typing import ClassVar, Iterable


@dataclass(frozen=True)
class Color:
    """A terminal colour, either a named palette entry or a 24-bit RGB value."""

    name: str
    components: tuple[int, int, int] | None = None

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    WHITE: ClassVar[Color]

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Build a 24-bit colour; each component must lie in 0..255."""
        for component in (r, g, b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        return cls("rgb", (r, g, b))


Color.RESET = Color("reset")
Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.MAGENTA = Color("magenta")
Color.CYAN = Color("cyan")
Color.GRAY = Color("gray")
Color.DARK_GRAY = Color("dark_gray")
Color.WHITE = Color("white")


class Modifier(Flag):
    """Text attributes that can be combined."""

    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    REVERSED = auto()
    CROSSED_OUT = auto()


@dataclass(frozen=True)
class Style:
    """Foreground, background and modifiers applied to a span of text."""

    foreground: Color | None = None
    background: Color | None = None
    modifiers: Modifier = Modifier(0)

    def fg(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def bg(self, color: Color) -> Style:
        return replace(self, background=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        return replace(self, modifiers=self.modifiers | modifier)


@dataclass(frozen=True)
class Span:
    """A run of text with a single style."""

    content: str
    style: Style = field(default_factory=Style)

    @classmethod
    def raw(cls, content: str) -> Span:
        return cls(content)

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        return cls(content, style)


@dataclass(frozen=True)
class Line:
    """A single line of styled spans."""

    spans: tuple[Span, ...] = ()

    def __init__(self, spans: Iterable[Span] = ()) -> None:
        object.__setattr__(self, "spans", tuple(spans))

    @classmethod
    def from_text(cls, text: str) -> Line:
        """A line holding the text as a single unstyled span."""
        return cls([Span.raw(text)])

    def plain(self) -> str:
        """The line's text with all styling dropped."""
        return "".join(span.content for span in self.spans)
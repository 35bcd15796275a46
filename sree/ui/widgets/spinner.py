"""An animated busy indicator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from sree.ui.text import Color, Line, Span, Style


@dataclass
class Spinner:
    """Cycles through braille frames while the assistant is working."""

    FRAMES: ClassVar[tuple[str, ...]] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

    frame: int = 0

    def tick(self) -> None:
        self.frame = (self.frame + 1) % len(self.FRAMES)

    def render(self) -> Line:
        return Line(
            [
                Span.styled(self.FRAMES[self.frame], Style().fg(Color.CYAN)),
                Span.raw(" Thinking..."),
            ]
        )
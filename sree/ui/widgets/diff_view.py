"""A simple line-by-line diff display."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import zip_longest

from sree.ui.text import Color, Line, Span, Style


class DiffKind(Enum):
    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"


@dataclass(frozen=True)
class DiffLine:
    kind: DiffKind
    text: str


def _lines(content: str) -> list[str]:
    parts = content.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if last:
        lines.append(last)
    return lines


@dataclass
class DiffView:
    lines: list[DiffLine] = field(default_factory=list)

    @classmethod
    def from_strings(cls, old: str, new: str) -> DiffView:
        """Compare two texts position by position, line for line."""
        lines: list[DiffLine] = []
        for old_line, new_line in zip_longest(_lines(old), _lines(new)):
            if old_line is not None and new_line is not None:
                if old_line == new_line:
                    lines.append(DiffLine(DiffKind.CONTEXT, old_line))
                else:
                    lines.append(DiffLine(DiffKind.REMOVED, old_line))
                    lines.append(DiffLine(DiffKind.ADDED, new_line))
            elif old_line is not None:
                lines.append(DiffLine(DiffKind.REMOVED, old_line))
            else:
                lines.append(DiffLine(DiffKind.ADDED, new_line))
        return cls(lines)

    def render(self) -> list[Line]:
        return [_render_line(line) for line in self.lines]


def _render_line(line: DiffLine) -> Line:
    if line.kind is DiffKind.ADDED:
        style = Style().fg(Color.GREEN)
        return Line([Span.styled("+ ", style), Span.styled(line.text, style)])
    if line.kind is DiffKind.REMOVED:
        style = Style().fg(Color.RED)
        return Line([Span.styled("- ", style), Span.styled(line.text, style)])
    return Line([Span.raw("  "), Span.raw(line.text)])
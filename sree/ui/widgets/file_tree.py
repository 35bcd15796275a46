"""An indented file tree display."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from sree.ui.text import Color, Line, Span, Style


@dataclass
class FileTreeNode:
    name: str
    is_dir: bool
    depth: int = 0
    children: list[FileTreeNode] = field(default_factory=list)

    def render(self) -> list[Line]:
        """This node and all its descendants, one line each, pre-order."""
        return list(self._lines())

    def _lines(self) -> Iterator[Line]:
        icon = "📁" if self.is_dir else "📄"
        style = Style().fg(Color.CYAN if self.is_dir else Color.WHITE)
        yield Line(
            [
                Span.raw("  " * self.depth),
                Span.styled(icon, style),
                Span.raw(" "),
                Span.styled(self.name, style),
            ]
        )
        for child in self.children:
            yield from child._lines()
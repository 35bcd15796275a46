"""A collapsible display of one tool call and its result."""

from __future__ import annotations

from dataclasses import dataclass

from sree.message import ToolCallStatus
from sree.ui.text import Color, Line, Modifier, Span, Style

INPUT_LIMIT = 80
RESULT_LIMIT = 200

_STATUS_LOOK = {
    ToolCallStatus.PENDING: ("⏳", Color.YELLOW),
    ToolCallStatus.RUNNING: ("⚙", Color.CYAN),
    ToolCallStatus.SUCCESS: ("✓", Color.GREEN),
    ToolCallStatus.ERROR: ("✗", Color.RED),
}


def _shorten(text: str, limit: int, expanded: bool) -> str:
    if len(text) > limit and not expanded:
        return text[: limit - 3] + "..."
    return text


@dataclass
class ToolCallWidget:
    name: str
    input: str
    status: ToolCallStatus
    result: str | None = None
    expanded: bool = False

    def set_result(self, result: str) -> None:
        self.result = result

    def toggle_expanded(self) -> None:
        self.expanded = not self.expanded

    @property
    def border_style(self) -> Style:
        """Style of the box drawn around the call, coloured by status."""
        return Style().fg(_STATUS_LOOK[self.status][1])

    def render(self) -> list[Line]:
        """The lines shown inside the call's box."""
        icon, color = _STATUS_LOOK[self.status]
        lines = [
            Line(
                [
                    Span.styled(icon, Style().fg(color)),
                    Span.raw(" Tool: "),
                    Span.styled(self.name, Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)),
                ]
            )
        ]

        if self.input:
            lines.append(
                Line(
                    [
                        Span.raw("├─ Input: "),
                        Span.styled(
                            _shorten(self.input, INPUT_LIMIT, self.expanded),
                            Style().fg(Color.GRAY),
                        ),
                    ]
                )
            )

        if self.result is not None:
            lines.append(
                Line(
                    [
                        Span.raw("└─ Result: "),
                        Span.styled(
                            _shorten(self.result, RESULT_LIMIT, self.expanded),
                            Style().fg(Color.WHITE),
                        ),
                    ]
                )
            )
            if len(self.result) > RESULT_LIMIT:
                hint = "  [Press 't' to collapse]" if self.expanded else "  [Press 't' to expand]"
                lines.append(Line([Span.styled(hint, Style().fg(Color.DARK_GRAY))]))

        return lines
"""The one-line status bar at the bottom of the screen."""

from __future__ import annotations

from sree.ui.text import Color, Line, Span, Style


def render_status_bar(mode: str, help_text: str) -> Line:
    """Current mode followed by key help."""
    return Line(
        [
            Span.styled(f" [{mode}] ", Style().fg(Color.CYAN)),
            Span.raw("│ "),
            Span.styled(help_text, Style().fg(Color.DARK_GRAY)),
        ]
    )
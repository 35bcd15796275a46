"""The one-line header at the top of the screen."""

from __future__ import annotations

from sree.ui.text import Color, Line, Modifier, Span, Style


def render_header(version: str, model: str, token_count: int, max_tokens: int) -> Line:
    """Application name, version, model and token usage."""
    return Line(
        [
            Span.styled(" 🤖 sree ", Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)),
            Span.styled(f"v{version}", Style().fg(Color.DARK_GRAY)),
            Span.raw(" │ "),
            Span.styled(model, Style().fg(Color.YELLOW)),
            Span.raw(" │ "),
            Span.styled(f"tokens: {token_count}/{max_tokens}", Style().fg(Color.GREEN)),
        ]
    )
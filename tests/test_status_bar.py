from sree.ui.status_bar import render_status_bar
from sree.ui.text import Color, Style


def test_status_bar_text():
    line = render_status_bar("chat", "Ctrl+C to quit")
    assert line.plain() == " [chat] │ Ctrl+C to quit"


def test_status_bar_styles():
    spans = render_status_bar("tools", "help").spans
    assert spans[0].style == Style().fg(Color.CYAN)
    assert spans[1].style == Style()
    assert spans[2].style == Style().fg(Color.DARK_GRAY)
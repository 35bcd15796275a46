import pytest

from sree.message import ToolCallStatus
from sree.ui.text import Color, Modifier, Style
from sree.ui.widgets.tool_call import ToolCallWidget


def test_short_call_renders_header_and_input():
    widget = ToolCallWidget("bash", '{"command": "ls"}', ToolCallStatus.RUNNING)
    lines = widget.render()
    assert [line.plain() for line in lines] == ["⚙ Tool: bash", '├─ Input: {"command": "ls"}']
    assert lines[0].spans[2].style == Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)


def test_empty_input_is_omitted():
    widget = ToolCallWidget("glob", "", ToolCallStatus.PENDING)
    assert [line.plain() for line in widget.render()] == ["⏳ Tool: glob"]


def test_long_input_is_truncated_unless_expanded():
    long_input = "x" * 100
    widget = ToolCallWidget("bash", long_input, ToolCallStatus.PENDING)
    assert widget.render()[1].spans[1].content == "x" * 77 + "..."
    widget.toggle_expanded()
    assert widget.render()[1].spans[1].content == long_input


def test_long_result_shows_hint():
    widget = ToolCallWidget("grep", "", ToolCallStatus.SUCCESS)
    widget.set_result("r" * 250)
    lines = widget.render()
    assert lines[1].spans[1].content == "r" * 197 + "..."
    assert lines[2].plain() == "  [Press 't' to expand]"
    widget.toggle_expanded()
    lines = widget.render()
    assert lines[1].spans[1].content == "r" * 250
    assert lines[2].plain() == "  [Press 't' to collapse]"


def test_short_result_has_no_hint():
    widget = ToolCallWidget("grep", "", ToolCallStatus.SUCCESS, result="done")
    assert [line.plain() for line in widget.render()] == ["✓ Tool: grep", "└─ Result: done"]


def test_toggle_flips_state():
    widget = ToolCallWidget("bash", "", ToolCallStatus.ERROR)
    widget.toggle_expanded()
    widget.toggle_expanded()
    assert widget.expanded is False


@pytest.mark.parametrize(
    "status, icon, color",
    [
        (ToolCallStatus.PENDING, "⏳", Color.YELLOW),
        (ToolCallStatus.RUNNING, "⚙", Color.CYAN),
        (ToolCallStatus.SUCCESS, "✓", Color.GREEN),
        (ToolCallStatus.ERROR, "✗", Color.RED),
    ],
)
def test_status_icon_and_border(status, icon, color):
    widget = ToolCallWidget("t", "", status)
    first = widget.render()[0].spans[0]
    assert first.content == icon
    assert first.style == Style().fg(color)
    assert widget.border_style == Style().fg(color)
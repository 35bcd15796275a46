from sree.ui.text import Color, Style
from sree.ui.widgets.spinner import Spinner


def test_initial_render():
    line = Spinner().render()
    assert line.plain() == "⠋ Thinking..."
    assert line.spans[0].style == Style().fg(Color.CYAN)


def test_tick_advances_frame():
    spinner = Spinner()
    spinner.tick()
    assert spinner.render().spans[0].content == "⠙"


def test_frames_wrap_around():
    spinner = Spinner()
    seen = []
    for _ in range(len(Spinner.FRAMES)):
        seen.append(spinner.render().spans[0].content)
        spinner.tick()
    assert seen == list(Spinner.FRAMES)
    assert spinner.frame == 0
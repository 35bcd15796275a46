"""Division of the screen into header, chat, input and status areas."""

from __future__ import annotations

from dataclasses import dataclass

HEADER_HEIGHT = 1
INPUT_HEIGHT = 3
STATUS_HEIGHT = 1


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class AppLayout:
    header: Rect
    chat: Rect
    input: Rect
    status: Rect

    @classmethod
    def from_area(cls, area: Rect) -> AppLayout:
        """Stack the four areas vertically; the chat takes whatever is left.

        When the area is too short for the fixed rows, they are filled in the
        order header, input, status and the chat gets nothing.
        """
        fixed = HEADER_HEIGHT + INPUT_HEIGHT + STATUS_HEIGHT
        height = max(area.height, 0)
        if height >= fixed:
            heights = (HEADER_HEIGHT, height - fixed, INPUT_HEIGHT, STATUS_HEIGHT)
        else:
            header = min(HEADER_HEIGHT, height)
            input_rows = min(INPUT_HEIGHT, height - header)
            status = min(STATUS_HEIGHT, height - header - input_rows)
            heights = (header, 0, input_rows, status)

        rects = []
        y = area.y
        for rows in heights:
            rects.append(Rect(area.x, y, area.width, rows))
            y += rows
        return cls(*rects)
"""Colour themes for the terminal interface."""

from __future__ import annotations

from dataclasses import dataclass

from sree.ui.text import Color, Modifier, Style

_THEME_NAMES = ["dark", "light", "monokai", "dracula", "nord", "solarized"]


def _bold(color: Color) -> Style:
    return Style().fg(color).add_modifier(Modifier.BOLD)


@dataclass(frozen=True)
class Theme:
    """The set of styles and colours used to draw the interface."""

    name: str
    user_message: Style
    assistant_message: Style
    system_message: Style
    tool_pending: Color
    tool_running: Color
    tool_success: Color
    tool_error: Color
    code_block_bg: Color
    header_bg: Color
    status_bar_bg: Color
    input_border: Color
    separator: Color

    @classmethod
    def dark(cls) -> Theme:
        return cls(
            name="dark",
            user_message=_bold(Color.CYAN),
            assistant_message=Style().fg(Color.WHITE),
            system_message=Style().fg(Color.YELLOW),
            tool_pending=Color.YELLOW,
            tool_running=Color.CYAN,
            tool_success=Color.GREEN,
            tool_error=Color.RED,
            code_block_bg=Color.rgb(40, 42, 54),
            header_bg=Color.rgb(30, 30, 46),
            status_bar_bg=Color.rgb(30, 30, 46),
            input_border=Color.CYAN,
            separator=Color.DARK_GRAY,
        )

    @classmethod
    def light(cls) -> Theme:
        return cls(
            name="light",
            user_message=_bold(Color.BLUE),
            assistant_message=Style().fg(Color.BLACK),
            system_message=Style().fg(Color.rgb(180, 100, 0)),
            tool_pending=Color.rgb(200, 150, 0),
            tool_running=Color.BLUE,
            tool_success=Color.GREEN,
            tool_error=Color.RED,
            code_block_bg=Color.rgb(245, 245, 245),
            header_bg=Color.rgb(230, 230, 230),
            status_bar_bg=Color.rgb(230, 230, 230),
            input_border=Color.BLUE,
            separator=Color.GRAY,
        )

    @classmethod
    def monokai(cls) -> Theme:
        bg = Color.rgb(39, 40, 34)
        return cls(
            name="monokai",
            user_message=_bold(Color.rgb(102, 217, 239)),
            assistant_message=Style().fg(Color.rgb(248, 248, 242)),
            system_message=Style().fg(Color.rgb(230, 219, 116)),
            tool_pending=Color.rgb(230, 219, 116),
            tool_running=Color.rgb(102, 217, 239),
            tool_success=Color.rgb(166, 226, 46),
            tool_error=Color.rgb(249, 38, 114),
            code_block_bg=bg,
            header_bg=bg,
            status_bar_bg=bg,
            input_border=Color.rgb(102, 217, 239),
            separator=Color.rgb(117, 113, 94),
        )

    @classmethod
    def dracula(cls) -> Theme:
        bg = Color.rgb(40, 42, 54)
        return cls(
            name="dracula",
            user_message=_bold(Color.rgb(139, 233, 253)),
            assistant_message=Style().fg(Color.rgb(248, 248, 242)),
            system_message=Style().fg(Color.rgb(241, 250, 140)),
            tool_pending=Color.rgb(241, 250, 140),
            tool_running=Color.rgb(139, 233, 253),
            tool_success=Color.rgb(80, 250, 123),
            tool_error=Color.rgb(255, 85, 85),
            code_block_bg=bg,
            header_bg=bg,
            status_bar_bg=bg,
            input_border=Color.rgb(189, 147, 249),
            separator=Color.rgb(68, 71, 90),
        )

    @classmethod
    def nord(cls) -> Theme:
        bg = Color.rgb(46, 52, 64)
        return cls(
            name="nord",
            user_message=_bold(Color.rgb(136, 192, 208)),
            assistant_message=Style().fg(Color.rgb(236, 239, 244)),
            system_message=Style().fg(Color.rgb(235, 203, 139)),
            tool_pending=Color.rgb(235, 203, 139),
            tool_running=Color.rgb(136, 192, 208),
            tool_success=Color.rgb(163, 190, 140),
            tool_error=Color.rgb(191, 97, 106),
            code_block_bg=bg,
            header_bg=bg,
            status_bar_bg=bg,
            input_border=Color.rgb(129, 161, 193),
            separator=Color.rgb(76, 86, 106),
        )

    @classmethod
    def solarized(cls) -> Theme:
        bg = Color.rgb(0, 43, 54)
        return cls(
            name="solarized",
            user_message=_bold(Color.rgb(38, 139, 210)),
            assistant_message=Style().fg(Color.rgb(131, 148, 150)),
            system_message=Style().fg(Color.rgb(181, 137, 0)),
            tool_pending=Color.rgb(181, 137, 0),
            tool_running=Color.rgb(38, 139, 210),
            tool_success=Color.rgb(133, 153, 0),
            tool_error=Color.rgb(220, 50, 47),
            code_block_bg=bg,
            header_bg=bg,
            status_bar_bg=bg,
            input_border=Color.rgb(42, 161, 152),
            separator=Color.rgb(88, 110, 117),
        )

    @classmethod
    def from_name(cls, name: str) -> Theme:
        """Look a theme up by name; unknown names give the dark theme."""
        factories = {
            "light": cls.light,
            "monokai": cls.monokai,
            "dracula": cls.dracula,
            "nord": cls.nord,
            "solarized": cls.solarized,
        }
        return factories.get(name, cls.dark)()

    @classmethod
    def available_themes(cls) -> list[str]:
        return list(_THEME_NAMES)
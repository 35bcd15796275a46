import pytest

from sree.ui.text import Color, Modifier
from sree.ui.theme import Theme


def test_available_themes_order():
    assert Theme.available_themes() == ["dark", "light", "monokai", "dracula", "nord", "solarized"]


@pytest.mark.parametrize("name", ["dark", "light", "monokai", "dracula", "nord", "solarized"])
def test_from_name_round_trip(name):
    assert Theme.from_name(name).name == name


def test_unknown_name_falls_back_to_dark():
    assert Theme.from_name("no-such-theme") == Theme.dark()


def test_dark_theme_values():
    theme = Theme.dark()
    assert theme.input_border == Color.CYAN
    assert theme.code_block_bg == Color.rgb(40, 42, 54)
    assert theme.separator == Color.DARK_GRAY


def test_user_message_is_bold_in_every_theme():
    for name in Theme.available_themes():
        assert Modifier.BOLD in Theme.from_name(name).user_message.modifiers


def test_available_themes_returns_fresh_list():
    names = Theme.available_themes()
    names.append("extra")
    assert "extra" not in Theme.available_themes()


def test_dracula_error_colour():
    assert Theme.dracula().tool_error == Color.rgb(255, 85, 85)
from sree.ui.text import Color, Style
from sree.ui.widgets.diff_view import DiffKind, DiffLine, DiffView


def test_from_strings_pairs_lines():
    view = DiffView.from_strings("a\nb\n", "a\nc\nd")
    assert view.lines == [
        DiffLine(DiffKind.CONTEXT, "a"),
        DiffLine(DiffKind.REMOVED, "b"),
        DiffLine(DiffKind.ADDED, "c"),
        DiffLine(DiffKind.ADDED, "d"),
    ]


def test_removed_tail():
    view = DiffView.from_strings("x\ny", "x")
    assert view.lines == [DiffLine(DiffKind.CONTEXT, "x"), DiffLine(DiffKind.REMOVED, "y")]


def test_identical_texts_are_all_context():
    text = "one\ntwo\nthree"
    view = DiffView.from_strings(text, text)
    assert all(line.kind is DiffKind.CONTEXT for line in view.lines)
    assert [line.text for line in view.lines] == text.split("\n")


def test_render_prefixes_and_colours():
    rendered = DiffView.from_strings("a\nb", "a\nc").render()
    assert [line.plain() for line in rendered] == ["  a", "- b", "+ c"]
    assert rendered[1].spans[0].style == Style().fg(Color.RED)
    assert rendered[2].spans[1].style == Style().fg(Color.GREEN)
    assert rendered[0].spans[1].style == Style()


def test_empty_inputs():
    assert DiffView.from_strings("", "").render() == []
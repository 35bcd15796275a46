from sree.ui.text import Color, Style
from sree.ui.widgets.file_tree import FileTreeNode


def test_render_nested_tree():
    root = FileTreeNode("src", True, 0)
    ui = FileTreeNode("ui", True, 1)
    ui.children.append(FileTreeNode("theme.rs", False, 2))
    root.children.extend([ui, FileTreeNode("main.rs", False, 1)])

    assert [line.plain() for line in root.render()] == [
        "📁 src",
        "  📁 ui",
        "    📄 theme.rs",
        "  📄 main.rs",
    ]


def test_colours_by_kind():
    directory = FileTreeNode("docs", True).render()[0]
    file = FileTreeNode("a.txt", False).render()[0]
    assert directory.spans[3].style == Style().fg(Color.CYAN)
    assert file.spans[1].style == Style().fg(Color.WHITE)


def test_leaf_renders_single_line():
    assert len(FileTreeNode("a.txt", False, 3).render()) == 1
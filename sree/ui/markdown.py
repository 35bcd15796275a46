"""Rendering of markdown text into styled terminal lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from markdown_it import MarkdownIt

from sree.ui.syntax import highlight_code
from sree.ui.text import Color, Line, Modifier, Span, Style

_PARSER = MarkdownIt("commonmark").enable("table")

_FRAME = Style().fg(Color.DARK_GRAY)


def _lines(content: str) -> list[str]:
    parts = content.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if last:
        lines.append(last)
    return lines


class _Renderer:
    def __init__(self) -> None:
        self.lines: list[Line] = []
        self.current: list[Span] = []
        self.in_code_block = False
        self.code_lang = ""
        self.code_buffer = ""
        self.style_stack: list[Style] = [Style()]
        self.list_depth = 0
        self.list_numbers: list[int] = [0]
        self.in_blockquote = False
        self.in_table = False
        self.table_rows: list[list[str]] = []
        self.row: list[str] = []
        self.cell = ""

    def feed(self, tokens: Iterable[Any]) -> None:
        for token in tokens:
            kind = token.type
            if kind in ("inline", "image"):
                self.feed(token.children or [])
            elif kind in ("fence", "code_block"):
                self._code_block(token)
            elif kind in ("text", "text_special"):
                self._text(token.content)
            elif kind == "code_inline":
                self.current.append(Span.styled(token.content, Style().fg(Color.YELLOW)))
            elif kind in ("softbreak", "hardbreak"):
                self._flush_quoted()
            elif token.hidden:
                continue
            elif token.nesting == 1:
                self._start(kind.removesuffix("_open"), token)
            elif token.nesting == -1:
                self._end(kind.removesuffix("_close"))

    def finish(self) -> list[Line]:
        if self.current:
            self.lines.append(Line(self.current))
            self.current = []
        return self.lines

    def _flush_quoted(self) -> None:
        if not self.current:
            return
        if self.in_blockquote:
            self.lines.append(Line([Span.styled("│ ", _FRAME), *self.current]))
        else:
            self.lines.append(Line(self.current))
        self.current = []

    def _code_block(self, token: Any) -> None:
        self.in_code_block = True
        if token.type == "fence":
            self.code_lang = token.info
        self.style_stack.append(Style())
        self._text(token.content)
        self._end("code_block")

    def _start(self, tag: str, token: Any) -> None:
        top = self.style_stack[-1]
        new_style = top
        if tag == "heading":
            new_style = Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)
        elif tag == "strong":
            new_style = top.add_modifier(Modifier.BOLD)
        elif tag == "em":
            new_style = top.add_modifier(Modifier.ITALIC)
        elif tag in ("bullet_list", "ordered_list"):
            self.list_depth += 1
            start = int(token.attrGet("start") or 1) if tag == "ordered_list" else None
            if start is not None:
                if len(self.list_numbers) <= self.list_depth:
                    self.list_numbers.append(start)
                else:
                    self.list_numbers[self.list_depth] = start
            elif len(self.list_numbers) <= self.list_depth:
                self.list_numbers.append(0)
        elif tag == "list_item":
            indent = "  " * max(self.list_depth - 1, 0)
            number = self.list_numbers[self.list_depth]
            if number > 0:
                self.list_numbers[self.list_depth] += 1
                marker = f"{indent}{number}. "
            else:
                marker = f"{indent}• "
            self.current.append(Span.styled(marker, Style().fg(Color.GREEN)))
        elif tag == "blockquote":
            self.in_blockquote = True
            new_style = Style().fg(Color.GRAY).add_modifier(Modifier.ITALIC)
        elif tag == "table":
            self.in_table = True
            self.table_rows = []
        elif tag == "tr":
            self.row = []
        elif tag in ("th", "td"):
            self.cell = ""
        self.style_stack.append(new_style)

    def _end(self, tag: str) -> None:
        self.style_stack.pop()
        if tag in ("heading", "paragraph"):
            self._flush_quoted()
            if not self.in_blockquote:
                self.lines.append(Line.from_text(""))
        elif tag == "code_block":
            self.in_code_block = False
            if self.code_buffer:
                self.lines.extend(render_code_block(self.code_buffer, self.code_lang))
                self.code_buffer = ""
                self.code_lang = ""
        elif tag in ("bullet_list", "ordered_list"):
            self.list_depth = max(self.list_depth - 1, 0)
            if self.list_depth == 0:
                self.lines.append(Line.from_text(""))
        elif tag == "list_item":
            if self.current:
                self.lines.append(Line(self.current))
                self.current = []
        elif tag == "blockquote":
            self.in_blockquote = False
            self.lines.append(Line.from_text(""))
        elif tag == "table":
            self.in_table = False
            if self.table_rows:
                self.lines.extend(render_table(self.table_rows))
                self.table_rows = []
        elif tag == "tr":
            if self.row:
                self.table_rows.append(self.row)
                self.row = []
        elif tag in ("th", "td"):
            self.row.append(self.cell)
            self.cell = ""

    def _text(self, text: str) -> None:
        if self.in_code_block:
            self.code_buffer += text
        elif self.in_table:
            self.cell += text
        else:
            self.current.append(Span.styled(text, self.style_stack[-1]))


def render_markdown(text: str) -> list[Line]:
    """Styled lines for a markdown document."""
    renderer = _Renderer()
    renderer.feed(_PARSER.parse(text))
    return renderer.finish()


def render_code_block(code: str, lang: str) -> list[Line]:
    """A framed code block, highlighted when a language is given."""
    if lang:
        lines = [Line([Span.styled("┌─ ", _FRAME), Span.styled(lang, Style().fg(Color.GREEN))])]
    else:
        lines = [Line([Span.styled("┌─────", _FRAME)])]

    for code_line in _lines(code):
        if lang:
            spans = highlight_code(code_line, lang)
        else:
            spans = [Span.styled(code_line, Style().fg(Color.WHITE))]
        lines.append(Line([Span.styled("│ ", _FRAME), *spans]))

    lines.append(Line([Span.styled("└─────", _FRAME)]))
    lines.append(Line.from_text(""))
    return lines


def _border(left: str, middle: str, right: str, widths: Sequence[int]) -> Line:
    text = left + middle.join("─" * (width + 2) for width in widths) + right
    return Line([Span.styled(text, _FRAME)])


def _row(cells: Sequence[str], widths: Sequence[int], style: Style) -> Line:
    spans = [Span.styled("│ ", _FRAME)]
    for cell, width in zip(cells, widths):
        spans.append(Span.styled(cell.ljust(width), style))
        spans.append(Span.styled(" │ ", _FRAME))
    return Line(spans)


def render_table(rows: Sequence[Sequence[str]]) -> list[Line]:
    """A boxed table; the first row is drawn as the header."""
    if not rows:
        return []

    widths = [0] * len(rows[0])
    for row in rows:
        if len(row) > len(widths):
            raise ValueError("table row has more cells than the header")
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_style = Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)
    lines = [
        _border("┌", "┬", "┐", widths),
        _row(rows[0], widths, header_style),
        _border("├", "┼", "┤", widths),
    ]
    lines.extend(_row(row, widths, Style()) for row in rows[1:])
    lines.append(_border("└", "┴", "┘", widths))
    lines.append(Line.from_text(""))
    return lines
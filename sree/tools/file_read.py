"""Reading files and listing directories."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sree.tools.base import Tool, ToolResult


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _lines(content: str) -> list[str]:
    """Split on newlines, dropping a trailing CR before each and no final empty line."""
    parts = content.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if last:
        lines.append(last)
    return lines


@dataclass(frozen=True)
class _FileReadInput:
    path: str
    start_line: int | None
    end_line: int | None

    @classmethod
    def parse(cls, data: Any) -> _FileReadInput:
        if not isinstance(data, Mapping):
            raise ValueError("file_read input must be an object")
        path = data.get("path")
        if not isinstance(path, str):
            raise ValueError("file_read input needs a string 'path'")
        start = data.get("start_line")
        if start is not None and (not _is_int(start) or start < 0):
            raise ValueError("'start_line' must be a non-negative integer")
        end = data.get("end_line")
        if end is not None and not _is_int(end):
            raise ValueError("'end_line' must be an integer")
        return cls(path, start, end)


class FileReadTool(Tool):
    name = "file_read"
    description = "Read file contents with optional line range. For directories, lists contents."

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": "Path to file or directory"},
                "start_line": {
                    "type": "integer",
                    "description": "Starting line number (1-indexed, optional)",
                },
                "end_line": {
                    "type": "integer",
                    "description": "Ending line number (optional, negative counts from end)",
                },
            },
            "required": ["path"],
        }

    async def execute(self, input: Any) -> ToolResult:
        params = _FileReadInput.parse(input)
        path = Path(params.path)

        if not path.exists():
            return ToolResult.error(f"Path does not exist: {params.path}")

        if path.is_dir():
            with os.scandir(path) as entries:
                items = sorted(
                    f"{entry.name} ({'dir' if entry.is_dir(follow_symlinks=False) else 'file'})"
                    for entry in entries
                )
            return ToolResult.ok(f"Directory: {params.path}\n\n" + "\n".join(items))

        lines = _lines(path.read_bytes().decode("utf-8"))
        total = len(lines)

        start = max((params.start_line if params.start_line is not None else 1) - 1, 0)
        if params.end_line is None:
            end = total
        elif params.end_line < 0:
            end = max(total + params.end_line + 1, 0)
        else:
            end = min(params.end_line, total)

        if start >= total:
            return ToolResult.error(f"Start line {start + 1} exceeds file length {total}")
        if end < start:
            raise ValueError(f"line range ends at {end} before it starts at {start + 1}")

        numbered = "\n".join(
            f"{number:4} | {line}"
            for number, line in enumerate(lines[start:end], start=start + 1)
        )
        return ToolResult.ok(
            f"File: {params.path} (lines {start + 1}-{end} of {total})\n\n{numbered}"
        )
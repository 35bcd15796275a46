"""Creating and editing files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sree.tools.base import Tool, ToolResult


def _lines(content: str) -> list[str]:
    """Split on newlines, dropping a trailing CR before each and no final empty line."""
    parts = content.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if last:
        lines.append(last)
    return lines


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _required(value: Any, key: str) -> Any:
    if value is None:
        raise ValueError(f"{key} required")
    return value


@dataclass(frozen=True)
class _FileWriteInput:
    path: str
    command: str
    file_text: str | None
    old_str: str | None
    new_str: str | None
    insert_line: int | None

    @classmethod
    def parse(cls, data: Any) -> _FileWriteInput:
        if not isinstance(data, Mapping):
            raise ValueError("file_write input must be an object")
        path = data.get("path")
        command = data.get("command")
        if not isinstance(path, str):
            raise ValueError("file_write input needs a string 'path'")
        if not isinstance(command, str):
            raise ValueError("file_write input needs a string 'command'")
        insert_line = data.get("insert_line")
        if insert_line is not None and (
            not isinstance(insert_line, int) or isinstance(insert_line, bool) or insert_line < 0
        ):
            raise ValueError("'insert_line' must be a non-negative integer")
        return cls(
            path,
            command,
            _optional_str(data, "file_text"),
            _optional_str(data, "old_str"),
            _optional_str(data, "new_str"),
            insert_line,
        )


def _read(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


def _write(path: Path, content: str) -> None:
    path.write_bytes(content.encode("utf-8"))


class FileWriteTool(Tool):
    name = "file_write"
    description = "Create or modify files. Commands: create, str_replace, insert, append"

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": "File path"},
                "command": {
                    "type": "string",
                    "enum": ["create", "str_replace", "insert", "append"],
                },
                "file_text": {"type": "string", "description": "Content for create command"},
                "old_str": {"type": "string", "description": "String to replace (str_replace)"},
                "new_str": {
                    "type": "string",
                    "description": "Replacement string (str_replace/insert/append)",
                },
                "insert_line": {"type": "integer", "description": "Line number for insert"},
            },
            "required": ["path", "command"],
        }

    async def execute(self, input: Any) -> ToolResult:
        params = _FileWriteInput.parse(input)
        path = Path(params.path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if params.command == "create":
            content = _required(params.file_text, "file_text")
            _write(path, content)
            return ToolResult.ok(f"Created {params.path} ({len(_lines(content))} lines)")

        if params.command == "str_replace":
            old = _required(params.old_str, "old_str")
            new = _required(params.new_str, "new_str")
            content = _read(path)
            count = content.count(old)
            if count == 0:
                return ToolResult.error("old_str not found")
            if count > 1:
                return ToolResult.error(f"old_str found {count} times, must be unique")
            _write(path, content.replace(old, new))
            return ToolResult.ok(f"Replaced in {params.path}")

        if params.command == "insert":
            line_num = _required(params.insert_line, "insert_line")
            new = _required(params.new_str, "new_str")
            lines = _lines(_read(path))
            if line_num > len(lines):
                return ToolResult.error(
                    f"Line {line_num} exceeds file length {len(lines)}"
                )
            lines.insert(line_num, new)
            _write(path, "\n".join(lines) + "\n")
            return ToolResult.ok(f"Inserted at line {line_num} in {params.path}")

        if params.command == "append":
            new = _required(params.new_str, "new_str")
            content = _read(path) if path.exists() else ""
            if content and not content.endswith("\n"):
                content += "\n"
            _write(path, content + new)
            return ToolResult.ok(f"Appended to {params.path}")

        return ToolResult.error(f"Unknown command: {params.command}")
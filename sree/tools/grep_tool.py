"""Regular-expression search across files."""

from __future__ import annotations

import asyncio
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sree.tools.base import Tool, ToolResult
from sree.tools.walk import walk

DEFAULT_MAX_RESULTS = 100


def _lines(content: str) -> list[str]:
    """Split on newlines, dropping a trailing CR before each and no final empty line."""
    parts = content.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if last:
        lines.append(last)
    return lines


@dataclass(frozen=True)
class _GrepInput:
    pattern: str
    path: str
    case_sensitive: bool
    max_results: int

    @classmethod
    def parse(cls, data: Any) -> _GrepInput:
        if not isinstance(data, Mapping):
            raise ValueError("grep input must be an object")
        pattern = data.get("pattern")
        if not isinstance(pattern, str):
            raise ValueError("grep input needs a string 'pattern'")
        path = data.get("path")
        if path is None:
            path = "."
        elif not isinstance(path, str):
            raise ValueError("'path' must be a string")
        case_sensitive = data.get("case_sensitive")
        if case_sensitive is None:
            case_sensitive = False
        elif not isinstance(case_sensitive, bool):
            raise ValueError("'case_sensitive' must be a boolean")
        max_results = data.get("max_results")
        if max_results is None:
            max_results = DEFAULT_MAX_RESULTS
        elif not isinstance(max_results, int) or isinstance(max_results, bool) or max_results < 0:
            raise ValueError("'max_results' must be a non-negative integer")
        return cls(pattern, path, case_sensitive, max_results)


def _search(params: _GrepInput) -> list[str]:
    regex = re.compile(params.pattern, 0 if params.case_sensitive else re.IGNORECASE)
    results: list[str] = []
    for path in walk(params.path):
        if len(results) >= params.max_results:
            break
        if os.path.islink(path) or not os.path.isfile(path):
            continue
        try:
            content = Path(path).read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        for number, line in enumerate(_lines(content), start=1):
            if regex.search(line):
                results.append(f"{path}:{number}:{line}")
                if len(results) >= params.max_results:
                    break
    return results


class GrepTool(Tool):
    name = "grep"
    description = (
        "Search for regex patterns in files. Respects .gitignore. Returns file:line:content format."
    )

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "pattern": {"type": "string", "description": "Regex pattern to search"},
                "path": {
                    "type": "string",
                    "description": "Directory or file to search (default: current dir)",
                },
                "case_sensitive": {
                    "type": "boolean",
                    "description": "Case sensitive search (default: false)",
                },
                "max_results": {
                    "type": "integer",
                    "description": "Maximum results to return (default: 100)",
                },
            },
            "required": ["pattern"],
        }

    async def execute(self, input: Any) -> ToolResult:
        params = _GrepInput.parse(input)
        results = await asyncio.to_thread(_search, params)
        if not results:
            return ToolResult.ok("No matches found.")
        return ToolResult.ok(f"Found {len(results)} matches:\n" + "\n".join(results))
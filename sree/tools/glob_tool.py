"""Finding files by glob pattern."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sree.tools.base import Tool, ToolResult
from sree.tools.walk import glob_match, walk

DEFAULT_MAX_RESULTS = 1000


@dataclass(frozen=True)
class _GlobInput:
    pattern: str
    max_results: int

    @classmethod
    def parse(cls, data: Any) -> _GlobInput:
        if not isinstance(data, Mapping):
            raise ValueError("glob input must be an object")
        pattern = data.get("pattern")
        if not isinstance(pattern, str):
            raise ValueError("glob input needs a string 'pattern'")
        max_results = data.get("max_results")
        if max_results is None:
            max_results = DEFAULT_MAX_RESULTS
        elif not isinstance(max_results, int) or isinstance(max_results, bool) or max_results < 0:
            raise ValueError("'max_results' must be a non-negative integer")
        return cls(pattern, max_results)


@dataclass(frozen=True)
class _Match:
    path: str
    modified_ns: int | None
    size: int


def _find(params: _GlobInput) -> list[_Match]:
    # Rejects a malformed pattern before any walking happens.
    glob_match(params.pattern, "")

    found: list[_Match] = []
    for path in walk("."):
        if len(found) >= params.max_results:
            break
        if not glob_match(params.pattern, path):
            continue
        try:
            info = os.stat(path)
        except OSError:
            found.append(_Match(path, None, 0))
        else:
            found.append(_Match(path, info.st_mtime_ns, info.st_size))

    found.sort(
        key=lambda m: (m.modified_ns is not None, m.modified_ns or 0),
        reverse=True,
    )
    return found


class GlobTool(Tool):
    name = "glob"
    description = (
        "Find files matching glob patterns. Respects .gitignore. "
        "Returns file paths sorted by modification time."
    )

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "pattern": {
                    "type": "string",
                    "description": "Glob pattern (e.g., '**/*.rs', 'src/**/*.toml')",
                },
                "max_results": {
                    "type": "integer",
                    "description": "Maximum results to return (default: 1000)",
                },
            },
            "required": ["pattern"],
        }

    async def execute(self, input: Any) -> ToolResult:
        params = _GlobInput.parse(input)
        matches = await asyncio.to_thread(_find, params)
        if not matches:
            return ToolResult.ok("No files matched the pattern.")
        listing = "\n".join(f"{m.path} ({m.size} bytes)" for m in matches)
        return ToolResult.ok(f"Found {len(matches)} files:\n{listing}")
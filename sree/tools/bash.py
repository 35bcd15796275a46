"""Shell command execution."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sree.tools.base import Tool, ToolResult

DEFAULT_TIMEOUT_SECS = 30


@dataclass(frozen=True)
class _BashInput:
    command: str
    working_dir: str | None
    timeout_secs: int

    @classmethod
    def parse(cls, data: Any) -> _BashInput:
        if not isinstance(data, Mapping):
            raise ValueError("bash input must be an object")
        command = data.get("command")
        if not isinstance(command, str):
            raise ValueError("bash input needs a string 'command'")
        working_dir = data.get("working_dir")
        if working_dir is not None and not isinstance(working_dir, str):
            raise ValueError("'working_dir' must be a string")
        timeout = data.get("timeout_secs", DEFAULT_TIMEOUT_SECS)
        if not isinstance(timeout, int) or isinstance(timeout, bool) or timeout < 0:
            raise ValueError("'timeout_secs' must be a non-negative integer")
        return cls(command, working_dir, timeout)


class BashTool(Tool):
    name = "bash"
    description = "Execute shell commands. Returns stdout, stderr, and exit code."

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "command": {"type": "string", "description": "Shell command to execute"},
                "working_dir": {"type": "string", "description": "Working directory (optional)"},
                "timeout_secs": {
                    "type": "integer",
                    "description": "Timeout in seconds (default 30)",
                },
            },
            "required": ["command"],
        }

    async def execute(self, input: Any) -> ToolResult:
        params = _BashInput.parse(input)
        try:
            process = await asyncio.create_subprocess_exec(
                "sh",
                "-c",
                params.command,
                cwd=params.working_dir,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            return ToolResult.error(f"Failed to execute: {exc}")

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(
                process.communicate(), timeout=params.timeout_secs
            )
        except asyncio.TimeoutError:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            return ToolResult.error(
                f"Command timed out after {params.timeout_secs} seconds"
            )

        stdout = stdout_bytes.decode("utf-8", errors="replace")
        stderr = stderr_bytes.decode("utf-8", errors="replace")
        returncode = process.returncode
        exit_code = returncode if returncode is not None and returncode >= 0 else -1

        parts = [f"Exit code: {exit_code}\n"]
        if stdout:
            parts.append(f"\nStdout:\n{stdout}")
        if stderr:
            parts.append(f"\nStderr:\n{stderr}")
        return ToolResult(exit_code == 0, "".join(parts))
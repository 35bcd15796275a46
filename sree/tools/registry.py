"""A lookup table of tools by name."""

from __future__ import annotations

import json
import logging
from typing import Any

from sree.tools.base import Tool, ToolResult

logger = logging.getLogger(__name__)


class ToolNotFoundError(LookupError):
    """Raised when a tool name is not registered."""


class ToolRegistry:
    """Holds the available tools and dispatches calls to them."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Add a tool, replacing any earlier tool with the same name."""
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def tool_schemas(self) -> list[dict[str, Any]]:
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.input_schema(),
            }
            for tool in self._tools.values()
        ]

    def to_api_tools(self) -> list[dict[str, Any]]:
        return self.tool_schemas()

    async def execute(self, name: str, input: Any) -> ToolResult:
        """Run the named tool; raises ToolNotFoundError for unknown names."""
        logger.info("Executing tool: %s", name)
        try:
            logger.debug("Tool input: %s", json.dumps(input))
        except (TypeError, ValueError):
            logger.debug("Tool input: ")

        tool = self.get(name)
        if tool is None:
            raise ToolNotFoundError(f"Tool not found: {name}")

        try:
            result = await tool.execute(input)
        except Exception as exc:
            logger.error("Tool %s failed: %s", name, exc)
            raise
        logger.info(
            "Tool %s completed successfully, output length: %d",
            name,
            len(result.content.encode("utf-8")),
        )
        return result
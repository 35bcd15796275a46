"""Web search, available only once a search service is configured."""

from __future__ import annotations

from typing import Any

from sree.tools.base import Tool, ToolResult

_NOT_CONFIGURED = (
    "Web search requires API key configuration. "
    "Please configure a search API key in ~/.sree/config.toml"
)


class WebSearchTool(Tool):
    name = "web_search"
    description = "Search the web for information (requires API key configuration)"

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {"query": {"type": "string", "description": "Search query"}},
            "required": ["query"],
        }

    async def execute(self, input: Any) -> ToolResult:
        return ToolResult.error(_NOT_CONFIGURED)
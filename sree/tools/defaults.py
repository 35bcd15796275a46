"""The registry of built-in tools."""

from __future__ import annotations

from sree.tools.bash import BashTool
from sree.tools.file_read import FileReadTool
from sree.tools.file_write import FileWriteTool
from sree.tools.glob_tool import GlobTool
from sree.tools.grep_tool import GrepTool
from sree.tools.registry import ToolRegistry
from sree.tools.web_search import WebSearchTool


def create_default_registry() -> ToolRegistry:
    """A registry holding every built-in tool."""
    registry = ToolRegistry()
    for tool in (
        FileReadTool(),
        FileWriteTool(),
        BashTool(),
        GrepTool(),
        GlobTool(),
        WebSearchTool(),
    ):
        registry.register(tool)
    return registry
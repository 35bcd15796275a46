from typing import Any

import pytest

from sree.tools.base import Tool, ToolResult
from sree.tools.registry import ToolNotFoundError, ToolRegistry


class UpperTool(Tool):
    name = "upper"
    description = "Upper-case text"

    def input_schema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {"text": {"type": "string"}}}

    async def execute(self, input: Any) -> ToolResult:
        return ToolResult.ok(input["text"].upper())


class OtherUpperTool(UpperTool):
    description = "Replacement"


class FailingTool(Tool):
    name = "fail"
    description = "Always raises"

    def input_schema(self) -> dict[str, Any]:
        return {"type": "object"}

    async def execute(self, input: Any) -> ToolResult:
        raise ValueError("bad input")


def test_register_and_get():
    registry = ToolRegistry()
    tool = UpperTool()
    registry.register(tool)
    assert registry.get("upper") is tool
    assert registry.get("missing") is None


def test_register_replaces_same_name():
    registry = ToolRegistry()
    registry.register(UpperTool())
    replacement = OtherUpperTool()
    registry.register(replacement)
    assert registry.get("upper") is replacement
    assert len(registry.tool_schemas()) == 1


def test_tool_schemas_shape():
    registry = ToolRegistry()
    tool = UpperTool()
    registry.register(tool)
    assert registry.tool_schemas() == [
        {
            "name": "upper",
            "description": "Upper-case text",
            "input_schema": tool.input_schema(),
        }
    ]
    assert registry.to_api_tools() == registry.tool_schemas()


def test_empty_registry_has_no_schemas():
    assert ToolRegistry().tool_schemas() == []


@pytest.mark.asyncio
async def test_execute_dispatches():
    registry = ToolRegistry()
    registry.register(UpperTool())
    result = await registry.execute("upper", {"text": "abc"})
    assert result == ToolResult.ok("ABC")


@pytest.mark.asyncio
async def test_execute_unknown_tool_raises():
    registry = ToolRegistry()
    with pytest.raises(ToolNotFoundError, match="Tool not found: nope"):
        await registry.execute("nope", {})


@pytest.mark.asyncio
async def test_execute_propagates_tool_errors():
    registry = ToolRegistry()
    registry.register(FailingTool())
    with pytest.raises(ValueError, match="bad input"):
        await registry.execute("fail", {})
from typing import Any

import pytest

from sree.tools.base import Tool, ToolResult


class EchoTool(Tool):
    name = "echo"
    description = "Echo the input text"

    def input_schema(self) -> dict[str, Any]:
        return {"type": "object", "required": ["text"]}

    async def execute(self, input: Any) -> ToolResult:
        return ToolResult.ok(input["text"])


def test_ok_result_is_success():
    result = ToolResult.ok("done")
    assert result.success is True
    assert result.content == "done"
    assert result.is_error() is False


def test_error_result_is_error():
    result = ToolResult.error("broken")
    assert result.success is False
    assert result.content == "broken"
    assert result.is_error() is True


def test_str_is_content():
    assert str(ToolResult.ok("some output")) == "some output"
    assert str(ToolResult.error("bad")) == "bad"


def test_results_compare_by_value():
    assert ToolResult.ok("x") == ToolResult(True, "x")
    assert ToolResult.ok("x") != ToolResult.error("x")


def test_abstract_tool_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Tool()


@pytest.mark.asyncio
async def test_concrete_tool_executes():
    tool = EchoTool()
    result = await tool.execute({"text": "hi"})
    assert result == ToolResult.ok("hi")
    assert tool.input_schema()["required"] == ["text"]
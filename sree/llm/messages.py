"""Conversation messages and request shapes sent to the model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class TextBlock:
    text: str


@dataclass(frozen=True)
class ToolUseBlock:
    id: str
    name: str
    input: Any


@dataclass(frozen=True)
class ToolResultBlock:
    tool_use_id: str
    content: str


ContentBlock = Union[TextBlock, ToolUseBlock, ToolResultBlock]


def content_block_to_dict(block: ContentBlock) -> dict[str, Any]:
    """Serialize a block as a plain mapping with no type tag."""
    if isinstance(block, TextBlock):
        return {"text": block.text}
    if isinstance(block, ToolUseBlock):
        return {"id": block.id, "name": block.name, "input": block.input}
    if isinstance(block, ToolResultBlock):
        return {"tool_use_id": block.tool_use_id, "content": block.content}
    raise TypeError(f"not a content block: {block!r}")


def content_block_from_dict(data: Any) -> ContentBlock:
    """Parse an untagged mapping, trying text, tool use, then tool result."""
    if not isinstance(data, Mapping):
        raise ValueError("content block must be a mapping")
    if isinstance(data.get("text"), str):
        return TextBlock(data["text"])
    if isinstance(data.get("id"), str) and isinstance(data.get("name"), str) and "input" in data:
        return ToolUseBlock(data["id"], data["name"], data["input"])
    if isinstance(data.get("tool_use_id"), str) and isinstance(data.get("content"), str):
        return ToolResultBlock(data["tool_use_id"], data["content"])
    raise ValueError("data did not match any content block variant")


@dataclass
class ApiMessage:
    role: str
    content: list[ContentBlock] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "content": [content_block_to_dict(b) for b in self.content]}

    @classmethod
    def from_dict(cls, data: Any) -> ApiMessage:
        if not isinstance(data, Mapping):
            raise ValueError("message must be a mapping")
        role = data.get("role")
        content = data.get("content")
        if not isinstance(role, str):
            raise ValueError("message role must be a string")
        if not isinstance(content, list):
            raise ValueError("message content must be a list")
        return cls(role, [content_block_from_dict(item) for item in content])


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_schema: Any


@dataclass
class ApiRequest:
    model: str
    max_tokens: int
    system: str | None = None
    messages: list[ApiMessage] = field(default_factory=list)
    tools: list[ToolSpec] = field(default_factory=list)
    temperature: float | None = None
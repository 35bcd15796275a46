"""Events produced while a model response streams in."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class MessageStart:
    role: str


@dataclass(frozen=True)
class ContentBlockStart:
    index: int
    block_type: str
    tool_use_id: str | None = None
    tool_name: str | None = None


@dataclass(frozen=True)
class TextDelta:
    index: int
    text: str


@dataclass(frozen=True)
class ToolInputDelta:
    index: int
    json: str


@dataclass(frozen=True)
class ContentBlockStop:
    pass


@dataclass(frozen=True)
class MessageStop:
    stop_reason: str | None = None


StreamEvent = Union[
    MessageStart, ContentBlockStart, TextDelta, ToolInputDelta, ContentBlockStop, MessageStop
]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _optional_str(value: Any) -> bool:
    return value is None or isinstance(value, str)


def stream_event_to_dict(event: StreamEvent) -> dict[str, Any] | None:
    """Serialize an event without a type tag; the stop marker becomes None."""
    if isinstance(event, MessageStart):
        return {"role": event.role}
    if isinstance(event, ContentBlockStart):
        return {
            "index": event.index,
            "block_type": event.block_type,
            "tool_use_id": event.tool_use_id,
            "tool_name": event.tool_name,
        }
    if isinstance(event, TextDelta):
        return {"index": event.index, "text": event.text}
    if isinstance(event, ToolInputDelta):
        return {"index": event.index, "json": event.json}
    if isinstance(event, ContentBlockStop):
        return None
    if isinstance(event, MessageStop):
        return {"stop_reason": event.stop_reason}
    raise TypeError(f"not a stream event: {event!r}")


def stream_event_from_dict(data: Any) -> StreamEvent:
    """Parse an untagged event, trying each variant in declaration order."""
    if data is None:
        return ContentBlockStop()
    if not isinstance(data, Mapping):
        raise ValueError("stream event must be a mapping or None")

    if isinstance(data.get("role"), str):
        return MessageStart(data["role"])

    index = data.get("index")
    if _is_int(index):
        tool_use_id = data.get("tool_use_id")
        tool_name = data.get("tool_name")
        if isinstance(data.get("block_type"), str) and _optional_str(tool_use_id) and _optional_str(tool_name):
            return ContentBlockStart(index, data["block_type"], tool_use_id, tool_name)
        if isinstance(data.get("text"), str):
            return TextDelta(index, data["text"])
        if isinstance(data.get("json"), str):
            return ToolInputDelta(index, data["json"])

    stop_reason = data.get("stop_reason")
    if _optional_str(stop_reason):
        return MessageStop(stop_reason)
    raise ValueError("data did not match any stream event variant")
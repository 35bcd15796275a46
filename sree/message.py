"""Chat messages shown in the conversation view."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class MessageRole(Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ToolCallStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ToolCallInfo:
    """A tool invocation attached to a message."""

    id: str
    name: str
    input: Any
    result: str | None = None
    status: ToolCallStatus = ToolCallStatus.PENDING


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Message:
    """One entry in the conversation."""

    role: MessageRole
    content: str
    tool_calls: list[ToolCallInfo] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=_now)

    @classmethod
    def user(cls, content: str) -> Message:
        return cls(MessageRole.USER, content)

    @classmethod
    def assistant(cls, content: str) -> Message:
        return cls(MessageRole.ASSISTANT, content)

    @classmethod
    def system(cls, content: str) -> Message:
        return cls(MessageRole.SYSTEM, content)
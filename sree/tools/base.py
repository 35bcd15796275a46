"""The tool interface and the result every tool returns."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class ToolResult:
    """Outcome of running a tool: a success flag and the text it produced."""

    success: bool
    content: str

    @classmethod
    def ok(cls, content: str) -> ToolResult:
        return cls(True, content)

    @classmethod
    def error(cls, message: str) -> ToolResult:
        return cls(False, message)

    def is_error(self) -> bool:
        return not self.success

    def __str__(self) -> str:
        return self.content


class Tool(ABC):
    """An operation the assistant can ask to run.

    Subclasses set ``name`` and ``description``. ``execute`` raises when the
    input does not fit the schema or an I/O operation fails, and returns an
    error result for failures the model should be told about.
    """

    name: ClassVar[str]
    description: ClassVar[str]

    @abstractmethod
    def input_schema(self) -> dict[str, Any]:
        """JSON schema describing the accepted input."""

    @abstractmethod
    async def execute(self, input: Any) -> ToolResult:
        """Run the tool on a decoded JSON input."""
"""Known model identifiers and their limits."""

from __future__ import annotations

from enum import Enum


class Model(Enum):
    CLAUDE_OPUS_46 = "anthropic.claude-opus-4-6-v1"
    CLAUDE_SONNET_46 = "anthropic.claude-sonnet-4-6"
    CLAUDE_SONNET_45 = "anthropic.claude-sonnet-4-5-20250929-v1:0"
    CLAUDE_HAIKU_45 = "anthropic.claude-haiku-4-5-20251001-v1:0"
    CLAUDE_OPUS_4 = "anthropic.claude-opus-4-20250514-v1:0"
    CLAUDE_SONNET_4 = "us.anthropic.claude-sonnet-4-20250514-v1:0"

    @classmethod
    def default(cls) -> Model:
        return cls.CLAUDE_SONNET_46

    def as_str(self) -> str:
        return self.value

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def context_window(self) -> int:
        return 200_000

    def max_output(self) -> int:
        return _MAX_OUTPUT[self]


_DISPLAY_NAMES = {
    Model.CLAUDE_OPUS_46: "Claude Opus 4.6",
    Model.CLAUDE_SONNET_46: "Claude Sonnet 4.6",
    Model.CLAUDE_SONNET_45: "Claude Sonnet 4.5",
    Model.CLAUDE_HAIKU_45: "Claude Haiku 4.5",
    Model.CLAUDE_OPUS_4: "Claude Opus 4",
    Model.CLAUDE_SONNET_4: "Claude Sonnet 4",
}

_MAX_OUTPUT = {
    Model.CLAUDE_OPUS_46: 128_000,
    Model.CLAUDE_SONNET_46: 64_000,
    Model.CLAUDE_SONNET_45: 64_000,
    Model.CLAUDE_HAIKU_45: 64_000,
    Model.CLAUDE_OPUS_4: 32_000,
    Model.CLAUDE_SONNET_4: 32_000,
}
import pytest

from sree.llm.messages import (
    ApiMessage,
    ApiRequest,
    TextBlock,
    ToolResultBlock,
    ToolSpec,
    ToolUseBlock,
    content_block_from_dict,
    content_block_to_dict,
)

BLOCKS = [
    TextBlock("hello"),
    ToolUseBlock("tu_1", "bash", {"command": "ls"}),
    ToolUseBlock("tu_2", "glob", None),
    ToolResultBlock("tu_1", "Exit code: 0"),
]


@pytest.mark.parametrize("block", BLOCKS)
def test_block_round_trip(block):
    assert content_block_from_dict(content_block_to_dict(block)) == block


def test_text_block_is_untagged():
    assert content_block_to_dict(TextBlock("hi")) == {"text": "hi"}


def test_text_wins_over_other_fields():
    data = {"text": "t", "id": "a", "name": "b", "input": 1}
    assert content_block_from_dict(data) == TextBlock("t")


def test_tool_use_requires_input():
    with pytest.raises(ValueError):
        content_block_from_dict({"id": "a", "name": "b"})


@pytest.mark.parametrize("bad", [{}, {"text": 3}, ["text"], "text", {"tool_use_id": "x"}])
def test_unmatched_blocks_raise(bad):
    with pytest.raises(ValueError):
        content_block_from_dict(bad)


def test_to_dict_rejects_other_types():
    with pytest.raises(TypeError):
        content_block_to_dict("hello")


def test_message_round_trip():
    msg = ApiMessage("assistant", list(BLOCKS))
    assert ApiMessage.from_dict(msg.to_dict()) == msg


def test_message_requires_list_content():
    with pytest.raises(ValueError):
        ApiMessage.from_dict({"role": "user", "content": "hi"})
    with pytest.raises(ValueError):
        ApiMessage.from_dict({"content": []})


def test_request_defaults_are_independent():
    first = ApiRequest(model="m", max_tokens=10)
    second = ApiRequest(model="m", max_tokens=10)
    first.tools.append(ToolSpec("bash", "run", {"type": "object"}))
    assert second.tools == []
    assert first.system is None and first.temperature is None
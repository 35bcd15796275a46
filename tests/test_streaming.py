import pytest

from sree.llm.streaming import (
    ContentBlockStart,
    ContentBlockStop,
    MessageStart,
    MessageStop,
    TextDelta,
    ToolInputDelta,
    stream_event_from_dict,
    stream_event_to_dict,
)

EVENTS = [
    MessageStart("assistant"),
    ContentBlockStart(0, "text"),
    ContentBlockStart(1, "tool_use", "tu_1", "bash"),
    TextDelta(0, "Hello"),
    ToolInputDelta(1, '{"command":'),
    ContentBlockStop(),
    MessageStop("end_turn"),
    MessageStop(None),
]


@pytest.mark.parametrize("event", EVENTS)
def test_round_trip(event):
    assert stream_event_from_dict(stream_event_to_dict(event)) == event


def test_stop_marker_serializes_to_none():
    assert stream_event_to_dict(ContentBlockStop()) is None


def test_content_block_start_writes_nulls():
    data = stream_event_to_dict(ContentBlockStart(0, "text"))
    assert data["tool_use_id"] is None and data["tool_name"] is None


def test_optional_fields_may_be_missing():
    assert stream_event_from_dict({"index": 2, "block_type": "text"}) == ContentBlockStart(2, "text")


def test_empty_mapping_is_message_stop():
    assert stream_event_from_dict({}) == MessageStop(None)


def test_bool_is_not_an_index():
    with pytest.raises(ValueError):
        stream_event_from_dict({"index": True, "text": "x", "stop_reason": 5})


@pytest.mark.parametrize("bad", ["text", 3, [1], {"stop_reason": 7}])
def test_unmatched_events_raise(bad):
    with pytest.raises(ValueError):
        stream_event_from_dict(bad)


def test_to_dict_rejects_other_types():
    with pytest.raises(TypeError):
        stream_event_to_dict("event")
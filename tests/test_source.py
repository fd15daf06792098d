from __future__ import annotations

import io
from decimal import Decimal

import pytest

from location_history._source import describe_event, json_events, python_events
from location_history.config import DecoderConfig
from location_history.exceptions import InvalidTypeError, JsonSyntaxError


def test_python_events_vocabulary() -> None:
    events = list(python_events({"a": [1, 2.5, None, True, "x"], "b": {}}))
    assert events == [
        ("start_map", None),
        ("map_key", "a"),
        ("start_array", None),
        ("number", 1),
        ("number", 2.5),
        ("null", None),
        ("boolean", True),
        ("string", "x"),
        ("end_array", None),
        ("map_key", "b"),
        ("start_map", None),
        ("end_map", None),
        ("end_map", None),
    ]


def test_python_events_rejects_non_json_values() -> None:
    with pytest.raises(InvalidTypeError):
        list(python_events({"a": object()}))


def test_python_events_rejects_non_string_keys() -> None:
    with pytest.raises(InvalidTypeError):
        list(python_events({1: "a"}))


def test_json_events_match_python_events() -> None:
    raw = b'{"a": [1, 2.5, null, true, "x"], "b": {}}'
    expected = list(python_events({"a": [1, Decimal("2.5"), None, True, "x"], "b": {}}))
    assert list(json_events(io.BytesIO(raw), DecoderConfig(backend="python"))) == expected


def test_json_events_syntax_error() -> None:
    with pytest.raises(JsonSyntaxError):
        list(json_events(io.BytesIO(b'{"a": [1,, 2]}')))


def test_describe_event() -> None:
    assert describe_event("start_array") == "sequence"
    assert describe_event("start_map") == "map"
    assert describe_event("string") == "string"

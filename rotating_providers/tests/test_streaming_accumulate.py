from __future__ import annotations

from rotating_providers.base.streaming import (
    StreamTextEvent,
    StreamUsageEvent,
    accumulate_events,
)
from rotating_providers.base.streaming.streaming_metrics import build_token_usage


def test_events_are_tagged():
    assert StreamTextEvent("x").type == "text"
    assert StreamUsageEvent().type == "usage"
    assert StreamUsageEvent() == StreamUsageEvent(input_tokens=0, output_tokens=0)


def test_accumulate_joins_text_and_reads_usage():
    events = [StreamTextEvent("a"), StreamTextEvent("b"), StreamUsageEvent(3, 4)]
    resp = accumulate_events(events, provider="gemini", model="m", extra={"k": 1})
    assert resp.text == "ab"
    assert resp.parts and resp.parts[0].text == "ab"
    assert resp.usage == {"prompt": 3, "completion": 4, "total": 7}
    assert resp.meta.extra == {"stream_events": 3, "k": 1}


def test_accumulate_without_output():
    resp = accumulate_events([], provider="gemini", model="m")
    assert resp.text == ""
    assert resp.parts is None
    assert resp.usage == {"prompt": None, "completion": None, "total": None}


def test_build_token_usage_total():
    assert build_token_usage(1, 2) == {"prompt": 1, "completion": 2, "total": 3}
    assert build_token_usage(1, None)["total"] is None
    assert build_token_usage(1, 2, total=10)["total"] == 10

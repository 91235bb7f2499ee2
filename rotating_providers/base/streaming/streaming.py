"""Streaming primitives for the provider layer.

A stream for one logical request is a finite, ordered sequence of
``StreamTextEvent`` items followed by exactly one ``StreamUsageEvent``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Optional, Union

from ..models import ChatResponse, ContentPart, ProviderMetadata
from .streaming_metrics import build_token_usage


@dataclass(frozen=True)
class StreamTextEvent:
    """A text fragment, one per streamed SDK chunk."""

    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class StreamUsageEvent:
    """Terminal usage summary for the request."""

    input_tokens: int = 0
    output_tokens: int = 0
    type: Literal["usage"] = "usage"


StreamEvent = Union[StreamTextEvent, StreamUsageEvent]


def accumulate_events(
    events: Iterable[StreamEvent],
    *,
    provider: str,
    model: str,
    extra: Optional[Dict[str, Any]] = None,
) -> ChatResponse:
    """Fold a finished event sequence into a ChatResponse.

    - Concatenates text fragments in order.
    - Takes token counts from the last usage event (``None`` when absent).
    """
    text_parts: List[str] = []
    usage: Optional[StreamUsageEvent] = None
    count = 0
    for event in events:
        count += 1
        if isinstance(event, StreamTextEvent):
            text_parts.append(event.text)
        elif isinstance(event, StreamUsageEvent):
            usage = event
    full_text = "".join(text_parts)
    parts = [ContentPart(type="text", text=full_text)] if full_text else None
    meta = ProviderMetadata(
        provider_name=provider,
        model_name=model,
        extra={"stream_events": count, **(extra or {})},
    )
    tokens = build_token_usage(
        usage.input_tokens if usage else None,
        usage.output_tokens if usage else None,
    )
    return ChatResponse(text=full_text, parts=parts, meta=meta, usage=tokens)


__all__ = [
    "StreamEvent",
    "StreamTextEvent",
    "StreamUsageEvent",
    "accumulate_events",
]

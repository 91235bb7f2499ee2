"""Streaming package for the provider layer.

Exposes the stream event types and the helpers that fold a stream into a
:class:`~rotating_providers.base.models.ChatResponse`.
"""

from .streaming import StreamEvent, StreamTextEvent, StreamUsageEvent, accumulate_events
from .streaming_metrics import build_token_usage

__all__ = [
    "StreamEvent",
    "StreamTextEvent",
    "StreamUsageEvent",
    "accumulate_events",
    "build_token_usage",
]

"""Provider capability protocols.

Structural (``runtime_checkable``) so adapters need not inherit from them.
"""

from __future__ import annotations

from typing import AsyncIterator, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .models import Message, ModelInfo
from .streaming import StreamEvent


@runtime_checkable
class StreamingChatProvider(Protocol):
    """A provider that streams chat completions as :data:`StreamEvent` items.

    Implementations yield text events in arrival order followed by exactly one
    usage event, and raise on failures they cannot recover from.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"gemini"``."""
        ...

    def default_model(self) -> Optional[str]:  # pragma: no cover - interface
        ...

    def get_model(self) -> Tuple[str, ModelInfo]:  # pragma: no cover - interface
        """Return the resolved ``(model_id, info)`` pair."""
        ...

    def create_message(self, system_prompt: str, messages: Sequence[Message]) -> AsyncIterator[StreamEvent]:  # pragma: no cover - interface
        ...


__all__ = ["StreamingChatProvider"]

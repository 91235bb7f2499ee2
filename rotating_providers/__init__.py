"""rotating_providers package

Streams Gemini chat completions while rotating across several API keys to
spread load and ride out per-key quota limits.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Factory: :func:`create`, :class:`ProviderFactory`
    - Building blocks: :class:`KeyRotator`, :class:`HandlerOptions`,
      :class:`Message`, stream event types

Provider SDKs are imported lazily by the factory, so importing this package
does not import ``google.generativeai``.
"""

from typing import Any

from .base.dto import HandlerOptions
from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import StreamingChatProvider
from .base.models import ContentPart, Message
from .base.rotation import KeyRotator
from .base.streaming import StreamEvent, StreamTextEvent, StreamUsageEvent

__version__ = "0.1.0"


def create(provider: str, **overrides: Any) -> Any:
    """Create a configured provider adapter, e.g. ``create("gemini")``."""
    return ProviderFactory.create(provider, **overrides)


__all__ = [
    "__version__",
    "ProviderError",
    "ErrorCode",
    "create",
    "ProviderFactory",
    "UnknownProviderError",
    "StreamingChatProvider",
    "HandlerOptions",
    "KeyRotator",
    "Message",
    "ContentPart",
    "StreamEvent",
    "StreamTextEvent",
    "StreamUsageEvent",
]

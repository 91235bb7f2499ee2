"""Provider-agnostic building blocks: errors, logging, DTOs, streaming, rotation."""

from .errors import ErrorCode, ProviderError, classify_exception, is_rotation_error
from .models import ChatResponse, ContentPart, Message, ModelInfo, ProviderMetadata
from .rotation import KeyRotator
from .streaming import StreamEvent, StreamTextEvent, StreamUsageEvent

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "is_rotation_error",
    "ChatResponse",
    "ContentPart",
    "Message",
    "ModelInfo",
    "ProviderMetadata",
    "KeyRotator",
    "StreamEvent",
    "StreamTextEvent",
    "StreamUsageEvent",
]

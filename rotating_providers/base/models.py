"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``rotating_providers.base.models_parts``.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.message import Message, Role
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.chat_response import ChatResponse
from .models_parts.model_info import ModelInfo

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ProviderMetadata",
    "ChatResponse",
    "ModelInfo",
]

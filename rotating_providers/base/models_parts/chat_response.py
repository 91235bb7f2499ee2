"""
ChatResponse DTO: the accumulated, non-streaming view of one request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .content_part import ContentPart
from .provider_metadata import ProviderMetadata


@dataclass
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        text: Concatenated completion text.
        parts: Structured content parts when available.
        meta: Execution `ProviderMetadata` for observability.
        usage: Canonical token usage mapping (``prompt``/``completion``/``total``).
    """

    text: Optional[str]
    parts: Optional[List[ContentPart]]
    meta: ProviderMetadata
    usage: Dict[str, Optional[int]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "text": self.text,
            "parts": [p.to_dict() for p in self.parts] if self.parts else None,
            "meta": self.meta.to_dict(),
            "usage": dict(self.usage),
        }


__all__ = [
    "ChatResponse",
]

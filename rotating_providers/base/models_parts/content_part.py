"""
Structured content part model for chat messages.

A message may carry several parts (text, images, tool-call metadata). This
object captures a provider-agnostic shape that the Gemini format converter
maps onto SDK ``parts``.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Optional


ContentPartType = Literal[
    "text",          # Plain text content
    "json",          # JSON content as string
    "tool_call",     # Tool call: data={"name", "arguments"}
    "tool_result",   # Tool output: data={"name", "content"}
    "image",         # Inline image: data={"media_type", "data"} (base64)
    "refusal",       # Refusal reason text
    "other",         # Catch-all, skipped by converters that do not know it
]


@dataclass
class ContentPart:
    """A single piece of structured message content.

    Attributes:
        type: The semantic kind of the part, e.g. ``"text"`` or ``"image"``.
        text: Optional textual content for human-readable parts.
        data: Optional payload for non-text parts (image bytes, tool args).
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the object."""
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]

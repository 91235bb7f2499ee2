"""Gemini message format conversion.

Maps the provider-agnostic ``Message`` DTO onto the ``contents`` entries the
google-generativeai SDK accepts (``{"role": ..., "parts": [...]}``). The
functions are pure: no SDK import, no I/O.

Role mapping
------------
``assistant`` becomes ``model``; every other role is sent as ``user`` (system
text travels separately as ``system_instruction``).

Part mapping
------------
- text / json / refusal -> ``{"text": ...}``
- image (``data={"media_type", "data"}``) -> ``{"inline_data": {"mime_type", "data"}}``
- tool_call (``data={"name", "arguments"}``) -> ``{"function_call": {"name", "args"}}``
- tool_result (``data={"name", "content"}``) -> ``{"function_response": {"name", "response"}}``
- other -> skipped
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..base.models import ContentPart, Message


def _convert_part(part: ContentPart) -> Optional[Dict[str, Any]]:
    data = part.data or {}
    if part.type in ("text", "json", "refusal"):
        return {"text": part.text or ""}
    if part.type == "image":
        if "data" not in data:
            raise ValueError("image part requires base64 'data'")
        return {
            "inline_data": {
                "mime_type": data.get("media_type", "image/png"),
                "data": data["data"],
            }
        }
    if part.type == "tool_call":
        return {
            "function_call": {
                "name": data.get("name", ""),
                "args": data.get("arguments") or {},
            }
        }
    if part.type == "tool_result":
        name = data.get("name", "")
        content = data.get("content", part.text)
        return {
            "function_response": {
                "name": name,
                "response": {"name": name, "content": content},
            }
        }
    return None


def convert_message_to_gemini(message: Message) -> Dict[str, Any]:
    """Convert one ``Message`` into a Gemini ``contents`` entry."""
    role = "model" if message.role == "assistant" else "user"
    if not message.is_structured():
        return {"role": role, "parts": [{"text": message.content}]}
    parts: List[Dict[str, Any]] = []
    for part in message.content:
        converted = _convert_part(part)
        if converted is not None:
            parts.append(converted)
    return {"role": role, "parts": parts}


def convert_messages_to_gemini(messages: Sequence[Message]) -> List[Dict[str, Any]]:
    """Convert a conversation in order, leaving out ``system`` turns."""
    return [convert_message_to_gemini(m) for m in messages if m.role != "system"]


__all__ = ["convert_message_to_gemini", "convert_messages_to_gemini"]

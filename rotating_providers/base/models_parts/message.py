"""
Message DTO used as the caller-side conversation format.

Content may be plain text or a list of `ContentPart` objects.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Union

from .content_part import ContentPart


Role = Literal["system", "user", "assistant", "tool"]


@dataclass
class Message:
    """A chat turn: ``role`` plus string or structured ``content``."""

    role: Role
    content: Union[str, List[ContentPart]]

    def is_structured(self) -> bool:
        """Return True if the message content is a structured list of parts."""
        return isinstance(self.content, list)


__all__ = [
    "Message",
    "Role",
]

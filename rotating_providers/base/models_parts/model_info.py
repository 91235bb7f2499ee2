"""
ModelInfo DTO for the static model registry.

Capability flags are kept in a generic mapping so the registry stays decoupled
from SDK specifics.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelInfo:
    """A single model registry entry.

    Attributes:
        id: Stable model identifier.
        name: Human-friendly display name.
        provider: Provider key owning this model.
        family: Optional family/category (e.g., ``"gemini-2.5"``).
        context_length: Maximum input context window, in tokens.
        max_output_tokens: Maximum completion size, in tokens.
        input_price: USD per million input tokens, when published.
        output_price: USD per million output tokens, when published.
        capabilities: Capability flags (``images``, ``prompt_cache``, ...).
    """

    id: str
    name: str
    provider: str
    family: Optional[str] = None
    context_length: Optional[int] = None
    max_output_tokens: Optional[int] = None
    input_price: Optional[float] = None
    output_price: Optional[float] = None
    capabilities: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the entry."""
        return asdict(self)


__all__ = [
    "ModelInfo",
]

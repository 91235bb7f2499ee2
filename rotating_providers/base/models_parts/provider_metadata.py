"""
Provider call metadata model.

Attached to accumulated responses: which provider and model answered, how
long the request took, and adapter-specific diagnostics.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """Execution metadata for a provider call.

    Attributes:
        provider_name: Canonical provider key (e.g., ``"gemini"``).
        model_name: Resolved model name used for the call.
        latency_ms: End-to-end latency for the operation, in milliseconds.
        extra: JSON-serializable map for adapter-specific diagnostics.
    """

    provider_name: str
    model_name: str
    latency_ms: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return asdict(self)


__all__ = [
    "ProviderMetadata",
]

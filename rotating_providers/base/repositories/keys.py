"""
Keys Repository

Purpose
- Centralize resolution of the primary and additional API keys a provider
  rotates through.
- Read-only: never writes back to the environment or any store.

Usage
- repo = KeysRepository()
- res = repo.get_resolution("gemini")
- res.api_key (primary), res.additional_keys (rotation order)
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any, Dict, List, Optional

from ...config.env import (
    get_env_var_candidates,
    is_placeholder,
    resolve_additional_keys,
    resolve_provider_key,
)


@dataclass
class KeyResolution:
    provider: str
    api_key: Optional[str]
    additional_keys: List[str]
    source: str  # "env", "none"
    extra: Dict[str, Any] = field(default_factory=dict)


class KeysRepository:
    """Resolve provider credentials from environment variables.

    Placeholder values (``changeme``, ``test_...``) are treated as unset so a
    copied sample ``.env`` never reaches the provider as a real key.
    """

    def get_resolution(self, provider: str) -> KeyResolution:
        p = (provider or "").lower().strip()
        additional = resolve_additional_keys(p)
        val, used = resolve_provider_key(p)
        if val:
            return KeyResolution(
                provider=p,
                api_key=val,
                additional_keys=additional,
                source="env",
                extra={"env_var": used},
            )
        ignored = next(
            (n for n in get_env_var_candidates(p) if is_placeholder(os.environ.get(n))),
            None,
        )
        extra: Dict[str, Any] = {"placeholder_ignored": ignored} if ignored else {}
        return KeyResolution(
            provider=p, api_key=None, additional_keys=additional, source="none", extra=extra
        )


__all__ = ["KeyResolution", "KeysRepository"]

"""rotating_providers.config.env
=============================

Environment variable mapping and helpers for provider credentials.

Purpose
-------
- Single source of truth for the environment variables that hold the primary
  credential (canonical name plus aliases) and the additional credentials the
  key rotator cycles through.
- Small lookup helpers shared by the config layer and ``KeysRepository``.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` (or an empty list) and let callers decide how to proceed.
"""

from __future__ import annotations

import os
import re
from typing import Dict, Iterable, List, Optional, Tuple

# Canonical provider → env var holding the primary key
ENV_MAP: Dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
}

# Provider → ordered tuple of acceptable env var names (canonical first).
# Gemini has used both GEMINI_API_KEY and GOOGLE_API_KEY historically.
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

# Provider → env var holding additional keys (comma or whitespace separated)
ADDITIONAL_KEYS_ENV_MAP: Dict[str, str] = {
    "gemini": "GEMINI_API_KEYS",
}

_KEY_SEPARATORS = re.compile(r"[,\s]+")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable env var names for a provider's primary key, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve the primary API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first candidate holding a real
        (non-placeholder) value, or ``(None, None)`` when there is none.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def split_keys(raw: Optional[str]) -> List[str]:
    """Split a comma/whitespace separated key list, dropping empties and placeholders."""
    if not raw:
        return []
    return [k for k in _KEY_SEPARATORS.split(raw.strip()) if k and not is_placeholder(k)]


def resolve_additional_keys(provider: str) -> List[str]:
    """Return the additional credentials configured for ``provider`` in the environment."""
    name = ADDITIONAL_KEYS_ENV_MAP.get((provider or "").lower())
    if not name:
        return []
    return split_keys(os.environ.get(name))


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "ADDITIONAL_KEYS_ENV_MAP",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
    "split_keys",
    "resolve_additional_keys",
]

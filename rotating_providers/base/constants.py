"""Base shared constants for provider adapters.

Central location to avoid scattering error strings across modules.

# pragma: allowlist secret
"""
from __future__ import annotations

# Raised at construction when no primary credential is configured
MISSING_PRIMARY_KEY_ERROR = "Primary API key is required for Google Gemini"  # pragma: allowlist secret

# Raised by the key rotator when its credential set is empty
NO_API_KEYS_ERROR = "No API keys available"  # pragma: allowlist secret

# Raised when every rotation attempt for one request hit a quota error
ROTATION_EXHAUSTED_ERROR = "rate_limit_retries_exhausted"

__all__ = [
    "MISSING_PRIMARY_KEY_ERROR",
    "NO_API_KEYS_ERROR",
    "ROTATION_EXHAUSTED_ERROR",
]

"""rotating_providers.config.defaults
=================================

Small, stable default values used across the package. They can be overridden
via environment variables, an external config file or in-code overrides, but
provide sensible fallbacks for local development and tests.

This module imports nothing from the rest of the package to avoid circular
imports; only plain constants live here.
"""

from __future__ import annotations

# Gemini defaults
GEMINI_DEFAULT_MODEL = "gemini-2.5-pro"

# ---- Key rotation ----
# Requests served by one credential before the rotator moves to the next.
MAX_REQUESTS_PER_KEY = 10
# Seconds to wait before the first rotation retry (doubles per retry; 0 = none).
ROTATION_RETRY_DELAY = 0.0


__all__ = [
    "GEMINI_DEFAULT_MODEL",
    "MAX_REQUESTS_PER_KEY",
    "ROTATION_RETRY_DELAY",
]

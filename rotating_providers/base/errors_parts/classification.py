"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping and message-based
heuristics. ``is_rotation_error`` is the one place that decides whether a
provider failure should make the adapter switch credentials; swap its body for
structured error codes once the SDK exposes them reliably.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


# Substrings that mark quota exhaustion / throttling in provider error text.
ROTATION_MARKERS = ("quota", "rate limit")


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.code`` (``google.api_core`` exceptions)
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status", "code"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and not isinstance(val, bool) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for non-HTTP exceptions."""
    PATTERN_GROUPS = (
        (ErrorCode.RATE_LIMIT, ROTATION_MARKERS),
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden", "permission denied")),
        (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "overloaded")),
        (ErrorCode.VALIDATION, ("invalid", "malformed")),
        (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def is_rotation_error(exc: BaseException) -> bool:
    """Return True when ``exc`` signals quota exhaustion or rate limiting.

    Matches the error text against :data:`ROTATION_MARKERS` (case-insensitive)
    and accepts an HTTP 429 status when the SDK exception carries one.
    ``ProviderError`` instances are judged by their code.
    """
    if isinstance(exc, ProviderError):
        return exc.code is ErrorCode.RATE_LIMIT
    if not isinstance(exc, Exception):
        return False
    msg = str(exc).lower()
    if any(marker in msg for marker in ROTATION_MARKERS):
        return True
    return _extract_status(exc) == 429


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (sync/async).
        3. HTTP status mapping.
        4. Substring heuristics.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "ROTATION_MARKERS",
    "classify_exception",
    "is_rotation_error",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]

"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the provider adapter, the key
rotator and error handling utilities. Values are lowercase snake_case and are
considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    CONFIGURATION = "configuration"
    NO_CREDENTIALS = "no_credentials"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]

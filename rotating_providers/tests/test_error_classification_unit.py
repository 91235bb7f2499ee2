from __future__ import annotations

import asyncio
import types

import pytest

from rotating_providers.base.errors import (
    ErrorCode,
    ProviderError,
    classify_exception,
    is_rotation_error,
)


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.NO_CREDENTIALS, message="none", provider="gemini")
    assert classify_exception(e) is ErrorCode.NO_CREDENTIALS  # nosec B101 - assert is appropriate in unit tests


def test_classify_timeouts():
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests
    # google.api_core exceptions carry the HTTP status in ``code``
    e3 = types.SimpleNamespace(code=429)
    assert classify_exception(e3) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests


def test_classify_heuristics():
    assert classify_exception(Exception("quota exceeded")) is ErrorCode.RATE_LIMIT
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT
    assert classify_exception(Exception("API key not valid")) is ErrorCode.AUTH
    assert classify_exception(Exception("invalid argument")) is ErrorCode.VALIDATION
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN


@pytest.mark.parametrize(
    "message",
    [
        "quota exceeded",
        "429 Quota exceeded for quota metric 'Generate Content API requests per minute'",
        "Rate limit reached for requests",
        "RATE LIMIT",
    ],
)
def test_is_rotation_error_matches_quota_text(message):
    assert is_rotation_error(RuntimeError(message)) is True


@pytest.mark.parametrize(
    "message",
    ["invalid argument", "API key not valid", "rate-limited", "internal error"],
)
def test_is_rotation_error_rejects_other_text(message):
    assert is_rotation_error(RuntimeError(message)) is False


def test_is_rotation_error_accepts_http_429_status():
    exc = RuntimeError("Resource has been exhausted")
    exc.code = 429  # type: ignore[attr-defined]
    assert is_rotation_error(exc) is True
    exc.code = 400  # type: ignore[attr-defined]
    assert is_rotation_error(exc) is False


def test_is_rotation_error_judges_provider_errors_by_code():
    rl = ProviderError(code=ErrorCode.RATE_LIMIT, message="slow down", provider="gemini")
    cfg = ProviderError(code=ErrorCode.CONFIGURATION, message="quota config missing", provider="gemini")
    assert is_rotation_error(rl) is True
    assert is_rotation_error(cfg) is False


def test_cancellation_is_never_a_rotation_error():
    assert is_rotation_error(asyncio.CancelledError("quota")) is False

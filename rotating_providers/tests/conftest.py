"""Pytest configuration for the providers test suite.

Keeps real credentials, dotenv files and config files out of every test and
provides a ``fake_genai`` fixture that swaps the SDK module used by the
Gemini client for an offline fake.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from rotating_providers.config import reset_config_cache
from rotating_providers.tests.utils import FakeGenAI

_PROVIDER_ENV = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_API_KEYS",
    "GEMINI_MODEL",
    "GEMINI_MAX_ROTATION_ATTEMPTS",
    "GEMINI_MAX_REQUESTS_PER_KEY",
    "GEMINI_RETRY_DELAY",
    "PROVIDERS_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear provider env vars and point the dotenv loader at a missing file."""
    for name in _PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def fake_genai(monkeypatch: pytest.MonkeyPatch) -> FakeGenAI:
    """Install a fresh fake SDK into ``rotating_providers.gemini.client``."""
    fake = FakeGenAI()
    monkeypatch.setattr("rotating_providers.gemini.client.genai", fake)
    return fake

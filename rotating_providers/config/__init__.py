"""Unified configuration layer for providers.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. GEMINI_MODEL, GEMINI_MAX_ROTATION_ATTEMPTS)
    4. ``KeysRepository`` credentials: the primary key (alias-aware) and the
       additional keys
    5. In-code overrides passed to the helper

A ``.env`` file (``DOTENV_FILE``, default ``.env``) is loaded into the
environment once, before the first lookup.
Placeholder values (see ``env.is_placeholder``) never win. Numeric values stay
strings here; ``HandlerOptions`` validates and coerces them.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_API_KEY, <PROVIDER>_API_KEYS (comma separated),
<PROVIDER>_MAX_ROTATION_ATTEMPTS, <PROVIDER>_MAX_REQUESTS_PER_KEY,
<PROVIDER>_RETRY_DELAY.

External Config File
--------------------
```
gemini:
  model: gemini-2.5-flash
  api_key: AIza...
  api_keys: [AIza..., AIza...]
  max_rotation_attempts: 4
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import GEMINI_DEFAULT_MODEL, MAX_REQUESTS_PER_KEY, ROTATION_RETRY_DELAY
from .env import is_placeholder


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "gemini": {
        "model": GEMINI_DEFAULT_MODEL,
        "max_requests_per_key": MAX_REQUESTS_PER_KEY,
        "retry_delay": ROTATION_RETRY_DELAY,
    },
}


# Credentials (API_KEY, API_KEYS) are resolved by ``KeysRepository``.
ENV_FIELD_MAP = {
    "model": "MODEL",
    "max_rotation_attempts": "MAX_ROTATION_ATTEMPTS",
    "max_requests_per_key": "MAX_REQUESTS_PER_KEY",
    "retry_delay": "RETRY_DELAY",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Load KEY=VALUE lines from the dotenv file into ``os.environ`` once.

    Comments and blank lines are skipped. Existing variables are only replaced
    when their current value looks like a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the cached config file and dotenv state (tests, config reloads)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is None or not val.strip() or is_placeholder(val):
            continue
        out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> key repo -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    # Local import: the repository imports config.env
    from ..base.repositories.keys import KeysRepository

    keys = KeysRepository().get_resolution(name)
    if keys.api_key:
        cfg["api_key"] = keys.api_key
    if keys.additional_keys:
        cfg["api_keys"] = keys.additional_keys
    if is_placeholder(cfg.get("api_key")):
        cfg.pop("api_key")

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]

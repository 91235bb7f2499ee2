"""Provider Factory utilities.

Purpose
-------
Create configured provider adapters by canonical name. Adapters are imported
lazily with ``importlib`` so importing the factory never pulls in an SDK.

Without explicit ``params`` the factory reads the merged configuration
(``rotating_providers.config.get_provider_config``) and validates it into
:class:`HandlerOptions`.

Failure modes
-------------
- Unknown provider, import failure, missing adapter class or invalid
  constructor arguments raise :class:`UnknownProviderError`.
- ``ProviderError`` raised by the adapter itself (e.g. missing primary key)
  propagates unchanged so callers keep the error taxonomy.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import ValidationError

from ..config import get_provider_config
from .dto import HandlerOptions
from .errors import ProviderError


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized."""


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"gemini"``)."""

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "gemini": {"module": "rotating_providers.gemini.client", "class": "GeminiProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[HandlerOptions] = None,
        **overrides: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name.
        params:
            Ready-made options. When omitted, options are built from
            ``get_provider_config(provider, overrides)``.
        **overrides:
            Option values that win over configuration (``api_key``,
            ``api_keys``, ``model``, ...).

        Raises
        ------
        UnknownProviderError
            Unknown provider, import failure, missing class or invalid options.
        ProviderError
            Raised by the adapter constructor (e.g. no primary key).
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            options = params or HandlerOptions.model_validate(get_provider_config(name, overrides))
        except ValidationError as exc:
            raise UnknownProviderError(f"Invalid configuration for provider '{provider}': {exc}") from exc

        try:
            return klass(options)
        except ProviderError:
            raise
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]

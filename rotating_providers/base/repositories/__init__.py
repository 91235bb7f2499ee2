"""Credential repositories for the provider layer."""

from .keys import KeyResolution, KeysRepository

__all__ = ["KeyResolution", "KeysRepository"]

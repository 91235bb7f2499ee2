"""Credential rotation for providers with per-key request budgets."""

from .key_rotator import KeyRotator, mask_key

__all__ = ["KeyRotator", "mask_key"]

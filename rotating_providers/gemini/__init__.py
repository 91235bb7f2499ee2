"""Gemini provider: key-rotating streaming adapter, model registry, format helpers."""

from .client import GeminiProvider
from .models import GEMINI_DEFAULT_MODEL, GEMINI_MODELS, resolve_model

__all__ = ["GeminiProvider", "GEMINI_DEFAULT_MODEL", "GEMINI_MODELS", "resolve_model"]

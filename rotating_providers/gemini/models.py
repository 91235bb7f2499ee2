"""
Gemini: static model registry

Known model ids with their limits, pricing (USD per million tokens) and
capability flags. ``resolve_model`` is the lookup the provider uses: unknown or
missing ids fall back to ``GEMINI_DEFAULT_MODEL``.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..base.models import ModelInfo
from ..config.defaults import GEMINI_DEFAULT_MODEL


PROVIDER = "gemini"


def _info(
    model_id: str,
    name: str,
    family: str,
    *,
    context_length: int,
    max_output_tokens: int,
    input_price: float,
    output_price: float,
    thinking: bool = False,
) -> ModelInfo:
    return ModelInfo(
        id=model_id,
        name=name,
        provider=PROVIDER,
        family=family,
        context_length=context_length,
        max_output_tokens=max_output_tokens,
        input_price=input_price,
        output_price=output_price,
        capabilities={
            "streaming": True,
            "images": True,
            "prompt_cache": False,
            "thinking": thinking,
        },
    )


GEMINI_MODELS: Dict[str, ModelInfo] = {
    m.id: m
    for m in (
        _info("gemini-2.5-pro", "Gemini 2.5 Pro", "gemini-2.5",
              context_length=1_048_576, max_output_tokens=65_536,
              input_price=1.25, output_price=10.0, thinking=True),
        _info("gemini-2.5-flash", "Gemini 2.5 Flash", "gemini-2.5",
              context_length=1_048_576, max_output_tokens=65_536,
              input_price=0.30, output_price=2.50, thinking=True),
        _info("gemini-2.5-flash-lite", "Gemini 2.5 Flash-Lite", "gemini-2.5",
              context_length=1_048_576, max_output_tokens=65_536,
              input_price=0.10, output_price=0.40, thinking=True),
        _info("gemini-2.0-flash", "Gemini 2.0 Flash", "gemini-2.0",
              context_length=1_048_576, max_output_tokens=8_192,
              input_price=0.10, output_price=0.40),
        _info("gemini-2.0-flash-lite", "Gemini 2.0 Flash-Lite", "gemini-2.0",
              context_length=1_048_576, max_output_tokens=8_192,
              input_price=0.075, output_price=0.30),
        _info("gemini-1.5-pro-002", "Gemini 1.5 Pro", "gemini-1.5",
              context_length=2_097_152, max_output_tokens=8_192,
              input_price=1.25, output_price=5.0),
        _info("gemini-1.5-flash-002", "Gemini 1.5 Flash", "gemini-1.5",
              context_length=1_048_576, max_output_tokens=8_192,
              input_price=0.075, output_price=0.30),
    )
}


def resolve_model(model_id: Optional[str]) -> Tuple[str, ModelInfo]:
    """Return ``(id, info)`` for a known id, else the default model's pair."""
    if model_id and model_id in GEMINI_MODELS:
        return model_id, GEMINI_MODELS[model_id]
    return GEMINI_DEFAULT_MODEL, GEMINI_MODELS[GEMINI_DEFAULT_MODEL]


__all__ = ["GEMINI_MODELS", "GEMINI_DEFAULT_MODEL", "resolve_model"]

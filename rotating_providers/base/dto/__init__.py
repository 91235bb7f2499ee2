"""Validated DTOs for the provider boundary (pydantic)."""

from .handler_options import HandlerOptions

__all__ = ["HandlerOptions"]

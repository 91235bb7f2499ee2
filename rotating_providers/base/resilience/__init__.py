"""Resilience policies (retry bounds and backoff)."""

from .retry import RetryConfig, DEFAULT_RETRY_CONFIG

__all__ = ["RetryConfig", "DEFAULT_RETRY_CONFIG"]

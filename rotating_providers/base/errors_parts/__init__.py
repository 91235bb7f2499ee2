"""Errors parts package public surface.

Prefer importing from `rotating_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception, is_rotation_error

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "is_rotation_error"]

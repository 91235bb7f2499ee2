"""Typed options object for constructing a key-rotating provider.

Purpose
-------
Capture everything a provider needs at construction: the primary credential,
the additional credentials to rotate through, the model selection and the
rotation budget. The factory builds it from the merged configuration; callers
can also build it directly.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()``.

Failure modes
-------------
- ``pydantic.ValidationError`` for wrongly typed or out-of-range values.
- A missing primary key is *not* a validation error here; the provider raises
  a ``CONFIGURATION`` ``ProviderError`` so the failure carries the taxonomy.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...config.defaults import MAX_REQUESTS_PER_KEY, ROTATION_RETRY_DELAY
from ...config.env import split_keys


class HandlerOptions(BaseModel):
    """Provider construction options.

    Attributes
    ----------
    api_key:
        Primary credential; always tried first.
    api_keys:
        Additional credentials, in rotation order. A comma separated string is
        accepted and split.
    model_id:
        Requested model id (alias ``model``); unknown ids resolve to the
        default model.
    max_requests_per_key:
        Requests served by one key before rotating to the next.
    max_rotation_attempts:
        Total attempts per request when quota errors trigger rotation. ``None``
        means one attempt per credential plus one.
    retry_delay:
        Seconds before the first rotation retry, doubling per retry.
    """

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=(), extra="ignore")

    api_key: Optional[str] = None
    api_keys: List[str] = Field(default_factory=list)
    model_id: Optional[str] = Field(default=None, alias="model")
    max_requests_per_key: int = Field(default=MAX_REQUESTS_PER_KEY, ge=1)
    max_rotation_attempts: Optional[int] = Field(default=None, ge=1)
    retry_delay: float = Field(default=ROTATION_RETRY_DELAY, ge=0.0)

    @field_validator("api_keys", mode="before")
    @classmethod
    def _split_key_string(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return split_keys(value)
        return value


__all__ = ["HandlerOptions"]

"""Round-robin API key rotator with a per-key request budget.

The rotator owns an ordered credential set (primary first), a usage counter
per credential and a cursor naming the active one. Every request served by
the active key is counted; once a key reaches ``max_requests_per_key`` the
rotator moves on to the next key that still has budget, and when no key has
budget left all counters start over at the primary.

Counters live in memory only and are lost on restart. Operations are
serialized by an internal lock, which keeps the state consistent when a
rotator is shared but does not make it a scheduler for concurrent requests.
"""
from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Tuple

from ..constants import NO_API_KEYS_ERROR
from ..errors import ErrorCode, ProviderError
from ..logging import LogContext, get_logger, log_event
from ...config.defaults import MAX_REQUESTS_PER_KEY


def mask_key(key: Optional[str]) -> str:
    """Render a credential for logs: last four characters only."""
    if not key:
        return "<none>"
    return f"...{key[-4:]}" if len(key) > 4 else "****"


def _normalize_keys(primary: Optional[str], additional: Optional[Iterable[Optional[str]]]) -> List[str]:
    """Primary first, then additional; falsy entries and duplicates dropped."""
    keys: List[str] = []
    for key in [primary, *(additional or ())]:
        if key and key not in keys:
            keys.append(key)
    return keys


class KeyRotator:
    """Track per-key usage and pick the credential for the next request."""

    def __init__(
        self,
        primary_key: Optional[str],
        additional_keys: Optional[Iterable[Optional[str]]] = None,
        *,
        max_requests_per_key: int = MAX_REQUESTS_PER_KEY,
        provider: str = "gemini",
    ) -> None:
        if max_requests_per_key < 1:
            raise ValueError("max_requests_per_key must be >= 1")
        self._max_requests = max_requests_per_key
        self._provider = provider
        self._lock = threading.RLock()
        self._logger = get_logger(f"providers.{provider}.keys")
        self._keys: List[str] = _normalize_keys(primary_key, additional_keys)
        self._index = 0
        self._counts: Dict[str, int] = {}
        self._reset_counts()

    # ---- read-only views ----

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self._keys)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def max_requests_per_key(self) -> int:
        return self._max_requests

    @property
    def request_counts(self) -> Dict[str, int]:
        """Snapshot of the usage counters (mutating it has no effect)."""
        with self._lock:
            return dict(self._counts)

    def __len__(self) -> int:
        return len(self._keys)

    # ---- operations ----

    def current_key(self) -> str:
        """Return the active credential.

        Raises:
            ProviderError: ``NO_CREDENTIALS`` when the credential set is empty.
        """
        with self._lock:
            self._require_keys()
            return self._keys[self._index]

    def rotate_key(self) -> str:
        """Advance to the next credential with remaining budget and return it.

        The active key's counter is zeroed first if it reached the limit. The
        scan then visits every position once, starting after the cursor and
        wrapping around (the active key is checked last). If nothing has
        budget left, all counters are reset and the primary key is returned.

        Raises:
            ProviderError: ``NO_CREDENTIALS`` when the credential set is empty.
        """
        with self._lock:
            self._require_keys()
            previous = self._keys[self._index]
            if self._counts.get(previous, 0) >= self._max_requests:
                self._counts[previous] = 0

            size = len(self._keys)
            for _ in range(size):
                self._index = (self._index + 1) % size
                candidate = self._keys[self._index]
                if self._counts.get(candidate, 0) < self._max_requests:
                    self._log("keys.rotate", previous=mask_key(previous), current=mask_key(candidate))
                    return candidate

            self._reset_counts()
            self._index = 0
            self._log("keys.reset", previous=mask_key(previous), current=mask_key(self._keys[0]))
            return self._keys[0]

    def increment_request_count(self) -> None:
        """Count one request against the active key.

        Reaching the limit rotates immediately, so the following
        ``current_key()`` may name a different credential.
        """
        with self._lock:
            key = self.current_key()
            count = self._counts.get(key, 0) + 1
            self._counts[key] = count
            if count >= self._max_requests:
                self.rotate_key()

    def update_keys(self, primary_key: Optional[str], additional_keys: Optional[Iterable[Optional[str]]] = None) -> None:
        """Replace the whole credential set; cursor and counters start over."""
        with self._lock:
            self._keys = _normalize_keys(primary_key, additional_keys)
            self._index = 0
            self._reset_counts()
            self._log("keys.update")

    # ---- internal helpers ----

    def _reset_counts(self) -> None:
        self._counts = {key: 0 for key in self._keys}

    def _require_keys(self) -> None:
        if not self._keys:
            raise ProviderError(
                code=ErrorCode.NO_CREDENTIALS,
                message=NO_API_KEYS_ERROR,
                provider=self._provider,
            )

    def _log(self, event: str, **fields) -> None:
        log_event(
            self._logger,
            event,
            LogContext(provider=self._provider),
            index=self._index,
            keys=len(self._keys),
            **fields,
        )


__all__ = ["KeyRotator", "mask_key"]

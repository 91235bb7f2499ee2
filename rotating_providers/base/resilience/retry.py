"""Retry bounds for the key-rotation retry loop.

The streaming adapter cannot use a call-wrapping decorator: its unit of work
is an async generator that may fail before or after yielding. It consults a
``RetryConfig`` instead, asking it whether another attempt is allowed and how
long to wait first.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: BaseException | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    """Bounded retry policy.

    Attributes:
        max_attempts: Total attempts, the first call included.
        delay_initial: Seconds to wait before the first retry; 0 disables waiting.
        delay_base: Exponential growth factor applied per retry.
        attempt_logger: Optional hook called after every failed attempt.
    """

    max_attempts: int = 3
    delay_initial: float = 0.0
    delay_base: float = 2.0
    attempt_logger: Optional[AttemptLogger] = None

    def delay_for(self, attempt: int) -> Optional[float]:
        """Return the wait before retrying after failed ``attempt`` (0-based).

        ``None`` means the attempt budget is spent and no retry may follow.
        """
        if attempt < 0 or attempt >= self.max_attempts - 1:
            return None
        return self.delay_initial * (self.delay_base**attempt)


DEFAULT_RETRY_CONFIG = RetryConfig()


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
]

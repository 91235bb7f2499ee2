"""Structured logging utilities for the provider layer.

Every module logs through children of the shared ``providers`` logger, which
writes one JSON object per line to stderr. ``normalized_log_event`` injects
the canonical keys (``phase``, ``attempt``, ``error_code``, ``emitted``,
``tokens``) so stream and rotation events can be filtered uniformly.

Environment
-----------
``PROVIDERS_LOG_LEVEL`` overrides the level of the shared logger.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext


_BASE_LOGGER_ATTR = "_providers_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_providers_console_handler"
_FILE_HANDLER_ATTR = "_providers_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name (case-insensitive); unknown names yield ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _console_handler(json_mode: bool, level: int) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``providers`` logger."""
    logger = logging.getLogger("providers")
    desired_level = _parse_level(os.getenv("PROVIDERS_LOG_LEVEL"), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # A closed stream cannot be re-pointed; start a fresh handler.
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_console_handler(json_mode, desired_level))
                continue
            # pytest's capsys swaps sys.stderr between tests; follow it.
            if stream_obj is not sys.stderr:
                existing.setStream(sys.stderr)
            existing.setLevel(desired_level)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = "providers", json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the configured ``providers`` logger."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == "providers":
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared providers logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired level, numeric or by name. ``None`` keeps the current level.
    file_path: Optional[str]
        When provided, attach (or reuse) a rotating file handler writing to
        this path. When ``None``, any file handler managed here is removed.
    json_mode: bool
        JSON formatter when True, plain text otherwise.

    Returns
    -------
    logging.Logger
        The configured ``providers`` logger.
    """
    logger = get_logger("providers", json_mode=json_mode)
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path:
            existing = h  # type: ignore[assignment]
            continue
        logger.removeHandler(h)
        with contextlib.suppress(Exception):
            h.close()

    if existing is None:
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured log event as a JSON payload.

    Keys whose value is ``None`` are dropped unless ``keep_none`` is True.
    ``ctx`` fields are merged shallowly before ``fields``.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False))


REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info into a JSON-friendly mapping (or ``None``)."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: int | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a structured event that always carries the normalized keys.

    ``error_code`` is omitted when ``None``; the other normalized keys are kept
    even when unknown. ``extra_fields`` never overwrite a normalized value.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or base_fields.get(k) is not None:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]

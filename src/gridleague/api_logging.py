"""Call logging for the league data and service layers."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from gridleague.config import get_settings

F = TypeVar("F", bound=Callable[..., Any])

_LOG_FILE_NAME = "league_calls.log"

# Resolved from settings on first use unless set beforehand.
_LOG_DIR: str | None = None
_LOG_FILE: str | None = None

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger, _LOG_DIR, _LOG_FILE
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        if _LOG_DIR is None:
            _LOG_DIR = get_settings().log_dir
        if _LOG_FILE is None:
            _LOG_FILE = os.path.join(_LOG_DIR, _LOG_FILE_NAME)
        os.makedirs(_LOG_DIR, exist_ok=True)
        log_file = os.path.abspath(_LOG_FILE)

        _logger = logging.getLogger("gridleague.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        # Other handlers (log capture, app-level ones) may already be attached.
        if not any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_file
            for h in _logger.handlers
        ):
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is self
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def log_api_call(fn: F) -> F:
    """Decorator that logs repository calls against the backend."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        count = len(result) if isinstance(result, list) else (0 if result is None else 1)
        logger.info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, count, elapsed,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Decorator that logs league service calls."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, elapsed)
        return result

    return wrapper  # type: ignore[return-value]

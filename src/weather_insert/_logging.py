"""Diagnostic logging for weather service calls."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Awaitable, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

LOGGER_NAME = "weather_insert.api"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

_logger = logging.getLogger(LOGGER_NAME)
_file_handler: logging.FileHandler | None = None
_handler_lock = threading.Lock()


def configure_file_logging(path: str | os.PathLike[str]) -> logging.Logger:
    """Mirror API call logs into ``path``, creating its directory on first use.

    Calling again with another path replaces the previous file handler.
    """
    global _file_handler
    with _handler_lock:
        if _file_handler is not None:
            if os.path.abspath(_file_handler.baseFilename) == os.path.abspath(path):
                return _logger
            _logger.removeHandler(_file_handler)
            _file_handler.close()

        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
        _logger.setLevel(logging.DEBUG)
        _file_handler = handler
    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any], skip_self: bool) -> str:
    arg_parts = [repr(a) for a in (args[1:] if skip_self else args)]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def log_fetch(fn: F) -> F:
    """Decorator that logs async network-backed calls to the API logger."""
    # skip "self" for functions defined in a class body
    is_method = "." in fn.__qualname__

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _describe_args(args, kwargs, is_method)
        _logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = await fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            _logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        _logger.info("OK: %s(%s) (%.3fs)", fn.__qualname__, arg_str, elapsed)
        return result

    return wrapper  # type: ignore[return-value]

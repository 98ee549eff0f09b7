"""Call logging for the data-source and engine layers.

Sources and services write to a file under the configured log directory.
Engine functions only emit records on their module logger and never touch
the filesystem; where those records end up is the host application's call.
"""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from collections.abc import Sized
from typing import Any, Callable, TypeVar

from raceranking.config import Settings

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = Settings.from_env().log_dir
_LOG_FILE = os.path.join(_LOG_DIR, "raceranking.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        logger = logging.getLogger("raceranking")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # Other handlers (test capture, host config) may already be attached.
        if not _has_file_handler(logger, _LOG_FILE):
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)

        _logger = logger

    return _logger


def _summarize(value: Any) -> str:
    """Short form of an argument: collections by size, scalars by repr."""
    if isinstance(value, (str, bytes)):
        return repr(value)
    if isinstance(value, Sized):
        return f"<{type(value).__name__} len={len(value)}>"
    return repr(value)


def _source_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _log_source_ok(name: str, arg_str: str, result: Any, start: float) -> None:
    status = "not found" if result is None else "found"
    get_logger().info(
        "OK: %s(%s) -> %s (%.3fs)",
        name, arg_str, status, time.monotonic() - start,
    )


def _log_source_fail(name: str, arg_str: str, exc: Exception, start: float) -> None:
    get_logger().error(
        "FAIL: %s(%s) -> %s: %s (%.3fs)",
        name, arg_str, type(exc).__name__, exc, time.monotonic() - start,
    )


def log_source_call(fn: F) -> F:
    """Decorator that logs data-source method calls to the log file.

    Works on plain and ``async def`` methods alike; both emit the same
    CALL / OK / FAIL lines.
    """
    name = fn.__qualname__

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _source_args(args, kwargs)
            get_logger().info("CALL: %s(%s)", name, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _log_source_fail(name, arg_str, exc, start)
                raise
            _log_source_ok(name, arg_str, result, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _source_args(args, kwargs)
        get_logger().info("CALL: %s(%s)", name, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _log_source_fail(name, arg_str, exc, start)
            raise
        _log_source_ok(name, arg_str, result, start)
        return result

    return wrapper  # type: ignore[return-value]


def log_engine_call(fn: F) -> F:
    """Decorator that logs engine function calls with argument sizes.

    Records go to the logger of the decorated function's module (calls and
    results at DEBUG, failures at ERROR). No handler or directory is ever
    created here.
    """
    logger = logging.getLogger(fn.__module__)

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_parts = [_summarize(a) for a in args]
        arg_parts += [f"{k}={_summarize(v)}" for k, v in kwargs.items()]
        logger.debug("ENGINE CALL: %s(%s)", fn.__qualname__, ", ".join(arg_parts))

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "ENGINE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.debug(
            "ENGINE OK: %s -> %s (%.3fs)",
            fn.__qualname__, _summarize(result), time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]

"""Diagnostic logging for fetch calls and scheduler ticks."""

from __future__ import annotations

import functools
import logging
import os
import sys
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "meteoswiss"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or one of its children."""
    if name is None:
        return logger
    return logger.getChild(name)


def configure_logging(
    log_file: str | os.PathLike[str] | None = None,
    level: int | str = logging.INFO,
) -> logging.Logger:
    """Attach a single handler to the package logger.

    Logs go to ``log_file`` when given (its directory is created), to stderr
    otherwise. Calling this again replaces the previous handler.
    """
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_file is not None:
        directory = os.path.dirname(os.fspath(log_file))
        if directory:
            os.makedirs(directory, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def log_fetch(fn: F) -> F:
    """Decorator that logs client fetch calls with their outcome and duration."""
    fetch_logger = get_logger("fetch")

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # Skip 'self'
        arg_parts = [repr(a) for a in args[1:]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        fetch_logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            fetch_logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        count = len(result) if isinstance(result, list) else 1
        fetch_logger.info(
            "OK: %s(%s) -> %d records (%.3fs)",
            fn.__qualname__, arg_str, count, elapsed,
        )
        return result

    return wrapper  # type: ignore[return-value]

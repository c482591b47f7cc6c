"""Logging configuration and context helpers built on structlog."""

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def configure_logging(log_level: str = "INFO", *, dev_mode: bool = False) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        log_level: Minimum level name, e.g. "DEBUG" or "INFO".
        dev_mode: Render human-readable console output instead of JSON.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    renderer: Any = (
        structlog.dev.ConsoleRenderer()
        if dev_mode
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@contextmanager
def log_bind(**kwargs: Any) -> Iterator[None]:
    """Bind key/value pairs to every log entry emitted inside the block."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


@contextmanager
def observe_around(logger: Any, name: str, **kwargs: Any) -> Iterator[None]:
    """Log the start, completion and duration of an operation.

    Failures are logged as ``<name>_FAILED`` and re-raised.
    """
    started = time.perf_counter()
    logger.info(f"{name}_STARTED", **kwargs)
    try:
        yield
    except Exception:
        logger.exception(
            f"{name}_FAILED",
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            **kwargs,
        )
        raise
    logger.info(
        f"{name}_COMPLETED",
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
        **kwargs,
    )

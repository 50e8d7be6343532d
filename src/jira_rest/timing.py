"""Timing helper for structured logging.

Uses time.perf_counter() for sub-millisecond precision.
"""

import logging
import time
from contextlib import contextmanager
from typing import Optional


@contextmanager
def timed_operation(
    operation: str,
    logger: logging.Logger,
    level: int = logging.INFO,
    extra: Optional[dict] = None,
):
    """Log how long the wrapped block took.

    On normal exit logs ``{operation}_completed`` at ``level``; if the block
    raises, logs ``{operation}_failed`` at ERROR and re-raises. Both records
    carry ``duration_ms`` and ``status`` next to ``extra``.

    The yielded dict is merged into the final record, so callers can attach
    values only known at the end (item counts, page counts). Setting
    ``status`` there replaces "success" for blocks that report failure
    without raising.

    Example:
        >>> with timed_operation("jira_get_all", logger) as ctx:
        ...     ctx["items"] = 42
    """
    start = time.perf_counter()
    context: dict = dict(extra or {})

    try:
        yield context
    except Exception as e:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.error(
            f"{operation}_failed",
            extra={
                **context,
                "duration_ms": round(duration_ms, 2),
                "status": "failed",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
        raise

    duration_ms = (time.perf_counter() - start) * 1000
    logger.log(
        level,
        f"{operation}_completed",
        extra={
            "status": "success",
            **context,
            "duration_ms": round(duration_ms, 2),
        },
    )

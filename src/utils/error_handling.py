"""Error reporting and timing helpers.

Usage in Qt slots:
    from utils.error_handling import log_exception

    try:
        self._expand(handle)
    except LookupError as e:
        log_exception(e, "Row expansion failed", extra={"handle": handle})
        raise

Batch validation:
    collector = ErrorCollector("hierarchy load")
    for row in rows:
        with collector.catch(f"row {row.index}"):
            apply(row)

Performance timing is enabled with NESTGRID_PERF_DEBUG=1.
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

PERF_DEBUG = os.environ.get("NESTGRID_PERF_DEBUG", "0") == "1"

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Log the execution time of ``func`` at DEBUG level when PERF_DEBUG is on."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__qualname__} failed after {elapsed:.3f}s")
            raise
        elapsed = time.perf_counter() - start
        logger.debug(f"PERF: {func.__module__}.{func.__qualname__} took {elapsed:.3f}s")
        return result

    return wrapper  # type: ignore


class TimingContext:
    """Context manager for timing code blocks when PERF_DEBUG is on.

    Example:
        with TimingContext("root_view"):
            builder.build_roots(tree)
    """

    def __init__(self, name: str):
        self.name = name
        self.start: float = 0

    def __enter__(self) -> "TimingContext":
        if PERF_DEBUG:
            self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if PERF_DEBUG:
            elapsed = time.perf_counter() - self.start
            status = "failed" if exc_val else "completed"
            logger.debug(f"PERF: {self.name} {status} in {elapsed:.3f}s")


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception into a user-facing message.

    Args:
        error: The exception that occurred
        context: Optional description of what was being done
        include_type: Whether to prefix the exception type name

    Returns:
        Message suitable for a dialog or status bar
    """
    error_str = str(error)

    if not error_str or error_str == "None":
        error_str = type(error).__name__
        include_type = False

    parts = []
    if context:
        parts.append(context)

    if include_type:
        parts.append(f"{type(error).__name__}: {error_str}")
    else:
        parts.append(error_str)

    return " - ".join(parts)


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with its traceback and structured context."""
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=True)


class ErrorCollector:
    """Collects errors during a batch operation without stopping it.

    Example:
        collector = ErrorCollector("hierarchy load")
        for idx, row in enumerate(rows):
            with collector.catch(f"row {idx}"):
                apply(row)

        if collector.has_errors:
            raise HierarchyLoadError(collector.get_summary(), collector.errors)
    """

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.errors: list[str] = []
        self._current_context: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def catch(self, context: str) -> "ErrorCollector":
        self._current_context = context
        return self

    def __enter__(self) -> "ErrorCollector":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            return False
        if not isinstance(exc_val, Exception):
            return False
        self.errors.append(format_error_message(exc_val, self._current_context))
        log_exception(
            exc_val,
            f"{self.operation_name}: {self._current_context}",
            level=logging.WARNING,
        )
        return True

    def get_summary(self) -> str:
        if not self.errors:
            return f"{self.operation_name} completed successfully"
        return f"{self.operation_name} completed with {len(self.errors)} error(s)"

"""Standardized error handling and performance utilities.

This module provides:
1. Consistent error handling patterns for UI handlers and services
2. Performance timing decorator for profiling hot paths
3. Structured context logging for errors

Usage in UI components:
    from utils.error_handling import format_error_message, log_exception

    try:
        # ... do work ...
    except Exception as e:
        log_exception(e, "Failed to export proctors")
        QMessageBox.critical(self, "Error", format_error_message(e))

Performance timing usage:
    from utils.error_handling import timed

    @timed
    def seed_samples():
        ...

    # Enable timing with: PROCTOR_PERF_DEBUG=1
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

# Environment variable to enable performance timing
PERF_DEBUG = os.environ.get("PROCTOR_PERF_DEBUG", "0") == "1"

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Decorator to log execution time of functions.

    Only active when PROCTOR_PERF_DEBUG=1 environment variable is set.
    Logs timing at DEBUG level to avoid noise in production.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} took {elapsed:.3f}s")
            return result
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} failed after {elapsed:.3f}s")
            raise

    return wrapper  # type: ignore


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception into a user-friendly message.

    Args:
        error: The exception that occurred
        context: Optional context describing what was being done
        include_type: Whether to include the exception type name

    Returns:
        Formatted error message suitable for display to users
    """
    error_str = str(error)

    # Handle empty error messages
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

    return " - ".join(parts) if len(parts) > 1 else parts[0]


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with structured context.

    Args:
        error: The exception that occurred
        context: Description of what was being done when error occurred
        extra: Additional context to include in the log record
        level: Logging level (default ERROR)
    """
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=True)


def safe_operation(
    operation: Callable[[], Any],
    context: str,
    default: Any = None,
    reraise: bool = False,
) -> Any:
    """Execute an operation with standardized error handling.

    Args:
        operation: Callable to execute
        context: Description for error messages
        default: Value to return on error (if not reraising)
        reraise: Whether to reraise the exception after logging

    Returns:
        Result of operation, or default on error
    """
    try:
        return operation()
    except Exception as e:
        log_exception(e, context, level=logging.WARNING)
        if reraise:
            raise
        return default

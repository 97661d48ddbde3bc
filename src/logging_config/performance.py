"""Performance Logging.

Decorator for timing engine operations and reporting slow ones.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional

from src.logging_config.config import get_active_config


def log_performance(
    threshold_ms: Optional[float] = None,
    logger_name: Optional[str] = None,
) -> Callable:
    """Decorator that logs function execution time.

    Logs every call at DEBUG level and calls above the threshold at WARNING.
    Exceptions are logged at ERROR and re-raised unchanged.

    Args:
        threshold_ms: Slow operation threshold in milliseconds.
                     Defaults to the slow_threshold_ms of the config
                     installed by configure_logging(), read on each call.
        logger_name: Custom logger name. Defaults to function's module.

    Example:
        @log_performance(threshold_ms=50)
        def predict_all(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        _logger = logging.getLogger(logger_name or func.__module__)
        func_name = func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                _logger.error(
                    f"{func_name} failed after {duration_ms:.1f}ms: {type(exc).__name__}",
                    extra={"duration_ms": round(duration_ms, 2)},
                )
                raise
            finally:
                duration_ms = (time.perf_counter() - start) * 1000
                extra = {"duration_ms": round(duration_ms, 2)}
                limit = threshold_ms
                if limit is None:
                    limit = get_active_config().slow_threshold_ms
                if duration_ms >= limit:
                    _logger.warning(
                        f"Slow operation: {func_name} took {duration_ms:.1f}ms",
                        extra=extra,
                    )
                else:
                    _logger.debug(
                        f"{func_name} completed in {duration_ms:.1f}ms",
                        extra=extra,
                    )

        return wrapper

    return decorator

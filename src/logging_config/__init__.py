"""Structured logging for the predictive maintenance engine.

Provides JSON or console log output, bound log context,
and performance timing.
"""

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel
from src.logging_config.context import LogContext, get_context_dict
from src.logging_config.performance import log_performance
from src.logging_config.setup import configure_logging

__all__ = [
    "LogContext",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "configure_logging",
    "get_context_dict",
    "log_performance",
]

"""Logging Configuration.

Settings for log levels, output formats, and slow-operation reporting.
"""

from dataclasses import dataclass
from enum import Enum


class LogLevel(str, Enum):
    """Log level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


@dataclass
class LoggingConfig:
    """Structured logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    include_caller: bool = True
    slow_threshold_ms: float = 250.0
    service_name: str = "predictive-maintenance"


DEFAULT_LOGGING_CONFIG = LoggingConfig()

LEVEL_ENV_VAR = "PM_LOG_LEVEL"
FORMAT_ENV_VAR = "PM_LOG_FORMAT"

_active_config = DEFAULT_LOGGING_CONFIG


def get_active_config() -> LoggingConfig:
    """Config most recently installed by configure_logging()."""
    return _active_config


def set_active_config(config: LoggingConfig) -> None:
    global _active_config
    _active_config = config

"""Pytest configuration and shared fixtures."""

import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class FakeClock:
    """Settable clock for time-windowed behavior."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() changes made by a test."""
    from src.logging_config.config import get_active_config, set_active_config

    root = logging.getLogger()
    original_config = get_active_config()
    original_handlers = root.handlers[:]
    original_level = root.level

    yield

    root.handlers[:] = original_handlers
    root.setLevel(original_level)
    set_active_config(original_config)


@pytest.fixture(autouse=True)
def reset_default_engine():
    """Drop the process default engine between tests."""
    from src.maintenance import engine

    engine.reset()
    yield
    engine.reset()

"""Shared pytest fixtures for limaclock tests."""

import logging
import pytest
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

import limaclock.provider as provider_module
from limaclock.clock import FixedClock
from limaclock.provider import TimeProvider


LIMA = ZoneInfo("America/Lima")


# =============================================================================
# Clocks
# =============================================================================

@pytest.fixture
def lima_tz() -> ZoneInfo:
    """The default zone."""
    return LIMA


@pytest.fixture
def thursday_afternoon() -> datetime:
    """Thursday 2024-03-07 14:05:09 in Lima (19:05:09 UTC)."""
    return datetime(2024, 3, 7, 19, 5, 9, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(thursday_afternoon: datetime) -> FixedClock:
    """A clock pinned to thursday_afternoon."""
    return FixedClock(thursday_afternoon)


@pytest.fixture
def new_years_eve_clock() -> FixedClock:
    """Tuesday 2024-12-31 23:30:00 in Lima, already 2025 in UTC."""
    return FixedClock(datetime(2024, 12, 31, 23, 30, 0, tzinfo=LIMA))


# =============================================================================
# Providers
# =============================================================================

@pytest.fixture
def provider(fixed_clock: FixedClock) -> TimeProvider:
    """A Lima provider reading fixed_clock."""
    return TimeProvider(clock=fixed_clock)


@pytest.fixture
def reset_default_provider(monkeypatch):
    """Drop the shared provider so each test builds its own."""
    monkeypatch.setattr(provider_module, "_default_provider", None)
    yield
    monkeypatch.setattr(provider_module, "_default_provider", None)


# =============================================================================
# Filesystem
# =============================================================================

@pytest.fixture
def temp_log_dir() -> Path:
    """Create a temporary log directory for tests."""
    with tempfile.TemporaryDirectory(prefix="limaclock_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def detach_log_handlers():
    """Remove handlers installed by setup_logging after each test."""
    yield
    root_logger = logging.getLogger("limaclock")
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

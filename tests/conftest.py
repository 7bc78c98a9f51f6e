"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites.

Fixtures:
    - utc_timezone: Pins BEANKIT_TIMEZONE to UTC for the test
    - offset_timezone: Pins BEANKIT_TIMEZONE to +08:00 for the test
    - system_timezone: Clears BEANKIT_TIMEZONE (system local zone)

Architecture Notes:
    - Environment is changed through monkeypatch, restored after each test
    - Record classes live in the test modules that use them

Usage:
    def test_something(utc_timezone):
        assert to_local_datetime(0) == datetime(1970, 1, 1)
"""

import logging

import pytest

from beankit.shared.config import TIMEZONE_ENV_VAR

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# TIME ZONE FIXTURES
# ============================================================================


@pytest.fixture
def utc_timezone(monkeypatch):
    """Interpret local date-times in UTC."""
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "UTC")
    return "UTC"


@pytest.fixture
def offset_timezone(monkeypatch):
    """Interpret local date-times at a fixed +08:00 offset."""
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "+08:00")
    return "+08:00"


@pytest.fixture
def system_timezone(monkeypatch):
    """Interpret local date-times in the system local zone."""
    monkeypatch.delenv(TIMEZONE_ENV_VAR, raising=False)


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """
    Pytest configuration hook.

    Registers custom markers for test categorization.

    Markers:
        - unit: Unit tests (no external dependencies)
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (no external dependencies)"
    )


def pytest_collection_modifyitems(config, items):
    """
    Pytest collection hook.

    Marks every collected test under tests/unit with the 'unit' marker.
    """
    for item in items:
        if "unit" in item.nodeid.split("/"):
            item.add_marker(pytest.mark.unit)

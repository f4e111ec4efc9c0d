"""Pytest configuration and fixtures for breach engine testing."""

import pytest

from tests.fakes import FIXED_TIME, FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    """Controllable monotonic clock for cache tests."""
    return FakeClock()


@pytest.fixture
def fixed_now():
    """Completion-time clock returning a constant UTC timestamp."""
    return lambda: FIXED_TIME


@pytest.fixture
def hhs_headers() -> list:
    return ["Name of Covered Entity", "State", "Covered Entity Type", "Individuals Affected"]


@pytest.fixture
def hhs_rows() -> list:
    return [
        ["Acme Health", "CA", "Healthcare Provider", "1200"],
        ["Blue Valley Clinic", "TX", "Healthcare Provider", "530"],
        ["North Plan Inc", "ME", "Health Plan", "87000"],
    ]

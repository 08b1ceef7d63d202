"""Shared fixtures for the rentlib test suite."""

import pytest

from rentlib.dates import FixedClock, set_default_clock


@pytest.fixture(autouse=True)
def reset_default_clock():
    """Never let a test leak its default clock into the next one."""
    set_default_clock(None)
    yield
    set_default_clock(None)


@pytest.fixture
def clock():
    return FixedClock("2024-06-15")

"""
Pytest Configuration and Shared Fixtures

This file is automatically loaded by pytest and provides:
- Fake source implementations for isolated testing
- Fixtures that reset process properties and settings between tests

Run tests:
    pytest propconf/tests/ -v
    pytest propconf/tests/ -v --cov=propconf  # with coverage
"""

import pytest

from propconf.config.property import Property
from propconf.config.parsers import parse_integer
from propconf.config.settings import reset_settings
from propconf.core.sources import SystemProperties
from propconf.tests.fakes import FakePropertySource


TEST_PORT_NAME = "dapr.test.port"
TEST_PORT_ENV = "DAPR_TEST_PORT"
TEST_PORT_DEFAULT = 3500


# =============================================================================
# ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def clean_system_properties():
    """Start and end every test with an empty process property store."""
    SystemProperties.clear()
    yield
    SystemProperties.clear()


@pytest.fixture(autouse=True)
def clean_settings():
    """Drop the cached settings singleton around each test."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def fake_source() -> FakePropertySource:
    """Empty fake source."""
    return FakePropertySource()


@pytest.fixture
def port_property() -> Property[int]:
    """Integer property resolved against live process state."""
    return Property(TEST_PORT_NAME, TEST_PORT_ENV, TEST_PORT_DEFAULT, parse_integer)


@pytest.fixture
def clean_env(monkeypatch):
    """Make sure the test port variable is unset."""
    monkeypatch.delenv(TEST_PORT_ENV, raising=False)
    return monkeypatch

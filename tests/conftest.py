"""Pytest fixtures for solar event tests.

This module provides test fixtures that ensure:
1. Settings come from a controlled environment, not a developer's .env
2. A fresh settings cache for every test
3. A shared set of reference observer locations
"""

import os

import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from solar_events.models.location import Coordinates


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from solar_events.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_client():
    """HTTP client for the API, with lifespan events run."""
    from fastapi.testclient import TestClient

    from solar_events.api import create_app

    with TestClient(create_app()) as client:
        yield client


# =============================================================================
# Location Fixtures
# =============================================================================

# Reference observers used across the suite
WESTERN = Coordinates(latitude=53.248, longitude=-4.535)  # Anglesey
ZERO = Coordinates(latitude=0, longitude=0)  # Gulf of Guinea
SOUTHERN = Coordinates(latitude=-41.23, longitude=-6.345)  # South Atlantic
EASTERN = Coordinates(latitude=32.342, longitude=54.340)  # Central Iran

REFERENCE_LOCATIONS = [WESTERN, ZERO, SOUTHERN, EASTERN]


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """Sample coordinates on Anglesey, Wales."""
    return WESTERN


@pytest.fixture
def arctic_coordinates() -> Coordinates:
    """Sample coordinates in Svalbard, inside the Arctic Circle."""
    return Coordinates(latitude=78.22, longitude=15.65)

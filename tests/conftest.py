"""Fixtures comunes: un almacén nuevo y una app propia por test."""

import pytest
from fastapi.testclient import TestClient

from bloommap.main import create_app
from bloommap.services.location_store import LocationStore
from bloommap.utils.mock_data import MOCK_LOCATIONS, SEED_LOCATIONS


@pytest.fixture
def store():
    """Almacén sembrado con las 3 ubicaciones por defecto (IDs 1-3)."""
    return LocationStore(SEED_LOCATIONS)


@pytest.fixture
def mock_store():
    return LocationStore(MOCK_LOCATIONS)


@pytest.fixture
def valid_payload():
    return {
        "speciesId": 2,
        "locationName": " Test Garden ",
        "coordinates": [106.7, 10.78],
        "bloomingPeriod": {"start": "2024-03-01", "peak": "2024-03-15", "end": "2024-04-01"},
    }


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)

"""
Shared test fixtures and utilities.
"""
import pytest
from fastapi.testclient import TestClient
from src.models.drone_model import Drone, DroneModel, DroneState
from src.repositories.image_repository import InMemoryImageRepository


@pytest.fixture
def image_repository():
    """In-memory image store."""
    return InMemoryImageRepository()


@pytest.fixture
def app(image_repository):
    """Fresh application with its own entity store."""
    from src.main import create_app
    return create_app(image_repository=image_repository)


@pytest.fixture
def client(app):
    """Test client bound to a fresh application."""
    return TestClient(app)


@pytest.fixture
def drone_payload():
    """Valid registration body for drone D1."""
    return {
        "serial_number": "D1",
        "model": "Lightweight",
        "weight_limit": 250,
        "battery_capacity": 80,
        "state": "IDLE"
    }


@pytest.fixture
def sample_drone():
    """Sample IDLE Drone object."""
    return Drone(
        serial_number="D1",
        model=DroneModel.LIGHTWEIGHT,
        weight_limit=250,
        battery_capacity=80,
        state=DroneState.IDLE
    )

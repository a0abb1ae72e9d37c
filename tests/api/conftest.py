# tests/api/conftest.py
import pytest
import sys
import os
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"


@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": "dev_key"}


@pytest.fixture
def container_payload():
    """A 40ft container at the origin."""
    return {
        "id": "c-1",
        "name": "Container 1",
        "object_type": "iso-container-40ft",
        "position": {"x": 0.0, "y": 1.448, "z": 0.0},
        "dimensions": {"width": 12192, "height": 2896, "depth": 2438},
    }


@pytest.fixture
def transformer_payload():
    """An oil transformer 20 m along X."""
    return {
        "id": "tx-1",
        "name": "Transformer 1",
        "object_type": "oil-transformer",
        "position": {"x": 20.0, "y": 1.4, "z": 0.0},
        "rotation": {"x": 0.0, "y": 0.0, "z": 0.0},
        "dimensions": {"width": 3500, "height": 2800, "depth": 2500},
    }

# tests/api/test_routing_api.py
import pytest
from fastapi.testclient import TestClient

# Import your application
from api.main import app

# Create test client
client = TestClient(app)


def test_root():
    """Root endpoint is open."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_auth_required(container_payload):
    """Routing endpoints need a valid API key."""
    response = client.post("/routing/zones", json={"objects": [container_payload]},
                           headers={"X-API-Key": "invalid_key"})
    assert response.status_code == 401

    response = client.post("/routing/zones", json={"objects": [container_payload]})
    assert response.status_code == 422


class TestSceneEndpoints:
    """Snap points and zones."""

    def test_snap_points(self, api_headers, container_payload):
        response = client.post("/routing/snap-points", json={"objects": [container_payload]}, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 4
        assert data["by_type"]["power-bt"] == 2
        assert data["snap_points"][0]["id"] == "c-1-snap-0"
        assert data["snap_points"][0]["position"] == pytest.approx([-6.1, 0.648, 0.0])

    def test_zones(self, api_headers, container_payload):
        response = client.post("/routing/zones", json={"objects": [container_payload]}, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [z["zone_type"] for z in data["zones"]] == ["equipment", "forbidden", "passage"]
        assert data["zones"][2]["min_cable_height"] == 3.0

    def test_zero_dimension_rejected(self, api_headers, container_payload):
        container_payload["dimensions"]["height"] = 0
        response = client.post("/routing/zones", json={"objects": [container_payload]}, headers=api_headers)
        assert response.status_code == 422

    def test_inconsistent_height_config_rejected(self, api_headers, container_payload):
        payload = {"objects": [container_payload], "height_config": {"default_tray_height": 7.0}}
        response = client.post("/routing/zones", json=payload, headers=api_headers)
        assert response.status_code == 422

    def test_duplicate_ids_rejected(self, api_headers, container_payload):
        payload = {"objects": [container_payload, container_payload]}
        response = client.post("/routing/zones", json=payload, headers=api_headers)
        assert response.status_code == 422


class TestRoutingEndpoints:
    """Height, path, collision and tray endpoints."""

    def test_height_over_equipment(self, api_headers):
        rack = {
            "id": "rack-1",
            "object_type": "rack",
            "position": {"x": 5.0, "y": 1.95, "z": 0.0},
            "dimensions": {"width": 2000, "height": 3900, "depth": 2000},
        }
        payload = {
            "objects": [rack],
            "start": {"x": 0, "y": 0, "z": 0},
            "end": {"x": 10, "y": 0, "z": 0},
        }
        response = client.post("/routing/height", json=payload, headers=api_headers)
        assert response.status_code == 200
        assert response.json()["height"] == pytest.approx(4.2)
        assert response.json()["is_valid"] is True

    def test_path(self, api_headers, container_payload, transformer_payload):
        payload = {
            "objects": [container_payload, transformer_payload],
            "start_snap_id": "tx-1-snap-1",
            "end_snap_id": "c-1-snap-0",
        }
        response = client.post("/routing/path", json=payload, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert len(data["segments"]) == 5
        assert data["total_length"] > 0
        assert data["tray"]["tray_type"] == "ladder"
        assert data["tray"]["width"] == 600
        assert "has_collision" in data["collisions"]

    def test_path_unknown_snap_point(self, api_headers, container_payload):
        payload = {
            "objects": [container_payload],
            "start_snap_id": "c-1-snap-0",
            "end_snap_id": "nope",
        }
        response = client.post("/routing/path", json=payload, headers=api_headers)
        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "resource_not_found"

    def test_collisions(self, api_headers, container_payload):
        payload = {
            "objects": [container_payload],
            "path": [{
                "start": {"x": 5, "y": 1.448, "z": 0},
                "end": {"x": 9, "y": 1.448, "z": 0},
                "height": 1.448,
                "kind": "horizontal",
            }],
        }
        response = client.post("/routing/collisions", json=payload, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["has_collision"] is True
        assert data["suggestions"] == ["Avoid: Rear door access (Container 1)"]

    def test_tray_high_voltage(self, api_headers, container_payload, transformer_payload):
        payload = {
            "objects": [container_payload, transformer_payload],
            "start_snap_id": "tx-1-snap-0",
            "end_snap_id": "c-1-snap-0",
            "cable_categories": ["power", "data"],
        }
        response = client.post("/routing/tray", json=payload, headers=api_headers)
        assert response.status_code == 200
        assert response.json()["tray_type"] == "busbar"
        assert response.json()["width"] == 300

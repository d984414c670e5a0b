"""Integration tests for the REST API."""

import xml.etree.ElementTree as ET

import pytest
from fastapi.testclient import TestClient

from cabinetmaker.application import GenerateCabinetPlanCommand
from cabinetmaker.domain import CutListGenerator
from cabinetmaker.web import create_app
from cabinetmaker.web.dependencies import get_plan_command


class FailingCutListGenerator(CutListGenerator):
    def generate(self, spec):
        raise ValueError("door position out of range")


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh application."""
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCutListEndpoint:
    """Tests for POST /api/v1/cutlist."""

    def test_reference_cabinet(self, client: TestClient, scenario_config_dict: dict) -> None:
        response = client.post("/api/v1/cutlist", json={"config": scenario_config_dict})

        assert response.status_code == 200
        data = response.json()
        assert data["cabinet"]["door_count"] == 2
        shelf = data["cut_list"][5]
        assert (shelf["width"], shelf["length"], shelf["quantity"]) == (10.5, 23.125, 2)
        door = data["cut_list"][6]
        assert door["name"] == "Solid Door (left-2/3)"
        assert (door["width"], door["length"]) == (17.5, 31.5)
        assert door["panel_type"] == "door"
        assert data["joinery"]["shelf_note"] == "for shelf pins"

    def test_total_area_sums_the_cut_list(
        self, client: TestClient, scenario_config_dict: dict
    ) -> None:
        response = client.post("/api/v1/cutlist", json={"config": scenario_config_dict})

        data = response.json()
        expected = sum(
            piece["width"] * piece["length"] * piece["quantity"]
            for piece in data["cut_list"]
        )
        assert data["cabinet"]["total_area"] == pytest.approx(expected)

    def test_invalid_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/cutlist",
            json={"config": {"cabinet": {"width": 24, "height": 30}}},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "cabinet.depth"

    def test_unknown_position(self, client: TestClient, scenario_config_dict: dict) -> None:
        scenario_config_dict["cabinet"]["doors"] = [{"position": "top-half"}]

        response = client.post("/api/v1/cutlist", json={"config": scenario_config_dict})

        assert response.status_code == 422
        assert response.json()["details"][0]["path"] == "cabinet.doors[0].position"

    def test_plan_error(self, scenario_config_dict: dict) -> None:
        app = create_app()
        app.dependency_overrides[get_plan_command] = lambda: GenerateCabinetPlanCommand(
            cut_list_generator=FailingCutListGenerator()
        )
        client = TestClient(app)

        response = client.post("/api/v1/cutlist", json={"config": scenario_config_dict})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "plan"
        assert body["details"] == [{"message": "door position out of range"}]


class TestSchematicEndpoint:
    """Tests for POST /api/v1/schematic."""

    def test_views(self, client: TestClient, scenario_config_dict: dict) -> None:
        response = client.post("/api/v1/schematic", json={"config": scenario_config_dict})

        assert response.status_code == 200
        data = response.json()
        assert data["scale"] == 4.0
        assert set(data["views"]) == {"front", "side", "door_layout"}
        for svg in data["views"].values():
            ET.fromstring(svg)
        ET.fromstring(data["legend"])

    def test_scale_from_config(self, client: TestClient, scenario_config_dict: dict) -> None:
        scenario_config_dict["schematic"] = {"scale": 2.0}

        response = client.post("/api/v1/schematic", json={"config": scenario_config_dict})

        assert response.json()["scale"] == 2.0


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, scenario_config_dict: dict) -> None:
        response = client.post("/api/v1/validate", json={"config": scenario_config_dict})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient, scenario_config_dict: dict) -> None:
        scenario_config_dict["cabinet"]["doors"] = [{"position": "left-1/3"}]

        response = client.post("/api/v1/validate", json={"config": scenario_config_dict})

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"][0]["path"] == "cabinet.doors"

    def test_schema_errors_in_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"cabinet": {"width": 24, "height": 30, "depth": 12, "x": 1}}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "cabinet.x"


class TestPositionsEndpoint:
    """Tests for GET /api/v1/positions."""

    def test_positions(self, client: TestClient) -> None:
        response = client.get("/api/v1/positions")

        assert response.status_code == 200
        positions = response.json()
        assert len(positions) == 13
        assert positions[0] == {"token": "full", "display_name": "full", "axis": "full"}
        assert {"token": "lower-1/3", "display_name": "lower 1 of 3", "axis": "vertical"} in positions

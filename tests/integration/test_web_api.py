"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from lumbercut.web import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def _config(**overrides) -> dict:
    data = {
        "schema_version": "1.0",
        "desired_cuts": [{"length": 100, "quantity": 3}, {"length": 50, "quantity": 2}],
        "available_stock": [{"length": 200, "quantity": 6}],
    }
    data.update(overrides)
    return data


@pytest.mark.integration
class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


@pytest.mark.integration
class TestPlanEndpoint:
    """Tests for POST /api/v1/plan."""

    def test_flat_plan(self, client: TestClient) -> None:
        response = client.post("/api/v1/plan", json={"config": _config()})

        assert response.status_code == 200
        data = response.json()
        assert data["total_length_used"] == 400
        assert len(data["cuts"]) == 3
        assert "quantity" not in data["cuts"][0]
        assert data["cuts"][0]["source"] == "inventory"

    def test_grouped_plan(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/plan", json={"config": _config(output={"grouped": True})}
        )

        assert response.status_code == 200
        assert [entry["quantity"] for entry in response.json()["cuts"]] == [2, 1]

    def test_unfulfilled_demand_reported(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/plan",
            json={"config": _config(desired_cuts=[{"length": 5000}], available_stock=None)},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["unfulfilled_demand"] == [{"length": 5000, "quantity": 1}]
        assert data["infeasible_lengths"] == [5000]

    def test_schema_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/plan", json={"config": _config(settings={"kerf_width": -1})}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "settings.kerf_width"

    def test_board_limit_cannot_be_raised(self, client: TestClient) -> None:
        config = _config(
            available_stock=[{"length": 5e10}],
            settings={"max_board_length": 10**12, "default_stock_length": 10**11},
        )

        response = client.post("/api/v1/plan", json={"config": config})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "settings.max_board_length"

    @pytest.mark.parametrize(
        "chain_offcuts, carried",
        [(False, [200, 0]), (True, [0])],
    )
    def test_record_carried_and_waste(
        self, client: TestClient, chain_offcuts: bool, carried: list[float]
    ) -> None:
        config = _config(
            desired_cuts=[{"length": 100}, {"length": 60}],
            available_stock=[{"length": 300}],
            settings={"kerf_width": 0, "error_margin": 0, "chain_offcuts": chain_offcuts},
        )

        response = client.post("/api/v1/plan", json={"config": config})

        assert response.status_code == 200
        records = response.json()["cuts"]
        assert [record["carried_length"] for record in records] == carried
        for record in records:
            assert record["waste"] == record["source_length"] - sum(record["cuts"])

    def test_planner_rejects_input(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/plan",
            json={"config": _config(available_stock=[{"length": 2_000_000}])},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "invalid_input"
        assert body["details"][0]["message"].startswith("available_stock[0].length")

    def test_missing_config_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/plan", json={})

        assert response.status_code == 422


@pytest.mark.integration
class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        response = client.post("/api/v1/validate", json={"config": _config()})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": _config(desired_cuts=[{"length": 5000}])},
        )

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"][0]["path"] == "desired_cuts[0].length"

    def test_schema_errors_in_result(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": {"schema_version": "9.0"}}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert {error["path"] for error in data["errors"]} >= {"schema_version", "desired_cuts"}

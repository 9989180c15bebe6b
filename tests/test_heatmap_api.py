"""Tests for the heatmap and app-level API endpoints."""

from unittest.mock import patch

import pytest

from backend.heatmap import AxisIndexMismatchError


class TestAppEndpoints:
    """Tests for root and health endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_lists_endpoints(self, client):
        data = client.get("/").json()
        assert "heatmap" in data["endpoints"]
        assert "risk-dashboard" in data["endpoints"]


class TestGridEndpoint:
    """Tests for POST /heatmap/grid."""

    def test_build_grid(self, client):
        response = client.post(
            "/heatmap/grid",
            json={
                "observations": [
                    {"row_label": "A", "column_label": "X", "value": 10},
                    {"row_label": "B", "column_label": "X", "value": 20},
                    {"row_label": "A", "column_label": "Y", "value": 30},
                ]
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["row_index"] == {"A": 0, "B": 1}
        assert data["column_index"] == {"X": 0, "Y": 1}
        assert [p["id"] for p in data["points"]] == [0, 1, 2]
        assert [p["severity"] for p in data["points"]] == ["high", "high", "high"]
        assert data["row_domain"] == {"lower": 0, "upper": 1}
        assert data["is_empty"] is False

    def test_empty_grid(self, client):
        response = client.post("/heatmap/grid", json={"observations": []})
        assert response.status_code == 200
        data = response.json()
        assert data["is_empty"] is True
        assert data["points"] == []
        assert data["row_domain"] is None
        assert data["column_domain"] is None

    def test_missing_body_field_defaults_empty(self, client):
        response = client.post("/heatmap/grid", json={})
        assert response.status_code == 200
        assert response.json()["is_empty"] is True

    def test_missing_label_rejected(self, client):
        response = client.post(
            "/heatmap/grid",
            json={"observations": [{"column_label": "X", "value": 10}]},
        )
        assert response.status_code == 422

    def test_non_numeric_value_rejected(self, client):
        response = client.post(
            "/heatmap/grid",
            json={"observations": [{"row_label": "A", "column_label": "X", "value": "n/a"}]},
        )
        assert response.status_code == 422

    @pytest.mark.parametrize("value", ["42", True])
    def test_numeric_string_and_bool_rejected(self, client, value):
        """Scores must be JSON numbers; strings and booleans are not coerced."""
        response = client.post(
            "/heatmap/grid",
            json={"observations": [{"row_label": "A", "column_label": "X", "value": value}]},
        )
        assert response.status_code == 422

    def test_integer_value_accepted(self, client):
        response = client.post(
            "/heatmap/grid",
            json={"observations": [{"row_label": "A", "column_label": "X", "value": 42}]},
        )
        assert response.status_code == 200
        assert response.json()["points"][0]["value"] == 42.0

    def test_out_of_domain_value_accepted(self, client):
        response = client.post(
            "/heatmap/grid",
            json={"observations": [{"row_label": "A", "column_label": "X", "value": 140}]},
        )
        assert response.status_code == 200
        point = response.json()["points"][0]
        assert point["value"] == 140
        assert point["severity"] == "low"

    def test_internal_fault_reported(self, client):
        """An axis index mismatch surfaces as a server error, not a dropped point."""
        with patch(
            "backend.heatmap.service.build_heatmap",
            side_effect=AxisIndexMismatchError("row", "A", 0),
        ):
            response = client.post(
                "/heatmap/grid",
                json={"observations": [{"row_label": "A", "column_label": "X", "value": 1}]},
            )
        assert response.status_code == 500
        assert "row label 'A'" in response.json()["detail"]


class TestComplianceGridEndpoint:
    """Tests for POST /heatmap/compliance-grid."""

    def test_build_from_results(self, client):
        response = client.post(
            "/heatmap/compliance-grid",
            json={
                "results": [
                    {"domain": "Governance", "control": "GOV-1", "status": "implemented"},
                    {"domain": "Defense", "control": "DEF-1", "status": "not_applicable"},
                    {"domain": "Defense", "control": "DEF-2", "status": "partially_implemented"},
                ]
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["column_labels"] == ["Governance", "Defense"]
        assert data["row_labels"] == ["GOV-1", "DEF-2"]
        assert [p["value"] for p in data["points"]] == [100.0, 50.0]

    def test_unknown_status_rejected(self, client):
        response = client.post(
            "/heatmap/compliance-grid",
            json={"results": [{"domain": "Governance", "control": "GOV-1", "status": "done"}]},
        )
        assert response.status_code == 422


class TestClassifyEndpoint:
    """Tests for POST /heatmap/classify and GET /heatmap/severity-bands."""

    def test_classify(self, client):
        response = client.post("/heatmap/classify", json={"value": 34})
        assert response.status_code == 200
        assert response.json() == {"value": 34.0, "severity": "medium", "color": "#f59e0b"}

    def test_classify_boundary(self, client):
        assert client.post("/heatmap/classify", json={"value": 33}).json()["severity"] == "high"
        assert client.post("/heatmap/classify", json={"value": 67}).json()["severity"] == "low"

    @pytest.mark.parametrize("value", ["42", True])
    def test_classify_rejects_string_and_bool(self, client, value):
        response = client.post("/heatmap/classify", json={"value": value})
        assert response.status_code == 422

    def test_severity_bands(self, client):
        response = client.get("/heatmap/severity-bands")
        assert response.status_code == 200
        bands = response.json()["bands"]
        assert [b["severity"] for b in bands] == ["high", "medium", "low"]


class TestSelectionEndpoint:
    """Tests for POST /heatmap/selection."""

    def test_enter(self, client):
        response = client.post(
            "/heatmap/selection",
            json={"event": {"kind": "enter", "point_id": 3}},
        )
        assert response.status_code == 200
        assert response.json() == {"active_id": 3}

    def test_enter_replaces(self, client):
        response = client.post(
            "/heatmap/selection",
            json={"state": {"active_id": 3}, "event": {"kind": "enter", "point_id": 5}},
        )
        assert response.json() == {"active_id": 5}

    def test_leave(self, client):
        response = client.post(
            "/heatmap/selection",
            json={"state": {"active_id": 3}, "event": {"kind": "leave"}},
        )
        assert response.json() == {"active_id": None}

    def test_enter_without_point_rejected(self, client):
        response = client.post("/heatmap/selection", json={"event": {"kind": "enter"}})
        assert response.status_code == 422

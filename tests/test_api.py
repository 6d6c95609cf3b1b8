"""
Tests for the HTTP adapter.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent))

from policy_impact.api import API_VERSION, app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def simulation_body():
    return {
        "policyId": "consumption-tax",
        "userParameters": {
            "income": 5_000_000,
            "familySize": "couple-2children",
            "region": "東京都",
            "age": 35,
        },
        "analysisLevel": "simple",
        "scenario": {"rateChange": 2, "label": "12%"},
    }


def assert_envelope(body, success=True):
    assert body["success"] is success
    assert body["metadata"]["version"] == API_VERSION
    assert body["metadata"]["cached"] is False
    assert "timestamp" in body["metadata"]


class TestPolicies:
    """Test GET /policies."""

    def test_list(self, client):
        response = client.get("/policies")
        body = response.json()

        assert response.status_code == 200
        assert_envelope(body)
        assert body["data"]["totalCount"] == 6
        assert "childcare" in body["data"]["categories"]

    def test_filter(self, client):
        body = client.get("/policies", params={"category": "labor"}).json()
        assert [p["id"] for p in body["data"]["policies"]] == ["minimum-wage"]


class TestSimulate:
    """Test POST /simulate."""

    def test_simple(self, client, simulation_body):
        response = client.post("/simulate", json=simulation_body)
        data = response.json()["data"]

        assert response.status_code == 200
        assert set(data["results"]) == {"simple"}
        assert data["results"]["simple"]["monthlyImpact"] < 0
        assert data["results"]["simple"]["confidence"] == "high"
        assert data["scenario"]["rateUnit"] == "percentage_point"

    def test_detailed(self, client, simulation_body):
        simulation_body["analysisLevel"] = "detailed"
        results = client.post("/simulate", json=simulation_body).json()["data"]["results"]

        assert set(results) == {"simple", "detailed"}
        assert len(results["detailed"]["scenarios"]) == 3
        assert len(results["detailed"]["timeline"]) == 4
        assert set(results["detailed"]["breakdown"]) == {
            "directEffect", "indirectEffect", "generalEquilibriumEffect",
        }

    def test_expert(self, client, simulation_body):
        simulation_body["analysisLevel"] = "expert"
        results = client.post("/simulate", json=simulation_body).json()["data"]["results"]

        expert = results["expert"]
        assert len(expert["assumptions"]) > 0
        assert [s["parameter"] for s in expert["sensitivity"]] == ["rate_change", "income"]
        assert expert["methodology"]["dataSources"]
        assert all(v["passed"] for v in expert["methodology"]["validationResults"])

    def test_default_preset(self, client, simulation_body):
        """Without a scenario the first preset (2pt cut) is used."""
        del simulation_body["scenario"]
        data = client.post("/simulate", json=simulation_body).json()["data"]

        assert data["scenario"]["rateChange"] == -2
        assert data["results"]["simple"]["monthlyImpact"] > 0

    def test_unknown_region(self, client, simulation_body):
        simulation_body["userParameters"]["region"] = "Atlantis"
        response = client.post("/simulate", json=simulation_body)
        body = response.json()

        assert response.status_code == 404
        assert_envelope(body, success=False)
        assert "Atlantis" in body["error"]

    def test_unknown_policy(self, client, simulation_body):
        simulation_body["policyId"] = "vat"
        response = client.post("/simulate", json=simulation_body)

        assert response.status_code == 400
        assert_envelope(response.json(), success=False)

    def test_missing_field(self, client, simulation_body):
        del simulation_body["userParameters"]
        response = client.post("/simulate", json=simulation_body)

        assert response.status_code == 422
        assert_envelope(response.json(), success=False)

    def test_bad_analysis_level(self, client, simulation_body):
        simulation_body["analysisLevel"] = "guru"
        assert client.post("/simulate", json=simulation_body).status_code == 422

    def test_nan_rate_change(self, client):
        raw = (
            '{"policyId": "income-tax", "userParameters": {"income": 5000000, '
            '"familySize": "couple", "region": "東京都", "age": 40}, '
            '"scenario": {"rateChange": NaN}}'
        )
        response = client.post(
            "/simulate",
            content=raw.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["success"] is False


class TestCompare:
    """Test POST /compare."""

    def test_compare(self, client, simulation_body):
        cut = {**simulation_body, "scenario": {"rateChange": -2, "label": "8%"}}
        response = client.post("/compare", json={"scenarios": [simulation_body, cut]})
        data = response.json()["data"]

        assert response.status_code == 200
        assert len(data["comparisons"]) == 2
        assert data["analysis"]["best"] == "8%"
        assert data["analysis"]["worst"] == "12%"
        assert data["analysis"]["spread"] > 0

    def test_empty(self, client):
        assert client.post("/compare", json={"scenarios": []}).status_code == 422


class TestFiscal:
    """Test POST /fiscal."""

    def test_fiscal(self, client):
        response = client.post(
            "/fiscal", json={"policyId": "consumption-tax", "scenario": {"rateChange": 2}}
        )
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["taxRevenue"]["impactAmount"] == pytest.approx(5.6)
        assert data["economicImpact"]["employmentImpact"] == 84000
        assert all(p["stance"] == "relief" for p in data["alternativeTaxes"])
        assert data["regionalImpact"]["topRegions"][0]["name"] == "東京都"

    def test_fiscal_default_preset(self, client):
        data = client.post("/fiscal", json={"policyId": "child-support"}).json()["data"]

        assert data["rateChange"] == 5000
        assert data["taxRevenue"]["impactAmount"] < 0


class TestRegions:
    """Test GET /regions/{region}."""

    def test_known(self, client):
        body = client.get("/regions/東京都").json()

        assert_envelope(body)
        assert body["data"]["minimumWage"] == 1113

    def test_unknown(self, client):
        response = client.get("/regions/Atlantis")

        assert response.status_code == 404
        assert response.json()["success"] is False

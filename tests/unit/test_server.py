"""Unit tests for the collector HTTP service."""

import pytest
from fastapi.testclient import TestClient

from baseline_audit.core.probe import StaticProbe
from baseline_audit.server.app import create_app
from baseline_audit.utils.config import BaselineAuditConfig


class BrokenProbe(StaticProbe):
    def current_versions(self):
        raise OSError("WMI service stopped")


@pytest.fixture
def client(store, requirement_source, static_probe):
    app = create_app(
        store=store,
        requirement_source=requirement_source,
        probe=static_probe,
        config=BaselineAuditConfig(),
    )
    return TestClient(app)


class TestHealth:
    """Tests for /health."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "reports": 0}


class TestSystemInfo:
    """Tests for GET /api/system-info."""

    def test_local_report(self, client):
        response = client.get("/api/system-info")

        assert response.status_code == 200
        data = response.json()
        assert data["systemName"] == "LAB-PC-01"
        assert data["gpu"] == "AMD Radeon 890M"
        assert [c["component"] for c in data["compliance"]] == [
            "Windows OS Build",
            "System BIOS Version",
            "GPU Driver Version",
            "NPU Driver Version",
        ]
        assert all(c["status"] == "Compliant" for c in data["compliance"])

    def test_local_report_not_stored(self, client, store):
        client.get("/api/system-info")
        assert len(store) == 0

    def test_probe_failure(self, store, requirement_source):
        app = create_app(
            store=store,
            requirement_source=requirement_source,
            probe=BrokenProbe(),
            config=BaselineAuditConfig(),
        )
        response = TestClient(app).get("/api/system-info")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch system information"}


class TestSubmitSystemInfo:
    """Tests for POST /api/submit-system-info."""

    def test_accepts_submission(self, client, sample_submission):
        response = client.post("/api/submit-system-info", json=sample_submission)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "System information received and processed"
        received = data["receivedData"]
        assert received["systemName"] == "LAB-PC-02"
        assert "receivedAt" in received

    def test_statuses_recomputed(self, client, sample_submission):
        data = client.post("/api/submit-system-info", json=sample_submission).json()
        statuses = [c["status"] for c in data["receivedData"]["compliance"]]
        assert statuses == ["Compliant", "Compliant", "Non-Compliant", "Non-Compliant"]

    def test_missing_minimum_filled(self, client, sample_submission):
        data = client.post("/api/submit-system-info", json=sample_submission).json()
        assert data["receivedData"]["compliance"][2]["minimum"] == "536.23"

    @pytest.mark.parametrize("body", [{}, {"systemName": ""}, {"manufacturer": "Contoso"}, [1, 2]])
    def test_missing_system_name(self, client, store, body):
        response = client.post("/api/submit-system-info", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing systemName in request body"}
        assert len(store) == 0

    def test_malformed_compliance(self, client, store):
        response = client.post(
            "/api/submit-system-info",
            json={"systemName": "LAB-PC-09", "compliance": {"component": "x"}},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid system information payload"}
        assert len(store) == 0

    def test_undecodable_body(self, client, store):
        response = client.post(
            "/api/submit-system-info",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid system information payload"}
        assert len(store) == 0


class TestAllSystemInfo:
    """Tests for GET /api/all-system-info."""

    def test_empty(self, client):
        response = client.get("/api/all-system-info")
        assert response.status_code == 200
        assert response.json() == {}

    def test_keyed_by_system_name(self, client, sample_submission):
        client.post("/api/submit-system-info", json=sample_submission)
        client.post("/api/submit-system-info", json={"systemName": "LAB-PC-03"})

        data = client.get("/api/all-system-info").json()
        assert set(data) == {"LAB-PC-02", "LAB-PC-03"}
        assert data["LAB-PC-03"]["compliance"] == []

    def test_last_write_wins(self, client, sample_submission):
        client.post("/api/submit-system-info", json=sample_submission)
        client.post("/api/submit-system-info", json=dict(sample_submission, cpu="Replacement CPU"))

        data = client.get("/api/all-system-info").json()
        assert len(data) == 1
        assert data["LAB-PC-02"]["cpu"] == "Replacement CPU"

    def test_health_counts_reports(self, client, sample_submission):
        client.post("/api/submit-system-info", json=sample_submission)
        assert client.get("/health").json()["reports"] == 1

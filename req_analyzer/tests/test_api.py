"""
Tests: HTTP API routes.

Run with:
    pytest req_analyzer/tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from req_analyzer.api import app
from req_analyzer.api import routes
from req_analyzer.classifier import RequirementClassifier
from req_analyzer.services.analysis_service import AnalysisService, GENERIC_FAILURE_MESSAGE


class _FailingClassifier(RequirementClassifier):
    def classify(self, text):
        raise RuntimeError("")


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def failing_service(monkeypatch):
    monkeypatch.setattr(
        routes,
        "get_service",
        lambda: AnalysisService(_FailingClassifier(), latency_seconds=0),
    )


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestAnalysisRoutes:
    def test_analyze(self, client):
        resp = client.post("/api/analysis", json={"text": "secure banking portal for 10k concurrent users"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["businessPriority"] == "High"
        assert data["automationLogic"]["suggestedEffortHours"] == 160
        assert data["techStack"][0] == "Java 21"

    def test_analyze_empty_text(self, client):
        resp = client.post("/api/analysis", json={"text": ""})
        assert resp.status_code == 200
        assert resp.json()["userRoles"] == ["Standard Authenticated User"]

    def test_missing_text_is_422(self, client):
        assert client.post("/api/analysis", json={}).status_code == 422

    def test_export(self, client):
        resp = client.post("/api/analysis/export", json={"text": "manager reports"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert "Technical_Design_Doc_" in resp.headers["content-disposition"]
        assert resp.text.startswith("TECHNICAL DESIGN DOCUMENT")
        assert "Operations Manager" in resp.text

    def test_failure_surfaces_generic_message(self, client, failing_service):
        resp = client.post("/api/analysis", json={"text": "x"})
        assert resp.status_code == 502
        assert resp.json()["detail"] == GENERIC_FAILURE_MESSAGE


class TestSessionRoutes:
    def _open(self, client) -> str:
        resp = client.post("/api/sessions")
        assert resp.status_code == 201
        assert resp.json()["status"] == "idle"
        return resp.json()["session_id"]

    def test_submit_and_export(self, client):
        sid = self._open(client)
        resp = client.post(f"/api/sessions/{sid}/submit", json={"text": "admin console"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "completed"
        assert body["result"]["userRoles"] == ["System Administrator"]

        doc = client.get(f"/api/sessions/{sid}/export")
        assert doc.status_code == 200
        assert "System Administrator" in doc.text

    def test_blank_submit_rejected(self, client):
        sid = self._open(client)
        resp = client.post(f"/api/sessions/{sid}/submit", json={"text": "   "})
        assert resp.status_code == 400
        assert client.get(f"/api/sessions/{sid}").json()["status"] == "idle"

    def test_export_before_completion(self, client):
        sid = self._open(client)
        assert client.get(f"/api/sessions/{sid}/export").status_code == 409

    def test_unknown_session(self, client):
        assert client.get("/api/sessions/SES-NOPE").status_code == 404
        assert client.post("/api/sessions/SES-NOPE/reset").status_code == 404

    def test_reset(self, client):
        sid = self._open(client)
        client.post(f"/api/sessions/{sid}/submit", json={"text": "bank"})
        resp = client.post(f"/api/sessions/{sid}/reset")
        assert resp.json() == {"session_id": sid, "status": "idle", "error_message": None, "result": None}

    def test_failed_submit_puts_session_in_error(self, client, failing_service):
        sid = self._open(client)
        resp = client.post(f"/api/sessions/{sid}/submit", json={"text": "x"})
        assert resp.status_code == 200
        assert resp.json()["status"] == "error"
        assert resp.json()["error_message"] == GENERIC_FAILURE_MESSAGE

    def test_busy_session_conflict(self, client):
        sid = self._open(client)
        routes._sessions[sid].begin()
        resp = client.post(f"/api/sessions/{sid}/submit", json={"text": "x"})
        assert resp.status_code == 409

    def test_delete_session_drops_it(self, client):
        sid = self._open(client)
        client.post(f"/api/sessions/{sid}/submit", json={"text": "bank"})
        before = len(routes._sessions)

        resp = client.delete(f"/api/sessions/{sid}")
        assert resp.status_code == 204
        assert sid not in routes._sessions
        assert len(routes._sessions) == before - 1
        assert client.get(f"/api/sessions/{sid}").status_code == 404
        assert client.delete(f"/api/sessions/{sid}").status_code == 404

    def test_delete_while_analyzing_conflict(self, client):
        sid = self._open(client)
        routes._sessions[sid].begin()
        assert client.delete(f"/api/sessions/{sid}").status_code == 409
        assert sid in routes._sessions

        client.post(f"/api/sessions/{sid}/reset")
        assert client.delete(f"/api/sessions/{sid}").status_code == 204

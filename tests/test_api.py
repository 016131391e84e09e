"""
tests/test_api.py
─────────────────────────────────────────────────────────────────────────────
Tests for relove.api — CoachAPI class and the FastAPI endpoints.

Coverage:
  - CoachAPI: dict in / dict out, InvalidInput on bad payloads
  - /api/health shape
  - POST endpoints: happy path, 400 on invalid enums / ranges / bodies
  - sources omitted from daily action JSON when the rule sets none

HTTP tests use FastAPI's TestClient (httpx) against an app built with
first_picker so template choices are fixed.
"""

import pytest
from fastapi.testclient import TestClient

from relove.api import CoachAPI, _build_app
from relove.errors import InvalidInput
from relove.rules.content import NEXT_STEPS, SAFE_ALTERNATIVES
from relove.rules.picker import first_picker

DAILY = {
    "scenario": "hot_cold",
    "day_index": 10,
    "last_contact_hours": 72,
    "last_response_from_her": "positive",
    "emotional_checkin": "calm",
}

GREEN = {
    "scenario": "hot_cold",
    "silence_hours": 72,
    "last_response_from_her": "positive",
    "relapse_today": False,
    "emotional_checkin": "calm",
}


@pytest.fixture
def api():
    return CoachAPI(picker=first_picker)


@pytest.fixture
def client():
    return TestClient(_build_app(picker=first_picker))


# ── COACHAPI ─────────────────────────────────────────────────────────────────

class TestCoachAPI:
    def test_health(self, api):
        h = api.health()
        assert h["ok"] is True
        assert h["service"] == "relove-ai"
        assert "T" in h["time"]

    def test_daily_action_returns_plain_dict(self, api):
        r = api.daily_action(DAILY)
        assert r["action"] == "message"
        assert r["momentum"] == {"type": "maintain", "level": 3}

    def test_daily_action_omits_missing_sources(self, api):
        r = api.daily_action({**DAILY, "emotional_checkin": "sad"})
        assert "sources" not in r

    def test_greenlight(self, api):
        r = api.greenlight(GREEN)
        assert r["light"] == "green"
        assert r["next_step"] == NEXT_STEPS["green"][0]

    def test_safe_text(self, api):
        r = api.safe_text({"text": "If you don't call me back, it's over between us"})
        assert r["rewritten"] == SAFE_ALTERNATIVES[0]
        assert r["score"] == 0

    def test_analyze_includes_heuristic_tags(self, api):
        r = api.analyze({"text": "WHY ARE YOU IGNORING ME???"})
        assert r["pressure"] is True
        assert r["issues"] == ["pressure", "excessive_questions", "excessive_caps"]
        assert r["score"] == 4

    def test_invalid_payload_raises(self, api):
        with pytest.raises(InvalidInput):
            api.greenlight({**GREEN, "scenario": "breadcrumbs"})


# ── HTTP ─────────────────────────────────────────────────────────────────────

class TestHTTP:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] is True
        assert body["service"] == "relove-ai"

    def test_daily_action(self, client):
        resp = client.post("/api/daily-action", json={**DAILY, "day_index": 2})
        assert resp.status_code == 200
        body = resp.json()
        assert body["action"] == "mission"
        assert body["sources"] == ["No Contact Recovery Guide"]

    def test_greenlight_blocked_is_indefinite(self, client):
        resp = client.post("/api/greenlight", json={**GREEN, "scenario": "blocked"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["light"] == "red"
        assert body["wait_hours"] == 0
        assert body["wait_indefinite"] is True
        assert body["risk_flags"] == ["blocked"]

    def test_safe_text_rewrite(self, client):
        resp = client.post("/api/safe-text-rewrite",
                           json={"text": "I miss you so much, please reply to me, I can't live without you."})
        assert resp.status_code == 200
        body = resp.json()
        assert body["issues"] == ["neediness", "pressure", "manipulation"]
        assert body["score"] == 1

    def test_analyze_text(self, client):
        resp = client.post("/api/analyze-text", json={"text": "you owe me"})
        assert resp.status_code == 200
        assert resp.json()["manipulation"] is True

    def test_invalid_enum_is_400(self, client):
        resp = client.post("/api/daily-action", json={**DAILY, "scenario": "normal"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Invalid request data"
        assert body["errors"][0]["path"] == ["scenario"]

    def test_out_of_range_is_400(self, client):
        resp = client.post("/api/greenlight", json={**GREEN, "silence_hours": -5})
        assert resp.status_code == 400
        assert body_paths(resp) == [["silence_hours"]]

    def test_oversized_text_is_400(self, client):
        resp = client.post("/api/safe-text-rewrite", json={"text": "x" * 1001})
        assert resp.status_code == 400

    def test_missing_body_is_400(self, client):
        resp = client.post("/api/greenlight")
        assert resp.status_code == 400

    def test_non_object_body_is_400(self, client):
        resp = client.post("/api/daily-action", json=["hot_cold", 10])
        assert resp.status_code == 400

    def test_malformed_json_is_400(self, client):
        resp = client.post("/api/greenlight", content=b"{not json",
                           headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid request data"


def body_paths(resp):
    return [e["path"] for e in resp.json()["errors"]]

"""API tests for market data, team activity, documents, comments, users and stats."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add src to path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from api.app import create_app
from core.storage import EntityStore


class TestMarketData:
    def test_seeded_points(self, client):
        resp = client.get("/api/market-data")

        assert resp.status_code == 200
        data = resp.json()
        assert [p["month"] for p in data] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
        assert [p["avgPrice"] for p in data] == [420000, 435000, 445000, 458000, 470000, 485000]
        assert data[0]["competitorAvgPrice"] == 415000
        assert data[0]["activeListings"] == 240

    def test_append(self, client):
        resp = client.post("/api/market-data", json={
            "month": "Jul",
            "avgPrice": 490000,
            "competitorAvgPrice": 482000,
            "activeListings": 251,
            "daysOnMarket": 17,
        })

        assert resp.status_code == 201
        assert resp.json()["id"] == 7
        assert client.get("/api/market-data").json()[-1]["month"] == "Jul"

    def test_invalid(self, client):
        resp = client.post("/api/market-data", json={"month": "Jul"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid market data"


class TestTeamActivity:
    def test_create_and_list(self, client):
        resp = client.post("/api/team-activity", json={
            "userId": 2,
            "action": "updated",
            "description": "Updated the Q2 comps",
        })

        assert resp.status_code == 201
        created = resp.json()
        assert created["id"] == 1
        assert created["relatedProperty"] is None
        assert "user" not in created

        listed = client.get("/api/team-activity").json()
        assert listed[0]["user"]["name"] == "Sarah Johnson"

    def test_orphan_omitted(self, client):
        resp = client.post("/api/team-activity", json={
            "userId": 999,
            "action": "listed",
            "description": "Nobody did this",
        })
        assert resp.status_code == 201

        listed = client.get("/api/team-activity")

        assert listed.status_code == 200
        assert listed.json() == []

    def test_missing_description(self, client):
        resp = client.post("/api/team-activity", json={"userId": 1, "action": "listed"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid activity data"
        assert any(e["path"] == ["description"] for e in resp.json()["errors"])


class TestDocuments:
    def test_create_and_list(self, client):
        resp = client.post("/api/documents", json={
            "name": "Listing Agreement.docx",
            "type": "word",
            "sharedBy": 4,
            "fileUrl": "https://files.example.com/agreement.docx",
        })
        assert resp.status_code == 201

        listed = client.get("/api/documents").json()
        assert listed[0]["sharedByUser"]["initials"] == "ER"

    def test_unknown_type(self, client):
        resp = client.post("/api/documents", json={"name": "x", "type": "zip", "sharedBy": 1})
        assert resp.status_code == 400
        assert any(e["path"] == ["type"] for e in resp.json()["errors"])


class TestComments:
    def test_create_and_list(self, client, sample_comment):
        resp = client.post("/api/comments", json={"userId": 1, "content": "Agreed"})
        assert resp.status_code == 201

        listed = client.get("/api/comments").json()
        assert [c["content"] for c in listed] == ["Great comps on this one", "Agreed"]
        assert listed[0]["user"]["username"] == "mike_torres"

    def test_empty_content(self, client):
        resp = client.post("/api/comments", json={"userId": 1, "content": ""})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid comment data"


class TestUsers:
    def test_list_seeded(self, client):
        data = client.get("/api/users").json()
        assert len(data) == 4
        assert data[0] == {
            "id": 1,
            "username": "john_doe",
            "password": "password",
            "name": "John Doe",
            "role": "Senior Agent",
            "initials": "JD",
        }

    def test_create(self, client):
        resp = client.post("/api/users", json={
            "username": "li_wei",
            "password": "secret",
            "name": "Li Wei",
            "role": "Analyst",
            "initials": "LW",
        })
        assert resp.status_code == 201
        assert resp.json()["id"] == 5

    def test_duplicate_username(self, client):
        resp = client.post("/api/users", json={
            "username": "john_doe",
            "password": "x",
            "name": "Another John",
            "role": "Agent",
            "initials": "AJ",
        })
        assert resp.status_code == 409
        assert resp.json() == {"message": "Username already exists"}


class TestDashboardStats:
    def test_stats(self, client, property_payload):
        client.post("/api/properties", json={**property_payload, "price": 400000, "status": "active"})
        client.post("/api/properties", json={**property_payload, "price": 500000, "status": "sold"})

        resp = client.get("/api/dashboard-stats")

        assert resp.status_code == 200
        stats = resp.json()
        assert stats["activeListings"] == 1
        assert stats["avgPrice"] == "$450K"
        assert stats["daysOnMarket"] == 12

    def test_stats_empty(self, client):
        stats = client.get("/api/dashboard-stats").json()
        assert stats["activeListings"] == 0
        assert stats["avgPrice"] == "$0K"


class TestErrors:
    def test_store_failure_returns_generic_500(self, store, monkeypatch):
        def broken():
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(store.properties, "get_all", broken)
        with TestClient(create_app(store=store)) as c:
            resp = c.get("/api/properties")

        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to fetch properties"}

    def test_join_failure_returns_generic_500(self, store, monkeypatch):
        monkeypatch.setattr(store.comments, "get_all", lambda: 1 / 0)
        with TestClient(create_app(store=store)) as c:
            resp = c.get("/api/comments")

        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to fetch comments"}

    def test_unknown_route(self, client):
        resp = client.get("/api/nothing-here")
        assert resp.status_code == 404
        assert "message" in resp.json()

    def test_malformed_json(self, client):
        resp = client.post(
            "/api/comments",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_detailed(self, client, sample_property):
        data = client.get("/health/detailed").json()
        assert data["collections"]["properties"] == 1
        assert data["collections"]["users"] == 4

    def test_environment_from_app_settings(self, monkeypatch):
        from core.config import Settings

        monkeypatch.setenv("ENVIRONMENT", "staging")
        application = create_app(store=EntityStore(), settings=Settings())

        assert TestClient(application).get("/health").json()["environment"] == "staging"


class TestRequestId:
    def test_generated_when_absent(self, client):
        resp = client.get("/api/users")
        assert len(resp.headers["X-Request-ID"]) == 32

    def test_client_value_echoed(self, client):
        resp = client.get("/api/properties/99", headers={"X-Request-ID": "trace-123"})
        assert resp.status_code == 404
        assert resp.headers["X-Request-ID"] == "trace-123"


@pytest.mark.parametrize("seed", [True, False])
def test_app_honours_seed_setting(seed, monkeypatch):
    from core.config import Settings

    monkeypatch.setenv("SEED_DEMO_DATA", str(seed).lower())
    application = create_app(settings=Settings())

    with TestClient(application) as c:
        assert len(c.get("/api/users").json()) == (4 if seed else 0)


def test_each_app_gets_its_own_store():
    first = create_app(store=EntityStore())
    second = create_app(store=EntityStore())
    assert first.state.store is not second.state.store

"""Tests for the v1 HTTP endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sportconnect_api.app.core.config import Settings
from sportconnect_api.app.core.db import MemorySnapshotStorage
from sportconnect_api.app.main import create_app


@pytest.fixture
def client(fast_settings, storage):
    app = create_app(settings=fast_settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_me(client):
    response = client.get("/api/v1/auth/me")

    assert response.status_code == 200
    assert response.json()["id"] == "u1"
    assert response.json()["roles"] == ["Striker", "Winger"]


def test_me_unauthorized_when_identity_missing():
    settings = Settings(min_latency_ms=0, max_latency_ms=0, current_user_id="ghost")
    with TestClient(create_app(settings=settings, storage=MemorySnapshotStorage())) as client:
        response = client.get("/api/v1/auth/me")

    assert response.status_code == 401


def test_list_matches_uses_camel_case_fields(client):
    matches = client.get("/api/v1/matches/").json()

    assert [m["id"] for m in matches] == ["m1", "m2"]
    assert matches[0]["currentPlayers"] == 4
    assert matches[0]["maxPlayers"] == 10
    assert matches[0]["status"] == "Open"
    assert matches[1]["sport"] == "Padel"


def test_users_and_rankings(client):
    assert len(client.get("/api/v1/users/").json()) == 5
    assert client.get("/api/v1/users/u4").json()["name"] == "Giovanni"
    assert client.get("/api/v1/users/u404").status_code == 404

    rankings = client.get("/api/v1/rankings/").json()
    assert [r["rank"] for r in rankings] == [1, 2, 3, 4]
    assert rankings[0]["winRate"] == 78


def test_membership_toggle(client):
    joined = client.post("/api/v1/matches/m1/membership", json={"userId": "u5"})
    assert joined.status_code == 200
    assert joined.json()["action"] == "joined"
    assert joined.json()["match"]["currentPlayers"] == 5

    left = client.post("/api/v1/matches/m1/membership", json={"userId": "u5"})
    assert left.json()["action"] == "left"
    assert [p["id"] for p in left.json()["match"]["players"]] == ["u1", "u2", "u3", "u4"]


def test_membership_errors(client):
    assert client.post("/api/v1/matches/nope/membership", json={"userId": "u5"}).status_code == 404
    assert client.post("/api/v1/matches/m1/membership", json={"userId": "nope"}).status_code == 404

    for user_id in ("u1", "u3", "u4"):
        assert client.post("/api/v1/matches/m2/membership", json={"userId": user_id}).status_code == 200
    assert client.get("/api/v1/matches/m2").json()["status"] == "Full"

    full = client.post("/api/v1/matches/m2/membership", json={"userId": "u5"})
    assert full.status_code == 409
    assert client.get("/api/v1/matches/m2").json()["currentPlayers"] == 4


def test_create_match(client):
    response = client.post(
        "/api/v1/matches/",
        json={"sport": "Volleyball", "title": "Beach Volley", "location": "Lido", "maxPlayers": 6, "price": 3.5},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["sport"] == "Volleyball"
    assert body["currentPlayers"] == 1
    assert body["organizer"]["id"] == "u1"
    assert client.get("/api/v1/matches/").json()[0]["id"] == body["id"]


def test_create_match_missing_location_is_rejected(client):
    response = client.post("/api/v1/matches/", json={"title": "Nowhere game"})

    assert response.status_code == 422
    assert "location" in response.json()["detail"]
    assert [m["title"] for m in client.get("/api/v1/matches/").json()] == [
        "5v5 Friendly Night",
        "Intermediate Padel Match",
    ]


def test_storage_failure_is_service_unavailable(client, storage):
    storage.fail_next_save = True

    response = client.post("/api/v1/matches/m1/membership", json={"userId": "u5"})

    assert response.status_code == 503
    assert response.json()["detail"] == "Service unavailable"
    assert client.get("/api/v1/matches/m1").json()["currentPlayers"] == 4


def test_shutdown_flushes_snapshot(fast_settings, storage):
    with TestClient(create_app(settings=fast_settings, storage=storage)) as client:
        client.post("/api/v1/matches/m1/membership", json={"userId": "u5"})
        writes = storage.save_count

    assert storage.save_count == writes + 1
    assert len(storage.load()["matches"][0]["players"]) == 5

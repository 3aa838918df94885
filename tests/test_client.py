"""Tests for the requests-based API client, using a fake session."""

from __future__ import annotations

import json

import requests

from sportconnect_client import SportConnectAPI


class FakeSession:
    """Records requests and answers with canned responses."""

    def __init__(self, status_code: int = 200, body=None, error: Exception | None = None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls: list[dict] = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        response = requests.Response()
        response.status_code = self.status_code
        response._content = b"" if self.body is None else _dumps(self.body)
        response.url = url
        return response


def _dumps(body) -> bytes:
    return json.dumps(body).encode("utf-8")


def test_toggle_membership_posts_user_id():
    session = FakeSession(body={"action": "joined", "match": {"id": "m1"}})
    client = SportConnectAPI(base_url="http://api.local/", session=session)

    result, error = client.toggle_membership("m1", "u5")

    assert error is None
    assert result["action"] == "joined"
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == "http://api.local/api/v1/matches/m1/membership"
    assert session.calls[0]["json"] == {"userId": "u5"}


def test_http_error_returns_status_and_detail():
    session = FakeSession(status_code=409, body={"detail": "Match m2 is full (4 players)"})
    client = SportConnectAPI(base_url="http://api.local", session=session)

    result, error = client.toggle_membership("m2", "u5")

    assert result is None
    assert error == {"status_code": 409, "message": "Match m2 is full (4 players)"}


def test_list_returns_empty_on_transport_error():
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    client = SportConnectAPI(base_url="http://api.local", session=session)

    matches, error = client.list_matches()

    assert matches == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_create_match_sends_payload():
    session = FakeSession(status_code=201, body={"id": "mabc", "title": "Padel"})
    client = SportConnectAPI(base_url="http://api.local", session=session)

    created, error = client.create_match({"title": "Padel", "location": "Roma"})

    assert error is None
    assert created["id"] == "mabc"
    assert session.calls[0]["url"].endswith("/api/v1/matches/")

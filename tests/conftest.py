"""Shared fixtures: an initialised in-memory store and a zero-latency façade."""

from __future__ import annotations

import pytest

from sportconnect_api.app.core.config import Settings
from sportconnect_api.app.core.db import MemorySnapshotStorage
from sportconnect_api.app.schemas.match import Match, MatchStatus, SportType
from sportconnect_api.app.schemas.player import Player
from sportconnect_api.app.services.api_service import MatchApi
from sportconnect_api.app.services.match_store import MatchStore


def make_player(user_id: str, name: str | None = None, rating: float = 7.0) -> Player:
    return Player(id=user_id, name=name or f"Player {user_id}", avatar=f"https://example.com/{user_id}.png", rating=rating)


def make_match(
    match_id: str = "m-test",
    players: list[Player] | None = None,
    max_players: int = 4,
    organizer: Player | None = None,
) -> Match:
    """Create a consistent match with sensible defaults."""
    players = players if players is not None else [make_player("o1")]
    organizer = organizer or (players[0] if players else make_player("o1"))
    return Match(
        id=match_id,
        sport=SportType.BASKETBALL,
        title="Test match",
        date="Today",
        time="20:00",
        location="Test court",
        current_players=len(players),
        max_players=max_players,
        status=MatchStatus.FULL if len(players) == max_players else MatchStatus.OPEN,
        price=5,
        organizer=organizer,
        players=players,
    )


@pytest.fixture
def fast_settings() -> Settings:
    return Settings(min_latency_ms=0, max_latency_ms=0)


@pytest.fixture
def storage() -> MemorySnapshotStorage:
    return MemorySnapshotStorage()


@pytest.fixture
def store(storage: MemorySnapshotStorage) -> MatchStore:
    match_store = MatchStore(storage)
    match_store.init()
    return match_store


@pytest.fixture
def api(store: MatchStore, fast_settings: Settings) -> MatchApi:
    return MatchApi(store, fast_settings)

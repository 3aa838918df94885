"""
Pydantic models for matches and membership requests.

``Match`` validates its own invariants on construction, so every match
value that exists in the service is consistent: the player count
agrees with the roster, the roster has no duplicate ids, capacity is
respected and the status follows the count.  ``MatchCreate`` and
``MembershipRequest`` are request bodies; ``MembershipResult`` is the
tagged outcome of a join-or-leave transaction.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .player import Player


class SportType(str, Enum):
    SOCCER = "Soccer"
    TENNIS = "Tennis"
    BASKETBALL = "Basketball"
    PADEL = "Padel"
    VOLLEYBALL = "Volleyball"


class MatchStatus(str, Enum):
    OPEN = "Open"
    FULL = "Full"
    # Terminal state set by collaborators outside the store; joins and
    # leaves never produce it.
    COMPLETED = "Completed"


class Match(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., examples=["m1"])
    sport: SportType
    title: str = Field(..., examples=["5v5 Friendly Night"])
    date: str = Field(..., examples=["Today"])
    time: str = Field(..., examples=["20:00"])
    location: str = Field(..., examples=["Milano Football Center"])
    current_players: int = Field(..., alias="currentPlayers", ge=0)
    max_players: int = Field(..., alias="maxPlayers", ge=1)
    status: MatchStatus
    price: Optional[float] = Field(None, ge=0)
    organizer: Player
    players: List[Player] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_roster(self) -> "Match":
        if self.current_players != len(self.players):
            raise ValueError(
                f"currentPlayers ({self.current_players}) does not match roster size ({len(self.players)})"
            )
        if self.current_players > self.max_players:
            raise ValueError(
                f"currentPlayers ({self.current_players}) exceeds maxPlayers ({self.max_players})"
            )
        ids = [p.id for p in self.players]
        if len(ids) != len(set(ids)):
            raise ValueError("players contains duplicate ids")
        if self.status != MatchStatus.COMPLETED:
            expected = status_for(self.current_players, self.max_players)
            if self.status != expected:
                raise ValueError(
                    f"status {self.status.value} inconsistent with {self.current_players}/{self.max_players} players"
                )
        return self

    def has_player(self, user_id: str) -> bool:
        return any(p.id == user_id for p in self.players)


def status_for(current_players: int, max_players: int) -> MatchStatus:
    """Status implied by a player count: ``Full`` exactly at capacity."""
    return MatchStatus.FULL if current_players >= max_players else MatchStatus.OPEN


class MatchCreate(BaseModel):
    """Schema for creating a match.

    ``title`` and ``location`` are required, but they are declared
    optional here so that the access façade reports a missing value as
    a ``ValidationError`` instead of the framework rejecting the body.
    ``organizerId`` defaults to the current user.
    """

    model_config = ConfigDict(populate_by_name=True)

    sport: SportType = SportType.SOCCER
    title: Optional[str] = Field(None, examples=["Sunday Morning Tennis"])
    location: Optional[str] = Field(None, examples=["Tennis Club Milano"])
    date: Optional[str] = Field(None, examples=["Sunday"])
    time: Optional[str] = Field(None, examples=["09:00"])
    max_players: int = Field(10, alias="maxPlayers", ge=1)
    price: Optional[float] = Field(None, ge=0)
    organizer_id: Optional[str] = Field(None, alias="organizerId")


class MembershipRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", examples=["u5"])


class MembershipAction(str, Enum):
    JOINED = "joined"
    LEFT = "left"


class MembershipResult(BaseModel):
    """Outcome of a join-or-leave transaction.

    ``action`` tells the caller which way the toggle went; ``match`` is
    the new match value.
    """

    model_config = ConfigDict(frozen=True)

    action: MembershipAction
    match: Match

"""
Pydantic models for players and league rankings.

Players are referenced by matches, never owned by them: a match keeps
a by-value copy of each member.  Rankings are reporting data and are
never changed by membership transactions.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Player(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., examples=["u1"])
    name: str = Field(..., examples=["Alessandro Rossi"])
    avatar: str = Field(..., examples=["https://picsum.photos/id/64/100/100"])
    rating: float = Field(..., examples=[8.5])
    roles: Optional[List[str]] = Field(None, examples=[["Striker", "Winger"]])


class LeagueRanking(BaseModel):
    """Schema for a read-only league table entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rank: int = Field(..., ge=1)
    player: Player
    points: int
    win_rate: float = Field(..., alias="winRate")

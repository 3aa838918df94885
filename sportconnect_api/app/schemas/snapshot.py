"""
The durable record of the store: every user, match and ranking.
"""

from typing import List

from pydantic import BaseModel, Field

from .match import Match
from .player import LeagueRanking, Player


class Snapshot(BaseModel):
    users: List[Player] = Field(default_factory=list)
    matches: List[Match] = Field(default_factory=list)
    # Older records were written without rankings.
    rankings: List[LeagueRanking] = Field(default_factory=list)

    def to_record(self) -> dict:
        """Serialize to the JSON-compatible dict written to storage."""
        return self.model_dump(mode="json", by_alias=True)

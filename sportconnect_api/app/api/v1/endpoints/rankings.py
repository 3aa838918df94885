"""
League table endpoint for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends

from sportconnect_api.app.api.deps import get_match_api, to_http_exception
from sportconnect_api.app.core.exceptions import SportConnectError
from sportconnect_api.app.schemas.player import LeagueRanking
from sportconnect_api.app.services.api_service import MatchApi

router = APIRouter()


@router.get("/", response_model=List[LeagueRanking])
async def list_rankings(api: MatchApi = Depends(get_match_api)) -> List[LeagueRanking]:
    """Return the league table in rank order.  Rankings are read-only."""
    try:
        return await api.list_rankings()
    except SportConnectError as e:
        raise to_http_exception(e) from e

"""
Identity endpoint for API v1.

There is no login: ``/auth/me`` resolves the configured seeded user.
"""

from fastapi import APIRouter, Depends

from sportconnect_api.app.api.deps import get_match_api, to_http_exception
from sportconnect_api.app.core.exceptions import SportConnectError
from sportconnect_api.app.schemas.player import Player
from sportconnect_api.app.services.api_service import MatchApi

router = APIRouter()


@router.get("/me", response_model=Player)
async def read_current_user(api: MatchApi = Depends(get_match_api)) -> Player:
    """Return the current user, or 401 if it cannot be resolved."""
    try:
        return await api.me()
    except SportConnectError as e:
        raise to_http_exception(e) from e

"""
User endpoints for API v1.

Users are read-only here; they are seeded with the store.
"""

from typing import List

from fastapi import APIRouter, Depends

from sportconnect_api.app.api.deps import get_match_api, to_http_exception
from sportconnect_api.app.core.exceptions import SportConnectError
from sportconnect_api.app.schemas.player import Player
from sportconnect_api.app.services.api_service import MatchApi

router = APIRouter()


@router.get("/", response_model=List[Player])
async def list_users(api: MatchApi = Depends(get_match_api)) -> List[Player]:
    try:
        return await api.list_users()
    except SportConnectError as e:
        raise to_http_exception(e) from e


@router.get("/{user_id}", response_model=Player)
async def get_user(user_id: str, api: MatchApi = Depends(get_match_api)) -> Player:
    """Retrieve a single user.  Raises 404 if the user does not exist."""
    try:
        return await api.get_user(user_id)
    except SportConnectError as e:
        raise to_http_exception(e) from e

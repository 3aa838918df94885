"""
Match endpoints for API v1.

Matches are listed newest first, created with the caller (or a given
``organizerId``) as the only player, and joined or left through a
single membership endpoint.  The membership endpoint toggles: a member
who posts to it leaves, anybody else joins.  There is no separate
"leave" route.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from sportconnect_api.app.api.deps import get_match_api, to_http_exception
from sportconnect_api.app.core.exceptions import SportConnectError
from sportconnect_api.app.schemas.match import Match, MatchCreate, MembershipRequest, MembershipResult
from sportconnect_api.app.services.api_service import MatchApi

router = APIRouter()


@router.get("/", response_model=List[Match])
async def list_matches(api: MatchApi = Depends(get_match_api)) -> List[Match]:
    try:
        return await api.list_matches()
    except SportConnectError as e:
        raise to_http_exception(e) from e


@router.post("/", response_model=Match, status_code=status.HTTP_201_CREATED)
async def create_match(data: MatchCreate, api: MatchApi = Depends(get_match_api)) -> Match:
    """Create a new match.

    ``title`` and ``location`` are required; a request without them is
    answered with 422 and nothing is stored.
    """
    try:
        return await api.create_match(data)
    except SportConnectError as e:
        raise to_http_exception(e) from e


@router.get("/{match_id}", response_model=Match)
async def get_match(match_id: str, api: MatchApi = Depends(get_match_api)) -> Match:
    try:
        return await api.get_match(match_id)
    except SportConnectError as e:
        raise to_http_exception(e) from e


@router.post("/{match_id}/membership", response_model=MembershipResult)
async def toggle_membership(
    match_id: str,
    body: MembershipRequest,
    api: MatchApi = Depends(get_match_api),
) -> MembershipResult:
    """Join or leave a match.

    Returns the updated match and whether the user ``joined`` or
    ``left``.  Unknown match or user yields 404; joining a full match
    yields 409.
    """
    try:
        return await api.toggle_membership(match_id, body.user_id)
    except SportConnectError as e:
        raise to_http_exception(e) from e

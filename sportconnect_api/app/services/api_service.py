"""
Access façade in front of the match store.

``MatchApi`` is what API handlers (or any other client) call.  Every
method behaves like a network round trip: it waits a random delay
within the configured bounds and then runs the store call in a worker
thread, so many requests may be in flight while the store still
applies them one at a time.

Apart from latency the façade adds one piece of business logic: a
create request must carry a ``title`` and a ``location``.  It also
builds the initial match value (id, defaults, organizer as sole
player) before handing it to the store.
"""

import asyncio
import logging
import random
import uuid
from typing import List, Optional

import pydantic

from ..core.config import Settings, settings as default_settings
from ..core.exceptions import MatchFull, NotFoundError, Unauthorized, UserNotFound, ValidationError
from ..schemas.match import Match, MatchCreate, MembershipResult, status_for
from ..schemas.player import LeagueRanking, Player
from .match_store import MatchStore

logger = logging.getLogger(__name__)

DEFAULT_DATE = "Today"
DEFAULT_TIME = "20:00"


class MatchApi:
    """Asynchronous request/response boundary around a :class:`MatchStore`."""

    sleep = staticmethod(asyncio.sleep)

    def __init__(self, store: MatchStore, settings: Optional[Settings] = None) -> None:
        self.store = store
        self.settings = settings or default_settings

    async def _latency(self) -> None:
        low = max(0, self.settings.min_latency_ms)
        high = max(low, self.settings.max_latency_ms)
        delay_ms = random.randint(low, high)
        if delay_ms:
            await self.sleep(delay_ms / 1000)

    async def _call(self, func, *args):
        await self._latency()
        return await asyncio.to_thread(func, *args)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def me(self) -> Player:
        """Return the current user.

        There are no real sessions: the identity is the configured
        ``current_user_id``.  Raises ``Unauthorized`` if that user does
        not exist.
        """
        try:
            return await self._call(self.store.get_user, self.settings.current_user_id)
        except UserNotFound as e:
            logger.warning("Current user %s could not be resolved", self.settings.current_user_id)
            raise Unauthorized("No current user") from e

    async def list_users(self) -> List[Player]:
        return await self._call(self.store.list_users)

    async def get_user(self, user_id: str) -> Player:
        return await self._call(self.store.get_user, user_id)

    async def list_rankings(self) -> List[LeagueRanking]:
        return await self._call(self.store.list_rankings)

    # ------------------------------------------------------------------
    # Matches
    # ------------------------------------------------------------------

    async def list_matches(self) -> List[Match]:
        return await self._call(self.store.list_matches)

    async def get_match(self, match_id: str) -> Match:
        return await self._call(self.store.get_match, match_id)

    async def create_match(self, data: MatchCreate) -> Match:
        """Validate a create request and store the new match.

        The organizer (``organizerId``, or the current user when
        omitted) becomes the only player.  Missing ``date`` and
        ``time`` fall back to "Today" at "20:00".

        Raises
        ------
        ValidationError
            ``title`` or ``location`` is missing or blank.
        UserNotFound
            The organizer does not exist.
        """
        await self._latency()
        missing = [name for name in ("title", "location") if not (getattr(data, name) or "").strip()]
        if missing:
            logger.warning("Rejected match creation, missing fields: %s", ", ".join(missing))
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        organizer_id = data.organizer_id or self.settings.current_user_id
        organizer = await asyncio.to_thread(self.store.get_user, organizer_id)
        try:
            match = Match(
                id=f"m{uuid.uuid4().hex}",
                sport=data.sport,
                title=data.title.strip(),
                date=data.date or DEFAULT_DATE,
                time=data.time or DEFAULT_TIME,
                location=data.location.strip(),
                current_players=1,
                max_players=data.max_players,
                status=status_for(1, data.max_players),
                price=data.price,
                organizer=organizer,
                players=[organizer],
            )
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e
        return await asyncio.to_thread(self.store.create_match, match)

    async def toggle_membership(self, match_id: str, user_id: str) -> MembershipResult:
        """Join the match if ``user_id`` is not a member, leave it otherwise."""
        try:
            return await self._call(self.store.apply_membership_change, match_id, user_id)
        except (NotFoundError, MatchFull) as e:
            logger.warning("Membership change rejected for user %s on match %s: %s", user_id, match_id, e)
            raise

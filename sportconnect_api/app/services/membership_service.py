"""
Join-or-leave transition for a single match.

There is one operation, not two: whether a call joins or leaves is
decided by the user's current membership.  A member leaves; a
non-member joins if there is room.  The function is pure.  It builds a
new ``Match`` (whose validator re-checks every roster invariant) and
never touches its inputs, so a rejected request leaves nothing behind.
"""

import logging
from typing import List

from ..core.exceptions import MatchFull
from ..schemas.match import Match, MatchStatus, MembershipAction, MembershipResult, status_for
from ..schemas.player import Player

logger = logging.getLogger(__name__)


def _with_roster(match: Match, players: List[Player], status: MatchStatus) -> Match:
    data = match.model_dump()
    data.update(players=players, current_players=len(players), status=status)
    return Match.model_validate(data)


def apply_membership_change(match: Match, user: Player) -> MembershipResult:
    """Toggle ``user``'s membership of ``match``.

    Leaving removes the user, keeps the order of the remaining players
    and always reopens the match.  Joining appends the user in arrival
    order and marks the match ``Full`` when the last slot is taken.

    Raises
    ------
    MatchFull
        The user is not a member and the match is at capacity.  This
        applies to the organizer too.
    """
    if match.has_player(user.id):
        players = [p for p in match.players if p.id != user.id]
        # A vacated slot is immediately available again.
        updated = _with_roster(match, players, MatchStatus.OPEN)
        logger.debug("User %s leaves match %s (%s/%s)", user.id, match.id, len(players), match.max_players)
        return MembershipResult(action=MembershipAction.LEFT, match=updated)

    if match.current_players >= match.max_players:
        raise MatchFull(match.id, match.max_players)

    players = list(match.players) + [user]
    updated = _with_roster(match, players, status_for(len(players), match.max_players))
    logger.debug("User %s joins match %s (%s/%s)", user.id, match.id, len(players), match.max_players)
    return MembershipResult(action=MembershipAction.JOINED, match=updated)

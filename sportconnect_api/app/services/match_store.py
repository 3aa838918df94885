"""
Authoritative store for users, matches and rankings.

``MatchStore`` is the only writer of canonical state.  It keeps the
collections in memory, guards them with a single lock and writes the
full snapshot to a :class:`~sportconnect_api.app.core.db.SnapshotStorage`
after every mutation.  Callers always receive copies.

Mutations follow the same pattern: compute the new collections from
the current ones, save them, and only then replace the in-memory
state.  If the save fails the previous state is kept, so memory never
runs ahead of storage and a failed call changes nothing.
"""

import logging
import threading
from typing import List, Optional

import pydantic

from ..core.db import SnapshotStorage
from ..core.exceptions import MatchNotFound, StorageFailure, StoreNotReady, UserNotFound
from ..schemas.match import Match, MembershipResult
from ..schemas.player import LeagueRanking, Player
from ..schemas.snapshot import Snapshot
from .membership_service import apply_membership_change
from .seed import seed_snapshot

logger = logging.getLogger(__name__)


class MatchStore:
    """Lock-protected, persisted collection of users and matches.

    Parameters
    ----------
    storage : SnapshotStorage
        Where the snapshot is loaded from and saved to.
    seed : Optional[Snapshot]
        Dataset written when storage holds no snapshot.  Defaults to the
        fixtures in :mod:`.seed`.
    """

    def __init__(self, storage: SnapshotStorage, seed: Optional[Snapshot] = None) -> None:
        self._storage = storage
        self._seed = seed
        self._lock = threading.Lock()
        self._state: Optional[Snapshot] = None
        self._closed = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Load the stored snapshot, or seed and save one on first run."""
        with self._lock:
            record = self._storage.load()
            if record is None:
                state = self._seed.model_copy(deep=True) if self._seed is not None else seed_snapshot()
                self._storage.save(state.to_record())
                logger.info(
                    "No stored snapshot found; seeded %s users and %s matches",
                    len(state.users),
                    len(state.matches),
                )
            else:
                try:
                    state = Snapshot.model_validate(record)
                except pydantic.ValidationError as e:
                    logger.error("Stored snapshot is corrupt: %s", e)
                    raise StorageFailure(f"Stored snapshot is corrupt: {e}") from e
                logger.info(
                    "Loaded snapshot with %s users and %s matches",
                    len(state.users),
                    len(state.matches),
                )
            self._state = state
            self._closed = False

    def flush(self) -> None:
        """Write the current state to storage again."""
        with self._lock:
            self._flush_locked()

    def close(self) -> None:
        """Flush once and refuse further operations."""
        with self._lock:
            if self._closed or self._state is None:
                return
            self._flush_locked()
            self._closed = True
            logger.info("Match store closed")

    @property
    def ready(self) -> bool:
        return self._state is not None and not self._closed

    def _require_state(self) -> Snapshot:
        if self._closed:
            raise StoreNotReady("Match store is closed")
        if self._state is None:
            raise StoreNotReady("Match store has not been initialised")
        return self._state

    def _flush_locked(self) -> None:
        """Save the current state.  Caller holds the lock."""
        state = self._require_state()
        self._storage.save(state.to_record())
        logger.debug("Flushed snapshot with %s matches", len(state.matches))

    def _commit(self, state: Snapshot) -> None:
        """Persist ``state`` and make it current.  Caller holds the lock."""
        self._storage.save(state.to_record())
        self._state = state

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_users(self) -> List[Player]:
        with self._lock:
            return [u.model_copy(deep=True) for u in self._require_state().users]

    def get_user(self, user_id: str) -> Player:
        with self._lock:
            return self._find_user(self._require_state(), user_id).model_copy(deep=True)

    def list_matches(self) -> List[Match]:
        """Return all matches, most recently created first."""
        with self._lock:
            return [m.model_copy(deep=True) for m in self._require_state().matches]

    def get_match(self, match_id: str) -> Match:
        with self._lock:
            state = self._require_state()
            return state.matches[self._match_index(state, match_id)].model_copy(deep=True)

    def list_rankings(self) -> List[LeagueRanking]:
        with self._lock:
            return [r.model_copy(deep=True) for r in self._require_state().rankings]

    def snapshot(self) -> Snapshot:
        """Return a copy of the whole state."""
        with self._lock:
            return self._require_state().model_copy(deep=True)

    @staticmethod
    def _find_user(state: Snapshot, user_id: str) -> Player:
        for user in state.users:
            if user.id == user_id:
                return user
        raise UserNotFound(user_id)

    @staticmethod
    def _match_index(state: Snapshot, match_id: str) -> int:
        for index, match in enumerate(state.matches):
            if match.id == match_id:
                return index
        raise MatchNotFound(match_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_match(self, match: Match) -> Match:
        """Store ``match`` as the newest match.

        The match is taken as given.  Id uniqueness is the caller's
        responsibility.
        """
        with self._lock:
            state = self._require_state()
            stored = match.model_copy(deep=True)
            new_state = state.model_copy(update={"matches": [stored] + list(state.matches)})
            self._commit(new_state)
            logger.info("Created match %s '%s' organised by %s", stored.id, stored.title, stored.organizer.id)
            return stored.model_copy(deep=True)

    def apply_membership_change(self, match_id: str, user_id: str) -> MembershipResult:
        """Join or leave ``match_id`` for ``user_id`` as one atomic step.

        Raises
        ------
        MatchNotFound, UserNotFound, MatchFull
            Nothing was changed or written.
        StorageFailure
            The new state could not be saved; the previous state is kept.
        """
        with self._lock:
            state = self._require_state()
            index = self._match_index(state, match_id)
            user = self._find_user(state, user_id)
            result = apply_membership_change(state.matches[index], user)

            matches = list(state.matches)
            matches[index] = result.match
            self._commit(state.model_copy(update={"matches": matches}))

            logger.info(
                "User %s %s match %s (%s/%s, %s)",
                user_id,
                result.action.value,
                match_id,
                result.match.current_players,
                result.match.max_players,
                result.match.status.value,
            )
            return result.model_copy(deep=True)

"""
Error types raised by the match store and the access façade.

Business errors (validation, not found, full) are recoverable by the
caller and never leave partial state behind.  ``StorageFailure`` is the
only kind caused by something other than business rules; the HTTP
layer reports it as "service unavailable".
"""


class SportConnectError(Exception):
    """Base class for all service errors."""
    pass


class ValidationError(SportConnectError):
    """A creation request is missing required fields."""
    pass


class NotFoundError(SportConnectError):
    """A referenced entity does not exist."""

    entity = "Entity"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class MatchNotFound(NotFoundError):
    entity = "Match"


class UserNotFound(NotFoundError):
    entity = "User"


class MatchFull(SportConnectError):
    """Join attempted on a match already at capacity."""

    def __init__(self, match_id, max_players: int):
        self.match_id = match_id
        self.max_players = max_players
        super().__init__(f"Match {match_id} is full ({max_players} players)")


class Unauthorized(SportConnectError):
    """No current identity could be resolved."""
    pass


class StorageFailure(SportConnectError):
    """Reading or writing the durable snapshot failed."""
    pass


class StoreNotReady(StorageFailure):
    """The store was used before ``init()`` or after ``close()``."""
    pass

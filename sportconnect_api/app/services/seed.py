"""
Fixture dataset written on first start, when storage holds no snapshot.
"""

from ..schemas.match import Match, MatchStatus, SportType
from ..schemas.player import LeagueRanking, Player
from ..schemas.snapshot import Snapshot

SEED_USER = Player(
    id="u1",
    name="Alessandro Rossi",
    avatar="https://picsum.photos/id/64/100/100",
    rating=8.5,
    roles=["Striker", "Winger"],
)

SEED_PLAYERS = [
    SEED_USER,
    Player(id="u2", name="Marco V.", avatar="https://picsum.photos/id/32/100/100", rating=7.0, roles=["Defender"]),
    Player(id="u3", name="Luca B.", avatar="https://picsum.photos/id/55/100/100", rating=9.0, roles=["Midfielder"]),
    Player(id="u4", name="Giovanni", avatar="https://picsum.photos/id/41/100/100", rating=6.5, roles=["Goalkeeper"]),
    Player(id="u5", name="Stefano", avatar="https://picsum.photos/id/33/100/100", rating=7.5, roles=["Defender"]),
]

SEED_MATCHES = [
    Match(
        id="m1",
        sport=SportType.SOCCER,
        title="5v5 Friendly Night",
        date="Today",
        time="20:00",
        location="Milano Football Center",
        current_players=4,
        max_players=10,
        status=MatchStatus.OPEN,
        price=7,
        organizer=SEED_USER,
        players=[SEED_USER, SEED_PLAYERS[1], SEED_PLAYERS[2], SEED_PLAYERS[3]],
    ),
    Match(
        id="m2",
        sport=SportType.PADEL,
        title="Intermediate Padel Match",
        date="Tomorrow",
        time="18:30",
        location="Padel Club Roma",
        current_players=1,
        max_players=4,
        status=MatchStatus.OPEN,
        price=12,
        organizer=SEED_PLAYERS[1],
        players=[SEED_PLAYERS[1]],
    ),
]

# League table entries reference players outside the user collection
# (x1..x3) as well as the seeded current user.
SEED_RANKINGS = [
    LeagueRanking(
        rank=1,
        player=Player(id="x1", name="Luca B.", avatar="https://picsum.photos/id/55/100/100", rating=9),
        points=1250,
        win_rate=78,
    ),
    LeagueRanking(
        rank=2,
        player=Player(id="u1", name="Alessandro Rossi", avatar="https://picsum.photos/id/64/100/100", rating=8.5),
        points=1180,
        win_rate=65,
    ),
    LeagueRanking(
        rank=3,
        player=Player(id="x2", name="Marco V.", avatar="https://picsum.photos/id/32/100/100", rating=7),
        points=1050,
        win_rate=55,
    ),
    LeagueRanking(
        rank=4,
        player=Player(id="x3", name="Giovanni", avatar="https://picsum.photos/id/41/100/100", rating=6.5),
        points=980,
        win_rate=50,
    ),
]


def seed_snapshot() -> Snapshot:
    """Return a fresh copy of the fixture dataset."""
    return Snapshot(
        users=list(SEED_PLAYERS),
        matches=list(SEED_MATCHES),
        rankings=list(SEED_RANKINGS),
    ).model_copy(deep=True)

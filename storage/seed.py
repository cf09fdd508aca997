"""Seed tournament used when nothing has been saved yet."""

from typing import List

from models import (
    ClosestToPinGame,
    ClosestToPinHole,
    Player,
    RoundData,
    ScrambleGame,
    ScrambleTeam,
    SkinsGame,
    TournamentData,
    tribute_course,
)

SKINS_POT = 360
CTP_HOLES = (6, 9, 13, 17)
CTP_PRIZE = 62.50
SCRAMBLE_TEAMS = 5

# (id, name, group)
TRIP_PLAYERS = [
    ("1", "Ethan", "A"), ("2", "John Porth", "A"), ("3", "Roger", "A"),
    ("4", "Jeff Felts", "A"), ("5", "Robert", "A"),
    ("6", "Steve", "B"), ("7", "James", "B"), ("8", "Maxwell", "B"),
    ("9", "Kent", "B"), ("10", "Thomas", "B"), ("11", "Spencer", "B"),
    ("12", "Ken", "C"), ("13", "Bryce", "C"), ("14", "Lucas", "C"),
    ("15", "Tate", "C"), ("16", "Mitchell", "C"),
    ("17", "Greg", "D"), ("18", "Pete", "D"),
]

# (id, name, day, headline prize pool)
TRIP_ROUNDS = [
    ("thursday", "Thursday - Payout", "Thursday", 360),
    ("friday", "Friday - Payout", "Friday", 720),
    ("saturday", "Saturday - Payout", "Saturday", 720),
]


def seed_players() -> List[Player]:
    return [Player(id=pid, name=name, group=group) for pid, name, group in TRIP_PLAYERS]


def empty_round(round_id: str, name: str, day: str, prize_pool: float = 0) -> RoundData:
    """A round with full rosters, no scores and five empty four-slot scramble teams."""
    holes = [
        ClosestToPinHole(hole=hole, par=3, prize=CTP_PRIZE)
        for hole in CTP_HOLES
    ]
    return RoundData(
        id=round_id,
        name=name,
        day=day,
        prize_pool=prize_pool,
        skins_game=SkinsGame(players=seed_players(), total_pot=SKINS_POT),
        closest_to_pin_game=ClosestToPinGame(
            players=seed_players(),
            holes=holes,
            total_prize_pool=CTP_PRIZE * len(holes),
        ),
        scramble_game=ScrambleGame(
            teams=[ScrambleTeam(id=f"team-{i}") for i in range(1, SCRAMBLE_TEAMS + 1)],
        ),
    )


def build_seed_tournament() -> TournamentData:
    """A fresh copy every call; callers may mutate it freely."""
    return TournamentData(
        rounds=[empty_round(*row) for row in TRIP_ROUNDS],
        course=tribute_course(),
    )

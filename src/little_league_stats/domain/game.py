from dataclasses import dataclass
from datetime import date

UNKNOWN_TEAM = "Unknown Team"
UNKNOWN_VENUE = "Unknown Venue"


def batting_average(hits: int, at_bats: int) -> float:
    """Hits per at-bat, or exactly 0.0 when there are no at-bats."""
    if at_bats > 0:
        return hits / at_bats
    return 0.0


@dataclass(frozen=True)
class GameRecord:
    date: date
    away_team: str = UNKNOWN_TEAM
    home_team: str = UNKNOWN_TEAM
    away_score: int = 0
    home_score: int = 0
    venue: str = UNKNOWN_VENUE
    processed: bool = True
    id: int | None = None


@dataclass(frozen=True)
class PlayerGameLine:
    name: str
    team: str
    at_bats: int
    hits: int
    runs: int
    rbi: int
    doubles: int = 0
    triples: int = 0
    home_runs: int = 0
    stolen_bases: int = 0
    batting_avg: float = 0.0
    game_id: int | None = None
    id: int | None = None


@dataclass(frozen=True)
class ParsedBoxScore:
    game: GameRecord
    players: tuple[PlayerGameLine, ...]

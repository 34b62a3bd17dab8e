from dataclasses import dataclass
from enum import Enum

PLACEHOLDER_ON_BASE_PCT = 0.33


class LeaderboardCategory(Enum):
    BATTING_AVG = "batting_avg"
    HOME_RUNS = "home_runs"
    RBI = "rbi"
    RUNS = "runs"
    STOLEN_BASES = "stolen_bases"
    # Pitching is not captured by the box score format.
    WINS = "wins"
    STRIKEOUTS = "strikeouts"
    ERA = "era"
    # Any tag that names none of the above.
    UNKNOWN = "unknown"


RANKED_CATEGORIES: frozenset[LeaderboardCategory] = frozenset(
    {
        LeaderboardCategory.BATTING_AVG,
        LeaderboardCategory.HOME_RUNS,
        LeaderboardCategory.RBI,
        LeaderboardCategory.RUNS,
        LeaderboardCategory.STOLEN_BASES,
    }
)

CATEGORY_LABELS: dict[LeaderboardCategory, str] = {
    LeaderboardCategory.BATTING_AVG: "Batting Average",
    LeaderboardCategory.HOME_RUNS: "Home Runs",
    LeaderboardCategory.RBI: "RBIs",
    LeaderboardCategory.RUNS: "Runs Scored",
    LeaderboardCategory.STOLEN_BASES: "Stolen Bases",
    LeaderboardCategory.WINS: "Pitcher Wins",
    LeaderboardCategory.STRIKEOUTS: "Pitcher Strikeouts",
    LeaderboardCategory.ERA: "ERA",
    LeaderboardCategory.UNKNOWN: "Batting Average (all players)",
}


@dataclass(frozen=True)
class PlayerSeasonTotals:
    name: str
    team: str
    games: int = 0
    at_bats: int = 0
    hits: int = 0
    runs: int = 0
    rbi: int = 0
    doubles: int = 0
    triples: int = 0
    home_runs: int = 0
    stolen_bases: int = 0
    batting_avg: float = 0.0
    slugging_pct: float = 0.0
    on_base_pct: float = PLACEHOLDER_ON_BASE_PCT


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    name: str
    team: str
    value: str


@dataclass(frozen=True)
class BatchItemResult:
    source: str
    success: bool
    message: str
    game_id: int | None = None

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from little_league_stats.domain.game import UNKNOWN_TEAM

_VERSUS_RE = re.compile(r"(?:^|\s)(?:vs\.?|at)(?:\s|$)", re.IGNORECASE)
_SCORE_RE = re.compile(r"(\d+)\s*-\s*(\d+)")
_DATE_RE = re.compile(r"(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})")
_PLAYER_RE = re.compile(r"^([A-Za-z\s.'-]+)\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)")


class LineKind(Enum):
    TEAMS = "teams"
    SCORE = "score"
    DATE = "date"
    SECTION_HEADER = "section_header"
    PLAYER = "player"


@dataclass(frozen=True)
class PlayerStatCapture:
    name: str
    at_bats: int
    hits: int
    runs: int
    rbi: int


@dataclass(frozen=True)
class LineClassification:
    kinds: frozenset[LineKind]
    teams: tuple[str, str] | None = None
    score: tuple[int, int] | None = None
    game_date: date | None = None
    player: PlayerStatCapture | None = None

    def is_(self, kind: LineKind) -> bool:
        return kind in self.kinds

    @property
    def unrecognized(self) -> bool:
        return not self.kinds


def classify_line(line: str) -> LineClassification:
    """Classify one trimmed line of box score text.

    Every pattern is checked independently, so a line can carry several
    kinds at once (``"5-3-24"`` is both a score and a date, for example).
    """
    kinds: set[LineKind] = set()

    teams = _match_teams(line)
    if teams is not None:
        kinds.add(LineKind.TEAMS)

    score = _match_score(line)
    if score is not None:
        kinds.add(LineKind.SCORE)

    game_date = _match_date(line)
    if game_date is not None:
        kinds.add(LineKind.DATE)

    if "batting" in line.lower():
        kinds.add(LineKind.SECTION_HEADER)

    player = _match_player(line)
    if player is not None:
        kinds.add(LineKind.PLAYER)

    return LineClassification(
        kinds=frozenset(kinds),
        teams=teams,
        score=score,
        game_date=game_date,
        player=player,
    )


def _match_teams(line: str) -> tuple[str, str] | None:
    match = _VERSUS_RE.search(line)
    if match is None:
        return None
    away = line[: match.start()].strip()
    home = line[match.end() :].strip()
    if not away and not home:
        return None
    return (away or UNKNOWN_TEAM, home or UNKNOWN_TEAM)


def _match_score(line: str) -> tuple[int, int] | None:
    match = _SCORE_RE.search(line)
    if match is None:
        return None
    return (int(match.group(1)), int(match.group(2)))


def _match_date(line: str) -> date | None:
    match = _DATE_RE.search(line)
    if match is None:
        return None
    month = int(match.group(1))
    day = int(match.group(2))
    year = int(match.group(3))
    # No century pivot: "99" is 2099.
    if year < 100:
        year += 2000
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _match_player(line: str) -> PlayerStatCapture | None:
    match = _PLAYER_RE.match(line)
    if match is None:
        return None
    name = match.group(1).strip()
    if not name:
        return None
    return PlayerStatCapture(
        name=name,
        at_bats=int(match.group(2)),
        hits=int(match.group(3)),
        runs=int(match.group(4)),
        rbi=int(match.group(5)),
    )

import logging
import re
from collections.abc import Iterable, Mapping

from little_league_stats.domain.season import (
    RANKED_CATEGORIES,
    LeaderboardCategory,
    LeaderboardEntry,
    PlayerSeasonTotals,
)

logger = logging.getLogger(__name__)

QUALIFYING_AT_BATS = 10

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")

_COUNTING_FIELDS: dict[LeaderboardCategory, str] = {
    LeaderboardCategory.HOME_RUNS: "home_runs",
    LeaderboardCategory.RBI: "rbi",
    LeaderboardCategory.RUNS: "runs",
    LeaderboardCategory.STOLEN_BASES: "stolen_bases",
}


def parse_category(tag: str | LeaderboardCategory) -> LeaderboardCategory:
    """Map a category tag onto ``LeaderboardCategory``.

    Accepts ``batting_avg``, ``battingAvg``, ``batting-avg`` and similar
    spellings. Unknown tags log a warning and map to ``UNKNOWN``, which ranks
    by batting average without the at-bat qualifier.
    """
    if isinstance(tag, LeaderboardCategory):
        return tag
    normalized = _CAMEL_BOUNDARY_RE.sub("_", tag.strip()).replace("-", "_").replace(" ", "_").lower()
    try:
        return LeaderboardCategory(normalized)
    except ValueError:
        logger.warning("Unknown leaderboard category %r, ranking by batting average", tag)
        return LeaderboardCategory.UNKNOWN


def rank_leaderboard(
    totals: Mapping[tuple[str, str], PlayerSeasonTotals] | Iterable[PlayerSeasonTotals],
    category: LeaderboardCategory,
    limit: int,
) -> list[LeaderboardEntry]:
    """Rank season totals for one category.

    Batting average only ranks players with at least ``QUALIFYING_AT_BATS``.
    Categories without a ranked stat (the pitching ones and unknown tags)
    order by batting average. Ties go to the alphabetically first name, then team.
    """
    population = list(totals.values()) if isinstance(totals, Mapping) else list(totals)

    if category is LeaderboardCategory.BATTING_AVG:
        population = [p for p in population if p.at_bats >= QUALIFYING_AT_BATS]

    sort_category = category if category in RANKED_CATEGORIES else LeaderboardCategory.BATTING_AVG
    population.sort(key=lambda p: (-_numeric_value(p, sort_category), p.name, p.team))

    return [
        LeaderboardEntry(rank=rank, name=p.name, team=p.team, value=format_value(p, category))
        for rank, p in enumerate(population[: max(limit, 0)], start=1)
    ]


def format_value(totals: PlayerSeasonTotals, category: LeaderboardCategory) -> str:
    if category in (LeaderboardCategory.BATTING_AVG, LeaderboardCategory.UNKNOWN):
        return f"{totals.batting_avg:.3f}"
    if category is LeaderboardCategory.ERA:
        return "0.00"
    if category in _COUNTING_FIELDS:
        return str(getattr(totals, _COUNTING_FIELDS[category]))
    return "0"


def _numeric_value(totals: PlayerSeasonTotals, category: LeaderboardCategory) -> float:
    if category is LeaderboardCategory.BATTING_AVG:
        return totals.batting_avg
    return float(getattr(totals, _COUNTING_FIELDS[category]))

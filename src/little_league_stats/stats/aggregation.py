from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from little_league_stats.domain.game import PlayerGameLine, batting_average
from little_league_stats.domain.season import PLACEHOLDER_ON_BASE_PCT, PlayerSeasonTotals

PlayerKey: TypeAlias = tuple[str, str]


@dataclass
class _Accumulator:
    games: int = 0
    at_bats: int = 0
    hits: int = 0
    runs: int = 0
    rbi: int = 0
    doubles: int = 0
    triples: int = 0
    home_runs: int = 0
    stolen_bases: int = 0

    def add(self, line: PlayerGameLine) -> None:
        self.games += 1
        self.at_bats += line.at_bats
        self.hits += line.hits
        self.runs += line.runs
        self.rbi += line.rbi
        self.doubles += line.doubles
        self.triples += line.triples
        self.home_runs += line.home_runs
        self.stolen_bases += line.stolen_bases


def player_key(line: PlayerGameLine) -> PlayerKey:
    return (line.name.strip(), line.team.strip())


def slugging_percentage(hits: int, doubles: int, triples: int, home_runs: int, at_bats: int) -> float:
    """Total bases per at-bat, where each hit counts once plus its extra bases."""
    if at_bats > 0:
        return (hits + doubles + 2 * triples + 3 * home_runs) / at_bats
    return 0.0


def aggregate_season_totals(lines: Iterable[PlayerGameLine]) -> dict[PlayerKey, PlayerSeasonTotals]:
    """Fold game lines into season totals keyed by exact ``(name, team)``.

    Names are only trimmed, never case-folded, so OCR variants of one player
    stay separate. Counts are summed as given, without validation. Rate stats
    are computed from the summed counts rather than averaged per game.
    """
    accumulators: dict[PlayerKey, _Accumulator] = {}
    for line in lines:
        accumulators.setdefault(player_key(line), _Accumulator()).add(line)

    return {key: _to_totals(key, acc) for key, acc in accumulators.items()}


def _to_totals(key: PlayerKey, acc: _Accumulator) -> PlayerSeasonTotals:
    name, team = key
    return PlayerSeasonTotals(
        name=name,
        team=team,
        games=acc.games,
        at_bats=acc.at_bats,
        hits=acc.hits,
        runs=acc.runs,
        rbi=acc.rbi,
        doubles=acc.doubles,
        triples=acc.triples,
        home_runs=acc.home_runs,
        stolen_bases=acc.stolen_bases,
        batting_avg=batting_average(acc.hits, acc.at_bats),
        slugging_pct=slugging_percentage(acc.hits, acc.doubles, acc.triples, acc.home_runs, acc.at_bats),
        on_base_pct=PLACEHOLDER_ON_BASE_PCT,
    )

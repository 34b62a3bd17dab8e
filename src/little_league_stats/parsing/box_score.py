"""Heuristic box score parser.

Turns the OCR text of one scanned box score into a ``GameRecord`` and the
ordered ``PlayerGameLine``s read from its batter lists. The parser is
fail-open: a line it cannot make sense of is skipped and a field it never
finds keeps its default, so every call produces something persistable.

Header fields (teams, score, date) use last-match-wins. A later spurious
``"... at ..."`` line therefore overwrites an earlier correct one; callers see
that as wrong data rather than as an error.
"""

import logging
from dataclasses import dataclass
from datetime import date

from little_league_stats.domain.game import (
    UNKNOWN_TEAM,
    GameRecord,
    ParsedBoxScore,
    PlayerGameLine,
    batting_average,
)
from little_league_stats.parsing.line_classifier import LineClassification, LineKind, classify_line
from little_league_stats.parsing.team_tracker import TeamTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ClassifiedLine:
    raw: str
    classification: LineClassification


def parse_box_score(text: str, *, today: date | None = None) -> ParsedBoxScore:
    """Parse box score text into a game and its player lines.

    ``today`` is the game date used when the text carries no date line; it
    defaults to the current day.
    """
    lines = _classify(text)
    game = _read_game(lines, today if today is not None else date.today())
    players = _read_players(lines, game)
    logger.debug(
        "Parsed %s vs %s (%d-%d) with %d player lines",
        game.away_team,
        game.home_team,
        game.away_score,
        game.home_score,
        len(players),
    )
    return ParsedBoxScore(game=game, players=players)


def _classify(text: str) -> list[_ClassifiedLine]:
    classified: list[_ClassifiedLine] = []
    for raw in (text or "").splitlines():
        try:
            classification = classify_line(raw.strip())
        except Exception:
            logger.debug("Skipping unclassifiable line %r", raw, exc_info=True)
            classification = LineClassification(kinds=frozenset())
        classified.append(_ClassifiedLine(raw=raw, classification=classification))
    return classified


def _read_game(lines: list[_ClassifiedLine], default_date: date) -> GameRecord:
    away_team = UNKNOWN_TEAM
    home_team = UNKNOWN_TEAM
    away_score = 0
    home_score = 0
    game_date = default_date

    for line in lines:
        c = line.classification
        if c.is_(LineKind.TEAMS) and c.teams is not None:
            away_team, home_team = c.teams
        if c.is_(LineKind.SCORE) and c.score is not None:
            away_score, home_score = c.score
        if c.is_(LineKind.DATE) and c.game_date is not None:
            game_date = c.game_date

    return GameRecord(
        date=game_date,
        away_team=away_team,
        home_team=home_team,
        away_score=away_score,
        home_score=home_score,
        processed=True,
    )


def _read_players(lines: list[_ClassifiedLine], game: GameRecord) -> tuple[PlayerGameLine, ...]:
    tracker = TeamTracker(game.away_team, game.home_team)
    players: list[PlayerGameLine] = []

    for index, line in enumerate(lines):
        c = line.classification
        if c.is_(LineKind.SECTION_HEADER):
            previous = lines[index - 1].raw if index > 0 else None
            tracker.on_section_header(line.raw, previous)
            continue

        team = tracker.current_team
        if c.player is None:
            continue
        if team is None:
            logger.debug("Dropping player line before any batting header: %r", line.raw)
            continue

        stat = c.player
        players.append(
            PlayerGameLine(
                name=stat.name,
                team=team,
                at_bats=stat.at_bats,
                hits=stat.hits,
                runs=stat.runs,
                rbi=stat.rbi,
                batting_avg=batting_average(stat.hits, stat.at_bats),
            )
        )

    return tuple(players)

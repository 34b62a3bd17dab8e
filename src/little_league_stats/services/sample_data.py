import logging
from datetime import date

from little_league_stats.domain.game import GameRecord, PlayerGameLine, batting_average
from little_league_stats.repos.protocols import GameRepo, PlayerGameLineRepo

logger = logging.getLogger(__name__)


def _line(
    name: str,
    team: str,
    at_bats: int,
    hits: int,
    runs: int,
    rbi: int,
    doubles: int = 0,
    triples: int = 0,
    home_runs: int = 0,
    stolen_bases: int = 0,
) -> PlayerGameLine:
    return PlayerGameLine(
        name=name,
        team=team,
        at_bats=at_bats,
        hits=hits,
        runs=runs,
        rbi=rbi,
        doubles=doubles,
        triples=triples,
        home_runs=home_runs,
        stolen_bases=stolen_bases,
        batting_avg=batting_average(hits, at_bats),
    )


SAMPLE_GAMES: tuple[tuple[GameRecord, tuple[PlayerGameLine, ...]], ...] = (
    (
        GameRecord(
            date=date(2024, 5, 15),
            away_team="Tigers",
            home_team="Eagles",
            away_score=5,
            home_score=3,
            venue="Main Field",
        ),
        (
            _line("Alex Smith", "Tigers", 4, 2, 1, 2, doubles=1, stolen_bases=1),
            _line("Jordan Lee", "Tigers", 3, 1, 1, 0, stolen_bases=2),
            _line("Casey Jones", "Eagles", 4, 2, 1, 1, doubles=1),
            _line("Riley Wong", "Eagles", 3, 0, 0, 0),
        ),
    ),
    (
        GameRecord(
            date=date(2024, 5, 16),
            away_team="Sharks",
            home_team="Hawks",
            away_score=2,
            home_score=7,
            venue="East Field",
        ),
        (
            _line("Taylor Reed", "Sharks", 4, 1, 1, 1, home_runs=1),
            _line("Morgan Chen", "Sharks", 3, 0, 0, 0),
            _line("Jamie Garcia", "Hawks", 4, 3, 2, 3, doubles=1, home_runs=1),
            _line("Dakota Kim", "Hawks", 3, 2, 1, 1, triples=1, stolen_bases=1),
        ),
    ),
)


def seed_sample_data(game_repo: GameRepo, line_repo: PlayerGameLineRepo) -> int:
    """Store the demo games when the store has no games yet.

    Returns the number of games added (0 when the store already had data).
    """
    if game_repo.list_recent(1):
        logger.info("Store already has games, skipping sample data")
        return 0
    for game, lines in SAMPLE_GAMES:
        game_id = game_repo.append(game)
        line_repo.append_many(lines, game_id)
    logger.info("Added %d sample games", len(SAMPLE_GAMES))
    return len(SAMPLE_GAMES)

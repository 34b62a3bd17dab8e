from datetime import date

from little_league_stats.domain.game import PlayerGameLine, batting_average

BOX_SCORE_TEXT = """\
Spring League Box Score
Tigers vs Eagles
5/15/2024
Final 5 - 3

Tigers Batting
AB H R RBI
Alex Smith 4 2 1 2
Jordan Lee 3 1 1 0

Eagles Batting
Casey Jones 4 2 1 1
Riley Wong 3 0 0 0
"""

FIXED_DAY = date(2024, 6, 1)


def make_line(
    name: str = "Alex Smith",
    team: str = "Tigers",
    *,
    at_bats: int = 4,
    hits: int = 2,
    runs: int = 1,
    rbi: int = 1,
    doubles: int = 0,
    triples: int = 0,
    home_runs: int = 0,
    stolen_bases: int = 0,
    game_id: int | None = None,
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
        game_id=game_id,
    )

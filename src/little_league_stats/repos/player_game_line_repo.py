import sqlite3
from collections.abc import Sequence

from little_league_stats.domain.game import PlayerGameLine


class SqlitePlayerGameLineRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def append_many(self, lines: Sequence[PlayerGameLine], game_id: int) -> list[int]:
        """Store ``lines`` under ``game_id`` and return their ids in order. The caller commits."""
        ids: list[int] = []
        for line in lines:
            cursor = self._conn.execute(
                """INSERT INTO player_game_line
                       (game_id, name, team, at_bats, hits, runs, rbi,
                        doubles, triples, home_runs, stolen_bases, batting_avg)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    game_id,
                    line.name,
                    line.team,
                    line.at_bats,
                    line.hits,
                    line.runs,
                    line.rbi,
                    line.doubles,
                    line.triples,
                    line.home_runs,
                    line.stolen_bases,
                    line.batting_avg,
                ),
            )
            ids.append(cursor.lastrowid)  # type: ignore[arg-type]
        return ids

    def get_by_game(self, game_id: int) -> list[PlayerGameLine]:
        rows = self._conn.execute(
            "SELECT * FROM player_game_line WHERE game_id = ? ORDER BY id",
            (game_id,),
        ).fetchall()
        return [self._row_to_line(row) for row in rows]

    def all(self) -> list[PlayerGameLine]:
        rows = self._conn.execute("SELECT * FROM player_game_line ORDER BY id").fetchall()
        return [self._row_to_line(row) for row in rows]

    @staticmethod
    def _row_to_line(row: sqlite3.Row) -> PlayerGameLine:
        return PlayerGameLine(
            id=row["id"],
            game_id=row["game_id"],
            name=row["name"],
            team=row["team"],
            at_bats=row["at_bats"],
            hits=row["hits"],
            runs=row["runs"],
            rbi=row["rbi"],
            doubles=row["doubles"],
            triples=row["triples"],
            home_runs=row["home_runs"],
            stolen_bases=row["stolen_bases"],
            batting_avg=row["batting_avg"],
        )

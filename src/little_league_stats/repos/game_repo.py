import sqlite3
from datetime import date

from little_league_stats.domain.game import GameRecord


class SqliteGameRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def append(self, game: GameRecord) -> int:
        """Store a game and return its id. The caller commits.

        The id comes from SQLite's AUTOINCREMENT, so concurrent writers never
        share one. Any id already set on ``game`` is ignored.
        """
        cursor = self._conn.execute(
            """INSERT INTO game
                   (game_date, away_team, home_team, away_score, home_score, venue, processed)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                game.date.isoformat(),
                game.away_team,
                game.home_team,
                game.away_score,
                game.home_score,
                game.venue,
                int(game.processed),
            ),
        )
        return cursor.lastrowid  # type: ignore[return-value]

    def get(self, game_id: int) -> GameRecord | None:
        row = self._conn.execute("SELECT * FROM game WHERE id = ?", (game_id,)).fetchone()
        if row is None:
            return None
        return self._row_to_game(row)

    def list_recent(self, limit: int = 5) -> list[GameRecord]:
        rows = self._conn.execute(
            "SELECT * FROM game ORDER BY game_date DESC, id DESC LIMIT ?",
            (limit,),
        ).fetchall()
        return [self._row_to_game(row) for row in rows]

    @staticmethod
    def _row_to_game(row: sqlite3.Row) -> GameRecord:
        return GameRecord(
            id=row["id"],
            date=date.fromisoformat(row["game_date"]),
            away_team=row["away_team"],
            home_team=row["home_team"],
            away_score=row["away_score"],
            home_score=row["home_score"],
            venue=row["venue"],
            processed=bool(row["processed"]),
        )

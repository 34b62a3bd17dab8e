import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from little_league_stats.config import AppSettings
from little_league_stats.db.connection import create_connection
from little_league_stats.ocr.protocols import OcrEngine
from little_league_stats.ocr.tesseract import TesseractOcr
from little_league_stats.ocr.text_file import PlainTextOcr
from little_league_stats.repos.game_repo import SqliteGameRepo
from little_league_stats.repos.player_game_line_repo import SqlitePlayerGameLineRepo
from little_league_stats.services.box_score_ingest import BoxScoreIngestService
from little_league_stats.services.leaderboard import LeaderboardService


@dataclass(frozen=True)
class StatsContext:
    conn: sqlite3.Connection
    game_repo: SqliteGameRepo
    line_repo: SqlitePlayerGameLineRepo
    leaderboard: LeaderboardService


def build_ocr(settings: AppSettings, *, plain_text: bool = False) -> OcrEngine:
    if plain_text:
        return PlainTextOcr()
    return TesseractOcr(language=settings.ocr_language, tesseract_cmd=settings.tesseract_cmd)


@contextmanager
def build_stats_context(db_path: str | Path) -> Iterator[StatsContext]:
    """Composition-root context manager: opens DB, wires repos and services, yields context, closes DB."""
    conn = create_connection(db_path)
    try:
        game_repo = SqliteGameRepo(conn)
        line_repo = SqlitePlayerGameLineRepo(conn)
        yield StatsContext(
            conn=conn,
            game_repo=game_repo,
            line_repo=line_repo,
            leaderboard=LeaderboardService(line_repo, game_repo),
        )
    finally:
        conn.close()


def build_ingest_service(ctx: StatsContext, ocr: OcrEngine) -> BoxScoreIngestService:
    return BoxScoreIngestService(ctx.game_repo, ctx.line_repo, ocr, conn=ctx.conn)

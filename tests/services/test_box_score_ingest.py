import sqlite3
from collections.abc import Sequence
from pathlib import Path

from little_league_stats.domain.errors import IngestError
from little_league_stats.domain.game import GameRecord, PlayerGameLine
from little_league_stats.domain.result import Err, Ok
from little_league_stats.ocr.protocols import OcrEngine
from little_league_stats.repos.game_repo import SqliteGameRepo
from little_league_stats.repos.player_game_line_repo import SqlitePlayerGameLineRepo
from little_league_stats.services.box_score_ingest import BoxScoreIngestService
from tests.fakes.repos import FakeGameRepo, FakeOcr, FakePlayerGameLineRepo
from tests.helpers import BOX_SCORE_TEXT, FIXED_DAY


def _service(
    conn: sqlite3.Connection, ocr: OcrEngine | None = None
) -> tuple[BoxScoreIngestService, FakeGameRepo, FakePlayerGameLineRepo]:
    games = FakeGameRepo()
    lines = FakePlayerGameLineRepo()
    return BoxScoreIngestService(games, lines, ocr, conn=conn, today=lambda: FIXED_DAY), games, lines


class _BrokenGameRepo(FakeGameRepo):
    def append(self, game: GameRecord) -> int:
        raise sqlite3.OperationalError("database is locked")


class _BrokenLineRepo(FakePlayerGameLineRepo):
    def append_many(self, lines: Sequence[PlayerGameLine], game_id: int) -> list[int]:
        raise sqlite3.OperationalError("disk full")


class _CrashingOcr(FakeOcr):
    def extract_text(self, path: Path) -> str:
        if path.name == "huge.png":
            raise ValueError("image too large")
        return super().extract_text(path)


class TestIngestText:
    def test_stores_game_and_lines(self, conn: sqlite3.Connection) -> None:
        service, games, lines = _service(conn)
        result = service.ingest_text(BOX_SCORE_TEXT)

        assert isinstance(result, Ok)
        stored = result.value
        assert stored.game_id == 1
        assert games.get(1) == stored.game
        assert [line.game_id for line in lines.all()] == [1, 1, 1, 1]
        assert [p.id for p in stored.players] == [1, 2, 3, 4]

    def test_summary(self, conn: sqlite3.Connection) -> None:
        service, _, _ = _service(conn)
        result = service.ingest_text(BOX_SCORE_TEXT)
        assert isinstance(result, Ok)
        assert result.value.summary == "Tigers 5 - Eagles 3 on 2024-05-15 (4 player lines)"

    def test_unparseable_text_still_stores_a_game(self, conn: sqlite3.Connection) -> None:
        service, games, lines = _service(conn)
        result = service.ingest_text("@@@ smudge @@@")
        assert isinstance(result, Ok)
        assert result.value.game.date == FIXED_DAY
        assert result.value.game.away_team == "Unknown Team"
        assert lines.all() == []
        assert len(games.list_recent()) == 1

    def test_store_failure_is_an_err(self, conn: sqlite3.Connection) -> None:
        service = BoxScoreIngestService(
            _BrokenGameRepo(), FakePlayerGameLineRepo(), conn=conn, today=lambda: FIXED_DAY
        )
        result = service.ingest_text(BOX_SCORE_TEXT, source_detail="scan.txt")
        assert result == Err(IngestError(message="database is locked", source_type="text", source_detail="scan.txt"))


class TestIngestFile:
    def test_without_ocr_engine(self, conn: sqlite3.Connection) -> None:
        service, _, _ = _service(conn)
        result = service.ingest_file(Path("game.png"))
        assert isinstance(result, Err)
        assert result.error.message == "no OCR engine configured"

    def test_ocr_failure_is_an_err(self, conn: sqlite3.Connection) -> None:
        service, games, _ = _service(conn, FakeOcr({}, failures={"blurry.png"}))
        result = service.ingest_file(Path("blurry.png"))
        assert isinstance(result, Err)
        assert result.error.source_type == "fake"
        assert result.error.source_detail == "blurry.png"
        assert "unreadable image" in result.error.message
        assert games.list_recent() == []


class TestIngestBatch:
    def test_continues_past_failures_and_keeps_order(self, conn: sqlite3.Connection) -> None:
        ocr = FakeOcr({"a.png": BOX_SCORE_TEXT, "c.png": "Sharks at Hawks\n2 - 7\n"}, failures={"b.png"})
        service, games, _ = _service(conn, ocr)

        results = service.ingest_batch([Path("a.png"), Path("b.png"), Path("c.png")])

        assert [r.source for r in results] == ["a.png", "b.png", "c.png"]
        assert [r.success for r in results] == [True, False, True]
        assert results[0].message.startswith("Successfully processed: Tigers 5 - Eagles 3")
        assert results[1].message.startswith("Error: ")
        assert results[1].game_id is None
        assert [r.game_id for r in results if r.success] == [1, 2]
        assert len(games.list_recent(10)) == 2

    def test_unexpected_engine_error_does_not_stop_the_batch(self, conn: sqlite3.Connection) -> None:
        ocr = _CrashingOcr({"a.png": BOX_SCORE_TEXT, "b.png": BOX_SCORE_TEXT})
        service, games, _ = _service(conn, ocr)

        results = service.ingest_batch([Path("a.png"), Path("huge.png"), Path("b.png")])

        assert [r.success for r in results] == [True, False, True]
        assert results[1].message == "Error: image too large"
        assert len(games.list_recent(10)) == 2

    def test_empty_batch(self, conn: sqlite3.Connection) -> None:
        service, _, _ = _service(conn, FakeOcr({}))
        assert service.ingest_batch([]) == []


class TestIngestWithSqlite:
    def test_round_trip(self, conn: sqlite3.Connection) -> None:
        service = BoxScoreIngestService(
            SqliteGameRepo(conn), SqlitePlayerGameLineRepo(conn), conn=conn, today=lambda: FIXED_DAY
        )
        result = service.ingest_text(BOX_SCORE_TEXT)
        assert isinstance(result, Ok)
        stored_lines = SqlitePlayerGameLineRepo(conn).get_by_game(result.value.game_id)
        assert list(result.value.players) == stored_lines

    def test_failed_line_insert_rolls_back_the_game(self, conn: sqlite3.Connection) -> None:
        games = SqliteGameRepo(conn)
        service = BoxScoreIngestService(games, _BrokenLineRepo(), conn=conn, today=lambda: FIXED_DAY)

        result = service.ingest_text(BOX_SCORE_TEXT)

        assert isinstance(result, Err)
        assert result.error.message == "disk full"
        assert games.list_recent(10) == []

    def test_saved_game_survives_a_later_failure(self, conn: sqlite3.Connection) -> None:
        games = SqliteGameRepo(conn)
        good = BoxScoreIngestService(games, SqlitePlayerGameLineRepo(conn), conn=conn, today=lambda: FIXED_DAY)
        bad = BoxScoreIngestService(games, _BrokenLineRepo(), conn=conn, today=lambda: FIXED_DAY)

        assert isinstance(good.ingest_text(BOX_SCORE_TEXT), Ok)
        assert isinstance(bad.ingest_text(BOX_SCORE_TEXT), Err)

        assert [g.id for g in games.list_recent(10)] == [1]
        assert len(SqlitePlayerGameLineRepo(conn).all()) == 4

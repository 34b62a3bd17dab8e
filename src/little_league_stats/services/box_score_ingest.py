import logging
import sqlite3
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from little_league_stats.domain.errors import IngestError
from little_league_stats.domain.game import GameRecord, ParsedBoxScore, PlayerGameLine
from little_league_stats.domain.result import Err, Ok, Result
from little_league_stats.domain.season import BatchItemResult
from little_league_stats.exceptions import OcrError
from little_league_stats.ocr.protocols import OcrEngine
from little_league_stats.parsing.box_score import parse_box_score
from little_league_stats.repos.protocols import GameRepo, PlayerGameLineRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredBoxScore:
    game: GameRecord
    players: tuple[PlayerGameLine, ...]

    @property
    def game_id(self) -> int:
        assert self.game.id is not None
        return self.game.id

    @property
    def summary(self) -> str:
        g = self.game
        return (
            f"{g.away_team} {g.away_score} - {g.home_team} {g.home_score}"
            f" on {g.date.isoformat()} ({len(self.players)} player lines)"
        )


class BoxScoreIngestService:
    """Parses box score text and stores the resulting game and player lines.

    A game and its lines are committed together on ``conn``; when either insert
    fails both are rolled back.
    """

    def __init__(
        self,
        game_repo: GameRepo,
        line_repo: PlayerGameLineRepo,
        ocr: OcrEngine | None = None,
        *,
        conn: sqlite3.Connection,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._game_repo = game_repo
        self._line_repo = line_repo
        self._ocr = ocr
        self._conn = conn
        self._today = today

    def ingest_text(self, text: str, *, source_detail: str = "text") -> Result[StoredBoxScore, IngestError]:
        parsed = parse_box_score(text, today=self._today())
        return self._store(parsed, source_type="text", source_detail=source_detail)

    def ingest_file(self, path: Path) -> Result[StoredBoxScore, IngestError]:
        if self._ocr is None:
            return Err(IngestError(message="no OCR engine configured", source_type="ocr", source_detail=path.name))
        try:
            text = self._ocr.extract_text(path)
        except OcrError as exc:
            logger.error("OCR failed for %s: %s", path.name, exc.reason)
            return Err(IngestError(message=str(exc), source_type=self._ocr.source_type, source_detail=path.name))
        except Exception as exc:
            logger.error("OCR failed for %s: %s", path.name, exc)
            return Err(IngestError(message=str(exc), source_type=self._ocr.source_type, source_detail=path.name))
        parsed = parse_box_score(text, today=self._today())
        return self._store(parsed, source_type=self._ocr.source_type, source_detail=path.name)

    def ingest_batch(self, paths: Sequence[Path]) -> list[BatchItemResult]:
        """Ingest each file in turn, recording one outcome per file in input order.

        A failed file is reported and skipped; it never stops the batch.
        """
        results: list[BatchItemResult] = []
        for path in paths:
            match self.ingest_file(path):
                case Ok(stored):
                    results.append(
                        BatchItemResult(
                            source=path.name,
                            success=True,
                            message=f"Successfully processed: {stored.summary}",
                            game_id=stored.game_id,
                        )
                    )
                case Err(error):
                    results.append(BatchItemResult(source=path.name, success=False, message=f"Error: {error.message}"))
        succeeded = sum(1 for r in results if r.success)
        logger.info("Processed %d of %d box scores", succeeded, len(results))
        return results

    def _store(
        self, parsed: ParsedBoxScore, *, source_type: str, source_detail: str
    ) -> Result[StoredBoxScore, IngestError]:
        try:
            game_id = self._game_repo.append(parsed.game)
            line_ids = self._line_repo.append_many(parsed.players, game_id)
            self._conn.commit()
        except Exception as exc:
            logger.error("Saving %s failed: %s", source_detail, exc)
            self._conn.rollback()
            return Err(IngestError(message=str(exc), source_type=source_type, source_detail=source_detail))

        logger.info("Game saved with ID %d and %d player lines from %s", game_id, len(line_ids), source_detail)
        stored_players = tuple(
            replace(line, game_id=game_id, id=line_id) for line, line_id in zip(parsed.players, line_ids, strict=True)
        )
        return Ok(StoredBoxScore(game=replace(parsed.game, id=game_id), players=stored_players))

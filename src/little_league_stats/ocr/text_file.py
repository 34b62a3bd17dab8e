from pathlib import Path

from little_league_stats.exceptions import OcrError


class PlainTextOcr:
    """Reads text that was already extracted from a box score image."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def source_type(self) -> str:
        return "text"

    def extract_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise OcrError(path.name, str(exc)) from exc

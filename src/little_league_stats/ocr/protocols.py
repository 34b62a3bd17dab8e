from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class OcrEngine(Protocol):
    """Produces box score text from a file. Raises ``OcrError`` on failure."""

    @property
    def source_type(self) -> str: ...

    def extract_text(self, path: Path) -> str: ...

import logging
from pathlib import Path

import pytesseract
from PIL import Image

from little_league_stats.exceptions import OcrError

logger = logging.getLogger(__name__)


class TesseractOcr:
    def __init__(self, language: str = "eng", tesseract_cmd: str | None = None) -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    @property
    def source_type(self) -> str:
        return "tesseract"

    def extract_text(self, path: Path) -> str:
        logger.info("Starting OCR for %s", path.name)
        try:
            with Image.open(path) as image:
                text = pytesseract.image_to_string(image, lang=self._language)
        # TesseractNotFoundError subclasses OSError, so it must come first.
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrError(path.name, "tesseract is not installed or not on PATH") from exc
        except pytesseract.TesseractError as exc:
            raise OcrError(path.name, str(exc.message) or str(exc)) from exc
        except (OSError, Image.DecompressionBombError) as exc:
            raise OcrError(path.name, f"cannot read image: {exc}") from exc
        logger.debug("OCR produced %d characters for %s", len(text), path.name)
        return text

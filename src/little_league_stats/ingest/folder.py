import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_EXTENSIONS: tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".bmp")


def _normalize(extensions: Iterable[str]) -> frozenset[str]:
    return frozenset(e.lower() if e.startswith(".") else f".{e.lower()}" for e in extensions)


def find_box_score_images(folder: Path, extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS) -> list[Path]:
    """List files directly inside ``folder`` whose suffix is an accepted extension, sorted by name."""
    accepted = _normalize(extensions)
    found: list[Path] = []
    for path in sorted(folder.iterdir()):
        if not path.is_file():
            continue
        if path.suffix.lower() in accepted:
            found.append(path)
        else:
            logger.debug("Ignoring non-image file: %s", path.name)
    return found


def expand_inputs(paths: Sequence[Path], extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS) -> list[Path]:
    """Expand folders into their matching files; explicit files are kept as given."""
    accepted = tuple(extensions)
    expanded: list[Path] = []
    for path in paths:
        if path.is_dir():
            expanded.extend(find_box_score_images(path, accepted))
        else:
            expanded.append(path)
    return expanded

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from little_league_stats.exceptions import ConfigError
from little_league_stats.ingest.folder import DEFAULT_IMAGE_EXTENSIONS

if TYPE_CHECKING:
    from collections.abc import Iterable

_DEFAULTS: dict[str, object] = {
    "database": {
        "path": "~/.local/share/lls/stats.db",
    },
    "ocr": {
        "language": "eng",
        "tesseract_cmd": "",
    },
    "ingest": {
        "image_extensions": list(DEFAULT_IMAGE_EXTENSIONS),
    },
    "leaderboard": {
        "default_limit": 10,
    },
    "games": {
        "default_limit": 5,
    },
}


@dataclass(frozen=True)
class AppSettings:
    db_path: Path
    ocr_language: str
    tesseract_cmd: str | None
    image_extensions: tuple[str, ...]
    leaderboard_limit: int
    recent_games_limit: int


def create_config(
    yaml_path: str = "lls.yaml",
    env_prefix: str = "LLS",
    defaults: dict[str, object] | None = None,
    *,
    db_path: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    """
    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults if defaults is not None else _DEFAULTS),
    ]
    if db_path is not None:
        layers.insert(0, config_from_dict({"database": {"path": db_path}}))
    return ConfigurationSet(*layers)


def _positive_int(cfg: ConfigurationSet, key: str) -> int:
    raw = cfg[key]
    try:
        value = int(str(raw))
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


def _extensions(raw: object) -> tuple[str, ...]:
    # Env vars arrive as a single comma separated string.
    if isinstance(raw, str):
        return tuple(part.strip() for part in raw.split(",") if part.strip())
    return tuple(str(ext) for ext in cast("Iterable[object]", raw))


def load_settings(cfg: ConfigurationSet | None = None) -> AppSettings:
    if cfg is None:
        cfg = create_config()
    tesseract_cmd = str(cfg["ocr.tesseract_cmd"]).strip()
    return AppSettings(
        db_path=Path(str(cfg["database.path"])).expanduser(),
        ocr_language=str(cfg["ocr.language"]),
        tesseract_cmd=tesseract_cmd or None,
        image_extensions=_extensions(cfg["ingest.image_extensions"]),
        leaderboard_limit=_positive_int(cfg, "leaderboard.default_limit"),
        recent_games_limit=_positive_int(cfg, "games.default_limit"),
    )

# src/rude_word_finder/matching/general/utils/load_config.py

"""Read finder data files (JSON5: comments and trailing commas allowed) from <data/>.

Modes:
- "list"            -> tuple[str, ...] in file order (the vocabulary)
- "validated_dict"  -> dict[str, Any] passed through a validator (finder settings)

Lists are cached per (path, mtime); validated dicts are re-read every call.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

import json5

Mode = Literal["list", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_ENV_VARS = ("RUDE_WORD_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory sits beside or above the package."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a data file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a data file is not valid JSON5 or its validator rejects it."""


class ConfigTypeError(TypeError):
    """Raise when a data file parses but has the wrong shape for its mode."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_LIST_CACHE: dict[tuple[Path, float], tuple[str, ...]] = {}


def clear_config_cache() -> None:
    """Forget cached word lists (pytest / hot reload)."""
    with _CACHE_LOCK:
        _LIST_CACHE.clear()


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [p / "data" for p in start.parents]


def _resolve_data_dir(base_dir: Path | None) -> Path:
    """Explicit base_dir > RUDE_WORD_DATA_DIR / DATA_DIR > nearest bundled data/."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    for var in _ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    for cand in _candidate_data_dirs():
        if cand.is_dir():
            return cand.resolve()
    raise DataDirNotFound(
        "No 'data' directory found above " + str(Path(__file__).resolve().parent)
    )


def _data_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    data_dir = _resolve_data_dir(base_dir)
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if data_dir not in path.parents:
        raise ConfigFileNotFound(f"Refusing to read outside {data_dir}: {path}")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _parse(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json5.load(f)
    except ValueError as e:
        raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _as_word_list(data: Any, path: Path) -> tuple[str, ...]:
    if not isinstance(data, list):
        raise ConfigTypeError(f"{path.name}: expected a list, got {type(data).__name__}")
    bad = [x for x in data if not isinstance(x, str)]
    if bad:
        raise ConfigTypeError(
            f"{path.name}: list entries must be strings (first bad: {bad[0]!r})"
        )
    return tuple(data)


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "list",
    *,
    base_dir: Path | None = None,
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> Any:
    """Load <data>/<file>.json in the given mode."""
    path = _data_path(file, base_dir)

    if mode == "list":
        key = (path, path.stat().st_mtime)
        with _CACHE_LOCK:
            if key in _LIST_CACHE:
                log.debug("word list cache hit: %s", path.name)
                return _LIST_CACHE[key]
        words = _as_word_list(_parse(path), path)
        with _CACHE_LOCK:
            _LIST_CACHE[key] = words
        log.debug("loaded %d entries from %s", len(words), path.name)
        return words

    if mode == "validated_dict":
        data = _parse(path)
        if not isinstance(data, dict):
            raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")
        if validator is None:
            return data
        try:
            return validator(data)
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    raise ValueError(f"Unknown mode '{mode}'")

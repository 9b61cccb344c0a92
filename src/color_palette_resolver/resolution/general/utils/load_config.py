# src/color_palette_resolver/resolution/general/utils/load_config.py

"""Read palette data files (JSON) from a <data/> directory, with caching.

Modes:
- "raw"             -> parsed JSON as-is
- "validated_dict"  -> top-level object passed through an optional validator

The directory is taken from PALETTE_DATA_DIR (or DATA_DIR) when set, otherwise
the first ``data/`` folder found walking up from this file, which is the one
shipped inside the package.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except Exception:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
ENV_VARS = ("PALETTE_DATA_DIR", "DATA_DIR")
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory can be located."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file is missing or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a data file is not valid JSON or its validator rejects it."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON has the wrong top-level type."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# (path, mtime, mode, allow_comments) -> parsed payload
_CACHE: dict[tuple[Path, float, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Drop every cached payload."""
    with _CACHE_LOCK:
        _CACHE.clear()
    log.debug("Data cache cleared.")


def resolve_data_dir(start: Path | None = None) -> Path:
    """Return the data directory: env override first, then upward discovery."""
    for var in ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()

    start = (start or Path(__file__)).resolve()
    tried = [(p / "data").resolve() for p in [start, *start.parents]]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(map(str, tried))
    )


def _locate(file: str | os.PathLike[str], base_dir: Path) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = (base_dir / name).resolve()
    try:
        path.relative_to(base_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={base_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Data file not found: {path}")
    return path


def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except ConfigParseError:
        raise
    except ValueError as e:  # json.JSONDecodeError and json5 syntax errors
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json and return it according to `mode`.

    Parsed payloads are cached per (path, mtime), so editing the file on disk
    invalidates the entry. Validators run on every call and their output is
    never cached.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    data_dir = (base_dir or resolve_data_dir()).resolve()
    path = _locate(file, data_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    key = (path, mtime, mode, allow_comments)
    with _CACHE_LOCK:
        data = _CACHE.get(key)
    if data is None:
        data = _parse(path, encoding, allow_comments)
        with _CACHE_LOCK:
            _CACHE[key] = data
        log.debug("Data cache MISS → STORED: %s", path.name)
    else:
        log.debug("Data cache HIT: %s", path.name)

    if mode == "raw":
        return data

    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
        )
    if validator is None:
        return data
    try:
        return validator(dict(data))
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Point PALETTE_DATA_DIR at `path` for the duration of the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("PALETTE_DATA_DIR")
        os.environ["PALETTE_DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("PALETTE_DATA_DIR", None)
        else:
            os.environ["PALETTE_DATA_DIR"] = self._old
        clear_config_cache()

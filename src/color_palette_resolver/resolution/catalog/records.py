"""
records.py
==========

Does: Validate raw palettes once at load and hold them as immutable records
      (ColorEntry, PaletteRecord) inside a PaletteCatalog with
      case-insensitive lookup.
Used By: Name/color matchers, orchestrator, bundled catalog loader.
Returns: PaletteCatalog.load(raw) -> PaletteCatalog; catalog.get(key) -> PaletteRecord.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar

import numpy as np

from color_palette_resolver.resolution.catalog.natsort import natsort_indices, natsorted
from color_palette_resolver.resolution.errors import UnknownPaletteError, ValidationError

__all__ = [
    "RGB",
    "DEFAULT_INDEX_PATTERN",
    "REQUIRED_FIELDS",
    "OPTIONAL_FIELDS",
    "ColorEntry",
    "PaletteRecord",
    "PaletteCatalog",
    "build_record",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Types & constants ─────────────────────────────────────────────────────────
RGB = Tuple[float, float, float]
T = TypeVar("T")

DEFAULT_INDEX_PATTERN = r"\d+"
REQUIRED_FIELDS = ("names", "rgb")
OPTIONAL_FIELDS = ("index", "license", "source", "notes")
_TEXT_FIELDS = ("license", "source", "notes")


# =============================================================================
# 1) RECORDS
# =============================================================================

@dataclass(frozen=True)
class ColorEntry:
    """One named color; `position` is its place in the palette's natural order."""

    name: str
    rgb: RGB
    position: int


@dataclass(frozen=True)
class PaletteRecord:
    """
    A validated palette. Entries are in natural-sort order and never change.

    Derived data (normalization state, converted coordinates) is attached via
    `memo()`, which builds each item at most once under the record's lock.
    """

    key: str
    entries: Tuple[ColorEntry, ...]
    index: Optional[str] = None
    license: str = ""
    source: str = ""
    notes: str = ""
    _memo: Dict[str, Any] = field(default_factory=dict, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ColorEntry]:
        return iter(self.entries)

    @property
    def names(self) -> List[str]:
        return [e.name for e in self.entries]

    @property
    def rgb(self) -> List[RGB]:
        return [e.rgb for e in self.entries]

    def memo(self, slot: str, build: Callable[["PaletteRecord"], T]) -> T:
        """
        Does: Return the derived value stored under `slot`, building it with
              `build(self)` on first use.
        Returns: The cached value (identical object on every later call).
        """
        cached = self._memo.get(slot)
        if cached is not None:
            return cached
        with self._lock:
            cached = self._memo.get(slot)
            if cached is None:
                log.debug("[memo] building %r for palette %r", slot, self.key)
                cached = build(self)
                self._memo[slot] = cached
        return cached

    def is_cached(self, slot: str) -> bool:
        return slot in self._memo


# =============================================================================
# 2) VALIDATION HELPERS
# =============================================================================

def _validate_names(key: str, raw: Any) -> List[str]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        raise ValidationError(key, "names", "must be a sequence of color names")
    names = list(raw)
    if not names:
        raise ValidationError(key, "names", "must contain at least one color name")
    for i, name in enumerate(names):
        if not isinstance(name, str) or not name:
            raise ValidationError(key, "names", f"item #{i} is not a non-empty string: {name!r}")
    return names


def _validate_rgb(key: str, raw: Any) -> np.ndarray:
    """Coerce to an Nx3 float matrix in [0,1]; integer arrays are rescaled by their dtype max."""
    if isinstance(raw, np.ndarray) and np.issubdtype(raw.dtype, np.integer):
        arr = raw.astype(float) / float(np.iinfo(raw.dtype).max)
    elif isinstance(raw, np.ndarray) and not np.issubdtype(raw.dtype, np.floating):
        raise ValidationError(key, "rgb", f"must be a real numeric matrix, got dtype {raw.dtype}")
    else:
        try:
            arr = np.asarray(raw, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValidationError(key, "rgb", f"must be a real numeric Nx3 matrix ({e})") from e

    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValidationError(key, "rgb", f"must be an Nx3 matrix, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValidationError(key, "rgb", "must contain only finite values")
    if np.any(arr < 0) or np.any(arr > 1):
        raise ValidationError(key, "rgb", "values must satisfy 0<=RGB<=1")
    return arr


def _validate_index(key: str, raw: Any, names: List[str], present: bool) -> Optional[str]:
    if not present:
        # auto-detection: every name starts with an index token
        pattern = re.compile(f"^(?:{DEFAULT_INDEX_PATTERN})")
        return DEFAULT_INDEX_PATTERN if all(pattern.match(n) for n in names) else None
    if isinstance(raw, bool):
        return DEFAULT_INDEX_PATTERN if raw else None
    if isinstance(raw, str) and raw:
        try:
            re.compile(raw)
        except re.error as e:
            raise ValidationError(key, "index", f"invalid index pattern {raw!r}: {e}") from e
        return raw
    raise ValidationError(key, "index", "must be a boolean or a non-empty pattern string")


def _validate_text(key: str, fld: str, raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ValidationError(key, fld, "must be a string")
    return raw


def build_record(key: str, fields: Mapping[str, Any]) -> PaletteRecord:
    """
    Does: Validate one raw palette and build its record (entries natural-sorted).
    Raises: ValidationError naming the palette and field.
    """
    if not isinstance(fields, Mapping):
        raise ValidationError(key, "*", "palette must be a mapping of fields")
    missing = [f for f in REQUIRED_FIELDS if f not in fields]
    if missing:
        raise ValidationError(key, missing[0], "required field is missing")
    unknown = sorted(set(fields) - set(REQUIRED_FIELDS) - set(OPTIONAL_FIELDS) - {"key"})
    if unknown:
        raise ValidationError(key, unknown[0], "unsupported field")

    names = _validate_names(key, fields["names"])
    rgb = _validate_rgb(key, fields["rgb"])
    if rgb.shape[0] != len(names):
        raise ValidationError(
            key, "rgb", f"{rgb.shape[0]} RGB rows for {len(names)} names (counts must match)"
        )

    order = natsort_indices(names)
    entries = tuple(
        ColorEntry(
            name=names[i],
            rgb=(float(rgb[i, 0]), float(rgb[i, 1]), float(rgb[i, 2])),
            position=pos,
        )
        for pos, i in enumerate(order)
    )
    return PaletteRecord(
        key=key,
        entries=entries,
        index=_validate_index(key, fields.get("index"), names, "index" in fields),
        **{f: _validate_text(key, f, fields.get(f)) for f in _TEXT_FIELDS},
    )


# =============================================================================
# 3) CATALOG
# =============================================================================

class PaletteCatalog:
    """Read-only, case-insensitive collection of PaletteRecords."""

    def __init__(self, records: Iterable[PaletteRecord]):
        by_key: Dict[str, PaletteRecord] = {}
        for rec in records:
            folded = rec.key.casefold()
            if folded in by_key:
                raise ValidationError(
                    rec.key, "key", f'clashes with "{by_key[folded].key}" (keys are case-insensitive)'
                )
            by_key[folded] = rec
        order = natsorted(r.key for r in by_key.values())
        self._records: Dict[str, PaletteRecord] = {k.casefold(): by_key[k.casefold()] for k in order}

    @classmethod
    def load(cls, raw_palettes: Mapping[str, Mapping[str, Any]] | Iterable[Mapping[str, Any]]) -> "PaletteCatalog":
        """
        Does: Validate every raw palette and build the catalog.
        Accepts: {key: fields} or an iterable of field dicts carrying a "key".
        Raises: ValidationError for the first offending palette/field.
        """
        if isinstance(raw_palettes, Mapping):
            items = [(k, v) for k, v in raw_palettes.items()]
        else:
            items = []
            for i, fields in enumerate(raw_palettes):
                key = fields.get("key") if isinstance(fields, Mapping) else None
                if not isinstance(key, str):
                    raise ValidationError(f"#{i}", "key", "each palette needs a string key")
                items.append((key, fields))

        records = []
        for key, fields in items:
            if not isinstance(key, str) or not key.strip():
                raise ValidationError(str(key), "key", "palette key must be a non-empty string")
            records.append(build_record(key, fields))
        catalog = cls(records)
        log.debug("Loaded %d palettes: %s", len(catalog), ", ".join(catalog.keys()))
        return catalog

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PaletteRecord]:
        return iter(self._records.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._records

    def keys(self) -> List[str]:
        """Does: Palette keys in natural-sort order (original casing)."""
        return [r.key for r in self._records.values()]

    def get(self, key: str) -> PaletteRecord:
        """
        Does: Case-insensitive exact lookup.
        Raises: UnknownPaletteError listing every valid key.
        """
        rec = self._records.get(key.casefold()) if isinstance(key, str) else None
        if rec is None:
            raise UnknownPaletteError(str(key), self.keys())
        return rec

    def merged(self, other: "PaletteCatalog") -> "PaletteCatalog":
        """Does: New catalog holding the records of both (keys must not clash)."""
        return PaletteCatalog([*self, *other])

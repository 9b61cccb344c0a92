# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Query surface over one PaletteCatalog: list palettes, read a palette,
      resolve color names, resolve RGB samples, summarize and export palette
      coordinates. Module-level functions use a default resolver built lazily
      from the bundled catalog.
Returns:
  - list_palettes() -> [key, ...]
  - get_palette(key) -> [NamedColor(name, rgb), ...]
  - resolve_names(key, queries) -> [NamedColor, ...]
  - resolve_colors(key, samples, metric) -> [NamedColor, ...]
  - describe() -> [PaletteSummary, ...]
  - coordinates(key, space) -> [(x, y, z), ...]
Used by: CLI (demo.py), notebooks and plotting helpers.
"""

import logging
import os
import threading
from typing import Any, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from color_palette_resolver.resolution.catalog.loader import load_bundled_catalog
from color_palette_resolver.resolution.catalog.records import RGB, PaletteCatalog, PaletteRecord
from color_palette_resolver.resolution.color import matcher as color_matcher
from color_palette_resolver.resolution.color.conversions import SPACES, Triple
from color_palette_resolver.resolution.color.distance import Metric, get_metric
from color_palette_resolver.resolution.errors import InvalidInputError
from color_palette_resolver.resolution.names import matcher as name_matcher

logger = logging.getLogger(__name__)

__all__ = [
    "NamedColor",
    "PaletteSummary",
    "PaletteResolver",
    "default_resolver",
    "reset_default_resolver",
    "list_palettes",
    "get_palette",
    "resolve_names",
    "resolve_colors",
    "describe",
    "coordinates",
]

# Public toggle (env)
DEFAULT_METRIC_ENV = "PALETTE_DEFAULT_METRIC"


class NamedColor(NamedTuple):
    name: str
    rgb: RGB


class PaletteSummary(NamedTuple):
    key: str
    count: int
    license: str
    source: str
    notes: str
    index: Optional[str]


# =============================================================================
# Resolver
# =============================================================================

class PaletteResolver:
    """
    Does: Answer palette queries against one catalog. All derived data lives
          on the catalog's records, so two resolvers over the same catalog
          share caches.
    """

    def __init__(self, catalog: PaletteCatalog, *, metric: str | Metric | None = None):
        self.catalog = catalog
        # validated up front so a bad default fails at construction
        self.metric = get_metric(metric)

    def _record(self, key: str) -> PaletteRecord:
        return self.catalog.get(key)

    @staticmethod
    def _named(record: PaletteRecord, indices: Iterable[int]) -> List[NamedColor]:
        return [NamedColor(record.entries[i].name, record.entries[i].rgb) for i in indices]

    def list_palettes(self) -> List[str]:
        """Does: Palette keys in natural-sort order."""
        return self.catalog.keys()

    def get_palette(self, key: str) -> List[NamedColor]:
        """Does: Every (name, rgb) of the palette in natural-sort order."""
        record = self._record(key)
        return self._named(record, range(len(record)))

    def resolve_names(self, key: str, queries: str | Sequence[str]) -> List[NamedColor]:
        """
        Does: Resolve free-text names; a bare string counts as one query.
        Raises: UnknownPaletteError, UnmatchedNameError (whole batch).
        """
        record = self._record(key)
        return self._named(record, name_matcher.resolve_names(record, queries))

    def resolve_colors(
        self, key: str, samples: Any, metric: str | Metric | None = None
    ) -> List[NamedColor]:
        """
        Does: Nearest palette color for each RGB sample in [0,1].
        Raises: UnknownPaletteError, UnsupportedMetricError, InvalidInputError.
        """
        record = self._record(key)
        chosen = self.metric if metric is None else get_metric(metric)
        return self._named(record, color_matcher.resolve_colors(record, samples, chosen))

    def describe(self) -> List[PaletteSummary]:
        """Does: One summary per palette (size, license, source, notes, index pattern)."""
        return [
            PaletteSummary(r.key, len(r), r.license, r.source, r.notes, r.index)
            for r in self.catalog
        ]

    def coordinates(self, key: str, space: str = "RGB") -> List[Triple]:
        """
        Does: Palette colors converted into `space` (RGB, XYZ, Lab, LCh, OKLab,
              DIN99 or HSV; case-insensitive), cached per palette.
        Raises: UnknownPaletteError, InvalidInputError for an unknown space.
        """
        record = self._record(key)
        match = next((s for s in SPACES if s.lower() == str(space).lower()), None)
        if match is None:
            raise InvalidInputError(None, space, f"color space must be one of: {', '.join(SPACES)}")
        return list(color_matcher.palette_coordinates(record, match))


# =============================================================================
# Default resolver (bundled catalog)
# =============================================================================

_default: Optional[PaletteResolver] = None
_default_lock = threading.Lock()


def default_resolver() -> PaletteResolver:
    """Does: Build (once) the resolver over the bundled catalog."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                metric = os.getenv(DEFAULT_METRIC_ENV) or None
                _default = PaletteResolver(load_bundled_catalog(), metric=metric)
                logger.info(
                    "Default resolver ready: %d palettes, metric %s",
                    len(_default.catalog), _default.metric.name,
                )
    return _default


def reset_default_resolver() -> None:
    """Does: Drop the default resolver (next call rebuilds it, e.g. after env changes)."""
    global _default
    with _default_lock:
        _default = None


def list_palettes() -> List[str]:
    return default_resolver().list_palettes()


def get_palette(key: str) -> List[NamedColor]:
    return default_resolver().get_palette(key)


def resolve_names(key: str, queries: str | Sequence[str]) -> List[NamedColor]:
    return default_resolver().resolve_names(key, queries)


def resolve_colors(key: str, samples: Any, metric: str | Metric | None = None) -> List[NamedColor]:
    return default_resolver().resolve_colors(key, samples, metric)


def describe() -> List[PaletteSummary]:
    return default_resolver().describe()


def coordinates(key: str, space: str = "RGB") -> List[Tuple[float, float, float]]:
    return default_resolver().coordinates(key, space)

"""
matcher.py
==========

Does: Resolve color samples to the perceptually nearest palette entries.
      Samples are validated, converted into the metric's space and compared
      against every entry; the nearest wins, ties go to the lowest entry index.
Used By: orchestrator.resolve_colors, CLI.
Returns: Entry indices (positions in the palette's natural order).
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, List, Sequence, Tuple

from color_palette_resolver.resolution.catalog.records import PaletteRecord
from color_palette_resolver.resolution.color.conversions import Triple, convert
from color_palette_resolver.resolution.color.distance import Metric, get_metric
from color_palette_resolver.resolution.errors import InvalidInputError
from color_palette_resolver.resolution.general.utils.log import debug

__all__ = ["validate_samples", "palette_coordinates", "nearest_index", "resolve_colors"]
__docformat__ = "google"

log = logging.getLogger(__name__)


def _is_real(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def validate_samples(samples: Any) -> List[Triple]:
    """
    Does: Check that `samples` is a sequence of RGB triples with finite real
          components in [0,1].
    Returns: The samples as float tuples.
    Raises: InvalidInputError naming the first offending sample.
    """
    if isinstance(samples, (str, bytes)):
        raise InvalidInputError(None, samples, "expected a sequence of RGB triples, not text")
    try:
        rows = list(samples)
    except TypeError as e:
        raise InvalidInputError(None, samples, "expected a sequence of RGB triples") from e

    out: List[Triple] = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)):
            raise InvalidInputError(i, row, "expected three numbers, got text")
        try:
            values = list(row)
        except TypeError as e:
            raise InvalidInputError(i, row, "expected three numbers") from e
        if len(values) != 3:
            raise InvalidInputError(i, row, f"expected three components, got {len(values)}")
        if not all(_is_real(v) for v in values):
            raise InvalidInputError(i, row, "components must be real numbers")
        triple = (float(values[0]), float(values[1]), float(values[2]))
        if not all(math.isfinite(v) for v in triple):
            raise InvalidInputError(i, row, "components must be finite")
        if not all(0.0 <= v <= 1.0 for v in triple):
            raise InvalidInputError(i, row, "components must satisfy 0<=RGB<=1")
        out.append(triple)
    return out


def palette_coordinates(record: PaletteRecord, space: str) -> Tuple[Triple, ...]:
    """Does: Every entry converted into `space`, computed once per palette."""
    return record.memo(
        f"space:{space.lower()}",
        lambda rec: tuple(convert(rgb, space) for rgb in rec.rgb),
    )


def nearest_index(coords: Sequence[Triple], query: Triple, metric: Metric) -> int:
    """Does: Position of the smallest metric(candidate, query); first one on ties."""
    best_i, best_d = 0, math.inf
    for i, cand in enumerate(coords):
        d = metric(cand, query)
        if d < best_d:
            best_i, best_d = i, d
    return best_i


def resolve_colors(
    record: PaletteRecord,
    samples: Any,
    metric: str | Metric | None = None,
) -> List[int]:
    """
    Does: Match each sample independently to its nearest palette entry.
    Returns: One entry index per sample, in sample order.
    Raises: InvalidInputError, UnsupportedMetricError.
    """
    chosen = get_metric(metric)
    queries = validate_samples(samples)
    coords = palette_coordinates(record, chosen.space)

    result = []
    for sample in queries:
        idx = nearest_index(coords, convert(sample, chosen.space), chosen)
        debug(f"{record.key}: {sample} → {record.entries[idx].name} ({chosen.name})", topic="colors")
        result.append(idx)
    log.debug("resolve_colors(%s, n=%d, metric=%s) → %s", record.key, len(queries), chosen.name, result)
    return result

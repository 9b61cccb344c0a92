"""
distance.py
===========

Does: Color-difference (deltaE) strategies. Each Metric names the color space
      it compares in and a function (candidate, query) -> float >= 0, where
      `candidate` is the palette color and `query` the user sample.
Used By: ColorMatcher, orchestrator, CLI (--metric).
Returns: Metric registry (METRICS), lookup (get_metric) and the raw formulas.

References: https://en.wikipedia.org/wiki/Color_difference
(CIE76, CIE94, CIEDE2000 after Sharma, Wu & Dalal 2005, CMC l:c 1984).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from color_palette_resolver.resolution.errors import UnsupportedMetricError

__all__ = [
    "Metric",
    "Cie94Weights",
    "CIE94_GRAPHIC_ARTS",
    "CIE94_TEXTILES",
    "euclidean",
    "delta_e_cie94",
    "delta_e_ciede2000",
    "delta_e_cmc",
    "METRICS",
    "METRIC_NAMES",
    "DEFAULT_METRIC",
    "get_metric",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

Triple = Sequence[float]

_POW25_7 = 25.0 ** 7


# =============================================================================
# 1) FORMULAS
# =============================================================================

def euclidean(p: Triple, q: Triple) -> float:
    """Does: Plain Euclidean distance (RGB, CIE76, DIN99, OKLab)."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(p, q)))


def _chroma_hue_delta(ref: Triple, sample: Triple) -> Tuple[float, float, float, float]:
    """Return (C_ref, C_sample, dC, dH) with dH from the Lab difference."""
    c1 = math.hypot(ref[1], ref[2])
    c2 = math.hypot(sample[1], sample[2])
    dc = c1 - c2
    dh2 = (ref[1] - sample[1]) ** 2 + (ref[2] - sample[2]) ** 2 - dc ** 2
    return c1, c2, dc, math.sqrt(max(0.0, dh2))


@dataclass(frozen=True)
class Cie94Weights:
    """Parametric factors (kL, kC, kH) and chroma weights (K1, K2) of CIE94."""

    k_l: float
    k_c: float
    k_h: float
    k1: float
    k2: float


CIE94_GRAPHIC_ARTS = Cie94Weights(k_l=2.0, k_c=1.0, k_h=1.0, k1=0.048, k2=0.014)
CIE94_TEXTILES = Cie94Weights(k_l=1.0, k_c=1.0, k_h=1.0, k1=0.045, k2=0.015)


def delta_e_cie94(ref: Triple, sample: Triple, weights: Cie94Weights = CIE94_GRAPHIC_ARTS) -> float:
    """
    Does: CIE94 difference of two Lab colors. The chroma weighting uses the
          reference (palette) color, so the formula is not symmetric.
    """
    c1, _, dc, dh = _chroma_hue_delta(ref, sample)
    dl = ref[0] - sample[0]
    s_c = 1 + weights.k1 * c1
    s_h = 1 + weights.k2 * c1
    return math.sqrt(
        (dl / weights.k_l) ** 2 + (dc / (weights.k_c * s_c)) ** 2 + (dh / (weights.k_h * s_h)) ** 2
    )


def delta_e_ciede2000(
    ref: Triple, sample: Triple, k_l: float = 1.0, k_c: float = 1.0, k_h: float = 1.0
) -> float:
    """
    Does: CIEDE2000 difference of two Lab colors: a* rescaled by the mean-chroma
          term G, hue difference wrapped at 180°, weighting functions S_L, S_C,
          S_H with hue term T, and the blue-region rotation term R_T.
    """
    L1, a1, b1 = ref
    L2, a2, b2 = sample

    c_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2
    g = 1 - math.sqrt(c_bar ** 7 / (c_bar ** 7 + _POW25_7))
    a1p = a1 * (1 + g / 2)
    a2p = a2 * (1 + g / 2)
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)
    cp_bar = (c1p + c2p) / 2
    cp_prod = c1p * c2p

    h1p = math.degrees(math.atan2(b1, a1p)) % 360 if (b1 or a1p) else 0.0
    h2p = math.degrees(math.atan2(b2, a2p)) % 360 if (b2 or a2p) else 0.0

    if cp_prod == 0:
        dhp = 0.0
        hp_bar = h1p + h2p
    else:
        dhp = 180 - (180 + h1p - h2p) % 360
        hp_bar = ((h1p + h2p) / 2 - (180 if abs(h1p - h2p) > 180 else 0)) % 360

    lp_bar = (L1 + L2) / 2
    t = (
        1
        - 0.17 * math.cos(math.radians(hp_bar - 30))
        + 0.24 * math.cos(math.radians(2 * hp_bar))
        + 0.32 * math.cos(math.radians(3 * hp_bar + 6))
        - 0.20 * math.cos(math.radians(4 * hp_bar - 63))
    )
    r_t = (
        -math.sin(math.radians(60 * math.exp(-(((hp_bar - 275) / 25) ** 2))))
        * 2
        * math.sqrt(cp_bar ** 7 / (cp_bar ** 7 + _POW25_7))
    )
    s_l = 1 + 0.015 * (lp_bar - 50) ** 2 / math.sqrt(20 + (lp_bar - 50) ** 2)
    s_c = 1 + 0.045 * cp_bar
    s_h = 1 + 0.015 * cp_bar * t

    d_l = (L2 - L1) / (k_l * s_l)
    d_c = (c2p - c1p) / (k_c * s_c)
    d_h = 2 * math.sqrt(cp_prod) * math.sin(math.radians(dhp / 2)) / (k_h * s_h)
    return math.sqrt(max(0.0, d_l ** 2 + d_c ** 2 + d_h ** 2 + r_t * d_c * d_h))


def delta_e_cmc(ref: Triple, sample: Triple, l: float = 2.0, c: float = 1.0) -> float:
    """
    Does: CMC l:c difference of two Lab colors; weights come from the reference
          color and the lightness weight switches formula at L* = 16.
    """
    c1, c2, _, dh = _chroma_hue_delta(ref, sample)
    L1 = ref[0]
    s_l = 0.511 if L1 < 16 else 0.040975 * L1 / (1 + 0.01765 * L1)
    s_c = 0.0638 * (1 + c1 / (1 + 0.0131 * c1))
    h1 = math.degrees(math.atan2(ref[2], ref[1])) % 360 if (ref[1] or ref[2]) else 0.0
    f = math.sqrt(c1 ** 4 / (1900 + c1 ** 4))
    if 164 <= h1 <= 345:
        t = 0.56 + abs(0.2 * math.cos(math.radians(h1 + 168)))
    else:
        t = 0.36 + abs(0.4 * math.cos(math.radians(h1 + 35)))
    s_h = s_c * (f * t + 1 - f)
    return math.sqrt(
        ((sample[0] - L1) / (l * s_l)) ** 2 + ((c2 - c1) / (c * s_c)) ** 2 + (dh / s_h) ** 2
    )


# =============================================================================
# 2) REGISTRY
# =============================================================================

@dataclass(frozen=True)
class Metric:
    """A named deltaE strategy over colors converted into `space`."""

    name: str
    space: str
    distance: Callable[[Triple, Triple], float]
    symmetric: bool = False

    def __call__(self, candidate: Triple, query: Triple) -> float:
        return self.distance(candidate, query)


_REGISTRY: List[Metric] = [
    Metric("CIEDE2000", "Lab", delta_e_ciede2000),
    Metric("DIN99", "DIN99", euclidean, symmetric=True),
    Metric("CIE94:1", "Lab", lambda p, q: delta_e_cie94(p, q, CIE94_TEXTILES)),
    Metric("CIE94:2", "Lab", lambda p, q: delta_e_cie94(p, q, CIE94_GRAPHIC_ARTS)),
    Metric("OKLab", "OKLab", euclidean, symmetric=True),
    Metric("CIE76", "Lab", euclidean, symmetric=True),
    Metric("CMC2:1", "Lab", lambda p, q: delta_e_cmc(p, q, 2.0, 1.0)),
    Metric("CMC1:1", "Lab", lambda p, q: delta_e_cmc(p, q, 1.0, 1.0)),
    Metric("RGB", "RGB", euclidean, symmetric=True),
]

METRICS: Dict[str, Metric] = {m.name: m for m in _REGISTRY}
METRIC_NAMES: Tuple[str, ...] = tuple(METRICS)
_ALIASES = {"CIELAB": "CIE76", "LAB": "CIE76"}
DEFAULT_METRIC = "CIE94:2"


def get_metric(name: str | Metric | None = None) -> Metric:
    """
    Does: Look up a metric by name (case-insensitive; CIELAB/LAB alias CIE76);
          None selects DEFAULT_METRIC and Metric instances pass through.
    Raises: UnsupportedMetricError naming the valid set.
    """
    if name is None:
        name = DEFAULT_METRIC
    if isinstance(name, Metric):
        return name
    if not isinstance(name, str):
        raise UnsupportedMetricError(name, METRIC_NAMES)
    key = name.strip().upper()
    key = _ALIASES.get(key, key)
    for metric in _REGISTRY:
        if metric.name.upper() == key:
            return metric
    raise UnsupportedMetricError(name, METRIC_NAMES)

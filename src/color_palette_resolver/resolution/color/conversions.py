"""
conversions.py
==============

Does: Pure, stateless color-space transforms over real triples:
      sRGB -> linear RGB -> CIE XYZ -> CIELab -> LCh / DIN99, XYZ -> OKLab,
      and sRGB -> HSV.
Used By: DistanceMetric (spaces each metric compares in), ColorMatcher,
         palette coordinate export.
Returns: Tuples of three floats.

Constants follow the defining publications:
- sRGB transfer & matrix: IEC 61966-2-1:1999
- CIELab: CIE 15 with the D65 white point
- OKLab: Björn Ottosson, "A perceptual color space for image processing" (2020)
- DIN99: DIN 6176
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Sequence, Tuple

__all__ = [
    "Triple",
    "SRGB_LINEAR_THRESHOLD",
    "SRGB_TO_XYZ",
    "D65_WHITE",
    "OKLAB_M1",
    "OKLAB_M2",
    "srgb_to_linear",
    "linear_rgb_to_xyz",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "lab_to_lch",
    "rgb_to_lch",
    "xyz_to_oklab",
    "rgb_to_oklab",
    "lab_to_din99",
    "rgb_to_din99",
    "rgb_to_hsv",
    "SPACES",
    "convert",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
Triple = Tuple[float, float, float]
Matrix = Tuple[Triple, Triple, Triple]

# ── Constants ────────────────────────────────────────────────────────────────
SRGB_LINEAR_THRESHOLD = 0.04045

SRGB_TO_XYZ: Matrix = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

D65_WHITE: Triple = (0.95047, 1.0, 1.08883)
_LAB_DELTA = 6 / 29

# XYZ -> approximate cone responses
OKLAB_M1: Matrix = (
    (+0.8189330101, +0.3618667424, -0.1288597137),
    (+0.0329845436, +0.9293118715, +0.0361456387),
    (+0.0482003018, +0.2643662691, +0.6338517070),
)
# non-linear cone responses -> Lab
OKLAB_M2: Matrix = (
    (+0.2104542553, +0.7936177850, -0.0040720468),
    (+1.9779984951, -2.4285922050, +0.4505937099),
    (+0.0259040371, +0.7827717662, -0.8086757660),
)

DIN99_ROTATION_DEG = 16.0
DIN99_CHROMA_K = 0.045


# =============================================================================
# 1) HELPERS
# =============================================================================

def _mat_vec(m: Matrix, v: Sequence[float]) -> Triple:
    x, y, z = v
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def _cbrt(x: float) -> float:
    """Real cube root (keeps the sign of negative inputs)."""
    return math.copysign(abs(x) ** (1 / 3), x)


def _atan2_deg(y: float, x: float) -> float:
    """atan2 in degrees on [0, 360); defined as 0 at the origin."""
    if y == 0 and x == 0:
        return 0.0
    return math.degrees(math.atan2(y, x)) % 360.0


# =============================================================================
# 2) sRGB -> XYZ
# =============================================================================

def srgb_to_linear(v: float) -> float:
    """Does: Inverse sRGB companding of one channel in [0,1]."""
    if v < SRGB_LINEAR_THRESHOLD:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_rgb_to_xyz(rgb: Sequence[float]) -> Triple:
    """Does: Linear sRGB -> CIE XYZ (D65)."""
    return _mat_vec(SRGB_TO_XYZ, rgb)


def rgb_to_xyz(rgb: Sequence[float]) -> Triple:
    """Does: sRGB -> CIE XYZ (D65)."""
    return linear_rgb_to_xyz([srgb_to_linear(float(c)) for c in rgb])


# =============================================================================
# 3) CIELab & friends
# =============================================================================

def _f_lab(t: float) -> float:
    d = _LAB_DELTA
    return _cbrt(t) if t > d ** 3 else (t / (3 * d * d) + 4 / 29)


def xyz_to_lab(xyz: Sequence[float]) -> Triple:
    """Does: CIE XYZ -> CIELab relative to the D65 white point."""
    xn, yn, zn = D65_WHITE
    x, y, z = xyz
    fx, fy, fz = _f_lab(x / xn), _f_lab(y / yn), _f_lab(z / zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def rgb_to_lab(rgb: Sequence[float]) -> Triple:
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_lch(lab: Sequence[float]) -> Triple:
    """Does: CIELab -> LCh (chroma, hue in degrees [0,360); hue 0 when a=b=0)."""
    L, a, b = lab
    return L, math.hypot(a, b), _atan2_deg(b, a)


def rgb_to_lch(rgb: Sequence[float]) -> Triple:
    return lab_to_lch(rgb_to_lab(rgb))


def xyz_to_oklab(xyz: Sequence[float]) -> Triple:
    """Does: CIE XYZ -> OKLab (two matrices around a component-wise cube root)."""
    lms = _mat_vec(OKLAB_M1, xyz)
    return _mat_vec(OKLAB_M2, [_cbrt(c) for c in lms])


def rgb_to_oklab(rgb: Sequence[float]) -> Triple:
    return xyz_to_oklab(rgb_to_xyz(rgb))


def lab_to_din99(lab: Sequence[float]) -> Triple:
    """
    Does: CIELab -> DIN99: logarithmic lightness, (a, b) rotated by 16° with
          the new b axis scaled by 0.7, then log-compressed chroma.
    """
    L, a, b = lab
    cos16 = math.cos(math.radians(DIN99_ROTATION_DEG))
    sin16 = math.sin(math.radians(DIN99_ROTATION_DEG))
    L99 = 105.51 * math.log(1 + 0.0158 * L)
    e = a * cos16 + b * sin16
    f = 0.7 * (b * cos16 - a * sin16)
    G = math.hypot(e, f)
    C99 = math.log(1 + DIN99_CHROMA_K * G) / DIN99_CHROMA_K
    h99 = math.atan2(f, e)
    return L99, C99 * math.cos(h99), C99 * math.sin(h99)


def rgb_to_din99(rgb: Sequence[float]) -> Triple:
    return lab_to_din99(rgb_to_lab(rgb))


# =============================================================================
# 4) HSV
# =============================================================================

def rgb_to_hsv(rgb: Sequence[float]) -> Triple:
    """
    Does: sRGB -> HSV of the linearized channels, hue in degrees [0,360),
          saturation and value in [0,1]. Hue is 0 for achromatic colors,
          saturation is 0 for black.
    """
    r, g, b = (srgb_to_linear(float(c)) for c in rgb)
    v = max(r, g, b)
    c = v - min(r, g, b)
    if c == 0:
        h = 0.0
    elif v == r:
        h = ((g - b) / c) % 6
    elif v == g:
        h = (b - r) / c + 2
    else:
        h = (r - g) / c + 4
    s = c / v if v else 0.0
    return (60 * h) % 360.0, s, v


# =============================================================================
# 5) REGISTRY
# =============================================================================

SPACES: Dict[str, Callable[[Sequence[float]], Triple]] = {
    "RGB": lambda rgb: (float(rgb[0]), float(rgb[1]), float(rgb[2])),
    "XYZ": rgb_to_xyz,
    "Lab": rgb_to_lab,
    "LCh": rgb_to_lch,
    "OKLab": rgb_to_oklab,
    "DIN99": rgb_to_din99,
    "HSV": rgb_to_hsv,
}


def convert(rgb: Sequence[float], space: str) -> Triple:
    """
    Does: Convert one sRGB triple into the named space (case-insensitive).
    Raises: KeyError for an unknown space name.
    """
    for name, fn in SPACES.items():
        if name.lower() == space.lower():
            return fn(rgb)
    raise KeyError(space)

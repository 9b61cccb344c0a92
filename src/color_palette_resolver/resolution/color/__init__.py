"""
color.
=====

Does: Aggregate the colorimetric side of the resolver: space conversions,
      deltaE strategies and nearest-color matching.
Used By: orchestrator, CLI, palette coordinate export.
"""

# ── Conversions ──────────────────────────────────────────────────────────────
from .conversions import (
    SPACES,
    convert,
    lab_to_din99,
    lab_to_lch,
    linear_rgb_to_xyz,
    rgb_to_din99,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_xyz,
    srgb_to_linear,
    xyz_to_lab,
    xyz_to_oklab,
)

# ── Distances ────────────────────────────────────────────────────────────────
from .distance import (
    DEFAULT_METRIC,
    METRIC_NAMES,
    METRICS,
    Metric,
    get_metric,
)

# ── Matching ─────────────────────────────────────────────────────────────────
from .matcher import palette_coordinates, resolve_colors, validate_samples

__all__ = [
    # conversions
    "SPACES",
    "convert",
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
    # distances
    "Metric",
    "METRICS",
    "METRIC_NAMES",
    "DEFAULT_METRIC",
    "get_metric",
    # matching
    "palette_coordinates",
    "resolve_colors",
    "validate_samples",
]

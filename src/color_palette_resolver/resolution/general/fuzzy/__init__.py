# src/color_palette_resolver/resolution/general/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing the edit-distance helpers used for tie-breaking and
suggestion ranking.
"""

from __future__ import annotations

from .edit_distance import (
    closest_index,
    edit_distance,
    fold_case,
    rank_by_distance,
)

__all__ = [
    "closest_index",
    "edit_distance",
    "fold_case",
    "rank_by_distance",
]

__docformat__ = "google"

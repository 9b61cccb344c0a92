# src/color_palette_resolver/resolution/general/fuzzy/edit_distance.py
from __future__ import annotations

"""
edit_distance.py

Does: Case-insensitive Levenshtein distance and stable distance ranking.
Returns: edit_distance(), closest_index(), rank_by_distance().
Used by: NameMatcher (ambiguity tie-break) and DiagnosticReporter (suggestions).
"""

import logging
from typing import Sequence

from rapidfuzz.distance import Levenshtein

__all__ = [
    "fold_case",
    "edit_distance",
    "closest_index",
    "rank_by_distance",
]

__docformat__ = "google"

log = logging.getLogger(__name__)


def fold_case(text: str) -> str:
    """
    Does: Lowercase character by character, keeping characters whose lowercase
          form would change the string length (e.g. 'İ') as they are.
    Returns: String of the same length as `text`.
    """
    out = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)


def edit_distance(a: str, b: str) -> int:
    """
    Does: Levenshtein distance (unit insert/delete/substitute), ignoring case.
    Returns: Non-negative integer.
    """
    return Levenshtein.distance(a, b, processor=fold_case)


def closest_index(query: str, choices: Sequence[str]) -> int:
    """
    Does: Position of the choice with the smallest edit distance to `query`;
          the earliest position wins a tie.
    Returns: Index into `choices` (ValueError when empty).
    """
    if not choices:
        raise ValueError("closest_index() needs at least one choice")
    best_i, best_d = 0, None
    for i, choice in enumerate(choices):
        d = edit_distance(query, choice)
        if best_d is None or d < best_d:
            best_i, best_d = i, d
    log.debug("closest_index(%r) → %r (d=%s)", query, choices[best_i], best_d)
    return best_i


def rank_by_distance(query: str, choices: Sequence[str]) -> list[tuple[int, int]]:
    """
    Does: Stable ascending ranking of all choices by edit distance to `query`.
    Returns: List of (index, distance); equal distances keep input order.
    """
    scored = [(i, edit_distance(query, c)) for i, c in enumerate(choices)]
    return sorted(scored, key=lambda pair: pair[1])

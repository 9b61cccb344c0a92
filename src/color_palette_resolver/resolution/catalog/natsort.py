"""
natsort.py
==========

Does: Alphanumeric ("natural") ordering of names: digit runs compare as
      numbers, text compares case-insensitively, e.g. "Color 2" < "color 10".
Used By: PaletteCatalog (entry order and palette key order).
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

__all__ = ["natsort_key", "natsort_indices", "natsorted"]
__docformat__ = "google"

# Signed integer or decimal, e.g. "-5", "+3", "12", "1.5"
_NUMBER_RE = re.compile(r"([+-]?\d+\.?\d*)")

NatKey = Tuple[Tuple[str, float], ...]


def natsort_key(text: str) -> NatKey:
    """
    Does: Split `text` into (text, number) pairs; a missing trailing number
          is -inf so "abc" sorts before "abc1".
    Returns: Tuple usable as a sort key.
    """
    pieces = _NUMBER_RE.split(text)
    # re.split with one group alternates text, number, text, ..., text
    texts = pieces[0::2]
    numbers = [float(n) for n in pieces[1::2]]
    numbers.append(float("-inf"))
    return tuple((t.lower(), n) for t, n in zip(texts, numbers))


def natsort_indices(names: Sequence[str]) -> List[int]:
    """Does: Stable natural-sort permutation of `names`."""
    return sorted(range(len(names)), key=lambda i: natsort_key(names[i]))


def natsorted(names: Iterable[str]) -> List[str]:
    """Does: Return `names` in natural order (stable)."""
    return sorted(names, key=natsort_key)

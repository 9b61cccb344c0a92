# resolution/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared text canonicalization for palette names and user queries
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Canonicalize punctuation variants (apostrophes, hyphens, plus signs),
      collapse whitespace, and map accented letters to their base letter.
Returns: canonicalize_punctuation(), collapse_whitespace(), canonical_text(),
         base_letter().
Used by: NameNormalizer (palette names) and NameMatcher (queries).
"""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache

__all__ = [
    "APOSTROPHES",
    "HYPHENS",
    "PLUSES",
    "canonicalize_punctuation",
    "collapse_whitespace",
    "canonical_text",
    "base_letter",
]

# Glyph families folded onto one ASCII representative
APOSTROPHES = "'`´ʼ‘’′‵＇"  # ' ` ´ ʼ ‘ ’ ′ ‵ ＇
HYPHENS = "-‐‑−﹘﹣－"  # - ‐ ‑ − ﹘ ﹣ －
PLUSES = "+﬩＋"  # + ﬩ ＋

_APOSTROPHE_RE = re.compile(f"[{re.escape(APOSTROPHES)}]")
_HYPHEN_RE = re.compile(f"[{re.escape(HYPHENS)}]")
_PLUS_RE = re.compile(f"[{re.escape(PLUSES)}]")
_SPACE_RE = re.compile(r"\s+")

# Letters with a diacritic that Unicode does not decompose
_UNDECOMPOSED_BASES = {
    "ı": "i",  # ı dotless i
    "ȷ": "j",  # ȷ dotless j
    "ø": "o",  # ø
    "Ø": "O",  # Ø
    "đ": "d",  # đ
    "Đ": "D",  # Đ
    "ł": "l",  # ł
    "Ł": "L",  # Ł
}


# ──────────────────────────────────────────────────────────────
# 1) Punctuation & spacing
# ──────────────────────────────────────────────────────────────


def canonicalize_punctuation(text: str) -> str:
    """
    Does: Fold apostrophe-like glyphs to "'", hyphen-like glyphs to "-"
          and plus-like glyphs to "+".
    Returns: Text with one representative per glyph family.
    """
    text = _APOSTROPHE_RE.sub("'", text)
    text = _HYPHEN_RE.sub("-", text)
    return _PLUS_RE.sub("+", text)


def collapse_whitespace(text: str) -> str:
    """Does: Replace every whitespace run with a single space."""
    return _SPACE_RE.sub(" ", text)


def canonical_text(text: str, *, strip: bool = False) -> str:
    """
    Does: Punctuation folding + whitespace collapsing, optionally trimmed.
    Returns: Canonical text (casing untouched).
    """
    if not isinstance(text, str):
        return ""
    if strip:
        text = text.strip()
    return collapse_whitespace(canonicalize_punctuation(text))


# ──────────────────────────────────────────────────────────────
# 2) Diacritics
# ──────────────────────────────────────────────────────────────


@lru_cache(maxsize=4096)
def base_letter(char: str) -> str | None:
    """
    Does: Strip combining marks from one accented letter (NFD), falling back to
          a small table for letters Unicode keeps atomic.
    Returns: The base letter, or None when `char` carries no diacritic.
    """
    if len(char) != 1 or not char.isalpha():
        return None
    if char in _UNDECOMPOSED_BASES:
        return _UNDECOMPOSED_BASES[char]
    stripped = "".join(
        c for c in unicodedata.normalize("NFD", char) if not unicodedata.combining(c)
    )
    if len(stripped) == 1 and stripped != char:
        return stripped
    return None

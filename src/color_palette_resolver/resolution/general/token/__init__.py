# resolution/general/token/__init__.py
"""
token.

Does: Facade for text canonicalization shared by palette names and queries.
"""

from __future__ import annotations

from .normalize import (
    APOSTROPHES,
    HYPHENS,
    PLUSES,
    base_letter,
    canonical_text,
    canonicalize_punctuation,
    collapse_whitespace,
)

__all__ = [
    "APOSTROPHES",
    "HYPHENS",
    "PLUSES",
    "base_letter",
    "canonical_text",
    "canonicalize_punctuation",
    "collapse_whitespace",
]

__docformat__ = "google"

# color_palette_resolver/resolution/__init__.py

"""
resolution.
===========

Does: Palette catalog, name and color matching, and the query surface built
      on top of them.
Returns: Public names re-exported from `orchestrator` and `errors`.
Used by: CLI, notebooks and external integrations.
"""
from __future__ import annotations

from .errors import (
    InvalidInputError,
    PaletteError,
    UnknownPaletteError,
    UnmatchedNameError,
    UnsupportedMetricError,
    ValidationError,
)
from .orchestrator import NamedColor, PaletteResolver, PaletteSummary

__all__: list[str] = [
    "NamedColor",
    "PaletteResolver",
    "PaletteSummary",
    "PaletteError",
    "ValidationError",
    "UnknownPaletteError",
    "UnmatchedNameError",
    "InvalidInputError",
    "UnsupportedMetricError",
]
__docformat__ = "google"

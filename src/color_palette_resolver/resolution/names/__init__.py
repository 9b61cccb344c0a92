"""
names
=====

Free-text color name resolution: per-palette normalization state, the
alias/pattern matcher and the suggestion ranking used on failure.
"""

from .diagnostics import DEFAULT_LIMIT, suggest
from .matcher import match_one, resolve_names
from .normalizer import (
    STATE_SLOT,
    NormalizationState,
    build_pattern,
    build_state,
    get_state,
    initial_letters,
    split_patterns,
)

__all__ = [
    "DEFAULT_LIMIT",
    "suggest",
    "match_one",
    "resolve_names",
    "STATE_SLOT",
    "NormalizationState",
    "build_pattern",
    "build_state",
    "get_state",
    "initial_letters",
    "split_patterns",
]

"""
normalizer.py
=============

Does: Build, once per palette, everything needed to match free text against
      its color names:
        - canonical split forms (CamelCase / acronym / leading-index boundaries,
          folded punctuation, single spaces);
        - one permissive pattern per canonical name (each character optional,
          whitespace optional, gray|grey, ocher|ochre, accented|plain letters);
        - the exact-alias table (initial letters, index tokens, names without
          index, canonical names, names as a query would normalize them).
Used By: NameMatcher, DiagnosticReporter.
Returns: NormalizationState via get_state(record) (memoized on the record).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from color_palette_resolver.resolution.catalog.records import PaletteRecord
from color_palette_resolver.resolution.general.token.normalize import (
    base_letter,
    canonical_text,
)

__all__ = [
    "STATE_SLOT",
    "NormalizationState",
    "split_patterns",
    "build_pattern",
    "initial_letters",
    "build_state",
    "get_state",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

STATE_SLOT = "names"

# gray|grey and ocer|ocher|ochre|ocre, rewritten on the generated pattern text
_GRAY_RE = re.compile(r"([Gg])\?([Rr])\?[AaEe]\?([Yy])\?")
_OCHER_RE = re.compile(r"([Oo])\?([Cc])\?(?:[Hh]\?)?(?:[Ee]\?[Rr]\?|[Rr]\?[Ee]\?)")


# =============================================================================
# 1) SPLITTING
# =============================================================================

def _char_class(chars: Sequence[str]) -> str:
    return "".join(re.escape(c) for c in chars)


def split_patterns(names: Sequence[str], index: Optional[str]) -> Tuple[re.Pattern[str], Tuple[re.Pattern[str], ...]]:
    """
    Does: Derive the boundary patterns from the letters actually used in
          `names` (non-ASCII upper/lower letters extend the A-Z / a-z classes).
    Returns: (acronym_pattern, query_patterns) where query_patterns holds the
             lower→upper split and, for indexed palettes, the index split.
             Names use all of them; queries skip the acronym split.
    """
    chars = sorted(set("".join(names)))
    upper = "A-Z" + _char_class([c for c in chars if ord(c) > 127 and c.isupper()])
    lower = "a-z" + _char_class([c for c in chars if ord(c) > 127 and c.islower()])

    acronym = re.compile(f"[{upper}](?=[{upper}]+[{lower}\\s$])")
    query = [re.compile(f"[{lower}.,](?=[{upper}])")]
    if index:
        query.append(re.compile(f"^(?:{index})"))
    return acronym, tuple(query)


def _insert_boundaries(text: str, patterns: Sequence[re.Pattern[str]]) -> str:
    for pat in patterns:
        text = pat.sub(lambda m: m.group(0) + " ", text)
    return text


# =============================================================================
# 2) PATTERNS
# =============================================================================

def _char_token(ch: str) -> str:
    base = base_letter(ch)
    if base is not None:
        return f"[{re.escape(base)}{re.escape(ch)}]?"
    return re.escape(ch) + "?"


def build_pattern(canonical: str) -> str:
    """
    Does: Turn one canonical name into its permissive pattern text: each
          character optional, whitespace optional, gray/grey and
          ocher/ochre equivalent, accented letters also match their base letter.
    Returns: Pattern source, anchored by the caller with fullmatch().
    """
    tokens: List[str] = []
    for ch in canonical:
        if ch.isspace():
            if not tokens or tokens[-1] != r"\s*":
                tokens.append(r"\s*")
        else:
            tokens.append(_char_token(ch))
    pattern = "".join(tokens)
    pattern = _GRAY_RE.sub(r"\1?\2?[ae]?\3?", pattern)
    return _OCHER_RE.sub(r"\1?\2?h?(?:e?r?|r?e?)", pattern)


# =============================================================================
# 3) ALIASES
# =============================================================================

def _first_letter(text: str) -> Optional[str]:
    return next((ch for ch in text if ch.isalpha()), None)


def initial_letters(canonical: Sequence[str]) -> Optional[Tuple[str, ...]]:
    """
    Does: One initial letter per name, with "Black" abbreviated to "K" (when
          no other name already starts with K).
    Returns: The initials when every name has one and all are distinct
             (case-insensitively); otherwise None.
    """
    letters = [_first_letter(c) for c in canonical]
    if any(x is None for x in letters):
        return None
    has_k = any(x.lower() == "k" for x in letters)
    letters = [
        "K" if (c.lower() == "black" and not has_k) else x
        for c, x in zip(canonical, letters)
    ]
    if len({x.lower() for x in letters}) != len(letters):
        return None
    return tuple(letters)


def _alias_dict(column: Sequence[Optional[str]]) -> Dict[str, int]:
    table: Dict[str, int] = {}
    for i, alias in enumerate(column):
        if alias:
            table.setdefault(alias.lower(), i)
    return table


# =============================================================================
# 4) STATE
# =============================================================================

@dataclass(frozen=True)
class NormalizationState:
    """Per-palette matching structure; built once, read-only afterwards."""

    palette: str
    query_splits: Tuple[re.Pattern[str], ...]
    canonical: Tuple[str, ...]
    patterns: Tuple[re.Pattern[str], ...]
    alias_columns: Tuple[Tuple[Optional[str], ...], ...]
    alias_tables: Tuple[Dict[str, int], ...]
    initials: Optional[Tuple[str, ...]] = None

    def normalize_query(self, text: str) -> str:
        """Does: Apply the palette's query splits, trim, fold punctuation/spaces."""
        return canonical_text(_insert_boundaries(text, self.query_splits), strip=True)

    def lookup_alias(self, query: str) -> Optional[int]:
        """Does: Exact, case-insensitive alias hit; earlier columns take precedence."""
        key = query.lower()
        for table in self.alias_tables:
            if key in table:
                return table[key]
        return None

    def candidates(self, query: str) -> List[int]:
        """Does: Entries whose permissive pattern matches the whole query."""
        return [i for i, pat in enumerate(self.patterns) if pat.fullmatch(query)]

    def alias_forms(self) -> List[Tuple[str, int]]:
        """Does: Every (alias, entry) pair, column by column, in palette order."""
        return [
            (alias, i)
            for column in self.alias_columns
            for i, alias in enumerate(column)
            if alias
        ]


def build_state(record: PaletteRecord) -> NormalizationState:
    """
    Does: Compute the NormalizationState of one palette from scratch.
          Pure function of the record: calling it twice yields equal states.
    """
    names = record.names
    acronym, query_splits = split_patterns(names, record.index)
    canonical = tuple(
        canonical_text(_insert_boundaries(n, (acronym, *query_splits))) for n in names
    )
    patterns = tuple(re.compile(build_pattern(c), re.IGNORECASE) for c in canonical)

    index_col: Tuple[Optional[str], ...] = (None,) * len(names)
    rest_col: Tuple[Optional[str], ...] = (None,) * len(names)
    if record.index:
        split_index = re.compile(f"^(?P<index>{record.index})\\s*(?P<rest>.+)$")
        hits = [split_index.match(c) for c in canonical]
        index_col = tuple(m.group("index") if m else None for m in hits)
        rest_col = tuple(m.group("rest") if m else None for m in hits)

    query_forms = tuple(
        canonical_text(_insert_boundaries(n, query_splits), strip=True) for n in names
    )
    initials = initial_letters(canonical)
    columns = ((initials,) if initials else ()) + (index_col, rest_col, canonical, query_forms)

    state = NormalizationState(
        palette=record.key,
        query_splits=query_splits,
        canonical=canonical,
        patterns=patterns,
        alias_columns=columns,
        alias_tables=tuple(_alias_dict(c) for c in columns),
        initials=initials,
    )
    log.debug(
        "Normalization state for %s: %d names, initials=%s, index=%r",
        record.key, len(canonical), bool(initials), record.index,
    )
    return state


def get_state(record: PaletteRecord) -> NormalizationState:
    """Does: The palette's NormalizationState, built on first use and cached."""
    return record.memo(STATE_SLOT, build_state)

"""
matcher.py
==========

Does: Resolve free-text color names to palette entries.
      1) exact alias (initials, index, name without index, canonical name)
      2) permissive pattern candidates, ambiguity broken by edit distance
      3) whole batch fails with suggestions when any query stays unmatched
Used By: orchestrator.resolve_names, CLI.
Returns: Entry indices (positions in the palette's natural order).
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from color_palette_resolver.resolution.catalog.records import PaletteRecord
from color_palette_resolver.resolution.errors import InvalidInputError, UnmatchedNameError
from color_palette_resolver.resolution.general.fuzzy.edit_distance import closest_index
from color_palette_resolver.resolution.general.utils.log import debug
from color_palette_resolver.resolution.names.diagnostics import DEFAULT_LIMIT, suggest
from color_palette_resolver.resolution.names.normalizer import NormalizationState, get_state

__all__ = ["match_one", "resolve_names"]
__docformat__ = "google"

log = logging.getLogger(__name__)


def match_one(state: NormalizationState, query: str) -> Optional[int]:
    """
    Does: Resolve one already-normalized query.
    Returns: Entry index, or None when nothing matches.
    """
    hit = state.lookup_alias(query)
    if hit is not None:
        debug(f"{state.palette}: {query!r} exact alias → #{hit}", topic="names")
        return hit

    found = state.candidates(query)
    if not found:
        return None
    if len(found) == 1:
        return found[0]
    # ambiguous: closest canonical form, lowest index on ties
    best = found[closest_index(query, [state.canonical[i] for i in found])]
    debug(f"{state.palette}: {query!r} ambiguous among {found} → #{best}", topic="names")
    return best


def _as_queries(queries: str | Iterable[str]) -> List[str]:
    if isinstance(queries, str):
        return [queries]
    out = list(queries)
    for i, q in enumerate(out):
        if not isinstance(q, str):
            raise InvalidInputError(i, q, "color names must be strings")
    return out


def resolve_names(
    record: PaletteRecord,
    queries: str | Sequence[str],
    *,
    suggestions: int = DEFAULT_LIMIT,
) -> List[int]:
    """
    Does: Match every query to one entry of `record`.
    Returns: One entry index per query, in query order.
    Raises: UnmatchedNameError listing every unmatched query with up to
            `suggestions` similar names; InvalidInputError for non-text queries.
    """
    items = _as_queries(queries)
    state = get_state(record)

    result: List[int] = []
    missing: List[Tuple[str, List[str]]] = []
    for raw in items:
        query = state.normalize_query(raw)
        idx = match_one(state, query)
        if idx is None:
            missing.append((raw, suggest(state, query, record.names, suggestions)))
        else:
            result.append(idx)

    if missing:
        log.debug("resolve_names(%s): unmatched %s", record.key, [q for q, _ in missing])
        raise UnmatchedNameError(record.key, missing)
    log.debug("resolve_names(%s, %s) → %s", record.key, items, result)
    return result

"""
diagnostics.py
==============

Does: Rank a palette's color names by how close any of their alias forms
      comes to an unmatched query, so the error message can offer the most
      likely intended names.
Used By: NameMatcher (only on failure), CLI.
Returns: suggest(state, query, names, limit) -> list[str].
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from color_palette_resolver.resolution.general.fuzzy.edit_distance import rank_by_distance
from color_palette_resolver.resolution.names.normalizer import NormalizationState

__all__ = ["DEFAULT_LIMIT", "suggest"]
__docformat__ = "google"

log = logging.getLogger(__name__)

DEFAULT_LIMIT = 8


def suggest(
    state: NormalizationState,
    query: str,
    names: Sequence[str],
    limit: int = DEFAULT_LIMIT,
) -> List[str]:
    """
    Does: Compare `query` against every alias (initials, index tokens, names
          without index, canonical names, display names normalized the way a
          query is), stable-sort by edit distance, keep
          each entry's best alias only.
    Returns: Up to `limit` display names from `names`, closest first.
    """
    forms = state.alias_forms()
    ranked = rank_by_distance(query, [alias for alias, _ in forms])

    seen = set()
    out: List[str] = []
    for pos, dist in ranked:
        entry = forms[pos][1]
        if entry in seen:
            continue
        seen.add(entry)
        out.append(names[entry])
        if len(out) >= limit:
            break
    log.debug("suggest(%s, %r) → %s", state.palette, query, out)
    return out

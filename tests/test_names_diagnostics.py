# tests/test_names_diagnostics.py
"""Suggestion ranking for unmatched names."""

from __future__ import annotations

from color_palette_resolver.resolution.general.fuzzy import edit_distance
from color_palette_resolver.resolution.names import get_state, suggest


def _best_distance(state, query, entry):
    return min(edit_distance(query, alias) for alias, i in state.alias_forms() if i == entry)


def test_suggestions_are_in_ascending_distance(bundled):
    rec = bundled.get("Kelly")
    state = get_state(rec)
    out = suggest(state, "purpel pink", rec.names)
    assert out[0] == "PurplishPink"
    dists = [_best_distance(state, "purpel pink", rec.names.index(n)) for n in out]
    assert dists == sorted(dists)


def test_each_entry_is_suggested_once(bundled):
    rec = bundled.get("MATLAB")
    out = suggest(get_state(rec), "Bleu", rec.names, limit=20)
    assert len(out) == len(set(out)) == len(rec)
    assert out[0] == "Blue"


def test_limit_truncates(bundled):
    rec = bundled.get("Natural")
    state = get_state(rec)
    assert suggest(state, "Z", rec.names, limit=2) == ["Black", "Blue"]
    assert len(suggest(state, "Z", rec.names)) == len(rec)


def test_default_limit_is_eight(bundled):
    rec = bundled.get("Alphabet")
    assert len(suggest(get_state(rec), "qqqq", rec.names)) == 8


def test_index_tokens_count_as_aliases(bundled):
    rec = bundled.get("CGA")
    assert suggest(get_state(rec), "16", rec.names, limit=1) == ["1 Blue"]


def test_query_form_of_display_name_counts_as_alias(tiny):
    rec = tiny.get("Acronyms")
    state = get_state(rec)
    aliases = [alias for alias, i in state.alias_forms() if i == 0]
    assert "R G B Color" in aliases and "RGBColor" in aliases
    # only the unsplit form is one edit away
    assert _best_distance(state, "RGBColr", 0) == 1
    assert suggest(state, "RGBColr", rec.names, limit=1) == ["RGBColor"]

# tests/test_names_matcher.py
"""Name resolution: aliases, permissive patterns, tie-breaks and batch failure."""

from __future__ import annotations

import pytest

from color_palette_resolver.resolution.errors import InvalidInputError, UnmatchedNameError
from color_palette_resolver.resolution.names import STATE_SLOT, resolve_names


def _names(record, queries):
    return [record.names[i] for i in resolve_names(record, queries)]


@pytest.mark.parametrize("key", ["Alphabet", "CGA", "HTML4", "Kelly", "MATLAB", "Natural"])
def test_every_name_resolves_to_itself(bundled, key):
    rec = bundled.get(key)
    assert _names(rec, rec.names) == rec.names


def test_html4_mixed_case_queries(bundled):
    assert _names(bundled.get("HTML4"), ["blue", "RED", "Teal", "olive"]) == [
        "Blue",
        "Red",
        "Teal",
        "Olive",
    ]


@pytest.mark.parametrize(
    "query", ["LightBlue", "light blue", "LIGHT BLUE", "  Light   Blue ", "lightblue", "Light\tBlue"]
)
def test_case_space_and_camelcase_variants(bundled, query):
    assert _names(bundled.get("Kelly"), [query]) == ["LightBlue"]


def test_matlab_initials(bundled):
    assert _names(bundled.get("MATLAB"), ["c", "m", "y", "k"]) == ["Cyan", "Magenta", "Yellow", "Black"]


def test_grey_spelling(bundled):
    assert _names(bundled.get("HTML4"), ["grey"]) == ["Gray"]
    assert _names(bundled.get("CGA"), ["light grey", "DarkGrey"]) == ["7 Light Gray", "8 Dark Gray"]


def test_index_and_stripped_names(bundled):
    rec = bundled.get("CGA")
    assert _names(rec, ["5", "Magenta", "13", "15White"]) == [
        "5 Magenta",
        "5 Magenta",
        "13 Light Magenta",
        "15 White",
    ]


def test_diacritics_and_ocher(tiny):
    rec = tiny.get("Accents")
    assert _names(rec, ["cafe", "CREME", "ocher", "ocre"]) == ["Café", "Crème", "Ochre", "Ochre"]


def test_acronym_names(tiny):
    rec = tiny.get("Acronyms")
    assert _names(rec, ["RGB Color", "rgbcolor", "light sea green"]) == [
        "RGBColor",
        "RGBColor",
        "LightSeaGreen",
    ]


def test_ambiguity_prefers_smallest_edit_distance(bundled):
    # "Re" fits Red, Green, Gray and Purple; Red is one edit away
    assert _names(bundled.get("HTML4"), ["Re"]) == ["Red"]


def test_equal_distance_goes_to_first_entry(tiny):
    assert _names(tiny.get("Ties"), ["A"]) == ["Ab"]


def test_bare_string_is_one_query(bundled):
    assert _names(bundled.get("HTML4"), "navy") == ["Navy"]


def test_non_text_query_is_rejected(bundled):
    with pytest.raises(InvalidInputError) as ei:
        resolve_names(bundled.get("HTML4"), ["red", 3])
    assert ei.value.position == 1


def test_batch_fails_with_every_unmatched_query(bundled):
    with pytest.raises(UnmatchedNameError) as ei:
        resolve_names(bundled.get("HTML4"), ["Red", "nope", "zzz"])
    err = ei.value
    assert err.palette == "HTML4"
    assert err.queries == ("nope", "zzz")
    assert all(err.suggestions[q] for q in err.queries)
    assert '"nope", "zzz"' in str(err)


def test_repeated_unmatched_queries_are_all_reported(bundled):
    with pytest.raises(UnmatchedNameError) as ei:
        resolve_names(bundled.get("HTML4"), ["zz", "Red", "zz"])
    err = ei.value
    assert err.queries == ("zz", "zz")
    assert [q for q, _ in err.unmatched] == ["zz", "zz"]
    assert err.unmatched[0][1] == err.unmatched[1][1] == err.suggestions["zz"]
    assert '"zz", "zz"' in str(err)


def test_natural_unknown_letter(bundled):
    with pytest.raises(UnmatchedNameError) as ei:
        resolve_names(bundled.get("Natural"), ["Z"])
    assert ei.value.suggestions["Z"] == ("Black", "Blue", "Green", "Red", "White", "Yellow")


def test_warm_cache_gives_identical_results(bundled):
    rec = bundled.get("Kelly")
    queries = ["reddish orange", "OliveGreen", "buff", "grey"]
    cold = resolve_names(rec, queries)
    assert rec.is_cached(STATE_SLOT)
    assert resolve_names(rec, queries) == cold

# tests/test_orchestrator.py
"""Query surface: PaletteResolver and the default (bundled) resolver."""

from __future__ import annotations

import pytest

from color_palette_resolver.resolution import orchestrator
from color_palette_resolver.resolution.errors import (
    InvalidInputError,
    UnknownPaletteError,
    UnmatchedNameError,
    UnsupportedMetricError,
)
from color_palette_resolver.resolution.orchestrator import NamedColor, PaletteResolver, PaletteSummary


def test_list_and_get_palette(resolver):
    assert resolver.list_palettes() == ["Alphabet", "CGA", "HTML4", "Kelly", "MATLAB", "Natural"]
    colors = resolver.get_palette("natural")
    assert [c.name for c in colors] == ["Black", "Blue", "Green", "Red", "White", "Yellow"]
    assert isinstance(colors[0], NamedColor)
    assert colors[0].rgb == (0.0, 0.0, 0.0)


def test_resolve_names_returns_rows(resolver):
    rows = resolver.resolve_names("HTML4", ["blue", "RED", "Teal", "olive"])
    assert [r.rgb for r in rows] == [
        pytest.approx((0, 0, 1)),
        pytest.approx((1, 0, 0)),
        pytest.approx((0, 0.502, 0.502), abs=1e-3),
        pytest.approx((0.502, 0.502, 0), abs=1e-3),
    ]


def test_resolve_colors_default_and_override(resolver):
    samples = [[0, 0.5, 1], [1, 0.5, 0]]
    assert [c.name for c in resolver.resolve_colors("HTML4", samples)] == ["Blue", "Red"]
    assert [c.name for c in resolver.resolve_colors("HTML4", samples, "RGB")] == ["Teal", "Olive"]


def test_resolver_level_metric(bundled):
    rgb = PaletteResolver(bundled, metric="rgb")
    assert rgb.metric.name == "RGB"
    assert rgb.resolve_colors("HTML4", [[0, 0.5, 1]])[0].name == "Teal"
    with pytest.raises(UnsupportedMetricError):
        PaletteResolver(bundled, metric="nope")


def test_errors_surface_unchanged(resolver):
    with pytest.raises(UnknownPaletteError) as ei:
        resolver.resolve_names("CSS", ["red"])
    assert "HTML4" in ei.value.valid
    with pytest.raises(UnmatchedNameError):
        resolver.resolve_names("MATLAB", ["x"])
    with pytest.raises(InvalidInputError):
        resolver.resolve_colors("MATLAB", [[0, 0, 1.5]])


def test_describe(tiny):
    summaries = PaletteResolver(tiny).describe()
    assert [s.key for s in summaries] == ["Accents", "Acronyms", "Ties"]
    acronyms = summaries[1]
    assert isinstance(acronyms, PaletteSummary)
    assert (acronyms.count, acronyms.license, acronyms.notes, acronyms.index) == (3, "CC0", "test palette", None)


def test_coordinates(resolver):
    lab = resolver.coordinates("MATLAB", "lab")
    assert len(lab) == 8
    assert lab[0] == pytest.approx((0, 0, 0), abs=1e-9)
    assert resolver.coordinates("MATLAB")[1] == (0.0, 0.0, 1.0)
    with pytest.raises(InvalidInputError):
        resolver.coordinates("MATLAB", "CMYK")


def test_default_resolver_is_built_once():
    first = orchestrator.default_resolver()
    assert orchestrator.default_resolver() is first
    assert "xkcd" in orchestrator.list_palettes()
    assert orchestrator.resolve_names("xkcd", "dusty rose")[0].name == "dusty rose"


def test_default_metric_from_env(monkeypatch):
    monkeypatch.setenv("PALETTE_DEFAULT_METRIC", "RGB")
    orchestrator.reset_default_resolver()
    assert orchestrator.resolve_colors("HTML4", [[0, 0.5, 1]])[0].name == "Teal"


def test_module_level_wrappers():
    assert orchestrator.get_palette("MATLAB")[0].name == "Black"
    assert orchestrator.resolve_colors("HTML4", [[1, 0.5, 0]])[0].name == "Red"
    assert orchestrator.describe()[0].key == "Alphabet"
    assert len(orchestrator.coordinates("Natural", "HSV")) == 6

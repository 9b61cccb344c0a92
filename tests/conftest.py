# tests/conftest.py
"""Shared fixtures: the bundled catalog (without xkcd) and small in-memory palettes."""

from __future__ import annotations

import pytest

from color_palette_resolver.resolution.catalog import PaletteCatalog, load_bundled_catalog
from color_palette_resolver.resolution.general.utils import clear_config_cache
from color_palette_resolver.resolution.orchestrator import PaletteResolver, reset_default_resolver


@pytest.fixture(scope="session")
def bundled() -> PaletteCatalog:
    return load_bundled_catalog(include_xkcd=False)


@pytest.fixture
def resolver(bundled) -> PaletteResolver:
    return PaletteResolver(bundled)


@pytest.fixture
def tiny() -> PaletteCatalog:
    """Hand-written palettes exercising ties, diacritics and acronyms."""
    return PaletteCatalog.load(
        {
            "Ties": {"names": ["Ab", "Ac"], "rgb": [[0, 0, 0], [1, 1, 1]]},
            "Accents": {
                "names": ["Café", "Crème", "Ochre"],
                "rgb": [[0.4, 0.3, 0.2], [1, 0.99, 0.8], [0.8, 0.47, 0.13]],
            },
            "Acronyms": {
                "names": ["RGBColor", "Red", "LightSeaGreen"],
                "rgb": [[0.5, 0.5, 0.5], [1, 0, 0], [0.13, 0.7, 0.67]],
                "license": "CC0",
                "notes": "test palette",
            },
        }
    )


@pytest.fixture(autouse=True)
def _fresh_state(monkeypatch):
    """Isolate env-driven state: data dir, debug topics, default resolver."""
    for var in ("PALETTE_DATA_DIR", "DATA_DIR", "PALETTE_DEBUG_TOPICS", "PALETTE_DEFAULT_METRIC"):
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    reset_default_resolver()
    yield
    reset_default_resolver()

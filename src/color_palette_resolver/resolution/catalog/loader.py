"""
loader.py
=========

Does: Materialize the bundled sample catalog: palettes from data/palettes.json
      (hex colors decoded with webcolors) plus the xkcd survey palette taken
      from matplotlib's XKCD_COLORS table (lazy import).
Used By: The default resolver in orchestrator.py, the CLI and tests.
Returns: load_bundled_catalog() -> PaletteCatalog; raw-dict helpers for callers
         that want to merge their own palettes before validation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
from webcolors import hex_to_rgb

from color_palette_resolver.resolution.catalog.records import PaletteCatalog
from color_palette_resolver.resolution.general.utils.load_config import load_config

__all__ = [
    "BUNDLED_FILE",
    "decode_hex_colors",
    "load_bundled_palettes",
    "xkcd_palette",
    "load_bundled_catalog",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

BUNDLED_FILE = "palettes"


# =============================================================================
# 1) DECODING
# =============================================================================

def decode_hex_colors(colors: List[Any]) -> Any:
    """
    Does: Turn a list of "#RRGGBB"/"#RGB" strings into an Nx3 uint8 matrix.
          Lists that are not all strings are returned unchanged so numeric
          rows can be validated by the catalog itself.
    """
    if not colors or not all(isinstance(c, str) for c in colors):
        return colors
    return np.array([tuple(hex_to_rgb(c)) for c in colors], dtype=np.uint8)


def _validate_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Validator for load_config: the file holds {"palettes": {key: fields}}."""
    palettes = doc.get("palettes")
    if not isinstance(palettes, dict):
        raise ValueError('top-level "palettes" must be an object')
    for key, fields in palettes.items():
        if not isinstance(fields, dict):
            raise ValueError(f'palette "{key}" must be an object')
    return palettes


# =============================================================================
# 2) SOURCES
# =============================================================================

def load_bundled_palettes(
    file: str = BUNDLED_FILE, *, base_dir: Optional[Path] = None
) -> Dict[str, Dict[str, Any]]:
    """
    Does: Read the palette file (JSON5, so comments are allowed) and decode its hex colors.
    Returns: Raw {key: fields} mapping, ready for PaletteCatalog.load().
    """
    palettes = load_config(
        file, mode="validated_dict", base_dir=base_dir, validator=_validate_document, allow_comments=True
    )
    raw: Dict[str, Dict[str, Any]] = {}
    for key, fields in palettes.items():
        fields = dict(fields)
        if "rgb" in fields and isinstance(fields["rgb"], list):
            fields["rgb"] = decode_hex_colors(fields["rgb"])
        raw[key] = fields
    log.debug("Read %d bundled palettes from %s.json", len(raw), file)
    return raw


@lru_cache(maxsize=1)
def xkcd_palette() -> Dict[str, Any]:
    """Does: Build the raw xkcd palette from matplotlib's table (lazy import)."""
    from matplotlib.colors import XKCD_COLORS

    names = [k.replace("xkcd:", "") for k in XKCD_COLORS]
    return {
        "names": names,
        "rgb": decode_hex_colors(list(XKCD_COLORS.values())),
        "index": False,
        "source": "https://xkcd.com/color/rgb/",
        "license": "CC0",
        "notes": "Randall Munroe's color survey, via matplotlib.colors.XKCD_COLORS",
    }


# =============================================================================
# 3) CATALOG
# =============================================================================

def load_bundled_catalog(*, include_xkcd: bool = True, base_dir: Optional[Path] = None) -> PaletteCatalog:
    """
    Does: Validate the bundled palettes (and optionally xkcd) into one catalog.
    Raises: ValidationError, ConfigFileNotFound, ConfigParseError.
    """
    raw = load_bundled_palettes(base_dir=base_dir)
    if include_xkcd:
        raw.setdefault("xkcd", xkcd_palette())
    return PaletteCatalog.load(raw)

"""
catalog package.
================

Does: Validated, immutable-after-load palette store (records, natural sort)
      and the bundled sample catalog loader.
"""

from .loader import (
    decode_hex_colors,
    load_bundled_catalog,
    load_bundled_palettes,
    xkcd_palette,
)
from .natsort import natsort_indices, natsort_key, natsorted
from .records import (
    DEFAULT_INDEX_PATTERN,
    RGB,
    ColorEntry,
    PaletteCatalog,
    PaletteRecord,
    build_record,
)

__all__ = [
    "RGB",
    "DEFAULT_INDEX_PATTERN",
    "ColorEntry",
    "PaletteRecord",
    "PaletteCatalog",
    "build_record",
    "natsort_key",
    "natsort_indices",
    "natsorted",
    "decode_hex_colors",
    "load_bundled_palettes",
    "load_bundled_catalog",
    "xkcd_palette",
]

__docformat__ = "google"

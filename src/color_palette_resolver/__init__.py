"""
color_palette_resolver
======================

Does: Root package initializer for the palette resolver project.
Returns: Exposes the `resolution` subpackage through a stable namespace.
Used by: All higher-level imports starting from `color_palette_resolver.*`.
"""

__all__: list[str] = []
__docformat__ = "google"

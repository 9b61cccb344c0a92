"""
general.

Does: Domain-agnostic helpers shared by the catalog, name and color layers:
      text canonicalization, edit distance, data loading and debug tracing.
"""

__all__: list[str] = []
__docformat__ = "google"

"""
general.
=======

Does: Domain-agnostic helpers (input flattening, data loading, debug logging)
      shared by the palette subpackages.
"""

__all__: list[str] = []
__docformat__ = "google"

"""
engine.
======

Does: Group the color-data engine: hex parsing, RGB/HSL conversion, family
      classification, catalog build, filtering/sorting and nearest-color matching.
Used by: The CLI demo and any hosting application (via `service`).
"""

from .errors import (
    CatalogNotLoaded,
    CatalogUnavailable,
    InvalidHexFormat,
    MalformedRecord,
    PaintCatalogError,
)

__all__ = [
    "PaintCatalogError",
    "InvalidHexFormat",
    "MalformedRecord",
    "CatalogUnavailable",
    "CatalogNotLoaded",
]

__docformat__ = "google"

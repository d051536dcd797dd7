"""
errors.py.

Does: Define the error taxonomy shared by hex parsing, catalog build and matching.
Used by: hex_color, catalog sources/builder, service facade, CLI.
"""

from __future__ import annotations

__all__ = [
    "PaintCatalogError",
    "InvalidHexFormat",
    "MalformedRecord",
    "CatalogUnavailable",
    "CatalogNotLoaded",
]


class PaintCatalogError(Exception):
    """Base class for every error raised by the engine."""


class InvalidHexFormat(PaintCatalogError, ValueError):
    """Raise when text is not a 3- or 6-digit hex color (with optional '#')."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"{value!r} is not a valid hex color")


class MalformedRecord(PaintCatalogError, ValueError):
    """Raise when a catalog record lacks a required field (type/brand/colorName)."""

    def __init__(self, field: str, record: object = None):
        self.field = field
        self.record = record
        super().__init__(f"record is missing a usable '{field}' field")


class CatalogUnavailable(PaintCatalogError, RuntimeError):
    """Raise when the catalog payload cannot be obtained or is not a list of records."""


class CatalogNotLoaded(PaintCatalogError, RuntimeError):
    """Raise when a query runs before any catalog was loaded."""

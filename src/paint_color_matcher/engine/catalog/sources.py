"""
sources.py
==========

Does: Resolve a raw catalog payload into a tagged shape once (flat list of
      {hex, type, brand, colorName} vs nested {hex, type, brands: [...]}) and
      adapt each shape into RawEntry values; read payloads from files or URLs.
Returns: FlatPayload / NestedPayload via detect_payload(); RawEntry iterators;
         parsed JSON via read_source().
Used By: catalog builder and the service facade.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Sequence, Union

import requests  # type: ignore[import-untyped]

from paint_color_matcher.engine.catalog.types import RawEntry
from paint_color_matcher.engine.color import HexColor, parse_hex
from paint_color_matcher.engine.errors import (
    CatalogUnavailable,
    InvalidHexFormat,
    MalformedRecord,
)
from paint_color_matcher.engine.general.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    debug,
    load_config,
)

logger = logging.getLogger(__name__)

__all__ = [
    "FlatPayload",
    "NestedPayload",
    "CatalogPayload",
    "detect_payload",
    "read_source",
]

# Source field names
HEX_FIELD = "hex"
TYPE_FIELD = "type"
BRAND_FIELD = "brand"
NAME_FIELD = "colorName"
BRANDS_FIELD = "brands"

# Single session for connection reuse
_session = requests.Session()


# ── Field helpers ────────────────────────────────────────────────────────────
def _text_field(record: Mapping[str, Any], name: str) -> str:
    """Return the trimmed string value of `name` or raise MalformedRecord."""
    value = record.get(name)
    if not isinstance(value, str) or not value.strip():
        raise MalformedRecord(name, record)
    return value.strip()


def _record_hex(record: Mapping[str, Any]) -> HexColor:
    return parse_hex(record.get(HEX_FIELD))


def _drop(counts: Counter[str], err: Exception, index: int) -> None:
    if isinstance(err, InvalidHexFormat):
        counts["invalid_hex"] += 1
    else:
        counts["malformed"] += 1
    debug(f"record #{index} dropped: {err}", topic="catalog")


# ── Tagged payload variants ──────────────────────────────────────────────────
@dataclass(frozen=True)
class FlatPayload:
    """Array of {hex, type, brand, colorName}."""

    records: Sequence[Any]

    def iter_entries(self, counts: Optional[Counter[str]] = None) -> Iterator[RawEntry]:
        counts = counts if counts is not None else Counter()
        for index, record in enumerate(self.records):
            counts["records_seen"] += 1
            try:
                if not isinstance(record, Mapping):
                    raise MalformedRecord("record", record)
                hex_value = _record_hex(record)
                entry = RawEntry(
                    hex=hex_value,
                    product_type=_text_field(record, TYPE_FIELD),
                    brand=_text_field(record, BRAND_FIELD),
                    display_name=_text_field(record, NAME_FIELD),
                )
            except (InvalidHexFormat, MalformedRecord) as e:
                _drop(counts, e, index)
                continue
            yield entry


@dataclass(frozen=True)
class NestedPayload:
    """Array of {hex, type, brands: [{brand, colorName}, ...]}."""

    records: Sequence[Any]

    def iter_entries(self, counts: Optional[Counter[str]] = None) -> Iterator[RawEntry]:
        counts = counts if counts is not None else Counter()
        for index, record in enumerate(self.records):
            counts["records_seen"] += 1
            try:
                if not isinstance(record, Mapping):
                    raise MalformedRecord("record", record)
                hex_value = _record_hex(record)
                product_type = _text_field(record, TYPE_FIELD)
                brands = record.get(BRANDS_FIELD)
                if not isinstance(brands, list):
                    raise MalformedRecord(BRANDS_FIELD, record)
            except (InvalidHexFormat, MalformedRecord) as e:
                _drop(counts, e, index)
                continue

            for pair in brands:
                try:
                    if not isinstance(pair, Mapping):
                        raise MalformedRecord("brands[]", pair)
                    entry = RawEntry(
                        hex=hex_value,
                        product_type=product_type,
                        brand=_text_field(pair, BRAND_FIELD),
                        display_name=_text_field(pair, NAME_FIELD),
                    )
                except MalformedRecord as e:
                    _drop(counts, e, index)
                    continue
                yield entry


CatalogPayload = Union[FlatPayload, NestedPayload]


def detect_payload(data: Any) -> CatalogPayload:
    """
    Does: Resolve the payload shape once, from the first record: an array-valued
          `brands` field means nested, anything else is flat.
    Raises: CatalogUnavailable when `data` is not a list of records.
    """
    if isinstance(data, (FlatPayload, NestedPayload)):
        return data
    if not isinstance(data, list):
        raise CatalogUnavailable(
            f"Catalog payload must be a JSON array, got {type(data).__name__}"
        )
    if data and isinstance(data[0], Mapping) and isinstance(data[0].get(BRANDS_FIELD), list):
        return NestedPayload(tuple(data))
    return FlatPayload(tuple(data))


# ── Source reading ───────────────────────────────────────────────────────────
def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _fetch_url(url: str, timeout: float) -> Any:
    try:
        resp = _session.get(url, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except requests.RequestException as e:
        raise CatalogUnavailable(f"Cannot fetch catalog from {url}: {e}") from e
    except ValueError as e:
        raise CatalogUnavailable(f"Catalog at {url} is not valid JSON: {e}") from e


def _read_file(path: Path) -> Any:
    try:
        return load_config(path, mode="raw")
    except (ConfigFileNotFound, ConfigParseError) as e:
        raise CatalogUnavailable(f"Cannot read catalog file {path}: {e}") from e


def read_source(source: Union[str, Path], *, timeout: float = 10.0) -> Any:
    """
    Does: Read a raw catalog payload from a local .json/.json5 file or an http(s) URL.
    Returns: Parsed JSON (not yet shape-checked).
    Raises: CatalogUnavailable on any I/O, HTTP or JSON failure.
    """
    if isinstance(source, str) and _is_url(source):
        debug(f"fetching catalog from {source}", topic="source")
        data = _fetch_url(source, timeout)
    else:
        path = Path(source).expanduser()
        debug(f"reading catalog file {path}", topic="source")
        data = _read_file(path)
    logger.info("Catalog payload read from %s", source)
    return data

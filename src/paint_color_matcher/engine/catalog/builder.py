"""
builder.py

Does:
    Flatten a catalog payload into RawEntry values, group them by canonical hex
    (case-insensitive variant dedup), choose one canonical display name per group,
    and precompute family / HSL / shade / variant labels for each CatalogEntry.
Returns:
    flatten() → list[RawEntry]; group_by_hex() → dict[HexColor, list[RawEntry]];
    pick_canonical_name() → str; build_catalog() → Catalog (immutable snapshot).
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from paint_color_matcher.engine.catalog.sources import CatalogPayload, detect_payload
from paint_color_matcher.engine.catalog.types import BuildStats, Catalog, CatalogEntry, RawEntry
from paint_color_matcher.engine.color import (
    ACHROMATIC_FAMILIES,
    HexColor,
    classify_family,
    describe,
    rgb_to_hsl,
)
from paint_color_matcher.engine.color.constants import ACHROMATIC_HUE
from paint_color_matcher.engine.general.utils import debug

logger = logging.getLogger(__name__)

__all__ = [
    "flatten",
    "group_by_hex",
    "pick_canonical_name",
    "format_variant",
    "make_entry",
    "build_catalog",
]


# ── 1) Flatten ───────────────────────────────────────────────────────────────
def flatten(payload: Any, counts: Optional[Counter[str]] = None) -> List[RawEntry]:
    """
    Does: Normalize either payload shape to RawEntry values, silently dropping
          records without a parseable hex, type, brand or colorName.
    Returns: RawEntry list in source order.
    """
    return list(detect_payload(payload).iter_entries(counts))


# ── 2) Group ─────────────────────────────────────────────────────────────────
def group_by_hex(
    entries: Iterable[RawEntry],
    *,
    strict_product_type: bool = False,
    counts: Optional[Counter[str]] = None,
) -> Dict[HexColor, List[RawEntry]]:
    """
    Does:
        Partition by canonical hex in first-occurrence order. Within a group,
        a variant whose lowercase (type, brand, name) triple was already seen is
        dropped; `strict_product_type` keeps the type's casing in that key.
    Returns:
        {hex: [RawEntry, ...]} with first-seen variant order.
    """
    groups: Dict[HexColor, List[RawEntry]] = {}
    seen: Dict[HexColor, set] = {}
    for entry in entries:
        key = entry.dedup_key(strict_product_type=strict_product_type)
        keys = seen.setdefault(entry.hex, set())
        if key in keys:
            if counts is not None:
                counts["duplicate_variants"] += 1
            continue
        keys.add(key)
        groups.setdefault(entry.hex, []).append(entry)
    return groups


# ── 3) Canonical name ────────────────────────────────────────────────────────
def _shortest_then_lexical(name: str) -> Tuple[int, str]:
    return len(name), name


def pick_canonical_name(entries: Sequence[RawEntry]) -> str:
    """
    Does:
        Count display names case-insensitively and keep the most frequent one.
        Each lowercase key is represented by its shortest original casing
        (codepoint order on equal length, so "Red" < "red"); ties on count go to
        the shorter representative, then to the lexicographically smaller one.
    Returns:
        The winning original-cased display name.
    """
    if not entries:
        raise ValueError("pick_canonical_name() needs at least one entry")

    counts: Counter = Counter()
    casing: Dict[str, str] = {}
    for entry in entries:
        name = entry.display_name
        key = name.lower()
        counts[key] += 1
        current = casing.get(key)
        if current is None or _shortest_then_lexical(name) < _shortest_then_lexical(current):
            casing[key] = name

    winner = min(
        counts,
        key=lambda k: (-counts[k], len(casing[k]), casing[k]),
    )
    return casing[winner]


# ── 4) Entry assembly ────────────────────────────────────────────────────────
def format_variant(variant: RawEntry, canonical_name: str) -> str:
    """Does: '{brand} - {type}', plus ' ({name})' when it differs from the canonical name."""
    label = f"{variant.brand} - {variant.product_type}"
    if variant.display_name.lower() != canonical_name.lower():
        label += f" ({variant.display_name})"
    return label


def make_entry(hex_value: HexColor, variants: Sequence[RawEntry]) -> CatalogEntry:
    """Does: Derive every precomputed field of one CatalogEntry from its variants."""
    ordered = tuple(sorted(variants, key=RawEntry.sort_key))
    canonical = pick_canonical_name(ordered)
    rgb = hex_value.rgb
    hsl = rgb_to_hsl(rgb)
    family = classify_family(hsl)
    hue = ACHROMATIC_HUE if family in ACHROMATIC_FAMILIES else hsl.hue
    return CatalogEntry(
        hex=hex_value,
        variants=ordered,
        canonical_name=canonical,
        family=family,
        hue=hue,
        saturation=hsl.saturation,
        lightness=hsl.lightness,
        rgb=rgb,
        description=describe(hsl),
        variant_display=tuple(format_variant(v, canonical) for v in ordered),
    )


# ── 5) Build ─────────────────────────────────────────────────────────────────
def build_catalog(
    payload: Any,
    *,
    strict_product_type: bool = False,
) -> Catalog:
    """
    Does:
        Run flatten → group_by_hex → make_entry over one payload (raw JSON list
        or tagged FlatPayload/NestedPayload).
    Returns:
        Catalog snapshot with entries in first-occurrence hex order and build stats.
    Raises:
        CatalogUnavailable when the payload is not a list of records.
    """
    counts: Counter[str] = Counter()
    tagged: CatalogPayload = detect_payload(payload)
    raw = list(tagged.iter_entries(counts))
    groups = group_by_hex(raw, strict_product_type=strict_product_type, counts=counts)
    entries = tuple(make_entry(h, variants) for h, variants in groups.items())
    stats = BuildStats.from_counts(counts)

    logger.info(
        "Catalog built: %d colors from %d records (%d dropped, %d duplicate variants)",
        len(entries),
        stats.records_seen,
        stats.dropped,
        stats.duplicate_variants,
    )
    debug(
        f"{type(tagged).__name__}: invalid_hex={stats.invalid_hex} malformed={stats.malformed}",
        topic="catalog",
    )
    return Catalog(entries=entries, stats=stats)

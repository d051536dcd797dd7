"""
matcher.py
==========

Does: Find the catalog entry closest to a query color by Euclidean RGB distance
      (linear scan; ties keep the first candidate in iteration order).
Returns: closest() → CatalogEntry | None; nearest() → ranked list[Match];
         match() → MatchResult.
Used By: service facade and CLI.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from paint_color_matcher.engine.catalog.types import CatalogEntry, Match, MatchResult
from paint_color_matcher.engine.color import HexLike, parse_hex
from paint_color_matcher.engine.color.utils import rgb_distance
from paint_color_matcher.engine.general.utils import debug

logger = logging.getLogger(__name__)

__all__ = ["closest", "nearest", "match"]


def match(query: HexLike, candidates: Iterable[CatalogEntry]) -> MatchResult:
    """Does: Scan candidates once; keep the first entry with the strictly smallest distance."""
    target = parse_hex(query)
    rgb = target.rgb
    best: Optional[CatalogEntry] = None
    best_d = float("inf")
    for entry in candidates:
        d = rgb_distance(rgb, entry.rgb)
        if d < best_d:
            best, best_d = entry, d
    if best is None:
        debug(f"{target}: no candidates", topic="match")
        return MatchResult(query=target)
    debug(f"{target} → {best.hex} {best.canonical_name!r} (d={best_d:.2f})", topic="match")
    return MatchResult(query=target, entry=best, distance=best_d)


def closest(query: HexLike, candidates: Iterable[CatalogEntry]) -> Optional[CatalogEntry]:
    """
    Does: Return the candidate nearest to `query`, or None for an empty candidate set.
    Raises: InvalidHexFormat when `query` is text that does not parse.
    """
    return match(query, candidates).entry


def nearest(query: HexLike, candidates: Iterable[CatalogEntry], k: int = 5) -> List[Match]:
    """Does: Return the k closest candidates with distances; equal distances keep input order."""
    if k <= 0:
        return []
    rgb = parse_hex(query).rgb
    scored = [Match(entry, rgb_distance(rgb, entry.rgb)) for entry in candidates]
    # sorted() is stable, so ties stay in iteration order
    scored.sort(key=lambda m: m.distance)
    return scored[:k]

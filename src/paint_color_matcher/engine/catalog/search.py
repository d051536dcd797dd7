"""
search.py

Does: Fuzzy name search over catalog entries (canonical names and every
      variant's display name) using rapidfuzz WRatio scores.
Returns: list of (CatalogEntry, score) pairs, best first.
Used by: service facade and CLI `--search`.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from rapidfuzz import fuzz, utils

from paint_color_matcher.engine.catalog.types import CatalogEntry

__all__ = ["search_by_name", "DEFAULT_SCORE_CUTOFF"]

logger = logging.getLogger(__name__)

DEFAULT_SCORE_CUTOFF = 70.0


def _entry_score(query: str, entry: CatalogEntry) -> float:
    names = {entry.canonical_name, *(v.display_name for v in entry.variants)}
    return max(
        fuzz.WRatio(query, name, processor=utils.default_process) for name in names
    )


def search_by_name(
    entries: Iterable[CatalogEntry],
    query: str,
    limit: int = 10,
    score_cutoff: float = DEFAULT_SCORE_CUTOFF,
) -> List[Tuple[CatalogEntry, float]]:
    """
    Does: Score every entry against `query` and keep those at or above `score_cutoff`.
    Returns: Up to `limit` (entry, score) pairs, score descending, catalog order on ties.
    """
    if not query or not query.strip() or limit <= 0:
        return []
    hits = []
    for entry in entries:
        score = _entry_score(query, entry)
        if score >= score_cutoff:
            hits.append((entry, score))
    hits.sort(key=lambda hit: -hit[1])
    logger.debug("search %r: %d hits (cutoff=%s)", query, len(hits), score_cutoff)
    return hits[:limit]

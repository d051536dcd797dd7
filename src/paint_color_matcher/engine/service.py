# service.py
from __future__ import annotations

"""
service.py
==========

Does: Hold the current catalog snapshot for a hosting application, swap in
      freshly built snapshots atomically, and answer view / match / search
      queries against it.
Returns:
  - PaintCatalogService.load(data) -> Catalog
  - PaintCatalogService.view(...) -> list[CatalogEntry]
  - PaintCatalogService.match(text, ...) -> MatchResult
Used by: The CLI demo and any UI layer acting as presentation collaborator.
"""

import logging
import threading
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from paint_color_matcher.engine.catalog import (
    Catalog,
    CatalogEntry,
    Match,
    MatchResult,
    SelectorOptions,
    SortKey,
    build_catalog,
    filter_entries,
    match,
    nearest,
    read_source,
    search_by_name,
    selector_options,
    sort_entries,
)
from paint_color_matcher.engine.color import parse_hex
from paint_color_matcher.engine.errors import CatalogNotLoaded, CatalogUnavailable
from paint_color_matcher.engine.general.utils import Settings, settings_from_env

logger = logging.getLogger(__name__)

__all__ = ["PaintCatalogService"]


class PaintCatalogService:
    """Does: Own one published Catalog snapshot; readers never see a partial build.
    Args: settings: Settings (defaults to PAINT_MATCHER_* env).
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or settings_from_env()
        self._lock = threading.Lock()
        self._catalog: Optional[Catalog] = None

    # ── Loading ──────────────────────────────────────────────────────────────
    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    @property
    def catalog(self) -> Catalog:
        """Current snapshot; raises CatalogNotLoaded before the first successful load."""
        snapshot = self._catalog
        if snapshot is None:
            raise CatalogNotLoaded("Catalog has not been loaded yet")
        return snapshot

    def load(self, data: Any) -> Catalog:
        """Does: Build a fresh snapshot from a payload and publish it.
        Raises: CatalogUnavailable (previous snapshot stays published).
        """
        snapshot = build_catalog(data, strict_product_type=self.settings.strict_product_type)
        with self._lock:
            self._catalog = snapshot
        return snapshot

    def load_source(self, source: Union[str, Path, None] = None) -> Catalog:
        """Does: Read a payload from a file/URL (default: settings.catalog_source) and load it."""
        source = source or self.settings.catalog_source
        if not source:
            raise CatalogUnavailable("No catalog source configured (PAINT_MATCHER_CATALOG)")
        try:
            data = read_source(source, timeout=self.settings.request_timeout)
            return self.load(data)
        except CatalogUnavailable:
            logger.warning("Unable to load catalog from %s", source)
            raise

    # ── Views ────────────────────────────────────────────────────────────────
    def view(
        self,
        family: Optional[str] = None,
        product_type: Optional[str] = None,
        brand: Optional[str] = None,
        sort: Union[SortKey, str, None] = None,
    ) -> List[CatalogEntry]:
        """Does: Filter the current snapshot, then sort it (settings.default_sort if unset)."""
        entries = filter_entries(self.catalog, family, product_type, brand)
        return sort_entries(entries, sort or self.settings.default_sort)

    def selectors(self, active: bool = False, **filters: Any) -> SelectorOptions:
        """Does: Distinct family/type/brand values of the full catalog or of the active view."""
        entries = self.view(**filters) if active else self.catalog.entries
        return selector_options(entries)

    # ── Queries ──────────────────────────────────────────────────────────────
    def match(
        self,
        text: Any,
        family: Optional[str] = None,
        product_type: Optional[str] = None,
        brand: Optional[str] = None,
        sort: Union[SortKey, str, None] = None,
    ) -> MatchResult:
        """
        Does: Parse the query first (InvalidHexFormat), then require a loaded
              catalog (CatalogNotLoaded), then match against the active view.
        Returns: MatchResult; `entry is None` when the view is empty.
        """
        query = parse_hex(text)
        return match(query, self.view(family, product_type, brand, sort))

    def nearest(
        self,
        text: Any,
        k: Optional[int] = None,
        family: Optional[str] = None,
        product_type: Optional[str] = None,
        brand: Optional[str] = None,
    ) -> List[Match]:
        query = parse_hex(text)
        k = k if k is not None else self.settings.top_k
        return nearest(query, self.view(family, product_type, brand), k)

    def search(self, name: str, limit: Optional[int] = None) -> List[Tuple[CatalogEntry, float]]:
        return search_by_name(
            self.catalog,
            name,
            limit=limit if limit is not None else self.settings.top_k,
            score_cutoff=self.settings.search_cutoff,
        )

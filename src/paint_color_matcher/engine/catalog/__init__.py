"""
catalog.
=======

Does: Build the immutable paint catalog (payload adapters, grouping, canonical
      names), derive filtered/sorted views, and match query colors against them.
Used By: service facade, CLI, tests.
"""

from .types import (
    BuildStats,
    Catalog,
    CatalogEntry,
    Match,
    MatchResult,
    RawEntry,
    SelectorOptions,
)
from .sources import (
    CatalogPayload,
    FlatPayload,
    NestedPayload,
    detect_payload,
    read_source,
)
from .builder import (
    build_catalog,
    flatten,
    format_variant,
    group_by_hex,
    make_entry,
    pick_canonical_name,
)
from .filter_sort import ALL, SortKey, filter_entries, selector_options, sort_entries
from .matcher import closest, match, nearest
from .search import search_by_name

__all__ = [
    # types
    "RawEntry",
    "CatalogEntry",
    "Catalog",
    "BuildStats",
    "Match",
    "MatchResult",
    "SelectorOptions",
    # sources
    "FlatPayload",
    "NestedPayload",
    "CatalogPayload",
    "detect_payload",
    "read_source",
    # builder
    "flatten",
    "group_by_hex",
    "pick_canonical_name",
    "format_variant",
    "make_entry",
    "build_catalog",
    # views
    "ALL",
    "SortKey",
    "filter_entries",
    "sort_entries",
    "selector_options",
    # matching
    "closest",
    "nearest",
    "match",
    "search_by_name",
]

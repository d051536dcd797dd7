"""
filter_sort.py

Does:
    Derive catalog views: filter by family / product type / brand ("all" or None
    means unconstrained) and order by hue, name, brand, type or hex, always with
    the canonical name as the last tie-break.
Returns:
    filter_entries() / sort_entries() → list[CatalogEntry];
    selector_options() → SelectorOptions (distinct sorted values).
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from paint_color_matcher.engine.catalog.types import CatalogEntry, SelectorOptions

__all__ = ["SortKey", "ALL", "filter_entries", "sort_entries", "selector_options"]

ALL = "all"


class SortKey(str, Enum):
    HUE = "hue"
    NAME = "name"
    BRAND = "brand"
    TYPE = "type"
    HEX = "hex"

    def __str__(self) -> str:
        return self.value


def _unconstrained(value: Optional[str]) -> bool:
    return value is None or value == ALL


def filter_entries(
    entries: Iterable[CatalogEntry],
    family: Optional[str] = None,
    product_type: Optional[str] = None,
    brand: Optional[str] = None,
) -> List[CatalogEntry]:
    """
    Does: Keep entries whose family equals `family` and whose variants include
          `product_type` and `brand` (exact values, as listed by selector_options).
    Returns: Subsequence in input order.
    """
    out: List[CatalogEntry] = []
    for entry in entries:
        if not _unconstrained(family) and entry.family != family:
            continue
        if not _unconstrained(product_type) and product_type not in entry.product_types:
            continue
        if not _unconstrained(brand) and brand not in entry.brands:
            continue
        out.append(entry)
    return out


_SORT_KEYS: Dict[SortKey, Callable[[CatalogEntry], Tuple]] = {
    SortKey.HUE: lambda e: (e.hue, e.saturation, e.lightness, e.canonical_name),
    SortKey.NAME: lambda e: (e.canonical_name,),
    SortKey.BRAND: lambda e: (e.primary.brand, e.canonical_name),
    SortKey.TYPE: lambda e: (e.primary.product_type, e.canonical_name),
    SortKey.HEX: lambda e: (e.hex.value, e.canonical_name),
}


def sort_entries(
    entries: Iterable[CatalogEntry],
    key: Union[SortKey, str] = SortKey.HUE,
) -> List[CatalogEntry]:
    """
    Does: Stable ascending sort by `key`; achromatic entries carry hue 360
          and therefore land after every hued entry on a hue sort.
    Raises: ValueError for an unknown key.
    """
    try:
        sort_key = SortKey(key)
    except ValueError as e:
        raise ValueError(f"Unknown sort key '{key}'") from e
    return sorted(entries, key=_SORT_KEYS[sort_key])


def selector_options(entries: Iterable[CatalogEntry]) -> SelectorOptions:
    """Does: Collect distinct family, product type and brand values, each sorted."""
    families, types, brands = set(), set(), set()
    for entry in entries:
        families.add(entry.family.value)
        types.update(entry.product_types)
        brands.update(entry.brands)
    return SelectorOptions(
        families=tuple(sorted(families)),
        product_types=tuple(sorted(types)),
        brands=tuple(sorted(brands)),
    )

"""
types.py.

Does: Define the immutable catalog data model (raw variants, deduplicated
      entries, catalog snapshot, build counters, match results, selector values).
Used by: sources, builder, matcher, filter_sort, search, service facade.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, Mapping, Optional, Tuple

from paint_color_matcher.engine.color import ColorDescription, ColorFamily, HexColor, HexLike, parse_hex

__all__ = [
    "RawEntry",
    "CatalogEntry",
    "Catalog",
    "BuildStats",
    "Match",
    "MatchResult",
    "SelectorOptions",
]


@dataclass(frozen=True)
class RawEntry:
    """One brand's offering of one color."""

    hex: HexColor
    product_type: str
    brand: str
    display_name: str

    def dedup_key(self, *, strict_product_type: bool = False) -> Tuple[str, str, str]:
        """Lowercase (type, brand, name) triple; type keeps its case in strict mode."""
        product_type = self.product_type if strict_product_type else self.product_type.lower()
        return product_type, self.brand.lower(), self.display_name.lower()

    def sort_key(self) -> Tuple[str, str, str]:
        return self.product_type, self.brand, self.display_name


@dataclass(frozen=True)
class CatalogEntry:
    """The deduplicated, queryable unit: one per distinct canonical hex."""

    hex: HexColor
    variants: Tuple[RawEntry, ...]
    canonical_name: str
    family: ColorFamily
    hue: int
    saturation: float
    lightness: float
    rgb: Tuple[int, int, int]
    description: ColorDescription
    variant_display: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError(f"CatalogEntry {self.hex} needs at least one variant")
        if any(v.hex != self.hex for v in self.variants):
            raise ValueError(f"CatalogEntry {self.hex} holds variants of another hex")

    @property
    def product_types(self) -> Tuple[str, ...]:
        return tuple(sorted({v.product_type for v in self.variants}))

    @property
    def brands(self) -> Tuple[str, ...]:
        return tuple(sorted({v.brand for v in self.variants}))

    @property
    def primary(self) -> RawEntry:
        """First variant after the (type, brand, name) sort."""
        return self.variants[0]


@dataclass(frozen=True)
class BuildStats:
    """Counters of one catalog build, published with its snapshot; dropped records are not fatal."""

    records_seen: int = 0
    invalid_hex: int = 0
    malformed: int = 0
    duplicate_variants: int = 0

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> BuildStats:
        """Freeze a build-time tally (a Counter keyed by field name)."""
        return cls(**{f.name: counts.get(f.name, 0) for f in fields(cls)})

    @property
    def dropped(self) -> int:
        return self.invalid_hex + self.malformed


@dataclass(frozen=True)
class SelectorOptions:
    families: Tuple[str, ...] = ()
    product_types: Tuple[str, ...] = ()
    brands: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Catalog:
    """Immutable snapshot produced by one build; safe to share between readers."""

    entries: Tuple[CatalogEntry, ...] = ()
    stats: BuildStats = field(default_factory=BuildStats, compare=False)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def get(self, hex_value: HexLike) -> Optional[CatalogEntry]:
        """Exact lookup by canonical hex; invalid text raises InvalidHexFormat."""
        target = parse_hex(hex_value)
        for entry in self.entries:
            if entry.hex == target:
                return entry
        return None

    def selector_options(self) -> SelectorOptions:
        from paint_color_matcher.engine.catalog.filter_sort import selector_options

        return selector_options(self.entries)


@dataclass(frozen=True)
class Match:
    entry: CatalogEntry
    distance: float


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one query; `entry is None` means no candidate was available."""

    query: HexColor
    entry: Optional[CatalogEntry] = None
    distance: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.entry is not None

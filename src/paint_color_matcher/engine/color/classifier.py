"""
classifier.py

Does:
    Map HSL values to a coarse color family (8 hues + white/black/gray) and to a
    two-level descriptive label (base + shade) using the same thresholds.
Returns:
    classify_family() → ColorFamily; describe() → ColorDescription(base, shade).
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
from enum import Enum
from typing import NamedTuple, Optional

from paint_color_matcher.engine.color.color_space import HSL, hex_to_hsl
from paint_color_matcher.engine.color.constants import (
    ACHROMATIC_SATURATION,
    BLACK_LIGHTNESS,
    CHARCOAL_GRAY,
    FALLBACK_HUE_FAMILY,
    HUE_BANDS,
    LIGHT_GRAY,
    LIGHT_GRAY_LIGHTNESS,
    SHADE_BANDS,
    WHITE_LIGHTNESS,
)
from paint_color_matcher.engine.color.hex_color import HexLike

__all__ = [
    "ColorFamily",
    "ColorDescription",
    "ACHROMATIC_FAMILIES",
    "is_achromatic",
    "classify_family",
    "describe",
    "describe_hex",
]


class ColorFamily(str, Enum):
    WHITE = "White"
    BLACK = "Black"
    GRAY = "Gray"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    TEAL = "Teal"
    BLUE = "Blue"
    PURPLE = "Purple"
    MAGENTA = "Magenta"
    RED = "Red"

    def __str__(self) -> str:
        return self.value


ACHROMATIC_FAMILIES = frozenset({ColorFamily.WHITE, ColorFamily.BLACK, ColorFamily.GRAY})


class ColorDescription(NamedTuple):
    base: str
    shade: Optional[str] = None

    @property
    def label(self) -> str:
        return self.shade or self.base


# ── Helpers (private) ────────────────────────────────────────────────────────
def _achromatic_family(lightness: float) -> ColorFamily:
    if lightness > WHITE_LIGHTNESS:
        return ColorFamily.WHITE
    if lightness < BLACK_LIGHTNESS:
        return ColorFamily.BLACK
    return ColorFamily.GRAY


def _hue_family(hue: float) -> ColorFamily:
    for lower, upper, name in HUE_BANDS:
        if lower <= hue < upper:
            return ColorFamily(name)
    return ColorFamily(FALLBACK_HUE_FAMILY)


# ── Core API (public) ────────────────────────────────────────────────────────
def is_achromatic(hsl: HSL) -> bool:
    """Does: True when saturation is below the achromatic cutoff."""
    return hsl.saturation < ACHROMATIC_SATURATION


def classify_family(hsl: HSL) -> ColorFamily:
    """
    Does:
        Achromatic check first (white/black/gray by lightness), then hue bands
        [10,35) Orange … [295,330) Magenta; everything else is Red.
    Returns:
        ColorFamily.
    """
    if is_achromatic(hsl):
        return _achromatic_family(hsl.lightness)
    return _hue_family(hsl.hue)


def describe(hsl: HSL) -> ColorDescription:
    """
    Does:
        Build a base + shade label. Achromatic colors short-circuit to
        white / black / light gray / charcoal gray; hued colors pick the first
        lightness band of their family. The shade is dropped when it equals the base.
    Returns:
        ColorDescription(base, shade or None).
    """
    family = classify_family(hsl)
    base = family.value.lower()

    if family is ColorFamily.GRAY:
        shade = LIGHT_GRAY if hsl.lightness >= LIGHT_GRAY_LIGHTNESS else CHARCOAL_GRAY
        return ColorDescription(base, shade)
    if family in ACHROMATIC_FAMILIES:
        return ColorDescription(base)

    shade = base
    for bound, name in SHADE_BANDS[family.value]:
        if hsl.lightness < bound:
            shade = name
            break
    return ColorDescription(base, None if shade == base else shade)


def describe_hex(hex_value: HexLike) -> ColorDescription:
    """Does: Parse, convert and describe in one call."""
    return describe(hex_to_hsl(hex_value))

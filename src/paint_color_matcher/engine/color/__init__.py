"""
color.
=====

Does: Aggregate the color primitives: hex parsing, RGB/HSL conversion,
      family classification and shade descriptions.
Used By: Catalog builder, matcher, filter/sort, service facade.
Returns: Pure values and functions; no side effects.
"""

# ── Hex parsing ──────────────────────────────────────────────────────────────
from .hex_color import HexColor, HexLike, is_valid_hex, parse_hex

# ── Conversion ───────────────────────────────────────────────────────────────
from .color_space import HSL, hex_to_hsl, hex_to_rgb, rgb_to_hex, rgb_to_hsl

# ── Classification ───────────────────────────────────────────────────────────
from .classifier import (
    ACHROMATIC_FAMILIES,
    ColorDescription,
    ColorFamily,
    classify_family,
    describe,
    describe_hex,
    is_achromatic,
)

__all__ = [
    # hex
    "HexColor",
    "HexLike",
    "parse_hex",
    "is_valid_hex",
    # conversion
    "HSL",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hex_to_hsl",
    # classification
    "ColorFamily",
    "ColorDescription",
    "ACHROMATIC_FAMILIES",
    "is_achromatic",
    "classify_family",
    "describe",
    "describe_hex",
]

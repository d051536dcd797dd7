"""
color_space.py
==============

Does: Convert canonical hex colors to RGB and RGB to HSL (integer-degree hue).
Used By: classifier, catalog builder (precomputed HSL per entry), matcher.
Returns: (r, g, b) int tuples and HSL(hue, saturation, lightness) named tuples.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import webcolors

from paint_color_matcher.engine.color.hex_color import HexLike, parse_hex
from paint_color_matcher.engine.color.utils import RGB, validate_rgb

__all__ = ["HSL", "hex_to_rgb", "rgb_to_hex", "rgb_to_hsl", "hex_to_hsl"]
__docformat__ = "google"


class HSL(NamedTuple):
    hue: int            # degrees, 0..359
    saturation: float   # 0..1
    lightness: float    # 0..1


def hex_to_rgb(hex_value: HexLike) -> RGB:
    """Does: Split '#rrggbb' into three base-16 byte values."""
    rgb = webcolors.hex_to_rgb(parse_hex(hex_value).value)
    return rgb.red, rgb.green, rgb.blue


def rgb_to_hex(rgb: RGB) -> str:
    """Does: Format an RGB triple as canonical '#rrggbb'."""
    validate_rgb(rgb)
    return webcolors.rgb_to_hex(tuple(rgb))


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Does:
        Standard RGB → HSL conversion. Channels are normalized to [0, 1],
        lightness is the max/min midpoint, achromatic inputs get hue 0 and
        saturation 0, and hue comes from the 6-branch formula on the max channel.
    Returns:
        HSL with hue rounded half-up to an integer degree and wrapped into [0, 360).
    """
    validate_rgb(rgb)
    r, g, b = (c / 255 for c in rgb)
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2

    if hi == lo:
        return HSL(0, 0.0, lightness)

    delta = hi - lo
    saturation = delta / (1 - abs(2 * lightness - 1))

    if hi == r:
        sector = ((g - b) / delta) % 6
    elif hi == g:
        sector = (b - r) / delta + 2
    else:
        sector = (r - g) / delta + 4

    hue = math.floor(sector * 60 + 0.5) % 360
    return HSL(int(hue), saturation, lightness)


def hex_to_hsl(hex_value: HexLike) -> HSL:
    """Does: Shortcut for rgb_to_hsl(hex_to_rgb(hex_value))."""
    return rgb_to_hsl(hex_to_rgb(hex_value))

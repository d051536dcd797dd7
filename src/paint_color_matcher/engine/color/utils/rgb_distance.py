"""
rgb_distance.py
===============

Does: Validate RGB triples and compute Euclidean distances in sRGB space.
Used By: Matcher (closest/nearest), ColorSpace (rgb_to_hex bounds check).
Returns: Distances (float).
"""

from __future__ import annotations

import math
from typing import Tuple

__all__ = [
    "RGB",
    "validate_rgb",
    "rgb_distance",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]


def validate_rgb(rgb: RGB) -> None:
    """Does: Raise ValueError unless rgb is three ints in 0..255."""
    if len(rgb) != 3:
        raise ValueError(f"RGB must have 3 channels: {rgb}")
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {rgb}")


def rgb_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute Euclidean distance in sRGB space."""
    validate_rgb(rgb1); validate_rgb(rgb2)
    dr = rgb1[0] - rgb2[0]
    dg = rgb1[1] - rgb2[1]
    db = rgb1[2] - rgb2[2]
    return math.sqrt(dr * dr + dg * dg + db * db)

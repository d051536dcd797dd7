# constants.py
# ============

"""
constants.
=========

Does: Define the immutable thresholds used to classify colors into families
      and descriptive shades (achromatic cutoffs, hue bands, lightness bands).
Used By: classifier (family + describe), catalog builder (hue sentinel).
Returns: Pure data structures only (no side effects).

Every band is half-open: lower bound inclusive, upper bound exclusive.
"""

# ── 1) Achromatic cutoffs ────────────────────────────────────────────────────
ACHROMATIC_SATURATION = 0.08   # saturation < this → white/black/gray
WHITE_LIGHTNESS = 0.92         # lightness > this → white
BLACK_LIGHTNESS = 0.12         # lightness < this → black
LIGHT_GRAY_LIGHTNESS = 0.6     # lightness >= this → light gray, else charcoal

# Sort sentinel for achromatic entries (after every hued color on hue ascending)
ACHROMATIC_HUE = 360


# ── 2) Hue bands (degrees) ───────────────────────────────────────────────────
# (lower, upper, family name); anything outside these bands is red.
HUE_BANDS: tuple[tuple[int, int, str], ...] = (
    (10, 35, "Orange"),
    (35, 70, "Yellow"),
    (70, 165, "Green"),
    (165, 200, "Teal"),
    (200, 250, "Blue"),
    (250, 295, "Purple"),
    (295, 330, "Magenta"),
)
FALLBACK_HUE_FAMILY = "Red"


# ── 3) Shade bands per family (lightness) ────────────────────────────────────
# First band whose bound is > lightness wins; the last bound covers the rest.
_TOP = 1.01

SHADE_BANDS: dict[str, tuple[tuple[float, str], ...]] = {
    "Red": ((0.25, "maroon"), (0.45, "crimson"), (0.7, "red"), (_TOP, "rose")),
    "Orange": ((0.4, "burnt orange"), (_TOP, "tangerine")),
    "Yellow": ((0.35, "olive"), (0.5, "mustard"), (0.8, "lemon yellow"), (_TOP, "butter yellow")),
    "Green": (
        (0.2, "midnight green"),
        (0.4, "forest green"),
        (0.7, "spring green"),
        (_TOP, "mint green"),
    ),
    "Teal": ((0.3, "deep teal"), (0.7, "teal"), (_TOP, "aqua")),
    "Blue": ((0.25, "navy blue"), (0.45, "royal blue"), (0.7, "blue"), (_TOP, "sky blue")),
    "Purple": ((0.3, "aubergine"), (0.7, "purple"), (_TOP, "lavender")),
    "Magenta": ((0.3, "plum"), (0.7, "magenta"), (_TOP, "orchid")),
}

LIGHT_GRAY = "light gray"
CHARCOAL_GRAY = "charcoal gray"

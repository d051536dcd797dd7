# tests/test_color_space.py
"""
color_space tests
=================

Does: Check hex → RGB splitting, RGB → HSL (integer hue, wrap at 360),
      achromatic handling and RGB bounds validation.
"""

from __future__ import annotations

import importlib

import pytest

cs = importlib.import_module("paint_color_matcher.engine.color.color_space")


def test_hex_to_rgb_splits_byte_pairs():
    assert cs.hex_to_rgb("#ff6b4a") == (255, 107, 74)
    assert cs.hex_to_rgb("0F0") == (0, 255, 0)


def test_rgb_to_hex_roundtrip_and_bounds():
    assert cs.rgb_to_hex((255, 0, 170)) == "#ff00aa"
    with pytest.raises(ValueError):
        cs.rgb_to_hex((256, 0, 0))


@pytest.mark.parametrize(
    "rgb,hue",
    [
        ((255, 0, 0), 0),
        ((255, 255, 0), 60),
        ((0, 255, 0), 120),
        ((0, 255, 255), 180),
        ((0, 0, 255), 240),
        ((255, 0, 255), 300),
    ],
)
def test_primary_and_secondary_hues(rgb, hue):
    hsl = cs.rgb_to_hsl(rgb)
    assert hsl.hue == hue
    assert hsl.saturation == pytest.approx(1.0)
    assert hsl.lightness == pytest.approx(0.5)


def test_coral_hue_is_rounded_to_integer_degree():
    # 60 * 33/181 = 10.94 → 11
    hsl = cs.hex_to_hsl("#ff6b4a")
    assert hsl.hue == 11
    assert isinstance(hsl.hue, int)
    assert hsl.saturation == pytest.approx(1.0)
    assert hsl.lightness == pytest.approx(329 / 510)


def test_hue_just_below_360_wraps_to_zero():
    # (255, 0, 1) → 359.76° → rounds to 360 → wraps to 0
    assert cs.rgb_to_hsl((255, 0, 1)).hue == 0


@pytest.mark.parametrize("value", [0, 128, 255])
def test_achromatic_has_zero_hue_and_saturation(value):
    hsl = cs.rgb_to_hsl((value, value, value))
    assert hsl.hue == 0
    assert hsl.saturation == 0.0
    assert hsl.lightness == pytest.approx(value / 255)


def test_rgb_to_hsl_rejects_out_of_range():
    with pytest.raises(ValueError):
        cs.rgb_to_hsl((-1, 0, 0))

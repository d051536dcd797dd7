# tests/test_color_utils.py
"""
rgb_distance tests
==================

Does: Validate Euclidean sRGB distance, bounds checks and the package exports.
"""

from __future__ import annotations

import importlib

import pytest

rd = importlib.import_module("paint_color_matcher.engine.color.utils.rgb_distance")


def test_rgb_distance_zero_and_max():
    assert rd.rgb_distance((0, 0, 0), (0, 0, 0)) == 0.0
    expected = (3 * (255 ** 2)) ** 0.5
    assert rd.rgb_distance((0, 0, 0), (255, 255, 255)) == pytest.approx(expected, rel=1e-9)


def test_rgb_distance_is_symmetric():
    a, b = (10, 200, 30), (40, 20, 250)
    assert rd.rgb_distance(a, b) == rd.rgb_distance(b, a)


def test_rgb_distance_bounds_validation():
    with pytest.raises(ValueError):
        rd.rgb_distance((256, 0, 0), (0, 0, 0))
    with pytest.raises(ValueError):
        rd.rgb_distance((-1, 0, 0), (0, 0, 0))
    with pytest.raises(ValueError):
        rd.validate_rgb((1, 2))


def test_utils_package_exports_distance_helpers_only():
    pkg = importlib.import_module("paint_color_matcher.engine.color.utils")
    assert sorted(pkg.__all__) == ["RGB", "rgb_distance", "validate_rgb"]
    assert not hasattr(rd, "is_within_rgb_margin")

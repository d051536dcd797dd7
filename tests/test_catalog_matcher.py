# tests/test_catalog_matcher.py
"""
matcher tests
=============

Does: Check nearest-color lookup: empty candidates, exact hits, distance
      monotonicity on grays, first-wins ties, ranked nearest() lists.
"""

from __future__ import annotations

import importlib

import pytest

builder = importlib.import_module("paint_color_matcher.engine.catalog.builder")
matcher = importlib.import_module("paint_color_matcher.engine.catalog.matcher")
errors = importlib.import_module("paint_color_matcher.engine.errors")


def entries(*hexes):
    payload = [
        {"hex": h, "type": "Latex", "brand": "Acme", "colorName": f"Color {i}"}
        for i, h in enumerate(hexes)
    ]
    return list(builder.build_catalog(payload).entries)


def test_empty_candidates_return_none():
    assert matcher.closest("#ffffff", []) is None
    result = matcher.match("#ffffff", [])
    assert result.found is False
    assert result.entry is None and result.distance is None
    assert result.query.value == "#ffffff"


def test_exact_hex_returns_that_entry_at_distance_zero():
    cands = entries("#ff0000", "#00ff00", "#0000ff")
    result = matcher.match("00FF00", cands)
    assert result.entry is cands[1]
    assert result.distance == 0.0


def test_dark_gray_query_is_closest_to_black():
    cands = entries("#000000", "#808080", "#ffffff")
    assert matcher.closest("#202020", cands).hex.value == "#000000"


def test_equal_distance_keeps_first_in_iteration_order():
    a, b = entries("#000000", "#020202")
    assert matcher.closest("#010101", [a, b]) is a
    assert matcher.closest("#010101", [b, a]) is b


def test_accepts_any_iterable():
    cands = entries("#ff0000", "#0000ff")
    assert matcher.closest("#1010f0", (e for e in cands)) is cands[1]


def test_invalid_query_raises():
    with pytest.raises(errors.InvalidHexFormat):
        matcher.closest("#12", entries("#000000"))


def test_nearest_ranks_by_distance_with_stable_ties():
    cands = entries("#ffffff", "#000000", "#020202", "#808080")
    ranked = matcher.nearest("#010101", cands, k=3)
    assert [m.entry.hex.value for m in ranked] == ["#000000", "#020202", "#808080"]
    assert ranked[0].distance == pytest.approx(3 ** 0.5)


def test_nearest_non_positive_k():
    assert matcher.nearest("#000", entries("#000000"), k=0) == []

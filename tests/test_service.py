# tests/test_service.py
"""
Service facade tests
====================

Does: Check snapshot publication, the distinct failure signals
      (InvalidHexFormat / CatalogNotLoaded / NoMatch / CatalogUnavailable),
      views, selectors, nearest and search through PaintCatalogService.
"""

from __future__ import annotations

import importlib
import json
import os

import pytest

service_mod = importlib.import_module("paint_color_matcher.engine.service")
errors = importlib.import_module("paint_color_matcher.engine.errors")
utils = importlib.import_module("paint_color_matcher.engine.general.utils")

PAYLOAD = [
    {"hex": "#ff6b4a", "type": "Latex", "brand": "Acme", "colorName": "Sunset"},
    {"hex": "#2e8b57", "type": "Latex", "brand": "Acme", "colorName": "Sea Green"},
    {"hex": "#1e3a8a", "type": "Matte", "brand": "Brightwall", "colorName": "Harbor Night"},
    {"hex": "#f5f5f5", "type": "Matte", "brand": "Brightwall", "colorName": "Cloud"},
]


@pytest.fixture
def service():
    return service_mod.PaintCatalogService(utils.Settings())


@pytest.fixture
def loaded(service):
    service.load(PAYLOAD)
    return service


# ── Before load ──────────────────────────────────────────────────────────────
def test_not_loaded_is_distinct_from_invalid_hex(service):
    assert service.loaded is False
    with pytest.raises(errors.CatalogNotLoaded):
        _ = service.catalog
    with pytest.raises(errors.CatalogNotLoaded):
        service.match("#ffffff")
    with pytest.raises(errors.InvalidHexFormat):
        service.match("not-a-color")


# ── Loading ──────────────────────────────────────────────────────────────────
def test_load_publishes_new_snapshot(service):
    first = service.load(PAYLOAD)
    assert service.catalog is first and len(first) == 4
    second = service.load(PAYLOAD[:1])
    assert service.catalog is second
    assert len(first) == 4  # old snapshot untouched


def test_failed_load_keeps_previous_snapshot(loaded):
    before = loaded.catalog
    with pytest.raises(errors.CatalogUnavailable):
        loaded.load({"not": "a list"})
    assert loaded.catalog is before


def test_load_source_without_configured_source(service):
    with pytest.raises(errors.CatalogUnavailable):
        service.load_source()
    assert service.loaded is False


def test_load_source_reads_file_from_settings(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(PAYLOAD), encoding="utf-8")
    svc = service_mod.PaintCatalogService(utils.Settings(catalog_source=str(path)))
    assert len(svc.load_source()) == 4


def test_load_source_rebuilds_from_rewritten_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([dict(PAYLOAD[0], colorName="Old")]), encoding="utf-8")
    st = os.stat(path)
    svc = service_mod.PaintCatalogService(utils.Settings(catalog_source=str(path)))
    assert [e.canonical_name for e in svc.load_source()] == ["Old"]
    path.write_text(json.dumps([dict(PAYLOAD[0], colorName="New")]), encoding="utf-8")
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns))  # horodatage inchangé
    assert [e.canonical_name for e in svc.load_source()] == ["New"]


def test_load_source_missing_file_leaves_catalog_unset(service, tmp_path):
    with pytest.raises(errors.CatalogUnavailable):
        service.load_source(tmp_path / "missing.json")
    assert service.loaded is False


def test_strict_product_type_setting_is_applied():
    payload = [
        {"hex": "#123", "type": "Matte", "brand": "Acme", "colorName": "Ink"},
        {"hex": "#123", "type": "matte", "brand": "Acme", "colorName": "Ink"},
    ]
    lenient = service_mod.PaintCatalogService(utils.Settings()).load(payload)
    strict = service_mod.PaintCatalogService(utils.Settings(strict_product_type=True)).load(payload)
    assert len(lenient.entries[0].variants) == 1
    assert len(strict.entries[0].variants) == 2


# ── Queries ──────────────────────────────────────────────────────────────────
def test_match_end_to_end(loaded):
    result = loaded.match("ff6b4b")
    assert result.found
    assert result.entry.canonical_name == "Sunset"
    assert result.entry.family == "Orange"
    assert result.distance == pytest.approx(1.0)
    assert result.query.value == "#ff6b4b"


def test_empty_view_is_no_match_not_error(loaded):
    result = loaded.match("#ff6b4a", family="Purple")
    assert result.found is False and result.entry is None


def test_match_respects_filters(loaded):
    result = loaded.match("#ff6b4a", brand="Brightwall")
    assert result.entry.brands == ("Brightwall",)


def test_view_uses_default_sort_from_settings():
    svc = service_mod.PaintCatalogService(utils.Settings(default_sort="name"))
    svc.load(PAYLOAD)
    assert [e.canonical_name for e in svc.view()] == ["Cloud", "Harbor Night", "Sea Green", "Sunset"]
    assert [e.canonical_name for e in svc.view(sort="hue")][-1] == "Cloud"


def test_selectors_full_and_active(loaded):
    full = loaded.selectors()
    assert full.brands == ("Acme", "Brightwall")
    active = loaded.selectors(active=True, family="Green")
    assert active.families == ("Green",)
    assert active.brands == ("Acme",)


def test_nearest_defaults_to_top_k(loaded):
    assert len(loaded.nearest("#000000")) == 4
    ranked = loaded.nearest("#000000", k=2)
    assert [m.entry.canonical_name for m in ranked] == ["Harbor Night", "Sea Green"]


def test_nearest_explicit_zero_is_empty(loaded):
    assert loaded.nearest("#000000", k=0) == []
    assert loaded.search("harbor night", limit=0) == []


def test_search(loaded):
    assert loaded.search("harbour night")[0][0].canonical_name == "Harbor Night"

"""
settings.py.
===========

Does: Resolve runtime settings (catalog source, HTTP timeout, dedup strictness,
      default sort, result sizes) from env vars, optionally overlaid by a JSON file.
Returns: Settings (frozen dataclass) via load_settings().
Used by: service facade and the CLI demo.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .load_config import load_config

logger = logging.getLogger(__name__)

__all__ = ["Settings", "load_settings", "settings_from_env"]

_TRUE = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE


def _check_sort(value: str) -> str:
    """Reject sort names the catalog views cannot apply."""
    from paint_color_matcher.engine.catalog.filter_sort import SortKey

    allowed = [k.value for k in SortKey]
    if value not in allowed:
        raise ValueError(f"default_sort: expected one of {allowed}, got {value!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Engine knobs; every field has an env override (PAINT_MATCHER_*)."""

    catalog_source: str | None = None
    request_timeout: float = 10.0
    strict_product_type: bool = False
    default_sort: str = "hue"
    top_k: int = 5
    search_cutoff: float = 70.0


# ── Env layer ────────────────────────────────────────────────────────────────
def settings_from_env() -> Settings:
    """Does: Build Settings from PAINT_MATCHER_* env vars, defaults elsewhere."""
    base = Settings()
    try:
        return Settings(
            catalog_source=os.getenv("PAINT_MATCHER_CATALOG") or base.catalog_source,
            request_timeout=float(os.getenv("PAINT_MATCHER_TIMEOUT", base.request_timeout)),
            strict_product_type=_env_bool("PAINT_MATCHER_STRICT_TYPES", base.strict_product_type),
            default_sort=_check_sort(os.getenv("PAINT_MATCHER_SORT", base.default_sort).strip().lower()),
            top_k=int(os.getenv("PAINT_MATCHER_TOP_K", base.top_k)),
            search_cutoff=float(os.getenv("PAINT_MATCHER_SEARCH_CUTOFF", base.search_cutoff)),
        )
    except ValueError as e:
        raise ValueError(f"Invalid PAINT_MATCHER_* environment value: {e}") from e


# ── File layer ───────────────────────────────────────────────────────────────
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "catalog_source": (str, type(None)),
    "request_timeout": (int, float),
    "strict_product_type": (bool,),
    "default_sort": (str,),
    "top_k": (int,),
    "search_cutoff": (int, float),
}


def _validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    """Keep known keys only; reject wrongly typed values."""
    known = {f.name for f in fields(Settings)}
    out: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown settings key %r", key)
            continue
        expected = _FIELD_TYPES[key]
        # bool is an int subclass; keep it out of numeric fields
        if not isinstance(value, expected) or (isinstance(value, bool) and bool not in expected):
            raise TypeError(f"{key}: expected {expected}, got {type(value).__name__}")
        if key == "default_sort":
            _check_sort(value)
        out[key] = value
    return out


def load_settings(
    file: str | os.PathLike[str] | None = None,
    *,
    base_dir: Path | None = None,
) -> Settings:
    """Does: Env settings, overlaid by the JSON file `file` (under `base_dir` if given)."""
    settings = settings_from_env()
    if file is None:
        return settings
    overrides = load_config(
        file, mode="validated_dict", base_dir=base_dir, validator=_validate_settings
    )
    settings = replace(settings, **overrides)
    logger.debug("Settings resolved: %s", settings)
    return settings

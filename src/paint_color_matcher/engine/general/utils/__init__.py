# paint_color_matcher/engine/general/utils/__init__.py
"""

Does: Provide config loading, runtime settings and lightweight debug logging utilities.
Returns: Public API via load_config, load_settings and debug/reload_topics.
Used by: Catalog sources, service facade, CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    load_config,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)
from .settings import (
    Settings,
    load_settings,
    settings_from_env,
)

__all__ = [
    # Config loading
    "load_config",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "Settings",
    "load_settings",
    "settings_from_env",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]

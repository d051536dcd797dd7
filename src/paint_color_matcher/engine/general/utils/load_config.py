# src/paint_color_matcher/engine/general/utils/load_config.py

"""Read one JSON/JSON5 file (settings overlay or catalog payload).

Modes:
- "raw"            : the parsed document, untouched (catalog payloads)
- "validated_dict" : a JSON object passed through `validator` (settings files)

Every call reads the file from disk; results are never cached, so a rewritten
file is always seen by the next call.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_JSON_SUFFIXES = (".json", ".json5")

logger = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """The file is missing or unreadable."""


class ConfigParseError(ValueError):
    """The file is not valid JSON/JSON5, or its validator rejected it."""


class ConfigTypeError(TypeError):
    """The document parsed but is not the JSON type the mode needs."""


def _resolve(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """`file` relative to `base_dir` (if given), with `.json` appended when no JSON suffix."""
    name = os.fspath(file)
    if not name.endswith(_JSON_SUFFIXES):
        name = f"{name}.json"
    path = Path(name).expanduser()
    return Path(base_dir) / path if base_dir is not None else path


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load `file`, parse it and coerce it by mode.

    Files ending in ``.json5`` are always parsed with comment support.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"load_config: unsupported mode {mode!r}")

    path = _resolve(file, base_dir)
    parse = json5.load if allow_comments or path.suffix == ".json5" else json.load

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = parse(f)
    except ValueError as e:  # json.JSONDecodeError, json5 errors, bad encoding
        raise ConfigParseError(f"{path}: not valid JSON ({e})") from e
    except OSError as e:
        raise ConfigFileNotFound(f"{path}: unreadable ({e})") from e
    logger.debug("Config loaded: %s (mode=%s)", path, mode)

    if mode == "raw":
        return data

    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: validated_dict needs a JSON object, got {type(data).__name__}"
        )
    if validator is not None:
        try:
            data = validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: rejected by validator: {e}") from e
    return data

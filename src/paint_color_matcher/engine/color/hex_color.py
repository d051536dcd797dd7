"""
hex_color.py
============

Does: Validate and canonicalize textual hex colors ('#rrggbb', lowercase,
      3-digit shorthand expanded by digit duplication).
Used By: ColorSpace, catalog sources/builder, matcher, service facade.
Returns: HexColor values; parse_hex raises InvalidHexFormat on bad input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import webcolors

from paint_color_matcher.engine.errors import InvalidHexFormat

__all__ = ["HexColor", "HexLike", "parse_hex", "is_valid_hex"]
__docformat__ = "google"


def _canonicalize(text: object) -> str:
    """Does: Return '#rrggbb' for any accepted spelling or raise InvalidHexFormat."""
    if isinstance(text, HexColor):
        return text.value
    if not isinstance(text, str):
        raise InvalidHexFormat(text)
    candidate = text.strip()
    if not candidate:
        raise InvalidHexFormat(text)
    if not candidate.startswith("#"):
        candidate = f"#{candidate}"
    try:
        # webcolors handles the 3/6 digit check, expansion and lowercasing
        return webcolors.normalize_hex(candidate)
    except ValueError as e:
        raise InvalidHexFormat(text) from e


@dataclass(frozen=True)
class HexColor:
    """A 24-bit RGB color held in canonical '#rrggbb' form.

    Constructing from any accepted spelling canonicalizes it, so
    ``HexColor("F0A") == HexColor("#ff00aa")``.
    """

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _canonicalize(self.value))

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """Channel triple, each 0..255."""
        digits = self.value[1:]
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)

    def upper(self) -> str:
        """Display form '#RRGGBB'."""
        return self.value.upper()

    def __str__(self) -> str:
        return self.value


HexLike = Union[HexColor, str]


def parse_hex(text: object) -> HexColor:
    """Does: Parse free text ('#FFF', 'ff6b4a', ' #Ab1 ') into a HexColor.

    Raises:
        InvalidHexFormat: empty/None input, wrong length, or non-hex characters.
    """
    if isinstance(text, HexColor):
        return text
    return HexColor(_canonicalize(text))


def is_valid_hex(text: object) -> bool:
    """Does: True iff parse_hex would succeed."""
    try:
        _canonicalize(text)
    except InvalidHexFormat:
        return False
    return True

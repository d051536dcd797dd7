"""
utils package.
=============

Does: Provide RGB validation and distance helpers shared by color conversion and matching.
"""

from .rgb_distance import (
    RGB,
    rgb_distance,
    validate_rgb,
)

__all__ = [
    "RGB",
    "rgb_distance",
    "validate_rgb",
]

__docformat__ = "google"

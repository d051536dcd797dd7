"""
paint_color_matcher
===================

Does: Root package initializer for the paint color matching engine.
Returns: Exposes the `engine` subpackage (color math, catalog build, matching).
Used by: All higher-level imports starting from `paint_color_matcher.*`.
"""

__all__: list[str] = []
__docformat__ = "google"

"""
general.
=======

Does: Hold domain-agnostic helpers (logging, config loading, settings).
"""

__all__: list[str] = []
__docformat__ = "google"

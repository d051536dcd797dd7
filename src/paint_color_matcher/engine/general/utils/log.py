"""
log.py.

Does: Topic-gated debug logger controlled by PAINT_MATCHER_DEBUG_TOPICS
      (comma-separated topics or 'all').
Returns: Prints timestamped lines with topic + level. Used across catalog/match/source code.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "is_enabled"]

ENV_VAR = "PAINT_MATCHER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable PAINT_MATCHER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_enabled(topic: str) -> bool:
    """Does: Tell whether debug lines for `topic` are currently printed."""
    if not _DEBUG_TOPICS:
        return False
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "catalog",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via PAINT_MATCHER_DEBUG_TOPICS.
    """
    if not is_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)

"""Reading-time estimate for markdown bodies."""

from __future__ import annotations

import math
import re

DEFAULT_WORDS_PER_MINUTE = 200

_WORD = re.compile(r"\S+")


def count_words(text: str) -> int:
    """Number of whitespace-separated tokens in *text*."""
    return sum(1 for _ in _WORD.finditer(text))


def estimate_reading_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> str:
    """Human-readable reading duration, e.g. ``"5 min read"``.

    Minutes are rounded to two decimals before taking the ceiling, so a
    body a hair over a whole minute does not jump to the next one. More
    words never yield a shorter estimate.

    Examples:
        >>> estimate_reading_time("")
        '0 min read'
        >>> estimate_reading_time("word " * 200)
        '1 min read'
        >>> estimate_reading_time("word " * 300)
        '2 min read'
    """
    if words_per_minute <= 0:
        msg = f"words_per_minute must be positive, got {words_per_minute}"
        raise ValueError(msg)
    minutes = math.ceil(round(count_words(text) / words_per_minute, 2))
    return f"{minutes} min read"

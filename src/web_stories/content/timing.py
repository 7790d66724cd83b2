"""Reading-time estimates for slides."""

from __future__ import annotations

from ..constants import (
    DURATION_BASE_SECONDS,
    DURATION_MAX_SECONDS,
    DURATION_MIN_SECONDS,
    DURATION_PER_WORD_SECONDS,
)


def count_words(text: str | None) -> int:
    """Count whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())


def estimate_duration(text: str | None) -> float:
    """Seconds a slide showing ``text`` stays on screen.

    3s base plus 0.1s per word, clamped to [3, 8].
    """
    # Rounded so 6 words is exactly 3.6s
    seconds = round(DURATION_BASE_SECONDS + count_words(text) * DURATION_PER_WORD_SECONDS, 3)
    return min(max(seconds, DURATION_MIN_SECONDS), DURATION_MAX_SECONDS)

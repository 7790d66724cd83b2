"""Limit constants for story generation.

MODIFICATION GUIDE:
------------------
- WORDS_PER_SLIDE: Changing it moves chunk boundaries for every story
- DURATION_* values: Reading-time model, keep MIN <= MAX
- MAX_SLIDES_DEFAULT: Viewer performance ceiling
"""

from typing import Final

# =============================================================================
# SEGMENTATION
# =============================================================================

WORDS_PER_SLIDE: Final[int] = 50
"""Word budget for a single content chunk."""

MAX_SLIDES_DEFAULT: Final[int] = 10
"""Default ceiling on slides per story (title and CTA included)."""

TITLE_MAX_LENGTH: Final[int] = 100
"""First lines this long or longer are never guessed as a chunk title."""


# =============================================================================
# EXCERPT
# =============================================================================

EXCERPT_MAX_LENGTH: Final[int] = 160
"""Maximum length of a generated excerpt."""

EXCERPT_ELLIPSIS: Final[str] = "..."
"""Marker appended when the excerpt falls back to a hard cut."""


# =============================================================================
# TIMING (seconds)
# =============================================================================

DURATION_BASE_SECONDS: Final[float] = 3.0
DURATION_PER_WORD_SECONDS: Final[float] = 0.1
DURATION_MIN_SECONDS: Final[float] = 3.0
DURATION_MAX_SECONDS: Final[float] = 8.0

TITLE_SLIDE_DURATION: Final[float] = 6.0
CTA_SLIDE_DURATION: Final[float] = 5.0

"""Global constants package for the story engine.

PACKAGE STRUCTURE:
-----------------
- limits.py   : Word budgets, slide counts, durations, excerpt length
- markup.py   : AMP runtime URLs, validator markers, fixed slide text

USAGE EXAMPLES:
--------------
    from web_stories.constants import WORDS_PER_SLIDE, MAX_SLIDES_DEFAULT
    from web_stories.constants import AMP_RUNTIME_URL
"""

from .limits import (
    WORDS_PER_SLIDE,
    MAX_SLIDES_DEFAULT,
    TITLE_MAX_LENGTH,
    EXCERPT_MAX_LENGTH,
    EXCERPT_ELLIPSIS,
    DURATION_BASE_SECONDS,
    DURATION_PER_WORD_SECONDS,
    DURATION_MIN_SECONDS,
    DURATION_MAX_SECONDS,
    TITLE_SLIDE_DURATION,
    CTA_SLIDE_DURATION,
)
from .markup import (
    AMP_RUNTIME_URL,
    AMP_STORY_URL,
    AMP_STORY_AUTO_ADS_URL,
    AMP_BOILERPLATE_CSS,
    AMP_BOILERPLATE_NOSCRIPT_CSS,
    DEFAULT_AD_SLOT,
    DEFAULT_CTA_TEXT,
    DEFAULT_CTA_URL,
    CTA_TITLE_FORMAT,
    CTA_SUBTITLE,
    CTA_ANIMATION,
    GRADIENT_BASE_ANGLE,
    GRADIENT_VARIANT_ANGLES,
    AMP_ANIMATE_IN_PRESETS,
    ANIMATION_ALIASES,
)

__all__ = [
    # Limits
    "WORDS_PER_SLIDE",
    "MAX_SLIDES_DEFAULT",
    "TITLE_MAX_LENGTH",
    "EXCERPT_MAX_LENGTH",
    "EXCERPT_ELLIPSIS",
    "DURATION_BASE_SECONDS",
    "DURATION_PER_WORD_SECONDS",
    "DURATION_MIN_SECONDS",
    "DURATION_MAX_SECONDS",
    "TITLE_SLIDE_DURATION",
    "CTA_SLIDE_DURATION",
    # Markup
    "AMP_RUNTIME_URL",
    "AMP_STORY_URL",
    "AMP_STORY_AUTO_ADS_URL",
    "AMP_BOILERPLATE_CSS",
    "AMP_BOILERPLATE_NOSCRIPT_CSS",
    "DEFAULT_AD_SLOT",
    "DEFAULT_CTA_TEXT",
    "DEFAULT_CTA_URL",
    "CTA_TITLE_FORMAT",
    "CTA_SUBTITLE",
    "CTA_ANIMATION",
    "GRADIENT_BASE_ANGLE",
    "GRADIENT_VARIANT_ANGLES",
    "AMP_ANIMATE_IN_PRESETS",
    "ANIMATION_ALIASES",
]

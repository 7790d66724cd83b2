"""AMP markup constants and fixed slide copy."""

from typing import Final

# =============================================================================
# AMP RUNTIME
# =============================================================================

AMP_RUNTIME_URL: Final[str] = "https://cdn.ampproject.org/v0.js"
AMP_STORY_URL: Final[str] = "https://cdn.ampproject.org/v0/amp-story-1.0.js"
AMP_STORY_AUTO_ADS_URL: Final[str] = "https://cdn.ampproject.org/v0/amp-story-auto-ads-0.1.js"

AMP_BOILERPLATE_CSS: Final[str] = (
    "body{-webkit-animation:-amp-start 8s steps(1,end) 0s 1 normal both;"
    "-moz-animation:-amp-start 8s steps(1,end) 0s 1 normal both;"
    "-ms-animation:-amp-start 8s steps(1,end) 0s 1 normal both;"
    "animation:-amp-start 8s steps(1,end) 0s 1 normal both}"
    "@-webkit-keyframes -amp-start{from{visibility:hidden}to{visibility:visible}}"
    "@-moz-keyframes -amp-start{from{visibility:hidden}to{visibility:visible}}"
    "@-ms-keyframes -amp-start{from{visibility:hidden}to{visibility:visible}}"
    "@-o-keyframes -amp-start{from{visibility:hidden}to{visibility:visible}}"
    "@keyframes -amp-start{from{visibility:hidden}to{visibility:visible}}"
)
AMP_BOILERPLATE_NOSCRIPT_CSS: Final[str] = (
    "body{-webkit-animation:none;-moz-animation:none;-ms-animation:none;animation:none}"
)

DEFAULT_AD_SLOT: Final[str] = "/30497360/a4a/amp_story_dfp_example"
"""Doubleclick slot used by the static auto-ads block."""


# =============================================================================
# FIXED SLIDE COPY
# =============================================================================

DEFAULT_CTA_TEXT: Final[str] = "Read Full Article"
DEFAULT_CTA_URL: Final[str] = "#"
CTA_TITLE_FORMAT: Final[str] = "Learn More About {title}"
CTA_SUBTITLE: Final[str] = "Continue reading the full article for more insights"
CTA_ANIMATION: Final[str] = "zoom"


# =============================================================================
# BACKGROUND VARIANTS
# =============================================================================

GRADIENT_BASE_ANGLE: Final[str] = "135deg"
GRADIENT_VARIANT_ANGLES: Final[tuple[str, ...]] = ("135deg", "45deg", "225deg", "315deg")


# =============================================================================
# ANIMATIONS
# =============================================================================

AMP_ANIMATE_IN_PRESETS: Final[frozenset[str]] = frozenset({
    "drop",
    "fade-in",
    "fly-in-bottom",
    "fly-in-left",
    "fly-in-right",
    "fly-in-top",
    "pan-down",
    "pan-left",
    "pan-right",
    "pan-up",
    "pulse",
    "rotate-in-left",
    "rotate-in-right",
    "scale-fade-down",
    "scale-fade-up",
    "twirl-in",
    "whoosh-in-left",
    "whoosh-in-right",
    "zoom-in",
    "zoom-out",
})
"""Values accepted by the ``animate-in`` attribute."""

ANIMATION_ALIASES: Final[dict[str, str]] = {
    "fade": "fade-in",
    "zoom": "zoom-in",
    "slide": "fly-in-bottom",
    "slide-up": "fly-in-bottom",
    "slide-left": "fly-in-left",
    "slide-right": "fly-in-right",
    "pan": "pan-left",
    "rotate": "rotate-in-left",
    "whoosh": "whoosh-in-left",
}
"""Short animation names used by templates, mapped to AMP presets."""

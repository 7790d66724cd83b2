"""Design module: story templates, background variants and animation selection."""

from .templates import (
    TemplateConfig,
    TemplateOverrides,
    StoryTemplate,
    TemplateRegistry,
    TEMPLATE_PRESETS,
    find_template,
)
from .colors import variant_background
from .animation import (
    AnimationSelector,
    RandomAnimationSelector,
    RoundRobinAnimationSelector,
    create_selector,
)

__all__ = [
    "TemplateConfig",
    "TemplateOverrides",
    "StoryTemplate",
    "TemplateRegistry",
    "TEMPLATE_PRESETS",
    "find_template",
    "variant_background",
    "AnimationSelector",
    "RandomAnimationSelector",
    "RoundRobinAnimationSelector",
    "create_selector",
]

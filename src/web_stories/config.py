"""Engine configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_AD_SLOT, EXCERPT_MAX_LENGTH, MAX_SLIDES_DEFAULT, WORDS_PER_SLIDE
from .design import AnimationSelector, TemplateRegistry, create_selector


class EngineSettings(BaseSettings):
    """Engine settings, read from ``WEB_STORIES_*`` environment variables.

    Example:
        WEB_STORIES_DEFAULT_TEMPLATE=editorial
        WEB_STORIES_ANIMATION_STRATEGY=round_robin
        WEB_STORIES_ANIMATION_SEED=7
    """

    model_config = SettingsConfigDict(env_prefix="WEB_STORIES_", extra="ignore")

    # Templates
    templates_path: Path = Path("config/templates.yaml")
    default_template: str = "modern"

    # Generation defaults
    max_slides: int = Field(default=MAX_SLIDES_DEFAULT, ge=1)
    words_per_slide: int = Field(default=WORDS_PER_SLIDE, ge=1)
    excerpt_length: int = Field(default=EXCERPT_MAX_LENGTH, ge=1)

    # Animation selection
    animation_strategy: Literal["random", "round_robin"] = "random"
    animation_seed: Optional[int] = None

    # Rendering
    include_auto_ads: bool = True
    ad_slot: str = DEFAULT_AD_SLOT

    # Logging
    log_dir: Path = Path("logs")

    def load_templates(self) -> TemplateRegistry:
        """Load the template registry from ``templates_path``."""
        return TemplateRegistry.load(self.templates_path)

    def create_selector(self, seed: Optional[int] = None) -> AnimationSelector:
        """Create the configured animation selector.

        Args:
            seed: Overrides ``animation_seed`` when given.
        """
        return create_selector(self.animation_strategy, seed if seed is not None else self.animation_seed)


def load_settings(**overrides) -> EngineSettings:
    """Load settings from the environment, with explicit overrides on top."""
    return EngineSettings(**overrides)

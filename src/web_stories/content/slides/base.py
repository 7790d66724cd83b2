"""Base classes for slide building jobs.

Each SlideJob builds one kind of slide from a SlideJobContext. Jobs hold no
per-story state, so one job instance can serve concurrent generations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ...design import AnimationSelector, TemplateConfig
    from ..models import ContentChunk, GenerationOptions, RawPost, Slide, SlideStyle, SlideType


@dataclass
class SlideJobContext:
    """Everything needed to build a single slide.

    ``config`` is the template configuration with customizations already
    applied. ``chunk`` and ``index`` are only set for content slides.
    """

    post: "RawPost"
    config: "TemplateConfig"
    options: "GenerationOptions"
    select_animation: "AnimationSelector"
    slide_id: str
    images: list[str] = field(default_factory=list)
    chunk: Optional["ContentChunk"] = None
    index: int = 0

    def pick_animation(self) -> str:
        """Pick an animation from the configured palette."""
        return self.select_animation(self.config.animations)


class SlideJob(ABC):
    """Base class for slide building jobs.

    Usage:
        job = TitleSlideJob()
        slide = job.execute(context)
    """

    @abstractmethod
    def execute(self, context: SlideJobContext) -> "Slide":
        """Build the slide.

        Args:
            context: Context with the post, template and options.

        Returns:
            The built Slide.
        """
        pass

    @abstractmethod
    def get_slide_type(self) -> "SlideType":
        """Return the slide type this job handles."""
        pass

    def _base_style(self, context: SlideJobContext, **overrides) -> "SlideStyle":
        """Style from the template config, with per-slide overrides."""
        from ..models import SlideStyle

        values = {
            "background_color": context.config.background_color,
            "text_color": context.config.text_color,
            "accent_color": context.config.accent_color,
            "font_family": context.config.font_family,
        }
        values.update(overrides)
        if "animation" not in values:
            values["animation"] = context.pick_animation()
        return SlideStyle(**values)

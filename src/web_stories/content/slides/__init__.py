"""Slide building jobs module.

Provides a SlideJob class for each slide role:
- TitleSlideJob: first slide, from the post title and excerpt
- ContentSlideJob: content, image and quote slides, from chunks
- CTASlideJob: closing call-to-action slide

Usage:
    from web_stories.content.slides import SlideJobFactory, SlideJobContext

    job = SlideJobFactory.create(SlideType.TITLE)
    slide = job.execute(context)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import SlideJob, SlideJobContext
from .title_job import TitleSlideJob
from .content_job import ContentSlideJob
from .cta_job import CTASlideJob

if TYPE_CHECKING:
    from ..models import SlideType


class SlideJobFactory:
    """Factory for creating slide jobs.

    Image and quote slides are built by the content job, which picks the
    final type from the chunk.

    Usage:
        job = SlideJobFactory.create(SlideType.CTA)

        # Register a custom job
        SlideJobFactory.register(SlideType.CTA, BrandedCTASlideJob)
    """

    # Registry of slide types to job classes
    _job_classes: dict["SlideType", type[SlideJob]] = {}

    @classmethod
    def _ensure_registered(cls) -> None:
        """Ensure default job classes are registered."""
        if not cls._job_classes:
            from ..models import SlideType
            cls._job_classes = {
                SlideType.TITLE: TitleSlideJob,
                SlideType.CONTENT: ContentSlideJob,
                SlideType.IMAGE: ContentSlideJob,
                SlideType.QUOTE: ContentSlideJob,
                SlideType.CTA: CTASlideJob,
            }

    @classmethod
    def register(cls, slide_type: "SlideType", job_class: type[SlideJob]) -> None:
        """Register a job class for a slide type.

        Args:
            slide_type: SlideType enum value.
            job_class: SlideJob class to use for this type.
        """
        cls._ensure_registered()
        cls._job_classes[slide_type] = job_class

    @classmethod
    def create(cls, slide_type: "SlideType") -> SlideJob:
        """Create a slide job for the given type.

        Raises:
            ValueError: If no job is registered for the slide type.
        """
        cls._ensure_registered()

        job_class = cls._job_classes.get(slide_type)
        if not job_class:
            raise ValueError(f"No job registered for slide type: {slide_type}")

        return job_class()

    @classmethod
    def get_registered_types(cls) -> list["SlideType"]:
        """Get list of registered slide types."""
        cls._ensure_registered()
        return list(cls._job_classes.keys())


__all__ = [
    # Base classes
    "SlideJob",
    "SlideJobContext",
    # Job classes
    "TitleSlideJob",
    "ContentSlideJob",
    "CTASlideJob",
    # Factory
    "SlideJobFactory",
]

"""Content slide job: one slide per content chunk.

A chunk becomes a quote slide, an image slide, or a plain content slide.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...design import variant_background
from ..timing import estimate_duration
from .base import SlideJob, SlideJobContext

if TYPE_CHECKING:
    from ..models import ContentChunk, Slide, SlideType


class ContentSlideJob(SlideJob):
    """Builds content, image and quote slides from a chunk.

    Usage:
        job = ContentSlideJob()
        context = SlideJobContext(..., chunk=chunk, index=0, slide_id="2")
        slide = job.execute(context)
    """

    def get_slide_type(self) -> "SlideType":
        """Return the content slide type."""
        from ..models import SlideType
        return SlideType.CONTENT

    def resolve_type(self, chunk: "ContentChunk", images: list[str]) -> "SlideType":
        """Decide the slide type for a chunk.

        Image slides need at least one image somewhere in the post.
        """
        from ..models import SlideType

        if chunk.is_quote:
            return SlideType.QUOTE
        if chunk.has_image and images:
            return SlideType.IMAGE
        return SlideType.CONTENT

    def execute(self, context: SlideJobContext) -> "Slide":
        """Build the slide for ``context.chunk``."""
        from ..models import Slide, SlideContent, SlideLayout, SlideType

        chunk = context.chunk
        if chunk is None:
            raise ValueError("ContentSlideJob requires a chunk in the context")

        images = context.images
        slide_type = self.resolve_type(chunk, images)

        # Fall back to the post's images, cycling by slide position
        image = chunk.image or (images[context.index % len(images)] if images else None)

        if slide_type == SlideType.CONTENT:
            background = variant_background(context.config.background_color, context.index)
        else:
            background = context.config.background_color

        return Slide(
            id=context.slide_id,
            type=slide_type,
            content=SlideContent(
                title=chunk.title,
                text=chunk.text,
                image=image,
                image_alt=chunk.image_alt,
                quote=chunk.text if chunk.is_quote else None,
                author=context.post.author if chunk.is_quote else None,
            ),
            style=self._base_style(
                context,
                background_color=background,
                duration=estimate_duration(chunk.text),
                text_align="center" if slide_type == SlideType.QUOTE else "left",
            ),
            layout=SlideLayout.FILL if slide_type == SlideType.IMAGE else SlideLayout.RESPONSIVE,
        )

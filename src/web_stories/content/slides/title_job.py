"""Title slide job: the first slide of a story."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import TITLE_SLIDE_DURATION
from ..excerpt import generate_excerpt
from .base import SlideJob, SlideJobContext

if TYPE_CHECKING:
    from ..models import Slide, SlideType


class TitleSlideJob(SlideJob):
    """Builds the title slide from the post title, excerpt and featured image.

    The subtitle is the post excerpt, or one generated from the body when the
    post has none.
    """

    def get_slide_type(self) -> "SlideType":
        """Return the title slide type."""
        from ..models import SlideType
        return SlideType.TITLE

    def execute(self, context: SlideJobContext) -> "Slide":
        """Build the title slide."""
        from ..models import Slide, SlideContent, SlideLayout, SlideType

        post = context.post
        subtitle = post.excerpt or generate_excerpt(post.html_content, context.options.excerpt_length)

        return Slide(
            id=context.slide_id,
            type=SlideType.TITLE,
            content=SlideContent(
                title=post.title,
                subtitle=subtitle,
                image=post.featured_image,
            ),
            style=self._base_style(
                context,
                duration=TITLE_SLIDE_DURATION,
                text_align="center",
            ),
            layout=SlideLayout.FILL,
        )

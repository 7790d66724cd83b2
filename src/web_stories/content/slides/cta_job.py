"""CTA slide job: the closing call-to-action slide.

The CTA slide sends readers to the full article.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import CTA_ANIMATION, CTA_SLIDE_DURATION, CTA_SUBTITLE, CTA_TITLE_FORMAT
from .base import SlideJob, SlideJobContext

if TYPE_CHECKING:
    from ..models import Slide, SlideType


class CTASlideJob(SlideJob):
    """Builds the CTA (last) slide.

    Colors are inverted from the template: the accent becomes the background
    and the background becomes the accent.
    """

    def get_slide_type(self) -> "SlideType":
        """Return the CTA slide type."""
        from ..models import SlideType
        return SlideType.CTA

    def execute(self, context: SlideJobContext) -> "Slide":
        """Build the CTA slide."""
        from ..models import Slide, SlideContent, SlideLayout, SlideType

        config = context.config
        options = context.options

        return Slide(
            id=context.slide_id,
            type=SlideType.CTA,
            content=SlideContent(
                title=CTA_TITLE_FORMAT.format(title=context.post.title),
                subtitle=CTA_SUBTITLE,
                button_text=options.cta_text,
                button_url=options.cta_url,
            ),
            style=self._base_style(
                context,
                background_color=config.accent_color or config.background_color,
                accent_color=config.background_color,
                animation=CTA_ANIMATION,
                duration=CTA_SLIDE_DURATION,
                text_align="center",
            ),
            layout=SlideLayout.FILL,
        )

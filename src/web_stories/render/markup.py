"""AMP Web Story markup rendering.

Renders a slide list plus document metadata into a complete AMP story
document using the Jinja2 templates in ``templates/``. Every interpolated
value goes through ``escape_html`` via the ``esc`` filter; templates run with
autoescape off so that escaping is explicit and uniform.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..constants import (
    AMP_ANIMATE_IN_PRESETS,
    AMP_BOILERPLATE_CSS,
    AMP_BOILERPLATE_NOSCRIPT_CSS,
    AMP_RUNTIME_URL,
    AMP_STORY_AUTO_ADS_URL,
    AMP_STORY_URL,
    ANIMATION_ALIASES,
    DEFAULT_AD_SLOT,
)
from ..content.models import DocumentMetadata, Slide, SlideType
from .escape import escape_html, json_for_script, nl2br

_logger = logging.getLogger("story_render")

TEMPLATE_DIR = Path(__file__).parent / "templates"

SLIDE_TEMPLATES: dict[SlideType, str] = {
    SlideType.TITLE: "slides/title.html.jinja2",
    SlideType.CONTENT: "slides/content.html.jinja2",
    SlideType.IMAGE: "slides/image.html.jinja2",
    SlideType.QUOTE: "slides/quote.html.jinja2",
    SlideType.CTA: "slides/cta.html.jinja2",
}


def amp_animation(name: Optional[str]) -> Optional[str]:
    """Map a template animation name to an ``animate-in`` preset.

    Returns None for names AMP does not know, so no attribute is emitted.
    """
    if not name:
        return None
    name = ANIMATION_ALIASES.get(name, name)
    return name if name in AMP_ANIMATE_IN_PRESETS else None


def format_seconds(value: float) -> str:
    """Format a duration for ``auto-advance-after`` (``6s``, ``3.6s``)."""
    return f"{value:g}s"


def build_structured_data(metadata: DocumentMetadata, published: datetime) -> dict[str, Any]:
    """Build the schema.org Article description of the story."""
    return {
        "@context": "http://schema.org",
        "@type": "Article",
        "headline": metadata.title,
        "description": metadata.description,
        "author": {
            "@type": "Person",
            "name": metadata.author,
        },
        "publisher": {
            "@type": "Organization",
            "name": metadata.publisher_name,
            "logo": {
                "@type": "ImageObject",
                "url": metadata.publisher_logo,
            },
        },
        "url": metadata.canonical_url,
        "datePublished": published.isoformat(),
    }


def _create_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["esc"] = escape_html
    env.filters["nl2br"] = nl2br
    env.filters["seconds"] = format_seconds
    return env


class MarkupRenderer:
    """Renders slides into an AMP story document.

    Usage:
        renderer = MarkupRenderer(include_auto_ads=False)
        html = renderer.render(slides, metadata)
    """

    def __init__(
        self,
        include_auto_ads: bool = True,
        ad_slot: str = DEFAULT_AD_SLOT,
    ):
        """Initialize the renderer.

        Args:
            include_auto_ads: Emit the static ``amp-story-auto-ads`` block.
            ad_slot: Doubleclick slot for the auto-ads block.
        """
        self.include_auto_ads = include_auto_ads
        self.ad_slot = ad_slot
        self._env = _create_environment()

    def render(self, slides: list[Slide], metadata: DocumentMetadata) -> str:
        """Render the complete document.

        Args:
            slides: Slides in presentation order.
            metadata: Publishing metadata.

        Returns:
            AMP HTML document text.
        """
        published = metadata.date_published or datetime.now(timezone.utc)
        poster = (slides[0].content.image if slides else None) or metadata.publisher_logo

        pages = [self.render_slide(slide) for slide in slides]

        document = self._env.get_template("story.html.jinja2").render(
            metadata=metadata,
            poster=poster,
            pages=pages,
            structured_data=json_for_script(build_structured_data(metadata, published)),
            include_auto_ads=self.include_auto_ads,
            ad_config=json_for_script({
                "ad-attributes": {
                    "type": "doubleclick",
                    "data-slot": self.ad_slot,
                }
            }),
            amp_runtime_url=AMP_RUNTIME_URL,
            amp_story_url=AMP_STORY_URL,
            amp_story_auto_ads_url=AMP_STORY_AUTO_ADS_URL,
            boilerplate_css=AMP_BOILERPLATE_CSS,
            boilerplate_noscript_css=AMP_BOILERPLATE_NOSCRIPT_CSS,
        ).strip()

        _logger.debug(
            f"RENDER | title={metadata.title[:60]!r} | pages={len(pages)} | "
            f"ads={self.include_auto_ads} | bytes={len(document.encode('utf-8'))}"
        )
        return document

    def render_slide(self, slide: Slide) -> str:
        """Render one ``amp-story-page``."""
        fragment = self._env.get_template(
            SLIDE_TEMPLATES.get(slide.type, SLIDE_TEMPLATES[SlideType.CONTENT])
        ).render(
            slide=slide,
            content=slide.content,
            style=slide.style,
            animate_in=amp_animation(slide.style.animation),
        )

        return self._env.get_template("page.html.jinja2").render(
            slide=slide,
            style=slide.style,
            fragment=fragment.strip(),
        )


def render_markup(
    slides: list[Slide],
    metadata: DocumentMetadata,
    *,
    include_auto_ads: bool = True,
    ad_slot: str = DEFAULT_AD_SLOT,
) -> str:
    """Render slides and metadata into an AMP story document."""
    return MarkupRenderer(include_auto_ads=include_auto_ads, ad_slot=ad_slot).render(slides, metadata)

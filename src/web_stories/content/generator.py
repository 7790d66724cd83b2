"""Story generation entry points.

``generate_story`` runs the whole pipeline for one post:
sanitize -> segment -> assemble. The template configuration is an explicit
argument of every call; nothing is kept between calls.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

from ..design import (
    AnimationSelector,
    RandomAnimationSelector,
    StoryTemplate,
    TemplateConfig,
    find_template,
)
from ..errors import SlideLimitExceededError
from .assembler import SlideAssembler
from .images import extract_images
from .models import GenerationOptions, GenerationReport, RawPost, Slide
from .sanitizer import sanitize_html
from .segmenter import Segmenter

_logger = logging.getLogger("story_engine")

TemplateLike = Union[TemplateConfig, StoryTemplate]


def _resolve_config(template: TemplateLike, options: GenerationOptions) -> TemplateConfig:
    config = template.config if isinstance(template, StoryTemplate) else template
    return options.customizations.apply(config)


def generate_story_report(
    post: RawPost,
    template: TemplateLike,
    options: Optional[GenerationOptions] = None,
    *,
    selector: Optional[AnimationSelector] = None,
) -> GenerationReport:
    """Generate slides for a post and report how much content fit.

    Args:
        post: Source post.
        template: Template (or bare template configuration) for this story.
        options: Generation options. Defaults apply when None.
        selector: Animation selector. A fresh unseeded random selector when None.

    Returns:
        GenerationReport with the slides and capacity diagnostics.

    Raises:
        SlideLimitExceededError: If ``options.strict`` and content was truncated.
    """
    options = options or GenerationOptions()
    config = _resolve_config(template, options)
    select_animation = selector or RandomAnimationSelector()
    start = time.perf_counter()

    capacity = options.chunk_capacity
    segmentation = Segmenter(word_budget=options.max_words_per_slide).segment_content(
        sanitize_html(post.html_content), capacity
    )

    slides = SlideAssembler().assemble(
        post=post,
        chunks=segmentation.chunks,
        config=config,
        options=options,
        select_animation=select_animation,
        images=extract_images(post.html_content),
    )

    report = GenerationReport(
        slides=slides,
        chunk_capacity=capacity,
        chunks_created=len(segmentation.chunks),
        paragraphs_total=segmentation.paragraphs_total,
        paragraphs_dropped=segmentation.paragraphs_dropped,
    )

    _logger.info(
        f"GENERATE | title={post.title[:60]!r} | slides={report.slides_count} | "
        f"max_slides={options.max_slides} | dropped={report.paragraphs_dropped} | "
        f"duration={time.perf_counter() - start:.3f}s"
    )

    if report.truncated:
        if options.strict:
            raise SlideLimitExceededError(report)
        _logger.info(
            f"TRUNCATE | title={post.title[:60]!r} | capacity={capacity} | "
            f"paragraphs_dropped={report.paragraphs_dropped}"
        )

    return report


def generate_story(
    post: RawPost,
    template: TemplateLike,
    options: Optional[GenerationOptions] = None,
    *,
    selector: Optional[AnimationSelector] = None,
) -> list[Slide]:
    """Generate the ordered slide list for a post.

    Content beyond ``options.max_slides`` is dropped silently unless
    ``options.strict`` is set.
    """
    return generate_story_report(post, template, options, selector=selector).slides


@dataclass(frozen=True)
class StoryGenerator:
    """A story generator bound to one template.

    Immutable, so one instance can be shared across threads.

    Usage:
        generator = create_generator("modern", registry.list_templates())
        slides = generator.generate(post, GenerationOptions(max_slides=6))
    """

    template: StoryTemplate

    def generate(
        self,
        post: RawPost,
        options: Optional[GenerationOptions] = None,
        *,
        selector: Optional[AnimationSelector] = None,
    ) -> list[Slide]:
        """Generate slides with this generator's template."""
        return generate_story(post, self.template, options, selector=selector)

    def generate_report(
        self,
        post: RawPost,
        options: Optional[GenerationOptions] = None,
        *,
        selector: Optional[AnimationSelector] = None,
    ) -> GenerationReport:
        """Generate slides plus capacity diagnostics with this template."""
        return generate_story_report(post, self.template, options, selector=selector)


def create_generator(template_id: str, templates: list[StoryTemplate]) -> StoryGenerator:
    """Create a generator for the template with ``template_id``.

    Raises:
        TemplateNotFoundError: If no template has that id.
    """
    return StoryGenerator(template=find_template(template_id, templates))

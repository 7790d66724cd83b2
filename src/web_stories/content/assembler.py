"""Slide assembler: chunks and template configuration to the final slide list.

Coordinates the slide jobs. Owns slide ordering and id assignment:
title slide first ("1"), content slides numbered after it, CTA last ("cta").
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import ContentChunk, GenerationOptions, RawPost, Slide, SlideType
from .slides import SlideJobContext, SlideJobFactory

if TYPE_CHECKING:
    from ..design import AnimationSelector, TemplateConfig

_logger = logging.getLogger("story_engine")

CTA_SLIDE_ID = "cta"


class SlideAssembler:
    """Assembles the ordered slide list for one story.

    Usage:
        assembler = SlideAssembler()
        slides = assembler.assemble(
            post=post,
            chunks=chunks,
            config=template_config,
            options=options,
            select_animation=RandomAnimationSelector(),
            images=extract_images(post.html_content),
        )
    """

    def assemble(
        self,
        post: RawPost,
        chunks: list[ContentChunk],
        config: "TemplateConfig",
        options: GenerationOptions,
        select_animation: "AnimationSelector",
        images: list[str] | None = None,
    ) -> list[Slide]:
        """Build title, content and CTA slides in order.

        Args:
            post: Source post.
            chunks: Segmented content, already capped by the caller.
            config: Template configuration with customizations applied.
            options: Generation options.
            select_animation: Animation selector for this story.
            images: Every image URL in the post body.

        Returns:
            Slides; never more than ``options.max_slides``.
        """
        images = images or []
        slides: list[Slide] = []

        def context(slide_id: str, chunk: ContentChunk | None = None, index: int = 0) -> SlideJobContext:
            return SlideJobContext(
                post=post,
                config=config,
                options=options,
                select_animation=select_animation,
                slide_id=slide_id,
                images=images,
                chunk=chunk,
                index=index,
            )

        if options.include_title:
            slides.append(SlideJobFactory.create(SlideType.TITLE).execute(context("1")))

        content_job = SlideJobFactory.create(SlideType.CONTENT)
        for index, chunk in enumerate(chunks[: options.chunk_capacity]):
            slides.append(content_job.execute(context(str(index + 2), chunk, index)))

        if options.include_cta:
            slides.append(SlideJobFactory.create(SlideType.CTA).execute(context(CTA_SLIDE_ID)))

        _logger.debug(
            f"ASSEMBLE | title={options.include_title} | content={len(slides) - options.fixed_slide_count} | "
            f"cta={options.include_cta} | types={[s.type.value for s in slides]}"
        )
        return slides

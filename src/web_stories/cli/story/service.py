"""Stateless service for story generation, rendering and validation."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ...content import (
    DocumentMetadata,
    GenerationOptions,
    RawPost,
    StoryDocument,
    generate_excerpt,
    generate_story_report,
)
from ...design import StoryTemplate, TemplateRegistry, create_selector
from ...errors import SlideLimitExceededError, TemplateNotFoundError
from ...render import render_markup
from ...validation import MarkupValidationResult, validate_markup
from ..core.files import read_mapping, write_json, write_text
from ..core.types import Failure, Result, StoryOutput, Success
from .params import GenerateParams, RenderParams, ValidateParams

_logger = logging.getLogger("story_engine.cli")


def _validation_details(error: ValidationError) -> dict[str, str]:
    """Flatten pydantic errors into ``{location: message}``."""
    details = {}
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "value"
        details[location] = item["msg"]
    return details


class StoryService:
    """Stateless service behind the story commands.

    All state is passed via params - no instance state.
    """

    def load_templates(self, templates_path: Path) -> Result[TemplateRegistry]:
        """Load the template registry (presets plus the YAML file, if any)."""
        try:
            return Success(TemplateRegistry.load(templates_path))
        except ValidationError as e:
            return Failure(f"Invalid template in {templates_path}", _validation_details(e))
        except (ValueError, yaml.YAMLError, OSError) as e:
            return Failure(f"Could not load templates from {templates_path}", {"error": str(e)})

    def load_post(self, post_path: Path) -> Result[RawPost]:
        """Load a post from a JSON or YAML file."""
        data = read_mapping(post_path)
        if isinstance(data, Failure):
            return data

        try:
            return Success(RawPost.model_validate(data.value))
        except ValidationError as e:
            return Failure(f"Invalid post in {post_path.name}", _validation_details(e))

    def list_templates(self, templates_path: Path) -> Result[list[StoryTemplate]]:
        """List available templates."""
        registry = self.load_templates(templates_path)
        if isinstance(registry, Failure):
            return registry
        return Success(registry.value.list_templates())

    def generate(self, params: GenerateParams) -> Result[StoryOutput]:
        """Generate a story document for one post.

        Writes the slides JSON to ``params.output_path`` and, when
        ``params.html_path`` is set, the rendered AMP markup as well.

        Returns:
            Result containing StoryOutput or Failure
        """
        post_result = self.load_post(params.post_path)
        if isinstance(post_result, Failure):
            return post_result
        post = post_result.value

        registry = self.load_templates(params.templates_path)
        if isinstance(registry, Failure):
            return registry

        try:
            template = registry.value.get(params.template_id)
        except TemplateNotFoundError as e:
            return Failure(str(e), {"available": ", ".join(e.available)})

        option_fields = {
            "max_slides": params.max_slides,
            "include_title": params.include_title,
            "include_cta": params.include_cta,
            "max_words_per_slide": params.words_per_slide,
            "excerpt_length": params.excerpt_length,
            "strict": params.strict,
        }
        if params.cta_text is not None:
            option_fields["cta_text"] = params.cta_text
        if params.cta_url is not None:
            option_fields["cta_url"] = params.cta_url

        try:
            options = GenerationOptions(**option_fields)
        except ValidationError as e:
            return Failure("Invalid generation options", _validation_details(e))

        selector = create_selector(params.animation_strategy, params.seed)

        try:
            report = generate_story_report(post, template, options, selector=selector)
        except SlideLimitExceededError as e:
            return Failure(
                str(e),
                {
                    "paragraphs_total": e.report.paragraphs_total,
                    "paragraphs_dropped": e.report.paragraphs_dropped,
                    "hint": "Raise --max-slides or drop --strict",
                },
            )

        metadata = DocumentMetadata(
            title=post.title,
            description=post.excerpt or generate_excerpt(post.html_content, params.excerpt_length),
            author=post.author,
            publisher_name=params.publisher_name,
            publisher_logo=params.publisher_logo,
            canonical_url=params.canonical_url,
        )
        document = StoryDocument(slides=report.slides, metadata=metadata)

        try:
            write_json(params.output_path, document.model_dump(mode="json", by_alias=True, exclude_none=True))
            if params.html_path is not None:
                markup = render_markup(
                    document.slides,
                    document.metadata,
                    include_auto_ads=params.include_auto_ads,
                    ad_slot=params.ad_slot,
                )
                write_text(params.html_path, markup)
        except OSError as e:
            return Failure("Could not write output", {"error": str(e)})

        _logger.info(
            f"CLI_GENERATE | post={params.post_path.name} | template={template.id} | "
            f"slides={report.slides_count} | output={params.output_path}"
        )

        return Success(
            StoryOutput(
                slide_count=report.slides_count,
                title=post.title,
                document_path=params.output_path,
                html_path=params.html_path,
                truncated=report.truncated,
                paragraphs_dropped=report.paragraphs_dropped,
                metadata={"template": template.id},
            )
        )

    def render(self, params: RenderParams) -> Result[StoryOutput]:
        """Render a slides JSON document to AMP markup."""
        data = read_mapping(params.document_path)
        if isinstance(data, Failure):
            return data

        try:
            document = StoryDocument.model_validate(data.value)
        except ValidationError as e:
            return Failure(f"Invalid story document {params.document_path.name}", _validation_details(e))

        markup = document.to_markup(include_auto_ads=params.include_auto_ads, ad_slot=params.ad_slot)

        try:
            write_text(params.output_path, markup)
        except OSError as e:
            return Failure("Could not write output", {"error": str(e)})

        _logger.info(
            f"CLI_RENDER | document={params.document_path.name} | "
            f"slides={document.slides_count} | output={params.output_path}"
        )

        return Success(
            StoryOutput(
                slide_count=document.slides_count,
                title=document.metadata.title,
                document_path=params.document_path,
                html_path=params.output_path,
            )
        )

    def validate(self, params: ValidateParams) -> Result[MarkupValidationResult]:
        """Validate an AMP markup file."""
        try:
            markup = params.html_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return Failure(f"Could not read {params.html_path}", {"error": str(e)})

        return Success(validate_markup(markup))

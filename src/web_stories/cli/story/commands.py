"""Story CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config import load_settings
from ..core.console import console, err_console
from ..core.types import Failure
from .display import (
    show_generate_config,
    show_render_result,
    show_story_error,
    show_story_result,
    show_templates,
    show_validation_result,
)
from .params import GenerateParams, RenderParams, ValidateParams
from .service import StoryService
from .validators import validate_generate_params, validate_render_params, validate_validate_params


def generate(
    post_file: Path = typer.Argument(..., help="Post file (JSON or YAML)"),
    template: Optional[str] = typer.Option(None, "--template", "-t", help="Template ID"),
    templates_file: Optional[Path] = typer.Option(None, "--templates-file", help="Templates YAML file"),
    max_slides: Optional[int] = typer.Option(None, "--max-slides", "-m", help="Maximum number of slides"),
    include_title: bool = typer.Option(True, "--title/--no-title", help="Include the title slide"),
    include_cta: bool = typer.Option(True, "--cta/--no-cta", help="Include the call-to-action slide"),
    cta_text: Optional[str] = typer.Option(None, "--cta-text", help="CTA button text"),
    cta_url: Optional[str] = typer.Option(None, "--cta-url", help="CTA button URL"),
    words_per_slide: Optional[int] = typer.Option(None, "--words-per-slide", "-w", help="Word budget per slide"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Animation selection seed"),
    strict: bool = typer.Option(False, "--strict", help="Fail instead of truncating content"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Slides JSON output path"),
    html: bool = typer.Option(False, "--html", help="Also render AMP HTML"),
    html_output: Optional[Path] = typer.Option(None, "--html-output", help="AMP HTML output path"),
    canonical_url: str = typer.Option("", "--canonical-url", help="Canonical URL of the story"),
    publisher_name: str = typer.Option("", "--publisher", help="Publisher name"),
    publisher_logo: str = typer.Option("", "--publisher-logo", help="Publisher logo URL"),
    no_ads: bool = typer.Option(False, "--no-ads", help="Omit the auto-ads extension"),
) -> None:
    """Generate story slides from a post.

    Writes the slides and metadata as JSON (default: <post>.story.json).
    Use --html to render AMP markup in the same run.
    """
    params = GenerateParams.from_cli(
        settings=load_settings(),
        post_path=post_file,
        template=template,
        templates_file=templates_file,
        max_slides=max_slides,
        include_title=include_title,
        include_cta=include_cta,
        cta_text=cta_text,
        cta_url=cta_url,
        words_per_slide=words_per_slide,
        seed=seed,
        strict=strict,
        output=output,
        html=html,
        html_output=html_output,
        canonical_url=canonical_url,
        publisher_name=publisher_name,
        publisher_logo=publisher_logo,
        no_ads=no_ads,
    )

    validation = validate_generate_params(params)
    if isinstance(validation, Failure):
        show_story_error(err_console, validation.error, validation.details)
        raise typer.Exit(1)

    show_generate_config(console, params)

    result = StoryService().generate(params)
    if isinstance(result, Failure):
        show_story_error(err_console, result.error, result.details)
        raise typer.Exit(1)

    show_story_result(console, result.value)


def render(
    document_file: Path = typer.Argument(..., help="Slides JSON written by 'generate'"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="AMP HTML output path"),
    no_ads: bool = typer.Option(False, "--no-ads", help="Omit the auto-ads extension"),
) -> None:
    """Render a slides JSON document as an AMP Web Story."""
    params = RenderParams.from_cli(
        settings=load_settings(),
        document_path=document_file,
        output=output,
        no_ads=no_ads,
    )

    validation = validate_render_params(params)
    if isinstance(validation, Failure):
        show_story_error(err_console, validation.error, validation.details)
        raise typer.Exit(1)

    result = StoryService().render(params)
    if isinstance(result, Failure):
        show_story_error(err_console, result.error, result.details)
        raise typer.Exit(1)

    show_render_result(console, result.value)


def validate(
    html_file: Path = typer.Argument(..., help="AMP HTML file to check"),
    as_json: bool = typer.Option(False, "--json", help="Print the verdict as JSON"),
) -> None:
    """Check AMP story markup for required and recommended markers.

    Exits with code 1 when the markup is invalid.
    """
    params = ValidateParams(html_path=html_file, as_json=as_json)

    validation = validate_validate_params(params)
    if isinstance(validation, Failure):
        show_story_error(err_console, validation.error, validation.details)
        raise typer.Exit(1)

    result = StoryService().validate(params)
    if isinstance(result, Failure):
        show_story_error(err_console, result.error, result.details)
        raise typer.Exit(1)

    verdict = result.value
    if params.as_json:
        console.print_json(data=verdict.to_dict())
    else:
        show_validation_result(console, verdict)

    if not verdict.is_valid:
        raise typer.Exit(1)


def list_templates(
    templates_file: Optional[Path] = typer.Option(None, "--templates-file", help="Templates YAML file"),
) -> None:
    """List available story templates."""
    settings = load_settings()

    result = StoryService().list_templates(templates_file or settings.templates_path)
    if isinstance(result, Failure):
        show_story_error(err_console, result.error, result.details)
        raise typer.Exit(1)

    show_templates(console, result.value)

"""Story command validators."""

from __future__ import annotations

from pathlib import Path

from ..core.types import Failure, Result, Success
from .params import SUPPORTED_POST_SUFFIXES, GenerateParams, RenderParams, ValidateParams


def validate_input_file(path: Path, suffixes: tuple[str, ...] | None = None) -> Result[Path]:
    """Validate that an input file exists and has an accepted extension."""
    if not path.exists():
        return Failure(f"File not found: {path}")

    if not path.is_file():
        return Failure(f"Not a file: {path}")

    if suffixes and path.suffix.lower() not in suffixes:
        return Failure(
            f"Unsupported file type: {path.suffix or '(none)'}",
            {"path": str(path), "supported": ", ".join(suffixes)},
        )

    return Success(path)


def validate_generate_params(params: GenerateParams) -> Result[GenerateParams]:
    """Validate story generation parameters.

    Returns Result with params if valid, or Failure with error.
    """
    post_result = validate_input_file(params.post_path, SUPPORTED_POST_SUFFIXES)
    if isinstance(post_result, Failure):
        return post_result

    fixed_slides = int(params.include_title) + int(params.include_cta)
    if params.max_slides < max(fixed_slides, 1):
        return Failure(
            f"Invalid max_slides: {params.max_slides}",
            {"hint": f"At least {max(fixed_slides, 1)} slide(s) needed for the title/CTA slides"},
        )

    if params.words_per_slide < 1:
        return Failure(
            f"Invalid words_per_slide: {params.words_per_slide}",
            {"hint": "Words per slide must be at least 1"},
        )

    if params.html_path is not None and params.html_path == params.output_path:
        return Failure(
            "HTML output would overwrite the slides JSON",
            {"path": str(params.output_path)},
        )

    return Success(params)


def validate_render_params(params: RenderParams) -> Result[RenderParams]:
    """Validate render parameters."""
    document_result = validate_input_file(params.document_path, (".json",))
    if isinstance(document_result, Failure):
        return document_result

    if params.output_path == params.document_path:
        return Failure(
            "HTML output would overwrite the slides JSON",
            {"path": str(params.output_path)},
        )

    return Success(params)


def validate_validate_params(params: ValidateParams) -> Result[ValidateParams]:
    """Validate markup validation parameters."""
    html_result = validate_input_file(params.html_path)
    if isinstance(html_result, Failure):
        return html_result
    return Success(params)

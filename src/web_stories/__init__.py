"""Web Story engine.

Converts a single rich-text article into an ordered sequence of story slides
and renders them as an AMP Web Story document.

Usage:
    from web_stories import RawPost, generate_story, render_markup, validate_markup
    from web_stories.design import TEMPLATE_PRESETS

    slides = generate_story(post, TEMPLATE_PRESETS["modern"])
    html = render_markup(slides, metadata)
    result = validate_markup(html)
"""

from .errors import StoryEngineError, TemplateNotFoundError, SlideLimitExceededError
from .content import (
    RawPost,
    GenerationOptions,
    Slide,
    SlideContent,
    SlideStyle,
    SlideType,
    SlideLayout,
    DocumentMetadata,
    StoryDocument,
    GenerationReport,
    StoryGenerator,
    create_generator,
    generate_story,
    generate_story_report,
)
from .design import TemplateConfig, TemplateOverrides, StoryTemplate
from .render import render_markup, escape_html
from .validation import MarkupValidationResult, validate_markup

__version__ = "0.3.0"

__all__ = [
    # Errors
    "StoryEngineError",
    "TemplateNotFoundError",
    "SlideLimitExceededError",
    # Models
    "RawPost",
    "GenerationOptions",
    "Slide",
    "SlideContent",
    "SlideStyle",
    "SlideType",
    "SlideLayout",
    "DocumentMetadata",
    "StoryDocument",
    "GenerationReport",
    "TemplateConfig",
    "TemplateOverrides",
    "StoryTemplate",
    # Operations
    "StoryGenerator",
    "create_generator",
    "generate_story",
    "generate_story_report",
    "render_markup",
    "escape_html",
    "validate_markup",
    "MarkupValidationResult",
]

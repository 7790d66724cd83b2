"""Content module: post segmentation and slide assembly.

Architecture:
- ContentSanitizer / ImageExtractor: regex cleanup and image discovery
- Segmenter: sanitized text to ContentChunks under a word budget
- SlideJob classes: build title, content/image/quote and CTA slides
- SlideAssembler: orders slides and assigns ids
- generate_story: the whole pipeline for one post
"""

from .models import (
    RawPost,
    GenerationOptions,
    ContentChunk,
    Slide,
    SlideContent,
    SlideStyle,
    SlideType,
    SlideLayout,
    DocumentMetadata,
    StoryDocument,
    GenerationReport,
)
from .sanitizer import ContentSanitizer, sanitize_html
from .images import ImageExtractor, extract_images, extract_image, extract_image_alt
from .segmenter import Segmenter, SegmentationResult, segment
from .timing import count_words, estimate_duration
from .excerpt import generate_excerpt
from .assembler import SlideAssembler
from .generator import StoryGenerator, create_generator, generate_story, generate_story_report

__all__ = [
    # Models
    "RawPost",
    "GenerationOptions",
    "ContentChunk",
    "Slide",
    "SlideContent",
    "SlideStyle",
    "SlideType",
    "SlideLayout",
    "DocumentMetadata",
    "StoryDocument",
    "GenerationReport",
    # Pipeline pieces
    "ContentSanitizer",
    "sanitize_html",
    "ImageExtractor",
    "extract_images",
    "extract_image",
    "extract_image_alt",
    "Segmenter",
    "SegmentationResult",
    "segment",
    "count_words",
    "estimate_duration",
    "generate_excerpt",
    "SlideAssembler",
    # Entry points
    "StoryGenerator",
    "create_generator",
    "generate_story",
    "generate_story_report",
]

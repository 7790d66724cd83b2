"""Data models for story generation.

Slide, SlideContent, SlideStyle and DocumentMetadata are persisted by callers
and re-edited later, so their serialized (camelCase) field names and the
SlideType values are a durable contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from ..constants import (
    DEFAULT_CTA_TEXT,
    DEFAULT_CTA_URL,
    EXCERPT_MAX_LENGTH,
    MAX_SLIDES_DEFAULT,
    WORDS_PER_SLIDE,
)
from ..design.templates import TemplateOverrides

_CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class SlideType(str, Enum):
    """Type of slide in a story."""

    TITLE = "title"
    CONTENT = "content"
    IMAGE = "image"
    QUOTE = "quote"
    CTA = "cta"


class SlideLayout(str, Enum):
    """AMP layout of a slide."""

    FILL = "fill"
    FIXED = "fixed"
    INTRINSIC = "intrinsic"
    RESPONSIVE = "responsive"


TextAlign = Literal["left", "center", "right"]


class RawPost(BaseModel):
    """Article as fetched from the content source. Immutable input."""

    model_config = {**_CAMEL_CONFIG, "frozen": True}

    title: str
    html_content: str = Field(
        default="",
        validation_alias=AliasChoices("html_content", "htmlContent", "content"),
        serialization_alias="htmlContent",
    )
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    author: str = ""


class GenerationOptions(BaseModel):
    """Options for a single story generation call."""

    model_config = {**_CAMEL_CONFIG, "frozen": True}

    max_slides: int = Field(default=MAX_SLIDES_DEFAULT, ge=1)
    include_title: bool = True
    include_cta: bool = Field(
        default=True,
        validation_alias=AliasChoices("include_cta", "includeCTA", "includeCta"),
    )
    cta_text: str = DEFAULT_CTA_TEXT
    cta_url: str = DEFAULT_CTA_URL
    customizations: TemplateOverrides = Field(default_factory=TemplateOverrides)

    # Segmentation
    max_words_per_slide: int = Field(default=WORDS_PER_SLIDE, ge=1)
    excerpt_length: int = Field(default=EXCERPT_MAX_LENGTH, ge=1)

    # Raise SlideLimitExceededError instead of truncating silently
    strict: bool = False

    @model_validator(mode="after")
    def _check_fixed_slides_fit(self) -> "GenerationOptions":
        if self.fixed_slide_count > self.max_slides:
            raise ValueError(
                f"max_slides={self.max_slides} cannot hold the "
                f"{self.fixed_slide_count} title/CTA slides requested"
            )
        return self

    @property
    def fixed_slide_count(self) -> int:
        """Number of title and CTA slides requested."""
        return int(self.include_title) + int(self.include_cta)

    @property
    def chunk_capacity(self) -> int:
        """Number of content slides that fit after the fixed slides."""
        return self.max_slides - self.fixed_slide_count


@dataclass
class ContentChunk:
    """A classified span of sanitized article text.

    Produced by the segmenter and consumed once by the slide assembler.
    """

    text: str
    title: Optional[str] = None
    image: Optional[str] = None
    image_alt: Optional[str] = None
    has_image: bool = False
    is_quote: bool = False


class SlideContent(BaseModel):
    """Content payload of a slide. Which fields are set depends on the type."""

    model_config = _CAMEL_CONFIG

    title: Optional[str] = None
    subtitle: Optional[str] = None
    text: Optional[str] = None
    image: Optional[str] = None
    image_alt: Optional[str] = None
    quote: Optional[str] = None
    author: Optional[str] = None
    button_text: Optional[str] = None
    button_url: Optional[str] = None


class SlideStyle(BaseModel):
    """Visual style and timing of a slide."""

    model_config = _CAMEL_CONFIG

    background_color: str
    text_color: str
    accent_color: Optional[str] = None
    font_family: str
    animation: str
    duration: float  # seconds
    text_align: Optional[TextAlign] = None


class Slide(BaseModel):
    """One presentation unit of a story."""

    model_config = _CAMEL_CONFIG

    id: str
    type: SlideType
    content: SlideContent = Field(default_factory=SlideContent)
    style: SlideStyle
    layout: SlideLayout = SlideLayout.RESPONSIVE

    def to_dict(self) -> dict:
        """Serialize to the persisted camelCase shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DocumentMetadata(BaseModel):
    """Publishing metadata for the rendered document."""

    model_config = _CAMEL_CONFIG

    title: str
    description: str = ""
    author: str = ""
    publisher_name: str = ""
    publisher_logo: str = ""
    canonical_url: str = ""
    date_published: Optional[datetime] = None


class StoryDocument(BaseModel):
    """Ordered slides plus publishing metadata."""

    model_config = _CAMEL_CONFIG

    slides: list[Slide] = Field(default_factory=list)
    metadata: DocumentMetadata

    @property
    def slides_count(self) -> int:
        """Get number of slides."""
        return len(self.slides)

    def to_markup(self, **render_options) -> str:
        """Render this document as AMP markup."""
        from ..render import render_markup

        return render_markup(self.slides, self.metadata, **render_options)


class GenerationReport(BaseModel):
    """Slides of one generation call plus capacity diagnostics."""

    slides: list[Slide] = Field(default_factory=list)
    chunk_capacity: int = 0
    chunks_created: int = 0
    paragraphs_total: int = 0
    paragraphs_dropped: int = 0

    @property
    def truncated(self) -> bool:
        """Check if content was cut by the slide ceiling."""
        return self.paragraphs_dropped > 0

    @property
    def slides_count(self) -> int:
        """Get number of slides."""
        return len(self.slides)

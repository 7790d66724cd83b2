"""Content segmentation: sanitized article text to slide-sized chunks.

Boundary policy:
- A chunk holds at most ``word_budget`` words of plain paragraphs.
- A heading always starts a new chunk.
- A quote or an image paragraph closes its chunk immediately.
- Segmentation stops once ``max_chunks`` chunks exist; the rest is dropped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..constants import TITLE_MAX_LENGTH, WORDS_PER_SLIDE
from .images import ImageExtractor
from .models import ContentChunk
from .timing import count_words

_logger = logging.getLogger("story_engine")

PARAGRAPH_SPLIT_PATTERN = re.compile(r"\n\s*\n")
HEADING_PATTERN = re.compile(r"^<h[1-6]|^#{1,6}\s")
QUOTE_START_PATTERN = re.compile(r"^<blockquote|^>")
HEADING_TAG_PATTERN = re.compile(r"</?h[1-6][^>]*>", re.IGNORECASE)
MARKDOWN_HEADING_PATTERN = re.compile(r"^#{1,6}\s")
BLOCKQUOTE_TAG_PATTERN = re.compile(r"</?blockquote[^>]*>", re.IGNORECASE)
MARKDOWN_QUOTE_PATTERN = re.compile(r"^>\s?")


@dataclass
class SegmentationResult:
    """Chunks plus how much of the content they cover."""

    chunks: list[ContentChunk] = field(default_factory=list)
    paragraphs_total: int = 0
    paragraphs_consumed: int = 0

    @property
    def paragraphs_dropped(self) -> int:
        """Paragraphs never reached, or left in a buffer past the cap."""
        return self.paragraphs_total - self.paragraphs_consumed


def is_heading(paragraph: str) -> bool:
    """Check if a paragraph starts with an HTML or markdown heading."""
    return bool(HEADING_PATTERN.match(paragraph.strip()))


def is_quote(paragraph: str) -> bool:
    """Check if a paragraph is, or contains, a blockquote."""
    return bool(QUOTE_START_PATTERN.match(paragraph.strip())) or "<blockquote" in paragraph


def clean_heading_text(text: str) -> str:
    """Strip heading tags and a leading markdown heading marker."""
    return MARKDOWN_HEADING_PATTERN.sub("", HEADING_TAG_PATTERN.sub("", text), count=1).strip()


def clean_quote_text(text: str) -> str:
    """Strip blockquote tags and a leading markdown quote marker."""
    return MARKDOWN_QUOTE_PATTERN.sub("", BLOCKQUOTE_TAG_PATTERN.sub("", text), count=1).strip()


def extract_title(text: str) -> Optional[str]:
    """Guess a title from the first line of a chunk.

    The first non-blank line is a title when it is shorter than 100
    characters and the line after it is longer.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return None

    first_line = lines[0].strip()
    if len(first_line) < TITLE_MAX_LENGTH and len(lines) > 1 and len(lines[1]) > len(first_line):
        return first_line

    return None


def split_paragraphs(content: str) -> list[str]:
    """Split sanitized content on blank lines, dropping empty paragraphs."""
    return [p for p in PARAGRAPH_SPLIT_PATTERN.split(content) if p.strip()]


class Segmenter:
    """Partitions sanitized content into classified chunks.

    Usage:
        segmenter = Segmenter(word_budget=50)
        chunks = segmenter.segment(sanitize_html(html), max_chunks=8)
    """

    def __init__(
        self,
        word_budget: int = WORDS_PER_SLIDE,
        image_extractor: ImageExtractor | None = None,
    ):
        self.word_budget = word_budget
        self.images = image_extractor or ImageExtractor()

    def segment(self, content: str, max_chunks: int) -> list[ContentChunk]:
        """Segment content into at most ``max_chunks`` chunks."""
        return self.segment_content(content, max_chunks).chunks

    def segment_content(self, content: str, max_chunks: int) -> SegmentationResult:
        """Segment content and report how many paragraphs were used.

        Args:
            content: Sanitized content (see ``sanitize_html``).
            max_chunks: Ceiling on the number of chunks.

        Returns:
            SegmentationResult with chunks in content order.
        """
        paragraphs = split_paragraphs(content)
        result = SegmentationResult(paragraphs_total=len(paragraphs))

        if max_chunks <= 0:
            return result

        chunks = result.chunks
        buffer = ""
        buffer_words = 0
        buffered_paragraphs = 0

        for paragraph in paragraphs:
            words = count_words(paragraph)
            heading = is_heading(paragraph)
            quote = is_quote(paragraph)
            image = self.images.has_image(paragraph)

            # A heading starts a new chunk
            if heading and buffer:
                chunks.append(ContentChunk(text=buffer.strip()))
                result.paragraphs_consumed += buffered_paragraphs
                buffer, buffer_words, buffered_paragraphs = "", 0, 0

            # Word budget exceeded
            if buffer and buffer_words + words > self.word_budget:
                chunks.append(ContentChunk(text=buffer.strip(), title=extract_title(buffer)))
                result.paragraphs_consumed += buffered_paragraphs
                buffer, buffer_words, buffered_paragraphs = "", 0, 0

            if buffer:
                buffer += "\n\n"
            buffer += paragraph
            buffer_words += words
            buffered_paragraphs += 1

            # Quotes and images get a chunk of their own, closed right away
            if quote or image:
                image_url, image_alt = self.images.extract_from_paragraph(paragraph) if image else (None, None)
                chunks.append(
                    ContentChunk(
                        title=clean_heading_text(paragraph) if heading else None,
                        text=clean_quote_text(paragraph) if quote else buffer.strip(),
                        image=image_url,
                        image_alt=image_alt,
                        has_image=image,
                        is_quote=quote,
                    )
                )
                result.paragraphs_consumed += buffered_paragraphs
                buffer, buffer_words, buffered_paragraphs = "", 0, 0

            if len(chunks) >= max_chunks:
                break

        if buffer.strip() and len(chunks) < max_chunks:
            chunks.append(ContentChunk(text=buffer.strip()))
            result.paragraphs_consumed += buffered_paragraphs

        if len(chunks) > max_chunks:
            # Two chunks can close on one paragraph; the second is cut here
            del chunks[max_chunks:]
            result.paragraphs_consumed -= 1

        _logger.debug(
            f"SEGMENT | paragraphs={result.paragraphs_total} | chunks={len(chunks)} | "
            f"max_chunks={max_chunks} | dropped={result.paragraphs_dropped}"
        )
        return result


def segment(content: str, max_chunks: int, word_budget: int = WORDS_PER_SLIDE) -> list[ContentChunk]:
    """Segment sanitized content into at most ``max_chunks`` chunks."""
    return Segmenter(word_budget=word_budget).segment(content, max_chunks)

"""Image extraction from article HTML."""

from __future__ import annotations

import re
from typing import Optional

# Global scan: at least one attribute character before src
IMAGE_SRC_PATTERN = re.compile(r"""<img[^>]+src=["']([^"']+)["'][^>]*>""", re.IGNORECASE)

# Paragraph scan
PARAGRAPH_IMAGE_PATTERN = re.compile(r"""<img[^>]*src=["']([^"']+)["'][^>]*>""", re.IGNORECASE)
PARAGRAPH_ALT_PATTERN = re.compile(r"""<img[^>]*alt=["']([^"']+)["'][^>]*>""", re.IGNORECASE)
HAS_IMAGE_PATTERN = re.compile(r"<img[^>]*src", re.IGNORECASE)


class ImageExtractor:
    """Finds image sources in HTML.

    Example:
        extractor = ImageExtractor()
        extractor.extract_all('<p><img src="a.jpg"></p><img src="b.png">')
        # ["a.jpg", "b.png"]
        extractor.extract_from_paragraph('<img src="a.jpg" alt="A">')
        # ("a.jpg", "A")
    """

    def extract_all(self, html: Optional[str]) -> list[str]:
        """Get every image URL in document order."""
        if not html:
            return []
        return IMAGE_SRC_PATTERN.findall(html)

    def has_image(self, paragraph: str) -> bool:
        """Check if a paragraph contains an image element with a source."""
        return bool(HAS_IMAGE_PATTERN.search(paragraph))

    def extract_image(self, paragraph: str) -> Optional[str]:
        """Get the first image URL in a paragraph."""
        match = PARAGRAPH_IMAGE_PATTERN.search(paragraph)
        return match.group(1) if match else None

    def extract_alt(self, paragraph: str) -> Optional[str]:
        """Get the alt text of the first image in a paragraph that has one."""
        match = PARAGRAPH_ALT_PATTERN.search(paragraph)
        return match.group(1) if match else None

    def extract_from_paragraph(self, paragraph: str) -> tuple[Optional[str], Optional[str]]:
        """Get ``(url, alt)`` for a single paragraph."""
        return self.extract_image(paragraph), self.extract_alt(paragraph)


_default_extractor = ImageExtractor()


def extract_images(html: Optional[str]) -> list[str]:
    """Get every image URL in document order."""
    return _default_extractor.extract_all(html)


def extract_image(paragraph: str) -> Optional[str]:
    """Get the first image URL in a paragraph."""
    return _default_extractor.extract_image(paragraph)


def extract_image_alt(paragraph: str) -> Optional[str]:
    """Get the first image alt text in a paragraph."""
    return _default_extractor.extract_alt(paragraph)


def has_image(paragraph: str) -> bool:
    """Check if a paragraph contains an image."""
    return _default_extractor.has_image(paragraph)

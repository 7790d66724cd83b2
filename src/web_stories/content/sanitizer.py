"""HTML cleanup for story content.

Regex-based, best-effort cleanup of article HTML. This is not a parser:
nested ``<script>`` blocks and attributes containing ``>`` are known to
degrade, and unmatched tags simply pass through the removal rules.
"""

from __future__ import annotations

import re
from typing import Optional

# Script/style blocks, simple non-nested case
SCRIPT_PATTERN = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
STYLE_PATTERN = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)

# Order matters: &amp; is decoded after &nbsp; and before &lt;/&gt;
ENTITY_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)
PARAGRAPH_CLOSE_PATTERN = re.compile(r"</p>", re.IGNORECASE)
PARAGRAPH_OPEN_PATTERN = re.compile(r"<p[^>]*>", re.IGNORECASE)

ALLOWED_TAGS: tuple[str, ...] = ("strong", "b", "em", "i", "h[1-6]", "blockquote", "img")
DISALLOWED_TAG_PATTERN = re.compile(
    r"<(?!/?(?:" + "|".join(ALLOWED_TAGS) + r")\b)[^>]*>",
    re.IGNORECASE,
)

EXCESS_NEWLINES_PATTERN = re.compile(r"\n\s*\n\s*\n")


class ContentSanitizer:
    """Cleans article HTML down to story-ready text.

    Keeps basic formatting tags (strong, b, em, i, h1-h6, blockquote, img)
    so the segmenter can still see headings, quotes and images. Paragraphs
    come out separated by a blank line.

    Example:
        sanitizer = ContentSanitizer()
        sanitizer.clean("<p>One</p><p>Two &amp; three</p>")
        # "One\\n\\nTwo & three"
    """

    def clean(self, html: Optional[str]) -> str:
        """Clean HTML content for story use.

        Args:
            html: Raw article HTML. None is treated as empty.

        Returns:
            Sanitized text. Never raises.
        """
        if not html:
            return ""

        content = SCRIPT_PATTERN.sub("", html)
        content = STYLE_PATTERN.sub("", content)

        content = self.decode_entities(content)

        # Preserve line breaks and paragraphs
        content = LINE_BREAK_PATTERN.sub("\n", content)
        content = PARAGRAPH_CLOSE_PATTERN.sub("\n\n", content)
        content = PARAGRAPH_OPEN_PATTERN.sub("", content)

        content = DISALLOWED_TAG_PATTERN.sub("", content)

        content = EXCESS_NEWLINES_PATTERN.sub("\n\n", content)
        return content.strip()

    @staticmethod
    def decode_entities(text: str) -> str:
        """Decode the common character entities, leaving all others alone."""
        for entity, char in ENTITY_REPLACEMENTS:
            text = text.replace(entity, char)
        return text


_default_sanitizer = ContentSanitizer()


def sanitize_html(html: Optional[str]) -> str:
    """Clean HTML with the default sanitizer."""
    return _default_sanitizer.clean(html)

"""Excerpt generation for posts published without one."""

from __future__ import annotations

import re
from typing import Optional

from ..constants import EXCERPT_ELLIPSIS, EXCERPT_MAX_LENGTH
from .sanitizer import sanitize_html

SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")


def generate_excerpt(html: Optional[str], max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """Build an excerpt from whole sentences of the post body.

    Sentences are packed in order, each followed by ". ", until the next one
    would push the excerpt past ``max_length``. The ". " is appended whatever
    the sentence ends with, so text ending in other punctuation (``:``, ``…``)
    comes out doubled.

    Args:
        html: Raw post HTML.
        max_length: Character limit checked before each sentence is added.

    Returns:
        Excerpt text, or the first ``max_length`` characters plus "..." when
        not even the first sentence fits.
    """
    content = sanitize_html(html)
    sentences = [s for s in SENTENCE_SPLIT_PATTERN.split(content) if s.strip()]

    excerpt = ""
    for sentence in sentences:
        if len(excerpt + sentence) > max_length:
            break
        excerpt += sentence + ". "

    return excerpt.strip() or content[:max_length] + EXCERPT_ELLIPSIS

"""Exceptions raised by the story engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .content.models import GenerationReport


class StoryEngineError(Exception):
    """Base exception for story engine errors."""

    pass


class TemplateNotFoundError(StoryEngineError, LookupError):
    """No story template matches the requested id."""

    def __init__(self, template_id: str, available: list[str] | None = None):
        self.template_id = template_id
        self.available = available or []
        super().__init__(f"Template with ID {template_id} not found")


class SlideLimitExceededError(StoryEngineError):
    """Content did not fit in ``max_slides`` and strict mode was requested."""

    def __init__(self, report: "GenerationReport"):
        self.report = report
        super().__init__(
            f"Content exceeds slide limit: {report.chunk_capacity} content slides "
            f"available, {report.paragraphs_dropped} paragraphs dropped"
        )

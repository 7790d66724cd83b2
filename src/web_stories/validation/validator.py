"""Marker-based validation of rendered story markup.

This is a text check, not the AMP validator: it only looks for the markers
every story document needs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

_logger = logging.getLogger("story_validator")


@dataclass(frozen=True)
class MarkupMarker:
    """A textual signature that should appear in rendered markup."""

    tokens: tuple[str, ...]
    message: str
    required: bool = True

    def is_present(self, markup: str) -> bool:
        """Check if any of the marker's tokens occurs in the markup."""
        return any(token in markup for token in self.tokens)


# Required markers: missing one is an error
REQUIRED_MARKERS: tuple[MarkupMarker, ...] = (
    MarkupMarker(("⚡", "amp"), "Missing AMP attribute in html tag"),
    MarkupMarker(("amp-story",), "Missing amp-story component"),
    MarkupMarker(("viewport",), "Missing viewport meta tag"),
)

# Optional markers: missing one is a warning
OPTIONAL_MARKERS: tuple[MarkupMarker, ...] = (
    MarkupMarker(("application/ld+json",), "Missing structured data (JSON-LD)", required=False),
    MarkupMarker(("canonical",), "Missing canonical URL", required=False),
)


@dataclass
class MarkupValidationResult:
    """Result of validating a rendered story document."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if no required marker is missing."""
        return not self.errors

    @property
    def message(self) -> str:
        """Get a human-readable status message."""
        if self.errors:
            return f"[X] Story markup invalid: {len(self.errors)} error(s), {len(self.warnings)} warning(s)"
        if self.warnings:
            return f"[!] Story markup valid with {len(self.warnings)} warning(s)"
        return "[OK] Story markup valid"

    def to_dict(self) -> dict:
        """Serialize as ``{isValid, errors, warnings}``."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def validate_markup(markup: str) -> MarkupValidationResult:
    """Validate rendered markup for required and optional markers.

    Args:
        markup: Rendered document text.

    Returns:
        MarkupValidationResult; invalid only when a required marker is missing.
    """
    markup = markup or ""
    result = MarkupValidationResult()

    for marker in REQUIRED_MARKERS:
        if not marker.is_present(markup):
            result.errors.append(marker.message)

    for marker in OPTIONAL_MARKERS:
        if not marker.is_present(markup):
            result.warnings.append(marker.message)

    _logger.info(
        f"VALIDATE | valid={result.is_valid} | errors={result.errors} | warnings={result.warnings}"
    )
    return result

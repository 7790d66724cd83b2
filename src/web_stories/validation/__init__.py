"""Validation module: marker checks over rendered story markup."""

from .validator import (
    MarkupMarker,
    MarkupValidationResult,
    OPTIONAL_MARKERS,
    REQUIRED_MARKERS,
    validate_markup,
)

__all__ = [
    "MarkupMarker",
    "MarkupValidationResult",
    "OPTIONAL_MARKERS",
    "REQUIRED_MARKERS",
    "validate_markup",
]

"""Background color variants for visual variety across slides."""

from __future__ import annotations

from ..constants import GRADIENT_BASE_ANGLE, GRADIENT_VARIANT_ANGLES


def variant_background(base_color: str, index: int) -> str:
    """Get the background for the slide at ``index``.

    Gradient backgrounds rotate through four angle variants by replacing the
    base ``135deg`` angle. Any other background is returned unchanged, as is a
    gradient that does not use the base angle.

    Args:
        base_color: Template background (color or gradient expression).
        index: Zero-based position of the content slide.

    Returns:
        Background expression for that slide.
    """
    if "gradient" not in base_color:
        return base_color

    angle = GRADIENT_VARIANT_ANGLES[index % len(GRADIENT_VARIANT_ANGLES)]
    if angle == GRADIENT_BASE_ANGLE:
        return base_color
    return base_color.replace(GRADIENT_BASE_ANGLE, angle, 1)

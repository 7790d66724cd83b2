"""Render module: AMP Web Story markup from slides."""

from .escape import escape_html, json_for_script, nl2br
from .markup import MarkupRenderer, amp_animation, build_structured_data, render_markup

__all__ = [
    "MarkupRenderer",
    "render_markup",
    "build_structured_data",
    "amp_animation",
    "escape_html",
    "json_for_script",
    "nl2br",
]

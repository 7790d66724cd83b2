"""Story commands - generate, render, validate and list templates."""

from .commands import generate, list_templates, render, validate

__all__ = ["generate", "render", "validate", "list_templates"]

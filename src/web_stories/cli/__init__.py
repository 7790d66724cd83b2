"""Web Stories CLI - Typer application.

Usage:
    web-stories generate post.json --template modern --html
    web-stories render post.story.json
    web-stories validate post.html
    web-stories list-templates
"""

from .app import app, main

__all__ = ["app", "main"]

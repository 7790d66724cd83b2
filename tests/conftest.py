"""Shared test fixtures and configuration.

Provides sample posts, template configurations and deterministic animation
selectors for testing the story engine.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from web_stories.content import DocumentMetadata, RawPost
from web_stories.design import RoundRobinAnimationSelector, TemplateConfig

# Thirty words, so two paragraphs never share a 50-word slide
LONG_PARAGRAPH = " ".join(f"word{i}" for i in range(30))


@pytest.fixture
def hello_world_post() -> RawPost:
    """Two short paragraphs, no excerpt or images."""
    return RawPost(
        title="Hello World",
        html_content="<p>First paragraph text here.</p><p>Second paragraph.</p>",
        author="Ada",
    )


@pytest.fixture
def long_post() -> RawPost:
    """Ten 30-word paragraphs, more than a 5-slide story can hold."""
    html = "".join(f"<p>{LONG_PARAGRAPH}</p>" for _ in range(10))
    return RawPost(title="Long Read", html_content=html)


@pytest.fixture
def rich_post() -> RawPost:
    """Post with a heading, a quote, an image and entities."""
    return RawPost(
        title="Rich Post",
        html_content=(
            "<p>Intro text &amp; more.</p>"
            "<h2>Section Heading</h2>\n\n"
            "<p>Section body text.</p>"
            "<blockquote>Stay hungry, stay foolish.</blockquote>\n\n"
            '<p><img src="https://example.com/a.jpg" alt="A picture"></p>'
            "<p>Closing words.</p>"
        ),
        excerpt="A post with everything",
        featured_image="https://example.com/featured.jpg",
        author="Grace",
    )


@pytest.fixture
def solid_config() -> TemplateConfig:
    """Solid-background config with a single animation."""
    return TemplateConfig(
        background_color="#111111",
        text_color="#eeeeee",
        accent_color="#ff0000",
        font_family="Arial, sans-serif",
        animations=["fade-in"],
    )


@pytest.fixture
def gradient_config() -> TemplateConfig:
    """Gradient-background config with three animations."""
    return TemplateConfig(
        background_color="linear-gradient(135deg, #000000, #ffffff)",
        text_color="#ffffff",
        accent_color="#ffb900",
        font_family="Inter, sans-serif",
        animations=["fade-in", "fly-in-bottom", "zoom-in"],
    )


@pytest.fixture
def selector() -> RoundRobinAnimationSelector:
    """Deterministic animation selector."""
    return RoundRobinAnimationSelector()


@pytest.fixture
def metadata() -> DocumentMetadata:
    """Complete publishing metadata with a fixed publish date."""
    return DocumentMetadata(
        title="Hello World",
        description="A first story",
        author="Ada",
        publisher_name="Example Press",
        publisher_logo="https://example.com/logo.png",
        canonical_url="https://example.com/hello-world",
        date_published=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def templates_yaml(tmp_path: Path) -> Path:
    """Templates file overriding 'modern' and adding 'custom'."""
    path = tmp_path / "templates.yaml"
    path.write_text(
        "templates:\n"
        "  - id: modern\n"
        "    name: Modern Override\n"
        "    config:\n"
        "      background_color: '#123456'\n"
        "      animations: [fade-in]\n"
        "  - id: custom\n"
        "    name: Custom\n"
        "    category: test\n"
        "    config:\n"
        "      backgroundColor: '#abcdef'\n"
        "      textColor: '#000000'\n"
        "      accentColor: '#ff00ff'\n"
        "      fontFamily: 'Georgia, serif'\n"
        "      animations: [zoom-in, fade-in]\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove WEB_STORIES_* variables so settings use their defaults."""
    for key in list(os.environ):
        if key.startswith("WEB_STORIES_"):
            monkeypatch.delenv(key)

"""Immutable parameter dataclasses for story commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...config import EngineSettings

SUPPORTED_POST_SUFFIXES = (".json", ".yaml", ".yml")


def default_document_path(post_path: Path) -> Path:
    """Slides JSON written next to the post: ``post.json`` -> ``post.story.json``."""
    return post_path.with_name(f"{post_path.stem}.story.json")


def default_html_path(document_path: Path) -> Path:
    """HTML written next to the slides JSON: ``post.story.json`` -> ``post.html``."""
    stem = document_path.stem
    if stem.endswith(".story"):
        stem = stem[: -len(".story")]
    return document_path.with_name(f"{stem}.html")


@dataclass(frozen=True)
class GenerateParams:
    """Immutable parameters for story generation."""

    post_path: Path
    template_id: str
    templates_path: Path
    max_slides: int
    include_title: bool
    include_cta: bool
    cta_text: Optional[str]
    cta_url: Optional[str]
    words_per_slide: int
    excerpt_length: int
    animation_strategy: str
    seed: Optional[int]
    strict: bool
    output_path: Path
    html_path: Optional[Path]
    canonical_url: str
    publisher_name: str
    publisher_logo: str
    include_auto_ads: bool
    ad_slot: str

    @classmethod
    def from_cli(
        cls,
        settings: EngineSettings,
        post_path: Path,
        template: Optional[str] = None,
        templates_file: Optional[Path] = None,
        max_slides: Optional[int] = None,
        include_title: bool = True,
        include_cta: bool = True,
        cta_text: Optional[str] = None,
        cta_url: Optional[str] = None,
        words_per_slide: Optional[int] = None,
        seed: Optional[int] = None,
        strict: bool = False,
        output: Optional[Path] = None,
        html: bool = False,
        html_output: Optional[Path] = None,
        canonical_url: str = "",
        publisher_name: str = "",
        publisher_logo: str = "",
        no_ads: bool = False,
        **kwargs,
    ) -> "GenerateParams":
        """Create from CLI arguments, falling back to settings."""
        output_path = output or default_document_path(post_path)

        # --html-output implies --html
        html_path = html_output
        if html and html_path is None:
            html_path = default_html_path(output_path)

        return cls(
            post_path=post_path,
            template_id=template or settings.default_template,
            templates_path=templates_file or settings.templates_path,
            max_slides=max_slides if max_slides is not None else settings.max_slides,
            include_title=include_title,
            include_cta=include_cta,
            cta_text=cta_text,
            cta_url=cta_url,
            words_per_slide=words_per_slide if words_per_slide is not None else settings.words_per_slide,
            excerpt_length=settings.excerpt_length,
            animation_strategy=settings.animation_strategy,
            seed=seed if seed is not None else settings.animation_seed,
            strict=strict,
            output_path=output_path,
            html_path=html_path,
            canonical_url=canonical_url,
            publisher_name=publisher_name,
            publisher_logo=publisher_logo,
            include_auto_ads=settings.include_auto_ads and not no_ads,
            ad_slot=settings.ad_slot,
        )


@dataclass(frozen=True)
class RenderParams:
    """Immutable parameters for rendering a slides JSON document."""

    document_path: Path
    output_path: Path
    include_auto_ads: bool
    ad_slot: str

    @classmethod
    def from_cli(
        cls,
        settings: EngineSettings,
        document_path: Path,
        output: Optional[Path] = None,
        no_ads: bool = False,
        **kwargs,
    ) -> "RenderParams":
        """Create from CLI arguments, falling back to settings."""
        return cls(
            document_path=document_path,
            output_path=output or default_html_path(document_path),
            include_auto_ads=settings.include_auto_ads and not no_ads,
            ad_slot=settings.ad_slot,
        )


@dataclass(frozen=True)
class ValidateParams:
    """Immutable parameters for markup validation."""

    html_path: Path
    as_json: bool = False

"""Tests for the story generation pipeline.

Covers the end-to-end behavior of generate_story and generate_story_report:
slide ordering, the slide ceiling, truncation reporting, strict mode,
customizations and template lookup.
"""

from __future__ import annotations

import pytest

from web_stories import (
    GenerationOptions,
    RawPost,
    SlideLimitExceededError,
    SlideType,
    StoryGenerator,
    TemplateNotFoundError,
    TemplateOverrides,
    create_generator,
    generate_story,
    generate_story_report,
)
from web_stories.design import TEMPLATE_PRESETS, RandomAnimationSelector, TemplateConfig


class TestHelloWorld:
    """Two short paragraphs with the default options."""

    def test_three_slides(self, hello_world_post: RawPost, solid_config: TemplateConfig, selector):
        """Title, one content slide and the CTA."""
        slides = generate_story(hello_world_post, solid_config, selector=selector)

        assert [s.type for s in slides] == [SlideType.TITLE, SlideType.CONTENT, SlideType.CTA]
        assert [s.id for s in slides] == ["1", "2", "cta"]

    def test_content_slide_text(self, hello_world_post: RawPost, solid_config: TemplateConfig, selector):
        """Both paragraphs share the content slide."""
        slides = generate_story(hello_world_post, solid_config, selector=selector)
        assert slides[1].content.text == "First paragraph text here.\n\nSecond paragraph."

    def test_cta_slide(self, hello_world_post: RawPost, solid_config: TemplateConfig, selector):
        """The CTA names the post and uses the default button."""
        cta = generate_story(hello_world_post, solid_config, selector=selector)[-1]

        assert cta.content.title == "Learn More About Hello World"
        assert cta.content.button_text == "Read Full Article"
        assert cta.content.button_url == "#"

    def test_without_title_and_cta(self, hello_world_post: RawPost, solid_config: TemplateConfig):
        """Fixed slides can be turned off."""
        options = GenerationOptions(include_title=False, include_cta=False)
        slides = generate_story(hello_world_post, solid_config, options)

        assert [s.type for s in slides] == [SlideType.CONTENT]
        assert slides[0].id == "2"


class TestSlideCeiling:
    """Tests for max_slides and truncation."""

    def test_truncates_to_max_slides(self, long_post: RawPost, solid_config: TemplateConfig):
        """Ten paragraphs in a five-slide story: title, three content, CTA."""
        options = GenerationOptions(max_slides=5)
        slides = generate_story(long_post, solid_config, options)

        assert len(slides) == 5
        assert [s.id for s in slides] == ["1", "2", "3", "4", "cta"]
        assert slides[0].type == SlideType.TITLE
        assert slides[-1].type == SlideType.CTA

    def test_content_ids_stable_without_title(self, long_post: RawPost, solid_config: TemplateConfig):
        """Dropping the title slide does not renumber the content slides."""
        options = GenerationOptions(max_slides=4, include_title=False)
        slides = generate_story(long_post, solid_config, options)

        assert [s.id for s in slides] == ["2", "3", "4", "cta"]

    @pytest.mark.parametrize("max_slides", [2, 3, 4, 7, 10, 20])
    def test_never_exceeds_max_slides(self, long_post: RawPost, solid_config: TemplateConfig, max_slides: int):
        """The slide count is bounded for any ceiling."""
        slides = generate_story(long_post, solid_config, GenerationOptions(max_slides=max_slides))
        assert len(slides) <= max_slides

    def test_report_counts_dropped(self, long_post: RawPost, solid_config: TemplateConfig):
        """The report says how much content was cut."""
        report = generate_story_report(long_post, solid_config, GenerationOptions(max_slides=5))

        assert report.chunk_capacity == 3
        assert report.chunks_created == 3
        assert report.paragraphs_total == 10
        assert report.paragraphs_dropped == 7
        assert report.truncated is True
        assert report.slides_count == 5

    def test_report_not_truncated(self, hello_world_post: RawPost, solid_config: TemplateConfig):
        """Content that fits is not reported as truncated."""
        report = generate_story_report(hello_world_post, solid_config)
        assert report.truncated is False

    def test_strict_raises(self, long_post: RawPost, solid_config: TemplateConfig):
        """Strict mode refuses to truncate."""
        options = GenerationOptions(max_slides=5, strict=True)

        with pytest.raises(SlideLimitExceededError) as exc_info:
            generate_story(long_post, solid_config, options)

        assert exc_info.value.report.paragraphs_dropped == 7
        assert "7 paragraphs dropped" in str(exc_info.value)

    def test_strict_passes_when_content_fits(self, hello_world_post: RawPost, solid_config: TemplateConfig):
        """Strict mode is silent when nothing is cut."""
        slides = generate_story(hello_world_post, solid_config, GenerationOptions(strict=True))
        assert len(slides) == 3

    def test_only_fixed_slides(self, long_post: RawPost, solid_config: TemplateConfig):
        """A ceiling of two leaves room only for title and CTA."""
        slides = generate_story(long_post, solid_config, GenerationOptions(max_slides=2))
        assert [s.type for s in slides] == [SlideType.TITLE, SlideType.CTA]


class TestEmptyContent:
    """Tests for posts without body content."""

    def test_empty_body(self, solid_config: TemplateConfig):
        """Empty content yields only title and CTA."""
        post = RawPost(title="Empty", html_content="")
        slides = generate_story(post, solid_config)

        assert [s.type for s in slides] == [SlideType.TITLE, SlideType.CTA]

    def test_script_only_body(self, solid_config: TemplateConfig):
        """Content that sanitizes to nothing yields only title and CTA."""
        post = RawPost(title="Scripted", html_content="<script>track()</script>")
        assert len(generate_story(post, solid_config)) == 2


class TestRichPost:
    """Tests for headings, quotes and images through the full pipeline."""

    def test_slide_types(self, rich_post: RawPost, solid_config: TemplateConfig, selector):
        """Quote and image paragraphs get their own slides."""
        slides = generate_story(rich_post, solid_config, selector=selector)

        assert [s.type for s in slides] == [
            SlideType.TITLE,
            SlideType.CONTENT,
            SlideType.QUOTE,
            SlideType.IMAGE,
            SlideType.CONTENT,
            SlideType.CTA,
        ]

    def test_entities_decoded(self, rich_post: RawPost, solid_config: TemplateConfig):
        """Entities in the body are decoded in slide text."""
        slides = generate_story(rich_post, solid_config)
        assert slides[1].content.text == "Intro text & more."

    def test_quote_and_image_content(self, rich_post: RawPost, solid_config: TemplateConfig):
        """Quote text, quote author and image data reach the slides."""
        slides = generate_story(rich_post, solid_config)
        quote, image = slides[2], slides[3]

        assert quote.content.quote == "Stay hungry, stay foolish."
        assert quote.content.author == "Grace"
        assert image.content.image == "https://example.com/a.jpg"
        assert image.content.image_alt == "A picture"


class TestCustomization:
    """Tests for template handling and customizations."""

    def test_customizations_override_template(self, hello_world_post: RawPost, solid_config: TemplateConfig):
        """Customizations win over the template configuration."""
        options = GenerationOptions(
            customizations=TemplateOverrides(text_color="#00ff00", animations=["pulse"])
        )
        slides = generate_story(hello_world_post, solid_config, options)

        assert all(s.style.text_color == "#00ff00" for s in slides)
        assert slides[1].style.animation == "pulse"

    def test_template_unchanged_after_generation(self, hello_world_post: RawPost, solid_config: TemplateConfig):
        """Customizations never leak into the template."""
        options = GenerationOptions(customizations=TemplateOverrides(text_color="#00ff00"))
        generate_story(hello_world_post, solid_config, options)

        assert solid_config.text_color == "#eeeeee"

    def test_animations_from_template(self, hello_world_post: RawPost, gradient_config: TemplateConfig):
        """Non-CTA animations come from the template palette."""
        slides = generate_story(hello_world_post, gradient_config, selector=RandomAnimationSelector(seed=1))

        for slide in slides[:-1]:
            assert slide.style.animation in gradient_config.animations

    def test_seeded_selector_is_reproducible(self, hello_world_post: RawPost, gradient_config: TemplateConfig):
        """Same seed, same animations."""
        first = generate_story(hello_world_post, gradient_config, selector=RandomAnimationSelector(seed=42))
        second = generate_story(hello_world_post, gradient_config, selector=RandomAnimationSelector(seed=42))

        assert [s.style.animation for s in first] == [s.style.animation for s in second]

    def test_accepts_story_template(self, hello_world_post: RawPost):
        """A StoryTemplate can be passed in place of its config."""
        slides = generate_story(hello_world_post, TEMPLATE_PRESETS["minimal_dark"])
        assert slides[0].style.background_color == "#0a0a0f"

    def test_gradient_variants_on_content_slides(self, long_post: RawPost, gradient_config: TemplateConfig):
        """Consecutive content slides rotate gradient angles."""
        slides = generate_story(long_post, gradient_config, GenerationOptions(max_slides=6))
        backgrounds = [s.style.background_color for s in slides[1:-1]]

        assert [b.split("(")[1].split(",")[0] for b in backgrounds] == ["135deg", "45deg", "225deg", "315deg"]


class TestCreateGenerator:
    """Tests for generator lookup."""

    def test_binds_template(self, hello_world_post: RawPost):
        """The generator uses the template it was created for."""
        generator = create_generator("editorial", list(TEMPLATE_PRESETS.values()))

        assert isinstance(generator, StoryGenerator)
        assert generator.template.id == "editorial"
        assert generator.generate(hello_world_post)[0].style.font_family == "Georgia, serif"

    def test_report_through_generator(self, long_post: RawPost):
        """Reports are available through the generator too."""
        generator = create_generator("modern", list(TEMPLATE_PRESETS.values()))
        report = generator.generate_report(long_post, GenerationOptions(max_slides=5))

        assert report.truncated is True

    def test_unknown_template(self):
        """Unknown ids raise TemplateNotFoundError naming the id."""
        with pytest.raises(TemplateNotFoundError, match="Template with ID missing not found"):
            create_generator("missing", list(TEMPLATE_PRESETS.values()))

    def test_not_found_is_lookup_error(self):
        """TemplateNotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            create_generator("missing", [])

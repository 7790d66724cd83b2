"""Tests for content segmentation.

Tests cover:
- Paragraph classification helpers
- Word budget boundaries and title guessing
- Heading, quote and image boundaries
- Chunk ceiling and dropped-paragraph accounting
"""

import pytest

from web_stories.content import Segmenter, segment
from web_stories.content.segmenter import (
    clean_heading_text,
    clean_quote_text,
    extract_title,
    is_heading,
    is_quote,
    split_paragraphs,
)


def words(n: int, prefix: str = "w") -> str:
    """Build a paragraph of ``n`` distinct words."""
    return " ".join(f"{prefix}{i}" for i in range(n))


class TestClassification:
    """Test paragraph classification helpers."""

    @pytest.mark.parametrize("paragraph", ["<h2>Title</h2>", "<h3>x</h3>", "## Title", "  # Top"])
    def test_is_heading(self, paragraph: str):
        """HTML and markdown headings are detected."""
        assert is_heading(paragraph) is True

    @pytest.mark.parametrize("paragraph", ["Plain text", "#hashtag", "Text <h2>late</h2>"])
    def test_is_not_heading(self, paragraph: str):
        """Headings must open the paragraph."""
        assert is_heading(paragraph) is False

    @pytest.mark.parametrize("paragraph", [
        "<blockquote>Quoted</blockquote>",
        "> Markdown quote",
        "Text then <blockquote>inline</blockquote>",
    ])
    def test_is_quote(self, paragraph: str):
        """Blockquotes anywhere and leading '>' are quotes."""
        assert is_quote(paragraph) is True

    def test_is_not_quote(self):
        """Plain text is not a quote."""
        assert is_quote("Nothing to see") is False

    def test_clean_heading_text(self):
        """Heading tags and markdown markers are stripped."""
        assert clean_heading_text("<h2 class='x'>Section</h2>") == "Section"
        assert clean_heading_text("### Section") == "Section"

    def test_clean_quote_text(self):
        """Blockquote tags and markdown markers are stripped."""
        assert clean_quote_text("<blockquote>Wise words</blockquote>") == "Wise words"
        assert clean_quote_text("> Wise words") == "Wise words"

    def test_split_paragraphs_drops_blank(self):
        """Blank-line separated, empty parts dropped."""
        assert split_paragraphs("One\n\nTwo\n  \nThree\n\n\n") == ["One", "Two", "Three"]


class TestExtractTitle:
    """Test the title-guess heuristic."""

    def test_short_first_line_before_longer_line(self):
        """A short line followed by a longer one is a title."""
        assert extract_title("Short\nThis line is much longer") == "Short"

    def test_skips_blank_lines(self):
        """Blank lines are ignored when picking the first two lines."""
        assert extract_title("\nShort\n\nThis line is much longer") == "Short"

    def test_single_line_has_no_title(self):
        """One line cannot be a title."""
        assert extract_title("Only line") is None

    def test_longer_first_line_has_no_title(self):
        """The first line must be shorter than the second."""
        assert extract_title("A fairly long first line\nShort") is None

    def test_first_line_too_long(self):
        """Lines of 100+ characters are not titles."""
        assert extract_title("x" * 100 + "\n" + "y" * 200) is None


class TestWordBudget:
    """Test word-budget chunk boundaries."""

    def test_under_budget_is_one_chunk(self):
        """Paragraphs within the budget share a chunk."""
        chunks = segment("First paragraph text here.\n\nSecond paragraph.", max_chunks=8)

        assert len(chunks) == 1
        assert chunks[0].text == "First paragraph text here.\n\nSecond paragraph."
        assert chunks[0].title is None

    def test_budget_exceeded_starts_new_chunk(self):
        """A paragraph that would pass the budget starts a new chunk."""
        content = f"{words(30, 'a')}\n\n{words(30, 'b')}"
        chunks = segment(content, max_chunks=8)

        assert [c.text for c in chunks] == [words(30, "a"), words(30, "b")]

    def test_custom_budget(self):
        """The budget is configurable."""
        content = "one two\n\nthree four\n\nfive six"
        chunks = Segmenter(word_budget=4).segment(content, max_chunks=8)

        assert [c.text for c in chunks] == ["one two\n\nthree four", "five six"]

    def test_single_oversized_paragraph_kept_whole(self):
        """A paragraph over the budget on its own is never split."""
        chunks = segment(words(120), max_chunks=8)

        assert len(chunks) == 1
        assert chunks[0].text == words(120)

    def test_budget_close_guesses_title(self):
        """Chunks closed by the budget get a title from their first line."""
        content = f"Intro\n{words(20)}\n\n{words(40, 'z')}"
        chunks = segment(content, max_chunks=8)

        assert chunks[0].title == "Intro"
        assert chunks[1].title is None


class TestStructuralBoundaries:
    """Test heading, quote and image boundaries."""

    def test_heading_starts_new_chunk(self):
        """A heading closes the previous chunk."""
        content = "Intro text.\n\n<h2>Section</h2>\n\nBody text."
        chunks = segment(content, max_chunks=8)

        assert [c.text for c in chunks] == ["Intro text.", "<h2>Section</h2>\n\nBody text."]

    def test_quote_gets_own_chunk(self):
        """A quote closes immediately with cleaned text."""
        content = "<blockquote>Be brief.</blockquote>\n\nAfter."
        chunks = segment(content, max_chunks=8)

        assert len(chunks) == 2
        assert chunks[0].is_quote is True
        assert chunks[0].text == "Be brief."
        assert chunks[1].text == "After."
        assert chunks[1].is_quote is False

    def test_quote_replaces_buffered_text(self):
        """Text buffered before a quote is not carried into the quote chunk."""
        content = "Lead in.\n\n<blockquote>Be brief.</blockquote>"
        result = Segmenter().segment_content(content, max_chunks=8)

        assert [c.text for c in result.chunks] == ["Be brief."]
        assert result.paragraphs_dropped == 0

    def test_image_gets_own_chunk(self):
        """An image paragraph closes its chunk with image data."""
        content = 'Before.\n\n<img src="pic.jpg" alt="Pic">\n\nAfter.'
        chunks = segment(content, max_chunks=8)

        assert len(chunks) == 2
        image_chunk = chunks[0]
        assert image_chunk.has_image is True
        assert image_chunk.image == "pic.jpg"
        assert image_chunk.image_alt == "Pic"
        assert image_chunk.text == 'Before.\n\n<img src="pic.jpg" alt="Pic">'
        assert chunks[1].text == "After."

    def test_heading_with_image_gets_heading_title(self):
        """A heading paragraph holding an image titles the image chunk."""
        content = '<h2>Gallery</h2><img src="g.jpg">'
        chunks = segment(content, max_chunks=8)

        assert chunks[0].title.startswith("Gallery")
        assert chunks[0].image == "g.jpg"


class TestChunkCeiling:
    """Test the max_chunks ceiling."""

    def test_never_exceeds_max_chunks(self):
        """No more chunks than max_chunks, whatever the content."""
        content = "\n\n".join(words(30, f"p{i}") for i in range(10))

        for max_chunks in range(1, 12):
            assert len(segment(content, max_chunks=max_chunks)) <= max_chunks

    def test_zero_max_chunks(self):
        """A ceiling of zero gives no chunks."""
        result = Segmenter().segment_content("Some text.", max_chunks=0)

        assert result.chunks == []
        assert result.paragraphs_dropped == 1

    def test_dropped_paragraphs_counted(self):
        """Paragraphs past the ceiling are reported as dropped."""
        content = "\n\n".join(words(30, f"p{i}") for i in range(10))
        result = Segmenter().segment_content(content, max_chunks=3)

        assert len(result.chunks) == 3
        assert result.paragraphs_total == 10
        assert result.paragraphs_dropped == 7

    def test_nothing_dropped_when_everything_fits(self):
        """No paragraphs are dropped under the ceiling."""
        result = Segmenter().segment_content("One.\n\nTwo.", max_chunks=5)
        assert result.paragraphs_dropped == 0

    def test_double_close_trimmed_to_ceiling(self):
        """A budget close and an image close on one paragraph stay within the ceiling."""
        content = f'{words(45)}\n\n<img src="x.jpg"> {words(10, "v")}'
        result = Segmenter().segment_content(content, max_chunks=1)

        assert len(result.chunks) == 1
        assert result.chunks[0].text == words(45)
        assert result.paragraphs_dropped == 1

    def test_empty_content(self):
        """Empty content gives no chunks."""
        assert segment("", max_chunks=5) == []

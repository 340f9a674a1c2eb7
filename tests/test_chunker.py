"""Tests for greedy paragraph chunking."""

import logging

import pytest

from wiki_pipeline.indexing.chunker import (
    PARAGRAPH_SEPARATOR,
    ParagraphChunker,
    chunk_text,
    clean_wikitext,
    estimate_tokens,
    split_paragraphs,
)

from .conftest import make_paragraph


def _paragraphs(*sizes: int) -> list:
    return [make_paragraph(n, tag=f"p{i}_") for i, n in enumerate(sizes)]


class TestSplitParagraphs:
    """Test suite for split_paragraphs."""

    def test_empty(self) -> None:
        assert split_paragraphs("") == []
        assert split_paragraphs(None) == []

    def test_blank_line_runs(self) -> None:
        assert split_paragraphs("a\n\nb\n\n\n\nc") == ["a", "b", "c"]

    def test_single_newline_does_not_split(self) -> None:
        assert split_paragraphs("a\nb\n\nc") == ["a\nb", "c"]

    def test_leading_and_trailing_separators_dropped(self) -> None:
        assert split_paragraphs("\n\na\n\n") == ["a"]


class TestChunkText:
    """Test suite for chunk_text."""

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text) -> None:
        assert chunk_text(text, 512) == []

    def test_oversized_singleton(self) -> None:
        para = make_paragraph(39)
        assert estimate_tokens(para) == 50

        assert chunk_text(para, 5) == [para]

    def test_greedy_packing_boundary(self) -> None:
        p1, p2, p3 = _paragraphs(3, 3, 3)
        assert [estimate_tokens(p) for p in (p1, p2, p3)] == [3, 3, 3]

        chunks = chunk_text(PARAGRAPH_SEPARATOR.join([p1, p2, p3]), 6)

        assert chunks == [p1 + PARAGRAPH_SEPARATOR + p2, p3]

    def test_exceeding_by_one_flushes(self) -> None:
        p1, p2 = _paragraphs(3, 3)
        assert chunk_text(PARAGRAPH_SEPARATOR.join([p1, p2]), 5) == [p1, p2]

    def test_oversized_paragraph_in_middle(self) -> None:
        small, big, tail = _paragraphs(2, 40, 2)
        text = PARAGRAPH_SEPARATOR.join([small, big, tail])

        assert chunk_text(text, 10) == [small, big, tail]

    def test_everything_fits(self) -> None:
        text = PARAGRAPH_SEPARATOR.join(_paragraphs(5, 5, 5, 5))
        assert chunk_text(text, 512) == [text]

    @pytest.mark.parametrize("target", [0, -1, -512])
    def test_non_positive_target_gives_one_chunk_per_paragraph(self, target: int) -> None:
        paras = _paragraphs(1, 4, 2)
        assert chunk_text(PARAGRAPH_SEPARATOR.join(paras), target) == paras

    def test_extra_blank_lines_normalized_in_chunks(self) -> None:
        assert chunk_text("a\n\n\n\nb", 100) == ["a\n\nb"]

    @pytest.mark.parametrize("target", [0, 1, 5, 13, 40, 512])
    def test_coverage_order_and_non_empty(self, raw_article: str, target: int) -> None:
        article = raw_article + "\n\n" + PARAGRAPH_SEPARATOR.join(_paragraphs(12, 30, 1, 8, 60, 3))
        cleaned = clean_wikitext(article)

        chunks = chunk_text(cleaned, target)

        assert all(chunks)
        assert PARAGRAPH_SEPARATOR.join(chunks) == cleaned
        rejoined = [p for c in chunks for p in split_paragraphs(c)]
        assert rejoined == split_paragraphs(cleaned)

    def test_chunks_respect_target_unless_single_paragraph(self) -> None:
        text = PARAGRAPH_SEPARATOR.join(_paragraphs(4, 7, 2, 9, 3, 3, 11))
        target = 12

        for chunk in chunk_text(text, target):
            if len(split_paragraphs(chunk)) > 1:
                assert estimate_tokens(chunk) <= target + 1


class TestParagraphChunker:
    """Test suite for ParagraphChunker."""

    def test_cleans_before_chunking(self) -> None:
        chunker = ParagraphChunker(target_tokens=512)
        assert chunker.chunk("{{Infobox}}\n\nSee [[Foo|bar]].") == ["See bar."]

    def test_without_cleaning(self) -> None:
        chunker = ParagraphChunker(target_tokens=512, clean=False)
        assert chunker.chunk("See [[Foo|bar]].") == ["See [[Foo|bar]]."]

    def test_none_input(self) -> None:
        assert ParagraphChunker().chunk(None) == []

    def test_target_override(self) -> None:
        paras = _paragraphs(3, 3, 3)
        chunker = ParagraphChunker(target_tokens=512)
        text = PARAGRAPH_SEPARATOR.join(paras)

        assert len(chunker.chunk(text)) == 1
        assert len(chunker.chunk(text, target=6)) == 2
        assert len(chunker.chunk(text, target=0)) == 3

    def test_non_positive_target_warns(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            ParagraphChunker(target_tokens=0)
        assert "every paragraph will become its own chunk" in caplog.text

    def test_non_positive_override_warns(self, caplog) -> None:
        chunker = ParagraphChunker(target_tokens=512)
        with caplog.at_level(logging.WARNING):
            chunks = chunker.chunk("a\n\nb", target=-3)
        assert chunks == ["a", "b"]
        assert "target_tokens=-3" in caplog.text

    def test_positive_override_does_not_warn(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            ParagraphChunker(target_tokens=512).chunk("a\n\nb", target=6)
        assert caplog.text == ""

    def test_count_tokens(self) -> None:
        assert ParagraphChunker().count_tokens(make_paragraph(10)) == 13

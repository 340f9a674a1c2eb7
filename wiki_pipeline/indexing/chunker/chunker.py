"""
Paragraph Chunker
=================

Greedy, paragraph-aligned chunking with an estimated-token budget.

Chunks never overlap and never split a paragraph: each paragraph belongs to
exactly one chunk, and joining the chunks with a blank line gives back the
cleaned text.
"""

import logging
from typing import List, Optional

from .config import DEFAULT_TARGET, PARAGRAPH_SEPARATOR, PARAGRAPH_SPLIT_PATTERN
from .token_estimator import estimate_tokens
from .wikitext_cleaner import clean_wikitext

logger = logging.getLogger(__name__)


def split_paragraphs(text: Optional[str]) -> List[str]:
    """Split text on blank lines, keeping order and dropping empty pieces."""
    if not text:
        return []
    return [p for p in PARAGRAPH_SPLIT_PATTERN.split(text) if p]


def chunk_text(text: Optional[str], target_size: int = DEFAULT_TARGET) -> List[str]:
    """
    Pack consecutive paragraphs into chunks of about ``target_size`` tokens.

    A paragraph is added to the current chunk unless the estimate of the
    chunk so far plus the estimate of the paragraph would exceed
    ``target_size``; reaching the target exactly still fits. The first
    paragraph of a chunk is always accepted, so a paragraph that is larger
    than the target on its own becomes a single oversized chunk.

    A non-positive ``target_size`` is not rejected: every paragraph then
    ends up in a chunk of its own.

    Args:
        text: Cleaned text (None or empty gives no chunks)
        target_size: Target estimated tokens per chunk

    Returns:
        Ordered list of non-empty chunks
    """
    chunks: List[str] = []
    current: List[str] = []

    for para in split_paragraphs(text):
        if not current:
            current.append(para)
            continue

        current_tokens = estimate_tokens(PARAGRAPH_SEPARATOR.join(current))
        para_tokens = estimate_tokens(para)

        if current_tokens + para_tokens > target_size:
            chunks.append(PARAGRAPH_SEPARATOR.join(current))
            current = [para]
        else:
            current.append(para)

    if current:
        chunks.append(PARAGRAPH_SEPARATOR.join(current))

    return chunks


def _warn_if_non_positive(target_tokens: int) -> None:
    if target_tokens <= 0:
        logger.warning(
            f"Non-positive target_tokens={target_tokens}: "
            "every paragraph will become its own chunk"
        )


class ParagraphChunker:
    """
    Wikitext-aware paragraph chunker.

    Optionally cleans wiki markup first, then packs paragraphs greedily
    with :func:`chunk_text`.
    """

    def __init__(self, target_tokens: int = DEFAULT_TARGET, clean: bool = True):
        """
        Initialize chunker.

        Args:
            target_tokens: Default target estimated tokens per chunk
            clean: Whether to run the wikitext cleaner before chunking
        """
        _warn_if_non_positive(target_tokens)
        self.target_tokens = target_tokens
        self.clean = clean

    def chunk(self, text: Optional[str], target: Optional[int] = None) -> List[str]:
        """
        Chunk text into paragraph-aligned pieces.

        Args:
            text: Raw wikitext, or cleaned text when ``clean`` is off
            target: Override target tokens for this call

        Returns:
            List of text chunks
        """
        if self.clean:
            text = clean_wikitext(text)
        if target is None:
            target_tokens = self.target_tokens
        else:
            _warn_if_non_positive(target)
            target_tokens = target
        return chunk_text(text, target_tokens)

    def count_tokens(self, text: Optional[str]) -> int:
        """Estimate tokens in text."""
        return estimate_tokens(text)

# Chunker Module
"""Wikitext cleanup and paragraph chunking with estimated-token budgets."""

from .config import DEFAULT_TARGET, PARAGRAPH_SEPARATOR, TOKENS_PER_WORD
from .wikitext_cleaner import WikitextCleaner, clean_wikitext
from .token_estimator import estimate_tokens
from .chunker import ParagraphChunker, chunk_text, split_paragraphs

__all__ = [
    "DEFAULT_TARGET",
    "PARAGRAPH_SEPARATOR",
    "TOKENS_PER_WORD",
    "WikitextCleaner",
    "clean_wikitext",
    "estimate_tokens",
    "ParagraphChunker",
    "chunk_text",
    "split_paragraphs",
]

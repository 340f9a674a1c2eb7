# Ingestor Module
"""Chunk records and exact token counts for the embedding stage."""

from .config import DEFAULT_TOKENIZER_MODEL
from .token_counter import TokenCounter
from .records import Article, ChunkRecord, build_chunk_records, stable_chunk_id

__all__ = [
    "DEFAULT_TOKENIZER_MODEL",
    "TokenCounter",
    "Article",
    "ChunkRecord",
    "build_chunk_records",
    "stable_chunk_id",
]

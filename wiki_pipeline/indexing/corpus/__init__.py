# Corpus Module
"""Reading article corpora and writing chunk files."""

from .loader import load_articles, write_chunk_records

__all__ = ["load_articles", "write_chunk_records"]

# Indexing Module - Chunk Preparation Pipeline
"""
Chunk preparation components for the embedding pipeline.

This module provides three main components:
- chunker: Wikitext cleanup, token estimation and paragraph chunking
- ingestor: Chunk records with exact token counts
- corpus: JSON Lines corpus reading and chunk writing

Note: ingestor depends on transformers. Import specific submodules
directly when needed:
    from wiki_pipeline.indexing.chunker import ParagraphChunker
    from wiki_pipeline.indexing.ingestor import TokenCounter
"""

# Lazy imports to avoid loading transformers for chunking only
def __getattr__(name):
    if name == "ParagraphChunker":
        from .chunker.chunker import ParagraphChunker
        return ParagraphChunker
    elif name == "WikitextCleaner":
        from .chunker.wikitext_cleaner import WikitextCleaner
        return WikitextCleaner
    elif name == "TokenCounter":
        from .ingestor.token_counter import TokenCounter
        return TokenCounter
    elif name == "load_articles":
        from .corpus.loader import load_articles
        return load_articles
    raise AttributeError(f"module 'indexing' has no attribute '{name}'")


__all__ = [
    "ParagraphChunker",
    "WikitextCleaner",
    "TokenCounter",
    "load_articles",
]

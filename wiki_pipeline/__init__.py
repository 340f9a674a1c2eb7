# wiki_pipeline - Chunk Preparation for Article Embeddings
"""
Prepares encyclopedia articles for embedding generation.

This package provides:
- Heuristic wikitext cleanup
- Word-based token estimation
- Greedy, paragraph-aligned chunking
- Chunk records with exact token counts for the embedding stage
"""

__version__ = "0.1.0"

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Chunking Pipeline
=================

Clean and chunk a wikitext corpus into JSON Lines chunk records:
Loading → Cleaning → Chunking → Writing

Embedding and storage run downstream on the written chunk file.

Usage:
    # Defaults from config/settings.py
    python -m wiki_pipeline.run_chunking

    # Custom paths and budget
    python -m wiki_pipeline.run_chunking --corpus-dir corpus --target-tokens 256

    # Skip the tokenizer download, store estimated token counts
    python -m wiki_pipeline.run_chunking --no-tokenizer
"""

import argparse
import logging
import sys
import time
from datetime import datetime
from typing import Iterator, List, Optional

from .config.logging_config import setup_logging
from .config.settings import AppConfig
from .indexing.chunker import ParagraphChunker
from .indexing.corpus import load_articles, write_chunk_records
from .indexing.ingestor import ChunkRecord, TokenCounter, build_chunk_records

logger = logging.getLogger("wiki_pipeline.run_chunking")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    # Get defaults from config
    config = AppConfig()

    parser = argparse.ArgumentParser(
        description="Clean and chunk wikitext articles for embedding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wiki-chunk                                  # Chunk corpus/articles.jsonl.gz
  wiki-chunk --target-tokens 256              # Smaller chunks
  wiki-chunk --no-tokenizer                   # Offline, estimated token counts
        """
    )

    # Paths (defaults from config)
    path_group = parser.add_argument_group("Paths")
    path_group.add_argument("--corpus-dir", type=str, default=config.corpus.corpus_dir,
                           help=f"Corpus directory (default: {config.corpus.corpus_dir})")
    path_group.add_argument("--articles-file", type=str, default=config.corpus.articles_file,
                           help=f"Articles file in corpus dir (default: {config.corpus.articles_file})")
    path_group.add_argument("--output-dir", type=str, default=config.corpus.output_dir,
                           help=f"Output directory (default: {config.corpus.output_dir})")
    path_group.add_argument("--chunks-file", type=str, default=config.corpus.chunks_file,
                           help=f"Chunks file in output dir (default: {config.corpus.chunks_file})")

    # Chunking options (defaults from config)
    chunk_group = parser.add_argument_group("Chunking Options")
    chunk_group.add_argument("--target-tokens", type=int, default=config.chunking.target_tokens,
                            help=f"Target estimated tokens per chunk (default: {config.chunking.target_tokens})")

    # Token counting options
    token_group = parser.add_argument_group("Token Counting")
    token_group.add_argument("--tokenizer-model", type=str, default=config.tokenizer.model_name,
                            help=f"Tokenizer for stored token counts (default: {config.tokenizer.model_name})")
    token_group.add_argument("--no-tokenizer", action="store_true",
                            help="Store estimated token counts instead of loading a tokenizer")

    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")

    return parser.parse_args(argv)


def iter_records(config: AppConfig, chunker: ParagraphChunker,
                 counter: TokenCounter, stats: dict) -> Iterator[ChunkRecord]:
    """Yield chunk records for every article in the corpus."""
    for article in load_articles(config.corpus.articles_path):
        stats["articles"] += 1
        records = build_chunk_records(article, chunker, counter)
        if not records:
            stats["empty"] += 1
        stats["chunks"] += len(records)
        yield from records


def run_chunking(config: AppConfig) -> int:
    """Run the chunking step; returns the number of chunks written."""
    logger.info("=" * 60)
    logger.info("📦 CHUNKING")
    logger.info("=" * 60)

    articles_path = config.corpus.articles_path
    chunks_path = config.corpus.chunks_path

    logger.info(f"Input: {articles_path}")
    logger.info(f"Output: {chunks_path}")
    logger.info(f"Target tokens: {config.chunking.target_tokens}")

    start_time = time.time()

    chunker = ParagraphChunker(
        target_tokens=config.chunking.target_tokens,
        clean=config.chunking.clean_wikitext,
    )
    counter = TokenCounter(
        model_name=config.tokenizer.model_name,
        load=config.tokenizer.use_tokenizer,
    )
    if not counter.exact:
        logger.info("Token counts: word-based estimate")

    stats = {"articles": 0, "chunks": 0, "empty": 0}
    written = write_chunk_records(iter_records(config, chunker, counter, stats), chunks_path)

    elapsed = time.time() - start_time
    logger.info(f"Articles: {stats['articles']} ({stats['empty']} without text)")
    logger.info(f"✅ Chunking complete: {written} chunks in {elapsed:.1f}s")

    return written


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level))

    config = AppConfig.from_args(args)

    if not config.corpus.articles_path.exists():
        logger.error(f"Corpus file not found: {config.corpus.articles_path}")
        logger.error("Download and extract the corpus first or pass --corpus-dir")
        return 1

    logger.info("🚀 Starting Chunking Pipeline")
    logger.info(f"Timestamp: {datetime.now().isoformat()}")

    run_chunking(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())

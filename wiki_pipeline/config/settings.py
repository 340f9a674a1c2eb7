"""
Configuration Settings for the Chunk Preparation Pipeline
==========================================================

Centralized configuration using dataclasses for type safety and easy management.
"""

from dataclasses import dataclass, field
from pathlib import Path

from ..indexing.chunker.config import DEFAULT_TARGET
from ..indexing.ingestor.config import DEFAULT_TOKENIZER_MODEL


@dataclass
class ChunkingConfig:
    """Configuration for cleanup and chunking."""

    target_tokens: int = DEFAULT_TARGET
    clean_wikitext: bool = True


@dataclass
class CorpusConfig:
    """Configuration for corpus input and chunk output."""

    corpus_dir: str = "corpus"
    articles_file: str = "articles.jsonl.gz"
    output_dir: str = "data/chunks"
    chunks_file: str = "chunks.jsonl"

    @property
    def articles_path(self) -> Path:
        return Path(self.corpus_dir) / self.articles_file

    @property
    def chunks_path(self) -> Path:
        return Path(self.output_dir) / self.chunks_file


@dataclass
class TokenizerConfig:
    """Configuration for exact token counts stored with chunks."""

    model_name: str = DEFAULT_TOKENIZER_MODEL
    use_tokenizer: bool = True


@dataclass
class AppConfig:
    """Complete application configuration."""

    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    corpus: CorpusConfig = field(default_factory=CorpusConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)

    @classmethod
    def from_args(cls, args) -> "AppConfig":
        """Create configuration from command line arguments."""
        defaults = cls()
        return cls(
            chunking=ChunkingConfig(
                target_tokens=getattr(args, "target_tokens", defaults.chunking.target_tokens),
            ),
            corpus=CorpusConfig(
                corpus_dir=getattr(args, "corpus_dir", defaults.corpus.corpus_dir),
                articles_file=getattr(args, "articles_file", defaults.corpus.articles_file),
                output_dir=getattr(args, "output_dir", defaults.corpus.output_dir),
                chunks_file=getattr(args, "chunks_file", defaults.corpus.chunks_file),
            ),
            tokenizer=TokenizerConfig(
                model_name=getattr(args, "tokenizer_model", defaults.tokenizer.model_name),
                use_tokenizer=not getattr(args, "no_tokenizer", False),
            ),
        )


# Default configuration
DEFAULT_CONFIG = AppConfig()

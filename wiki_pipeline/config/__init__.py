# Config Module
"""Configuration module for pipeline settings."""

from .settings import AppConfig, ChunkingConfig, CorpusConfig, TokenizerConfig
from .logging_config import setup_logging

__all__ = [
    "AppConfig",
    "ChunkingConfig",
    "CorpusConfig",
    "TokenizerConfig",
    "setup_logging",
]

"""
Chunk Records
=============

Article and chunk records passed on to embedding and storage.
"""

import hashlib
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..chunker import ParagraphChunker
from .config import ID_HEX_LENGTH, ID_TEXT_PREFIX_CHARS
from .token_counter import TokenCounter

logger = logging.getLogger(__name__)


@dataclass
class Article:
    """One corpus article with its raw wikitext."""

    title: str
    page_id: str = ""
    wikitext: Optional[str] = None
    categories: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Article":
        """Build an article from a corpus row."""
        categories = row.get("categories") or []
        if isinstance(categories, str):
            categories = [categories]
        return cls(
            title=str(row.get("title") or ""),
            page_id=str(row.get("page_id") or ""),
            wikitext=row.get("wikitext"),
            categories=[str(c) for c in categories],
        )


@dataclass
class ChunkRecord:
    """A chunk plus the metadata stored next to its vector."""

    article_title: str
    page_id: str
    chunk_index: int
    total_chunks: int
    text: str
    token_count: int
    word_count: int
    chunk_id: str
    categories: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def stable_chunk_id(page_id: str, chunk_index: int, text: str) -> str:
    """Generate a deterministic id for a chunk, usable as an index key."""
    composite = f"{page_id}::{chunk_index}::{text[:ID_TEXT_PREFIX_CHARS]}"
    digest = hashlib.sha256(composite.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:ID_HEX_LENGTH]


def build_chunk_records(
    article: Article,
    chunker: ParagraphChunker,
    counter: TokenCounter,
) -> List[ChunkRecord]:
    """
    Clean and chunk one article into ordered records.

    Args:
        article: Source article
        chunker: Chunker deciding chunk boundaries
        counter: Token counter for the stored ``token_count``

    Returns:
        Records with ``chunk_index`` 0..n-1 in text order
    """
    chunks = chunker.chunk(article.wikitext)
    if not chunks:
        logger.debug(f"No chunks for article: {article.title!r}")
        return []

    page_id = article.page_id or article.title
    return [
        ChunkRecord(
            article_title=article.title,
            page_id=page_id,
            chunk_index=i,
            total_chunks=len(chunks),
            text=text,
            token_count=counter.count(text),
            word_count=len(text.split()),
            chunk_id=stable_chunk_id(page_id, i, text),
            categories=list(article.categories),
        )
        for i, text in enumerate(chunks)
    ]

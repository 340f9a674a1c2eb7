"""
Corpus Loader
=============

JSON Lines input/output for articles and chunk records.

Files ending in ``.gz`` are read and written gzip-compressed.
"""

import gzip
import json
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, Union

from ..ingestor.records import Article, ChunkRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _open_text(path: Path, mode: str) -> IO[str]:
    if path.suffix == ".gz":
        return gzip.open(path, mode + "t", encoding="utf-8")
    return open(path, mode, encoding="utf-8")


def load_articles(path: PathLike) -> Iterator[Article]:
    """
    Stream articles from a JSON Lines corpus file.

    Blank lines are ignored; lines that are not valid JSON objects are
    skipped with a warning.

    Args:
        path: Corpus file (``.jsonl`` or ``.jsonl.gz``)

    Yields:
        Articles in file order
    """
    path = Path(path)
    with _open_text(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                row = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"{path}:{lineno}: skipping invalid JSON ({e})")
                continue
            if not isinstance(row, dict):
                logger.warning(f"{path}:{lineno}: skipping non-object row")
                continue
            yield Article.from_dict(row)


def write_chunk_records(records: Iterable[ChunkRecord], path: PathLike) -> int:
    """Write chunk records as JSON Lines; returns the number written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with _open_text(path, "w") as f:
        for record in records:
            f.write(json.dumps(record.to_dict(), ensure_ascii=False) + "\n")
            count += 1
    return count

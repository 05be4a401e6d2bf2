"""Read noise words and documents from disk as whitespace-split words.

Two corpus layouts are supported: a docs list (a text file naming one
document file per whitespace-separated entry) and a parquet file with
``doc_id`` and ``text`` columns.
"""

from collections.abc import Iterator
import logging
from pathlib import Path

import polars as pl

from kwsearch.data_models.doc import Doc

logger = logging.getLogger(__name__)


def _read_words(path: Path, what: str) -> list[str]:
    if not path.is_file():
        raise FileNotFoundError(f"{what} not found: {path}")
    return path.read_text(encoding="utf-8").split()


def load_noise_words(path: Path) -> frozenset[str]:
    return frozenset(_read_words(path, "Noise words file"))


def read_doc_list(path: Path) -> list[str]:
    return _read_words(path, "Docs list")


def load_doc_words(path: Path) -> list[str]:
    return _read_words(path, "Document")


def iter_doc_files(docs_file: Path) -> Iterator[Doc]:
    """Yield each listed document in order.

    The doc_id is the name exactly as it appears in the list; relative names
    are read from the list's own directory.
    """
    base_dir = docs_file.parent
    for name in read_doc_list(docs_file):
        words = load_doc_words(base_dir / name)
        logger.debug(f"Read {len(words)} words from {name}")
        yield Doc(doc_id=name, words=words)


def iter_parquet_docs(path: Path) -> Iterator[Doc]:
    if not path.is_file():
        raise FileNotFoundError(f"Docs parquet not found: {path}")
    df = pl.read_parquet(path, columns=["doc_id", "text"])
    logger.debug(f"Loaded {len(df)} docs from {path}")
    for row in df.iter_rows(named=True):
        text: str = row["text"] or ""
        yield Doc(doc_id=row["doc_id"], words=text.split())

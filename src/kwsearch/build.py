"""Build a keyword index from a document corpus.

Usage:
    python -m kwsearch.build \\
        --docs docs.txt --noise-words noisewords.txt [--show KEYWORD]
"""

import argparse
from collections.abc import Iterable
import logging
from pathlib import Path

from kwsearch.data_models.doc import Doc
from kwsearch.data_models.keyword_index import KeywordIndex
from kwsearch.etl.load_docs import iter_doc_files, iter_parquet_docs, load_noise_words
from kwsearch.keywords import get_keyword, load_keywords

logger = logging.getLogger(__name__)


def build_index(
    docs: Iterable[Doc], noise_words: frozenset[str] | set[str] = frozenset()
) -> KeywordIndex:
    """Index every doc in order; each doc is merged exactly once."""
    index = KeywordIndex()
    for doc in docs:
        keywords = load_keywords(doc.words, noise_words)
        index.merge_keywords(doc.doc_id, keywords)
    logger.debug(
        f"Built index: {len(index)} keywords from {len(index.documents)} documents"
    )
    return index


def make_index(docs_file: Path, noise_words_file: Path) -> KeywordIndex:
    """Index the documents named in docs_file, skipping the given noise words."""
    noise_words = load_noise_words(noise_words_file)
    return build_index(iter_doc_files(docs_file), noise_words)


def add_source_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--docs", help="Path to a docs list (one file name per entry)")
    source.add_argument(
        "--parquet", help="Path to a docs parquet with doc_id and text columns"
    )
    parser.add_argument(
        "--noise-words", required=True, help="Path to noise words, one per line"
    )
    parser.add_argument("--verbose", action="store_true", help="Log build progress")


def index_from_args(args: argparse.Namespace) -> tuple[KeywordIndex, frozenset[str]]:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    noise_words = load_noise_words(Path(args.noise_words))
    if args.docs:
        docs = iter_doc_files(Path(args.docs))
    else:
        docs = iter_parquet_docs(Path(args.parquet))
    return build_index(docs, noise_words), noise_words


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a keyword index")
    add_source_args(parser)
    parser.add_argument(
        "--show", default=None, help="Print the occurrence list of this keyword"
    )
    args = parser.parse_args()

    index, noise_words = index_from_args(args)
    print(f"Indexed {len(index.documents)} documents, {len(index)} keywords")

    if args.show is not None:
        keyword = get_keyword(args.show, noise_words)
        if keyword is None or keyword not in index:
            print(f"  {args.show!r}: not indexed")
        else:
            occs = ", ".join(str(occ) for occ in index.occurrences(keyword))
            print(f"  {keyword}: [{occs}]")


if __name__ == "__main__":
    main()

"""Two-keyword "OR" search over a built keyword index.

Usage:
    python -m kwsearch.search \\
        --docs docs.txt --noise-words noisewords.txt deep world
"""

import argparse
from collections.abc import Sequence
import logging

from kwsearch.build import add_source_args, index_from_args
from kwsearch.data_models.keyword_index import KeywordIndex
from kwsearch.data_models.occurrence import Occurrence
from kwsearch.keywords import get_keyword

logger = logging.getLogger(__name__)

# Result cap, also the number of occurrences read per keyword
TOP_K = 5


def merge_top(
    first: Sequence[Occurrence], second: Sequence[Occurrence], k: int = TOP_K
) -> list[str]:
    """Merge two frequency-sorted occurrence lists into at most k documents.

    Higher frequency wins; ties go to ``first``. A document named by both heads
    at once is taken a single time and both sides advance. Documents already
    in the result are skipped.
    """
    result: list[str] = []
    seen: set[str] = set()

    def take(document: str) -> None:
        if document not in seen:
            seen.add(document)
            result.append(document)

    i = j = 0
    while len(result) < k and (i < len(first) or j < len(second)):
        if i < len(first) and j < len(second):
            a, b = first[i], second[j]
            if a.document == b.document:
                take(a.document)
                i += 1
                j += 1
            elif a.frequency >= b.frequency:
                take(a.document)
                i += 1
            else:
                take(b.document)
                j += 1
        elif i < len(first):
            take(first[i].document)
            i += 1
        else:
            take(second[j].document)
            j += 1
    return result


def top5search(index: KeywordIndex, kw1: str | None, kw2: str | None) -> list[str]:
    """Documents containing kw1 or kw2, most frequent first, at most five.

    Keywords are looked up as given; an unknown keyword, or None for a query
    term that is not a keyword, contributes nothing.
    An empty list means no document matched.
    """
    first = index.top(kw1, TOP_K)
    second = index.top(kw2, TOP_K)
    if not first and not second:
        logger.debug(f"No occurrences for {kw1!r} or {kw2!r}")
        return []
    return merge_top(first, second, TOP_K)


def main() -> None:
    parser = argparse.ArgumentParser(description="Search documents for kw1 OR kw2")
    add_source_args(parser)
    parser.add_argument("kw1", help="First keyword (wins frequency ties)")
    parser.add_argument("kw2", help="Second keyword")
    args = parser.parse_args()

    index, noise_words = index_from_args(args)

    # Query terms go through the same normalizer as document words
    kw1 = get_keyword(args.kw1, noise_words)
    kw2 = get_keyword(args.kw2, noise_words)

    results = top5search(index, kw1, kw2)
    if not results:
        print("No matching documents.")
        return
    for document in results:
        print(document)


if __name__ == "__main__":
    main()

"""Keyword normalization and per-document keyword counting."""

from collections import Counter
from collections.abc import Iterable

# Trailing characters stripped from a word before the alphabetic test
PUNCTUATION = ".,?:;!"


def get_keyword(
    word: str | None, noise_words: frozenset[str] | set[str] = frozenset()
) -> str | None:
    """Return ``word`` as a lowercase keyword, or None if it is not one.

    A keyword is what remains after trimming whitespace, lowercasing and
    stripping trailing punctuation, provided it is purely alphabetic and not
    a noise word.

    get_keyword("Ant.")    -> "ant"
    get_keyword("!!")      -> None
    get_keyword("tru7h")   -> None
    get_keyword("What?!")  -> "what"
    """
    if word is None:
        return None

    target = word.strip().lower()
    while target and target[-1] in PUNCTUATION:
        if len(target) == 1:
            return None
        target = target[:-1]

    if not target.isalpha():
        return None
    if target in noise_words:
        return None
    return target


def load_keywords(
    words: Iterable[str], noise_words: frozenset[str] | set[str] = frozenset()
) -> dict[str, int]:
    """Count keyword frequencies for one document's words."""
    counts: Counter[str] = Counter()
    for word in words:
        keyword = get_keyword(word, noise_words)
        if keyword is not None:
            counts[keyword] += 1
    return dict(counts)

"""In-memory inverted index: keyword -> occurrences sorted by frequency."""

from collections.abc import Mapping
import logging

from kwsearch.data_models.occurrence import Occurrence
from kwsearch.data_models.occurrence_list import OccurrenceList

logger = logging.getLogger(__name__)


class KeywordIndex:
    def __init__(self) -> None:
        self._index: dict[str, OccurrenceList] = {}
        self._documents: list[str] = []
        self._seen: set[str] = set()

    def merge_keywords(self, document: str, keywords: Mapping[str, int]) -> None:
        """Fold one document's keyword frequencies into the index.

        A document can be merged only once.
        """
        if document in self._seen:
            raise ValueError(f"Document already indexed: {document!r}")
        for keyword, frequency in keywords.items():
            occ_list = self._index.get(keyword)
            if occ_list is None:
                occ_list = OccurrenceList()
                self._index[keyword] = occ_list
            occ_list.add(Occurrence(document=document, frequency=frequency))
        self._documents.append(document)
        self._seen.add(document)
        logger.debug(f"Merged {len(keywords)} keywords from {document}")

    def occurrences(self, keyword: str) -> tuple[Occurrence, ...]:
        occ_list = self._index.get(keyword)
        return tuple(occ_list) if occ_list is not None else ()

    def top(self, keyword: str | None, k: int) -> tuple[Occurrence, ...]:
        """The k most frequent occurrences of keyword, empty if it is unknown."""
        if keyword is None:
            return ()
        occ_list = self._index.get(keyword)
        return occ_list.head(k) if occ_list is not None else ()

    def keywords(self) -> list[str]:
        return sorted(self._index)

    @property
    def documents(self) -> list[str]:
        return list(self._documents)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._index

    def __len__(self) -> int:
        return len(self._index)

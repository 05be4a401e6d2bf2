import pytest

from kwsearch.data_models.keyword_index import KeywordIndex


def _pairs(index: KeywordIndex, keyword: str) -> list[tuple[str, int]]:
    return [(occ.document, occ.frequency) for occ in index.occurrences(keyword)]


@pytest.fixture
def index() -> KeywordIndex:
    return KeywordIndex()


def test_merge_into_empty_index(index: KeywordIndex):
    index.merge_keywords("doc", {"a": 3, "b": 1})
    assert _pairs(index, "a") == [("doc", 3)]
    assert _pairs(index, "b") == [("doc", 1)]
    assert len(index) == 2


def test_merge_second_document_sorts(index: KeywordIndex):
    index.merge_keywords("doc", {"a": 3, "b": 1})
    index.merge_keywords("doc2", {"a": 5})
    assert _pairs(index, "a") == [("doc2", 5), ("doc", 3)]
    assert _pairs(index, "b") == [("doc", 1)]


def test_merge_tie_puts_newer_document_first(index: KeywordIndex):
    index.merge_keywords("doc1", {"a": 2})
    index.merge_keywords("doc2", {"a": 2})
    assert _pairs(index, "a") == [("doc2", 2), ("doc1", 2)]


def test_missing_keyword_is_empty(index: KeywordIndex):
    assert "zebra" not in index
    assert len(index.occurrences("zebra")) == 0


def test_keywords_and_documents(index: KeywordIndex):
    index.merge_keywords("d1", {"pear": 1, "apple": 2})
    index.merge_keywords("d2", {})
    assert index.keywords() == ["apple", "pear"]
    assert index.documents == ["d1", "d2"]
    assert "apple" in index


def test_lists_stay_sorted_over_many_documents(index: KeywordIndex):
    freqs = [4, 1, 9, 4, 7, 2, 2, 8]
    for i, freq in enumerate(freqs):
        index.merge_keywords(f"d{i}", {"kw": freq})
    got = [freq for _, freq in _pairs(index, "kw")]
    assert got == sorted(freqs, reverse=True)


def test_top_is_bounded(index: KeywordIndex):
    for i in range(7):
        index.merge_keywords(f"d{i}", {"kw": i + 1})
    top = index.top("kw", 5)
    assert [occ.document for occ in top] == ["d6", "d5", "d4", "d3", "d2"]
    assert index.top("missing", 5) == ()


def test_merging_same_document_twice_raises(index: KeywordIndex):
    index.merge_keywords("a.txt", {"cat": 2})
    with pytest.raises(ValueError, match="a.txt"):
        index.merge_keywords("a.txt", {"cat": 2})
    assert _pairs(index, "cat") == [("a.txt", 2)]
    assert index.documents == ["a.txt"]


def test_occurrences_is_a_tuple_either_way(index: KeywordIndex):
    index.merge_keywords("d1", {"kw": 1})
    assert isinstance(index.occurrences("kw"), tuple)
    assert index.occurrences("missing") == ()


def test_top_of_non_keyword_is_empty(index: KeywordIndex):
    index.merge_keywords("d1", {"kw": 1})
    assert index.top(None, 5) == ()

from lightdocs.indexes import FuzzyIndex
from lightdocs.protocols import SearchIndex


def test_index_satisfies_protocol(documents):
    index = FuzzyIndex(documents)
    assert isinstance(index, SearchIndex)
    assert len(index) == len(documents)


def test_exact_term_scores_perfect_match(documents):
    hits = FuzzyIndex(documents).search("token")
    assert hits[0].document.title == "Compressed Tokens Overview"
    assert hits[0].score == 0


def test_search_is_case_insensitive(documents):
    index = FuzzyIndex(documents)
    lower = [(h.document.path, h.score) for h in index.search("validity")]
    upper = [(h.document.path, h.score) for h in index.search("VALIDITY")]
    assert lower == upper
    assert lower[0][0] == "learn/core-concepts/validity-proofs.md"


def test_tolerates_misspellings(documents):
    hits = FuzzyIndex(documents).search("valdity")
    paths = [h.document.relative_path for h in hits]
    assert "learn/core-concepts/validity-proofs.md" in paths


def test_scores_are_bounded_and_sorted(documents):
    hits = FuzzyIndex(documents).search("compressed account")
    assert hits
    assert all(0 <= h.score <= FuzzyIndex.DEFAULT_THRESHOLD for h in hits)
    keys = [(h.score, h.document.title.lower(), h.document.relative_path) for h in hits]
    assert keys == sorted(keys)


def test_repeated_queries_are_deterministic(documents):
    index = FuzzyIndex(documents)
    first = [h.document.path for h in index.search("rpc")]
    second = [h.document.path for h in index.search("rpc")]
    assert first == second


def test_blank_or_single_character_query_has_no_hits(documents):
    index = FuzzyIndex(documents)
    assert index.search("") == []
    assert index.search("a") == []


def test_nonsense_query_has_no_hits(documents):
    assert FuzzyIndex(documents).search("qqqqzzzzqqqq") == []

import pytest
from wordsearch.index import WordIndex, build
from wordsearch.models import WordLocation


@pytest.fixture
def cats():
    return build(["the cat sat.", "the dog sat."])


def test_lookup_returns_ordered_locations(cats):
    assert cats.lookup("the") == (WordLocation(0, 0), WordLocation(1, 0))
    assert cats.lookup("sat") == (WordLocation(0, 2), WordLocation(1, 2))


def test_lookup_missing_is_none(cats):
    assert cats.lookup("bird") is None
    assert cats.lookup("sat.") is None


def test_counters(cats):
    assert cats.size() == len(cats) == 4
    assert cats.record_count == 2
    assert cats.word_count == 6


def test_positions_counted_before_normalization():
    idx = build(['( "quoted" word', ""])
    # "(" normalizes to "" but still occupies position 0
    assert idx.lookup("") == (WordLocation(0, 0),)
    assert idx.lookup("quoted") == (WordLocation(0, 1),)
    assert idx.lookup("word") == (WordLocation(0, 2),)
    assert idx.record_count == 2
    assert idx.word_count == 3


def test_empty_string_bucket_counts_as_key():
    idx = build(["a . b"])
    assert "" in idx
    assert idx.size() == 3


def test_total_occurrences_match_word_count():
    idx = build(["a b a", "", "b  c\tb", "(a)"])
    assert sum(len(locs) for _, locs in idx.iter_items()) == idx.word_count == 7
    assert idx.record_count == 4


def test_empty_corpus():
    idx = build([])
    assert idx.size() == 0
    assert idx.record_count == 0 and idx.word_count == 0
    assert idx.lookup("x") is None
    assert idx.range_by_prefix("") == []
    assert idx.completions("a", 5).results == []
    assert idx.fuzzy_completions("ab", 5, 2).results == []


def test_range_by_prefix_is_exact_and_sorted():
    long_word = "pre" + "z" * 20
    high = "pre\uffff~"
    idx = build([f"prefix pre {long_word} {high} prf pr pre~~ apre"])
    words = [w for w, _ in idx.range_by_prefix("pre")]
    assert words == sorted(words)
    assert set(words) == {"prefix", "pre", long_word, high, "pre~~"}


def test_range_by_prefix_empty_prefix_returns_all():
    idx = build(["b a c"])
    assert [w for w, _ in idx.range_by_prefix("")] == ["a", "b", "c"]


def test_completions(cats):
    rec = cats.completions("sa", 5)
    assert [(c.text, c.frequency) for c in rec.results] == [("sat", 2)]
    assert rec.total_candidates == 1


def test_completions_ties_prefer_lower_key():
    idx = build(["tea ten tab ten tea tin"])
    rec = idx.completions("t", 2)
    assert [(c.text, c.frequency) for c in rec.results] == [("tea", 2), ("ten", 2)]
    assert rec.total_candidates == 4


def test_fuzzy_completions(cats):
    rec = cats.fuzzy_completions("cap", 5, 1)
    assert [(c.text, c.frequency) for c in rec.results] == [("cat", 1)]
    assert rec.total_candidates == 1


def test_fuzzy_skips_exact_prefix_matches():
    idx = build(["cat cab cap"])
    rec = idx.fuzzy_completions("cap", 5, 1)
    assert [c.text for c in rec.results] == ["cab", "cat"]


def test_fuzzy_rejects_negative_distance(cats):
    with pytest.raises(ValueError):
        cats.fuzzy_completions("cap", 5, -1)


def test_longest_completion():
    idx = build(["the then themselves theme thy"])
    assert idx.longest_completion("the") == "themselves"
    assert idx.longest_completion("zz") == ""


def test_build_classmethod_accepts_generators():
    idx = WordIndex.build(line for line in ["one two", "two"])
    assert idx.lookup("two") == (WordLocation(0, 1), WordLocation(1, 0))

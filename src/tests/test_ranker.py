from wordsearch.ranker import TopK, rank


def test_orders_by_descending_frequency():
    rec = rank([("a", 1), ("b", 3), ("c", 2)], 3)
    assert [(c.text, c.frequency) for c in rec.results] == [("b", 3), ("c", 2), ("a", 1)]
    assert rec.total_candidates == 3


def test_keeps_only_k_and_counts_all_candidates():
    rec = rank([("initial-value", 3), ("at end", 1), ("at start", 4)], 2)
    assert [c.frequency for c in rec.results] == [4, 3]
    assert rec.total_candidates == 3


def test_ties_keep_arrival_order():
    rec = rank([("apple", 2), ("apricot", 2), ("avocado", 2)], 5)
    assert [c.text for c in rec.results] == ["apple", "apricot", "avocado"]


def test_tie_does_not_evict_earlier_entry():
    # equal count to the current minimum is not admitted once full
    rec = rank([("aa", 2), ("ab", 1), ("ac", 1), ("ad", 2)], 2)
    assert [c.text for c in rec.results] == ["aa", "ad"]
    rec = rank([("aa", 2), ("ab", 2), ("ac", 2)], 2)
    assert [c.text for c in rec.results] == ["aa", "ab"]
    assert rec.total_candidates == 3


def test_new_entry_goes_behind_equal_counts():
    rec = rank([("x", 5), ("y", 3), ("z", 5)], 3)
    assert [c.text for c in rec.results] == ["x", "z", "y"]


def test_k_zero_still_counts():
    rec = rank([("a", 1), ("b", 2)], 0)
    assert rec.results == []
    assert rec.total_candidates == 2


def test_empty_input():
    rec = rank([], 5)
    assert rec.results == [] and rec.total_candidates == 0


def test_topk_buffer_evicts_minimum():
    top = TopK(2)
    top.push("a", 1)
    top.push("b", 2)
    assert not top.admits(1)
    assert top.admits(3)
    top.push("c", 3)
    assert [c.text for c in top.items] == ["c", "b"]
    assert top.seen == 3

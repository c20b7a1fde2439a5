import pytest

from webindex.posting import InvertedIndex, RankedResult


def test_record_counts_occurrences():
    index = InvertedIndex()
    index.record("fish", "U1")
    index.record("fish", "U1")
    index.record("fish", "U2")
    assert dict(index.postings("fish")) == {"U1": 2, "U2": 1}


def test_unknown_term_has_empty_postings():
    index = InvertedIndex()
    assert dict(index.postings("nonexistent")) == {}
    assert "nonexistent" not in index
    assert len(index) == 0


def test_postings_view_is_read_only():
    index = InvertedIndex()
    index.record("fish", "U1")
    view = index.postings("fish")
    with pytest.raises(TypeError):
        view["U1"] = 5
    with pytest.raises(TypeError):
        index.postings("missing")["U1"] = 1
    # the failed write to the empty view must not create the term
    assert "missing" not in index


def test_view_reflects_later_records():
    index = InvertedIndex()
    index.record("fish", "U1")
    view = index.postings("fish")
    index.record("fish", "U1")
    assert view["U1"] == 2


def test_record_tokens_and_reporting_helpers():
    index = InvertedIndex()
    n = index.record_tokens(["fish", "bike", "fish"], "U1")
    index.record_tokens(["bike"], "U2")
    assert n == 3
    assert len(index) == 2
    assert set(index.terms()) == {"fish", "bike"}
    assert index.documents() == {"U1", "U2"}
    assert index.num_postings() == 3
    assert index.to_dict() == {"bike": {"U1": 1, "U2": 1}, "fish": {"U1": 2}}


def test_no_zero_count_postings():
    index = InvertedIndex()
    index.record_tokens([], "U1")
    assert index.documents() == set()
    assert index.to_dict() == {}


def test_ranked_result_is_a_value():
    assert RankedResult("U1", 6) == RankedResult("U1", 6)
    assert repr(RankedResult("U1", 6)) == "RankedResult(url='U1', rank=6)"

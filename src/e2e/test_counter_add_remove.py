import pytest
from wordrank import FrequencyCounter, InvalidCountError, UnknownItemError


def test_counts_and_absent_items():
    c = FrequencyCounter(["a", "b", "a"])
    assert c.count_of("a") == 2
    assert c.count_of("b") == 1
    assert c.count_of("zzz") == 0
    assert c.size() == 2 and len(c) == 2
    assert c.item_set() == {"a", "b"}


def test_add_then_remove_k_restores_state():
    c = FrequencyCounter("aab")
    before = c.as_dict()
    for item, k in (("a", 3), ("b", 1), ("new", 4)):
        c.add_occurrences(item, k)
        c.remove_occurrences(item, k)
        assert c.as_dict() == before
    assert "new" not in c


def test_removing_last_occurrence_drops_item():
    c = FrequencyCounter(["x", "x", "y"])
    c.remove_item("x")
    assert c.count_of("x") == 1
    c.remove_item("x")
    assert c.count_of("x") == 0
    assert "x" not in c.item_set()
    assert c.size() == 1


@pytest.mark.parametrize("k", [0, -1])
def test_non_positive_k_is_rejected_without_change(k):
    c = FrequencyCounter(["a"])
    with pytest.raises(InvalidCountError):
        c.add_occurrences("a", k)
    with pytest.raises(InvalidCountError):
        c.remove_occurrences("a", k)
    assert c.as_dict() == {"a": 1}


def test_remove_unknown_item():
    c = FrequencyCounter(["a"])
    with pytest.raises(UnknownItemError):
        c.remove_item("b")
    with pytest.raises(UnknownItemError):
        c.remove_occurrences("b", 2)
    # KeyError compatibility for callers catching the builtin
    with pytest.raises(KeyError):
        c.remove_item("b")
    assert c.as_dict() == {"a": 1}


def test_remove_more_than_recorded():
    c = FrequencyCounter(["a", "a"])
    with pytest.raises(InvalidCountError):
        c.remove_occurrences("a", 3)
    assert c.count_of("a") == 2


def test_clear_and_add_all():
    c = FrequencyCounter()
    c.add_all(["p", "q", "p"])
    assert c.as_dict() == {"p": 2, "q": 1}
    c.clear()
    assert c.size() == 0
    assert list(c) == []

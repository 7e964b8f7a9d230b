from hypothesis import given, strategies as st
import numpy as np
import pytest

from algokit.searching import binary_search
from algokit.sorting import SORTS, is_sorted, merge_sort, insertion_sort, quick_sort
from algokit.util import swap


def test_swap():
    a = [1, 2, 3]
    swap(a, 0, 2)
    assert a == [3, 2, 1]

    arr = np.array([1, 2, 3])
    swap(arr, 0, 1)
    assert arr.tolist() == [2, 1, 3]


@pytest.mark.parametrize("sort", SORTS)
@given(st.lists(st.integers()))
def test_sort_list(sort, values):
    a = list(values)
    sort(a)
    assert a == sorted(values)
    assert is_sorted(a)


@pytest.mark.parametrize("sort", SORTS)
@given(st.lists(st.floats(allow_nan=False), max_size=200))
def test_sort_ndarray(sort, values):
    a = np.array(values, dtype=float)
    sort(a)
    assert a.tolist() == sorted(values)


@pytest.mark.parametrize("sort", SORTS)
def test_sort_large_random(sort):
    rng = np.random.default_rng(1234)
    a = rng.integers(-1000, 1000, size=500)
    expected = np.sort(a)
    sort(a)
    assert (a == expected).all()


@pytest.mark.parametrize("sort", [merge_sort, insertion_sort])
def test_stable_sorts(sort):
    class Item(object):
        def __init__(self, key: int, tag: str):
            self.key = key
            self.tag = tag

        def __lt__(self, other) -> bool:
            return self.key < other.key

    items = [Item(1, "a"), Item(1, "b"), Item(0, "c"), Item(1, "d"), Item(0, "e")]
    sort(items)

    assert [i.tag for i in items] == ["c", "e", "a", "b", "d"]


def test_quick_sort_seeded():
    a = [5, 3, 9, 1, 1, 7]
    quick_sort(a, rng=42)
    assert a == [1, 1, 3, 5, 7, 9]

    b = [5, 3, 9, 1, 1, 7]
    quick_sort(b, rng=np.random.default_rng(42))
    assert b == a


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1, 1, 2])
    assert not is_sorted([2, 1])


@given(st.sets(st.integers()), st.integers())
def test_binary_search(keys, probe):
    a = sorted(keys)

    for i, k in enumerate(a):
        assert binary_search(a, k) == i

    if probe in keys:
        assert a[binary_search(a, probe)] == probe
    else:
        assert binary_search(a, probe) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None

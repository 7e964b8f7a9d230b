from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence, TypeVar, Union

import numpy as np

from .util import swap

T = TypeVar("T")

RngCompatible = Union[None, int, np.random.Generator]


def is_sorted(a: Sequence[T]) -> bool:
    for i in range(1, len(a)):
        if a[i] < a[i - 1]:
            return False
    return True


def selection_sort(a: MutableSequence[T]):
    """Selection sort.

    ~n^2/2 compares and exactly n exchanges, whatever the input order.
    """
    n = len(a)
    for i in range(n):
        min_idx = i
        for j in range(i + 1, n):
            if a[j] < a[min_idx]:
                min_idx = j
        swap(a, i, min_idx)


def insertion_sort(a: MutableSequence[T]):
    """Stable insertion sort.

    Linear on already-sorted input, quadratic in the worst and average case.
    """
    for i in range(1, len(a)):
        j = i
        while j > 0 and a[j] < a[j - 1]:
            swap(a, j, j - 1)
            j -= 1


def shell_sort(a: MutableSequence[T]):
    """Shell sort with the 1, 4, 13, 40, ... increment sequence.

    Insertion sort over h-spaced subsequences lets elements far from their
    final position move in long strides before the final h=1 pass.
    """
    n = len(a)
    h = 1
    while h < n // 3:
        h = 3 * h + 1

    while h >= 1:
        for i in range(h, n):
            j = i
            while j >= h and a[j] < a[j - h]:
                swap(a, j, j - h)
                j -= h
        h //= 3


def merge_sort(a: MutableSequence[T]):
    """Stable top-down merge sort.

    O(n log n) compares regardless of input order, with one auxiliary copy of
    the input.
    """
    aux = list(a)
    _merge_sort(a, aux, 0, len(a) - 1)


def _merge_sort(a: MutableSequence[T], aux: List[T], lo: int, hi: int):
    if hi <= lo:
        return
    mid = lo + (hi - lo) // 2
    _merge_sort(a, aux, lo, mid)
    _merge_sort(a, aux, mid + 1, hi)
    _merge(a, aux, lo, mid, hi)


def _merge(a: MutableSequence[T], aux: List[T], lo: int, mid: int, hi: int):
    for k in range(lo, hi + 1):
        aux[k] = a[k]

    i = lo
    j = mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            a[k] = aux[j]
            j += 1
        elif j > hi:
            a[k] = aux[i]
            i += 1
        # strict compare keeps equal keys in their original order
        elif aux[j] < aux[i]:
            a[k] = aux[j]
            j += 1
        else:
            a[k] = aux[i]
            i += 1


def quick_sort(a: MutableSequence[T], rng: RngCompatible = None):
    """Quicksort with an initial random shuffle.

    The shuffle makes the quadratic worst case (every partition splitting off
    a single element) vanishingly unlikely. `rng` may be a seed or a
    `numpy.random.Generator`; pass one for reproducible runs.
    """
    np.random.default_rng(rng).shuffle(a)
    _quick_sort(a, 0, len(a) - 1)


def _quick_sort(a: MutableSequence[T], lo: int, hi: int):
    if hi <= lo:
        return
    j = _partition(a, lo, hi)
    _quick_sort(a, lo, j - 1)
    _quick_sort(a, j + 1, hi)


def _partition(a: MutableSequence[T], lo: int, hi: int) -> int:
    i = lo
    j = hi + 1
    v = a[lo]

    while True:
        i += 1
        while a[i] < v:
            if i == hi:
                break
            i += 1

        j -= 1
        while v < a[j]:
            if j == lo:
                break
            j -= 1

        if i >= j:
            break
        swap(a, i, j)

    swap(a, lo, j)
    return j


def heap_sort(a: MutableSequence[T]):
    """In-place heapsort: bottom-up max-heap construction, then sortdown.

    O(n log n) in the worst case with no extra memory.
    """
    n = len(a)
    for k in range(n // 2, 0, -1):
        _sink(a, k, n)

    while n > 1:
        swap(a, 0, n - 1)
        n -= 1
        _sink(a, 1, n)


# Heap positions are 1-based; array positions are shifted down by one.
def _sink(a: MutableSequence[T], k: int, n: int):
    while 2 * k <= n:
        j = 2 * k
        if j < n and a[j - 1] < a[j]:
            j += 1
        if not (a[k - 1] < a[j - 1]):
            break
        swap(a, k - 1, j - 1)
        k = j


SORTS = (
    selection_sort,
    insertion_sort,
    shell_sort,
    merge_sort,
    quick_sort,
    heap_sort,
)

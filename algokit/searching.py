from __future__ import annotations

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def binary_search(a: Sequence[T], key: T) -> Optional[int]:
    """Find the index of `key` in the ascending sequence `a`.

    Uses at most lg(n) + 1 compares. Returns None if `key` is not present.
    """
    lo = 0
    hi = len(a) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if key < a[mid]:
            hi = mid - 1
        elif a[mid] < key:
            lo = mid + 1
        else:
            return mid
    return None

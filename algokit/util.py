from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def swap(seq: MutableSequence[T], i: int, j: int):
    """Exchange the elements at positions `i` and `j` of `seq` in place."""
    seq[i], seq[j] = seq[j], seq[i]

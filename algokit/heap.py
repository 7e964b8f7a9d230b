from __future__ import annotations

import logging
from typing import Generic, Iterator, TypeVar

import numpy as np

from .util import swap

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MaxPriorityQueue(Generic[T]):
    """Fixed-capacity maximum priority queue on a binary heap.

    Elements occupy slots 1..n of the backing array; slot 0 is never used, so
    the children of slot `i` are `2i` and `2i + 1`. Insertion and removal of
    the maximum both take O(log n) compares.
    """

    def __init__(self, max_size: int):
        if int(max_size) != max_size or max_size < 0:
            raise ValueError("max_size must be a non-negative integer")

        self._max_size: int = int(max_size)
        self._pq: np.ndarray = np.empty(self._max_size + 1, dtype=object)
        self._n: int = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    def is_empty(self) -> bool:
        return self._n == 0

    def is_full(self) -> bool:
        return self._n == self._max_size

    def size(self) -> int:
        return self._n

    def insert(self, value: T):
        """Add `value` to the queue.

        Raises OverflowError if the queue already holds `max_size` elements.
        """
        if self.is_full():
            logger.debug(f"insert rejected: queue at capacity {self._max_size}")
            raise OverflowError(
                "Priority queue is full (max_size={})".format(self._max_size)
            )

        self._n += 1
        self._pq[self._n] = value
        self._swim(self._n)

    def peek_max(self) -> T:
        if self.is_empty():
            raise IndexError("Priority queue is empty")
        return self._pq[1]

    def retrieve_max(self) -> T:
        """Remove and return the largest element.

        Raises IndexError if the queue is empty.
        """
        if self.is_empty():
            raise IndexError("Priority queue is empty")

        pq = self._pq
        ret = pq[1]
        pq[1] = pq[self._n]
        pq[self._n] = None
        self._n -= 1
        self._sink(1)
        return ret

    def _swim(self, k: int):
        pq = self._pq
        while k > 1 and pq[k // 2] < pq[k]:
            swap(pq, k // 2, k)
            k //= 2

    def _sink(self, k: int):
        pq = self._pq
        n = self._n
        while 2 * k <= n:
            j = 2 * k
            if j < n and pq[j] < pq[j + 1]:
                j += 1
            if not (pq[k] < pq[j]):
                break
            swap(pq, k, j)
            k = j

    def __iter__(self) -> Iterator[T]:
        """Iterate over the held elements in heap order (not sorted)."""
        return iter(self._pq[1 : self._n + 1].tolist())

    def __len__(self) -> int:
        return self._n

    def __str__(self) -> str:
        return "MaxPriorityQueue({}/{})".format(self._n, self._max_size)

    def __repr__(self) -> str:
        return self.__str__()

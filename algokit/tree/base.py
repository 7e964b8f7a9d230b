from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Generic, TypeVar, Optional, Iterator, List, Tuple

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def _size(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return node.count


class TreeNode(Generic[K, V]):
    def __init__(self, key: K, value: V):
        self._key: K = key
        self.value: V = value
        self._count: int = 1

        self._left: Optional[TreeNode[K, V]] = None
        self._right: Optional[TreeNode[K, V]] = None

    @property
    def key(self) -> K:
        """The key associated with this node.

        This property is immutable.
        """
        return self._key

    @property
    def count(self) -> int:
        """Number of nodes in the subtree rooted at this node."""
        return self._count

    @property
    def left(self) -> Optional[TreeNode[K, V]]:
        return self._left

    @property
    def right(self) -> Optional[TreeNode[K, V]]:
        return self._right

    def _update_count(self):
        self._count = 1 + _size(self._left) + _size(self._right)

    def _find_node(self, key: K) -> Optional[TreeNode[K, V]]:
        if key < self._key:
            if self._left is not None:
                return self._left._find_node(key)
        elif self._key < key:
            if self._right is not None:
                return self._right._find_node(key)
        else:
            return self

        return None

    def _put(self, key: K, value: V) -> bool:
        """Insert or overwrite `key` below this node.

        Returns True if a new node was created.
        """
        if key < self._key:
            if self._left is None:
                self._left = self.__class__(key, value)
                created = True
            else:
                created = self._left._put(key, value)
        elif self._key < key:
            if self._right is None:
                self._right = self.__class__(key, value)
                created = True
            else:
                created = self._right._put(key, value)
        else:
            self.value = value
            return False

        self._update_count()
        return created

    def _min_node(self) -> TreeNode[K, V]:
        if self._left is None:
            return self
        return self._left._min_node()

    def _max_node(self) -> TreeNode[K, V]:
        if self._right is None:
            return self
        return self._right._max_node()

    def _delete_min(self) -> Optional[TreeNode[K, V]]:
        """Remove the smallest node of this subtree and return the new subtree root."""
        if self._left is None:
            return self._right
        self._left = self._left._delete_min()
        self._update_count()
        return self

    def _delete_max(self) -> Optional[TreeNode[K, V]]:
        if self._right is None:
            return self._left
        self._right = self._right._delete_max()
        self._update_count()
        return self

    def _delete(self, key: K) -> Tuple[Optional[TreeNode[K, V]], bool]:
        """Hibbard deletion of `key` from this subtree.

        Returns a tuple containing:
            - The new root of this subtree
            - Whether a node was actually removed
        """
        if key < self._key:
            if self._left is None:
                return (self, False)
            self._left, removed = self._left._delete(key)
        elif self._key < key:
            if self._right is None:
                return (self, False)
            self._right, removed = self._right._delete(key)
        else:
            if self._right is None:
                return (self._unlink(self._left), True)
            if self._left is None:
                return (self._unlink(self._right), True)

            # Two children: the right subtree's minimum takes this node's place.
            successor = self._right._min_node()
            successor._right = self._right._delete_min()
            successor._left = self._left
            successor._update_count()
            return (self._unlink(successor), True)

        if removed:
            self._update_count()
        return (self, removed)

    def _unlink(
        self, replace_with: Optional[TreeNode[K, V]]
    ) -> Optional[TreeNode[K, V]]:
        self._left = None
        self._right = None
        self._count = 1
        return replace_with

    def _floor(self, key: K) -> Optional[TreeNode[K, V]]:
        if key < self._key:
            if self._left is None:
                return None
            return self._left._floor(key)
        elif self._key < key:
            if self._right is not None:
                found = self._right._floor(key)
                if found is not None:
                    return found
        return self

    def _ceiling(self, key: K) -> Optional[TreeNode[K, V]]:
        if self._key < key:
            if self._right is None:
                return None
            return self._right._ceiling(key)
        elif key < self._key:
            if self._left is not None:
                found = self._left._ceiling(key)
                if found is not None:
                    return found
        return self

    def _rank(self, key: K) -> int:
        if key < self._key:
            if self._left is None:
                return 0
            return self._left._rank(key)
        elif self._key < key:
            smaller = 1 + _size(self._left)
            if self._right is None:
                return smaller
            return smaller + self._right._rank(key)
        return _size(self._left)

    def _select(self, rank: int) -> TreeNode[K, V]:
        left_size = _size(self._left)
        if rank < left_size:
            return self._left._select(rank)
        elif rank > left_size:
            return self._right._select(rank - left_size - 1)
        return self

    def _height(self) -> int:
        left = -1 if self._left is None else self._left._height()
        right = -1 if self._right is None else self._right._height()
        return 1 + max(left, right)

    # in-order traversal pruned to the inclusive range [lo, hi]
    def _collect(self, out: List[TreeNode[K, V]], lo: K, hi: K):
        if lo < self._key and self._left is not None:
            self._left._collect(out, lo, hi)
        if not (self._key < lo) and not (hi < self._key):
            out.append(self)
        if self._key < hi and self._right is not None:
            self._right._collect(out, lo, hi)

    def _print_recursive(self, level: int) -> str:
        ret = ""
        if self._left is not None:
            ret = self._left._print_recursive(level + 1)

        ret += ("    " * level) + self._print_node() + "\n"

        if self._right is not None:
            ret += self._right._print_recursive(level + 1)

        return ret

    def _print_node(self) -> str:
        return "{} (n={})".format(self.key, self._count)


class BinarySearchTree(Generic[K, V], MutableMapping):
    """Ordered symbol table backed by an unbalanced binary search tree.

    Every node records the size of its subtree, which keeps `size()` O(1) and
    lets `rank()` and `select()` run in time proportional to the tree height.
    No rebalancing is done: inserting keys in sorted order produces a tree of
    linear height, and sufficiently deep trees will hit Python's recursion
    limit.
    """

    def __init__(self):
        self._root: Optional[TreeNode[K, V]] = None

    def size(self) -> int:
        return _size(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def get_node(self, key: K) -> Optional[TreeNode[K, V]]:
        """Directly retrieve a node within this tree, or None if absent."""
        if self._root is None:
            return None
        return self._root._find_node(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self.get_node(key)
        if node is None:
            return default
        return node.value

    def contains(self, key: K) -> bool:
        return self.get_node(key) is not None

    def put(self, key: K, value: V):
        """Insert `key`, or overwrite its value if it is already present."""
        if self._root is None:
            self._root = TreeNode(key, value)
        else:
            self._root._put(key, value)

    def delete(self, key: K) -> bool:
        """Remove `key` from the tree.

        Returns False and leaves the tree untouched if `key` is absent.
        """
        if self._root is None:
            return False

        self._root, removed = self._root._delete(key)
        if not removed:
            logger.debug(f"delete: key {key!r} not in tree")
        return removed

    def delete_min(self):
        if self._root is not None:
            self._root = self._root._delete_min()

    def delete_max(self):
        if self._root is not None:
            self._root = self._root._delete_max()

    def min(self) -> Optional[K]:
        if self._root is None:
            return None
        return self._root._min_node().key

    def max(self) -> Optional[K]:
        if self._root is None:
            return None
        return self._root._max_node().key

    def floor(self, key: K) -> Optional[K]:
        """Largest key less than or equal to `key`, if any."""
        if self._root is None:
            return None
        node = self._root._floor(key)
        return None if node is None else node.key

    def ceiling(self, key: K) -> Optional[K]:
        """Smallest key greater than or equal to `key`, if any."""
        if self._root is None:
            return None
        node = self._root._ceiling(key)
        return None if node is None else node.key

    def rank(self, key: K) -> int:
        """Number of keys strictly less than `key`."""
        if self._root is None:
            return 0
        return self._root._rank(key)

    def select(self, rank: int) -> K:
        """Key with exactly `rank` smaller keys in the tree.

        Raises IndexError if `rank` is outside [0, size).
        """
        if rank < 0 or rank >= self.size():
            raise IndexError("rank {} out of range".format(rank))
        return self._root._select(rank).key

    def size_between(self, start: K, end: K) -> int:
        if end < start:
            return 0
        if self.contains(end):
            return self.rank(end) - self.rank(start) + 1
        return self.rank(end) - self.rank(start)

    def height(self) -> int:
        if self._root is None:
            return -1
        return self._root._height()

    def _nodes(
        self, start: Optional[K] = None, end: Optional[K] = None
    ) -> List[TreeNode[K, V]]:
        if self._root is None:
            return []

        if start is None:
            start = self.min()
        if end is None:
            end = self.max()

        out: List[TreeNode[K, V]] = []
        if not (end < start):
            self._root._collect(out, start, end)
        return out

    def keys(self, start: Optional[K] = None, end: Optional[K] = None) -> List[K]:
        """Keys in `[start, end]` in ascending order.

        A missing bound defaults to the tree's minimum or maximum key. The
        result is empty when `start > end`.
        """
        return [node.key for node in self._nodes(start, end)]

    def values(self, start: Optional[K] = None, end: Optional[K] = None) -> List[V]:
        return [node.value for node in self._nodes(start, end)]

    def items(
        self, start: Optional[K] = None, end: Optional[K] = None
    ) -> List[Tuple[K, V]]:
        return [(node.key, node.value) for node in self._nodes(start, end)]

    def clear(self):
        self._root = None

    def print(self) -> str:
        if self._root is not None:
            return self._root._print_recursive(0)
        else:
            return "<empty tree>"

    def __getitem__(self, key: K) -> V:
        node = self.get_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: K, val: V):
        self.put(key, val)

    def __delitem__(self, key: K):
        if not self.delete(key):
            raise KeyError(key)

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __reversed__(self) -> Iterator[K]:
        return reversed(self.keys())

    def __len__(self) -> int:
        return self.size()

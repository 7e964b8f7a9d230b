from . import util
from . import tree
from . import heap
from . import sorting
from . import searching

from .util import swap
from .tree import BinarySearchTree
from .heap import MaxPriorityQueue
from .sorting import (
    selection_sort,
    insertion_sort,
    shell_sort,
    merge_sort,
    quick_sort,
    heap_sort,
    is_sorted,
)
from .searching import binary_search

__all__ = [
    "swap",
    "BinarySearchTree",
    "MaxPriorityQueue",
    "selection_sort",
    "insertion_sort",
    "shell_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "is_sorted",
    "binary_search",
]

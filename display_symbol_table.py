import logging

import numpy as np

from algokit import BinarySearchTree, MaxPriorityQueue, heap_sort


def display_tree(tree: BinarySearchTree):
    for key in tree.keys():
        print("key: {}".format(key))
    print(tree.print())


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = BinarySearchTree()
    tree.put(1, 2)
    tree.put(2, 4)
    tree.put(3, 9)
    tree.put(4, 16)
    display_tree(tree)

    print("get(3): {}".format(tree.get(3)))
    tree.put(3, 3)
    print("get(3): {}".format(tree.get(3)))
    tree.delete(3)
    tree.delete(3)

    for k in (6, 10, 20, 15, 12, 7):
        tree.put(k, 25)
    display_tree(tree)

    rng = np.random.default_rng(0)
    values = rng.integers(0, 100, size=5)
    print("values: {}".format(values.tolist()))

    pq = MaxPriorityQueue(len(values))
    for v in values.tolist():
        pq.insert(v)
    print("descending: {}".format([pq.retrieve_max() for _ in range(len(values))]))

    heap_sort(values)
    print("heap sorted: {}".format(values.tolist()))

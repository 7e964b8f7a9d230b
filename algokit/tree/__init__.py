from .base import BinarySearchTree, TreeNode

__all__ = ["BinarySearchTree", "TreeNode"]

from typing import Any, Callable, Iterable, Iterator, List, Optional

import numpy as np

from pyskiena.Benchmark import BenchmarkCase


class _Node:
    __slots__ = ("item", "left", "right")

    def __init__(self, item: Any):
        self.item = item
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None


class BinaryTree:
    """
    Unbalanced binary search tree.

    Items smaller than a node live in its left subtree, everything else
    (including duplicates) in its right subtree. All walks are iterative, so
    a degenerate tree built from sorted input does not hit the recursion
    limit.
    """

    def __init__(self):
        self.root: Optional[_Node] = None
        self._len = 0

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> "BinaryTree":
        tree = cls()
        for item in items:
            tree.insert(item)
        return tree

    def insert(self, item: Any) -> None:
        """
        Add ``item`` to the tree.

        Parameters
        ----------
        item : Any
            A value comparable with the items already stored.
        """

        self._len += 1
        if self.root is None:
            self.root = _Node(item)
            return

        node = self.root
        while True:
            if item < node.item:
                if node.left is None:
                    node.left = _Node(item)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(item)
                    return
                node = node.right

    def contains(self, item: Any) -> bool:
        node = self.root
        while node is not None:
            if item == node.item:
                return True
            node = node.left if item < node.item else node.right
        return False

    __contains__ = contains

    def min(self) -> Optional[Any]:
        """Smallest item, or None for an empty tree."""
        if self.root is None:
            return None
        node = self.root
        while node.left is not None:
            node = node.left
        return node.item

    def max(self) -> Optional[Any]:
        """Largest item, or None for an empty tree."""
        if self.root is None:
            return None
        node = self.root
        while node.right is not None:
            node = node.right
        return node.item

    def height(self) -> int:
        """
        Number of nodes on the longest root-to-leaf path; 0 when empty.

        Returns
        -------
        int
            The tree height, about ``log2(len(tree))`` for random input and
            ``len(tree)`` for sorted input.
        """

        best = 0
        stack = [(self.root, 1)] if self.root is not None else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def is_empty(self) -> bool:
        return self._len == 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        """In-order iteration: each item is no smaller than the previous one."""
        stack: List[_Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def for_each(self, f: Callable[[Any], Any]) -> None:
        for item in self:
            f(item)

    def __repr__(self) -> str:
        return f"<BinaryTree(len={self._len}, height={self.height()})>"


def _random_items(size: int, rng: np.random.Generator):
    return (rng.permutation(size).tolist(),)


def _build_and_walk(items: List[int]) -> BinaryTree:
    tree = BinaryTree.from_iterable(items)
    for item in tree:
        pass
    return tree


BENCHMARKS = [
    BenchmarkCase("binary tree build and walk", _random_items, _build_and_walk, (1_000, 10_000)),
]

"""Views of a binary tree and the paths from its root down to its leaves."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from dsalgo.tree import Node, levels


def left_view(root: Optional[Node]) -> list[int]:
    """The first value seen at each depth when looking from the left."""
    return [row[0] for row in levels(root)]


def right_view(root: Optional[Node]) -> list[int]:
    """The last value at each depth, as seen from the right."""
    return [row[-1] for row in levels(root)]


def _leaf_paths(root: Optional[Node]) -> Iterator[list[int]]:
    path: list[int] = []

    def walk(node: Optional[Node]) -> Iterator[list[int]]:
        if node is None:
            return
        path.append(node.data)
        if node.is_leaf:
            yield list(path)
        yield from walk(node.left)
        yield from walk(node.right)
        path.pop()

    yield from walk(root)


def root_to_leaf_paths(root: Optional[Node]) -> list[list[int]]:
    """Every path from the root to a leaf, leftmost leaf first."""
    return list(_leaf_paths(root))


def paths_with_sum(root: Optional[Node], target: int) -> list[list[int]]:
    """Root-to-leaf paths whose values add up to ``target``."""
    return [path for path in _leaf_paths(root) if sum(path) == target]


def only_children(root: Optional[Node]) -> list[int]:
    """Values of nodes that have no sibling, in preorder of their parents."""
    found: list[int] = []

    def walk(node: Optional[Node]) -> None:
        if node is None:
            return
        if node.left is None and node.right is not None:
            found.append(node.right.data)
        if node.left is not None and node.right is None:
            found.append(node.left.data)
        walk(node.left)
        walk(node.right)

    walk(root)
    return found
"""Measures and comparisons of binary trees: size, sum, height, diameter, balance, shape."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional

from dsalgo.tree import Node


@dataclass(frozen=True)
class BalanceInfo:
    """Whether a tree is height-balanced, together with its height."""

    balanced: bool
    height: int


def size(root: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return size(root.left) + size(root.right) + 1


def total(root: Optional[Node]) -> int:
    """Sum of all values in the tree."""
    if root is None:
        return 0
    return total(root.left) + total(root.right) + root.data


def height(root: Optional[Node]) -> int:
    """Height in edges; a single node has height 0 and an empty tree -1."""
    if root is None:
        return -1
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[Node]) -> int:
    """Number of edges on the longest path between any two nodes; 0 for an empty tree."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right) + 2
    return max(through_root, diameter(root.left), diameter(root.right))


def balance_info(root: Optional[Node]) -> BalanceInfo:
    """Balance and height computed together in a single pass."""
    if root is None:
        return BalanceInfo(balanced=True, height=-1)
    left = balance_info(root.left)
    right = balance_info(root.right)
    balanced = left.balanced and right.balanced and abs(left.height - right.height) <= 1
    return BalanceInfo(balanced=balanced, height=1 + max(left.height, right.height))


def is_balanced(root: Optional[Node]) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    return balance_info(root).balanced


def is_balanced_naive(root: Optional[Node]) -> bool:
    """The same check as :func:`is_balanced`, recomputing heights at every node."""
    if root is None:
        return True
    return (
        is_balanced_naive(root.left)
        and is_balanced_naive(root.right)
        and abs(height(root.left) - height(root.right)) <= 1
    )


def mirror(root: Optional[Node]) -> Optional[Node]:
    """Swap left and right children throughout the tree, in place; returns the root."""
    if root is None:
        return None
    root.left, root.right = mirror(root.right), mirror(root.left)
    return root


def structurally_identical(first: Optional[Node], second: Optional[Node]) -> bool:
    """True if both trees have the same shape, whatever their values."""
    if first is None and second is None:
        return True
    if first is not None and second is not None:
        return structurally_identical(first.left, second.left) and structurally_identical(
            first.right, second.right
        )
    return False


def structurally_identical_iterative(first: Optional[Node], second: Optional[Node]) -> bool:
    """Shape comparison done breadth-first with a queue of node pairs."""
    if first is None or second is None:
        return first is None and second is None
    pending = deque([(first, second)])
    while pending:
        a, b = pending.popleft()
        for child_a, child_b in ((a.left, b.left), (a.right, b.right)):
            if child_a is not None and child_b is not None:
                pending.append((child_a, child_b))
            elif child_a is not None or child_b is not None:
                return False
    return True
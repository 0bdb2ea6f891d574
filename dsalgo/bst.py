"""Binary search trees: insertion, lookup, deletion, validation and reshaping."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from dsalgo.tree import Node

Bound = Union[int, float]


@dataclass(frozen=True)
class BSTInfo:
    """Result of a one-pass BST check.

    ``maximum`` and ``minimum`` are the values used for the check; an empty
    tree reports ``-inf`` and ``inf``.
    """

    is_bst: bool
    maximum: Bound
    minimum: Bound


def insert(root: Optional[Node], key: int) -> Node:
    """Insert ``key`` and return the root; a key already present is ignored."""
    if root is None:
        return Node(key)
    if key < root.data:
        root.left = insert(root.left, key)
    elif key > root.data:
        root.right = insert(root.right, key)
    return root


def build_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a BST by inserting the values in the order given."""
    root: Optional[Node] = None
    for value in values:
        root = insert(root, value)
    return root


def search(root: Optional[Node], key: int) -> bool:
    """True if ``key`` is stored in the tree."""
    node = root
    while node is not None:
        if node.data == key:
            return True
        node = node.left if key < node.data else node.right
    return False


def minimum(root: Optional[Node]) -> Optional[Node]:
    """The leftmost node, or None for an empty tree."""
    if root is None:
        return None
    while root.left is not None:
        root = root.left
    return root


def maximum(root: Optional[Node]) -> Optional[Node]:
    """The rightmost node, or None for an empty tree."""
    if root is None:
        return None
    while root.right is not None:
        root = root.right
    return root


def delete(root: Optional[Node], key: int) -> Optional[Node]:
    """Remove ``key`` and return the new root.

    A node with two children takes the largest value of its left subtree,
    which is then removed from there.
    """
    if root is None:
        return None
    if root.data == key:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        largest = maximum(root.left)
        largest.data, root.data = root.data, largest.data
        root.left = delete(root.left, key)
    elif key < root.data:
        root.left = delete(root.left, key)
    else:
        root.right = delete(root.right, key)
    return root


def _rightmost_value(root: Optional[Node]) -> Bound:
    node = maximum(root)
    return -math.inf if node is None else node.data


def _leftmost_value(root: Optional[Node]) -> Bound:
    node = minimum(root)
    return math.inf if node is None else node.data


def is_bst(root: Optional[Node]) -> bool:
    """True if the tree is a strict BST, checking each node against its subtrees' extremes."""
    if root is None:
        return True
    return (
        is_bst(root.left)
        and is_bst(root.right)
        and _rightmost_value(root.left) < root.data < _leftmost_value(root.right)
    )


def bst_info(root: Optional[Node]) -> BSTInfo:
    """Check the BST property and collect extremes in a single pass."""
    if root is None:
        return BSTInfo(is_bst=True, maximum=-math.inf, minimum=math.inf)
    left = bst_info(root.left)
    right = bst_info(root.right)
    valid = left.is_bst and right.is_bst and left.maximum < root.data < right.minimum
    return BSTInfo(
        is_bst=valid,
        maximum=max(root.data, right.maximum),
        minimum=min(root.data, left.minimum),
    )


def is_bst_range(root: Optional[Node]) -> bool:
    """True if every node lies strictly inside the bounds set by its ancestors."""

    def check(node: Optional[Node], low: Bound, high: Bound) -> bool:
        if node is None:
            return True
        return (
            low < node.data < high
            and check(node.left, low, node.data)
            and check(node.right, node.data, high)
        )

    return check(root, -math.inf, math.inf)


def in_range(root: Optional[Node], low: int, high: int) -> list[int]:
    """Values between ``low`` and ``high`` inclusive, in inorder."""

    def walk(node: Optional[Node]) -> Iterator[int]:
        if node is None:
            return
        yield from walk(node.left)
        if low <= node.data <= high:
            yield node.data
        yield from walk(node.right)

    return list(walk(root))


def build_balanced(values: Sequence[int]) -> Optional[Node]:
    """Build a height-balanced BST from sorted values, taking each middle as a root."""
    items = list(values)

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        mid = start + (end - start) // 2
        node = Node(items[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(items) - 1)


def flatten(root: Optional[Node]) -> Optional[Node]:
    """Relink the tree in place into a list along ``right`` links, in sorted order.

    Returns the head of the list. Left links are left as they were.
    """

    def link(node: Optional[Node]) -> tuple[Optional[Node], Optional[Node]]:
        if node is None:
            return None, None
        left_head, left_tail = link(node.left)
        if left_head is not None:
            left_tail.right = node
            head = left_head
        else:
            head = node
        right_head, right_tail = link(node.right)
        if right_head is not None:
            node.right = right_head
            tail = right_tail
        else:
            tail = node
        return head, tail

    return link(root)[0]


def linked_values(head: Optional[Node]) -> list[int]:
    """Values met by following ``right`` links from ``head``."""
    values = []
    while head is not None:
        values.append(head.data)
        head = head.right
    return values


def add_greater_values(root: Optional[Node]) -> Optional[Node]:
    """Replace each value with itself plus every greater value, in place."""
    running = 0

    def walk(node: Optional[Node]) -> None:
        nonlocal running
        if node is None:
            return
        walk(node.right)
        running += node.data
        node.data = running
        walk(node.left)

    walk(root)
    return root


def double_tree(root: Optional[Node]) -> Optional[Node]:
    """Give every node a copy of itself as its new left child, in place."""
    if root is None:
        return None
    double_tree(root.left)
    double_tree(root.right)
    root.left = Node(root.data, left=root.left)
    return root
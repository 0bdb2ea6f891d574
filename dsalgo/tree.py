"""Binary tree nodes, the ways of building trees from token streams, and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _taker(values: Iterable) -> "callable":
    stream: Iterator = iter(values)

    def take():
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("input ended before the tree was complete") from None

    return take


def _is_null(value) -> bool:
    return value is None or value == NULL_MARKER


def build_preorder(values: Iterable) -> Optional[Node]:
    """Build a tree from preorder values where -1 (or None) marks a missing child."""
    take = _taker(values)

    def build() -> Optional[Node]:
        value = take()
        if _is_null(value):
            return None
        node = Node(int(value))
        node.left = build()
        node.right = build()
        return node

    return build()


def build_flagged(tokens: Iterable[str] | str) -> Node:
    """Build a tree from ``value flag ... flag`` tokens.

    The root is always present; after each value come "true"/"false" flags
    saying whether a left and then a right subtree follows.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    take = _taker(tokens)

    def flag() -> bool:
        token = take()
        if token == "true":
            return True
        if token == "false":
            return False
        raise ValueError(f"expected 'true' or 'false', got {token!r}")

    def build() -> Node:
        node = Node(int(take()))
        if flag():
            node.left = build()
        if flag():
            node.right = build()
        return node

    return build()


def build_level_order(values: Iterable) -> Node:
    """Build a tree from level-order values, giving two children per node; -1 marks none."""
    take = _taker(values)
    root = Node(int(take()))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = take()
        if not _is_null(left):
            node.left = Node(int(left))
            pending.append(node.left)
        right = take()
        if not _is_null(right):
            node.right = Node(int(right))
            pending.append(node.right)
    return root


def build_from_preorder_inorder(preorder: Iterable[int], inorder: Iterable[int]) -> Optional[Node]:
    """Rebuild a tree from its preorder and inorder sequences."""
    pre = list(preorder)
    ino = list(inorder)
    if len(pre) != len(ino):
        raise ValueError("preorder and inorder sequences differ in length")
    next_value = iter(pre).__next__

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        value = next_value()
        try:
            split = ino.index(value, start, end + 1)
        except ValueError:
            raise ValueError(f"value {value!r} does not fit the inorder sequence") from None
        node = Node(value)
        node.left = build(start, split - 1)
        node.right = build(split + 1, end)
        return node

    return build(0, len(ino) - 1)


def _walk(root: Optional[Node], order: str, with_nulls: bool) -> Iterator[Optional[int]]:
    if root is None:
        if with_nulls:
            yield None
        return
    if order == "pre":
        yield root.data
    yield from _walk(root.left, order, with_nulls)
    if order == "in":
        yield root.data
    yield from _walk(root.right, order, with_nulls)
    if order == "post":
        yield root.data


def preorder(root: Optional[Node], with_nulls: bool = False) -> list[Optional[int]]:
    """Values in preorder; with ``with_nulls`` each missing child appears as None."""
    return list(_walk(root, "pre", with_nulls))


def inorder(root: Optional[Node], with_nulls: bool = False) -> list[Optional[int]]:
    """Values in inorder; with ``with_nulls`` each missing child appears as None."""
    return list(_walk(root, "in", with_nulls))


def postorder(root: Optional[Node], with_nulls: bool = False) -> list[Optional[int]]:
    """Values in postorder; with ``with_nulls`` each missing child appears as None."""
    return list(_walk(root, "post", with_nulls))


def _level_nodes(root: Optional[Node]) -> Iterator[list[Node]]:
    current = [root] if root is not None else []
    while current:
        yield current
        current = [child for node in current for child in (node.left, node.right) if child]


def levels(root: Optional[Node]) -> list[list[int]]:
    """Values grouped by depth, each level left to right."""
    return [[node.data for node in level] for level in _level_nodes(root)]


def level_order(root: Optional[Node]) -> list[int]:
    """Values in breadth-first order."""
    return [value for level in levels(root) for value in level]


def zigzag_levels(root: Optional[Node]) -> list[list[int]]:
    """Levels alternating direction, the root level left to right."""
    return [row if depth % 2 == 0 else row[::-1] for depth, row in enumerate(levels(root))]


def leaves_level_order(root: Optional[Node]) -> list[int]:
    """Values of the leaves in breadth-first order."""
    return [node.data for level in _level_nodes(root) for node in level if node.is_leaf]
import math

import pytest

from dsalgo.bst import (
    BSTInfo,
    add_greater_values,
    bst_info,
    build_balanced,
    build_bst,
    delete,
    double_tree,
    flatten,
    in_range,
    insert,
    is_bst,
    is_bst_range,
    linked_values,
    maximum,
    minimum,
    search,
)
from dsalgo.tree import Node, inorder, preorder
from dsalgo.tree_properties import is_balanced, size

VALUES = [10, 5, 3, 7, 15, 13, 17]


@pytest.fixture
def tree():
    return build_bst(VALUES)


def _not_bst():
    return Node(10, Node(5, None, Node(12)), Node(15))


def test_build_gives_sorted_inorder(tree):
    assert inorder(tree) == sorted(VALUES)


def test_build_preorder_keeps_insertion_shape(tree):
    assert preorder(tree) == [10, 5, 3, 7, 15, 13, 17]


def test_insert_ignores_duplicates(tree):
    insert(tree, 7)
    assert inorder(tree) == sorted(VALUES)


def test_insert_into_empty():
    root = insert(None, 4)
    assert inorder(root) == [4]


def test_build_empty():
    assert build_bst([]) is None


def test_search(tree):
    tree = insert(tree, 57)
    assert search(tree, 57) is True
    assert search(tree, 4) is False
    assert search(None, 1) is False


def test_minimum_and_maximum(tree):
    assert minimum(tree).data == 3
    assert maximum(tree).data == 17
    assert minimum(None) is None
    assert maximum(None) is None


def test_delete_sequence(tree):
    tree = delete(tree, 7)
    assert inorder(tree) == [3, 5, 10, 13, 15, 17]
    tree = delete(tree, 13)
    assert inorder(tree) == [3, 5, 10, 15, 17]
    tree = delete(tree, 10)
    assert inorder(tree) == [3, 5, 15, 17]
    assert tree.data == 5
    assert is_bst(tree)


def test_delete_missing_key_changes_nothing(tree):
    tree = delete(tree, 100)
    assert inorder(tree) == sorted(VALUES)


def test_delete_last_node():
    assert delete(Node(1), 1) is None


@pytest.mark.parametrize("check", [is_bst, is_bst_range, lambda r: bst_info(r).is_bst])
def test_checkers_accept_bst(tree, check):
    assert check(tree) is True


@pytest.mark.parametrize("check", [is_bst, is_bst_range, lambda r: bst_info(r).is_bst])
def test_checkers_reject_non_bst(check):
    assert check(_not_bst()) is False


@pytest.mark.parametrize("check", [is_bst, is_bst_range, lambda r: bst_info(r).is_bst])
def test_checkers_accept_empty(check):
    assert check(None) is True


def test_bst_info_extremes(tree):
    info = bst_info(tree)
    assert info == BSTInfo(is_bst=True, maximum=17, minimum=3)


def test_bst_info_empty():
    info = bst_info(None)
    assert info.maximum == -math.inf
    assert info.minimum == math.inf


def test_range_check_handles_extreme_integers():
    root = Node(-(2**31), None, Node(2**31 - 1))
    assert is_bst_range(root) is True


def test_in_range(tree):
    assert in_range(tree, 7, 17) == [7, 10, 13, 15, 17]
    assert in_range(tree, 100, 200) == []


def test_build_balanced():
    root = build_balanced([1, 2, 3, 4, 5, 6, 7])
    assert preorder(root) == [4, 2, 1, 3, 6, 5, 7]
    assert is_balanced(root)
    assert build_balanced([]) is None


def test_build_balanced_keeps_sorted_order():
    values = list(range(20))
    root = build_balanced(values)
    assert inorder(root) == values
    assert is_bst(root)


def test_flatten(tree):
    head = flatten(tree)
    assert linked_values(head) == sorted(VALUES)
    assert head.data == 3


def test_flatten_empty():
    assert flatten(None) is None
    assert linked_values(None) == []


def test_add_greater_values(tree):
    root = add_greater_values(tree)
    result = inorder(root)
    assert result[0] == sum(VALUES)
    assert result[-1] == max(VALUES)
    assert result == sorted(result, reverse=True)


def test_double_tree(tree):
    root = double_tree(tree)
    assert inorder(root) == sorted(VALUES * 2)
    assert size(root) == 2 * len(VALUES)
    assert root.left.data == root.data
    assert root.left.left.data == 5
    assert double_tree(None) is None
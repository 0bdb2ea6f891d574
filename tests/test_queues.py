import pytest

from dsalgo.queues import drop_middle_of_stack, k_reverse


def test_k_reverse_pinned():
    assert k_reverse([1, 2, 3, 4, 5], 3) == [3, 2, 1, 4, 5]


@pytest.mark.parametrize("k", [1, 2, 4, 6])
def test_k_reverse_shape(k):
    items = list(range(1, 7))
    result = k_reverse(items, k)
    assert result[:k] == items[:k][::-1]
    assert result[k:] == items[k:]


def test_k_reverse_whole_queue():
    items = [4, 8, 15, 16]
    assert k_reverse(items, len(items)) == items[::-1]


@pytest.mark.parametrize("k", [0, -2, 10])
def test_k_reverse_out_of_range_is_unchanged(k):
    items = [1, 2, 3]
    assert k_reverse(items, k) == items


def test_k_reverse_empty():
    assert k_reverse([], 2) == []


def test_k_reverse_does_not_mutate():
    items = [1, 2, 3]
    k_reverse(items, 2)
    assert items == [1, 2, 3]


def test_drop_middle_odd():
    assert drop_middle_of_stack([1, 2, 3, 4, 5]) == [5, 4, 2, 1]


def test_drop_middle_even():
    assert drop_middle_of_stack([1, 2, 3, 4]) == [4, 3, 1]


@pytest.mark.parametrize("n", range(1, 9))
def test_drop_middle_removes_exactly_one(n):
    items = list(range(n))
    result = drop_middle_of_stack(items)
    assert len(result) == n - 1
    assert set(result) < set(items)


def test_drop_middle_empty():
    assert drop_middle_of_stack([]) == []
# dsalgo

Small, dependency-free implementations of the classic data structures and the
algorithms usually taught with them: binary trees, binary search trees, a max
heap, queue and stack exercises, and a trie of lower-case words.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `dsalgo.tree`

- `Node(data, left=None, right=None)`: a binary tree node holding an integer,
  with an `is_leaf` property.
- Building trees:
  - `build_preorder(values)`: preorder values where `-1` or `None` marks a
    missing child.
  - `build_flagged(tokens)`: tokens such as `"10 true 20 false false false"`
    (a string or an iterable of tokens). After each value come two
    `true`/`false` flags saying whether a left and then a right subtree follows.
  - `build_level_order(values)`: level-order values giving two children per
    node, `-1` for none.
  - `build_from_preorder_inorder(preorder, inorder)`.

  Each raises `ValueError` when the input ends before the tree is complete or
  does not fit together.
- Traversals: `preorder`, `inorder` and `postorder` (with `with_nulls=True`
  every missing child appears as `None`), `level_order`, `levels` (values
  grouped by depth), `zigzag_levels` and `leaves_level_order`.

### `dsalgo.tree_properties`

- `size`, `total` (sum of values), `height` (in edges: a single node is 0, an
  empty tree -1) and `diameter` (edges on the longest path).
- `balance_info` returns a `BalanceInfo(balanced, height)` in one pass.
  `is_balanced` uses it, and `is_balanced_naive` makes the same check while
  recomputing heights at every node.
- `mirror` swaps children throughout the tree, in place.
- `structurally_identical` and `structurally_identical_iterative` compare the
  shapes of two trees and ignore their values.

### `dsalgo.tree_paths`

`left_view`, `right_view`, `root_to_leaf_paths`, `paths_with_sum(root, target)`,
and `only_children`, which lists the nodes that have no sibling.

### `dsalgo.bst`

- `insert` (duplicates are ignored), `build_bst`, `search`, `minimum` and
  `maximum` (these two return nodes), and `delete`. When a node with two
  children is deleted, it takes the largest value of its left subtree.
- Checks: `is_bst`, `bst_info`, which returns a `BSTInfo(is_bst, maximum,
  minimum)`, and `is_bst_range`.
- `in_range(root, low, high)` gives the values in inorder, both bounds included.
- `build_balanced(sorted_values)` builds a height-balanced tree.
- `flatten` relinks the tree in place into a sorted list along `right` links
  and returns its head. `linked_values` reads such a list.
- `add_greater_values` replaces each value with itself plus all greater values.
- `double_tree` gives each node a copy of itself as its new left child.

### `dsalgo.heap`

- `MaxHeap(values=())` has `push`, `pop`, `top` and `len()`. On an empty heap,
  `pop` and `top` raise `IndexError`.
- `build_max_heap(values)` arranges the values into a max-heap list.
- `heap_sort(values)` returns them in ascending order.
- `top_k(values, k)` returns the `k` largest values, smallest first. It raises
  `ValueError` if there are fewer than `k` values or if `k` is negative.

### `dsalgo.queues`

- `k_reverse(items, k)` reverses the first `k` items and keeps the rest in
  order. The items come back unchanged if there are none, if `k` is larger
  than their number, or if `k` is not positive.
- `drop_middle_of_stack(items)` pops the whole stack and leaves out the middle
  element. The values come back in pop order.

### `dsalgo.trie`

`Trie` has `insert`, `search`, `delete`, which prunes nodes that no longer
lead to any word, and `words()`, which lists the words in alphabetical order.
It also supports `in`, `len()` and iteration. Words may only contain the
letters `a` to `z`; any other character raises `ValueError`.

## Example

```python
from dsalgo.bst import build_bst, delete, in_range
from dsalgo.tree import inorder
from dsalgo.trie import Trie

root = build_bst([10, 5, 3, 7, 15, 13, 17])
root = delete(root, 7)
print(inorder(root))             # [3, 5, 10, 13, 15, 17]
print(in_range(root, 7, 17))     # [10, 13, 15, 17]

trie = Trie()
for word in ["are", "as", "at", "do", "dot"]:
    trie.insert(word)
trie.delete("as")
print(trie.words(), len(trie))   # ['are', 'at', 'do', 'dot'] 4
```

## What it does not do

This is a library only. It has no command-line program and does not read
trees or numbers from standard input. To use the builders, pass them
tokens or values you have read yourself. Nothing is printed: every function
returns its result.
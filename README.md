# aclib

A small library of algorithms and data structures often needed in
competitive programming. It depends on nothing outside the standard library.

## Installation

```
pip install .
```

## Contents

### `aclib.algo`

- `aclib.algo.bisection`
  - `bisect(pred, start=None, stop=None, inclusive=False)`: the first integer
    where `pred` turns from false to true, or `None`. A `None` bound is
    unbounded and is found by doubling steps; `stop` is excluded unless
    `inclusive` is true.
  - `bisect_unit(pred, unit, start=None, stop=None, inclusive=False)`: the same
    search to a width of `unit`, for floats as well as integers.
  - `initial_indices(pred, start=None, stop=None, inclusive=False)`: the
    bracketing pair used by the searches above.
  - `sqrt_ceil`, `sqrt_floor`, `log_ceil(a, x)`, `log_floor(a, x)`: integer
    roots and logarithms.
  - `bisect_left`, `bisect_right`, `bisect_left_by_key(a, x, key)`,
    `bisect_right_by_key(a, x, key)`: insertion indices in sorted sequences.
- `aclib.algo.bound`: `lower_bound`, `upper_bound` and `bisect_right` on sorted
  sequences.
- `aclib.algo.compress`: `coordinate_compress(values)` replaces each value by its
  rank among the distinct values.
- `aclib.algo.inversion`: `inversion_number` for a permutation of `0..n-1`
  (Fenwick tree) and `inversion_number_with` for distinct comparable values.
- `aclib.algo.two_pointers`: `two_pointers(a, b, cond)` is a generator of the
  `(a_item, b_item)` pairs visited; for each item of `a` the pointer into `b`
  moves on while `cond` is false and `b` has more items.
- `aclib.algo.sort`: in-place `bubble_sort`, `selection_sort`, `insertion_sort`,
  `heap_sort`, `merge_sort`, `quick_sort`. `quick_sort`'s partition assumes
  distinct values; equal elements may keep it from terminating.
- `aclib.algo.distance`: `hamming_distance`, `levenshtein_distance`,
  `manhattan_distance`, `chebyshev_distance` (missing coordinates count as 0),
  `manhattan_distance_2d`, `chebyshev_distance_2d`, and `rotate_45`, which turns
  Manhattan distance into Chebyshev distance.

### `aclib.structures`

- `counter.Counter`: a `dict` subclass that counts elements, with `count`,
  `remove` (drops an element when its count reaches 0), `counted` (0 when
  absent) and `most_common` (pairs by descending count).
- `trie.TrieTree`: a prefix tree with `insert` (False if the whole path already
  exists), `contains` / `in` (true when the key ends at a leaf) and `len`.
- `sorted_list.SortedVec`: a list kept sorted, with indexing, slicing, iteration,
  `insert`, `extend`, `min_elements(k)` and `max_elements(k)` (`IndexError` when
  `k` is out of range).
- `heap.MinHeap(key, items=())`, `heap.BHeapSet(key, items=())`: binary min-heaps
  ordered by `key`, with iterative and recursive sifting respectively. `pop` and
  `peek` raise `IndexError` on an empty heap.
- `unionfind.SimpleUnionFind`: union-find without path compression.
  `unionfind.UnionFind`: path compression, `size`, `equiv`, `root` and
  `connected_components`. `unionfind.MergeTechnique`: keeps each group's members
  (`same_group`), merging the smaller group into the larger.
- `linked_list.LinkedList`: a singly linked list used as a stack (`push`, `pop`)
  or a queue (`enqueue`, `dequeue`), with `peek_head`, `peek_tail`, `append`
  (moves all nodes of another list, emptying it), `extend`, iteration and `len`.
  Popping or peeking an empty list raises `IndexError`.
- `segment_tree.SegmentTree(data, identity, op)`: an iterative segment tree with
  `query(l, r)` over `[l, r)`, `update`, `update_with`, `swap`, `bisect_left`,
  `bisect_right` and leaf indexing.
- `ordered_segment_tree.OrderedSegmentTree(data, identity, op)`: the same, but
  `identity` is a factory and queries keep operand order, so `op` need not be
  commutative (string concatenation works). Leaves can also be set with `tree[k] = x`.
- `monoid_tree.Monoid`, `monoid_tree.MonoidSegmentTree(monoid, data)`: subclass
  `Monoid` with `identity` and `operation` classmethods; the tree takes and
  returns plain values. `query(start=None, stop=None)` and
  `bisect(start, stop, cmp, leftmost=True)` accept `None` for unbounded ends.
- `add_tree.AddTree(data)`: a lazy segment tree of integer sums with
  `update_range(l, r, x)` and `query(l, r)`.

## Examples

```python
from aclib.algo.bisection import bisect, sqrt_floor
from aclib.structures.segment_tree import SegmentTree
from aclib.structures.unionfind import UnionFind

bisect(lambda i: i * i > 100, start=0)  # 11
sqrt_floor(10)                          # 3

tree = SegmentTree([0, 1, 2, 3, 4, 5], 0, lambda a, b: a + b)
tree.query(2, 5)                        # 9
tree.update(3, 10)
tree.query(2, 5)                        # 16

forest = UnionFind(5)
forest.union(1, 2)
forest.equiv(1, 2)                      # True
forest.size(1)                          # 2
```

## What it does not do

This is a library only: it has no command-line tool, and it reads no input
files. Graph algorithms beyond union-find are not included.

## Running the tests

```
pip install .[test]
pytest
```
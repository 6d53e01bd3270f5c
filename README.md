# dsakit

Classic data structures and algorithms written in plain Python, with no
third-party dependencies. Every function returns its result; nothing prints.
Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

`bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`,
`quick_sort`, `counting_sort` and `heap_sort`. Each takes any iterable and
returns a new ascending list. `counting_sort` accepts non-negative integers
only and raises `ValueError` otherwise.

### `dsakit.searching`

- `binary_search(nums, target)` – index in a sorted sequence, or `-1`.
- `integer_divide(divisor, dividend)` – quotient found by binary search.
- `find_odd_occurrence(values)` – index of the lone item in a list of adjacent pairs.
- `find_pivot(values)` – index of the largest item of a rotated ascending list, or `-1`.
- `integer_sqrt(x)` – floor square root; `ValueError` for negatives.
- `missing_number(nums)` – the number of `0..len(nums)` that is absent.
- `peak_index(values)` – peak of a mountain array.
- `search_matrix(matrix, target)` – lookup in a row-wise sorted matrix.
- `search_nearly_sorted(values, target)` – index where each item is at most one place off, or `-1`.

### `dsakit.bits`

`is_power_of_two`, `is_even`, `get_bit` (one-based position), `set_bit`,
`clear_bit`, `set_bit_to`, `clear_bits_through`, `clear_bits_in_range`
(zero-based positions), `count_set_bits`, `xor_upto`, `xor_prefixes` and
`xor_swap`.

### `dsakit.primes`

`sieve(n)` gives primality flags for `0..n-1`; `primes_below(n)` lists the
primes smaller than `n`.

### `dsakit.heaps`

`MaxHeap(capacity)` and `MinHeap(capacity)` offer `push`, `pop`, `len()` and
`to_list()`. Pushing onto a full heap raises `OverflowError`; popping an
empty one raises `IndexError`. Also `build_max_heap`, `build_min_heap`,
`heap_sort_ascending` and `heap_sort_descending`.

### `dsakit.linked_list`

`SinglyLinkedList` and `DoublyLinkedList` take an optional iterable and
support `prepend`, `append`, `insert(position, value)`, `find(value)` and
`delete(position)`, all with one-based positions; `find` returns `-1` when
the value is absent and bad positions raise `IndexError`. Both are iterable;
`DoublyLinkedList` also supports `reversed()`.

### `dsakit.stacks`

Stacks are Python lists whose last item is the top: `is_sorted_stack`,
`middle_of_stack`, `insert_at_bottom`, `reverse_stack`, `sorted_insert`, plus
`next_smaller`, `previous_smaller`, `count_redundant_brackets` and
`reverse_string`.

### `dsakit.queues`

`StackQueue` is a FIFO queue built from two stacks (`enqueue`, `dequeue`,
`len()`). Also `sum_of_window_extremes(values, k)`, `reverse_groups(queue, k)`
and `reverse_queue(queue)`; the last two return a `collections.deque`.

### `dsakit.recursion`

`count_decodings`, `factorial`, `power_of_two`, `fibonacci`, `sum_to`,
`count_up`, `last_occurrence`, `is_palindrome`, `remove_all`, `reverse`,
`substrings` and `subsequences`.

### `dsakit.trie`

`Trie(words)` supports `insert`, `in`, `remove`, `suggestions(prefix)` and
`suggestions_per_prefix(prefix)`, which gives the suggestions for every
leading part of the prefix, shortest first.

### `dsakit.range_query`

`FenwickTree(values)` with `add(index, delta)`, `prefix_sum(index)` and
`lower_bound(target)` over one-based positions. `SegmentTree(values)` with
`query(left, right)` and `update(index, value)` over zero-based positions.

### `dsakit.greedy`

`largest_undefended_area(width, height, towers)` – area of the largest block
of cells whose rows and columns hold no tower.

### `dsakit.bst`

`BSTNode`, `insert`, `build_bst`, `delete`, `search`, `minimum`, `maximum`,
and the traversals `level_order`, `preorder`, `inorder`, `postorder`.

### `dsakit.binary_tree`

`TreeNode`, `build_from_markers` (preorder tokens with `-1` for a missing
child), `build_from_preorder_inorder`, `build_from_inorder_postorder`, and
the traversals `preorder`, `inorder`, `postorder`, `level_order`.

### `dsakit.tree_metrics`

`height`, `diameter`, `is_balanced`, `max_width`, `count_complete_nodes`,
`lowest_common_ancestor`, `has_path_sum`, `path_sums` and `min_camera_cover`.

### `dsakit.tree_views`

`top_view`, `left_view`, `boundary_traversal` and
`nodes_at_distance(root, target, k)`.

### `dsakit.graph`

`Graph` stores `node -> [(neighbour, weight), ...]`. `add_edge(u, v,
weight=0, directed=False)` adds edges; the graph offers `neighbours`,
`format_adjacency`, `bfs`, `dfs`, `shortest_path_unweighted`,
`has_undirected_cycle_bfs`, `has_undirected_cycle_dfs`, `has_directed_cycle`,
`bridges` and `strongly_connected_components`. The module also has
`topological_sort_dfs` and `topological_sort_kahn` for graphs given as lists
of successor lists.

### `dsakit.disjoint_set`

`DisjointSet(n)` over `0..n` with `find`, `union_by_rank`, `union_by_size`
and `connected`. The union methods return `False` when the two nodes were
already joined.

### `dsakit.shortest_paths`

`bellman_ford` (returns a `BellmanFordResult` with `distances` and
`has_negative_cycle`), `dijkstra`, `floyd_warshall`, `dag_shortest_paths`,
`dag_path_to` and `shortest_routes`. Unreachable nodes get `math.inf`.

### `dsakit.mst`

`kruskal_mst(vertex_count, edges)` and `prim_mst(vertex_count, adjacency)`
return the total weight of a minimum spanning tree.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.trie import Trie
from dsakit.disjoint_set import DisjointSet

data = merge_sort([72, 34, 90, 23, 56])
print(data)                      # [23, 34, 56, 72, 90]
print(binary_search(data, 56))   # 2

trie = Trie(["babbar", "bob", "baby", "ball"])
print("bob" in trie)             # True
print(trie.suggestions("bab"))   # words starting with "bab"

ds = DisjointSet(7)
ds.union_by_size(1, 2)
print(ds.connected(1, 2))        # True
```

```python
from dsakit.graph import Graph
from dsakit.shortest_paths import dijkstra

g = Graph()
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
print(g.bfs(0))                  # [0, 1, 2]
print(dijkstra(g, 0, 3))         # [0, 4, 5]
```

## What it does not do

dsakit is a library only: it has no command-line program and does not read
input or print results. Its structures live in memory and are not saved
anywhere.
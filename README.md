# algokit

A collection of classic data structures and algorithm solutions in plain
Python, with no runtime dependencies.

## Installation

```
pip install algokit
```

For running the test suite:

```
pip install "algokit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.tree` | `TreeNode`, `create_tree`, `create_tree_in_order`, `tree_to_list`, `max_depth`, `tree_height` |
| `algokit.linked_list` | `ListNode`, `create_linked_list`, `create_linked_list_from_string`, `create_int_linked_list_from_string`, `reversed_copy`, `lists_equal` |
| `algokit.disjoint_set` | `DisjointSet` (union by rank) |
| `algokit.graph` | `GraphNode`, `build_graph`, `clone_graph` |
| `algokit.recursion` | iterative and recursive factorials, several Fibonacci variants and the `fibonacci_sequence` generator |
| `algokit.bst` | `BinarySearchTree`, `BSTNode`, `NodeNotFoundError` |
| `algokit.text_problems` | backspace compare, longest substring without repeats, palindromes, bracket checks, minimal parenthesis removal, Roman numerals |
| `algokit.queues` | `StackQueue`, `RecentCounter`, `SmallestInfiniteSet` |
| `algokit.arrays` | two sum, trapping rain water, in-place quick sorts, k-th largest, search range, palindrome numbers |
| `algokit.list_algorithms` | reversing, cycle detection, merging, deleting the middle, twin sums, odd/even reordering, flattening multilevel lists |
| `algokit.tree_algorithms` | level order, right side view, complete-tree counting, BST validation and search, LCA, path sums, zigzag paths, leaf similarity |
| `algokit.grids` | islands, rotting oranges, walls and gates, maze exit, knight probability, sudoku |
| `algokit.graph_algorithms` | informing employees, course scheduling, Dijkstra, Bellman-Ford, path existence, provinces, all paths, keys and rooms |
| `algokit.succession` | `Monarchy` order of succession |
| `algokit.trie` | `Trie` prefix tree |

## Examples

Binary trees are built from level-order lists, with `None` for gaps:

```python
from algokit.tree import create_tree, max_depth, tree_to_list

root = create_tree([3, 9, 20, None, None, 15, 7])
max_depth(root)      # 3
tree_to_list(root)   # [3, 9, 20, None, None, 15, 7]
```

A binary search tree (equal values go to the right):

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (9, 4, 6, 20, 170, 15, 1):
    tree.insert(value)

tree.in_order()    # [1, 4, 6, 9, 15, 20, 170]
tree.bfs()         # [9, 4, 20, 1, 6, 15, 170]
```

`lookup` and `remove` raise `NodeNotFoundError` for a value that is not in
the tree.

Linked lists:

```python
from algokit.linked_list import create_linked_list_from_string
from algokit.list_algorithms import reverse_between

head = create_linked_list_from_string("1,2,3,4,5,6,7")
reverse_between(head, 2, 4).signature()   # "1,4,3,2,5,6,7"
```

Union-find:

```python
from algokit.disjoint_set import DisjointSet

sets = DisjointSet(4)
sets.union(0, 1)
sets.connected(0, 1)   # True
sets.connected(0, 3)   # False
```

A trie:

```python
from algokit.trie import Trie

trie = Trie()
trie.insert("apple")
trie.search("apple")      # True
trie.starts_with("app")   # True
trie.search("app")        # False
```

## What the package does not do

- There is no general sorting module: no bubble, selection, insertion,
  merge or heap sort. The only sorts are the in-place quick sorts in
  `algokit.arrays` (`quick_sort_first_pivot`, `quick_sort_last_pivot`,
  `quick_sort_range`); for anything else use Python's `sorted`.
- It is a library only; it installs no command-line program.
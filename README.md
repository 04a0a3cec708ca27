# algoshelf

A shelf of classic data structures and algorithms, written in plain Python
with no third-party dependencies. It requires Python 3.10 or later.

## What is inside

| Module                    | Contents                                                                 |
|---------------------------|--------------------------------------------------------------------------|
| `algoshelf.vector`        | `DynamicArray`, an integer array whose capacity doubles and shrinks, and `determine_capacity` |
| `algoshelf.binary_search` | `binary_search` and `binary_search_recursive` over sorted sequences       |
| `algoshelf.bits`          | `to_bits`, `format_bits`, `set_bit`, `clear_bit`, `is_little_endian`      |
| `algoshelf.bitsort`       | `BitVector` and `bitsort` for sorting distinct non-negative integers      |
| `algoshelf.words`         | `reverse_words`, which reverses word order and keeps the spacing          |
| `algoshelf.forward_list`  | `ForwardList`, a singly linked list that tracks head and tail             |
| `algoshelf.singly_linked` | `SinglyLinkedList`, a singly linked list reached through its head only    |
| `algoshelf.linked_queue`  | `LinkedQueue`, an unbounded FIFO queue built from linked nodes            |
| `algoshelf.ring_queue`    | `RingQueue`, a fixed-capacity FIFO queue on a circular buffer             |
| `algoshelf.hash_table`    | `HashTable`, a string-to-string mapping with separate chaining, and `string_hash` |
| `algoshelf.bst`           | `BinarySearchTree`, `Node` and `is_binary_search_tree`                    |
| `algoshelf.splay_tree`    | `SplayTree`, `SplayNode` and top-down `splay`                             |
| `algoshelf.graphs`        | `UndirectedGraph` and `DirectedGraph` with depth-first traversal          |
| `algoshelf.max_heap`      | `MaxHeap`, plus `heapify`, `percolate_down` and `heap_sort`               |
| `algoshelf.merge_sort`    | `merge` and `merge_sort`, sorting a list slice in place                   |
| `algoshelf.quick_sort`    | `quick_sort` with a random pivot; pass a `random.Random` as `rng` for repeatable runs |

A few behaviours worth knowing:

- `DynamicArray` starts with a capacity of at least 16, doubles when full and
  halves (never below 16) when less than a quarter full. `insert` and
  `prepend` only accept an index of an existing item, so `prepend` on an
  empty array raises `IndexError`. `remove` deletes every occurrence; `find`
  returns -1 when the value is absent.
- `ForwardList.remove` and `SinglyLinkedList.remove_value` delete only the
  first matching item. `SinglyLinkedList.insert` accepts an index equal to
  the length and appends.
- `RingQueue` holds at most `capacity` items (5 by default); `enqueue` on a
  full queue raises `IndexError`.
- `MaxHeap` holds at most `capacity` items (1000 by default).
- `BinarySearchTree` ignores duplicates; `minimum` and `maximum` return 0 for
  an empty tree, and `successor` returns -1 when there is no larger value.
- `DirectedGraph.dfs_edges` returns the tree edges of a depth-first search
  started from every vertex in turn; `UndirectedGraph.dfs` returns the
  vertices reached from one start vertex.
- The `describe` methods return a printable text summary of a structure.

Operations that a structure cannot perform, such as popping from an empty
list or reading past the end, raise `IndexError`, `KeyError` or `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algoshelf.vector import DynamicArray
from algoshelf.binary_search import binary_search
from algoshelf.hash_table import HashTable
from algoshelf.bst import BinarySearchTree
from algoshelf.words import reverse_words

arr = DynamicArray(5)
for n in (5, 6, 7, 8, 9):
    arr.push(n)
arr.insert(2, 47)
print(list(arr))          # [5, 6, 47, 7, 8, 9]
print(arr.find(47))       # 2
print(arr.capacity)       # 16

print(binary_search(23, [0, 12, 23, 53, 66]))   # 2
print(binary_search(24, [0, 12, 23, 53, 66]))   # -1

capitals = HashTable(100)
capitals["Louisiana"] = "Baton Rouge"
capitals["Louisiana"] = "New Orleans"
print(capitals["Louisiana"])   # New Orleans
print("Texas" in capitals)     # False

tree = BinarySearchTree([4, 12, 3, 11, 16])
print(list(tree))              # [3, 4, 11, 12, 16]
print(tree.height())           # 3

print(reverse_words("My kingdom for a horse."))   # horse. a for kingdom My
```

## Command-line tools

Three small programs are installed with the package:

```
algoshelf-vector [COUNT]   # exercises a DynamicArray of COUNT numbers and prints its state;
                           # asks for the count when none is given
algoshelf-bits             # shows setting and clearing a bit, and the machine's byte order
algoshelf-bitsort          # reads integers from standard input and prints the distinct ones sorted
```

For example:

```
printf '42\n7\n19\n' | algoshelf-bitsort
```

`algoshelf-bitsort` accepts values from 0 to 9,999,999; anything else, or a
token that is not an integer, is reported on standard error and the command
exits with status 1.
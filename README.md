# dsakit

A collection of classic data structures and algorithms written in plain
Python, using only the standard library.

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

| Module | Contents |
| --- | --- |
| `dsakit.linked_list` | `SinglyLinkedList` |
| `dsakit.circular_list` | `CircularLinkedList` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList`, `palindrome_ignoring_case` |
| `dsakit.deque` | `ArrayDeque` (fixed capacity), `LinkedDeque` |
| `dsakit.fixed_array` | `FixedArray` with 1-based positional insert and delete |
| `dsakit.list_algorithms` | `bubble_sort`, `selection_sort`, `find_max`, `digits_of`, `add_digit_lists`, `is_prime`, `primes_in` |
| `dsakit.student_list` | `Student`, `StudentList` |
| `dsakit.strings` | `is_palindrome`, `longest_unique_substring` |
| `dsakit.binary_tree` | `TreeNode`, `BinaryTree`, `build_tree` |
| `dsakit.array_tree` | `build_array_tree`, `array_inorder` |
| `dsakit.graph` | `AdjacencyListGraph` with BFS and two kinds of DFS |
| `dsakit.matrix_graph` | `AdjacencyMatrixGraph` with BFS |
| `dsakit.search_tree` | `BinarySearchTree` |
| `dsakit.expressions` | `evaluate_postfix`, `infix_to_prefix`, `infix_to_postfix`, `expression_tree`, `prefix_of`, `ExprNode` |
| `dsakit.hashing` | `hash_name`, `Person`, `ChainedHashTable`, `LinearProbingTable` |
| `dsakit.sorting` | `insertion_sort`, `merge_sort`, `build_max_heap`, `heap_sort` |
| `dsakit.scheduling` | `Process`, `ProcessStats`, `ScheduleResult`, `fcfs`, `sjf`, `priority_schedule`, `round_robin`, `format_table` |
| `dsakit.polynomial` | `Term`, `Polynomial` |

### Lists, deques and arrays

`SinglyLinkedList`, `CircularLinkedList` and `DoublyLinkedList` accept an
optional iterable of initial items and support `insert_beginning`,
`insert_end`, `insert_after(item, key)`, `insert_before(item, key)`,
`delete_beginning`, `delete_end`, `delete(key)` and `reverse`, along with
`len()` and iteration. `SinglyLinkedList.search(key)` returns the 1-based
position of the key; `CircularLinkedList` supports `in`; `DoublyLinkedList`
supports `reversed()`.

`ArrayDeque(capacity=10)` keeps its items in one contiguous run of slots:
the rear can grow only up to the last slot and the front only down to slot
0, and going past either end raises `OverflowError`. `LinkedDeque` has no
capacity limit. `FixedArray(capacity=10)` inserts and deletes by 1-based
position; inserting into an empty array always places the item first.

### Trees

`BinaryTree` fills itself in level order with `insert`, and `delete(key)`
overwrites the key with the deepest, rightmost value and detaches that node.
It offers recursive and iterative inorder, preorder and postorder traversals
(including a two-stack postorder), `height`, `max_depth`, `leaf_count` and
`node_count`. `build_tree(root_value, ask_child)` grows a tree by calling
`ask_child(value, "left")` and `ask_child(value, "right")` for each node;
returning `None` means no child. `build_array_tree` does the same into a list
where node `i` has children at `2i` and `2i+1`, and `array_inorder` walks
such a list.

`BinarySearchTree` holds distinct values; inserting a value already present
raises `ValueError`. It supports `delete`, `inorder`,
`inorder_successor(item)`, `leaf_count`, `in`, `len()` and iteration in
ascending order.

### Graphs

`AdjacencyListGraph(vertices)` adds each new edge to the front of both
endpoints' lists, so neighbours are listed most recent first and traversals
follow that order. `AdjacencyMatrixGraph(vertices)` visits lower-numbered
neighbours first. Self-loops and unknown vertices raise `ValueError`. Both
have a `format()` method giving a text view of the graph.

### Expressions

- `evaluate_postfix` takes single-digit operands and the operators
  `+ - * /` and `^`; `^` is bitwise exclusive or, and division truncates
  toward zero. Whitespace is ignored.
- `infix_to_prefix` and `infix_to_postfix` convert infix expressions whose
  operands are single ASCII letters or digits. `infix_to_postfix` handles
  `+ - * /` and parentheses.
- `expression_tree` builds an `ExprNode` tree (with `^` grouping from the
  right) and `prefix_of` reads it back in prefix notation.

### Hash tables

`hash_name(name, table_size=10)` mixes each character code into an address.
`ChainedHashTable` puts new entries at the front of their chain;
`LinearProbingTable` probes forward and marks deleted slots with a
tombstone, and its `insert` returns the slots it probed. In both, names
compare case-insensitively once a bucket is reached, though the hash itself
is case-sensitive.

### Scheduling

`Process(arrival, burst, priority=0)` describes one job; a lower priority
value is more urgent. `fcfs`, `sjf`, `priority_schedule` and
`round_robin(processes, time_slice)` return a `ScheduleResult` whose `stats`
hold a `ProcessStats` per process (numbered in arrival order), with
`average_turnaround` and `average_waiting`. `format_table` renders a result
as a text table followed by the averages.

### Polynomials

`Polynomial` takes `Term` objects or `(coeff, exp)` pairs with exponents
strictly decreasing. `+` and `*` (or `add` and `multiply`) combine like
terms; zero coefficients are kept. `format()` writes terms as `c.ccx^e`
joined by ` + `, shows a final constant without `x`, and shows an empty
polynomial as `0.00`.

## Examples

```python
from dsakit.linked_list import SinglyLinkedList

numbers = SinglyLinkedList([3, 1, 4])
numbers.insert_beginning(9)
numbers.insert_after(5, 1)
numbers.reverse()
print(list(numbers), len(numbers))   # [4, 5, 1, 3, 9] 5
```

```python
from dsakit.graph import AdjacencyListGraph

g = AdjacencyListGraph(5)
for src, des in [(0, 1), (0, 2), (1, 3), (1, 4)]:
    g.add_edge(src, des)
print(g.bfs(0))            # [0, 2, 1, 4, 3]
print(g.dfs(0))            # [0, 1, 3, 4, 2]
print(g.dfs_recursive(0))  # [0, 2, 1, 4, 3]
```

```python
from dsakit.expressions import evaluate_postfix, infix_to_prefix

print(evaluate_postfix("23*4+"))  # 10
print(infix_to_prefix("a+b*c"))   # +a*bc
```

```python
from dsakit.scheduling import Process, fcfs, round_robin, format_table

processes = [Process(0, 5, 2), Process(1, 3, 1), Process(2, 8, 3)]
print(format_table(fcfs(processes)))
print(format_table(round_robin(processes, 2)))
```

```python
from dsakit.polynomial import Polynomial, Term

p = Polynomial([Term(2.0, 2), Term(1.0, 0)])
q = Polynomial([Term(3.0, 1)])
print((p + q).format())  # 2.00x^2 + 3.00x^1 + 1.00
print((p * q).format())  # 6.00x^3 + 3.00x^1
```

## Errors

Operations that cannot be carried out raise ordinary Python exceptions
instead of returning sentinel values: deleting from an empty structure
raises `IndexError` (or `KeyError` for `StudentList` and the hash tables),
a missing key given to a list or tree raises `ValueError`, and a full
`ArrayDeque`, `FixedArray` or `LinearProbingTable` raises `OverflowError`.
The `search` methods of `StudentList` and the hash tables return `None` when
nothing matches.

## What this package does not do

It is a library only. It has no command-line program and no interactive
menus: structures are built and queried from Python code, and nothing is
read from standard input or stored on disk.
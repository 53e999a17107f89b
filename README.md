# drillbox

A small collection of classic data structures, sorting algorithms and
interactive console exercises. It has no dependencies beyond the standard
library.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Data structures

```python
from drillbox.bst import BinarySearchTree
from drillbox.cqueue import CircularQueue
from drillbox.stack import Stack

tree = BinarySearchTree()
for value in (8, 3, 10, 1, 6):
    tree.insert(value)
tree.in_order()      # [1, 3, 6, 8, 10]
tree.pre_order()     # [8, 3, 1, 6, 10]
tree.post_order()    # [1, 6, 3, 10, 8]
tree.remove(3)       # True
6 in tree            # True
len(tree)            # 4
print(tree.render()) # sideways view, right branch on top

queue = CircularQueue(3)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()      # 1
queue.display()      # "2; "

stack = Stack(2)
stack.push(5)
stack.top()          # 5
stack.pop()          # 5
```

`drillbox.bst`

- `BinarySearchTree` is an unbalanced tree of unique values. `insert` raises
  `DuplicateValueError` for a value already present. `remove` returns whether
  the value was found and raises `EmptyTreeError` on an empty tree; a node
  with two children takes the largest value of its left subtree. `search`
  returns the `Node` holding a value, or `None`. `clear` empties the tree.
- `format_tree(node, level)` renders any subtree the same way `render` does,
  indenting four spaces per level.

`drillbox.cqueue` and `drillbox.stack`

- `CircularQueue(capacity)` and `Stack(capacity)` hold a fixed number of
  items. Adding to a full one raises `FullQueueError` / `FullStackError`;
  reading from an empty one (`dequeue`, `pop`, `top`, `display`) raises
  `EmptyQueueError` / `EmptyStackError`. Iterating a queue goes front to rear,
  a stack top to bottom. `display` returns the items in that order, each
  followed by `"; "`.

## Sorting

All sorts work in place on any mutable sequence and return `None`.

```python
from drillbox.sorts import bubble_sort, insertion_sort, merge_sort, hybrid_merge_sort

data = [5, 2, 9, 1]
merge_sort(data)              # data is now [1, 2, 5, 9]
hybrid_merge_sort(data, 10)   # insertion sort for runs of at most 10 items
```

`bubble_sort` stops early after a pass without swaps. `merge_sort` is stable;
`hybrid_merge_sort` (default threshold 10) does not promise stability.

## Console exercises

Three interactive programs are installed as commands:

    drillbox-factorial [NUMBER]    # prints NUMBER!, asking for it if not given
    drillbox-palindrome [WORD]     # says whether WORD is a palindrome
    drillbox-employees             # menu-driven employee register

The messages these commands print are in Portuguese.

`drillbox-factorial` reports an error and exits with status 1 for a negative
or non-numeric value. `drillbox-palindrome` checks only the first word of
what it reads. `drillbox-employees` offers registering, updating, listing,
looking up, deleting and filtering employees by salary (the filter accepts
values of at least 1509); input that is not a valid number ends the program
with status 3.

The same logic is available as functions: `drillbox.factorial.factorial`,
`drillbox.palindrome.is_palindrome`, and in `drillbox.employees` the
`EmployeeRegistry` class together with `parse_int`, `parse_float` and
`format_employee`. In the registry, ids start at 1, `get` and `delete` raise
`EmployeeNotFoundError` for unknown or deleted ids, and deleting only marks a
record inactive.

## What it does not do

The employee register lives in memory only: nothing is saved to disk, and all
records are lost when `drillbox-employees` exits.
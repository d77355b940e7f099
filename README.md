# edjudge

Classic data structures and the judge-style exercises built on them:
singly and doubly linked lists, a minimum-tracking stack, a deque and a
list with forward and reverse cursors, immutable binary trees and an
ordered set kept in a binary search tree. Each exercise has a solver
that reads the exercise's input text and returns its expected output.

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

`edjudge` solves one exercise. Give it the exercise number and, optionally,
an input file; without a file it reads standard input. The answer goes to
standard output.

```
edjudge 16 cases.txt
edjudge 16 < cases.txt
```

If the input cannot be read or is malformed, a message is printed to
standard error and the exit status is 1. An unknown exercise number is a
usage error. `edjudge --help` lists the options.

The exercise numbers the command accepts:

| Number | Exercise |
|-------:|----------|
| 1  | order two clock times, or `IGUALES` when equal |
| 2  | finish time of a task, or `hoy no` past midnight |
| 3  | evaluate polynomials at given points |
| 4  | duplicate every node of a list |
| 5  | words of a line starting with a given character |
| 6  | drop every other clock time from a list |
| 7  | reverse a list |
| 8  | merge two sorted lists |
| 9  | split off the negatives and drop the zeros |
| 10 | swap adjacent pairs |
| 11 | intersection of two sorted lists |
| 12 | move the values greater than a pivot to the end |
| 13 | fold a list onto its own reverse |
| 14 | remove values smaller than an earlier one |
| 15 | bubble sort |
| 16 | balanced brackets (`SI` / `NO`) |
| 17 | nearest earlier taller height |
| 18 | nearest earlier larger record, by name |
| 19 | run operations on a minimum-tracking stack |
| 21 | survivor of a skipping circle of students |
| 22 | negatives first, reversed, then the rest |
| 23 | duplicate every value |
| 24 | decode a scrambled message |
| 25 | list values in reverse with a reverse cursor |
| 27 | sliding-window maximum |
| 28 | text typed on a keyboard with `-`, `+`, `*`, `3` as editing keys |
| 29 | nodes, leaves and height of a tree |
| 31 | smallest element of a tree of numbers or words |
| 38 | rebuild a tree from preorder and inorder, print postorder |
| 39 | first level where a value appears twice |
| 41 | right profile of a tree |
| 43 | lower bound queries on a set |
| 44 | card pairing game |
| 46 | the k largest distinct values |

The same solvers are available from Python as `solve(number, text)` in
`edjudge.list_problems` (1–15), `edjudge.stack_queue_problems` (16–28),
`edjudge.tree_problems` (29–41) and `edjudge.set_problems` (43–46).

## Library

### Clock times

```python
from edjudge.clock import Clock

start = Clock.parse("10:30:00")
length = Clock.from_hms(1, 45, 5)
print(start + length)          # 12:15:05
print(start < length)          # False
```

Adding two times whose total reaches the end of the day raises
`OverflowError`; out-of-range hours, minutes or seconds raise `ValueError`.

### Polynomials

```python
from edjudge.polynomial import Polynomial, read_polynomial

p = Polynomial()
p.add_term(2, 3)     # 3x^2
p.add_term(0, -1)    # -1
print(p.evaluate(2)) # 11
print(p.terms())     # [(0, -1), (2, 3)]

q = read_polynomial("2 1 0 0".split())   # coefficient/exponent pairs up to "0 0"
```

### Linked lists

`edjudge.linked_list.LinkedList` links its nodes one way and offers the
exercise operations in place: `duplicate`, `remove_odd_positions`,
`reverse`, `merge` (of two sorted lists), `split_negatives` (returns the
negatives as a new list), `bubble_sort`, and `matching` for the elements
that satisfy a predicate.

```python
from edjudge.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.reverse()
print(list(items))   # [3, 2, 1]
```

`edjudge.double_linked_list.DoubleLinkedList` is circular with a sentinel
node and adds `swap_pairs`, `intersect`, `partition`, `fold` and
`remove_decreasing`. Reading or removing from an empty list raises
`IndexError`.

### Stacks and sequences

`edjudge.stack_min.Stack` is a plain stack; `MinStack` also answers
`minimum()` in constant time. `edjudge.sequences.Deque` is a double-ended
queue, and `LinkedSequence` extends it with `at`, iteration in both
directions, `begin`/`end` and `rbegin`/`rend` cursors, and `insert` and
`erase` at a cursor.

### Binary trees

```python
from edjudge.bintree import BinTree, read_tree
from edjudge.tree_algorithms import height, node_count

tree = BinTree(BinTree.leaf(1), 2, BinTree.leaf(3))
print(tree.inorder())                  # [1, 2, 3]
print(height(tree), node_count(tree))  # 2 3

same = read_tree("2 1 -1 -1 3 -1 -1".split(), -1, int)
```

`edjudge.tree_algorithms` also has `leaf_count`, `node_sum`, `minimum`,
`frontier`, `accumulated_count`, `diameter`, `rescue`, `even_path_length`
and `navigable_count`. `edjudge.tree_queries` has `rebuild`,
`first_repeated_level`, `is_prime`, `nearest_multiple_of_seven`,
`right_profile` and `is_search_tree`.

### Search sets

`edjudge.search_set.SearchSet` is an ordered set kept in an unbalanced
binary search tree, iterated in ascending order, with `insert`, `erase`,
`count` and `lower_bound` (the smallest element not below a value, or
`None`). `edjudge.set_problems` builds `lower_bounds`, `card_game` and
`largest_k` on it.

## What the package does not do

The command line only runs the exercises in the table above. The tree
measures without an exercise number there (`node_sum`, `frontier`,
`accumulated_count`, `diameter`, `rescue`, `even_path_length`,
`navigable_count`, `nearest_multiple_of_seven`, `is_search_tree`) are
available as library functions only; there is no input reader for them.
# dsdrills

A small collection of classic data-structure exercises, each solved in a few
lines of plain Python. The exercises are in `dsdrills.solution`:

- `set_zeroes(matrix)`: if a cell holds 0, zero its whole row and column, in place.
- `merge(intervals)`: combine overlapping `[start, end]` intervals and return
  them as a new list sorted by start. Intervals that touch (`[1, 4]` and
  `[4, 5]`) are merged.
- `find_cycle(linked_list)`: report whether following the links of a
  `LinkedList` ever comes back to a node it has passed (Floyd's tortoise and hare).
- `single_number(nums)`: find the one value that does not appear twice, by
  XOR-ing all values together.
- `format_matrix(matrix)` and `format_intervals(intervals)` render a matrix
  (each row on its own line, every value followed by a space) and a list of
  intervals (`[[1,6],[8,10]]`) as text.
- `print_matrix(matrix, file=None)` writes the text of `format_matrix`;
  `print_intervals(intervals, file=None)` writes the text of `format_intervals`
  followed by a newline. Both write to standard output unless a file object is given.

`dsdrills.linked_list` holds a minimal singly linked list of integers,
`LinkedList`, built from `Node` objects (`data` and `next`). The first node is
available as `head`.

## Installation

```
pip install .
```

Add the `test` extra to run the test suite:

```
pip install .[test]
pytest
```

## Usage

```python
from dsdrills.linked_list import LinkedList
from dsdrills.solution import find_cycle, merge, set_zeroes, single_number, format_intervals

matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
set_zeroes(matrix)
# matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]

merged = merge([[1, 3], [2, 6], [8, 10], [15, 18]])
print(format_intervals(merged))   # [[1,6],[8,10],[15,18]]

single_number([4, 1, 2, 1, 2])    # 4

numbers = LinkedList([10, 20, 30])
numbers.insert(40)                # appends at the end
print(numbers)                    # 10 -> 20 -> 30 -> 40
30 in numbers                     # True, same as numbers.search(30)
numbers.remove(20)                # unlinks the first 20; no error if absent
list(numbers)                     # [10, 30, 40]
find_cycle(numbers)               # False
```

`LinkedList.print(file=None)` writes the same text as `str()` followed by a
newline.

A cycle can only be made by relinking nodes by hand through `head` and
`next`. Iterating, printing or searching such a list never ends, so check it
with `find_cycle` and break the loop again before doing any of those.

## Command line

```
dsdrills
```

This builds the list 0 to 9, links its last node back to the node holding 5,
prints (in Spanish) that the cycle was created and whether `find_cycle`
detects it, then breaks the loop again. It takes no options other than
`--help`.
"""Classic exercises on matrices, intervals, linked lists and bit tricks."""

from __future__ import annotations

import sys
from functools import reduce
from operator import xor
from typing import Iterable, List, Optional, Sequence, TextIO

from dsdrills.linked_list import LinkedList


def set_zeroes(matrix: List[List[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render each row on its own line, every value followed by a space."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n" for row in matrix
    )


def print_matrix(matrix: Sequence[Sequence[int]], file: Optional[TextIO] = None) -> None:
    """Write the matrix as produced by :func:`format_matrix`."""
    out = file if file is not None else sys.stdout
    out.write(format_matrix(matrix))


def format_intervals(intervals: Sequence[Sequence[int]]) -> str:
    """Render intervals as a nested list such as ``[[1,3],[4,6]]``."""
    inner = ",".join(
        "[" + ",".join(str(value) for value in interval) + "]" for interval in intervals
    )
    return f"[{inner}]"


def print_intervals(intervals: Sequence[Sequence[int]], file: Optional[TextIO] = None) -> None:
    """Write the intervals as produced by :func:`format_intervals` and a newline."""
    print(format_intervals(intervals), file=file if file is not None else sys.stdout)


def merge(intervals: Iterable[Sequence[int]]) -> List[List[int]]:
    """Return the overlapping intervals merged, sorted by start."""
    merged: List[List[int]] = []
    for interval in sorted(list(interval) for interval in intervals):
        if merged and interval[0] <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], interval[1])
        else:
            merged.append(interval)
    return merged


def find_cycle(linked_list: LinkedList) -> bool:
    """Return whether following the list's links ever revisits a node."""
    slow = fast = linked_list.head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once where every other appears twice."""
    return reduce(xor, nums, 0)
import io

import pytest

from dsdrills.linked_list import LinkedList
from dsdrills.solution import (
    find_cycle,
    format_intervals,
    format_matrix,
    merge,
    print_intervals,
    print_matrix,
    set_zeroes,
    single_number,
)


@pytest.mark.parametrize(
    "matrix, expected",
    [
        (
            [[1, 1, 1], [1, 0, 1], [1, 1, 1]],
            [[1, 0, 1], [0, 0, 0], [1, 0, 1]],
        ),
        (
            [[0, 1, 2], [3, 4, 5], [6, 7, 8]],
            [[0, 0, 0], [0, 4, 5], [0, 7, 8]],
        ),
        (
            [[1, 0, 1, 1], [1, 1, 1, 1], [1, 1, 0, 1], [0, 1, 1, 1]],
            [[0, 0, 0, 0], [0, 0, 0, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
        ),
        ([[0]], [[0]]),
    ],
)
def test_set_zeroes(matrix, expected):
    set_zeroes(matrix)
    assert matrix == expected


def test_set_zeroes_without_zeros_is_unchanged():
    matrix = [[1, 2], [3, 4]]
    set_zeroes(matrix)
    assert matrix == [[1, 2], [3, 4]]


@pytest.mark.parametrize(
    "intervals, expected",
    [
        ([[1, 3], [4, 6], [8, 10]], [[1, 3], [4, 6], [8, 10]]),
        ([[1, 4], [4, 5]], [[1, 5]]),
        ([[1, 3], [2, 6], [8, 10], [15, 18]], [[1, 6], [8, 10], [15, 18]]),
        ([], []),
    ],
)
def test_merge(intervals, expected):
    assert merge(intervals) == expected


def test_merge_sorts_and_does_not_mutate_input():
    intervals = [[8, 10], [2, 6], [1, 3]]
    assert merge(intervals) == [[1, 6], [8, 10]]
    assert intervals == [[8, 10], [2, 6], [1, 3]]


def test_find_cycle_no_cycle():
    assert find_cycle(LinkedList([1, 2, 3])) is False


def test_find_cycle_with_cycle():
    ll = LinkedList([1, 2, 3])
    tail = ll.head
    while tail.next is not None:
        tail = tail.next
    tail.next = ll.head
    assert find_cycle(ll) is True


def test_find_cycle_single_element():
    assert find_cycle(LinkedList([1])) is False


def test_find_cycle_empty():
    assert find_cycle(LinkedList()) is False


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 2, 1], 1), ([4, 1, 2, 1, 2], 4), ([-1, -1, -2], -2)],
)
def test_single_number(nums, expected):
    assert single_number(nums) == expected


def test_single_number_large_array():
    nums = [i for i in range(10000) for _ in range(2)]
    nums.append(10001)
    assert single_number(nums) == 10001


def test_format_matrix():
    assert format_matrix([[1, 0, 1], [0, 0, 0]]) == "1 0 1 \n0 0 0 \n"


def test_print_matrix_matches_format():
    buffer = io.StringIO()
    matrix = [[1, 2], [3, 4]]
    print_matrix(matrix, file=buffer)
    assert buffer.getvalue() == format_matrix(matrix)


def test_format_intervals():
    assert format_intervals([[1, 3], [4, 6]]) == "[[1,3],[4,6]]"
    assert format_intervals([]) == "[]"


def test_print_intervals_adds_newline():
    buffer = io.StringIO()
    intervals = [[1, 6], [8, 10]]
    print_intervals(intervals, file=buffer)
    assert buffer.getvalue() == format_intervals(intervals) + "\n"
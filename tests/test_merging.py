from itertools import count, islice

import pytest

from iterwright.merging import merge, merge_by, merge_join_by
from iterwright.zipping import Both, Left, Right


def ordering(a, b):
    return (a > b) - (a < b)


@pytest.mark.parametrize(
    "left, right",
    [
        ([1, 2, 3], [2, 3, 4]),
        ([], [1, 2]),
        ([5, 6], []),
        ([], []),
        ([0, 0, 7, 9], [1, 1, 1, 8, 10, 11]),
    ],
)
def test_merge_sorted_inputs_give_sorted_output(left, right):
    assert list(merge(left, right)) == sorted(left + right)


def test_merge_prefers_left_on_ties():
    left = [(1, "l"), (2, "l")]
    right = [(1, "r"), (2, "r")]
    result = list(merge_by(left, right, lambda a, b: a[0] <= b[0]))
    assert result == [(1, "l"), (1, "r"), (2, "l"), (2, "r")]


def test_merge_by_descending():
    result = list(merge_by([9, 5, 1], [8, 4], lambda a, b: a >= b))
    assert result == [9, 8, 5, 4, 1]


def test_merge_is_lazy_on_infinite_inputs():
    evens = (2 * i for i in count())
    odds = (2 * i + 1 for i in count())
    assert list(islice(merge(evens, odds), 6)) == [0, 1, 2, 3, 4, 5]


def test_merge_join_by_ordering():
    result = list(merge_join_by([1, 3, 5], [2, 3], ordering))
    assert result == [Left(1), Right(2), Both(3, 3), Left(5)]


def test_merge_join_by_ordering_leftover_right():
    result = list(merge_join_by([1], [1, 2, 3], ordering))
    assert result == [Both(1, 1), Right(2), Right(3)]


def test_merge_join_by_bool():
    result = list(merge_join_by([1, 3], [2, 3], lambda a, b: a < b))
    assert result == [Left(1), Right(2), Right(3), Left(3)]


def test_merge_join_by_bool_never_yields_both():
    result = list(merge_join_by([1, 2, 3], [1, 2, 3], lambda a, b: a <= b))
    assert not any(isinstance(item, Both) for item in result)
    assert len(result) == 6


def test_merge_join_by_rejects_other_results():
    with pytest.raises(TypeError):
        list(merge_join_by([1], [2], lambda a, b: "less"))


def test_merge_join_by_empty():
    assert list(merge_join_by([], [], ordering)) == []
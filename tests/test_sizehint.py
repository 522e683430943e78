import pytest

from iterwright.sizehint import (
    MAX_SIZE,
    add,
    add_scalar,
    maximum,
    minimum,
    mul,
    mul_scalar,
    sub_scalar,
)


def test_mul_size_hints():
    assert mul((3, 4), (3, 4)) == (9, 16)
    assert mul((3, 4), (MAX_SIZE, None)) == (MAX_SIZE, None)
    assert mul((3, None), (0, 0)) == (0, 0)


def test_mul_zero_upper_on_left_with_unknown_right():
    assert mul((0, 0), (5, None)) == (0, 0)


def test_mul_upper_overflow_is_unknown():
    assert mul((1, MAX_SIZE), (1, 2)) == (1, None)


def test_add_with_unknown_upper():
    assert add((1, 2), (3, None)) == (4, None)


def test_add_known_bounds():
    assert add((1, 2), (3, 4)) == (4, 6)


def test_add_saturates_lower_and_drops_upper():
    assert add((MAX_SIZE, MAX_SIZE), (1, 1)) == (MAX_SIZE, None)


def test_add_scalar():
    assert add_scalar((2, 5), 3) == (5, 8)
    assert add_scalar((2, None), 3) == (5, None)
    assert add_scalar((MAX_SIZE, MAX_SIZE), 1) == (MAX_SIZE, None)


def test_sub_scalar_saturates_at_zero():
    assert sub_scalar((2, 5), 3) == (0, 2)
    assert sub_scalar((2, 1), 3) == (0, 0)
    assert sub_scalar((4, None), 1) == (3, None)


def test_mul_scalar():
    assert mul_scalar((2, 3), 4) == (8, 12)
    assert mul_scalar((2, MAX_SIZE), 2) == (4, None)
    assert mul_scalar((MAX_SIZE, None), 2) == (MAX_SIZE, None)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 3), (2, 5), (2, 5)),
        ((1, None), (2, 5), (2, None)),
        ((4, 4), (0, None), (4, None)),
    ],
)
def test_maximum(a, b, expected):
    assert maximum(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 3), (2, 5), (1, 3)),
        ((1, None), (2, 5), (1, 5)),
        ((4, 4), (0, None), (0, 4)),
        ((4, None), (0, None), (0, None)),
    ],
)
def test_minimum(a, b, expected):
    assert minimum(a, b) == expected


def test_maximum_and_minimum_are_symmetric():
    pairs = [((1, 3), (2, None)), ((0, 0), (7, 9)), ((5, None), (5, None))]
    for a, b in pairs:
        assert maximum(a, b) == maximum(b, a)
        assert minimum(a, b) == minimum(b, a)
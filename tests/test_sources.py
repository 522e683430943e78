from itertools import islice, takewhile

import pytest

from iterwright.sources import iterate, unfold

U32_MAX = 2**32 - 1


def _fibonacci_step(state):
    x1, x2 = state
    following = min(x1 + x2, U32_MAX)
    ret = x1
    x1, x2 = x2, following
    if ret == x1 and ret > 1:
        return None
    return ret, (x1, x2)


def test_unfold_fibonacci():
    fib = unfold((1, 1), _fibonacci_step)
    assert list(islice(fib, 8)) == [1, 1, 2, 3, 5, 8, 13, 21]
    *_, last = fib
    assert last == 2_971_215_073


def test_unfold_stops_immediately():
    assert list(unfold(0, lambda state: None)) == []


def test_unfold_countdown_round_trip():
    values = [4, 8, 15, 16]
    result = unfold(values, lambda rest: (rest[0], rest[1:]) if rest else None)
    assert list(result) == values


def test_iterate_cycle():
    assert list(islice(iterate(1, lambda i: i % 3 + 1), 5)) == [1, 2, 3, 1, 2]


def test_iterate_starts_with_initial_value():
    assert next(iterate("a", lambda s: s + "a")) == "a"


def test_iterate_computes_next_value_early():
    def minus_ten(x):
        if x < 10:
            raise ArithmeticError("underflow")
        return x - 10

    it = takewhile(lambda x: x > 10, iterate(25, minus_ten))
    assert next(it) == 25
    assert next(it) == 15
    with pytest.raises(ArithmeticError):
        next(it)
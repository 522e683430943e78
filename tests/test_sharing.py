from operator import length_hint

import pytest

from iterwright.sharing import RcIter, Tee, rciter, tee


def test_rciter_zip_with_itself():
    it = rciter(range(9))
    z = zip(it, it.clone())
    assert next(z) == (0, 1)
    assert next(z) == (2, 3)
    assert next(z) == (4, 5)
    assert next(it) == 6
    assert next(z) == (7, 8)
    assert next(z, None) is None


def test_rciter_clones_share_progress():
    it = rciter("abcd")
    other = it.clone()
    assert next(other) == "a"
    assert next(it) == "b"
    assert list(other) == ["c", "d"]
    assert list(it) == []


def test_rciter_length_hint_promises_nothing():
    it = rciter([1, 2, 3])
    assert length_hint(it) == 0
    assert list(it) == [1, 2, 3]


def test_rciter_reentry_raises():
    class Knot:
        handle: RcIter = None
        calls = 0

        def __iter__(self):
            return self

        def __next__(self):
            self.calls += 1
            return next(self.handle)

    knot = Knot()
    handle = rciter(knot)
    knot.handle = handle.clone()
    with pytest.raises(RuntimeError):
        next(handle)
    assert knot.calls == 1


def test_tee_both_halves_yield_everything():
    a, b = tee(range(5))
    assert isinstance(a, Tee)
    assert list(a) == [0, 1, 2, 3, 4]
    assert list(b) == [0, 1, 2, 3, 4]


def test_tee_interleaved_reads():
    a, b = tee(iter("xyz"))
    assert next(a) == "x"
    assert next(b) == "x"
    assert next(b) == "y"
    assert next(b) == "z"
    assert list(a) == ["y", "z"]
    assert next(b, None) is None


def test_tee_length_hint_counts_backlog():
    a, b = tee(range(5))
    next(a)
    next(a)
    assert length_hint(b) == length_hint(a) + 2
    assert length_hint(b) == len(list(b))
    assert length_hint(a) == len(list(a))


def test_tee_of_empty():
    a, b = tee([])
    assert list(a) == []
    assert list(b) == []
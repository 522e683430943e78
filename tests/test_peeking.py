from operator import length_hint

import pytest

from iterwright.peeking import (
    MultiPeek,
    PeekNth,
    PeekingTakeWhile,
    PutBackN,
    multipeek,
    peek_nth,
    peeking_take_while,
    put_back_n,
)


def test_multipeek_cursor_advances_and_resets_on_next():
    it = multipeek([1, 2, 3])
    assert isinstance(it, MultiPeek)
    assert it.peek() == 1
    assert it.peek() == 2
    assert next(it) == 1
    assert it.peek() == 2
    assert it.peek() == 3
    assert it.peek() is None
    assert list(it) == [2, 3]


def test_multipeek_reset_peek():
    it = multipeek("abc")
    assert it.peek() == "a"
    assert it.peek() == "b"
    it.reset_peek()
    assert it.peek() == "a"


def test_multipeek_default_when_exhausted():
    it = multipeek([])
    assert it.peek("none") == "none"
    assert list(it) == []


def test_multipeek_peeking_next():
    it = multipeek([1, 2, 3])
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: x > 5)
    assert it.peeking_next(lambda x: x == 1) == 1
    assert list(it) == [2, 3]


def test_multipeek_length_hint_counts_buffer():
    it = multipeek([1, 2, 3])
    it.peek()
    it.peek()
    assert length_hint(it) == 3


def test_peek_nth_documented_example():
    it = peek_nth([1, 2, 3])
    assert isinstance(it, PeekNth)
    assert it.peek_nth(0) == 1
    assert next(it) == 1
    assert it.peek_nth(0) == 2
    assert it.peek_nth(1) == 3
    assert next(it) == 2
    assert it.peek_nth(1) is None


def test_peek_nth_repeated_peeks_are_stable():
    it = peek_nth([1, 2, 3])
    assert it.peek_nth(2) == 3
    assert it.peek_nth(2) == 3
    assert it.peek() == 1
    assert list(it) == [1, 2, 3]


def test_set_nth_documented_example():
    it = peek_nth([1, 2, 3, 4, 5])
    assert it.peek_nth(0) == 1
    assert next(it) == 1
    assert it.peek_nth(0) == 2
    assert it.peek_nth(1) == 3
    assert next(it) == 2
    assert it.peek_nth(1) == 4
    assert it.set_nth(1, 9) is True
    assert next(it) == 3
    assert next(it) == 9
    assert it.set_nth(1, 0) is False
    assert list(it) == [5]


def test_peek_nth_negative_position():
    it = peek_nth([1])
    with pytest.raises(ValueError):
        it.peek_nth(-1)


def test_next_if_and_next_if_eq():
    it = peek_nth([1, 2, 3])
    assert it.next_if(lambda x: x > 1) is None
    assert it.next_if(lambda x: x == 1) == 1
    assert it.next_if_eq(3) is None
    assert it.next_if_eq(2) == 2
    assert list(it) == [3]
    assert it.next_if_eq(3) is None


def test_peek_nth_peeking_next():
    it = peek_nth([4, 5])
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: x == 5)
    assert it.peeking_next(lambda x: x == 4) == 4
    assert it.peek() == 5


def test_put_back_n_documented_example():
    it = put_back_n(range(1, 5))
    assert isinstance(it, PutBackN)
    next(it)
    it.put_back(1)
    it.put_back(0)
    assert list(it) == list(range(0, 5))


def test_put_back_n_length_hint():
    it = put_back_n([1, 2])
    it.put_back(0)
    assert length_hint(it) == 3


def test_put_back_n_peeking_next_rejection_keeps_item():
    it = put_back_n([1, 2])
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: x == 2)
    assert list(it) == [1, 2]


def test_peeking_take_while_leaves_first_miss():
    it = put_back_n([1, 2, 3, 4])
    taken = peeking_take_while(it, lambda x: x < 3)
    assert isinstance(taken, PeekingTakeWhile)
    assert list(taken) == [1, 2]
    assert list(it) == [3, 4]


@pytest.mark.parametrize("factory", [multipeek, peek_nth, put_back_n])
def test_peeking_take_while_over_each_adaptor(factory):
    it = factory("aaabc")
    assert "".join(peeking_take_while(it, lambda c: c == "a")) == "aaa"
    assert "".join(it) == "bc"


def test_peeking_take_while_nested_peeking_next():
    it = peek_nth([1, 2, 3])
    taken = peeking_take_while(it, lambda x: x < 3)
    with pytest.raises(StopIteration):
        taken.peeking_next(lambda x: x > 1)
    assert taken.peeking_next(lambda x: x == 1) == 1
    assert list(peeking_take_while(taken, lambda x: True)) == [2]
    assert list(it) == [3]


def test_peeking_take_while_needs_peekable_iterator():
    with pytest.raises(TypeError):
        peeking_take_while(iter([1, 2]), lambda x: True)
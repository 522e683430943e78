"""Grouping an iterable's elements into fixed-size tuples."""

from __future__ import annotations

from itertools import cycle, islice
from operator import length_hint
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"tuple size must be at least 1, got {n}")


class Tuples(Generic[T]):
    """Consecutive, non-overlapping tuples of ``n`` elements.

    Elements left over at the end, too few to fill a tuple, are kept and can
    be recovered with ``into_buffer``.
    """

    def __init__(self, iterable: Iterable[T], n: int) -> None:
        _check_size(n)
        self._iter: Optional[Iterator[T]] = iter(iterable)
        self._n = n
        self._buffer: List[T] = []

    def __iter__(self) -> "Tuples[T]":
        return self

    def _pull(self) -> Any:
        if self._iter is None:
            return _MISSING
        item = next(self._iter, _MISSING)
        if item is _MISSING:
            self._iter = None
        return item

    def __next__(self) -> Tuple[T, ...]:
        items: List[T] = []
        while len(items) < self._n:
            item = self._pull()
            if item is _MISSING:
                # Each unsuccessful attempt replaces the leftover items.
                self._buffer = items
                raise StopIteration
            items.append(item)
        return tuple(items)

    def __length_hint__(self) -> int:
        pending = 0 if self._iter is None else length_hint(self._iter)
        return (pending + len(self._buffer)) // self._n

    def into_buffer(self) -> Iterator[T]:
        """Return an iterator over the elements too few to fill a tuple."""
        return iter(list(self._buffer))


def tuples(iterable: Iterable[T], n: int) -> Tuples[T]:
    """Group ``iterable`` into consecutive tuples of ``n`` elements."""
    return Tuples(iterable, n)


class TupleWindows(Generic[T]):
    """Every run of ``n`` consecutive elements, as overlapping tuples."""

    def __init__(self, iterable: Iterable[T], n: int) -> None:
        _check_size(n)
        self._iter: Iterator[T] = iter(iterable)
        self._n = n
        self._last: Optional[Tuple[T, ...]] = None

    def __iter__(self) -> "TupleWindows[T]":
        return self

    def __next__(self) -> Tuple[T, ...]:
        if self._n == 1:
            return (next(self._iter),)
        new = next(self._iter)
        if self._last is not None:
            self._last = self._last[1:] + (new,)
            return self._last
        rest = list(islice(self._iter, self._n - 1))
        if len(rest) < self._n - 1:
            raise StopIteration
        self._last = (new, *rest)
        return self._last

    def __length_hint__(self) -> int:
        hint = length_hint(self._iter)
        if self._last is None:
            hint = max(hint - (self._n - 1), 0)
        return hint


def tuple_windows(iterable: Iterable[T], n: int) -> TupleWindows[T]:
    """Return the overlapping windows of ``n`` consecutive elements."""
    return TupleWindows(iterable, n)


class CircularTupleWindows(Generic[T]):
    """Windows of ``n`` elements that wrap around to the start.

    There is one window starting at each element of the input.
    """

    def __init__(self, iterable: Iterable[T], n: int) -> None:
        _check_size(n)
        items = list(iterable)
        self._remaining = len(items)
        self._windows: TupleWindows[T] = TupleWindows(cycle(items), n)

    def __iter__(self) -> "CircularTupleWindows[T]":
        return self

    def __next__(self) -> Tuple[T, ...]:
        if self._remaining == 0:
            raise StopIteration
        self._remaining -= 1
        return next(self._windows)

    def __length_hint__(self) -> int:
        return self._remaining


def circular_tuple_windows(iterable: Iterable[T], n: int) -> CircularTupleWindows[T]:
    """Return windows of ``n`` elements, one per input element, wrapping around."""
    return CircularTupleWindows(iterable, n)
"""Iterators whose underlying source is shared between several handles."""

from __future__ import annotations

from collections import deque
from operator import length_hint
from typing import Deque, Generic, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


class _SharedIter(Generic[T]):
    """An iterator owned jointly by every ``RcIter`` handle made from it."""

    __slots__ = ("iterator", "busy")

    def __init__(self, iterable: Iterable[T]) -> None:
        self.iterator: Iterator[T] = iter(iterable)
        self.busy = False


class RcIter(Generic[T]):
    """A handle to an iterator that other handles may also advance.

    Every clone draws from the same source, so an element taken through one
    handle is gone for all of them. Advancing a handle from inside its own
    source raises ``RuntimeError``.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._shared: _SharedIter[T] = _SharedIter(iterable)

    @classmethod
    def _sharing(cls, shared: _SharedIter[T]) -> "RcIter[T]":
        handle = cls.__new__(cls)
        handle._shared = shared
        return handle

    def clone(self) -> "RcIter[T]":
        """Return another handle to the same underlying iterator."""
        return RcIter._sharing(self._shared)

    def __iter__(self) -> "RcIter[T]":
        return self

    def __next__(self) -> T:
        shared = self._shared
        if shared.busy:
            raise RuntimeError("shared iterator was advanced while already in use")
        shared.busy = True
        try:
            return next(shared.iterator)
        finally:
            shared.busy = False

    def __length_hint__(self) -> int:
        # Other handles may drain elements at any time, so promise nothing.
        return 0


def rciter(iterable: Iterable[T]) -> RcIter[T]:
    """Wrap ``iterable`` in a handle that can be cloned and shared."""
    return RcIter(iterable)


class _TeeBuffer(Generic[T]):
    """State common to both halves of a tee."""

    __slots__ = ("backlog", "iterator", "owner")

    def __init__(self, iterable: Iterable[T]) -> None:
        self.backlog: Deque[T] = deque()
        self.iterator: Iterator[T] = iter(iterable)
        # The half whose id equals ``owner`` is the one behind and reads the backlog.
        self.owner = False


class Tee(Generic[T]):
    """One half of a pair of iterators that both yield every element of a source.

    Elements read by one half but not yet by the other are kept in a buffer.
    """

    def __init__(self, buffer: _TeeBuffer[T], ident: bool) -> None:
        self._buffer = buffer
        self._id = ident

    def __iter__(self) -> "Tee[T]":
        return self

    def __next__(self) -> T:
        buffer = self._buffer
        if buffer.owner == self._id and buffer.backlog:
            return buffer.backlog.popleft()
        item = next(buffer.iterator)
        buffer.backlog.append(item)
        buffer.owner = not self._id
        return item

    def __length_hint__(self) -> int:
        buffer = self._buffer
        hint = length_hint(buffer.iterator)
        if buffer.owner == self._id:
            hint += len(buffer.backlog)
        return hint


def tee(iterable: Iterable[T]) -> Tuple[Tee[T], Tee[T]]:
    """Split ``iterable`` into two iterators that each yield all its elements."""
    buffer: _TeeBuffer[T] = _TeeBuffer(iterable)
    return Tee(buffer, True), Tee(buffer, False)
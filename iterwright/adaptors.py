"""Small iterator adaptors: padding, repetition, inclusive take-while,
positional tagging, de-duplication and error-aware processing."""

from __future__ import annotations

import enum
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")

_MISSING: Any = object()


def pad_using(
    iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
) -> Iterator[T]:
    """Yield the items of ``iterable``, then pad up to ``min_len`` items.

    Each missing position ``i`` is filled with ``filler(i)``.
    """
    if min_len < 0:
        raise ValueError(f"minimum length must not be negative, got {min_len}")
    return _pad_using(iterable, min_len, filler)


def _pad_using(
    iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
) -> Iterator[T]:
    pos = 0
    for item in iterable:
        pos += 1
        yield item
    for index in range(pos, min_len):
        yield filler(index)


class RepeatN(Generic[T]):
    """Iterator producing the same element a fixed number of times."""

    def __init__(self, element: T, n: int) -> None:
        if n < 0:
            raise ValueError(f"repeat count must not be negative, got {n}")
        self._elt: Any = element if n > 0 else _MISSING
        self._n = n

    def __iter__(self) -> "RepeatN[T]":
        return self

    def __next__(self) -> T:
        if self._n > 1:
            self._n -= 1
            return self._elt
        self._n = 0
        elt, self._elt = self._elt, _MISSING
        if elt is _MISSING:
            raise StopIteration
        return elt

    def __len__(self) -> int:
        return self._n

    def __length_hint__(self) -> int:
        return self._n

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next repetition if ``accept`` approves it, else raise ``StopIteration``."""
        if self._elt is _MISSING or not accept(self._elt):
            raise StopIteration
        return next(self)


def repeat_n(element: T, n: int) -> RepeatN[T]:
    """Return an iterator yielding ``element`` exactly ``n`` times."""
    return RepeatN(element, n)


def take_while_inclusive(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> Iterator[T]:
    """Yield items while ``predicate`` holds, including the first item that fails it."""
    for item in iterable:
        yield item
        if not predicate(item):
            return


class Position(enum.Enum):
    """Where an element sits in the sequence it came from."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


def with_position(iterable: Iterable[T]) -> Iterator[Tuple[Position, T]]:
    """Yield ``(position, item)`` pairs tagging first, middle, last or only items."""
    it = iter(iterable)
    current = next(it, _MISSING)
    if current is _MISSING:
        return
    following = next(it, _MISSING)
    if following is _MISSING:
        yield Position.ONLY, current
        return
    yield Position.FIRST, current
    current = following
    for following in it:
        yield Position.MIDDLE, current
        current = following
    yield Position.LAST, current


def unique_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield items whose ``key`` has not been seen before, in order."""
    seen: set = set()
    for item in iterable:
        k = key(item)
        if k not in seen:
            seen.add(k)
            yield item


def unique(iterable: Iterable[T]) -> Iterator[T]:
    """Yield items not seen before, in order. Items must be hashable."""
    seen: set = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item


def process_results(
    iterable: Iterable[Any], processor: Callable[[Iterator[Any]], R]
) -> R:
    """Run ``processor`` over the values of an iterable that may hold errors.

    Items that are ``Exception`` instances count as errors. The processor sees
    the values up to the first error, where its iterator stops. Once the
    processor returns, that error is raised and its result discarded;
    without an error, the processor's result is returned.
    """
    failure: list = []

    def values() -> Iterator[Any]:
        for item in iterable:
            if isinstance(item, Exception):
                failure.append(item)
                return
            yield item

    result = processor(values())
    if failure:
        raise failure[0]
    return result
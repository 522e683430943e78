"""Zipping iterables together and splitting tuples apart."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")

_MISSING = object()


@dataclass(frozen=True)
class Left(Generic[L]):
    """Only the left side had an element."""

    value: L


@dataclass(frozen=True)
class Right(Generic[R]):
    """Only the right side had an element."""

    value: R


@dataclass(frozen=True)
class Both(Generic[L, R]):
    """Both sides had an element."""

    left: L
    right: R


EitherOrBoth = Union[Left, Right, Both]


class UnequalLengthError(ValueError):
    """Raised when iterables expected to be of equal length are not."""


def _pull(iterator: Iterator[Any] | None) -> Any:
    if iterator is None:
        return _MISSING
    return next(iterator, _MISSING)


def zip_longest(a: Iterable[L], b: Iterable[R]) -> Iterator[EitherOrBoth]:
    """Walk two iterables together until both are exhausted.

    Yields ``Both`` while each side has elements, then ``Left`` or ``Right``
    for the remainder of the longer one. An exhausted side is never polled again.
    """
    left: Iterator[L] | None = iter(a)
    right: Iterator[R] | None = iter(b)
    while True:
        x = _pull(left)
        if x is _MISSING:
            left = None
        y = _pull(right)
        if y is _MISSING:
            right = None
        if x is _MISSING and y is _MISSING:
            return
        if y is _MISSING:
            yield Left(x)
        elif x is _MISSING:
            yield Right(y)
        else:
            yield Both(x, y)


def zip_eq(a: Iterable[L], b: Iterable[R]) -> Iterator[Tuple[L, R]]:
    """Zip two iterables, raising ``UnequalLengthError`` if one ends first."""
    left, right = iter(a), iter(b)
    while True:
        x = next(left, _MISSING)
        y = next(right, _MISSING)
        if x is _MISSING and y is _MISSING:
            return
        if x is _MISSING or y is _MISSING:
            raise UnequalLengthError(
                ".zip_eq() reached end of one iterator before the other"
            )
        yield x, y


def multizip(*args: Iterable[Any]) -> Iterator[Tuple[Any, ...]]:
    """Run several iterables in lockstep, stopping when any runs out.

    Iterables are polled in order, so earlier ones may give one element more
    than the one that ended.
    """
    return zip(*args)


def multiunzip(iterable: Iterable[Tuple[Any, ...]]) -> Tuple[list, ...]:
    """Split an iterable of equal-length tuples into one list per column.

    An empty iterable gives an empty tuple. Rows of differing length raise
    ``ValueError``.
    """
    rows = iter(iterable)
    first = next(rows, _MISSING)
    if first is _MISSING:
        return ()
    columns = tuple([value] for value in first)
    for row in rows:
        row = tuple(row)
        if len(row) != len(columns):
            raise ValueError(
                f"expected tuples of length {len(columns)}, got one of length {len(row)}"
            )
        for column, value in zip(columns, row):
            column.append(value)
    return columns
"""Merging two iterables in order, optionally joining equal elements."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, TypeVar

from .zipping import Both, Left, Right

T = TypeVar("T")

_MISSING = object()

# A step decides, for a pair of heads, whether to advance the left side,
# the right side, and what to yield.
_Step = Callable[[Any, Any], Tuple[bool, bool, Any]]


def _drain(
    head: Any, rest: Iterator[Any], wrap: Optional[Callable[[Any], Any]]
) -> Iterator[Any]:
    if wrap is None:
        yield head
        yield from rest
    else:
        yield wrap(head)
        yield from map(wrap, rest)


def _merge_with(
    left: Iterable[Any],
    right: Iterable[Any],
    step: _Step,
    wrap_left: Optional[Callable[[Any], Any]] = None,
    wrap_right: Optional[Callable[[Any], Any]] = None,
) -> Iterator[Any]:
    left_it, right_it = iter(left), iter(right)
    x = next(left_it, _MISSING)
    y = next(right_it, _MISSING)
    while x is not _MISSING and y is not _MISSING:
        take_left, take_right, item = step(x, y)
        yield item
        if take_left:
            x = next(left_it, _MISSING)
        if take_right:
            y = next(right_it, _MISSING)
    if x is not _MISSING:
        yield from _drain(x, left_it, wrap_left)
    elif y is not _MISSING:
        yield from _drain(y, right_it, wrap_right)


def merge_by(
    left: Iterable[T], right: Iterable[T], is_first: Callable[[T, T], bool]
) -> Iterator[T]:
    """Merge two iterables, taking the left head whenever ``is_first(l, r)`` is true."""

    def step(x: T, y: T) -> Tuple[bool, bool, T]:
        if is_first(x, y):
            return True, False, x
        return False, True, y

    return _merge_with(left, right, step)


def merge(left: Iterable[T], right: Iterable[T]) -> Iterator[T]:
    """Merge two iterables in ascending order.

    If both inputs are sorted the result is sorted; on ties the left element
    comes first.
    """
    return merge_by(left, right, lambda x, y: x <= y)


def merge_join_by(
    left: Iterable[Any], right: Iterable[Any], cmp_fn: Callable[[Any, Any], Any]
) -> Iterator[Any]:
    """Merge-join two iterables using ``cmp_fn(l, r)``.

    If ``cmp_fn`` returns a bool, ``True`` yields ``Left(l)`` and ``False``
    yields ``Right(r)``. If it returns an integer ordering, a negative value
    yields ``Left(l)``, zero yields ``Both(l, r)`` and a positive value yields
    ``Right(r)``. Leftover elements are wrapped in ``Left`` or ``Right``.
    Any other return type raises ``TypeError``.
    """

    def step(x: Any, y: Any) -> Tuple[bool, bool, Any]:
        result = cmp_fn(x, y)
        if isinstance(result, bool):
            return (True, False, Left(x)) if result else (False, True, Right(y))
        if isinstance(result, int):
            if result < 0:
                return True, False, Left(x)
            if result > 0:
                return False, True, Right(y)
            return True, True, Both(x, y)
        raise TypeError(
            f"comparison must return a bool or an int, not {type(result).__name__}"
        )

    return _merge_with(left, right, step, Left, Right)
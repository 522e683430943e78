"""Finding the minimum and maximum of an iterable in one pass."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

_MISSING = object()


def _as_pair(result: Any) -> Optional[Tuple[Any, Any]]:
    """Turn a result's fields into ``None`` or a ``(min, max)`` pair."""
    values = tuple(getattr(result, f.name) for f in fields(result))
    if not values:
        return None
    if len(values) == 1:
        return values[0], values[0]
    return values[0], values[1]


@dataclass(frozen=True)
class NoElements:
    """The iterable was empty."""

    def into_option(self) -> None:
        """Return ``None``: there is no minimum or maximum."""
        return _as_pair(self)


@dataclass(frozen=True)
class OneElement(Generic[T]):
    """The iterable held exactly one element, both minimum and maximum."""

    value: T

    def into_option(self) -> Tuple[T, T]:
        """Return ``(value, value)``."""
        return _as_pair(self)


@dataclass(frozen=True)
class MinMax(Generic[T]):
    """The iterable held two or more elements; ``min`` is not larger than ``max``."""

    min: T
    max: T

    def into_option(self) -> Tuple[T, T]:
        """Return ``(min, max)``."""
        return _as_pair(self)


MinMaxResult = Union[NoElements, OneElement, MinMax]


def _minmax_impl(
    iterable: Iterable[T],
    key_for: Callable[[T], Any],
    lt: Callable[[T, T, Any, Any], bool],
) -> MinMaxResult:
    it = iter(iterable)
    x = next(it, _MISSING)
    if x is _MISSING:
        return NoElements()
    y = next(it, _MISSING)
    if y is _MISSING:
        return OneElement(x)
    xk, yk = key_for(x), key_for(y)
    if not lt(y, x, yk, xk):
        low, high, low_key, high_key = x, y, xk, yk
    else:
        low, high, low_key, high_key = y, x, yk, xk

    # Take elements two at a time: compare them with each other, then the
    # smaller with the minimum and the larger with the maximum.
    while True:
        first = next(it, _MISSING)
        if first is _MISSING:
            break
        second = next(it, _MISSING)
        first_key = key_for(first)
        if second is _MISSING:
            if lt(first, low, first_key, low_key):
                low = first
            elif not lt(first, high, first_key, high_key):
                high = first
            break
        second_key = key_for(second)
        if not lt(second, first, second_key, first_key):
            if lt(first, low, first_key, low_key):
                low, low_key = first, first_key
            if not lt(second, high, second_key, high_key):
                high, high_key = second, second_key
        else:
            if lt(second, low, second_key, low_key):
                low, low_key = second, second_key
            if not lt(first, high, first_key, high_key):
                high, high_key = first, first_key

    return MinMax(low, high)


def minmax(
    iterable: Iterable[T], key: Optional[Callable[[T], Any]] = None
) -> MinMaxResult:
    """Return the minimum and maximum of ``iterable``, compared by ``key``.

    Among equal elements the first is taken as minimum and the last as maximum.
    """
    key_for = key if key is not None else (lambda item: item)
    return _minmax_impl(iterable, key_for, lambda _a, _b, ka, kb: ka < kb)


def minmax_by(iterable: Iterable[T], less_than: Callable[[T, T], bool]) -> MinMaxResult:
    """Return the minimum and maximum of ``iterable`` using ``less_than(a, b)``."""
    return _minmax_impl(
        iterable, lambda _item: None, lambda a, b, _ka, _kb: less_than(a, b)
    )
"""Iterators that produce elements from a state rather than from another iterator."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")
S = TypeVar("S")


def unfold(
    initial_state: S, step: Callable[[S], Optional[Tuple[T, S]]]
) -> Iterator[T]:
    """Build an iterator from a state and a step function.

    ``step(state)`` returns ``(item, next_state)`` to yield ``item`` and carry
    on from ``next_state``, or ``None`` to stop.
    """
    state = initial_state
    while True:
        result = step(state)
        if result is None:
            return
        item, state = result
        yield item


def iterate(initial_value: T, func: Callable[[T], T]) -> Iterator[T]:
    """Yield ``initial_value``, ``func(initial_value)``, and so on forever.

    The value after the current one is computed before the current one is
    yielded, so an error in ``func`` surfaces one step early.
    """
    state = initial_value
    while True:
        following = func(state)
        yield state
        state = following
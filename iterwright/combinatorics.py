"""Lazy permutations and power sets of an iterable."""

from __future__ import annotations

import enum
import math
import sys
from operator import length_hint
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


def _clamp_hint(value: int) -> int:
    return min(max(value, 0), sys.maxsize)


class _LazyBuffer(Generic[T]):
    """Items pulled from an iterator on demand and kept for reuse."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: Optional[Iterator[T]] = iter(iterable)
        self.items: List[T] = []

    def __len__(self) -> int:
        return len(self.items)

    def get_next(self) -> bool:
        """Pull one more item; return whether there was one."""
        if self._iter is None:
            return False
        item = next(self._iter, _MISSING)
        if item is _MISSING:
            self._iter = None
            return False
        self.items.append(item)
        return True

    def prefill(self, count: int) -> None:
        while len(self.items) < count and self.get_next():
            pass

    def load_all(self) -> int:
        while self.get_next():
            pass
        return len(self.items)

    def hint(self) -> int:
        pending = 0 if self._iter is None else length_hint(self._iter)
        return len(self.items) + pending


def _advance(indices: List[int], cycles: List[int]) -> bool:
    """Step to the next permutation; return ``True`` when there is none."""
    n = len(indices)
    for i in reversed(range(len(cycles))):
        if cycles[i] == 0:
            cycles[i] = n - i - 1
            indices[i:] = indices[i + 1 :] + [indices[i]]
        else:
            swap_index = n - cycles[i]
            indices[i], indices[swap_index] = indices[swap_index], indices[i]
            cycles[i] -= 1
            return False
    return True


class _Phase(enum.Enum):
    START = enum.auto()
    BUFFERED = enum.auto()
    LOADED = enum.auto()
    END = enum.auto()


class Permutations(Generic[T]):
    """All ``k``-permutations of an iterable's elements, as lists.

    The source is read lazily: only ``k`` items are needed for the first
    permutation, and the rest are pulled one at a time as they are needed.
    """

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        if k < 0:
            raise ValueError(f"permutation length must not be negative, got {k}")
        self._vals: _LazyBuffer[T] = _LazyBuffer(iterable)
        self._k = k
        self._phase = _Phase.START
        self._min_n = k
        self._indices: List[int] = []
        self._cycles: List[int] = []

    def __iter__(self) -> "Permutations[T]":
        return self

    def _finish(self) -> None:
        self._phase = _Phase.END
        raise StopIteration

    def __next__(self) -> List[T]:
        vals, k = self._vals, self._k
        if self._phase is _Phase.START:
            if k == 0:
                self._phase = _Phase.END
                return []
            vals.prefill(k)
            if len(vals) != k:
                self._finish()
            self._phase = _Phase.BUFFERED
            self._min_n = k
            return vals.items[:k]
        if self._phase is _Phase.BUFFERED:
            if vals.get_next():
                item = vals.items[: k - 1] + [vals.items[self._min_n]]
                self._min_n += 1
                return item
            n = self._min_n
            indices = list(range(n))
            cycles = list(range(n - 1, n - k - 1, -1))
            # Catch up with the permutations already produced while buffering.
            for _ in range(n - k + 1):
                if _advance(indices, cycles):
                    self._finish()
            self._indices, self._cycles = indices, cycles
            self._phase = _Phase.LOADED
            return [vals.items[i] for i in indices[:k]]
        if self._phase is _Phase.LOADED:
            if _advance(self._indices, self._cycles):
                self._finish()
            return [vals.items[i] for i in self._indices[:k]]
        raise StopIteration

    def _remaining_for(self, n: int) -> int:
        k = self._k
        if self._phase is _Phase.START:
            return 0 if n < k else math.perm(n, k)
        if self._phase is _Phase.BUFFERED:
            return max(math.perm(n, k) - (self._min_n - k + 1), 0)
        if self._phase is _Phase.LOADED:
            total = 0
            size = len(self._indices)
            for i, cycle in enumerate(self._cycles):
                total = total * (size - i) + cycle
            return total
        return 0

    def __length_hint__(self) -> int:
        return _clamp_hint(self._remaining_for(self._vals.hint()))

    def count(self) -> int:
        """Return how many permutations remain, consuming them."""
        n = self._vals.load_all()
        remaining = self._remaining_for(n)
        self._phase = _Phase.END
        return remaining


def permutations(iterable: Iterable[T], k: int) -> Permutations[T]:
    """Return an iterator over the ``k``-permutations of ``iterable``'s elements."""
    return Permutations(iterable, k)


class Powerset(Generic[T]):
    """Every subset of an iterable's elements, as lists, smallest first.

    Subsets of equal size come in the order of their elements' positions.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._pool: _LazyBuffer[T] = _LazyBuffer(iterable)
        self._produced = 0
        self._items: Iterator[List[T]] = self._generate()

    def __iter__(self) -> "Powerset[T]":
        return self

    def __next__(self) -> List[T]:
        item = next(self._items)
        self._produced += 1
        return item

    def _generate(self) -> Iterator[List[T]]:
        pool = self._pool
        k = 0
        while True:
            yield from self._combinations(k)
            if not (k < len(pool) or k == 0):
                return
            k += 1

    def _combinations(self, k: int) -> Iterator[List[T]]:
        pool = self._pool
        if k == 0:
            yield []
            return
        pool.prefill(k)
        if len(pool) < k:
            return
        indices = list(range(k))
        yield [pool.items[i] for i in indices]
        while True:
            i = k - 1
            if indices[i] == len(pool) - 1:
                pool.get_next()
            while indices[i] == i + len(pool) - k:
                if i == 0:
                    return
                i -= 1
            indices[i] += 1
            for j in range(i + 1, k):
                indices[j] = indices[j - 1] + 1
            yield [pool.items[i] for i in indices]

    def __length_hint__(self) -> int:
        n = self._pool.hint()
        if n >= sys.maxsize.bit_length():
            return sys.maxsize
        return _clamp_hint(2**n - self._produced)

    def count(self) -> int:
        """Return how many subsets remain, consuming them."""
        n = self._pool.load_all()
        remaining = max(2**n - self._produced, 0)
        self._items = iter(())
        return remaining


def powerset(iterable: Iterable[T]) -> Powerset[T]:
    """Return an iterator over all subsets of ``iterable``'s elements."""
    return Powerset(iterable)
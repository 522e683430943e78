"""Iterators that let callers look ahead or push items back.

Every adaptor here has a ``peeking_next(accept)`` method. It returns the
next item if ``accept(item)`` is true. If the item is rejected, it stays in
place and ``StopIteration`` is raised. ``StopIteration`` is also raised once
the iterator is exhausted. ``peeking_take_while`` builds on that method.
"""

from __future__ import annotations

from collections import deque
from operator import length_hint
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class _Fused(Generic[T]):
    """Wraps an iterator so that, once exhausted, it is never polled again."""

    __slots__ = ("_iter",)

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: Optional[Iterator[T]] = iter(iterable)

    def pull(self) -> Any:
        if self._iter is None:
            return _MISSING
        item = next(self._iter, _MISSING)
        if item is _MISSING:
            self._iter = None
        return item

    def hint(self) -> int:
        return 0 if self._iter is None else length_hint(self._iter)


class MultiPeek(Generic[T]):
    """Iterator that can peek at several upcoming items.

    Each call to ``peek`` moves a cursor one item further ahead. The cursor
    goes back to the front when ``next`` is called or ``reset_peek`` is used.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source: _Fused[T] = _Fused(iterable)
        self._buf: Deque[T] = deque()
        self._index = 0

    def __iter__(self) -> "MultiPeek[T]":
        return self

    def __next__(self) -> T:
        self._index = 0
        if self._buf:
            return self._buf.popleft()
        item = self._source.pull()
        if item is _MISSING:
            raise StopIteration
        return item

    def __length_hint__(self) -> int:
        return self._source.hint() + len(self._buf)

    def _peek_raw(self) -> Any:
        if self._index < len(self._buf):
            item = self._buf[self._index]
        else:
            item = self._source.pull()
            if item is _MISSING:
                return _MISSING
            self._buf.append(item)
        self._index += 1
        return item

    def peek(self, default: Any = None) -> Any:
        """Return the item under the cursor and move the cursor forward.

        Return ``default`` if the iterator has no item at that position.
        """
        item = self._peek_raw()
        return default if item is _MISSING else item

    def reset_peek(self) -> None:
        """Move the peeking cursor back to the front."""
        self._index = 0

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if ``accept`` approves it, else raise ``StopIteration``."""
        if not self._buf:
            item = self._peek_raw()
            if item is not _MISSING and not accept(item):
                raise StopIteration
        elif not accept(self._buf[0]):
            raise StopIteration
        return next(self)


def multipeek(iterable: Iterable[T]) -> MultiPeek[T]:
    """Wrap ``iterable`` so that several upcoming items can be peeked at."""
    return MultiPeek(iterable)


class PeekNth(Generic[T]):
    """Iterator that can look at the n-th upcoming item without advancing.

    Unlike ``MultiPeek``, every peek looks at a fixed position, so repeated
    calls return the same item until ``next`` is called.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source: _Fused[T] = _Fused(iterable)
        self._buf: Deque[T] = deque()

    def __iter__(self) -> "PeekNth[T]":
        return self

    def __next__(self) -> T:
        if self._buf:
            return self._buf.popleft()
        item = self._source.pull()
        if item is _MISSING:
            raise StopIteration
        return item

    def __length_hint__(self) -> int:
        return self._source.hint() + len(self._buf)

    def _fill(self, n: int) -> bool:
        if n < 0:
            raise ValueError(f"position must not be negative, got {n}")
        while len(self._buf) <= n:
            item = self._source.pull()
            if item is _MISSING:
                return False
            self._buf.append(item)
        return True

    def peek(self, default: Any = None) -> Any:
        """Return the next item without consuming it, or ``default``."""
        return self.peek_nth(0, default)

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """Return the item ``n`` places ahead without consuming anything, or ``default``."""
        return self._buf[n] if self._fill(n) else default

    def set_nth(self, n: int, value: T) -> bool:
        """Replace the item ``n`` places ahead with ``value``.

        Return ``False`` and change nothing if the iterator is shorter than that.
        """
        if not self._fill(n):
            return False
        self._buf[n] = value
        return True

    def next_if(self, func: Callable[[T], bool]) -> Optional[T]:
        """Consume and return the next item if ``func`` approves it.

        Return ``None`` otherwise and leave the item in place.
        """
        item = next(self, _MISSING)
        if item is _MISSING:
            return None
        if func(item):
            return item
        self._buf.appendleft(item)
        return None

    def next_if_eq(self, expected: Any) -> Optional[T]:
        """Consume and return the next item if it equals ``expected``."""
        return self.next_if(lambda item: item == expected)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if ``accept`` approves it, else raise ``StopIteration``."""
        if not self._fill(0) or not accept(self._buf[0]):
            raise StopIteration
        return self._buf.popleft()


def peek_nth(iterable: Iterable[T]) -> PeekNth[T]:
    """Wrap ``iterable`` so that any upcoming item can be peeked at."""
    return PeekNth(iterable)


class PutBackN(Generic[T]):
    """Iterator that accepts any number of items pushed back onto its front.

    The item put back most recently comes out first.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._top: List[T] = []
        self._iter: Iterator[T] = iter(iterable)

    def __iter__(self) -> "PutBackN[T]":
        return self

    def __next__(self) -> T:
        if self._top:
            return self._top.pop()
        return next(self._iter)

    def __length_hint__(self) -> int:
        return length_hint(self._iter) + len(self._top)

    def put_back(self, item: T) -> None:
        """Put ``item`` in front of the iterator."""
        self._top.append(item)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if ``accept`` approves it, else raise ``StopIteration``."""
        item = next(self)
        if not accept(item):
            self.put_back(item)
            raise StopIteration
        return item


def put_back_n(iterable: Iterable[T]) -> PutBackN[T]:
    """Wrap ``iterable`` so that items can be pushed back onto its front."""
    return PutBackN(iterable)


class PeekingTakeWhile(Generic[T]):
    """Takes items from a peekable iterator while ``predicate`` holds.

    The first item that fails the predicate is left in the underlying
    iterator, which the caller keeps using afterwards.
    """

    def __init__(self, iterator: Any, predicate: Callable[[T], bool]) -> None:
        self._iter = iterator
        self._predicate = predicate

    def __iter__(self) -> "PeekingTakeWhile[T]":
        return self

    def __next__(self) -> T:
        return self._iter.peeking_next(self._predicate)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if both the predicate and ``accept`` approve it."""
        predicate = self._predicate
        return self._iter.peeking_next(lambda item: predicate(item) and accept(item))


def peeking_take_while(iterator: Any, predicate: Callable[[T], bool]) -> PeekingTakeWhile[T]:
    """Take items from ``iterator`` while ``predicate`` holds, without losing the first miss.

    ``iterator`` must provide a ``peeking_next(accept)`` method; otherwise
    ``TypeError`` is raised.
    """
    if not callable(getattr(iterator, "peeking_next", None)):
        raise TypeError(
            f"{type(iterator).__name__} object does not support peeking_next"
        )
    return PeekingTakeWhile(iterator, predicate)
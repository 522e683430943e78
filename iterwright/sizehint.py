"""Arithmetic on size hints: ``(lower, upper)`` pairs where ``upper`` may be ``None``.

Bounds behave like machine-sized unsigned counts: lower bounds saturate at
``MAX_SIZE`` and upper bounds that would overflow become ``None`` (unknown).
"""

from __future__ import annotations

from typing import Optional, Tuple

MAX_SIZE = 2**64 - 1

SizeHint = Tuple[int, Optional[int]]


def _saturate(value: int) -> int:
    return min(max(value, 0), MAX_SIZE)


def _checked(value: int) -> Optional[int]:
    return value if 0 <= value <= MAX_SIZE else None


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Add two size hints."""
    low = _saturate(a[0] + b[0])
    if a[1] is None or b[1] is None:
        return low, None
    return low, _checked(a[1] + b[1])


def add_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Add ``x`` to both bounds of a size hint."""
    low, high = hint
    return _saturate(low + x), None if high is None else _checked(high + x)


def sub_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Subtract ``x`` from both bounds of a size hint, stopping at zero."""
    low, high = hint
    return _saturate(low - x), None if high is None else _saturate(high - x)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Multiply two size hints."""
    low = _saturate(a[0] * b[0])
    a_high, b_high = a[1], b[1]
    if a_high is not None and b_high is not None:
        high = _checked(a_high * b_high)
    elif a_high == 0 or b_high == 0:
        high = 0
    else:
        high = None
    return low, high


def mul_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Multiply both bounds of a size hint by ``x``."""
    low, high = hint
    return _saturate(low * x), None if high is None else _checked(high * x)


def maximum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of whichever of two sequences turns out longer."""
    low = max(a[0], b[0])
    if a[1] is None or b[1] is None:
        return low, None
    return low, max(a[1], b[1])


def minimum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of whichever of two sequences turns out shorter."""
    low = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        return low, min(a[1], b[1])
    return low, a[1] if a[1] is not None else b[1]
"""Lazy iterator adaptors and sources: zipping, merging, min/max, peeking,
permutations and power sets, tuples, sharing and size-hint arithmetic."""

__version__ = "0.1.0"

__all__ = [
    "adaptors",
    "combinatorics",
    "merging",
    "minmax",
    "peeking",
    "sharing",
    "sizehint",
    "sources",
    "tuples",
    "zipping",
]
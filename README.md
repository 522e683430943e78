# iterwright

A collection of lazy iterator adaptors and sources for Python. The adaptors
take any iterable and produce their results on demand, so most of them work
as well with infinite generators as with lists. It has no dependencies
beyond the standard library.

## Installation

```
pip install iterwright
```

To run the test suite:

```
pip install "iterwright[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `iterwright.zipping` | `zip_longest` (yielding `Left`, `Right`, `Both`), `zip_eq` (raises `UnequalLengthError`), `multizip`, `multiunzip` |
| `iterwright.merging` | `merge`, `merge_by`, `merge_join_by` |
| `iterwright.minmax` | `minmax`, `minmax_by`, returning `NoElements`, `OneElement` or `MinMax` |
| `iterwright.peeking` | `multipeek` (`MultiPeek`), `peek_nth` (`PeekNth`), `put_back_n` (`PutBackN`), `peeking_take_while` (`PeekingTakeWhile`) |
| `iterwright.combinatorics` | `permutations` (`Permutations`), `powerset` (`Powerset`) |
| `iterwright.tuples` | `tuples` (`Tuples`), `tuple_windows` (`TupleWindows`), `circular_tuple_windows` (`CircularTupleWindows`) |
| `iterwright.adaptors` | `pad_using`, `repeat_n` (`RepeatN`), `take_while_inclusive`, `with_position` (`Position`), `unique`, `unique_by`, `process_results` |
| `iterwright.sharing` | `rciter` (`RcIter`), `tee` (`Tee`) |
| `iterwright.sources` | `unfold`, `iterate` |
| `iterwright.sizehint` | arithmetic on `(lower, upper)` size hints, with `MAX_SIZE` as the saturation bound |

A few behaviours worth knowing:

- `zip_eq` raises `UnequalLengthError` (a `ValueError`) as soon as one
  input ends before the other.
- `multiunzip` returns one list per column; an empty input gives `()`, and
  rows of differing length raise `ValueError`.
- `merge_join_by(left, right, cmp_fn)` accepts a `cmp_fn` returning either a
  bool (`True` yields `Left(l)`, `False` yields `Right(r)`) or an integer
  ordering (negative, zero, positive yield `Left`, `Both`, `Right`). Any
  other return type raises `TypeError`.
- The adaptors in `iterwright.peeking`, and `RepeatN`, have a
  `peeking_next(accept)` method: it returns the next item if `accept(item)`
  is true, and otherwise leaves it in place and raises `StopIteration`.
  `peeking_take_while` requires such a method and raises `TypeError`
  without one.
- `Permutations.count()` and `Powerset.count()` return how many items
  remain, consuming them.
- `process_results(iterable, processor)` treats `Exception` instances in the
  iterable as errors: the processor sees the values up to the first error,
  and that error is then raised instead of returning the processor's result.
- `RcIter.clone()` returns another handle on the same source; advancing a
  handle from inside its own source raises `RuntimeError`.

## Examples

Merge two sorted sequences:

```python
from iterwright.merging import merge

list(merge([1, 3, 5], [2, 3, 4]))   # [1, 2, 3, 3, 4, 5]
```

Join two sorted sequences, keeping track of which side each item came from:

```python
from iterwright.merging import merge_join_by

def compare(a, b):
    return (a > b) - (a < b)

list(merge_join_by([1, 2, 4], [2, 3], compare))
# [Left(value=1), Both(left=2, right=2), Right(value=3), Left(value=4)]
```

Peek ahead without consuming:

```python
from iterwright.peeking import peek_nth

it = peek_nth([1, 2, 3])
it.peek_nth(1)     # 2
next(it)           # 1
```

Group items into fixed-size tuples and keep the leftovers:

```python
from iterwright.tuples import tuples

groups = tuples(range(5), 3)
list(groups)               # [(0, 1, 2)]
list(groups.into_buffer()) # [3, 4]
```

Mark the first and last items:

```python
from iterwright.adaptors import Position, with_position

pairs = list(with_position("abc"))
pairs == [(Position.FIRST, "a"), (Position.MIDDLE, "b"), (Position.LAST, "c")]  # True
```

Find the smallest and largest item in a single pass:

```python
from iterwright.minmax import minmax

minmax([3, 1, 4, 1, 5]).into_option()   # (1, 5)
```

Build sequences from a state and a step function:

```python
from itertools import islice
from iterwright.sources import iterate, unfold

list(islice(iterate(1, lambda i: i % 3 + 1), 5))              # [1, 2, 3, 1, 2]
list(unfold(3, lambda n: (n, n - 1) if n > 0 else None))     # [3, 2, 1]
```

## What it does not do

The package is a library only: it has no command-line tool. It does not add
methods to built-in iterators; every adaptor is a function or class to call
on an iterable. It does not cover k-way merging, combinations, grouping or
chunking.
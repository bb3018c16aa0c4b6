"""
Boundary finder: locate the contiguous run of keys sharing a prefix.

The stored key column is sorted, so every key that starts with a prefix `p`
lives in one contiguous block. Two binary searches find the block's edges,
comparing only `key[:len(p)]` against `p` at each step.

Results
-------
`range_search` never raises and never returns magic ranges. It returns one of
the `RangeResult` variants below:

EmptyIndex
    There is nothing to search.
BelowRange
    `p` sorts before every stored key (insertion point -1).
AboveRange
    `p` sorts after every stored key (insertion point == size).
NoMatch
    `p` sorts between two stored keys, but no key starts with it.
Found
    Inclusive entry positions `lo..hi` whose truncated key equals `p`.

Only `Found` is truthy, so callers can write `if not result: ...`.

Truncation
----------
`key[:n]` on a key shorter than `n` returns the whole key. A short key is
therefore compared as itself ("ab" < "abc"), which puts it below or above the
prefix and never reports it as a match.

Complexity
----------
O(log n) comparisons, each O(min(len(p), len(key))).
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class RangeResult:
  found = False

  def __bool__(self):
    return self.found


@dataclass(frozen=True)
class EmptyIndex(RangeResult):
  pass


@dataclass(frozen=True)
class BelowRange(RangeResult):
  position: int = -1


@dataclass(frozen=True)
class AboveRange(RangeResult):
  position: int


@dataclass(frozen=True)
class NoMatch(RangeResult):
  pass


@dataclass(frozen=True)
class Found(RangeResult):
  lo: int
  hi: int
  found = True

  def __len__(self):
    return self.hi - self.lo + 1

  def as_slice(self):
    """Slice over the stored columns covering this range."""
    return slice(self.lo, self.hi + 1)


def below_first(keys, prefix):
  """True if `prefix` sorts before the first key under truncation."""
  return prefix < keys[0][:len(prefix)]


def above_last(keys, prefix):
  """True if `prefix` sorts after the last key under truncation."""
  return prefix > keys[-1][:len(prefix)]


def range_search(keys, prefix):
  """Find the inclusive range of positions in `keys` starting with `prefix`.

  Parameters
  ----------
  keys : Sequence
      Key column, non-decreasing. Each key must support slicing and
      comparison with `prefix`.
  prefix : Sequence
      Query prefix of the same kind as the keys.

  Returns
  -------
  RangeResult
      `EmptyIndex`, `BelowRange`, `AboveRange`, `NoMatch` or `Found(lo, hi)`.
  """
  length = len(keys)
  if length == 0:
    return EmptyIndex()

  n = len(prefix)
  if keys[0][:n] > prefix:
    return BelowRange()
  if keys[-1][:n] < prefix:
    return AboveRange(position=length)

  # lower bound; remember the leftmost position known to sort after `prefix`
  left, right = 0, length - 1
  max_exc_right = length
  while left < right:
    index = (left + right) >> 1
    head = keys[index][:n]
    if head < prefix:
      left = index + 1
    elif head > prefix:
      right = index
      max_exc_right = index
    else:
      right = index

  if keys[left][:n] != prefix:
    return NoMatch()
  lo = left

  # upper bound within [lo, max_exc_right - 1]
  right = max_exc_right - 1
  while left < right:
    index = (left + right) >> 1
    if keys[index][:n] > prefix:
      right = index
    else:
      left = index + 1

  if keys[right][:n] != prefix:
    right -= 1
  return Found(lo, right)

"""Multi-prefix queries: values whose entries match *every* given prefix."""
import logging

from .boundary import above_last, below_first, range_search

logger = logging.getLogger(__name__)


def identity_key(value):
  """Key used to compare values for deduplication and intersection.

  Hashable values compare by type and equality, so `1`, `True` and `1.0`
  stay distinct. Unhashable values (lists, mutable dataclasses) fall back to
  object identity.
  """
  try:
    hash(value)
  except TypeError:
    return (identity_key, id(value))
  return (type(value), value)


def distinct(values):
  """Drop repeated values, keeping the first occurrence of each."""
  seen = set()
  out = []
  for v in values:
    k = identity_key(v)
    if k not in seen:
      seen.add(k)
      out.append(v)
  return out


def complete(index, prefixes):
  """Return the distinct values whose keys start with all of `prefixes`.

  Parameters
  ----------
  index : SortedIndex
      Index to query. Prefixes are normalized with the index's `normalize`.
  prefixes : Sequence
      Ordered prefixes. The order matters for the output, see Notes.

  Returns
  -------
  list
      Distinct matching values; empty if any prefix has no match.

  Notes
  -----
  The result is seeded from the *last* prefix's matches in stored order, then
  filtered by membership in each remaining prefix's matches (in call order).
  Callers that need a different order should sort the result themselves.
  """
  prefixes = [index.normalize_key(p) for p in prefixes]
  keys = index.keys
  if not keys or not prefixes:
    return []
  if any(below_first(keys, p) or above_last(keys, p) for p in prefixes):
    logger.debug("prefix outside key range, skipping search")
    return []

  ranges = []
  for p in prefixes:
    found = range_search(keys, p)
    if not found:
      return []
    ranges.append(found)

  values = index.values
  result = distinct(values[ranges.pop().as_slice()])
  for found in ranges:
    members = {identity_key(v) for v in values[found.as_slice()]}
    result = [v for v in result if identity_key(v) in members]
  return result

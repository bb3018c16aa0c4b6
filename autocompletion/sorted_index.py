"""
Sorted-range index: an immutable, key-ordered table of (key, value) entries.

Prefix lookups run as two binary searches over the key column (see
`autocompletion.boundary`), so a million entries need at most ~40 key
comparisons per prefix. No hashing and no tries are involved; any key type
that supports slicing and ordering works (`str`, `bytes`, `tuple`, ...).

Construction
------------
- `SortedIndex.from_pairs`   : unordered (key, value) pairs, stable-sorted by key.
- `SortedIndex.from_keys`    : a word list; every word is its own value.
- `SortedIndex.map_key`      : one key per entity, via `key_of(entity)`.
- `SortedIndex.map_keys`     : several keys per entity, via `keys_of(entity)`.
- `SortedIndex(entries, trusted_sorted=False)`
                             : already-ordered entries; the order is verified
                               unless `trusted_sorted=True`.

Conventions & Notes
-------------------
- **Immutability:** keys and values are stored as two parallel tuples and are
  never modified after `__init__`; concurrent readers need no locking.
- **Normalization:** every constructor accepts `normalize` (e.g.
  `str.casefold`). It is applied to keys at construction and to query prefixes,
  and the order invariant is checked on normalized keys.
- **Duplicates:** the same key may appear several times, mapping to the same or
  different values; `size()` counts every entry.
"""
import logging
from operator import itemgetter

from .boundary import range_search
from .exceptions import OrderingError
from .query import complete, identity_key

logger = logging.getLogger(__name__)


def _first_disorder(keys):
  """Position `i` of the first pair with keys[i] > keys[i + 1], or None."""
  for i in range(len(keys) - 1):
    if not keys[i] <= keys[i + 1]:
      return i
  return None


class SortedIndex:
  __slots__ = ("_keys", "_values", "_normalize")

  def __init__(self, entries, trusted_sorted=False, *, normalize=None):
    """Build an index from entries that are already ordered by key.

    Parameters
    ----------
    entries : Iterable[tuple[K, V]]
        (key, value) pairs, non-decreasing by (normalized) key.
    trusted_sorted : bool, default=False
        Skip the order check. Use this only if you know what you're doing.
    normalize : Callable[[K], K] | None, default=None
        Applied to every key before storing it.

    Raises
    ------
    OrderingError
        If `trusted_sorted` is False and some adjacent keys are out of order.
    """
    entries = list(entries)
    self._normalize = normalize
    if normalize is None:
      self._keys = tuple(k for k, _ in entries)
    else:
      self._keys = tuple(normalize(k) for k, _ in entries)
    self._values = tuple(v for _, v in entries)

    if not trusted_sorted:
      position = _first_disorder(self._keys)
      if position is not None:
        logger.debug("rejecting %d entries: keys out of order at %d",
                     len(self._keys), position)
        raise OrderingError(position)

  # ------------------------------------------------------------------
  # Constructors
  # ------------------------------------------------------------------
  @classmethod
  def from_pairs(cls, pairs, *, presorted=False, normalize=None):
    """Build from (key, value) pairs in any order.

    Parameters
    ----------
    pairs : Iterable[tuple[K, V]]
    presorted : bool, default=False
        The caller already sorted `pairs` by (normalized) key; skip the sort.
        This is an optimization, not a correctness guarantee: unsorted input
        with `presorted=True` yields an index whose lookups are unreliable.
    normalize : Callable[[K], K] | None, default=None

    Notes
    -----
    Python's sort is stable, so pairs with equal keys keep their input order.
    """
    if normalize is not None:
      pairs = ((normalize(k), v) for k, v in pairs)
    if presorted:
      entries = list(pairs)
    else:
      entries = sorted(pairs, key=itemgetter(0))
    logger.debug("built index over %d entries (presorted=%s)", len(entries), presorted)
    # keys are already normalized above
    index = cls(entries, trusted_sorted=True)
    index._normalize = normalize
    return index

  @classmethod
  def from_keys(cls, keys, *, normalize=None):
    """Autocompletion for a word list: every key maps to itself."""
    return cls.from_pairs(((k, k) for k in keys), normalize=normalize)

  words = from_keys

  @classmethod
  def map_key(cls, entities, key_of, *, normalize=None):
    """Index entities under one key each, `key_of(entity)`."""
    return cls.from_pairs(((key_of(e), e) for e in entities), normalize=normalize)

  @classmethod
  def map_keys(cls, entities, keys_of, *, normalize=None):
    """Index entities under every key returned by `keys_of(entity)`.

    E.g. `keys_of=lambda p: (p.first_name, p.last_name)` lets a person be
    found by either name.
    """
    pairs = ((key, e) for e in entities for key in keys_of(e))
    return cls.from_pairs(pairs, normalize=normalize)

  # ------------------------------------------------------------------
  # Accessors
  # ------------------------------------------------------------------
  @property
  def keys(self):
    return self._keys

  @property
  def values(self):
    return self._values

  @property
  def entries(self):
    """All stored (key, value) pairs in key order."""
    return tuple(zip(self._keys, self._values))

  def normalize_key(self, key):
    return key if self._normalize is None else self._normalize(key)

  def validate(self):
    """Return True if the stored keys are non-decreasing."""
    return _first_disorder(self._keys) is None

  def is_empty(self):
    return not self._keys

  def size(self):
    """Number of entries; the same key may be counted several times."""
    return len(self._keys)

  def __len__(self):
    return len(self._keys)

  def __iter__(self):
    return zip(self._keys, self._values)

  def __repr__(self):
    return f"{type(self).__name__}(size={len(self._keys)})"

  def distinct_value_count(self):
    """Number of distinct values. Recomputed on every call (O(n))."""
    return len({identity_key(v) for v in self._values})

  def distinct_key_count(self):
    """Number of distinct keys. Recomputed on every call (O(n)).

    Counts positions where a key differs from its predecessor, so keys need
    not be hashable. Assumes the stored keys are sorted.
    """
    keys = self._keys
    return sum(1 for a, b in zip(keys, keys[1:]) if a != b) + bool(keys)

  # ------------------------------------------------------------------
  # Queries
  # ------------------------------------------------------------------
  def range_search(self, prefix):
    """Locate the entries whose key starts with `prefix`.

    Returns a `RangeResult`; see `autocompletion.boundary.range_search`.
    """
    return range_search(self._keys, self.normalize_key(prefix))

  def complete(self, *prefixes):
    """Distinct values whose keys match every one of `prefixes`.

    >>> auto = SortedIndex.words(["foo", "bar", "baz"])
    >>> auto.complete("b")
    ['bar', 'baz']
    """
    return complete(self, prefixes)

  def complete_all(self, prefixes):
    """Same as `complete`, taking the prefixes as one ordered sequence."""
    return complete(self, list(prefixes))

"""
Prefix autocompletion over a sorted, immutable table of (key, value) entries.

Example
-------
>>> from autocompletion import SortedIndex
>>> auto = SortedIndex.words(["foo", "bar", "baz"])
>>> auto.complete("b")
['bar', 'baz']
>>> auto.complete("z")
[]
"""
from .boundary import (AboveRange, BelowRange, EmptyIndex, Found, NoMatch,
                       RangeResult, range_search)
from .exceptions import OrderingError
from .query import complete
from .sorted_index import SortedIndex

__version__ = "0.1.0"

__all__ = [
  "AboveRange",
  "BelowRange",
  "EmptyIndex",
  "Found",
  "NoMatch",
  "OrderingError",
  "RangeResult",
  "SortedIndex",
  "complete",
  "range_search",
]

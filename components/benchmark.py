"""
Build/query timings for `SortedIndex` over the generated workloads.

Every timed query is also answered by `linear_complete`, a straightforward
O(n) scan with the same result contract, and any disagreement is counted in
the `mismatches` column.
"""
import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import pandas as pd

from autocompletion import SortedIndex
from autocompletion.query import distinct, identity_key
from components.work_loads import KINDS, WorkLoad

logger = logging.getLogger(__name__)


@dataclass
class BenchConfig:
  """
  Configuration for run_benchmark
      kind: workload kind, one of components.work_loads.KINDS
      sizes: number of generated items per run (people yield two entries each)
      num_queries: prefixes timed per size
      prefix_len: length of each sampled prefix
      prefixes_per_query: number of prefixes ANDed in one query
      baseline: also time the linear scan (slow for large sizes)
      seed: seed for workload and prefix sampling
  """
  kind: str = "words"
  sizes: List[int] = field(default_factory=lambda: [1_000, 10_000, 100_000])
  num_queries: int = 200
  prefix_len: int = 2
  prefixes_per_query: int = 1
  baseline: bool = True
  seed: Optional[int] = 0

  def __post_init__(self):
    if self.kind not in KINDS:
      raise ValueError(f"kind must be one of {KINDS}")
    if not self.sizes or any(s < 1 for s in self.sizes):
      raise ValueError("sizes must be a non-empty list of positive integers")
    if self.num_queries < 1:
      raise ValueError("num_queries must be positive")
    if self.prefix_len < 1:
      raise ValueError("prefix_len must be positive")
    if self.prefixes_per_query < 1:
      raise ValueError("prefixes_per_query must be positive")
    self.sizes = sorted(self.sizes)


def linear_complete(pairs, prefixes):
  """Reference answer for `SortedIndex.complete` by scanning every pair.

  `pairs` must be in the index's stored order so both agree on result order.
  """
  if not pairs or not prefixes:
    return []
  per_prefix = []
  for p in prefixes:
    per_prefix.append([v for k, v in pairs if k[:len(p)] == p])
  result = distinct(per_prefix.pop())
  for values in per_prefix:
    members = {identity_key(v) for v in values}
    result = [v for v in result if identity_key(v) in members]
  return result


def sample_prefixes(keys, count, prefix_len, rng):
  """Draw `count` prefixes of stored keys; keys shorter than `prefix_len` are used whole."""
  if not keys:
    return []
  return [rng.choice(keys)[:prefix_len] for _ in range(count)]


def _timed(fn, *args):
  start = time.perf_counter()
  out = fn(*args)
  return out, time.perf_counter() - start


def run_benchmark(config: BenchConfig) -> pd.DataFrame:
  """Time index construction and queries for every size in `config.sizes`.

  Returns
  -------
  pandas.DataFrame
      One row per size with columns: size, entries, distinct_keys, build_s,
      query_mean_us, query_p50_us, query_p95_us, linear_mean_us, speedup,
      mismatches. Baseline columns are NaN when `config.baseline` is False.
  """
  rng = random.Random(config.seed)
  work = WorkLoad(seed=config.seed)
  rows = []

  for size in config.sizes:
    pairs = work.pairs(config.kind, size)
    index, build_s = _timed(SortedIndex.from_pairs, pairs)
    logger.info("%s: built %d entries in %.3fs", config.kind, len(index), build_s)

    queries = [
      sample_prefixes(index.keys, config.prefixes_per_query, config.prefix_len, rng)
      for _ in range(config.num_queries)
    ]
    query_s = np.empty(len(queries))
    answers = []
    for i, q in enumerate(queries):
      answer, query_s[i] = _timed(index.complete_all, q)
      answers.append(answer)

    linear_mean = np.nan
    mismatches = 0
    if config.baseline:
      stored = index.entries
      linear_s = np.empty(len(queries))
      for i, q in enumerate(queries):
        expected, linear_s[i] = _timed(linear_complete, stored, q)
        if expected != answers[i]:
          mismatches += 1
      linear_mean = linear_s.mean() * 1e6
      if mismatches:
        logger.warning("%s/%d: %d queries disagree with the linear scan", config.kind, size, mismatches)

    query_us = query_s * 1e6
    rows.append({
      "size": size,
      "entries": len(index),
      "distinct_keys": index.distinct_key_count(),
      "build_s": build_s,
      "query_mean_us": query_us.mean(),
      "query_p50_us": np.percentile(query_us, 50),
      "query_p95_us": np.percentile(query_us, 95),
      "linear_mean_us": linear_mean,
      "speedup": linear_mean / query_us.mean() if query_us.mean() > 0 else np.nan,
      "mismatches": mismatches,
    })

  return pd.DataFrame(rows)

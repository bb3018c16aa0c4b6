#!/usr/bin/env python3
from collections import namedtuple

from faker import Faker

from .url_generator import generate_urls
from .en_word_generator import generate_random_words, gen_words_with_prefix_freq
from .ip_generator import IPConfig, IPGenerator

Person = namedtuple("Person", ["first_name", "last_name"])

KINDS = ("words", "people", "urls", "ips")


class WorkLoad:
  """Seeded data sources for building and querying indexes.

  `pairs(kind, n)` shapes any workload into (key, value) pairs ready for
  `SortedIndex.from_pairs`.
  """

  def __init__(self, seed=None):
    self.seed = seed

  def words(self, num_words, p_freq=0, unique=False):
    if p_freq > 0:
      return gen_words_with_prefix_freq(num_words, p_freq, self.seed, unique)
    else:
      return generate_random_words(num_words, self.seed, unique)

  def urls(self, num_urls):
    return generate_urls(num_urls, self.seed)

  def ips(self, num_ips, public_share=0.9):
    return IPGenerator(IPConfig(public_share=public_share, seed=self.seed)).batch(num_ips, labelled=True)

  def people(self, num_people):
    if num_people < 1:
      raise ValueError("num_people must be positive")
    fake = Faker()
    if self.seed is not None:
      fake.seed_instance(self.seed)
    return [Person(fake.first_name(), fake.last_name()) for _ in range(num_people)]

  def pairs(self, kind, n, **kwargs):
    """Return (key, value) pairs for `kind`.

    words : (word, word)
    people: (first_name, person) and (last_name, person), two pairs per person
    urls  : (url, url)
    ips   : (address, network kind)
    """
    if kind == "words":
      return [(w, w) for w in self.words(n, **kwargs)]
    if kind == "people":
      return [(key, p) for p in self.people(n) for key in (p.first_name, p.last_name)]
    if kind == "urls":
      return [(u, u) for u in self.urls(n)]
    if kind == "ips":
      return self.ips(n, **kwargs)
    raise ValueError(f"kind must be one of {KINDS}, got {kind!r}")

import random
import math
from collections import defaultdict

from faker.providers.lorem.en_US import Provider as LoremProvider

# Vocabulary
# WORDS_COMMON: Faker's en_US lorem list (common English words).
# WORDS_BROAD: common words plus regular inflections, for larger unique samples.
WORDS_COMMON = list(dict.fromkeys(w.lower() for w in LoremProvider.word_list if w.isalpha()))

SUFFIXES = ("", "s", "ed", "er", "ers", "ing", "ings", "ly", "ness",
            "less", "ful", "able", "ment", "ist", "ism", "ize")

WORDS_BROAD = sorted({w + s for w in WORDS_COMMON for s in SUFFIXES})


## Words bucketed by their first two letters, used to generate runs of
## words sharing a prefix
prefix_bucket = defaultdict(list)
for word in WORDS_BROAD:
  prefix_bucket[word[:2]].append(word)
prefixes = list(prefix_bucket.keys())
prefix_weights = [len(prefix_bucket[p]) for p in prefixes]


def generate_random_words(num_words, seed=None, unique=False):
  """
  Return `num_words` random words from WORDS_COMMON.
  - unique=False: sample with replacement (fast, allows duplicates)
  - unique=True: sample without replacement (requires num_words <= len(WORDS_COMMON))
  """
  word_list = WORDS_COMMON
  if num_words < 1 or (unique is True and num_words > len(word_list)):
    raise ValueError(f"num_words must be between 1 and {len(word_list)}")
  rng = random.Random(seed)
  if unique:
    return rng.sample(word_list, num_words)
  return rng.choices(word_list, k=num_words)


def _p_eff_log(x, max_mean=100):
  """Map prefix frequency in [0, 1] logarithmically onto a run-continuation probability."""
  if x < 0 or x > 1:
    raise ValueError("prefix_freq must be between 0 and 1")
  x = max(0.0, min(0.999999, x))
  k = math.log(max_mean)
  p = 1.0 - math.exp(-k * x)
  return min(p, 0.999999)


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generates a list of words with a given prefix frequency.
  A higher prefix_freq means more consecutive words share their first two letters.
  prefix_freq: 0 -> 1, applied logarithmically
  """
  p_cont = _p_eff_log(prefix_freq)

  word_list = WORDS_BROAD
  max_unique = int(len(word_list) // 1.1)
  if num_words < 1 or (unique is True and num_words > max_unique):
    raise ValueError(f"num_words must be between 1 and {max_unique}")
  rng = random.Random(seed)

  out = []
  seen = set()
  exhausted = set()

  def take(options):
    if not unique:
      return rng.choice(options)
    remaining = [w for w in options if w not in seen]
    if not remaining:
      return None
    return rng.choice(remaining)

  while len(out) < num_words:
    prefix = rng.choices(prefixes, weights=prefix_weights)[0]
    if prefix in exhausted:
      continue
    options = prefix_bucket[prefix]

    word = take(options)
    while word is not None:
      out.append(word)
      seen.add(word)
      if len(out) >= num_words or rng.random() >= p_cont:
        break
      word = take(options)
    if word is None:
      exhausted.add(prefix)
  return out

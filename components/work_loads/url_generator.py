import random
import string
from urllib.parse import quote

from faker import Faker

from .en_word_generator import WORDS_BROAD, WORDS_COMMON


### ================= URL Generation Probability Config ================= ###

# --- File extensions and their weights for leaf paths --- #
file_exts = ["html", "js", "css", "json", "png", "jpg", "svg", "pdf", "txt", "xml"]
file_ext_weights = [0.22, 0.28, 0.10, 0.08, 0.10, 0.10, 0.04, 0.04, 0.02, 0.02]

# --- Path depth (number of segments) --- #
depths = [0, 1, 2, 3, 4, 5]
depth_weights = [0.20, 0.30, 0.25, 0.13, 0.10, 0.02]

slug_separators = ["-", "_"]
slug_separator_weights = [0.85, 0.15]

param_keys = ["q", "id", "page", "ref", "utm_source", "lang"]
param_weights = [0.30, 0.20, 0.20, 0.10, 0.10, 0.10]


### ================= URL Generation Functions ================= ###

def load_domains(n=1_000, seed=None, s=1.1):
  """Return `n` distinct domains and Zipf weights by rank (rank 1 is most popular)."""
  if n <= 0 or n > 100_000:
    raise ValueError("n must be between 1 and 100,000")
  fake = Faker()
  if seed is not None:
    fake.seed_instance(seed)
  domains = list(dict.fromkeys(fake.domain_name() for _ in range(n)))
  weights_zipf = [1 / ((r + 1) ** s) for r in range(len(domains))]
  return domains, weights_zipf


def pick_scheme(rng):
  """http or https, with a realistic share of https."""
  return rng.choices(["http", "https"], weights=[0.12, 0.88], k=1)[0]


def slug(rng, min_len=2, max_len=12, digit_p=0.15):
  pool = string.ascii_lowercase + (string.digits if rng.random() < digit_p else "")
  return "".join(rng.choices(pool, k=rng.randint(min_len, max_len)))


def segment(rng, slug_p):
  """One path segment: either a random slug or 1-3 words joined by a separator."""
  if rng.random() < slug_p:
    return slug(rng)
  sep = rng.choices(slug_separators, weights=slug_separator_weights, k=1)[0]
  words = rng.choices(WORDS_BROAD, k=rng.randint(1, 3))
  return quote(sep.join(words), safe="-_.~")


def gen_path(rng, slug_p=0.3):
  """Random absolute path; deeper segments are more likely to be slugs."""
  if slug_p < 0 or slug_p > 1:
    raise ValueError("slug_p must be between 0 and 1")
  depth = rng.choices(depths, weights=depth_weights, k=1)[0]
  if depth == 0:
    return "/"
  segs = []
  for _ in range(depth):
    segs.append(segment(rng, slug_p))
    slug_p += (1 - slug_p) * 0.15
  path = "/" + "/".join(segs)
  if rng.random() < 0.3:
    return path + "." + rng.choices(file_exts, weights=file_ext_weights, k=1)[0]
  return path + "/"


def query_string(rng, max_params=3):
  """Random query string (often empty) with sorted, distinct parameter keys."""
  num_params = rng.choices(range(max_params + 1), weights=[0.55, 0.30, 0.10, 0.05][:max_params + 1], k=1)[0]
  if num_params == 0:
    return ""
  keys = set()
  while len(keys) < num_params:
    keys.add(rng.choices(param_keys, weights=param_weights, k=1)[0])
  pairs = []
  for key in sorted(keys):
    if key in ("id", "page"):
      val = str(rng.randint(1, 10_000))
    elif key == "lang":
      val = rng.choice(["en", "en-us", "es", "fr", "de", "ja"])
    else:
      val = "+".join(rng.choices(WORDS_COMMON, k=rng.randint(1, 3)))
    pairs.append(f"{key}={val}")
  return "?" + "&".join(pairs)


### ================= Final URL Generation Logic ================= ###

def generate_urls(num_urls, seed=None, num_domains=1_000):
  """Generate a list of `num_urls` random URLs."""
  if num_urls < 1:
    raise ValueError("num_urls must be positive")
  rng = random.Random(seed)
  domains, weights = load_domains(num_domains, seed)
  urls = []
  for _ in range(num_urls):
    host = rng.choices(domains, weights=weights, k=1)[0]
    urls.append(f"{pick_scheme(rng)}://{host}{gen_path(rng)}{query_string(rng)}")
  return urls

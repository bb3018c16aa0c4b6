import os
import random
import string
import sys
import unittest
from collections import namedtuple
from dataclasses import dataclass

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from autocompletion import SortedIndex, complete

Person = namedtuple("Person", ["first_name", "last_name"])

PETER = Person("Peter", "Parker")
LUKE = Person("Luke", "Skywalker")
ANAKIN = Person("Anakin", "Skywalker")


@dataclass
class Ticket:
    title: str


def gen_random_words(rng, n, alphabet=string.ascii_lowercase[:6], min_len=1, max_len=6):
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(min_len, max_len)))
            for _ in range(n)]


class TestWordList(unittest.TestCase):
    def setUp(self):
        self.auto = SortedIndex.words(["foo", "bar", "baz"])

    def test_single_prefix(self):
        self.assertEqual(self.auto.complete("f"), ["foo"])
        self.assertEqual(self.auto.complete("b"), ["bar", "baz"])
        self.assertEqual(self.auto.complete("z"), [])

    def test_no_match_inside_range(self):
        self.assertEqual(self.auto.complete("c"), [])

    def test_full_word(self):
        self.assertEqual(self.auto.complete("baz"), ["baz"])
        self.assertEqual(self.auto.complete("bazz"), [])

    def test_empty_prefix_returns_all(self):
        self.assertEqual(self.auto.complete(""), ["bar", "baz", "foo"])

    def test_duplicate_words_are_deduplicated(self):
        auto = SortedIndex.words(["foo", "foo", "far"])
        self.assertEqual(auto.complete("f"), ["far", "foo"])


class TestEmptyQueries(unittest.TestCase):
    def test_no_prefixes(self):
        auto = SortedIndex.words(["foo"])
        self.assertEqual(auto.complete(), [])
        self.assertEqual(auto.complete_all([]), [])

    def test_empty_index(self):
        auto = SortedIndex.words([])
        self.assertEqual(auto.complete("a"), [])
        self.assertEqual(auto.complete(""), [])
        self.assertEqual(auto.complete(), [])


class TestPairs(unittest.TestCase):
    def setUp(self):
        self.auto = SortedIndex.from_pairs([
            ("Parker", "Peter Parker"),
            ("Skywalker", "Luke Skywalker"),
            ("Skywalker", "Anakin Skywalker"),
        ])

    def test_keeps_input_order_for_equal_keys(self):
        self.assertEqual(self.auto.complete("S"), ["Luke Skywalker", "Anakin Skywalker"])

    def test_one_prefix_without_match_empties_result(self):
        self.assertEqual(self.auto.complete("S", "Z"), [])
        self.assertEqual(self.auto.complete("S", "Q"), [])
        self.assertEqual(self.auto.complete("A", "S"), [])


class TestMultiPrefix(unittest.TestCase):
    def setUp(self):
        self.auto = SortedIndex.map_keys(
            [PETER, LUKE, ANAKIN],
            lambda p: (p.first_name, p.last_name),
        )

    def test_single_prefix(self):
        self.assertEqual(self.auto.complete("P"), [PETER])
        self.assertEqual(self.auto.complete("S"), [LUKE, ANAKIN])

    def test_and_semantics(self):
        self.assertEqual(self.auto.complete("S", "L"), [LUKE])
        self.assertEqual(self.auto.complete("L", "S"), [LUKE])
        self.assertEqual(self.auto.complete("S", "Z"), [])
        self.assertEqual(self.auto.complete("P", "S"), [])

    def test_same_prefix_twice(self):
        self.assertEqual(self.auto.complete("S", "S"), [LUKE, ANAKIN])

    def test_order_seeded_from_last_prefix(self):
        auto = SortedIndex.from_pairs([("xa", "v1"), ("xb", "v2"), ("ya", "v2"), ("yb", "v1")])
        self.assertEqual(auto.complete("x", "y"), ["v2", "v1"])
        self.assertEqual(auto.complete("y", "x"), ["v1", "v2"])

    def test_complete_all_matches_varargs(self):
        self.assertEqual(self.auto.complete_all(["S", "A"]), self.auto.complete("S", "A"))
        self.assertEqual(self.auto.complete_all(("S", "A")), [ANAKIN])

    def test_module_function(self):
        self.assertEqual(complete(self.auto, ["Sky", "Lu"]), [LUKE])


class TestValueIdentity(unittest.TestCase):
    def test_equal_values_of_different_types_stay_distinct(self):
        auto = SortedIndex.from_pairs([("a", 1), ("ab", True), ("ac", 1.0)])
        got = auto.complete("a")
        self.assertEqual([type(v) for v in got], [int, bool, float])
        self.assertEqual(auto.distinct_value_count(), 3)

    def test_type_aware_intersection(self):
        auto = SortedIndex.from_pairs([("xa", 1), ("ya", 1.0), ("yb", 1)])
        got = auto.complete("x", "y")
        self.assertEqual(got, [1])
        self.assertIs(type(got[0]), int)

    def test_unhashable_values_compare_by_identity(self):
        a, b = Ticket("bug"), Ticket("bug")
        auto = SortedIndex.map_keys([a, b], lambda t: (t.title, "b" + t.title))
        got = auto.complete("b")
        self.assertEqual(len(got), 2)
        self.assertIs(got[0], a)
        self.assertIs(got[1], b)
        self.assertEqual(auto.distinct_value_count(), 2)

    def test_unhashable_intersection(self):
        a, b = Ticket("alpha"), Ticket("beta")
        auto = SortedIndex.map_keys([a, b], lambda t: (t.title, "t" + t.title))
        got = auto.complete("t", "a")
        self.assertEqual(len(got), 1)
        self.assertIs(got[0], a)


class TestNormalization(unittest.TestCase):
    def test_casefold_keys_and_prefixes(self):
        auto = SortedIndex.words(["Foo", "bar", "BAZ"], normalize=str.casefold)
        self.assertEqual(auto.complete("F"), ["Foo"])
        self.assertEqual(auto.complete("ba"), ["bar", "BAZ"])
        self.assertEqual(auto.complete("BA", "bAz"), ["BAZ"])

    def test_without_normalization_case_matters(self):
        auto = SortedIndex.words(["Foo", "bar"])
        self.assertEqual(auto.complete("f"), [])
        self.assertEqual(auto.complete("F"), ["Foo"])


class TestProperties(unittest.TestCase):
    def setUp(self):
        rng = random.Random(2024)
        self.rng = rng
        words = gen_random_words(rng, 500)
        self.pairs = [(w, i % 37) for i, w in enumerate(words)]
        self.auto = SortedIndex.from_pairs(self.pairs)

    def test_round_trip_on_exact_key(self):
        for key, value in self.pairs:
            got = self.auto.complete(key)
            self.assertTrue(got)
            self.assertIn(value, got)

    def test_prefix_monotonicity(self):
        for key, _ in self.rng.sample(self.pairs, 100):
            for cut in range(len(key)):
                shorter = set(self.auto.complete(key[:cut]))
                longer = set(self.auto.complete(key[:cut + 1]))
                self.assertTrue(longer <= shorter, (key, cut))

    def test_matches_brute_force(self):
        for _ in range(200):
            prefix = "".join(self.rng.choice("abcdefg") for _ in range(self.rng.randint(0, 3)))
            expected = []
            for k, v in self.auto:
                if k.startswith(prefix) and v not in expected:
                    expected.append(v)
            self.assertEqual(self.auto.complete(prefix), expected, prefix)

    def test_idempotent(self):
        for _ in range(50):
            prefixes = gen_random_words(self.rng, self.rng.randint(1, 3), max_len=2)
            first = self.auto.complete(*prefixes)
            self.assertEqual(self.auto.complete(*prefixes), first)
            self.assertEqual(self.auto.complete(*prefixes), first)


if __name__ == "__main__":
    unittest.main(verbosity=2)

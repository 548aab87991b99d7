import io
import math
import unittest
from contextlib import redirect_stdout

from lazy_itertools.collect import collect
from lazy_itertools.combinations import combinations
from lazy_itertools.itertools_conf import EnumerationConfig
from lazy_itertools.permutations import permutations
from lazy_itertools.product import product


class TestLargeInputsStayLazy(unittest.TestCase):
    # full passes here are far beyond anything enumerable, only the head is pulled

    def test_permutations_of_25(self):
        perms = permutations(range(25))
        it = iter(perms)
        self.assertEqual(next(it), list(range(25)))
        self.assertEqual(next(it), list(range(23)) + [24, 23])
        self.assertEqual(perms.total, math.factorial(25))

    def test_combinations_70_choose_35(self):
        combs = combinations(range(70), 35)
        it = iter(combs)
        self.assertEqual(next(it), list(range(35)))
        self.assertEqual(next(it), list(range(34)) + [35])
        self.assertEqual(combs.total, math.comb(70, 35))

    def test_product_of_thirty_factors(self):
        prod = product([range(10)] * 30)
        it = iter(prod)
        self.assertEqual(next(it), [0] * 30)
        self.assertEqual(next(it), [0] * 29 + [1])
        self.assertEqual(prod.total, 10 ** 30)

    def test_len_beyond_maxsize_overflows_but_total_does_not(self):
        perms = permutations(range(21))
        self.assertGreater(perms.total, 2 ** 63)
        with self.assertRaises(OverflowError):
            len(perms)

    def test_collect_with_max_items(self):
        cfg = EnumerationConfig(max_items=3)
        items = collect(permutations(range(25)), cfg)
        self.assertEqual(len(items), 3)
        self.assertEqual(items[2], list(range(22)) + [23, 22, 24])

    def test_verbose_construction_reports_huge_total(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            permutations(range(25), cfg=EnumerationConfig(verbose=True))
        self.assertIn(f"-> {math.factorial(25)} permutations", buf.getvalue())


if __name__ == "__main__":
    unittest.main(verbosity=2)

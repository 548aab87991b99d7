import itertools
import math
import unittest

from lazy_itertools.errors import InvalidArgument
from lazy_itertools.index.combination_indices import CombinationIndices


class TestCombinationIndices(unittest.TestCase):

    def test_basic(self):
        result = list(CombinationIndices(4, 2))
        expected = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
        self.assertEqual(result, expected)

    def test_matches_itertools_for_small_sizes(self):
        for n in range(0, 7):
            for k in range(0, n + 1):
                gen = CombinationIndices(n, k)
                result = list(gen)
                self.assertEqual(result, list(itertools.combinations(range(n), k)), msg=f"n={n} k={k}")
                self.assertEqual(len(result), math.comb(n, k))
                self.assertEqual(gen.total, len(result))

    def test_strictly_increasing(self):
        for idx in CombinationIndices(6, 4):
            self.assertTrue(all(a < b for a, b in zip(idx, idx[1:])))

    def test_length_zero(self):
        self.assertEqual(list(CombinationIndices(3, 0)), [()])
        self.assertEqual(list(CombinationIndices(0, 0)), [()])

    def test_length_equals_size(self):
        self.assertEqual(list(CombinationIndices(3, 3)), [(0, 1, 2)])

    def test_length_greater_than_size(self):
        gen = CombinationIndices(2, 3)
        self.assertEqual(gen.total, 0)
        self.assertEqual(list(gen), [])

    def test_negative_length_raises(self):
        with self.assertRaises(InvalidArgument) as ctx:
            CombinationIndices(3, -1)
        self.assertEqual(str(ctx.exception), "length must be non-negative, but was -1")
        self.assertEqual(ctx.exception.name, "length")
        self.assertEqual(ctx.exception.value, -1)

    def test_try_advance_stays_exhausted(self):
        gen = CombinationIndices(2, 2)
        self.assertEqual(gen.try_advance(), (0, 1))
        self.assertFalse(gen.exhausted)
        self.assertIsNone(gen.try_advance())
        self.assertTrue(gen.exhausted)
        self.assertIsNone(gen.try_advance())
        self.assertEqual(list(gen), [])

    def test_emitted_tuples_are_snapshots(self):
        gen = CombinationIndices(4, 2)
        first = next(gen)
        next(gen)
        next(gen)
        self.assertEqual(first, (0, 1))


if __name__ == "__main__":
    unittest.main(verbosity=2)

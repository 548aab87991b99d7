import unittest

from lazy_itertools.combinations import combinations
from lazy_itertools.errors import InvalidArgument
from lazy_itertools.itertools_conf import EnumerationConfig


class TestEnumerationConfig(unittest.TestCase):

    def test_defaults_are_valid(self):
        cfg = EnumerationConfig()
        cfg.validate()
        self.assertFalse(cfg.verbose)
        self.assertFalse(cfg.progress)
        self.assertIsNone(cfg.max_items)

    def test_negative_max_items(self):
        with self.assertRaises(InvalidArgument):
            EnumerationConfig(max_items=-1).validate()

    def test_non_integer_dtype(self):
        with self.assertRaises(InvalidArgument):
            EnumerationConfig(dtype="float32").validate()
        with self.assertRaises(InvalidArgument):
            EnumerationConfig(dtype="not-a-dtype").validate()

    def test_invalid_config_rejected_at_construction(self):
        with self.assertRaises(InvalidArgument):
            combinations("ABC", 2, cfg=EnumerationConfig(max_items=-5))


if __name__ == "__main__":
    unittest.main(verbosity=2)

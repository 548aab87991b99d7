from __future__ import annotations
from typing import Any, Iterable, Optional, Tuple

from lazy_itertools.arrangement import LazyArrangement, Projector
from lazy_itertools.errors import require_non_negative
from lazy_itertools.index.combination_indices import CombinationIndices
from lazy_itertools.itertools_conf import EnumerationConfig
from lazy_itertools.projection import as_list, as_pair, as_triple


class LazyCombinations(LazyArrangement):
    """
    `length`-sized combinations of `data`, lexicographic w.r.t. the order of `data`.

      list(combinations("ABCD", 2))
      # [['A','B'], ['A','C'], ['A','D'], ['B','C'], ['B','D'], ['C','D']]
    """

    tag = "Comb"

    def __init__(self, data: Iterable[Any], length: Optional[int] = None,
                 projector: Projector = as_list, cfg: Optional[EnumerationConfig] = None):
        self.data: Tuple[Any, ...] = tuple(data)
        self.length: int = len(self.data) if length is None else length
        require_non_negative("length", self.length)
        super().__init__(self.data, projector, cfg)
        if self.cfg.verbose:
            self._log(f"n={len(self.data)} length={self.length} -> {self.total} combinations")

    def indices(self) -> CombinationIndices:
        return CombinationIndices(len(self.data), self.length)


def combinations(data: Iterable[Any], length: Optional[int] = None,
                 cfg: Optional[EnumerationConfig] = None) -> LazyCombinations:
    return LazyCombinations(data, length, as_list, cfg)


def pair_combinations(data: Iterable[Any], cfg: Optional[EnumerationConfig] = None) -> LazyCombinations:
    return LazyCombinations(data, 2, as_pair, cfg)


def triple_combinations(data: Iterable[Any], cfg: Optional[EnumerationConfig] = None) -> LazyCombinations:
    return LazyCombinations(data, 3, as_triple, cfg)

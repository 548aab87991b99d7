from __future__ import annotations
from typing import Any, Iterable, Optional, Tuple

from lazy_itertools.arrangement import LazyArrangement, Projector
from lazy_itertools.errors import require_non_negative
from lazy_itertools.index.permutation_indices import PermutationIndices
from lazy_itertools.itertools_conf import EnumerationConfig
from lazy_itertools.projection import as_list, as_pair, as_triple


class LazyPermutations(LazyArrangement):
    """
    `length`-sized permutations of `data`, lexicographic w.r.t. the order of `data`.

      list(permutations([0, 1, 2]))
      # [[0,1,2], [0,2,1], [1,0,2], [1,2,0], [2,0,1], [2,1,0]]
      list(permutations([1, 2, 3], 0))
      # [[]]
    """

    tag = "Perm"

    def __init__(self, data: Iterable[Any], length: Optional[int] = None,
                 projector: Projector = as_list, cfg: Optional[EnumerationConfig] = None):
        self.data: Tuple[Any, ...] = tuple(data)
        self.length: int = len(self.data) if length is None else length
        require_non_negative("length", self.length)
        super().__init__(self.data, projector, cfg)
        if self.cfg.verbose:
            self._log(f"n={len(self.data)} length={self.length} -> {self.total} permutations")

    def indices(self) -> PermutationIndices:
        return PermutationIndices(len(self.data), self.length)


def permutations(data: Iterable[Any], length: Optional[int] = None,
                 cfg: Optional[EnumerationConfig] = None) -> LazyPermutations:
    return LazyPermutations(data, length, as_list, cfg)


def pair_permutations(data: Iterable[Any], cfg: Optional[EnumerationConfig] = None) -> LazyPermutations:
    return LazyPermutations(data, 2, as_pair, cfg)


def triple_permutations(data: Iterable[Any], cfg: Optional[EnumerationConfig] = None) -> LazyPermutations:
    return LazyPermutations(data, 3, as_triple, cfg)

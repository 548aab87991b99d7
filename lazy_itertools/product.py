from __future__ import annotations
from typing import Any, Iterable, Optional, Sequence, Tuple

from lazy_itertools.arrangement import LazyArrangement, Projector
from lazy_itertools.index.product_indices import ProductIndices
from lazy_itertools.itertools_conf import EnumerationConfig
from lazy_itertools.projection import from_factors, pair_from_factors, triple_from_factors


class LazyProduct(LazyArrangement):
    """
    Cartesian product of `factors`, first factor is the outermost loop.

      list(pair_product("ABCD", "xy"))
      # [('A','x'), ('A','y'), ('B','x'), ('B','y'), ..., ('D','x'), ('D','y')]
    """

    tag = "Prod"

    def __init__(self, factors: Iterable[Iterable[Any]], projector: Projector = from_factors,
                 cfg: Optional[EnumerationConfig] = None):
        self.factors: Tuple[Tuple[Any, ...], ...] = tuple(tuple(f) for f in factors)
        super().__init__(self.factors, projector, cfg)
        if self.cfg.verbose:
            self._log(f"sizes={list(self.sizes)} -> {self.total} tuples")

    @property
    def sizes(self) -> Sequence[int]:
        return [len(f) for f in self.factors]

    def indices(self) -> ProductIndices:
        return ProductIndices(self.sizes)


def product(factors: Iterable[Iterable[Any]], cfg: Optional[EnumerationConfig] = None) -> LazyProduct:
    return LazyProduct(factors, from_factors, cfg)


def pair_product(first: Iterable[Any], second: Iterable[Any],
                 cfg: Optional[EnumerationConfig] = None) -> LazyProduct:
    return LazyProduct((first, second), pair_from_factors, cfg)


def triple_product(first: Iterable[Any], second: Iterable[Any], third: Iterable[Any],
                   cfg: Optional[EnumerationConfig] = None) -> LazyProduct:
    return LazyProduct((first, second, third), triple_from_factors, cfg)

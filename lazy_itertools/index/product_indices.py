from __future__ import annotations
from typing import List, Optional, Sequence

from lazy_itertools.errors import require_non_negative
from lazy_itertools.index.state import IndexGenerator, Indices, product_count


class ProductIndices(IndexGenerator):
    """
    odometer over mixed radixes `sizes`, first factor most significant.
      sizes=(2, 3) -> (0,0) (0,1) (0,2) (1,0) (1,1) (1,2)
    No factors, or one empty factor -> nothing.
    """

    def __init__(self, sizes: Sequence[int]):
        super().__init__()
        self.sizes: List[int] = [require_non_negative(f"sizes[{j}]", s) for j, s in enumerate(sizes)]
        self._indices: List[int] = []

    @property
    def total(self) -> int:
        return product_count(self.sizes)

    @property
    def length(self) -> int:
        return len(self.sizes)

    @property
    def max_index(self) -> int:
        return max(self.sizes) - 1 if self.total > 0 else -1

    def _first(self) -> Optional[Indices]:
        if not self.sizes or any(s == 0 for s in self.sizes):
            return None
        self._indices = [0] * len(self.sizes)
        return tuple(self._indices)

    def _advance(self) -> Optional[Indices]:
        idx = self._indices
        i = len(idx) - 1
        while i >= 0:
            idx[i] += 1
            if idx[i] < self.sizes[i]:
                return tuple(idx)
            idx[i] = 0  # carry
            i -= 1
        return None

from __future__ import annotations
from typing import List, Optional

from lazy_itertools.errors import require_non_negative
from lazy_itertools.index.state import IndexGenerator, Indices, combination_count


class CombinationIndices(IndexGenerator):
    """
    strictly increasing `length`-subsets of range(size), lexicographic order.
      size=4, length=2 -> (0,1) (0,2) (0,3) (1,2) (1,3) (2,3)
    """

    def __init__(self, size: int, length: int):
        super().__init__()
        self.size: int = require_non_negative("size", size)
        self.k: int = require_non_negative("length", length)
        self._indices: List[int] = []

    @property
    def total(self) -> int:
        return combination_count(self.size, self.k)

    @property
    def length(self) -> int:
        return self.k

    @property
    def max_index(self) -> int:
        return self.size - 1 if 0 < self.k <= self.size else -1

    def _first(self) -> Optional[Indices]:
        if self.k > self.size:
            return None
        self._indices = list(range(self.k))
        return tuple(self._indices)

    def _advance(self) -> Optional[Indices]:
        k = self.k
        r = self._indices
        m = self.size

        i = k - 1
        while i >= 0 and r[i] == i + (m - k):
            i -= 1
        if i < 0:
            return None
        r[i] += 1
        for j in range(i + 1, k):
            r[j] = r[j - 1] + 1
        return tuple(r)

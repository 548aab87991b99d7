from __future__ import annotations
from typing import List, Optional

from lazy_itertools.errors import require_non_negative
from lazy_itertools.index.state import IndexGenerator, Indices, permutation_count, shift_left_from, swap_at


class PermutationIndices(IndexGenerator):
    """
    ordered `length`-arrangements of distinct positions in range(size),
    lexicographic order.
      size=3, length=2 -> (0,1) (0,2) (1,0) (1,2) (2,0) (2,1)

    State:
      _work:   all `size` positions, the first `length` are the current tuple.
               The tail takes part in the rotations even when length < size.
      _cycles: per output slot, swaps left before the slot rotates back.
    """

    def __init__(self, size: int, length: int):
        super().__init__()
        self.size: int = require_non_negative("size", size)
        self.k: int = require_non_negative("length", length)
        self._work: List[int] = []
        self._cycles: List[int] = []

    @property
    def total(self) -> int:
        return permutation_count(self.size, self.k)

    @property
    def length(self) -> int:
        return self.k

    @property
    def max_index(self) -> int:
        return self.size - 1 if 0 < self.k <= self.size else -1

    def _first(self) -> Optional[Indices]:
        if self.k > self.size:
            return None
        n = self.size
        self._work = list(range(n))
        self._cycles = [n - i for i in range(self.k)]
        return tuple(self._work[:self.k])

    def _advance(self) -> Optional[Indices]:
        n = self.size
        work = self._work
        cycles = self._cycles

        i = self.k - 1
        while i >= 0:
            if cycles[i] == 1:
                shift_left_from(work, i)
                cycles[i] = n - i
                i -= 1
                continue
            cycles[i] -= 1
            swap_at(work, i, n - cycles[i])
            return tuple(work[:self.k])
        return None

from __future__ import annotations
import math
from typing import Iterator, List, Optional, Sequence, Tuple

Indices = Tuple[int, ...]


class IndexGenerator:
    """
    One-shot, pull-driven walk over index tuples.

    Subclasses keep their index arrays as plain lists and mutate them in place.
    Required overrides:
      _first()   -> first tuple, or None when nothing can be emitted
      _advance() -> successor of the last emitted tuple, or None when done
      total      -> number of tuples of a full pass (plain int, unbounded)
      length     -> tuple length
      max_index  -> largest index any tuple can hold, -1 if none is emitted
    Every emission is a tuple snapshot, so a caller holding an earlier result
    never sees a later advance.

      gen.try_advance() -> next tuple, or None once exhausted (for good)
      next(gen)         -> same thing through the iterator protocol
    """

    def __init__(self) -> None:
        self._started = False
        self._exhausted = False

    @property
    def started(self) -> bool:
        return self._started

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def total(self) -> int:
        raise NotImplementedError

    @property
    def length(self) -> int:
        raise NotImplementedError

    @property
    def max_index(self) -> int:
        raise NotImplementedError

    def try_advance(self) -> Optional[Indices]:
        if self._exhausted:
            return None
        if not self._started:
            self._started = True
            nxt = self._first()
        else:
            nxt = self._advance()
        if nxt is None:
            self._exhausted = True
        return nxt

    def __iter__(self) -> Iterator[Indices]:
        return self

    def __next__(self) -> Indices:
        nxt = self.try_advance()
        if nxt is None:
            raise StopIteration
        return nxt

    def _first(self) -> Optional[Indices]:
        raise NotImplementedError

    def _advance(self) -> Optional[Indices]:
        raise NotImplementedError


def shift_left_from(arr: List[int], start: int) -> None:
    """rotate arr[start:] left by one, the value at `start` ends up last."""
    if start >= len(arr):
        return
    head = arr[start]
    for i in range(start, len(arr) - 1):
        arr[i] = arr[i + 1]
    arr[-1] = head


def swap_at(arr: List[int], a: int, b: int) -> None:
    arr[a], arr[b] = arr[b], arr[a]


def combination_count(size: int, length: int) -> int:
    if length < 0 or length > size:
        return 0
    return math.comb(size, length)


def permutation_count(size: int, length: int) -> int:
    if length < 0 or length > size:
        return 0
    return math.perm(size, length)


def product_count(sizes: Sequence[int]) -> int:
    if len(sizes) == 0:
        return 0
    return math.prod(sizes)

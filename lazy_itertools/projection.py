from __future__ import annotations
from typing import Any, List, Sequence, Tuple

from lazy_itertools.errors import InvalidArgument
from lazy_itertools.index.state import Indices

# Projectors map an emitted index tuple onto the source:
#   projector(source, indices, count) -> value
# `source` is the element sequence for combinations/permutations and the
# sequence of factors for products.


def _require_count(indices: Indices, count: int, expected: int | None = None) -> None:
    if len(indices) != count:
        raise InvalidArgument(f"got {len(indices)} indices for count={count}", name="count", value=count)
    if expected is not None and count != expected:
        raise InvalidArgument(f"count must be {expected}, but was {count}", name="count", value=count)


def as_list(data: Sequence[Any], indices: Indices, count: int) -> List[Any]:
    _require_count(indices, count)
    return [data[i] for i in indices]


def as_pair(data: Sequence[Any], indices: Indices, count: int) -> Tuple[Any, Any]:
    _require_count(indices, count, 2)
    first, second = indices
    return data[first], data[second]


def as_triple(data: Sequence[Any], indices: Indices, count: int) -> Tuple[Any, Any, Any]:
    _require_count(indices, count, 3)
    first, second, third = indices
    return data[first], data[second], data[third]


def from_factors(factors: Sequence[Sequence[Any]], indices: Indices, count: int) -> List[Any]:
    _require_count(indices, count, len(factors))
    return [factors[j][i] for j, i in enumerate(indices)]


def pair_from_factors(factors: Sequence[Sequence[Any]], indices: Indices, count: int) -> Tuple[Any, Any]:
    _require_count(indices, count, 2)
    a, b = indices
    return factors[0][a], factors[1][b]


def triple_from_factors(factors: Sequence[Sequence[Any]], indices: Indices, count: int) -> Tuple[Any, Any, Any]:
    _require_count(indices, count, 3)
    a, b, c = indices
    return factors[0][a], factors[1][b], factors[2][c]

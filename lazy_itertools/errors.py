from __future__ import annotations
import numbers
from typing import Any


class InvalidArgument(ValueError):
    """
    raised at construction time only, before anything is emitted:
      - negative or non-integer length / product size
      - projector called with the wrong arity
      - invalid EnumerationConfig, or a dtype too small for the indices
    """

    def __init__(self, message: str, name: str | None = None, value: Any = None):
        super().__init__(message)
        self.name = name
        self.value = value


def require_non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, but was {value!r}", name=name, value=value)
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, but was {value}", name=name, value=value)
    return int(value)

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np

from lazy_itertools.errors import InvalidArgument


@dataclass
class EnumerationConfig:
    verbose: bool = False
    progress: bool = False  # tqdm bar while collecting
    dtype: str = "int64"  # numpy dtype for to_index_array
    max_items: Optional[int] = None  # None -> no cap

    def validate(self) -> None:
        if self.max_items is not None and self.max_items < 0:
            raise InvalidArgument(f"max_items must be >= 0, but was {self.max_items}",
                                  name="max_items", value=self.max_items)
        try:
            kind = np.dtype(self.dtype).kind
        except TypeError as e:
            raise InvalidArgument(f"unknown dtype: {self.dtype}", name="dtype", value=self.dtype) from e
        if kind not in ("i", "u"):
            raise InvalidArgument(f"dtype must be an integer type, but was {self.dtype}",
                                  name="dtype", value=self.dtype)

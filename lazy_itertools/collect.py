from __future__ import annotations
from itertools import islice
from typing import Any, List, Optional, Union

import numpy as np
from tqdm.auto import tqdm

from lazy_itertools.arrangement import LazyArrangement
from lazy_itertools.errors import InvalidArgument
from lazy_itertools.index.state import IndexGenerator
from lazy_itertools.itertools_conf import EnumerationConfig


def _pbar(iterable, cfg: EnumerationConfig, **kwargs):
    return tqdm(iterable, **kwargs) if cfg.progress else iterable


def _capped(total: Optional[int], cfg: EnumerationConfig) -> Optional[int]:
    if total is None or cfg.max_items is None:
        return total
    return min(total, cfg.max_items)


def collect(lazy: LazyArrangement, cfg: Optional[EnumerationConfig] = None) -> List[Any]:
    """
    materialize a lazy arrangement (a fresh pass) into a list.
    cfg defaults to the arrangement's own config; cfg.max_items caps the result.
    """
    cfg = cfg if cfg is not None else lazy.cfg
    cfg.validate()

    total = _capped(lazy.total, cfg)
    items = list(_pbar(islice(iter(lazy), cfg.max_items), cfg, total=total, desc=f"[{lazy.tag}] collect"))
    if cfg.verbose:
        print(f"[Collect] {lazy.tag}: {len(items)} items")
    return items


def to_index_array(source: Union[IndexGenerator, LazyArrangement],
                   cfg: Optional[EnumerationConfig] = None) -> np.ndarray:
    """
    raw index tuples as a 2-D array of shape (count, length).
      - LazyArrangement -> a fresh pass over its indices
      - IndexGenerator  -> whatever is left of that generator (it gets consumed)
    k=0 gives shape (1, 0), an empty arrangement (0, length).
    raises InvalidArgument before pulling anything if cfg.dtype is too small.
    """
    if isinstance(source, LazyArrangement):
        if cfg is None:
            cfg = source.cfg
        gen = source.indices()
    else:
        gen = source
    cfg = cfg if cfg is not None else EnumerationConfig()
    cfg.validate()

    # checked before the first pull, the generator stays untouched on failure
    limit = int(np.iinfo(np.dtype(cfg.dtype)).max)
    if gen.max_index > limit:
        raise InvalidArgument(f"dtype {cfg.dtype} cannot hold index {gen.max_index} (max {limit})",
                              name="dtype", value=cfg.dtype)

    total = None if gen.started else _capped(gen.total, cfg)
    rows = list(_pbar(islice(gen, cfg.max_items), cfg, total=total, desc="[Index] collect"))
    arr = np.array(rows, dtype=np.dtype(cfg.dtype)).reshape(len(rows), gen.length)
    if cfg.verbose:
        print(f"[Collect] index array {arr.shape} dtype={arr.dtype}")
    return arr

from __future__ import annotations
from functools import partial
from typing import Any, Callable, Iterator, Optional

from lazy_itertools.index.state import IndexGenerator, Indices
from lazy_itertools.itertools_conf import EnumerationConfig

Projector = Callable[[Any, Indices, int], Any]


class ProjectedPass:
    """single pass: pulls one index tuple and projects it before the next pull."""

    def __init__(self, gen: IndexGenerator, project: Callable[[Indices], Any], log: Callable[[str], None]):
        self.gen = gen
        self.project = project
        self.log = log
        self.emitted = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        was_exhausted = self.gen.exhausted
        nxt = self.gen.try_advance()
        if nxt is None:
            if not was_exhausted:
                self.log(f"pass done: {self.emitted} items")
            raise StopIteration
        self.emitted += 1
        return self.project(nxt)


class LazyArrangement:
    """
    Re-iterable wrapper around an index generator plus a projector.
    Every iter() starts a fresh pass with its own index state, so the source
    can be walked any number of times, each pass itself is one-shot.

    Subclasses override `indices()` to build a fresh IndexGenerator.
    `total` is an unbounded int; len() is limited to sys.maxsize by Python.
    """

    tag = "Lazy"

    def __init__(self, source: Any, projector: Projector, cfg: Optional[EnumerationConfig] = None):
        self.cfg = cfg if cfg is not None else EnumerationConfig()
        self.cfg.validate()
        self.source = source
        self.projector = projector
        self._project = partial(self._apply, projector, source)

    @staticmethod
    def _apply(projector: Projector, source: Any, indices: Indices) -> Any:
        return projector(source, indices, len(indices))

    def indices(self) -> IndexGenerator:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return ProjectedPass(self.indices(), self._project, self._log)

    @property
    def total(self) -> int:
        return self.indices().total

    def __len__(self) -> int:
        return self.total

    def _log(self, msg: str) -> None:
        if self.cfg.verbose:
            print(f"[{self.tag}] {msg}")

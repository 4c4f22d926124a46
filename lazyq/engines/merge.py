from __future__ import annotations
import heapq
import logging
from functools import cmp_to_key
from ..types import *

logger = logging.getLogger(__name__)


class MergeEngine(Generic[T]):
    """
    k-way merge of sources that are each already sorted under one comparer.

    the heap holds at most one entry per live source: [sort key, source index, head].
    equal heads leave the heap in ascending source index, and a source's own elements
    keep their relative order. inputs that are not actually sorted do not break the
    merge, but the output order around the unsorted stretch is unspecified.
    """

    def __init__(self, sources: Iterable[Iterable[T]], comparer: Comparer[T] = natural_order):
        config = MergeConfig(comparer)
        self._iterators = [iter(source) for source in sources]
        if not self._iterators:
            raise ValueError("merge requires at least one source")
        self._sort_key = cmp_to_key(config.comparer)
        self._heap: List[list] = []
        self._live = len(self._iterators)
        self._primed = False
        self._refill: Optional[int] = None
        self._finished = False

    @classmethod
    def from_config(cls, sources: Iterable[Iterable[T]], config: MergeConfig) -> 'MergeEngine[T]':
        return cls(sources, config.comparer)

    @property
    def live_sources(self) -> int:
        """number of sources not yet known to be exhausted"""
        return self._live

    def _pull(self, index: int) -> None:
        """advance one source and put its new head on the heap, or retire the source"""
        try:
            head = next(self._iterators[index])
        except StopIteration:
            self._live -= 1
            logger.debug("merge source %d exhausted, %d still live", index, self._live)
            return
        heapq.heappush(self._heap, [self._sort_key(head), index, head])

    def __iter__(self) -> 'MergeEngine[T]':
        return self

    def __next__(self) -> T:
        if self._finished:
            raise StopIteration
        try:
            if not self._primed:
                self._primed = True
                for index in range(len(self._iterators)):
                    self._pull(index)
            elif self._refill is not None:
                index, self._refill = self._refill, None
                self._pull(index)
        except Exception:
            # a failing source ends the merge; the error itself goes to the caller
            self._finished = True
            self._heap.clear()
            raise
        if not self._heap:
            self._finished = True
            raise StopIteration
        _, index, head = heapq.heappop(self._heap)
        self._refill = index
        return head

    def __repr__(self) -> str:
        return f"MergeEngine(sources={len(self._iterators)}, live={self._live})"

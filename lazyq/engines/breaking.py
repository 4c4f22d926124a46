from __future__ import annotations
import logging
from ..types import *

logger = logging.getLogger(__name__)


class BreakingIterator(Generic[T]):
    """
    yields the normal values of a source and ends at the first divergent one.
    the divergent value is kept in `divergent`; nothing is pulled after it.
    """

    def __init__(self, source: Iterable[T], is_divergent: Predicate[Any] = is_exception):
        self._source = iter(source)
        self._is_divergent = is_divergent
        self.divergent: Any = None
        self.broken = False

    def __iter__(self) -> 'BreakingIterator[T]':
        return self

    def __next__(self) -> T:
        if self.broken:
            raise StopIteration
        item = next(self._source)
        if self._is_divergent(item):
            self.broken = True
            self.divergent = item
            logger.debug("traversal broken by divergent value %r", item)
            raise StopIteration
        return item


def with_folding(source: Iterable[Any], f: Callable[[Iterator[T]], U],
                 is_divergent: Predicate[Any] = is_exception) -> FoldOutcome:
    """
    run a whole-sequence function such as sum or max over the normal values,
    giving up at the first divergent value instead of collecting first.
    """
    breaking = BreakingIterator(source, is_divergent)
    value = f(breaking)
    if breaking.broken:
        return FoldOutcome(None, Completion.STOPPED_ERROR, breaking.divergent)
    return FoldOutcome(value, Completion.EXHAUSTED)

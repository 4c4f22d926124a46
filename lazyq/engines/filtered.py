from __future__ import annotations
import logging
from collections import deque
from ..types import *

logger = logging.getLogger(__name__)


def with_filtered(source: Iterable[Any], f: Callable[[Iterator[T]], Iterable[U]],
                  is_divergent: Predicate[Any] = is_exception) -> Iterator[Any]:
    """
    run a chain of ordinary combinators over only the normal values of `source`,
    then put the divergent values back in the order they were met.

    `f` receives an iterator of normal values and returns an iterable of outputs.
    divergent values skipped while `f` pulled its next input come out before that
    output; only those runs of divergent values are ever buffered.
    """
    pending: deque = deque()

    def normals() -> Iterator[T]:
        for item in source:
            if is_divergent(item):
                pending.append(item)
            else:
                yield item

    def recombined() -> Iterator[Any]:
        for output in f(normals()):
            pending.append(output)
            while pending:
                yield pending.popleft()
        # divergent values after the last normal one
        while pending:
            yield pending.popleft()

    return recombined()

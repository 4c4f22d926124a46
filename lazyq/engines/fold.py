from __future__ import annotations
import logging
from ..types import *

logger = logging.getLogger(__name__)


class FallibleFold(Generic[A, T]):
    """
    fold a source with a step function that may stop the traversal early.

    the step returns Continue(acc), StopSuccess(acc) or StopError(error). exactly one
    element is pulled per step and none after a stop, so whatever the fold did not
    look at is still in the source. the fold keeps no state of its own beyond the
    source position: run() can be called again to fold the remainder from `initial`.
    """

    def __init__(self, source: Iterable[T], initial: A, step: StepFunction):
        config = FoldConfig(initial, step)
        self._source = iter(source)
        self._initial = config.initial
        self._step = config.step

    @classmethod
    def from_config(cls, source: Iterable[T], config: FoldConfig) -> 'FallibleFold[A, T]':
        return cls(source, config.initial, config.step)

    def run(self) -> FoldOutcome:
        acc = self._initial
        steps = 0
        for item in self._source:
            steps += 1
            result = self._step(acc, item)
            if isinstance(result, Continue):
                acc = result.value
            elif isinstance(result, StopSuccess):
                logger.debug("fold stopped with success after %d step(s)", steps)
                return FoldOutcome(result.value, Completion.STOPPED_SUCCESS)
            elif isinstance(result, StopError):
                logger.debug("fold stopped with error %r after %d step(s)", result.error, steps)
                return FoldOutcome(acc, Completion.STOPPED_ERROR, result.error)
            else:
                raise TypeError(
                    f"step function must return Continue, StopSuccess or StopError, "
                    f"got {type(result).__name__}"
                )
        return FoldOutcome(acc, Completion.EXHAUSTED)

    def __repr__(self) -> str:
        return f"FallibleFold(initial={self._initial!r})"


def try_fold(source: Iterable[T], initial: A, step: StepFunction) -> FoldOutcome:
    """fold `source` with a short-circuiting step function"""
    return FallibleFold(source, initial, step).run()

from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..engines.fold import FallibleFold
from ..engines.breaking import with_folding

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """operations that drive a pass and return a concrete result"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable._iterate())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable._iterate())

    def array(self) -> np.ndarray:
        """convert to numpy array; a sequence of windows becomes a 2-d array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe, one row per element"""
        return pd.DataFrame(self.list(), columns=columns)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable._iterate())
        return sum(1 for x in self._enumerable._iterate() if predicate(x))

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, pulling no further than needed"""
        for item in self._enumerable._iterate():
            if predicate is None or predicate(item): return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default; errors raised upstream still propagate"""
        for item in self._enumerable._iterate():
            if predicate is None or predicate(item): return item
        return default

    def fold(self, initial: A, step: StepFunction) -> FoldOutcome:
        """
        fold with a step function returning Continue, StopSuccess or StopError.
        stops pulling the moment the step says stop.
        """
        return FallibleFold(self._enumerable._iterate(), initial, step).run()

    def with_folding(self, f: Callable[[Iterator[T]], U],
                     is_divergent: Predicate[Any] = is_exception) -> FoldOutcome:
        """apply a whole-sequence function, breaking off at the first divergent value"""
        return with_folding(self._enumerable._iterate(), f, is_divergent)

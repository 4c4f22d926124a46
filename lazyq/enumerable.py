from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _iterate(self) -> Iterator[T]:
        """start a fresh pass over the underlying data"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, iter_func: Callable[[], Iterable[T]]):
        """init with a function that returns an iterable when called"""
        self._iter_func = iter_func

    def _iterate(self) -> Iterator[T]:
        """nothing runs until this is called; each call asks iter_func for a new pass"""
        return iter(self._iter_func())

    def __iter__(self) -> Iterator[T]:
        return self._iterate()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired enumerable with stateful combinators for python iterables."""
    def __init__(self, iter_func: Callable[[], Iterable[T]]):
        super().__init__(iter_func)
        # --- initialize accessors ---
        self.group = GroupingAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    def merge_with(self, *others: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
        """
        lazily merges this sorted sequence with other sequences sorted the same way (o(n log k)).
        ties are taken from this sequence first, then from `others` in argument order.
        """
        from .engines.merge import MergeEngine

        def merge_data():
            return MergeEngine([self, *others], comparer or natural_order)

        return Enumerable(merge_data)

    def __repr__(self) -> str:
        return f"Enumerable({getattr(self._iter_func, '__name__', 'source')})"

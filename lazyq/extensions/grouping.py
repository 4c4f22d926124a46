from __future__ import annotations
import typing
from ..types import *
from ..engines.grouping import GroupingEngine
from ..engines.window import WindowEngine

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def runs(self, key_selector: KeySelector[T, K] = identity,
             equivalence: Optional[Equivalence[K]] = None,
             unfinished: UnfinishedGroupPolicy = UnfinishedGroupPolicy.ERROR) -> GroupingEngine[T, K]:
        """
        lazily split into runs of consecutive elements with equivalent keys.
        each run is a Group that reads through a shared buffer: read it before asking
        for the next one (or pass UnfinishedGroupPolicy.AUTO_DRAIN).
        """
        return GroupingEngine(self._enumerable._iterate(), key_selector, equivalence, unfinished)

    def batch_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[List[T]]':
        """batch consecutive elements with same key"""
        from ..enumerable import Enumerable
        def batch_data():
            return (list(group) for group in GroupingEngine(self._enumerable._iterate(), key_selector))
        return Enumerable(batch_data)

    def run_length_encode(self) -> 'Enumerable[Tuple[T, int]]':
        """
        performs run-length encoding on the sequence. consecutive identical elements
        are grouped into (element, count) tuples.
        """
        from ..enumerable import Enumerable
        def rle_data():
            return ((group.key, sum(1 for _ in group)) for group in GroupingEngine(self._enumerable._iterate()))
        return Enumerable(rle_data)

    def window(self, size: int, stride: int = 1, tail: Tail = TailPolicy.DROP) -> 'Enumerable[Tuple[T, ...]]':
        """create windows of `size` elements, advancing by `stride`; short tails are dropped by default"""
        from ..enumerable import Enumerable
        # validate eagerly so a bad size fails at the call site, not at first iteration
        config = WindowConfig(size, stride, tail)
        return Enumerable(lambda: WindowEngine.from_config(self._enumerable._iterate(), config))

    def chunk(self, size: int, tail: Tail = TailPolicy.PARTIAL) -> 'Enumerable[Tuple[T, ...]]':
        """split into consecutive chunks of `size`; the last chunk may be shorter"""
        return self.window(size, size, tail)

    def pairwise(self) -> 'Enumerable[Tuple[T, T]]':
        """return consecutive pairs"""
        return self.window(2, 1)

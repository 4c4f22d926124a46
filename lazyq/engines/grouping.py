from __future__ import annotations
import logging
import operator
from ..types import *
from ..errors import ExhaustedError, UnfinishedGroupError, StaleGroupError
from .lookahead import LookaheadBuffer

logger = logging.getLogger(__name__)

_MISSING = object()


class Group(Generic[K, T]):
    """
    lazy view of one run of consecutive elements sharing a key.
    a group holds no elements of its own: it reads through its engine's lookahead
    buffer and is only valid until the engine produces the next group.
    """

    def __init__(self, engine: 'GroupingEngine[T, K]', key: K, generation: int):
        self._engine = engine
        self.key = key
        self.generation = generation
        self._done = False

    @property
    def is_live(self) -> bool:
        """true while the group belongs to the engine's current generation"""
        return self._engine._generation == self.generation

    def __iter__(self) -> 'Group[K, T]':
        return self

    def __next__(self) -> T:
        engine = self._engine
        if engine._generation != self.generation:
            raise StaleGroupError(self.key, self.generation, engine._generation)
        if self._done:
            raise StopIteration
        if not engine._head_in_group(self.key):
            self._done = True
            logger.debug("group %r closed at generation %d", self.key, self.generation)
            raise StopIteration
        return engine._take_head()

    def __repr__(self) -> str:
        state = "live" if self.is_live else "stale"
        return f"Group(key={self.key!r}, generation={self.generation}, {state})"


class GroupingEngine(Generic[T, K]):
    """
    splits a source into maximal runs of consecutive elements with equivalent keys.
    iterating the engine yields one Group per run; the groups share a lookahead of one
    element, which is how a run detects its end without consuming the next run's head.
    """

    def __init__(self, source: Iterable[T],
                 key_selector: KeySelector[T, K] = identity,
                 equivalence: Optional[Equivalence[K]] = None,
                 unfinished: UnfinishedGroupPolicy = UnfinishedGroupPolicy.ERROR):
        config = GroupingConfig(key_selector, equivalence or operator.eq, unfinished)
        self._key_selector = config.key_selector
        self._equivalence = config.equivalence
        self._policy = config.unfinished
        self._buffer: LookaheadBuffer[T] = LookaheadBuffer(source, capacity=1)
        self._head_key: Any = _MISSING
        self._generation = 0
        self._current: Optional[Group[K, T]] = None
        self._finished = False

    @classmethod
    def from_config(cls, source: Iterable[T], config: GroupingConfig) -> 'GroupingEngine[T, K]':
        return cls(source, config.key_selector, config.equivalence, config.unfinished)

    @property
    def generation(self) -> int: return self._generation

    @property
    def policy(self) -> UnfinishedGroupPolicy: return self._policy

    # --- shared head access used by groups ---

    def _peek_head(self) -> Tuple[T, K]:
        """peek the next element and its key; the key is computed once per element"""
        item = self._buffer.peek(0)
        if self._head_key is _MISSING:
            self._head_key = self._key_selector(item)
        return item, self._head_key

    def _head_in_group(self, key: K) -> bool:
        try:
            _, head_key = self._peek_head()
        except ExhaustedError:
            return False
        return bool(self._equivalence(key, head_key))

    def _take_head(self) -> T:
        item = next(self._buffer)
        self._head_key = _MISSING
        return item

    # --- advancing ---

    def _close_current(self) -> None:
        group = self._current
        if group is None or group._done:
            return
        if not self._head_in_group(group.key):
            group._done = True
            return
        if self._policy is UnfinishedGroupPolicy.ERROR:
            raise UnfinishedGroupError(group.key)
        drained = 0
        while self._head_in_group(group.key):
            self._take_head()
            drained += 1
        group._done = True
        logger.debug("auto-drained %d element(s) from group %r", drained, group.key)

    def next_group(self) -> Group[K, T]:
        """return the next group, raising StopIteration when the source is exhausted"""
        if self._finished:
            raise StopIteration
        self._close_current()
        try:
            _, key = self._peek_head()
        except ExhaustedError:
            self._finished = True
            raise StopIteration
        self._generation += 1
        self._current = Group(self, key, self._generation)
        logger.debug("group %r opened at generation %d", key, self._generation)
        return self._current

    def __iter__(self) -> 'GroupingEngine[T, K]':
        return self

    def __next__(self) -> Group[K, T]:
        return self.next_group()

    def __repr__(self) -> str:
        return f"GroupingEngine(generation={self._generation}, policy={self._policy.name})"

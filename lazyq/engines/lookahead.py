from __future__ import annotations
import logging
from collections import deque
from ..types import *
from ..errors import ExhaustedError

logger = logging.getLogger(__name__)


class LookaheadBuffer(Generic[T]):
    """
    bounded peek buffer in front of a single-pass source.
    elements are pulled one at a time and only when a peek or consume needs them,
    so the source never runs ahead of what callers have asked to see.
    iterating the buffer consumes from the front, which makes it a peekable source.
    """

    def __init__(self, source: Iterable[T], capacity: Optional[int] = None):
        if capacity is not None and capacity < 1:
            raise ValueError(f"lookahead capacity must be at least 1, got {capacity}")
        self._source = iter(source)
        self._capacity = capacity
        self._buffer: deque = deque()
        self._source_exhausted = False
        self._pulled = 0
        self._consumed = 0

    # --- introspection ---

    @property
    def capacity(self) -> Optional[int]: return self._capacity

    @property
    def pulled(self) -> int:
        """total number of elements ever pulled from the source"""
        return self._pulled

    @property
    def consumed(self) -> int: return self._consumed

    @property
    def source_exhausted(self) -> bool: return self._source_exhausted

    @property
    def buffered(self) -> Tuple[T, ...]: return tuple(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return (f"LookaheadBuffer(buffered={len(self._buffer)}, capacity={self._capacity}, "
                f"pulled={self._pulled}, consumed={self._consumed})")

    # --- pulling ---

    def _pull(self) -> Tuple[bool, Any]:
        """advance the source exactly once; exceptions from the source pass through"""
        if self._source_exhausted:
            return False, None
        try:
            item = next(self._source)
        except StopIteration:
            self._source_exhausted = True
            logger.debug("source exhausted after %d pull(s)", self._pulled)
            return False, None
        self._pulled += 1
        return True, item

    def try_pull(self) -> bool:
        """buffer one more element; false means the source is exhausted"""
        if self._capacity is not None and len(self._buffer) >= self._capacity:
            raise ValueError(f"lookahead buffer is full (capacity {self._capacity})")
        got, item = self._pull()
        if got:
            self._buffer.append(item)
        return got

    def _check_depth(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"lookahead depth must be non-negative, got {n}")
        if self._capacity is not None and n >= self._capacity:
            raise ValueError(f"lookahead depth {n} exceeds buffer capacity {self._capacity}")

    def _fill_to(self, count: int) -> None:
        while len(self._buffer) < count:
            if not self.try_pull():
                raise ExhaustedError(count, len(self._buffer))

    # --- public api ---

    def peek(self, n: int = 0) -> T:
        """return the n-th unconsumed element without consuming it"""
        self._check_depth(n)
        self._fill_to(n + 1)
        return self._buffer[n]

    def peek_many(self, n: int) -> Tuple[T, ...]:
        """return the first n unconsumed elements without consuming them"""
        if n == 0:
            return ()
        self._check_depth(n - 1)
        self._fill_to(n)
        return tuple(self._buffer[i] for i in range(n))

    def has_next(self) -> bool:
        if self._buffer:
            return True
        return self.try_pull()

    def consume(self, n: int = 1) -> int:
        """
        discard the first n unconsumed elements and return how many were discarded.
        elements past the buffered prefix are pulled and dropped without being stored.
        raises ExhaustedError once everything that remained has been discarded.
        """
        if n < 0:
            raise ValueError(f"cannot consume a negative count, got {n}")
        discarded = 0
        try:
            while discarded < n and self._buffer:
                self._buffer.popleft()
                discarded += 1
            while discarded < n:
                got, _ = self._pull()
                if not got:
                    raise ExhaustedError(n, discarded)
                discarded += 1
        finally:
            # pulled == consumed + buffered holds even when the source raises mid-skip
            self._consumed += discarded
        return discarded

    def __iter__(self) -> 'LookaheadBuffer[T]':
        return self

    def __next__(self) -> T:
        if not self._buffer and not self.try_pull():
            raise StopIteration
        self._consumed += 1
        return self._buffer.popleft()

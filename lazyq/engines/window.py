from __future__ import annotations
import logging
from ..types import *
from ..errors import ExhaustedError
from .lookahead import LookaheadBuffer

logger = logging.getLogger(__name__)


class WindowEngine(Generic[T]):
    """
    fixed-size windows over a source, advancing by a stride after each window.

    stride < size overlaps windows, stride == size tiles them, stride > size skips the
    elements in between. windows are tuples copied out of the lookahead buffer.
    the trailing window shorter than size is dropped by default; TailPolicy.PARTIAL
    emits it as-is and Padded(fill) pads it up to size. a trailing window is only
    emitted when it holds an element no earlier window contained.
    """

    def __init__(self, source: Iterable[T], size: int, stride: int = 1,
                 tail: Tail = TailPolicy.DROP):
        config = WindowConfig(size, stride, tail)
        self._size = config.size
        self._stride = config.stride
        self._tail = config.tail
        self._buffer: LookaheadBuffer[T] = LookaheadBuffer(source, capacity=config.size)
        # leading buffered elements already handed out in an earlier window
        self._seen = 0
        # stride still owed for the last window handed out
        self._advance = 0
        self._done = False

    @classmethod
    def from_config(cls, source: Iterable[T], config: WindowConfig) -> 'WindowEngine[T]':
        return cls(source, config.size, config.stride, config.tail)

    @property
    def size(self) -> int: return self._size

    @property
    def stride(self) -> int: return self._stride

    @property
    def tail(self) -> Tail: return self._tail

    def _emit_tail(self) -> Tuple[T, ...]:
        self._done = True
        remaining = self._buffer.buffered
        if len(remaining) <= self._seen or self._tail is TailPolicy.DROP:
            logger.debug("no trailing window (remaining=%d, seen=%d, tail=%r)",
                         len(remaining), self._seen, self._tail)
            raise StopIteration
        if isinstance(self._tail, Padded):
            return remaining + (self._tail.fill_value,) * (self._size - len(remaining))
        return remaining

    def __iter__(self) -> 'WindowEngine[T]':
        return self

    def __next__(self) -> Tuple[T, ...]:
        if self._done:
            raise StopIteration
        if self._advance:
            # the previous window's stride is consumed here, after that window was returned
            advance, self._advance = self._advance, 0
            try:
                self._buffer.consume(advance)
            except ExhaustedError:
                # the stride ran off the end; nothing is left for another window
                self._done = True
                raise StopIteration
            except Exception:
                # a failure part-way through the stride leaves no window boundary to resume from
                self._done = True
                raise
        try:
            window = self._buffer.peek_many(self._size)
        except ExhaustedError:
            return self._emit_tail()
        self._advance = self._stride
        self._seen = max(self._size - self._stride, 0)
        return window

    def __repr__(self) -> str:
        return f"WindowEngine(size={self._size}, stride={self._stride}, tail={self._tail!r})"

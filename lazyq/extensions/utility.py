from __future__ import annotations
import typing
from ..types import *
from ..engines.lookahead import LookaheadBuffer
from ..engines.filtered import with_filtered

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def lookahead(self, capacity: Optional[int] = None) -> LookaheadBuffer[T]:
        """
        start a pass wrapped in a lookahead buffer, so callers can peek before consuming.
        the buffer owns the pass: iterate the buffer, not the enumerable, from here on.
        """
        return LookaheadBuffer(self._enumerable._iterate(), capacity)

    def with_filtered(self, f: Callable[[Iterator[T]], Iterable[U]],
                      is_divergent: Predicate[Any] = is_exception) -> 'Enumerable[Any]':
        """
        apply `f` to the normal values only and splice the divergent values
        (exceptions by default) back in where they were met.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: with_filtered(self._enumerable._iterate(), f, is_divergent))

    def intersperse(self, separator: T) -> 'Enumerable[T]':
        """intersperse separator between elements"""
        from ..enumerable import Enumerable

        def intersperse_data():
            for index, item in enumerate(self._enumerable._iterate()):
                if index:
                    yield separator
                yield item

        return Enumerable(intersperse_data)

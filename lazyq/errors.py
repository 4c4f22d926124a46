from __future__ import annotations

from typing import Any


class LazyqError(Exception):
    """base class for conditions raised by the library itself"""


class ExhaustedError(LazyqError, LookupError):
    """a peek or consume asked for more elements than the source had left."""

    requested: int
    available: int

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(f"requested {requested} element(s) but only {available} remain")


class UnfinishedGroupError(LazyqError, RuntimeError):
    """the grouping engine was advanced while the current group still had unread members."""

    key: Any

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"group with key {key!r} was not fully read before requesting the next group")


class StaleGroupError(LazyqError, RuntimeError):
    """a group was read after its engine had moved on to a later group."""

    generation: int
    current: int

    def __init__(self, key: Any, generation: int, current: int) -> None:
        self.key = key
        self.generation = generation
        self.current = current
        super().__init__(
            f"group with key {key!r} (generation {generation}) is no longer valid; "
            f"the engine is at generation {current}"
        )


__all__ = ("LazyqError", "ExhaustedError", "UnfinishedGroupError", "StaleGroupError")

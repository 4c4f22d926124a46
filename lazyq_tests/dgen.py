r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
seeded sequence data for the lazyq tests.
'''

import numpy as np
from faker import Faker
from lazyq import from_iterable, Enumerable
from typing import Any, Dict, Iterable, Iterator, List, Optional


class Generator:
    """schema interpreter plus sequence shapes the combinator tests lean on."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if schema.get("_qen_provider") == "choice":
                # convert numpy's choice result to a native python type
                choice_result = self._rng.choice(schema["from"])
                return choice_result.item() if hasattr(choice_result, 'item') else choice_result
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    # --- sequence shapes ---

    def ints(self, count: int, low: int = 0, high: int = 10) -> List[int]:
        """uniform integers in [low, high]"""
        return [int(x) for x in self._rng.integers(low, high, size=count, endpoint=True)]

    def runs(self, run_count: int, max_run: int = 4, keys: int = 3) -> List[int]:
        """
        integers arranged in runs of repeated values; neighbouring runs may share a
        value, so the number of maximal runs can be lower than run_count.
        """
        data: List[int] = []
        for _ in range(run_count):
            value = int(self._rng.integers(0, keys))
            data.extend([value] * int(self._rng.integers(1, max_run, endpoint=True)))
        return data

    def sorted_ints(self, count: int, low: int = 0, high: int = 20) -> List[int]:
        return sorted(self.ints(count, low, high))


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        data = [self._generator.create(self._schema) for _ in range(count)]
        return from_iterable(data)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


# --- instrumented sources ---

class CountingSource:
    """single-pass source that records how many elements have been pulled from it."""

    def __init__(self, data: Iterable[Any]):
        self._iterator = iter(data)
        self.pulls = 0
        self.exhausted_signals = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        try:
            item = next(self._iterator)
        except StopIteration:
            self.exhausted_signals += 1
            raise
        self.pulls += 1
        return item


class SourceFailure(Exception):
    """raised by FailingSource in place of an element."""


class FailingSource(CountingSource):
    """yields `data` and then raises SourceFailure on the next pull."""

    def __init__(self, data: Iterable[Any], error: Optional[Exception] = None):
        super().__init__(data)
        self.error = error or SourceFailure("source broke")

    def __next__(self) -> Any:
        try:
            return super().__next__()
        except StopIteration:
            raise self.error from None

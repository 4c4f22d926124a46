import operator
from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    List, Tuple, Protocol
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
A = TypeVar('A')
E = TypeVar('E')
T_co = TypeVar('T_co', covariant=True)

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Equivalence = Callable[[K, K], bool]


class SequenceSource(Protocol[T_co]):
    """anything that can produce its next element or raise StopIteration"""

    def __next__(self) -> T_co: ...


def identity(x: T) -> T:
    return x


def natural_order(a: Any, b: Any) -> int:
    """three-way comparison using the elements' own < and >"""
    return (a > b) - (a < b)


def is_exception(value: Any) -> bool:
    """default divergence test: exception instances travel as values"""
    return isinstance(value, Exception)


def _require_callable(value: Any, name: str) -> None:
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


# --- grouping ---

class UnfinishedGroupPolicy(Enum):
    """what the grouping engine does when advanced past a partly read group"""
    ERROR = 'error'
    AUTO_DRAIN = 'auto_drain'


class GroupingConfig:
    """construction arguments for a grouping engine"""

    def __init__(self, key_selector: KeySelector[T, K] = identity,
                 equivalence: Equivalence[K] = operator.eq,
                 unfinished: UnfinishedGroupPolicy = UnfinishedGroupPolicy.ERROR):
        _require_callable(key_selector, "key_selector")
        _require_callable(equivalence, "equivalence")
        if not isinstance(unfinished, UnfinishedGroupPolicy):
            raise ValueError(f"unknown unfinished group policy: {unfinished!r}")
        self.key_selector = key_selector
        self.equivalence = equivalence
        self.unfinished = unfinished

    def __repr__(self) -> str:
        return f"GroupingConfig(unfinished={self.unfinished.name})"


# --- merging ---

class MergeConfig:
    """construction arguments for a k-way merge"""

    def __init__(self, comparer: Comparer[T] = natural_order):
        _require_callable(comparer, "comparer")
        self.comparer = comparer

    def __repr__(self) -> str:
        return f"MergeConfig(comparer={getattr(self.comparer, '__name__', self.comparer)})"


# --- windowing ---

class TailPolicy(Enum):
    """how a trailing window shorter than the window size is handled"""
    DROP = 'drop'
    PARTIAL = 'partial'


class Padded:
    """tail policy that pads the trailing window with a fill value"""

    def __init__(self, fill_value: Any = None):
        self.fill_value = fill_value

    def __eq__(self, other) -> bool:
        return isinstance(other, Padded) and self.fill_value == other.fill_value

    def __hash__(self) -> int:
        return hash(('padded', self.fill_value))

    def __repr__(self) -> str:
        return f"Padded({self.fill_value!r})"


Tail = Union[TailPolicy, Padded]


class WindowConfig:
    """construction arguments for a windowing engine"""

    def __init__(self, size: int, stride: int = 1, tail: Tail = TailPolicy.DROP):
        if not isinstance(size, int) or size < 1:
            raise ValueError(f"window size must be a positive integer, got {size!r}")
        if not isinstance(stride, int) or stride < 1:
            raise ValueError(f"window stride must be a positive integer, got {stride!r}")
        if not isinstance(tail, (TailPolicy, Padded)):
            raise ValueError(f"unknown tail policy: {tail!r}")
        self.size = size
        self.stride = stride
        self.tail = tail

    def __repr__(self) -> str:
        return f"WindowConfig(size={self.size}, stride={self.stride}, tail={self.tail!r})"


# --- fallible fold ---

class Continue(Generic[A]):
    """step result: keep going with a new accumulator"""
    __slots__ = ('value',)

    def __init__(self, value: A):
        self.value = value

    def __eq__(self, other) -> bool:
        return type(other) is Continue and self.value == other.value

    def __repr__(self) -> str:
        return f"Continue({self.value!r})"


class StopSuccess(Generic[A]):
    """step result: stop now, the accumulator is final"""
    __slots__ = ('value',)

    def __init__(self, value: A):
        self.value = value

    def __eq__(self, other) -> bool:
        return type(other) is StopSuccess and self.value == other.value

    def __repr__(self) -> str:
        return f"StopSuccess({self.value!r})"


class StopError(Generic[E]):
    """step result: stop now with a caller-defined error value"""
    __slots__ = ('error',)

    def __init__(self, error: E):
        self.error = error

    def __eq__(self, other) -> bool:
        return type(other) is StopError and self.error == other.error

    def __repr__(self) -> str:
        return f"StopError({self.error!r})"


Step = Union[Continue[A], StopSuccess[A], StopError[E]]
StepFunction = Callable[[A, T], Step]


class Completion(Enum):
    """why a fold finished"""
    EXHAUSTED = 'exhausted'
    STOPPED_SUCCESS = 'stopped_success'
    STOPPED_ERROR = 'stopped_error'


class FoldOutcome(Generic[A, E]):
    """final accumulator of a fold together with the reason it finished"""

    def __init__(self, value: A, completion: Completion, error: Optional[E] = None):
        self.value = value
        self.completion = completion
        self.error = error

    @property
    def ran_to_exhaustion(self) -> bool: return self.completion is Completion.EXHAUSTED

    @property
    def stopped_by_success(self) -> bool: return self.completion is Completion.STOPPED_SUCCESS

    @property
    def stopped_by_error(self) -> bool: return self.completion is Completion.STOPPED_ERROR

    @property
    def ok(self) -> bool: return not self.stopped_by_error

    def __eq__(self, other) -> bool:
        return (isinstance(other, FoldOutcome) and self.completion is other.completion
                and self.value == other.value and self.error == other.error)

    def __repr__(self) -> str:
        if self.stopped_by_error:
            return f"FoldOutcome(value={self.value!r}, completion={self.completion.name}, error={self.error!r})"
        return f"FoldOutcome(value={self.value!r}, completion={self.completion.name})"


class FoldConfig(Generic[A, T]):
    """construction arguments for a fallible fold"""

    def __init__(self, initial: A, step: StepFunction):
        _require_callable(step, "step")
        self.initial = initial
        self.step = step

    def __repr__(self) -> str:
        return f"FoldConfig(initial={self.initial!r})"

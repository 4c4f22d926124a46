import typing
from itertools import repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable; a one-shot iterator gives a one-pass enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: data)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: _repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence using a function, calling it only as elements are pulled"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (generator_func() for _ in range(count)))

def merge(*sources: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
    """k-way merge of already sorted sources; ties go to the earlier source"""
    from .enumerable import Enumerable
    from .engines.merge import MergeEngine
    if not sources:
        raise ValueError("merge requires at least one source")
    return Enumerable(lambda: MergeEngine(sources, comparer or natural_order))

# --- aliases ---
lazyq = from_iterable
P = from_iterable

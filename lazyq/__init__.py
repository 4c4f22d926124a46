r"""
'   _
'  | | __ _ _____   _  __ _
'  | |/ _` |_  / | | |/ _` |
'  | | (_| |/ /| |_| | (_| |
'  |_|\__,_/___|\__, |\__, |
'               |___/    |_|
"""

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    merge,
    lazyq,
    P,
)

# expose the engines
from .engines import (
    LookaheadBuffer,
    GroupingEngine,
    Group,
    MergeEngine,
    WindowEngine,
    FallibleFold,
    try_fold,
    BreakingIterator,
    with_folding,
    with_filtered,
)

# expose configuration and result types
from .types import (
    SequenceSource,
    GroupingConfig,
    MergeConfig,
    WindowConfig,
    FoldConfig,
    UnfinishedGroupPolicy,
    TailPolicy,
    Padded,
    Continue,
    StopSuccess,
    StopError,
    Completion,
    FoldOutcome,
    natural_order,
    is_exception,
)

# expose errors
from .errors import (
    LazyqError,
    ExhaustedError,
    UnfinishedGroupError,
    StaleGroupError,
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "merge",
    "lazyq",
    "P",
    "LookaheadBuffer",
    "GroupingEngine",
    "Group",
    "MergeEngine",
    "WindowEngine",
    "FallibleFold",
    "try_fold",
    "BreakingIterator",
    "with_folding",
    "with_filtered",
    "SequenceSource",
    "GroupingConfig",
    "MergeConfig",
    "WindowConfig",
    "FoldConfig",
    "UnfinishedGroupPolicy",
    "TailPolicy",
    "Padded",
    "Continue",
    "StopSuccess",
    "StopError",
    "Completion",
    "FoldOutcome",
    "natural_order",
    "is_exception",
    "LazyqError",
    "ExhaustedError",
    "UnfinishedGroupError",
    "StaleGroupError",
]

from .lookahead import LookaheadBuffer
from .grouping import GroupingEngine, Group
from .merge import MergeEngine
from .window import WindowEngine
from .fold import FallibleFold, try_fold
from .breaking import BreakingIterator, with_folding
from .filtered import with_filtered

__all__ = [
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
]

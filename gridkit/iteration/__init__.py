"""Queue-driven traversal: BFS, DFS and best-first search from one loop."""

from .states import FindState, FoldState, IterState
from .queues import FifoQueue, LifoQueue, PriorityQueue, Queue
from .traversal import (
    recursive_find,
    recursive_fold,
    recursive_iter,
    try_recursive_find,
    try_recursive_fold,
)
from .dedup import DuplicateFilter
from .search_depth import SearchDepth

__all__ = [
    "FoldState",
    "FindState",
    "IterState",
    "Queue",
    "FifoQueue",
    "LifoQueue",
    "PriorityQueue",
    "recursive_fold",
    "try_recursive_fold",
    "recursive_find",
    "try_recursive_find",
    "recursive_iter",
    "DuplicateFilter",
    "SearchDepth",
]

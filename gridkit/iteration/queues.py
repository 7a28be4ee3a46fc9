"""Frontier containers for the traversal engine.

Every queue supports ``push``, ``pop`` and ``extend`` and is falsy when
empty. ``pop`` on an empty queue returns ``None``; the engine tests emptiness
with ``len`` so ``None`` remains a legal item.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
import heapq
from typing import Any, Callable, Deque, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from . import traversal

I = TypeVar("I")
S = TypeVar("S")


class Queue(ABC, Generic[I]):
    """Minimal push/pop container driven by :mod:`gridkit.iteration.traversal`."""

    @abstractmethod
    def push(self, item: I) -> None:
        ...

    @abstractmethod
    def pop(self) -> Optional[Any]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def extend(self, items: Iterable[I]) -> None:
        for item in items:
            self.push(item)

    def __bool__(self) -> bool:
        return len(self) > 0

    # engine entry points ----------------------------------------------------

    def recursive_fold(self, initial_state: S, folder: Callable[[S, Any], Any]) -> S:
        return traversal.recursive_fold(self, initial_state, folder)

    def try_recursive_fold(self, initial_state: S, folder: Callable[[S, Any], Any]) -> S:
        return traversal.try_recursive_fold(self, initial_state, folder)

    def recursive_find(self, finder: Callable[[Any], Any]) -> Any:
        return traversal.recursive_find(self, finder)

    def try_recursive_find(self, finder: Callable[[Any], Any]) -> Any:
        return traversal.try_recursive_find(self, finder)

    def recursive_iter(self, action: Callable[[Any], Any]) -> None:
        traversal.recursive_iter(self, action)

    def filter_duplicates(self, key: Optional[Callable[[Any], Hashable]] = None) -> "Queue[I]":
        """Wrap this queue so items whose key was already popped are skipped."""
        from .dedup import DuplicateFilter

        return DuplicateFilter(self, key=key)


class FifoQueue(Queue[I]):
    """First in, first out: breadth-first order."""

    def __init__(self, items: Iterable[I] = ()) -> None:
        self._items: Deque[I] = deque(items)

    def push(self, item: I) -> None:
        self._items.append(item)

    def pop(self) -> Optional[I]:
        return self._items.popleft() if self._items else None

    def extend(self, items: Iterable[I]) -> None:
        self._items.extend(items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"FifoQueue({list(self._items)!r})"


class LifoQueue(Queue[I]):
    """Last in, first out: depth-first order."""

    def __init__(self, items: Iterable[I] = ()) -> None:
        self._items: List[I] = list(items)

    def push(self, item: I) -> None:
        self._items.append(item)

    def pop(self) -> Optional[I]:
        return self._items.pop() if self._items else None

    def extend(self, items: Iterable[I]) -> None:
        self._items.extend(items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LifoQueue({self._items!r})"


class _HeapEntry:
    __slots__ = ("priority", "item")

    def __init__(self, item: Any, priority: Any) -> None:
        self.item = item
        self.priority = priority

    def __lt__(self, other: "_HeapEntry") -> bool:
        # heapq is a min-heap; the highest priority must surface first
        return self.priority > other.priority


class PriorityQueue(Queue[Tuple[I, Any]]):
    """Max-priority queue of ``(item, priority)`` pairs.

    ``pop`` returns the pair with the greatest priority. Equal priorities come
    out in no particular order. For shortest-path searches push the negated
    cost.
    """

    def __init__(self, items: Iterable[Tuple[I, Any]] = ()) -> None:
        self._heap: List[_HeapEntry] = [_HeapEntry(item, priority) for item, priority in items]
        heapq.heapify(self._heap)

    def push(self, entry: Tuple[I, Any]) -> None:
        item, priority = entry
        heapq.heappush(self._heap, _HeapEntry(item, priority))

    def pop(self) -> Optional[Tuple[I, Any]]:
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        return entry.item, entry.priority

    def peek(self) -> Optional[Tuple[I, Any]]:
        if not self._heap:
            return None
        return self._heap[0].item, self._heap[0].priority

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(len={len(self._heap)})"


__all__ = ["Queue", "FifoQueue", "LifoQueue", "PriorityQueue"]

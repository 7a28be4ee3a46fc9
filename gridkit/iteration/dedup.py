"""Opt-in at-most-once visitation for cyclic state spaces."""

from __future__ import annotations

from typing import Any, Callable, Hashable, List, Optional, Set

from .queues import FifoQueue, Queue


def _default_key(item: Any) -> Hashable:
    return item


class DuplicateFilter(Queue[Any]):
    """Queue decorator that drops items whose key has already been popped.

    Keys are recorded when an item is popped, not when it is pushed, so the
    first occurrence in queue order wins. With a :class:`PriorityQueue` that
    is the best-priority occurrence, which is what Dijkstra needs; pass
    ``key=lambda entry: entry[0]`` to ignore the priority.

    A skipped item is never handed to the visitor, which has the same effect
    as a visitor answering ``Leaf`` without changing its state.
    """

    def __init__(self, inner: Queue[Any], key: Optional[Callable[[Any], Hashable]] = None) -> None:
        self.inner = inner
        self.key = key or _default_key
        self.seen: Set[Hashable] = set()
        self._next: List[Any] = []

    def _settle(self) -> None:
        # Pull the next unseen item forward so len() only counts real work.
        while not self._next and self.inner:
            item = self.inner.pop()
            if self.key(item) not in self.seen:
                self._next.append(item)

    def _unsettle(self) -> None:
        # a FIFO head stays ahead of anything pushed later
        if self._next and not isinstance(self.inner, FifoQueue):
            self.inner.push(self._next.pop())

    def push(self, item: Any) -> None:
        if self.key(item) in self.seen:
            return
        self._unsettle()
        self.inner.push(item)

    def pop(self) -> Optional[Any]:
        self._settle()
        if not self._next:
            return None
        item = self._next.pop()
        self.seen.add(self.key(item))
        return item

    def __len__(self) -> int:
        self._settle()
        return len(self.inner) + len(self._next)

    def __repr__(self) -> str:
        return f"DuplicateFilter({self.inner!r}, seen={len(self.seen)})"


__all__ = ["DuplicateFilter"]

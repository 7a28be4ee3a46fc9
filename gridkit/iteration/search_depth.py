"""Search nodes that remember how far they are from the start."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

S = TypeVar("S")


class SearchDepth(Generic[S]):
    """A ``state`` paired with its ``depth``.

    Equality and hashing consider only ``state``, so a
    :class:`~gridkit.iteration.dedup.DuplicateFilter` treats the same state
    reached at different depths as a duplicate.
    """

    __slots__ = ("state", "depth")

    def __init__(self, state: S, depth: int = 0) -> None:
        self.state = state
        self.depth = depth

    def with_state(self, state: S) -> "SearchDepth[S]":
        """The child node one level deeper."""
        return SearchDepth(state, self.depth + 1)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SearchDepth):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __repr__(self) -> str:
        return f"SearchDepth({self.state!r}, depth={self.depth})"


__all__ = ["SearchDepth"]

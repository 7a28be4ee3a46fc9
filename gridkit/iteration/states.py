"""Outcomes a visitor returns to the traversal engine.

Each namespace mirrors one entry point: a visitor for ``recursive_fold``
returns a :class:`FoldState` member, one for ``recursive_find`` a
:class:`FindState` member, and one for ``recursive_iter`` an
:class:`IterState` member. ``Branch`` carries the items to push next.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


class FoldState:
    @dataclass(frozen=True)
    class Branch:
        """Keep going: replace the accumulator and push ``items``."""

        state: Any
        items: Iterable[Any] = ()

    @dataclass(frozen=True)
    class Leaf:
        """Replace the accumulator without expanding this item."""

        state: Any


class FindState:
    @dataclass(frozen=True)
    class Branch:
        items: Iterable[Any] = ()

    @dataclass(frozen=True)
    class Result:
        """Stop the search and return ``value``."""

        value: Any

    @dataclass(frozen=True)
    class Leaf:
        pass


class IterState:
    @dataclass(frozen=True)
    class Branch:
        items: Iterable[Any] = ()

    @dataclass(frozen=True)
    class Leaf:
        pass


__all__ = ["FoldState", "FindState", "IterState"]

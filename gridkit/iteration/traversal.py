"""Worklist traversal: pop an item, ask a visitor what to do, repeat.

The queue decides the order. A :class:`~gridkit.iteration.queues.FifoQueue`
gives breadth-first search, a :class:`~gridkit.iteration.queues.LifoQueue`
depth-first search and a :class:`~gridkit.iteration.queues.PriorityQueue`
best-first search such as Dijkstra. Nothing here remembers visited items; wrap
the queue in a :class:`~gridkit.iteration.dedup.DuplicateFilter` when states
can repeat.

Visitor exceptions propagate unchanged. The ``try_`` variants additionally
accept an ``Exception`` instance as a return value and raise it, so a
visitor can report failure without unwinding through its own frames.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from .. import config
from .states import FindState, FoldState, IterState

if TYPE_CHECKING:
    from .queues import Queue

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

S = TypeVar("S")
I = TypeVar("I")
R = TypeVar("R")


def _unexpected(outcome: Any, expected: type) -> TypeError:
    return TypeError(
        f"visitor returned {type(outcome).__name__}, expected one of "
        f"{expected.__name__}.Branch/Leaf"
    )


def _raise_returned(outcome: Any) -> Any:
    if isinstance(outcome, BaseException):
        raise outcome
    return outcome


def _trace(kind: str, visited: int, item: Any) -> None:
    if config.TRACE_ENABLED:
        logger.debug("%s step", kind, extra={"visited": visited, "item": repr(item)})


def _fold(queue: "Queue[I]", state: S, folder: Callable[[S, I], Any], fallible: bool) -> S:
    visited = 0
    while queue:
        item = queue.pop()
        visited += 1
        _trace("fold", visited, item)
        outcome = folder(state, item)
        if fallible:
            outcome = _raise_returned(outcome)
        if isinstance(outcome, FoldState.Branch):
            state = outcome.state
            queue.extend(outcome.items)
        elif isinstance(outcome, FoldState.Leaf):
            state = outcome.state
        else:
            raise _unexpected(outcome, FoldState)
    logger.debug("fold complete", extra={"visited": visited})
    return state


def recursive_fold(queue: "Queue[I]", initial_state: S, folder: Callable[[S, I], Any]) -> S:
    """Thread ``initial_state`` through every visited item and return the final state.

    ``folder(state, item)`` returns ``FoldState.Branch(new_state, items)`` to
    push more work or ``FoldState.Leaf(new_state)`` to stop expanding this
    item. An empty queue returns ``initial_state`` untouched.
    """
    return _fold(queue, initial_state, folder, fallible=False)


def try_recursive_fold(queue: "Queue[I]", initial_state: S, folder: Callable[[S, I], Any]) -> S:
    """Like :func:`recursive_fold`, but an exception returned by ``folder`` is raised.

    The traversal stops at the first failure and no partial state is returned.
    """
    return _fold(queue, initial_state, folder, fallible=True)


def _find(queue: "Queue[I]", finder: Callable[[I], Any], fallible: bool) -> Optional[R]:
    visited = 0
    while queue:
        item = queue.pop()
        visited += 1
        _trace("find", visited, item)
        outcome = finder(item)
        if fallible:
            outcome = _raise_returned(outcome)
        if isinstance(outcome, FindState.Result):
            logger.debug("find complete", extra={"visited": visited, "result": True})
            return outcome.value
        if isinstance(outcome, FindState.Branch):
            queue.extend(outcome.items)
        elif not isinstance(outcome, FindState.Leaf):
            raise _unexpected(outcome, FindState)
    logger.debug("find complete", extra={"visited": visited, "result": False})
    return None


def recursive_find(queue: "Queue[I]", finder: Callable[[I], Any]) -> Optional[R]:
    """Return the value of the first ``FindState.Result``, or ``None`` once the queue empties.

    Items still pending when a result is found are left in the queue.
    """
    return _find(queue, finder, fallible=False)


def try_recursive_find(queue: "Queue[I]", finder: Callable[[I], Any]) -> Optional[R]:
    return _find(queue, finder, fallible=True)


def recursive_iter(queue: "Queue[I]", action: Callable[[I], Any]) -> None:
    """Visit items for their side effects until the queue is empty."""
    visited = 0
    while queue:
        item = queue.pop()
        visited += 1
        _trace("iter", visited, item)
        outcome = action(item)
        if isinstance(outcome, IterState.Branch):
            queue.extend(outcome.items)
        elif not isinstance(outcome, IterState.Leaf):
            raise _unexpected(outcome, IterState)
    logger.debug("iter complete", extra={"visited": visited})


__all__ = [
    "recursive_fold",
    "try_recursive_fold",
    "recursive_find",
    "try_recursive_find",
    "recursive_iter",
]

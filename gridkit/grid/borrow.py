"""Runtime bookkeeping that keeps mutable grid views exclusive.

Every view registers with the ledger of the grid it was cut from. A crop
keeps a reference to the view it was cut from and never conflicts with that
view or any view further up its chain. Any other overlap involving a
mutable view is rejected, siblings cut from the same parent included.
Views leave the ledger when released or garbage collected.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator
import weakref

from .. import config
from ..errors import BorrowError
from ..geometry import Point2D

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _is_ancestor(candidate: Any, view: Any) -> bool:
    parent = view.parent
    while parent is not None:
        if parent is candidate:
            return True
        parent = parent.parent
    return False


class BorrowLedger:
    """Live views of one grid."""

    def __init__(self) -> None:
        self._live: "weakref.WeakSet[Any]" = weakref.WeakSet()

    def __len__(self) -> int:
        return len(self._live)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._live))

    def register(self, view: Any) -> None:
        """Track ``view``, refusing it if it would alias a live mutable view."""
        if config.BORROW_CHECKS_ENABLED:
            for other in self:
                if _is_ancestor(other, view):
                    continue
                if not (other.mutable or view.mutable):
                    continue
                if other.absolute_area.overlaps(view.absolute_area):
                    logger.debug(
                        "borrow conflict",
                        extra={
                            "requested": str(view.absolute_area),
                            "held": str(other.absolute_area),
                            "mutable": view.mutable,
                        },
                    )
                    raise BorrowError(
                        f"{view.absolute_area} overlaps a live "
                        f"{'mutable ' if other.mutable else ''}view of {other.absolute_area}"
                    )
        self._live.add(view)

    def release(self, view: Any) -> None:
        self._live.discard(view)

    def check_write(self, point: Point2D) -> None:
        """Refuse a grid write to ``point`` while a live mutable view covers it."""
        if not config.BORROW_CHECKS_ENABLED:
            return
        for other in self:
            if other.mutable and other.absolute_area.contains(point):
                logger.debug("blocked write", extra={"point": str(point), "held": str(other.absolute_area)})
                raise BorrowError(f"{point} is held by a live mutable view of {other.absolute_area}")


__all__ = ["BorrowLedger"]

"""Ordered per-bar callback lists with subscription ids."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tick_bars.types import BarHandler

if TYPE_CHECKING:
    from tick_bars.bar import Bar

logger = logging.getLogger(__name__)

UPDATE = "update"
FINISH = "finish"


class BarEvents:
    """Subscribers keyed by event name, dispatched in subscription order.

    Handlers are called as ``handler(context, bar)``. Each call is isolated:
    an exception is logged and the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[tuple[int, BarHandler, Any]]] = {}
        self._next_id: int = 0

    def subscribe(self, event: str, handler: BarHandler, context: Any = None) -> int:
        sub_id = self._next_id
        self._next_id += 1
        self._subscribers.setdefault(event, []).append((sub_id, handler, context))
        return sub_id

    def unsubscribe(self, subscription_id: int) -> bool:
        for entries in self._subscribers.values():
            for i, (sub_id, _, _) in enumerate(entries):
                if sub_id == subscription_id:
                    del entries[i]
                    return True
        return False

    def count(self, event: str) -> int:
        return len(self._subscribers.get(event, ()))

    def emit(self, event: str, bar: Bar) -> None:
        # Snapshot so handlers may subscribe or unsubscribe while dispatching.
        for sub_id, handler, context in list(self._subscribers.get(event, ())):
            try:
                handler(context, bar)
            except Exception:
                logger.exception(
                    "%s callback %d of bar %r failed", event, sub_id, bar.id
                )

    def clear(self) -> None:
        self._subscribers.clear()

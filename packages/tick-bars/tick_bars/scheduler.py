"""BarScheduler - one recurring timer shared by every bar of a registry."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_bars.registry import BarRegistry
    from tick_bars.window import WindowSystem

logger = logging.getLogger(__name__)

# Tolerance for deltas accumulated from float timestamps.
_EPSILON = 1e-9


class BarScheduler:
    """Advances running bars by measured wall-clock time.

    Each tick moves every running bar forward by the game time since the
    previous tick. The first tick after a (re)start has nothing to measure
    against and assumes one ``period``. A bar whose remaining time does not
    exceed the delta is stopped instead of advanced.
    """

    def __init__(self, registry: BarRegistry, windows: WindowSystem, period: float) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self._registry = registry
        self._windows = windows
        self._period = period
        self._last_tick: float | None = None
        self._timer = windows.create_timer(period, True, self.process)

    @property
    def period(self) -> float:
        return self._period

    @property
    def last_tick(self) -> float | None:
        return self._last_tick

    @property
    def running(self) -> bool:
        return self._timer.is_started()

    def start(self) -> None:
        """Start ticking. No-op when already running or nothing is registered."""
        if self.running or len(self._registry) == 0:
            return
        self._timer.start()
        logger.debug("bar scheduler started")

    def stop(self) -> None:
        if self.running:
            self._timer.stop()
            logger.debug("bar scheduler stopped")
        self._last_tick = None

    def process(self) -> None:
        """Run one tick. Called by the recurring timer."""
        now = self._windows.game_time()
        delta = now - self._last_tick if self._last_tick is not None else self._period

        for bar in self._registry.bars():
            # Stopped by a callback earlier in this tick.
            if bar.released or not bar.is_running:
                continue
            if bar.remaining <= delta + _EPSILON:
                bar.stop()
            else:
                bar.set_value(bar.elapsed + delta)
                bar._notify_update()

        if len(self._registry) == 0:
            self.stop()
        else:
            self._last_tick = now

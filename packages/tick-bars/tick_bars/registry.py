"""BarRegistry - owns the bars of one UI context and their scheduler."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tick_bars.bar import Bar
from tick_bars.config import BarsConfig
from tick_bars.scheduler import BarScheduler
from tick_bars.template import BAR_TEMPLATE, FormDef
from tick_bars.types import BarId, TemplateError

if TYPE_CHECKING:
    from tick_bars.window import Window, WindowSystem

logger = logging.getLogger(__name__)


class BarRegistry:
    """Maps bar ids to live bars. At most one bar exists per id."""

    def __init__(
        self,
        windows: WindowSystem,
        config: BarsConfig | None = None,
        template: FormDef = BAR_TEMPLATE,
    ) -> None:
        self._windows = windows
        self._template = template
        self._config = config if config is not None else BarsConfig()
        self._bars: dict[BarId, Bar] = {}
        self._scheduler = BarScheduler(self, windows, self._config.tick_period)

    @property
    def config(self) -> BarsConfig:
        return self._config

    @property
    def scheduler(self) -> BarScheduler:
        return self._scheduler

    def __len__(self) -> int:
        return len(self._bars)

    def __contains__(self, bar_id: Any) -> bool:
        return bar_id in self._bars

    def bars(self) -> list[Bar]:
        """Registered bars in registration order."""
        return list(self._bars.values())

    def create_bar(
        self,
        bar_id: BarId,
        parent: Window | None,
        width: int | None = None,
        height: int | None = None,
    ) -> Bar:
        """Build and register a new bar, replacing any bar with the same id.

        The replaced bar is stopped first, so its finish callbacks run
        before the new bar exists.
        """
        existing = self._bars.get(bar_id)
        if existing is not None:
            logger.debug("replacing bar %r", bar_id)
            existing.stop()

        frame = self._windows.load_form(self._template, parent, {"bar_id": bar_id})
        try:
            bar = Bar(bar_id, frame, self, self._config)
        except TemplateError:
            frame.destroy()
            raise

        if width is not None:
            bar.set_width(width)
        if height is not None:
            bar.set_height(height)

        self._bars[bar_id] = bar
        logger.debug("created bar %r", bar_id)
        return bar

    def get_bar(self, bar_id: BarId) -> Bar | None:
        return self._bars.get(bar_id)

    def stop_all(self) -> None:
        """Stop every registered bar, in registration order."""
        for bar in self.bars():
            bar.stop()

    def _discard(self, bar: Bar) -> None:
        """Unregister ``bar`` unless its id now belongs to a replacement."""
        if self._bars.get(bar.id) is bar:
            del self._bars[bar.id]
        if not self._bars:
            self._scheduler.stop()

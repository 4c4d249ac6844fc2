"""Bar - one timed countdown/count-up widget."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tick_bars.config import BarsConfig
from tick_bars.events import FINISH, UPDATE, BarEvents
from tick_bars.template import DURATION, ICON, LABEL, PROGRESS
from tick_bars.types import BarHandler, BarId, TemplateError

if TYPE_CHECKING:
    from tick_bars.registry import BarRegistry
    from tick_bars.window import ProgressWindow, Window

logger = logging.getLogger(__name__)


def _child(frame: Window, name: str) -> Any:
    child = frame.find_child(name)
    if child is None:
        raise TemplateError(name)
    return child


class Bar:
    """A timer bar living in a registry.

    Bars are built by ``BarRegistry.create_bar``; every method may be used
    on a running bar.
    """

    def __init__(
        self,
        bar_id: BarId,
        frame: Window,
        registry: BarRegistry,
        config: BarsConfig,
    ) -> None:
        self.id = bar_id
        self._registry = registry
        self._config = config

        self._frame = frame
        self._label: Window = _child(frame, LABEL)
        self._duration_text: Window = _child(frame, DURATION)
        self._icon: Window = _child(frame, ICON)
        self._progress: ProgressWindow = _child(frame, PROGRESS)

        self.duration: float = 0.0
        self.elapsed: float = 0.0
        self.remaining: float = 0.0
        self.fill: bool = False
        self.show_remaining: bool = True
        self.is_running: bool = False
        self._released: bool = False
        self._events = BarEvents()

    def __repr__(self) -> str:
        return (
            f"Bar(id={self.id!r}, elapsed={self.elapsed:.2f}, "
            f"duration={self.duration:.2f}, running={self.is_running})"
        )

    @property
    def frame(self) -> Window:
        return self._frame

    @property
    def released(self) -> bool:
        """True once ``stop`` has torn the bar down."""
        return self._released

    # --- Lifecycle ---

    def start(self) -> None:
        if self._released:
            logger.debug("ignoring start of released bar %r", self.id)
            return
        self.is_running = True
        self._registry.scheduler.start()

    def stop(self) -> None:
        """Fire finish callbacks, destroy the frame and unregister.

        Safe on a bar that never started. A second call, including one made
        from a finish callback, does nothing.
        """
        if self._released:
            return
        self._released = True
        self.is_running = False
        self._events.emit(FINISH, self)
        self._events.clear()
        self._frame.destroy()
        self._registry._discard(self)
        logger.debug("stopped bar %r", self.id)

    # --- Timing ---

    def set_duration(self, seconds: float) -> None:
        self.duration = seconds
        self.remaining = max(0.0, self.duration - self.elapsed)
        self._progress.set_max(self.duration)
        self.set_value(self.elapsed)

    def set_value(self, elapsed: float) -> None:
        """Set elapsed seconds and re-render progress and remaining time."""
        self.elapsed = elapsed
        self.remaining = max(0.0, self.duration - self.elapsed)

        self._progress.set_progress(self.elapsed if self.fill else self.remaining)
        if self.show_remaining:
            self._duration_text.set_text(self._config.time_format.format(self.remaining))

    def set_fill(self, fill: bool) -> None:
        """Fill up with elapsed time instead of draining with remaining time."""
        self.fill = fill
        self.set_value(self.elapsed)

    def set_time_visibility(self, visible: bool) -> None:
        self._duration_text.show(visible)
        self.show_remaining = visible

    # --- Layout ---

    def set_width(self, width: int) -> None:
        left, top, _, bottom = self._frame.get_anchor_offsets()
        self._frame.set_anchor_offsets(left, top, left + width, bottom)

    def set_height(self, height: int | None = None) -> None:
        """Resize the frame and lay out icon, progress and label.

        Without an argument the height is taken from the icon, which is how
        icon changes re-run the layout. The icon is square when it has a
        sprite and collapses to zero width otherwise.
        """
        if height is None:
            height = self._icon.get_anchor_offsets()[3]

        left, top, right, _ = self._frame.get_anchor_offsets()
        self._frame.set_anchor_offsets(left, top, right, top + height)

        left, top, _, _ = self._icon.get_anchor_offsets()
        if self._icon.get_sprite() != "":
            self._icon.set_anchor_offsets(left, top, height, height)
            icon_width = height
        else:
            self._icon.set_anchor_offsets(left, top, 0, height)
            icon_width = 0

        _, top, right, bottom = self._progress.get_anchor_offsets()
        self._progress.set_anchor_offsets(icon_width, top, right, bottom)

        _, top, right, bottom = self._label.get_anchor_offsets()
        self._label.set_anchor_offsets(
            icon_width + self._config.label_inset, top, right, bottom
        )

    # --- Styling ---

    def set_icon(self, sprite: str | None = None) -> None:
        self._icon.set_sprite(sprite or "")
        self.set_height()

    def set_label(self, text: str) -> None:
        self._label.set_text(text)

    def set_font(self, font: str) -> None:
        self._label.set_font(font)
        self._duration_text.set_font(font)

    def set_text_color(self, color: Any) -> None:
        self._label.set_text_color(color)
        self._duration_text.set_text_color(color)

    def set_texture_bg(self, sprite: str | None, color: Any) -> None:
        if sprite:
            self._frame.set_sprite(sprite)
        self._frame.set_bg_color(color)

    def set_texture_bar(self, sprite: str | None, color: Any) -> None:
        if sprite:
            self._progress.set_full_sprite(sprite)
        self._progress.set_bar_color(color)

    # --- Callbacks ---

    def add_on_update_callback(self, handler: BarHandler, context: Any = None) -> int:
        """Call ``handler(context, bar)`` after every tick that advances the bar."""
        return self._events.subscribe(UPDATE, handler, context)

    def add_on_finish_callback(self, handler: BarHandler, context: Any = None) -> int:
        """Call ``handler(context, bar)`` once when the bar stops."""
        return self._events.subscribe(FINISH, handler, context)

    def remove_callback(self, subscription_id: int) -> bool:
        return self._events.unsubscribe(subscription_id)

    def _notify_update(self) -> None:
        self._events.emit(UPDATE, self)

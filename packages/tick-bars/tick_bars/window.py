"""Contract of the host windowing system bars are drawn with."""
from __future__ import annotations

from typing import Any, Callable, Protocol

from tick_bars.template import FormDef

Offsets = tuple[int, int, int, int]


class Window(Protocol):
    """A node of a loaded window tree."""

    def find_child(self, name: str) -> Window | None: ...

    def destroy(self) -> None: ...

    def get_data(self) -> Any: ...

    def set_data(self, data: Any) -> None: ...

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def set_font(self, font: str) -> None: ...

    def set_text_color(self, color: Any) -> None: ...

    def get_sprite(self) -> str: ...

    def set_sprite(self, sprite: str) -> None: ...

    def set_bg_color(self, color: Any) -> None: ...

    def show(self, visible: bool) -> None: ...

    def is_shown(self) -> bool: ...

    def get_anchor_offsets(self) -> Offsets: ...

    def set_anchor_offsets(self, left: int, top: int, right: int, bottom: int) -> None: ...


class ProgressWindow(Window, Protocol):
    """A window that renders a filled fraction of ``progress / max``."""

    def set_max(self, value: float) -> None: ...

    def set_progress(self, value: float) -> None: ...

    def set_full_sprite(self, sprite: str) -> None: ...

    def set_bar_color(self, color: Any) -> None: ...


class RecurringTimer(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...

    def is_started(self) -> bool: ...


class WindowSystem(Protocol):
    """Factory for windows, timers and the game clock.

    Timers returned by ``create_timer`` are created stopped.
    """

    def load_form(self, form: FormDef, parent: Window | None, data: Any = None) -> Window: ...

    def game_time(self) -> float: ...

    def create_timer(
        self, period: float, repeat: bool, handler: Callable[[], None]
    ) -> RecurringTimer: ...

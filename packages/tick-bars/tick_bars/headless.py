"""In-memory WindowSystem with a manually advanced clock."""
from __future__ import annotations

from typing import Any, Callable

from tick_bars.template import PROGRESS_BAR, FormDef

# Tolerance when comparing accumulated float timestamps.
_EPSILON = 1e-9


class HeadlessWindow:
    """Records every property set on it; draws nothing."""

    def __init__(self, form: FormDef, parent: HeadlessWindow | None = None) -> None:
        self.name = form.name
        self.kind = form.kind
        self.parent = parent
        self.children: list[HeadlessWindow] = []
        self.anchor_points = form.anchor_points
        self.offsets: tuple[int, int, int, int] = form.anchor_offsets
        self.props: dict[str, Any] = dict(form.props)
        self.text = ""
        self.font: str | None = None
        self.text_color: Any = None
        self.sprite: str = form.props.get("sprite", "")
        self.bg_color: Any = form.props.get("bg_color")
        self.shown = True
        self.data: Any = None
        self.destroyed = False
        self.on_destroy: Callable[[HeadlessWindow], None] | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def find_child(self, name: str) -> HeadlessWindow | None:
        for child in self.children:
            if child.name == name:
                return child
            found = child.find_child(name)
            if found is not None:
                return found
        return None

    def destroy(self) -> None:
        if self.destroyed:
            return
        for child in list(self.children):
            child.destroy()
        self.destroyed = True
        if self.parent is not None and self in self.parent.children:
            self.parent.children.remove(self)
        if self.on_destroy is not None:
            self.on_destroy(self)

    def get_data(self) -> Any:
        return self.data

    def set_data(self, data: Any) -> None:
        self.data = data

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def set_font(self, font: str) -> None:
        self.font = font

    def set_text_color(self, color: Any) -> None:
        self.text_color = color

    def get_sprite(self) -> str:
        return self.sprite

    def set_sprite(self, sprite: str) -> None:
        self.sprite = sprite

    def set_bg_color(self, color: Any) -> None:
        self.bg_color = color

    def show(self, visible: bool) -> None:
        self.shown = visible

    def is_shown(self) -> bool:
        return self.shown

    def get_anchor_offsets(self) -> tuple[int, int, int, int]:
        return self.offsets

    def set_anchor_offsets(self, left: int, top: int, right: int, bottom: int) -> None:
        self.offsets = (left, top, right, bottom)


class HeadlessProgressWindow(HeadlessWindow):
    def __init__(self, form: FormDef, parent: HeadlessWindow | None = None) -> None:
        super().__init__(form, parent)
        self.max: float = 0.0
        self.progress: float = 0.0
        self.full_sprite: str = form.props.get("full_sprite", "")
        self.bar_color: Any = form.props.get("bar_color")

    def set_max(self, value: float) -> None:
        self.max = value

    def set_progress(self, value: float) -> None:
        self.progress = value

    def set_full_sprite(self, sprite: str) -> None:
        self.full_sprite = sprite

    def set_bar_color(self, color: Any) -> None:
        self.bar_color = color


class HeadlessTimer:
    def __init__(
        self,
        system: HeadlessWindowSystem,
        period: float,
        repeat: bool,
        handler: Callable[[], None],
    ) -> None:
        self._system = system
        self.period = period
        self.repeat = repeat
        self.handler = handler
        self.next_due: float | None = None
        self.fire_count = 0

    def start(self) -> None:
        self.next_due = self._system.now + self.period

    def stop(self) -> None:
        self.next_due = None

    def is_started(self) -> bool:
        return self.next_due is not None

    def fire(self) -> None:
        """Invoke the handler now, regardless of schedule."""
        self.fire_count += 1
        self.handler()


class FormTree:
    """Builds headless window trees and tracks the roots still alive.

    A destroyed root is dropped from ``forms`` as soon as it is destroyed.
    """

    def __init__(self) -> None:
        self.forms: list[HeadlessWindow] = []

    def load_form(
        self, form: FormDef, parent: HeadlessWindow | None, data: Any = None
    ) -> HeadlessWindow:
        root = self._build(form, parent)
        root.set_data(data)
        root.on_destroy = self.forms.remove
        self.forms.append(root)
        return root

    def _build(self, form: FormDef, parent: HeadlessWindow | None) -> HeadlessWindow:
        cls = HeadlessProgressWindow if form.kind == PROGRESS_BAR else HeadlessWindow
        window = cls(form, parent)
        if parent is not None:
            parent.children.append(window)
        for child in form.children:
            self._build(child, window)
        return window

    def live_forms(self) -> list[HeadlessWindow]:
        return list(self.forms)


class HeadlessWindowSystem(FormTree):
    """WindowSystem whose clock only moves when ``advance`` is called.

    ``advance`` fires due timers in timestamp order, moving the clock to
    each due time before firing, so handlers observe exact periods.
    """

    def __init__(self, start_time: float = 0.0) -> None:
        super().__init__()
        self.now = start_time
        self.timers: list[HeadlessTimer] = []

    def game_time(self) -> float:
        return self.now

    def create_timer(
        self, period: float, repeat: bool, handler: Callable[[], None]
    ) -> HeadlessTimer:
        timer = HeadlessTimer(self, period, repeat, handler)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [
                t for t in self.timers
                if t.next_due is not None and t.next_due <= target + _EPSILON
            ]
            if not due:
                break
            timer = min(due, key=lambda t: t.next_due)
            self.now = max(self.now, timer.next_due)
            # Reschedule before firing so a handler may stop or restart it.
            if timer.repeat:
                timer.next_due += timer.period
            else:
                timer.next_due = None
            timer.fire()
        self.now = max(self.now, target)

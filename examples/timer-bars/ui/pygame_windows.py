"""pygame-backed WindowSystem: headless window state plus drawing and real time."""
from __future__ import annotations

from typing import Callable

import pygame

from tick_bars.headless import FormTree, HeadlessProgressWindow, HeadlessWindow

from ui.constants import FALLBACK_COLOR, ICON_COLORS, NAMED_COLORS, TEXT_COLOR


def _color(value) -> tuple[int, int, int]:
    if isinstance(value, tuple):
        return value
    return NAMED_COLORS.get(value, FALLBACK_COLOR)


class PygameTimer:
    def __init__(
        self,
        system: PygameWindowSystem,
        period: float,
        repeat: bool,
        handler: Callable[[], None],
    ) -> None:
        self._system = system
        self.period = period
        self.repeat = repeat
        self.handler = handler
        self.next_due: float | None = None

    def start(self) -> None:
        self.next_due = self._system.game_time() + self.period

    def stop(self) -> None:
        self.next_due = None

    def is_started(self) -> bool:
        return self.next_due is not None


class PygameWindowSystem(FormTree):
    """Windows keep their state in headless nodes and are painted each frame.

    Game time is pygame's millisecond clock. Timers fire from ``pump``,
    which the main loop calls once per frame, so a late frame shows up as a
    longer gap between ticks.
    """

    def __init__(self) -> None:
        super().__init__()
        self.timers: list[PygameTimer] = []

    def game_time(self) -> float:
        return pygame.time.get_ticks() / 1000.0

    def create_timer(
        self, period: float, repeat: bool, handler: Callable[[], None]
    ) -> PygameTimer:
        timer = PygameTimer(self, period, repeat, handler)
        self.timers.append(timer)
        return timer

    def pump(self) -> None:
        now = self.game_time()
        for timer in list(self.timers):
            if timer.next_due is None or timer.next_due > now:
                continue
            timer.next_due = now + timer.period if timer.repeat else None
            timer.handler()

    # --- Drawing ---

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        screen_rect = surface.get_rect()
        for root in self.live_forms():
            if root.parent is None:
                _draw_window(surface, font, root, screen_rect)


def _layout(window: HeadlessWindow, parent: pygame.Rect) -> pygame.Rect:
    lp, tp, rp, bp = window.anchor_points
    lo, to, ro, bo = window.get_anchor_offsets()
    left = parent.x + int(parent.w * lp) + lo
    top = parent.y + int(parent.h * tp) + to
    right = parent.x + int(parent.w * rp) + ro
    bottom = parent.y + int(parent.h * bp) + bo
    return pygame.Rect(left, top, max(0, right - left), max(0, bottom - top))


def _draw_window(
    surface: pygame.Surface,
    font: pygame.font.Font,
    window: HeadlessWindow,
    parent_rect: pygame.Rect,
) -> None:
    if not window.is_shown():
        return
    rect = _layout(window, parent_rect)

    sprite = window.get_sprite()
    if sprite in ICON_COLORS:
        pygame.draw.rect(surface, ICON_COLORS[sprite], rect)
    elif sprite:
        pygame.draw.rect(surface, _color(window.bg_color), rect)

    if isinstance(window, HeadlessProgressWindow) and window.max > 0:
        fraction = min(max(window.progress / window.max, 0.0), 1.0)
        filled = rect.copy()
        filled.w = int(rect.w * fraction)
        pygame.draw.rect(surface, _color(window.bar_color), filled)

    text = window.get_text()
    if text:
        color = _color(window.text_color) if window.text_color else TEXT_COLOR
        label = font.render(text, True, color)
        y = rect.y + rect.h // 2 - label.get_height() // 2
        if window.props.get("align") == "right":
            x = rect.right - label.get_width()
        else:
            x = rect.x
        surface.blit(label, (x, y))

    # Children marked with a depth draw above their unmarked siblings.
    for child in sorted(window.children, key=lambda c: c.props.get("depth", 0)):
        _draw_window(surface, font, child, rect)

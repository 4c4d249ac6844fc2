"""Timer Bars — stacked countdown bars on one shared tick.

Exercises tick-bars with a pygame window system.

Controls:
  Space   Add a bar with a random duration
  F       Toggle fill mode on every bar
  T       Toggle remaining-time text
  I       Cycle icons
  C       Stop all bars
  Esc     Quit
"""
from __future__ import annotations

import random
import sys

import pygame

from tick_bars import Bar, BarRegistry, FormDef

from ui.constants import (
    BAR_COLORS,
    BAR_GAP,
    BAR_H,
    BAR_W,
    BG_COLOR,
    FPS,
    ICON_COLORS,
    MARGIN,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_DIM,
)
from ui.pygame_windows import PygameWindowSystem


class DemoState:
    """Holds the registry and demo counters."""

    def __init__(self) -> None:
        self.windows = PygameWindowSystem()
        self.registry = BarRegistry(self.windows)
        self.column = self.windows.load_form(
            FormDef(name="Column", anchor_offsets=(MARGIN, MARGIN, MARGIN + BAR_W, SCREEN_H)),
            None,
        )
        self.rng = random.Random(42)
        self.next_id = 0
        self.fill = False
        self.show_time = True
        self.icon_index = 0
        self.finished = 0

    def add_bar(self) -> None:
        bar_id = self.next_id
        self.next_id += 1
        bar = self.registry.create_bar(bar_id, self.column, BAR_W, BAR_H)
        bar.set_label(f"Bar {bar_id}")
        bar.set_texture_bar(None, self.rng.choice(BAR_COLORS))
        bar.set_duration(round(self.rng.uniform(2.0, 12.0), 1))
        bar.set_fill(self.fill)
        bar.set_time_visibility(self.show_time)
        bar.add_on_finish_callback(DemoState._on_finish, self)
        bar.start()

    def _on_finish(self, bar: Bar) -> None:
        self.finished += 1

    def toggle_fill(self) -> None:
        self.fill = not self.fill
        for bar in self.registry.bars():
            bar.set_fill(self.fill)

    def toggle_time(self) -> None:
        self.show_time = not self.show_time
        for bar in self.registry.bars():
            bar.set_time_visibility(self.show_time)

    def cycle_icons(self) -> None:
        icons = [None, *ICON_COLORS]
        self.icon_index = (self.icon_index + 1) % len(icons)
        for bar in self.registry.bars():
            bar.set_icon(icons[self.icon_index])

    def restack(self) -> None:
        """Pack bars top to bottom in registration order."""
        y = 0
        for bar in self.registry.bars():
            left, top, right, bottom = bar.frame.get_anchor_offsets()
            height = bottom - top
            bar.frame.set_anchor_offsets(left, y, right, y + height)
            y += height + BAR_GAP


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, state: DemoState) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    text = (
        f"bars {len(state.registry)}  done {state.finished}  "
        "[Space] Add  [F] Fill  [T] Time  [I] Icon  [C] Clear  [Esc] Quit"
    )
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Timer Bars — tick-bars demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.add_bar()
                elif event.key == pygame.K_f:
                    state.toggle_fill()
                elif event.key == pygame.K_t:
                    state.toggle_time()
                elif event.key == pygame.K_i:
                    state.cycle_icons()
                elif event.key == pygame.K_c:
                    state.registry.stop_all()

        # --- Tick ---
        state.windows.pump()
        state.restack()

        # --- Render ---
        screen.fill(BG_COLOR)
        state.windows.draw(screen, font)
        draw_status_bar(screen, font, state)
        pygame.display.flip()

    state.registry.stop_all()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

"""Window and frame primitives.

Wraps the pygame window, clock and event queue behind the small set of
calls the states and renderer need: clear / draw_image / draw_text /
fill_circle for composition, present for flipping with a frame cap,
poll_events / quit_requested / key_down for input, and sleep / delta for
pacing and elapsed-time measurement.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import pygame

from rocket_dodge.asset_manager import AssetManager
from rocket_dodge.constants import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_CAPTION

Color = Sequence[int]


class Display:
    def __init__(
        self,
        assets: AssetManager | None = None,
        size: Tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
        caption: str = WINDOW_CAPTION,
    ) -> None:
        if not pygame.display.get_init():
            pygame.display.init()
        pygame.display.set_caption(caption)
        self.surface = pygame.display.set_mode(size)
        self.clock = pygame.time.Clock()
        self.assets = assets or AssetManager.get()
        self._quit = False
        self._last_ticks = pygame.time.get_ticks()

    # Composition --------------------------------------------------------
    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def draw_image(self, image: pygame.Surface, x: float, y: float) -> None:
        self.surface.blit(image, (x, y))

    def draw_text(self, text: str, color: Color, font_name: str, size: int, x: float, y: float) -> None:
        font = self.assets.get_font(font_name, size)
        self.surface.blit(font.render(text, True, color), (x, y))

    def measure_text_width(self, text: str, font_name: str, size: int) -> int:
        return self.assets.get_font(font_name, size).size(text)[0]

    def fill_circle(self, color: Color, x: float, y: float, radius: int) -> None:
        if len(color) == 4 and color[3] < 255:
            # Per-pixel alpha needs an intermediate surface to blend onto the frame.
            side = radius * 2 + 1
            dot = pygame.Surface((side, side), pygame.SRCALPHA)
            pygame.draw.circle(dot, color, (radius, radius), radius)
            self.surface.blit(dot, (int(x) - radius, int(y) - radius))
        else:
            pygame.draw.circle(self.surface, color[:3], (int(x), int(y)), radius)

    def present(self, target_fps: int = 0) -> None:
        pygame.display.flip()
        self.clock.tick(target_fps)

    # Input --------------------------------------------------------------
    def poll_events(self) -> List[pygame.event.Event]:
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                self._quit = True
        return events

    def quit_requested(self) -> bool:
        return self._quit

    def key_down(self, key: int) -> bool:
        return bool(pygame.key.get_pressed()[key])

    # Timing -------------------------------------------------------------
    def sleep(self, ms: int) -> None:
        pygame.time.delay(ms)

    def delta(self) -> float:
        """Seconds of wall-clock time since the previous call.

        Measured from ``pygame.time.get_ticks()`` so pacing sleeps taken after
        ``present()`` count toward the next tick.
        """
        now = pygame.time.get_ticks()
        dt = (now - self._last_ticks) / 1000.0
        self._last_ticks = now
        return dt


__all__ = ["Display"]

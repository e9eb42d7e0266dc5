"""Frame composition for every screen.

Layer order for the playfield (bottom -> top):
1. Clear to black
2. Rocket
3. Asteroids in spawn order
4. Particles

Title and game-over screens are static: art centred near the top, text
lines centred horizontally.

An optional ``capture_sequence`` list records the executed high-level
steps so tests can check ordering without sampling pixels.
"""

from __future__ import annotations

from typing import List, Optional

from rocket_dodge.constants import (
    CLEAR_COLOR,
    GAME_OVER_IMAGE_Y,
    SCORE_BOTTOM_OFFSET,
    SCORE_TEXT_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TEXT_COLOR,
    TITLE_HINT,
    TITLE_HINT_SIZE,
    TITLE_IMAGE_Y,
    TITLE_PLAYER_SIZE,
    TITLE_PROMPT,
    TITLE_PROMPT_SIZE,
)

FONT_NAME = "arial"


class Renderer:
    def __init__(self, images, font_name: str = FONT_NAME) -> None:
        self.images = images
        self.font_name = font_name

    def _centered_text(self, display, text: str, size: int, y: float) -> None:
        width = display.measure_text_width(text, self.font_name, size)
        display.draw_text(text, TEXT_COLOR, self.font_name, size, (SCREEN_WIDTH - width) / 2, y)

    def _centered_image(self, display, name: str, y: float) -> None:
        img = self.images.get_image(name)
        display.draw_image(img, (SCREEN_WIDTH - img.get_width()) / 2, y)

    def render_playfield(self, display, session, capture_sequence: Optional[List[str]] = None) -> None:
        seq = capture_sequence
        display.clear(CLEAR_COLOR)
        if seq is not None:
            seq.append("clear")

        rocket = session.rocket
        display.draw_image(rocket.sprite, *rocket.draw_position())
        if seq is not None:
            seq.append("rocket")

        for asteroid in session.asteroids:
            display.draw_image(asteroid.sprite, *asteroid.draw_position())
        if seq is not None:
            seq.append("asteroids")

        session.particles.render(display)
        if seq is not None:
            seq.append("particles")

    def render_title(self, display, player_name: str) -> None:
        display.clear(CLEAR_COLOR)
        self._centered_image(display, "title", TITLE_IMAGE_Y)
        self._centered_text(display, TITLE_PROMPT, TITLE_PROMPT_SIZE, SCREEN_HEIGHT / 2)
        self._centered_text(display, f"Player: {player_name}", TITLE_PLAYER_SIZE, SCREEN_HEIGHT / 2 + 50)
        self._centered_text(display, TITLE_HINT, TITLE_HINT_SIZE, SCREEN_HEIGHT - 50)

    def render_game_over(self, display, score: int) -> None:
        display.clear(CLEAR_COLOR)
        self._centered_image(display, "gameover", GAME_OVER_IMAGE_Y)
        self._centered_text(display, f"SCORE: {score}", SCORE_TEXT_SIZE, SCREEN_HEIGHT - SCORE_BOTTOM_OFFSET)


__all__ = ["Renderer"]

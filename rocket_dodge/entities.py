from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import pygame

from rocket_dodge.constants import (
    ASTEROID_MIN_SPEED,
    ASTEROID_RESPAWN_MARGIN,
    ASTEROID_SPAWN_Y,
    ASTEROID_SPEED_RANGE,
    COLLISION_SHRINK,
    ROCKET_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from rocket_dodge.rng_service import RNGService


@dataclass(frozen=True)
class InputState:
    """Directional keys held during the current tick."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


def collides(a_pos: Tuple[float, float], a_radius: float, b_pos: Tuple[float, float], b_radius: float) -> bool:
    """Circle overlap test with both radii shrunk by ``COLLISION_SHRINK``."""
    distance = math.hypot(a_pos[0] - b_pos[0], a_pos[1] - b_pos[1])
    return distance < COLLISION_SHRINK * (a_radius + b_radius)


class SpriteEntity:
    """Shared geometry for entities drawn centred on a bitmap."""

    x: float
    y: float
    sprite: pygame.Surface

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def radius(self) -> float:
        return self.sprite.get_width() / 2

    def draw_position(self) -> Tuple[float, float]:
        """Top-left corner that centres the sprite on the entity position."""
        return self.x - self.sprite.get_width() / 2, self.y - self.sprite.get_height() / 2


@dataclass
class Rocket(SpriteEntity):
    x: float
    y: float
    sprite: pygame.Surface
    speed: float = ROCKET_SPEED

    @classmethod
    def centered(cls, sprite: pygame.Surface) -> "Rocket":
        return cls(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2, sprite)

    def update(self, held: InputState) -> None:
        # Axes move independently; holding two directions gives full speed on both.
        half_w = self.sprite.get_width() / 2
        half_h = self.sprite.get_height() / 2
        if held.up and self.y - self.speed >= half_h:
            self.y -= self.speed
        if held.down and self.y + self.speed <= SCREEN_HEIGHT - half_h:
            self.y += self.speed
        if held.left and self.x - self.speed >= half_w:
            self.x -= self.speed
        if held.right and self.x + self.speed <= SCREEN_WIDTH - half_w:
            self.x += self.speed


@dataclass
class Asteroid(SpriteEntity):
    x: float
    y: float
    speed: float
    sprite: pygame.Surface

    @classmethod
    def spawn(cls, sprite: pygame.Surface, rng: RNGService | None = None) -> "Asteroid":
        asteroid = cls(0.0, ASTEROID_SPAWN_Y, 0.0, sprite)
        asteroid.respawn(rng)
        return asteroid

    def respawn(self, rng: RNGService | None = None) -> None:
        """Re-roll position and speed in place; identity is preserved."""
        rng = rng or RNGService.get()
        self.x = rng.scaled(SCREEN_WIDTH)
        self.y = ASTEROID_SPAWN_Y
        self.speed = ASTEROID_MIN_SPEED + rng.scaled(ASTEROID_SPEED_RANGE)

    def update(self, rng: RNGService | None = None) -> None:
        self.y += self.speed
        if self.y > SCREEN_HEIGHT + ASTEROID_RESPAWN_MARGIN:
            self.respawn(rng)


__all__ = ["InputState", "Rocket", "Asteroid", "collides"]

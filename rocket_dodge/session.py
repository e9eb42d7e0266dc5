"""GameSession: everything one round of play owns.

Holds the rocket, the asteroid collection, the explosion particles, the
spawn timer and the two score values:

* ``survival_ticks`` counts ticks survived without a collision.
* ``displayed_score`` is the number of asteroids in play, which is what
  the game-over screen shows.

``tick()`` runs one Playing-state step and reports the asteroid that hit
the rocket, if any.
"""

from __future__ import annotations

from typing import List

import pygame

from rocket_dodge.constants import ASTEROID_SPEEDUP
from rocket_dodge.entities import Asteroid, InputState, Rocket, collides
from rocket_dodge.logger import get_logger
from rocket_dodge.particle_system import ParticleSystem
from rocket_dodge.rng_service import RNGService
from rocket_dodge.timer import SpawnTimer

log = get_logger("session")


class GameSession:
    def __init__(
        self,
        rocket_sprite: pygame.Surface,
        asteroid_sprite: pygame.Surface,
        rng: RNGService | None = None,
    ):
        self.rng = rng or RNGService.get()
        self.asteroid_sprite = asteroid_sprite
        self.rocket = Rocket.centered(rocket_sprite)
        self.asteroids: List[Asteroid] = []
        self.particles = ParticleSystem(self.rng)
        self.spawn_timer = SpawnTimer()
        self.survival_ticks = 0
        self.game_over = False

    @property
    def displayed_score(self) -> int:
        return len(self.asteroids)

    def spawn_asteroid(self) -> Asteroid:
        """Add one asteroid and speed up the whole field, newcomer included."""
        asteroid = Asteroid.spawn(self.asteroid_sprite, self.rng)
        self.asteroids.append(asteroid)
        for a in self.asteroids:
            a.speed += ASTEROID_SPEEDUP
        log.debug("spawn asteroid", len(self.asteroids), f"at x={asteroid.x:.1f}")
        return asteroid

    def tick(self, held: InputState, dt: float) -> Asteroid | None:
        """Advance one Playing tick by ``dt`` seconds.

        Returns the colliding asteroid (after emitting the explosion burst
        at its position) or None when the rocket survived the tick.
        """
        if self.game_over:
            return None
        self.rocket.update(held)

        if self.spawn_timer.add(dt):
            self.spawn_asteroid()

        for asteroid in self.asteroids:
            asteroid.update(self.rng)
            if collides(self.rocket.pos, self.rocket.radius, asteroid.pos, asteroid.radius):
                self.particles.emit(asteroid.x, asteroid.y)
                self.game_over = True
                log.info(f"collision at ({asteroid.x:.1f}, {asteroid.y:.1f})")
                return asteroid

        self.survival_ticks += 1
        self.particles.advance()
        return None


__all__ = ["GameSession"]

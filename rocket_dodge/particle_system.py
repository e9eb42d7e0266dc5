"""Central ParticleSystem.

Owns the explosion particles for a game session. The list lives on the
system instance (one per session) rather than at module level, and is
turned into fill-circle commands by ``get_draw_commands()``.

Minimal public API: ``emit(x, y)`` spawns a burst, ``advance()`` moves
every particle one frame and drops the expired ones, ``render(display)``
draws them as fading dots.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from rocket_dodge.constants import (
    PARTICLE_ALPHA_SCALE,
    PARTICLE_BURST_COUNT,
    PARTICLE_COLOR,
    PARTICLE_LIFESPAN,
    PARTICLE_MAX_VELOCITY,
    PARTICLE_RADIUS,
)
from rocket_dodge.rng_service import RNGService


@dataclass
class Particle:
    x: float
    y: float
    dx: float
    dy: float
    lifespan: int = PARTICLE_LIFESPAN

    def update(self) -> bool:
        """Advance one frame. Returns True once the particle is dead."""
        self.x += self.dx
        self.y += self.dy
        self.lifespan -= 1
        return self.lifespan <= 0

    @property
    def alpha(self) -> int:
        return max(0, min(255, self.lifespan * PARTICLE_ALPHA_SCALE))


@dataclass
class ParticleDrawCommand:
    color: Tuple[int, int, int, int]
    x: float
    y: float
    radius: int


class ParticleSystem:
    def __init__(self, rng: RNGService | None = None):
        self.rng = rng
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    # ---- Spawn ----
    def emit(self, x: float, y: float, count: int = PARTICLE_BURST_COUNT) -> None:
        rng = self.rng or RNGService.get()
        span = PARTICLE_MAX_VELOCITY * 2
        for _ in range(count):
            dx = rng.scaled(span) - PARTICLE_MAX_VELOCITY
            dy = rng.scaled(span) - PARTICLE_MAX_VELOCITY
            self.particles.append(Particle(x, y, dx, dy))

    # ---- Update & draw collection ----
    def advance(self) -> None:
        self.particles = [p for p in self.particles if not p.update()]

    def get_draw_commands(self):
        for p in self.particles:
            yield ParticleDrawCommand((*PARTICLE_COLOR, p.alpha), p.x, p.y, PARTICLE_RADIUS)

    def render(self, display) -> None:
        for cmd in self.get_draw_commands():
            display.fill_circle(cmd.color, cmd.x, cmd.y, cmd.radius)


__all__ = ["Particle", "ParticleSystem", "ParticleDrawCommand"]

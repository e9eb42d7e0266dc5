"""Elapsed-time accumulators for the frame loop.

Both timers are fed the measured per-tick delta in seconds; neither reads
a clock on its own, which keeps them deterministic under test.
"""

from __future__ import annotations

from rocket_dodge.constants import ASTEROID_SPAWN_INTERVAL, EXPLOSION_DURATION


class SpawnTimer:
    """Fires once every ``interval`` seconds of accumulated play time."""

    def __init__(self, interval: float = ASTEROID_SPAWN_INTERVAL):
        self.interval = interval
        self.elapsed = 0.0

    def add(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed >= self.interval:
            self.elapsed = 0.0
            return True
        return False


class PhaseTimer:
    def __init__(self, duration: float = EXPLOSION_DURATION):
        self.duration = duration
        self.elapsed = 0.0

    def add(self, dt: float) -> None:
        self.elapsed += dt

    @property
    def expired(self) -> bool:
        return self.elapsed >= self.duration

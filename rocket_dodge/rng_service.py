import random

from rocket_dodge.logger import get_logger

log = get_logger("rng")


class RNGService:
    """Random source for spawn positions, asteroid speeds and particle velocities.

    One shared instance by default; tests build their own with a fixed seed.
    """

    _instance: "RNGService | None" = None

    def __init__(self, seed: int | None = None):
        self._generator = random.Random(seed)
        log.debug(f"RNG created with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def random(self) -> float:
        """Uniform float in [0.0, 1.0)."""
        return self._generator.random()

    def scaled(self, span: float) -> float:
        """Uniform float in [0.0, span)."""
        return self.random() * span

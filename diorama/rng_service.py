import random

from diorama.logger import get_logger

log = get_logger("rng")


class RNGService:
    """Uniform [0, 1) source for the spawn factory.

    Unseeded by default, so spawn batches differ from run to run. Pass a seed
    for a repeatable stream (benchmarks, tests).
    """

    def __init__(self, seed: int | None = None):
        self._generator = random.Random(seed)
        if seed is not None:
            log.debug(f"spawn RNG seeded with {seed!r}")

    def random(self) -> float:
        return self._generator.random()


__all__ = ["RNGService"]

import math


class EmissionController:
    """Turns elapsed time into a whole number of spawns at a fixed rate.

    Time that does not yet add up to a whole particle is carried over in
    ``accumulator``, so the total spawned over any run only depends on the
    total elapsed time, not on how it was split into frames.
    """

    def __init__(self, rate: float):
        if rate <= 0:
            raise ValueError(f"emission rate must be positive, got {rate}")
        self.rate = float(rate)
        self.accumulator = 0.0

    def tick(self, dt: float) -> int:
        self.accumulator += max(0.0, dt)
        count = math.floor(self.accumulator * self.rate)
        self.accumulator = max(0.0, self.accumulator - count / self.rate)
        return count

    def reset(self) -> None:
        self.accumulator = 0.0

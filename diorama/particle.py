from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector3

from diorama.spline import RGB


@dataclass
class Particle:
    """One live point particle.

    ``life`` counts down to zero; ``max_life`` is the life it was born with and
    anchors the normalized age fed to the curves. ``size`` is the base size
    sampled at spawn, ``current_size`` the curve-scaled size exported to the
    renderer. ``rotation_rate`` is applied once per tick.
    """

    position: Vector3
    velocity: Vector3
    size: float
    life: float
    max_life: float
    rotation: float = 0.0
    rotation_rate: float = 0.0
    color: RGB = (1.0, 1.0, 1.0)
    alpha: float = 1.0
    current_size: float = 0.0
    # Cached squared distance to the viewpoint, refreshed by the depth sorter.
    depth: float = field(default=0.0, repr=False)

    @property
    def age(self) -> float:
        """Normalized age: 0 at birth, approaching 1 as the particle dies."""
        return 1.0 - self.life / self.max_life


__all__ = ["Particle"]

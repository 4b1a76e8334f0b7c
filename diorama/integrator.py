"""Per-tick aging and integration of a particle population.

Order per tick (every particle):

1. ``life -= dt``; particles at or below zero are culled before anything else
   touches them.
2. Normalized age ``t = 1 - life / max_life``.
3. ``rotation += rotation_rate`` (one step per tick).
4. Alpha, size and colour re-read from the curves at ``t``.
5. ``position += velocity * dt``.
6. Drag: ``velocity * dt * drag``, clamped per axis to the current velocity
   on that axis, then subtracted. A large ``dt`` can stop an axis but never
   reverse it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pygame.math import Vector3

from diorama.config import EmitterConfig
from diorama.population import ParticlePopulation
from diorama.spline import RGB, LinearSpline, color_spline, scalar_spline


@dataclass(frozen=True)
class CurveSet:
    alpha: LinearSpline[float]
    size: LinearSpline[float]
    color: LinearSpline[RGB]

    @classmethod
    def from_config(cls, config: EmitterConfig) -> "CurveSet":
        return cls(
            alpha=scalar_spline(config.alpha_curve),
            size=scalar_spline(config.size_curve),
            color=color_spline(config.color_curve),
        )


def _clamped(drag: float, velocity: float) -> float:
    return math.copysign(min(abs(drag), abs(velocity)), velocity)


def apply_drag(velocity: Vector3, dt: float, coefficient: float) -> None:
    """Decay ``velocity`` in place without letting any axis change sign."""
    k = dt * coefficient
    velocity.x -= _clamped(velocity.x * k, velocity.x)
    velocity.y -= _clamped(velocity.y * k, velocity.y)
    velocity.z -= _clamped(velocity.z * k, velocity.z)


def advance(population: ParticlePopulation, dt: float, curves: CurveSet, drag: float) -> int:
    """Age, cull and integrate every particle by ``dt`` seconds.

    Returns the number of particles culled this tick.
    """
    for p in population:
        p.life -= dt
    culled = population.cull()

    alpha_at = curves.alpha.get_value_at
    size_at = curves.size.get_value_at
    color_at = curves.color.get_value_at
    for p in population:
        t = p.age
        p.rotation += p.rotation_rate
        p.alpha = alpha_at(t)
        p.current_size = p.size * size_at(t)
        p.color = color_at(t)
        p.position += p.velocity * dt
        apply_drag(p.velocity, dt, drag)
    return culled


__all__ = ["CurveSet", "apply_drag", "advance"]

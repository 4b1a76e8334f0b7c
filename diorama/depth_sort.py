from __future__ import annotations

from typing import List

from pygame.math import Vector3

from diorama.particle import Particle


def sort_back_to_front(particles: List[Particle], viewpoint: Vector3) -> None:
    """Reorder ``particles`` in place, farthest from ``viewpoint`` first.

    The renderer draws in array order with no transparency sort of its own, so
    nearer particles have to come last to blend over the ones behind them.
    Squared distance gives the same order without the square roots.
    """
    eye = Vector3(viewpoint)
    for p in particles:
        p.depth = eye.distance_squared_to(p.position)
    particles.sort(key=_depth, reverse=True)


def _depth(p: Particle) -> float:
    return p.depth


__all__ = ["sort_back_to_front"]

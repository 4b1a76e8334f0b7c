"""Particle population: the owned set of live particles plus the spawn factory.

Storage is a plain list that the system owns outright. Removal is an
overwrite-and-truncate pass (survivors are compacted to the front in their
current order, then the tail is dropped), so no particle is ever removed while
something iterates the list. Order carries no meaning for the simulation; the
depth sorter rewrites it every tick before export.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from pygame.math import Vector3

from diorama.config import EmitterConfig
from diorama.particle import Particle
from diorama.services import RandomSource
from diorama.spline import to_rgb
from diorama import constants as C


class ParticlePopulation:
    def __init__(self, config: EmitterConfig, rng: RandomSource, max_particles: Optional[int] = None):
        self.config = config
        self.rng = rng
        self.max_particles = max_particles
        self._particles: List[Particle] = []
        self._spawn_color = to_rgb(config.color)
        self._velocity = Vector3(config.velocity)

    # --- Collection Protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    @property
    def particles(self) -> List[Particle]:
        """The live container. The depth sorter reorders it in place."""
        return self._particles

    # --- Spawn ---------------------------------------------------------------
    def spawn(self, count: int, origin: Vector3) -> int:
        """Spawn up to ``count`` particles around ``origin``.

        Returns how many were actually added; the rest were refused by the
        population ceiling.
        """
        if count <= 0:
            return 0
        if self.max_particles is not None:
            count = min(count, max(0, self.max_particles - len(self._particles)))
        origin = Vector3(origin)
        for _ in range(count):
            self._particles.append(self._make_particle(origin))
        return count

    def _make_particle(self, origin: Vector3) -> Particle:
        cfg = self.config
        rnd = self.rng.random
        offset = Vector3(
            [
                (low + rnd() * (high - low)) * half
                for (low, high), half in zip(cfg.spawn_range, cfg.spawn_half_extents)
            ]
        )
        life = (rnd() * (1.0 - C.LIFE_MIN_FRACTION) + C.LIFE_MIN_FRACTION) * cfg.max_life
        size = (rnd() * (1.0 - C.SIZE_MIN_FRACTION) + C.SIZE_MIN_FRACTION) * cfg.max_size
        return Particle(
            position=origin + offset,
            velocity=Vector3(self._velocity),
            size=size,
            life=life,
            max_life=life,
            rotation=rnd() * C.FULL_TURN,
            rotation_rate=rnd() * 2.0 * cfg.rotation_rate - cfg.rotation_rate,
            color=self._spawn_color,
            alpha=1.0,
        )

    # --- Removal -------------------------------------------------------------
    def cull(self) -> int:
        """Drop every particle whose life ran out; return how many went."""
        particles = self._particles
        write = 0
        for p in particles:
            if p.life > 0:
                particles[write] = p
                write += 1
        removed = len(particles) - write
        del particles[write:]
        return removed

    def clear(self) -> None:
        self._particles.clear()


__all__ = ["ParticlePopulation"]

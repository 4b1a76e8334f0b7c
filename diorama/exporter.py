"""Flatten a population into renderer-ready attribute buffers.

The four buffers are parallel and packed the way point-sprite geometry takes
them: ``positions`` holds x, y, z per particle, ``sizes`` one float,
``colors`` r, g, b, alpha and ``angles`` one rotation in radians. They are
rebuilt from scratch every tick and never alias particle state, so the host
may keep or mutate them freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from diorama.particle import Particle


@dataclass
class ParticleAttributes:
    positions: List[float] = field(default_factory=list)
    sizes: List[float] = field(default_factory=list)
    colors: List[float] = field(default_factory=list)
    angles: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sizes)

    def position(self, i: int) -> Tuple[float, ...]:
        return tuple(self.positions[3 * i : 3 * i + 3])

    def color(self, i: int) -> Tuple[float, ...]:
        return tuple(self.colors[4 * i : 4 * i + 4])


def export_attributes(particles: Iterable[Particle]) -> ParticleAttributes:
    out = ParticleAttributes()
    positions = out.positions
    sizes = out.sizes
    colors = out.colors
    angles = out.angles
    for p in particles:
        pos = p.position
        positions.extend((pos.x, pos.y, pos.z))
        sizes.append(p.current_size)
        r, g, b = p.color
        colors.extend((r, g, b, p.alpha))
        angles.append(p.rotation)
    return out


__all__ = ["ParticleAttributes", "export_attributes"]

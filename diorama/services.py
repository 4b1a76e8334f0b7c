"""Collaborator interfaces between the particle engine and the scene host.

The engine never reaches into the host's scene graph. Instead each particle
system is handed narrow protocol objects:

- ViewpointProvider -> camera position, read once per tick by the depth sorter
- EmitterHandle     -> spawn origin, read once per spawn batch
- RenderSink        -> receives the exported attribute buffers every tick
- RandomSource      -> uniform [0, 1) numbers for the spawn factory

``PointHandle`` is the trivial adapter used when the host has nothing more
than a mutable position to offer (tests, the preview harness).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, Sequence

from pygame.math import Vector3

if TYPE_CHECKING:  # pragma: no cover
    from diorama.exporter import ParticleAttributes


# ---- Protocols ----
class ViewpointProvider(Protocol):
    @property
    def position(self) -> Vector3: ...


class EmitterHandle(Protocol):
    @property
    def position(self) -> Vector3: ...


class RenderSink(Protocol):
    def submit(self, attributes: "ParticleAttributes") -> None: ...


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class PointHandle:
    """Mutable position usable both as an emitter handle and as a viewpoint."""

    position: Vector3 = field(default_factory=Vector3)

    @classmethod
    def at(cls, xyz: Sequence[float]) -> "PointHandle":
        return cls(Vector3(xyz))

    def move_to(self, xyz: Sequence[float]) -> None:
        self.position = Vector3(xyz)


__all__ = [
    "ViewpointProvider",
    "EmitterHandle",
    "RenderSink",
    "RandomSource",
    "PointHandle",
]

"""Construction-time configuration of one particle system.

Everything here is fixed for the lifetime of the system that reads it. The
defaults reproduce the diorama's fire effect apart from the emission rate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from diorama import constants as C

AxisRange = Tuple[float, float]
ControlPoints = List[Tuple[float, Any]]


@dataclass
class EmitterConfig:
    rate: float = C.FIRE_RATE
    name: str = "particles"
    spawn_half_extents: Tuple[float, float, float] = (C.SPAWN_RADIUS, C.SPAWN_RADIUS, C.SPAWN_RADIUS)
    spawn_range: Tuple[AxisRange, AxisRange, AxisRange] = (C.SPAWN_RANGE_X, C.SPAWN_RANGE_Y, C.SPAWN_RANGE_Z)
    max_life: float = C.MAX_LIFE
    max_size: float = C.MAX_SIZE
    velocity: Tuple[float, float, float] = C.INITIAL_VELOCITY
    drag: float = C.DRAG
    rotation_rate: float = C.ROTATION_RATE
    color: Any = C.SPAWN_COLOR
    alpha_curve: ControlPoints = field(default_factory=lambda: list(C.ALPHA_CURVE))
    size_curve: ControlPoints = field(default_factory=lambda: list(C.SIZE_CURVE))
    color_curve: ControlPoints = field(default_factory=lambda: list(C.COLOR_CURVE))
    max_particles: Optional[int] = None

    def validate(self) -> None:
        """Raise ``ValueError`` for settings the engine cannot run with."""
        if self.rate <= 0:
            raise ValueError(f"{self.name}: rate must be positive, got {self.rate}")
        if self.max_life <= 0:
            raise ValueError(f"{self.name}: max_life must be positive, got {self.max_life}")
        if self.max_size < 0:
            raise ValueError(f"{self.name}: max_size must not be negative, got {self.max_size}")
        if self.drag < 0:
            raise ValueError(f"{self.name}: drag must not be negative, got {self.drag}")
        if self.rotation_rate < 0:
            raise ValueError(f"{self.name}: rotation_rate must not be negative, got {self.rotation_rate}")
        if len(self.spawn_half_extents) != 3 or len(self.spawn_range) != 3 or len(self.velocity) != 3:
            raise ValueError(f"{self.name}: spawn box and velocity need three axes")
        for axis_range in self.spawn_range:
            if not isinstance(axis_range, (tuple, list)) or len(axis_range) != 2:
                raise ValueError(f"{self.name}: spawn_range entries must be (low, high) pairs, got {axis_range!r}")
        if any(h < 0 for h in self.spawn_half_extents):
            raise ValueError(f"{self.name}: spawn half-extents must not be negative")
        for label, curve in (
            ("alpha_curve", self.alpha_curve),
            ("size_curve", self.size_curve),
            ("color_curve", self.color_curve),
        ):
            if not curve:
                raise ValueError(f"{self.name}: {label} needs at least one control point")
        if self.max_particles is not None and self.max_particles < 0:
            raise ValueError(f"{self.name}: max_particles must not be negative")


__all__ = ["EmitterConfig"]

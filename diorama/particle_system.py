"""ParticleSystem: one emitter's worth of simulation behind a single ``update``.

Each instance owns its emission controller, population and curve set; two
systems (fire and tree lights in the diorama) share nothing but the thread
they are ticked on. The host calls ``update(dt)`` once per frame and reads
back ``attributes`` (or receives them through a ``RenderSink``).

Per tick, strictly in this order:

* emit: the controller converts ``dt`` into a spawn count and the population
  spawns that many around the emitter's *current* position.
* age/integrate/cull (see ``diorama.integrator``).
* sort back to front against the viewpoint's current position.
* export fresh attribute buffers and hand them to the sink, if any.

The system never caches the emitter or viewpoint position across ticks; both
are allowed to move between frames.
"""

from __future__ import annotations

import math
from typing import Dict, Iterator, Optional

from diorama.config import EmitterConfig
from diorama.depth_sort import sort_back_to_front
from diorama.emission import EmissionController
from diorama.exporter import ParticleAttributes, export_attributes
from diorama.integrator import CurveSet, advance
from diorama.logger import get_logger
from diorama.particle import Particle
from diorama.population import ParticlePopulation
from diorama.rng_service import RNGService
from diorama.services import EmitterHandle, RandomSource, RenderSink, ViewpointProvider
from diorama.settings import settings

log = get_logger("particles")


class ParticleSystem:
    def __init__(
        self,
        config: EmitterConfig,
        emitter: EmitterHandle,
        viewpoint: ViewpointProvider,
        rng: Optional[RandomSource] = None,
        sink: Optional[RenderSink] = None,
    ):
        config.validate()
        self.config = config
        self.emitter = emitter
        self.viewpoint = viewpoint
        self.sink = sink
        self.curves = CurveSet.from_config(config)
        self.emission = EmissionController(config.rate)
        ceiling = config.max_particles if config.max_particles is not None else settings.default_max_particles
        self.population = ParticlePopulation(config, rng if rng is not None else RNGService(), max_particles=ceiling)
        self._ceiling_warned = False
        self._stats: Dict[str, int] = {"spawned": 0, "dropped": 0, "culled": 0, "active": 0}
        log.info(
            f"{config.name}: rate={config.rate:g}/s max_life={config.max_life:g}s "
            f"ceiling={'none' if ceiling is None else ceiling}"
        )
        self.attributes: ParticleAttributes = self._export()

    # --- Collection Protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self.population)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.population)

    @property
    def name(self) -> str:
        return self.config.name

    # --- Frame ---------------------------------------------------------------
    def update(self, dt: float) -> ParticleAttributes:
        """Advance the system by ``dt`` seconds and return the new attributes."""
        dt = self._checked_dt(dt)

        requested = self.emission.tick(dt)
        spawned = self.population.spawn(requested, self.emitter.position)
        dropped = requested - spawned
        if dropped and not self._ceiling_warned:
            log.warn(f"{self.name}: population ceiling {self.population.max_particles} reached; dropping spawns")
            self._ceiling_warned = True

        culled = advance(self.population, dt, self.curves, self.config.drag)
        sort_back_to_front(self.population.particles, self.viewpoint.position)

        self._stats = {
            "spawned": spawned,
            "dropped": dropped,
            "culled": culled,
            "active": len(self.population),
        }
        self.attributes = self._export()
        return self.attributes

    def stats(self) -> Dict[str, int]:
        """Summary of the last tick (``spawned``, ``dropped``, ``culled``, ``active``)."""
        return dict(self._stats)

    def _checked_dt(self, dt: float) -> float:
        if math.isfinite(dt) and dt >= 0:
            return dt
        if settings.strict:
            raise ValueError(f"{self.name}: invalid time step {dt}")
        log.warn(f"{self.name}: invalid time step {dt} clamped to 0")
        return 0.0

    def _export(self) -> ParticleAttributes:
        attributes = export_attributes(self.population)
        if self.sink is not None:
            self.sink.submit(attributes)
        return attributes


__all__ = ["ParticleSystem", "EmitterConfig"]

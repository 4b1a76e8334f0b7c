"""CPU particle engine for the holiday diorama (fire and tree lights)."""

from diorama.config import EmitterConfig
from diorama.exporter import ParticleAttributes
from diorama.particle_system import ParticleSystem
from diorama.services import PointHandle

__all__ = ["EmitterConfig", "ParticleAttributes", "ParticleSystem", "PointHandle"]

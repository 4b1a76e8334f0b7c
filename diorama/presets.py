"""The diorama's two emitters.

Both run the default curves and spawn box; they differ in rate and in where
the host places the emitter. The tree-lights emitter rides on the tree model,
so its handle is positioned in the tree's local frame.
"""

from diorama import constants as C
from diorama.config import EmitterConfig

FIRE_EMITTER_POSITION = (0.1, -2.2, -1.6)
TREE_POSITION = (2.0, -2.2, -1.0)
TREE_SCALE = 1.5
TREE_LIGHTS_LOCAL_POSITION = (0.0, 0.0, 0.0)


def fire_config(**overrides) -> EmitterConfig:
    return EmitterConfig(**{"name": "fire", "rate": C.FIRE_RATE, **overrides})


def tree_lights_config(**overrides) -> EmitterConfig:
    return EmitterConfig(**{"name": "tree-lights", "rate": C.TREE_LIGHTS_RATE, **overrides})


__all__ = [
    "FIRE_EMITTER_POSITION",
    "TREE_POSITION",
    "TREE_SCALE",
    "TREE_LIGHTS_LOCAL_POSITION",
    "fire_config",
    "tree_lights_config",
]

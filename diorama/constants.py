"""Particle tuning constants.

Defaults for ``EmitterConfig``; both diorama emitters start from these and only
override the rate and the emitter placement.
"""

import math

# Spawn
SPAWN_RADIUS = 0.5  # half-extent of the spawn box on every axis (world units)
# Per-axis (low, high) fractions of the half-extent. The vertical range hugs the
# bottom of the box, so particles start at the emitter's base.
SPAWN_RANGE_X = (-1.0, 0.5)
SPAWN_RANGE_Y = (-1.0, -0.875)
SPAWN_RANGE_Z = (-1.0, 0.5)
LIFE_MIN_FRACTION = 0.25  # life = uniform(LIFE_MIN_FRACTION, 1) * MAX_LIFE
SIZE_MIN_FRACTION = 0.5  # size = uniform(SIZE_MIN_FRACTION, 1) * MAX_SIZE
MAX_LIFE = 1.5  # seconds
MAX_SIZE = 3.0  # world-space point size before the size curve is applied
INITIAL_VELOCITY = (0.0, 1.5, 0.0)  # units per second, straight up
ROTATION_RATE = 0.005  # radians per tick, rate sampled in [-ROTATION_RATE, ROTATION_RATE)
FULL_TURN = 2 * math.pi
SPAWN_COLOR = "#ffffff"

# Motion
DRAG = 0.1  # fraction of velocity removed per second, clamped per axis

# Curves over normalized age t in [0, 1]
ALPHA_CURVE = ((0.0, 0.0), (0.6, 1.0), (1.0, 0.0))
SIZE_CURVE = ((0.0, 0.0), (1.0, 1.0))
COLOR_CURVE = ((0.0, "#ffffff"), (1.0, "#ff8080"))

# Emission rates (particles per second)
FIRE_RATE = 200.0
TREE_LIGHTS_RATE = 100.0

# Host
FRAME_STEP = 0.016  # fixed step the diorama host feeds every frame
FIELD_OF_VIEW_DEG = 60.0  # vertical fov baked into the point size multiplier

__all__ = [name for name in globals().keys() if name.isupper()]

"""Pygame render sink for previewing particle systems outside the browser scene.

This is a stand-in for the real scene host's point-sprite material: it
projects each exported particle through a pinhole camera, scales a sparkle
sprite by ``size * point_multiplier / depth``, rotates it by the particle angle,
tints it by colour * alpha and adds it onto the target surface. Draw order is
the exported order, so back-to-front sorting done by the engine is what makes
the blend come out right.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pygame
from pygame.math import Vector3

from diorama import constants as C
from diorama.exporter import ParticleAttributes


SPRITE_SIZE = 32
NEAR_PLANE = 0.1


def point_multiplier(height: int, fov_deg: float = C.FIELD_OF_VIEW_DEG) -> float:
    """Pixels per world unit at unit depth for point sprites."""
    return height / (2.0 * math.tan(math.radians(fov_deg) / 2.0))


@dataclass
class LocalFrame:
    """Uniform scale + translation placing an emitter's particles in the world."""

    origin: Vector3 = field(default_factory=Vector3)
    scale: float = 1.0

    def to_world(self, v) -> Vector3:
        return Vector3(v) * self.scale + self.origin

    def to_local(self, v) -> Vector3:
        return (Vector3(v) - self.origin) / self.scale


@dataclass
class OrbitCamera:
    """Camera circling ``target`` in the horizontal plane."""

    target: Vector3 = field(default_factory=Vector3)
    radius: float = 50.0
    height: float = 8.0
    angle: float = math.atan2(35.0, 36.0)
    speed: float = 0.1  # radians per second
    fov_deg: float = 10.0

    @property
    def position(self) -> Vector3:
        return self.target + Vector3(math.sin(self.angle) * self.radius, self.height, math.cos(self.angle) * self.radius)

    def update(self, dt: float) -> None:
        self.angle = (self.angle + self.speed * dt) % C.FULL_TURN

    def project(self, world: Vector3, size: Tuple[int, int]) -> Optional[Tuple[float, float, float]]:
        """Return ``(screen_x, screen_y, depth)`` or ``None`` behind the near plane."""
        eye = self.position
        forward = self.target - eye
        if forward.length_squared() == 0:
            return None
        forward = forward.normalize()
        right = forward.cross(Vector3(0, 1, 0))
        if right.length_squared() == 0:
            return None
        right = right.normalize()
        up = right.cross(forward)
        rel = Vector3(world) - eye
        depth = rel.dot(forward)
        if depth <= NEAR_PLANE:
            return None
        w, h = size
        focal = (h / 2.0) / math.tan(math.radians(self.fov_deg) / 2.0)
        sx = w / 2.0 + rel.dot(right) / depth * focal
        sy = h / 2.0 - rel.dot(up) / depth * focal
        return sx, sy, depth


@dataclass
class LocalViewpoint:
    """Camera position expressed in an emitter's local frame.

    Lets a parented system depth-sort in the same space its particles live in.
    """

    camera: OrbitCamera
    frame: LocalFrame

    @property
    def position(self) -> Vector3:
        return self.frame.to_local(self.camera.position)


def make_sparkle_sprite(size: int = SPRITE_SIZE) -> pygame.Surface:
    """White four-point star on black, ready for multiplicative tinting."""
    sprite = pygame.Surface((size, size))
    sprite.fill((0, 0, 0))
    c = size / 2.0
    arm = size / 2.0 - 1
    waist = size / 8.0
    points = [
        (c, c - arm),
        (c + waist, c - waist),
        (c + arm, c),
        (c + waist, c + waist),
        (c, c + arm),
        (c - waist, c + waist),
        (c - arm, c),
        (c - waist, c - waist),
    ]
    pygame.draw.polygon(sprite, (255, 255, 255), points)
    pygame.draw.circle(sprite, (255, 255, 255), (int(c), int(c)), max(1, int(waist)))
    return sprite


class PreviewSink:
    """Collects the latest attributes of one system and draws them on demand."""

    def __init__(self, camera: OrbitCamera, frame: Optional[LocalFrame] = None, sprite: Optional[pygame.Surface] = None):
        self.camera = camera
        self.frame = frame if frame is not None else LocalFrame()
        self.sprite = sprite if sprite is not None else make_sparkle_sprite()
        self.attributes = ParticleAttributes()

    def submit(self, attributes: ParticleAttributes) -> None:
        self.attributes = attributes

    def draw(self, surface: pygame.Surface) -> int:
        """Additively draw the last submitted particles; return how many were drawn."""
        attrs = self.attributes
        size = surface.get_size()
        multiplier = point_multiplier(size[1])
        drawn = 0
        for i in range(len(attrs)):
            projected = self.camera.project(self.frame.to_world(attrs.position(i)), size)
            if projected is None:
                continue
            sx, sy, depth = projected
            px = attrs.sizes[i] * self.frame.scale * multiplier / depth
            if px < 1.0:
                continue
            r, g, b, a = attrs.color(i)
            tint = tuple(max(0, min(255, int(channel * a * 255))) for channel in (r, g, b))
            if tint == (0, 0, 0):
                continue
            image = pygame.transform.rotozoom(self.sprite, math.degrees(attrs.angles[i]), px / self.sprite.get_width())
            image.fill(tint, special_flags=pygame.BLEND_RGB_MULT)
            rect = image.get_rect(center=(int(sx), int(sy)))
            surface.blit(image, rect, special_flags=pygame.BLEND_RGB_ADD)
            drawn += 1
        return drawn


def draw_all(sinks: List[PreviewSink], surface: pygame.Surface) -> int:
    return sum(sink.draw(surface) for sink in sinks)


__all__ = [
    "point_multiplier",
    "LocalFrame",
    "OrbitCamera",
    "LocalViewpoint",
    "make_sparkle_sprite",
    "PreviewSink",
    "draw_all",
]

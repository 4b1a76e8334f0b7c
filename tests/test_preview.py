import math

import pygame
import pytest
from pygame.math import Vector3

from diorama.exporter import ParticleAttributes
from diorama.preview import (
    LocalFrame,
    LocalViewpoint,
    OrbitCamera,
    PreviewSink,
    draw_all,
    make_sparkle_sprite,
    point_multiplier,
)

SCREEN = (320, 180)


def _single(pos, size=3.0, color=(1.0, 1.0, 1.0), alpha=1.0):
    return ParticleAttributes(positions=list(pos), sizes=[size], colors=[*color, alpha], angles=[0.0])


def test_point_multiplier_matches_sixty_degree_fov():
    assert point_multiplier(720) == pytest.approx(720 / (2 * math.tan(math.radians(30))))


def test_local_frame_round_trip():
    frame = LocalFrame(Vector3(2, -2.2, -1), 1.5)
    world = frame.to_world((1, 2, 3))
    assert tuple(world) == pytest.approx((3.5, 0.8, 3.5))
    assert tuple(frame.to_local(world)) == pytest.approx((1, 2, 3))


def test_local_viewpoint_follows_the_camera():
    cam = OrbitCamera(target=Vector3(0, 0, 0), radius=10, height=0, angle=0.0)
    vp = LocalViewpoint(cam, LocalFrame(Vector3(0, 0, 5), 2.0))
    assert tuple(vp.position) == pytest.approx((0, 0, 2.5))
    cam.update(math.pi / 2 / cam.speed)
    assert tuple(vp.position) == pytest.approx((5, 0, -2.5))


def test_camera_projects_target_to_screen_center():
    cam = OrbitCamera(target=Vector3(1, -2, -1))
    sx, sy, depth = cam.project(cam.target, SCREEN)
    assert (sx, sy) == pytest.approx((160, 90))
    assert depth == pytest.approx(cam.position.distance_to(cam.target))


def test_points_behind_the_camera_are_skipped():
    cam = OrbitCamera(target=Vector3(0, 0, 0), radius=10, height=0, angle=0.0)
    assert cam.project(Vector3(0, 0, 20), SCREEN) is None


def test_sprite_is_white_star_on_black():
    sprite = make_sparkle_sprite(32)
    assert sprite.get_at((16, 16))[:3] == (255, 255, 255)
    assert sprite.get_at((0, 0))[:3] == (0, 0, 0)


def test_sink_draws_additively_at_the_projected_point():
    cam = OrbitCamera(target=Vector3(0, 0, 0))
    sink = PreviewSink(cam)
    sink.submit(_single((0, 0, 0), color=(1.0, 0.5, 0.5)))
    surface = pygame.Surface(SCREEN)
    surface.fill((10, 10, 10))
    assert sink.draw(surface) == 1
    r, g, b = surface.get_at((160, 90))[:3]
    assert r > 10 and r >= g and g == b


def test_transparent_and_offscreen_particles_are_not_drawn():
    cam = OrbitCamera(target=Vector3(0, 0, 0))
    invisible = PreviewSink(cam)
    invisible.submit(_single((0, 0, 0), alpha=0.0))
    behind = PreviewSink(cam)
    behind.submit(_single(tuple(cam.position * 2)))
    surface = pygame.Surface(SCREEN)
    assert draw_all([invisible, behind], surface) == 0

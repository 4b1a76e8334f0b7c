"""Preview harness: runs the diorama's two particle systems in a pygame window.

The real scene host lives in the browser; this loop stands in for it so the
engine can be watched and profiled locally. Like the browser scene it feeds
every system a fixed 0.016 s step per frame, whatever the real frame time.
Close the window or press ESC to quit.
"""

from __future__ import annotations

import os

import pygame
from pygame.math import Vector3

from diorama import constants as C
from diorama.logger import get_logger
from diorama.particle_system import ParticleSystem
from diorama.presets import (
    FIRE_EMITTER_POSITION,
    TREE_LIGHTS_LOCAL_POSITION,
    TREE_POSITION,
    TREE_SCALE,
    fire_config,
    tree_lights_config,
)
from diorama.preview import LocalFrame, LocalViewpoint, OrbitCamera, PreviewSink, draw_all
from diorama.services import PointHandle

log = get_logger("app")

WINDOW_SIZE = (1280, 720)
BACKGROUND = (12, 14, 28)


def build_scene(camera: OrbitCamera):
    """Create both systems with their sinks; returns ``(systems, sinks)``."""
    fire_sink = PreviewSink(camera)
    fire = ParticleSystem(
        fire_config(),
        emitter=PointHandle.at(FIRE_EMITTER_POSITION),
        viewpoint=camera,
        sink=fire_sink,
    )

    tree_frame = LocalFrame(Vector3(TREE_POSITION), TREE_SCALE)
    lights_sink = PreviewSink(camera, frame=tree_frame)
    lights = ParticleSystem(
        tree_lights_config(),
        emitter=PointHandle.at(TREE_LIGHTS_LOCAL_POSITION),
        viewpoint=LocalViewpoint(camera, tree_frame),
        sink=lights_sink,
    )
    return [fire, lights], [fire_sink, lights_sink]


def main():
    os.environ.setdefault("DIORAMA_LOG_LEVEL", "INFO")
    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    pygame.display.set_caption("diorama particles")
    clock = pygame.time.Clock()

    camera = OrbitCamera(target=Vector3(1.0, -2.0, -1.3))
    systems, sinks = build_scene(camera)

    running = True
    frames = 0
    while running:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                running = False

        camera.update(C.FRAME_STEP)
        for system in systems:
            system.update(C.FRAME_STEP)

        screen.fill(BACKGROUND)
        draw_all(sinks, screen)
        pygame.display.flip()
        clock.tick(60)

        frames += 1
        if frames % 300 == 0:
            counts = ", ".join(f"{s.name}={len(s)}" for s in systems)
            log.debug(f"fps={clock.get_fps():.1f} {counts}")

    pygame.quit()


if __name__ == "__main__":
    main()

"""Interactive window for the 3D scene."""

from __future__ import annotations

import argparse
from collections.abc import Container, Sequence

import pygame

from minilab.engine3d.camera import Camera
from minilab.engine3d.world import World

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
MOVE_SPEED = 200.0
ZOOM_SPEED = 100.0


def apply_controls(camera: Camera, pressed: Container[str], dt: float) -> None:
    """Move or zoom the camera for keys ``w a s d q e`` held during ``dt``."""
    if "w" in pressed:
        camera.offset_y -= MOVE_SPEED * dt
    if "s" in pressed:
        camera.offset_y += MOVE_SPEED * dt
    if "a" in pressed:
        camera.offset_x -= MOVE_SPEED * dt
    if "d" in pressed:
        camera.offset_x += MOVE_SPEED * dt
    if "q" in pressed:
        camera.zoom += ZOOM_SPEED * dt
    if "e" in pressed:
        camera.zoom -= ZOOM_SPEED * dt


def _pressed_keys() -> set[str]:
    keys = pygame.key.get_pressed()
    bindings = {
        pygame.K_w: "w",
        pygame.K_s: "s",
        pygame.K_a: "a",
        pygame.K_d: "d",
        pygame.K_q: "q",
        pygame.K_e: "e",
    }
    return {name for code, name in bindings.items() if keys[code]}


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the scene until it is closed."""
    parser = argparse.ArgumentParser(
        prog="minilab-engine3d",
        description="Falling spheres in perspective; WASD moves, Q/E zooms.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Lightweight 3D Engine")
        camera = Camera()
        world = World()
        world.generate_demo_objects()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            dt = clock.tick() / 1000.0
            apply_controls(camera, _pressed_keys(), dt)
            world.update(dt)
            screen.fill((0, 0, 0))
            world.draw(screen, camera)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0
"""The 3D scene: a ground plane and spheres that keep spawning."""

from __future__ import annotations

import random

import pygame

from minilab.engine3d.camera import Camera
from minilab.engine3d.object3d import Object3D

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
MAGENTA = (255, 0, 255)

GROUND_COLOR = (50, 150, 50)
GROUND_SIZE = (1600, 50)
GROUND_LEVEL = 300.0

SPAWN_INTERVAL = 2.0
SPAWN_HEIGHT = -100.0


class World:
    """Holds the objects of the scene and spawns new ones over time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.objects: list[Object3D] = []
        self.spawn_timer = 0.0

    def generate_demo_objects(self) -> None:
        """Add the five fixed demo spheres."""
        demo = [
            (-50.0, -100.0, 100.0, RED),
            (50.0, -80.0, 200.0, GREEN),
            (-100.0, -120.0, 150.0, BLUE),
            (0.0, -90.0, 250.0, YELLOW),
            (80.0, -110.0, 180.0, MAGENTA),
        ]
        for x, y, z, color in demo:
            self.objects.append(Object3D(x, y, z, 20.0, color, self.rng))

    def update(self, dt: float) -> None:
        """Advance every object and spawn a new one every two seconds."""
        for obj in self.objects:
            obj.update(dt)

        self.spawn_timer += dt
        if self.spawn_timer >= SPAWN_INTERVAL:
            rng = self.rng
            x = float(rng.randrange(800) - 400)
            z = float(rng.randrange(500) + 50)
            radius = float(rng.randrange(10) + 10)
            color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
            self.objects.append(Object3D(x, SPAWN_HEIGHT, z, radius, color, rng))
            self.spawn_timer = 0.0

    def draw(self, surface: pygame.Surface, camera: Camera) -> None:
        """Draw the ground, then every object."""
        ground = pygame.Rect((0, 0), GROUND_SIZE)
        ground.center = (
            round(camera.project_x(0.0, 0.0)),
            round(camera.project_y(GROUND_LEVEL, 0.0)),
        )
        pygame.draw.rect(surface, GROUND_COLOR, ground)
        for obj in self.objects:
            obj.draw(surface, camera)
"""A falling, bouncing sphere in the 3D scene."""

from __future__ import annotations

import random

import pygame

from minilab.engine3d.camera import Camera

GRAVITY = 300.0
BOUNCE_DAMPING = 0.7
GROUND_Y = 300.0


class Object3D:
    """A sphere with position, radius, colour and velocity."""

    def __init__(
        self,
        x: float,
        y: float,
        z: float,
        radius: float,
        color: tuple[int, int, int],
        rng: random.Random | None = None,
    ) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.radius = radius
        self.color = tuple(color)
        rng = rng if rng is not None else random.Random()
        self.velocity_x = float(rng.randrange(-100, 100))
        self.velocity_y = 0.0

    def update(self, dt: float) -> None:
        """Apply gravity and motion, bouncing off the ground plane."""
        self.velocity_y += GRAVITY * dt
        self.x += self.velocity_x * dt
        self.y += self.velocity_y * dt
        if self.y > GROUND_Y:
            self.y = GROUND_Y
            self.velocity_y = -self.velocity_y * BOUNCE_DAMPING

    def draw(self, surface: pygame.Surface, camera: Camera) -> pygame.Rect:
        """Draw the sphere as a perspective-scaled circle."""
        screen_x = camera.project_x(self.x, self.z)
        screen_y = camera.project_y(self.y, self.z)
        scaled_radius = self.radius * camera.scale(self.z)
        return pygame.draw.circle(surface, self.color, (screen_x, screen_y), scaled_radius)
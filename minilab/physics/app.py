"""Interactive window for the 2D physics world."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence

import pygame

from minilab.physics.body import Body
from minilab.physics.vector2d import Vector2D
from minilab.physics.world import World

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
TIME_STEP = 0.01
GROUND_Y = 580.0
GRAVITY = Vector2D(0.0, 98.0)
BOUNCE_DAMPING = 0.7
BODY_COUNT = 10


def make_bodies(count: int, rng: random.Random) -> list[Body]:
    """Create ``count`` unit-mass bodies with random radius and position."""
    bodies = []
    for _ in range(count):
        radius = 10.0 + rng.randrange(20)
        position = Vector2D(float(100 + rng.randrange(600)), float(50 + rng.randrange(100)))
        bodies.append(Body(1.0, radius, position))
    return bodies


def bounce_off_ground(bodies: Iterable[Body], ground_y: float) -> None:
    """Push bodies that reach the ground back above it and bounce them."""
    for body in bodies:
        if body.position.y + body.radius >= ground_y:
            body.position = Vector2D(body.position.x, ground_y - body.radius)
            body.velocity = Vector2D(body.velocity.x, body.velocity.y * -BOUNCE_DAMPING)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the simulation until it is closed."""
    parser = argparse.ArgumentParser(
        prog="minilab-physics",
        description="Bouncing circles under gravity.",
    )
    parser.parse_args(argv)

    rng = random.Random()
    world = World(GRAVITY)
    for body in make_bodies(BODY_COUNT, rng):
        world.add_body(body)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Physics Engine!")
        clock = pygame.time.Clock()
        accumulator = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            accumulator += clock.tick() / 1000.0
            while accumulator >= TIME_STEP:
                world.step(TIME_STEP)
                bounce_off_ground(world.bodies, GROUND_Y)
                accumulator -= TIME_STEP

            screen.fill((0, 0, 0))
            for body in world.bodies:
                color = tuple(100 + rng.randrange(155) for _ in range(3))
                pygame.draw.circle(
                    screen, color, (body.position.x, body.position.y), body.radius
                )
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0
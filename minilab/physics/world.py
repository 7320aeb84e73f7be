"""A world of bodies under uniform gravity with crude collisions."""

from __future__ import annotations

import dataclasses
from itertools import combinations

from minilab.physics.body import Body
from minilab.physics.vector2d import Vector2D


class World:
    """Steps bodies under gravity and reverses colliding pairs."""

    def __init__(self, gravity: Vector2D) -> None:
        self.gravity = gravity
        self.bodies: list[Body] = []

    def add_body(self, body: Body) -> None:
        """Add a copy of ``body`` to the world."""
        self.bodies.append(dataclasses.replace(body))

    def step(self, dt: float) -> None:
        """Advance all bodies by ``dt`` and resolve overlaps."""
        for body in self.bodies:
            body.apply_force(self.gravity * body.mass)
            body.update(dt)

        for first, second in combinations(self.bodies, 2):
            distance = (first.position - second.position).magnitude()
            if distance <= first.radius + second.radius:
                first.velocity = first.velocity * -1
                second.velocity = second.velocity * -1
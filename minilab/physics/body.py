"""A rigid circular body driven by forces."""

from __future__ import annotations

from dataclasses import dataclass, field

from minilab.physics.vector2d import Vector2D


@dataclass
class Body:
    """A circular body with mass and radius that integrates its motion."""

    mass: float
    radius: float
    position: Vector2D = field(default_factory=Vector2D)
    velocity: Vector2D = field(default_factory=Vector2D)
    acceleration: Vector2D = field(default_factory=Vector2D)

    def apply_force(self, force: Vector2D) -> None:
        """Accumulate the acceleration the force produces (a = F / m)."""
        self.acceleration = self.acceleration + force / self.mass

    def update(self, dt: float) -> None:
        """Integrate velocity and position, then clear the acceleration."""
        self.velocity = self.velocity + self.acceleration * dt
        self.position = self.position + self.velocity * dt
        self.acceleration = Vector2D(0.0, 0.0)
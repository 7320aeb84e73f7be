"""Immutable two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector2D:
    """A 2D vector with arithmetic operators."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2D(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0.0, 0.0)
        return self / mag
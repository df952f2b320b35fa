"""Two-dimensional float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector with the usual arithmetic and distance helpers."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vector2:
        return Vector2(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Vector2:
        return Vector2(self.x / value, self.y / value)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.magnitude()
        if length <= 0:
            return self
        return self / length

    def distance(self, other: Vector2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def manhattan_distance(self, other: Vector2) -> float:
        """Sum of the absolute coordinate differences."""
        return abs(other.x - self.x) + abs(other.y - self.y)

    def chebyshev_distance(self, other: Vector2) -> float:
        """Largest absolute coordinate difference."""
        return max(abs(other.x - self.x), abs(other.y - self.y))
"""Axis-aligned rectangle given by its top-left and bottom-right corners."""

from __future__ import annotations

from dataclasses import dataclass, field

from dwarfgame.vector2 import Vector2


@dataclass
class Rectangle:
    """A rectangle in screen coordinates."""

    top_left: Vector2 = field(default_factory=Vector2)
    bottom_right: Vector2 = field(default_factory=Vector2)

    def inside(self, x: float, y: float) -> bool:
        """True when the point lies within the rectangle, edges included."""
        return (
            self.top_left.x <= x <= self.bottom_right.x
            and self.top_left.y <= y <= self.bottom_right.y
        )

    def contains_point(self, point: Vector2) -> bool:
        """True when the point lies within the rectangle, edges included."""
        return self.inside(point.x, point.y)

    def intersects(self, other: Rectangle) -> bool:
        """True when any corner of ``other`` lies inside this rectangle."""
        left, top = other.top_left.x, other.top_left.y
        right, bottom = other.bottom_right.x, other.bottom_right.y
        corners = ((left, top), (right, top), (left, bottom), (right, bottom))
        return any(self.inside(x, y) for x, y in corners)
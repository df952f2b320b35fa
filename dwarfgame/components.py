"""Core entity components: identifiers, position, velocity, lifetime, health and collider."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar

from dwarfgame.rectangle import Rectangle
from dwarfgame.vector2 import Vector2


class ComponentID(IntEnum):
    """Identifier of a component kind; its value is its bit in an entity's mask."""

    UNDEFINED = -1
    INPUT = 0
    STATE = 1
    POSITION = 2
    COLLIDER = 3
    VELOCITY = 4
    GRAPHICS = 5
    HEALTH = 6
    TTL = 7


class Component:
    """Base of every component; subclasses set ``component_id``."""

    component_id: ClassVar[ComponentID] = ComponentID.UNDEFINED


@dataclass
class PositionComponent(Component):
    """World position of an entity."""

    component_id: ClassVar[ComponentID] = ComponentID.POSITION

    position: Vector2 = field(default_factory=Vector2)

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2(x, y)


@dataclass
class VelocityComponent(Component):
    """Movement direction and speed of an entity."""

    component_id: ClassVar[ComponentID] = ComponentID.VELOCITY

    speed: float = 1.0
    velocity: Vector2 = field(default_factory=Vector2)

    def set_velocity(self, x: float, y: float) -> None:
        self.velocity = Vector2(x, y)


@dataclass
class TTLComponent(Component):
    """Remaining lifetime of an entity, counted in frames."""

    component_id: ClassVar[ComponentID] = ComponentID.TTL

    ttl: int

    def decrement(self) -> None:
        self.ttl -= 1


@dataclass
class HealthComponent(Component):
    """Health points clamped between zero and a maximum."""

    component_id: ClassVar[ComponentID] = ComponentID.HEALTH

    health: int
    max_health: int

    def change_health(self, amount: int) -> None:
        """Add ``amount`` (possibly negative), keeping health within [0, max]."""
        self.health = max(0, min(self.health + amount, self.max_health))


@dataclass
class ColliderComponent(Component):
    """Axis-aligned bounding box used for collisions."""

    component_id: ClassVar[ComponentID] = ComponentID.COLLIDER

    bounding_box: Rectangle = field(default_factory=Rectangle)
    bbox_size: Vector2 = field(default_factory=Vector2)

    def set_bounding_box_location(self, position: Vector2) -> None:
        """Move the box so that its top-left corner is at ``position``."""
        self.bounding_box.top_left = position
        self.bounding_box.bottom_right = position + self.bbox_size

    def intersects(self, other: Rectangle) -> bool:
        return self.bounding_box.intersects(other)

    def draw(self, window: Any) -> None:
        """Draw the outline of the bounding box on ``window``."""
        window.draw_outline(self.bounding_box)
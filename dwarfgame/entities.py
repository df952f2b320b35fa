"""Game entities: the base entity, fireballs, potions and logs."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from dwarfgame.archetypes import ArchetypeID
from dwarfgame.bitmask import Bitmask
from dwarfgame.components import (
    ColliderComponent,
    Component,
    ComponentID,
    PositionComponent,
    TTLComponent,
    VelocityComponent,
)
from dwarfgame.graphics_component import GraphicsComponent
from dwarfgame.vector2 import Vector2


class EntityType(Enum):
    UNDEFINED = -1
    PLAYER = 0
    POTION = 1
    LOG = 2
    FIRE = 3


class Entity:
    """A bag of components identified by an id."""

    def __init__(self, entity_type: EntityType = EntityType.UNDEFINED) -> None:
        self.type = entity_type
        self.id = 0
        self.component_set = Bitmask()
        self.is_sprite_sheet = True
        self.deleted = False
        self.archetype_id: ArchetypeID | None = None
        self._components: dict[ComponentID, Component] = {}
        self.add_component(PositionComponent())

    def init(self, texture_file: str | Path, scale: float, graphics: GraphicsComponent) -> None:
        """Attach ``graphics`` and load a single texture into it."""
        self.add_component(graphics)
        current = self.graphics
        if current is not None:
            current.init(texture_file, scale)

    def init_sprite_sheet(self, sprite_sheet_file: str | Path) -> None:
        """Load a sprite sheet into the graphics and add a collider of one frame's size."""
        graphics = self.graphics
        if graphics is None:
            return
        graphics.init_sprite_sheet(sprite_sheet_file)
        width, height = graphics.sprite_size()
        scale = graphics.sprite_scale()
        self.add_component(ColliderComponent(bbox_size=Vector2(width * scale.x, height * scale.y)))

    def add_component(self, component: Component) -> None:
        """Add a component; one already held of the same kind is kept."""
        self._components.setdefault(component.component_id, component)
        self.component_set.turn_on_bit(int(component.component_id))

    def get_component(self, component_id: ComponentID) -> Any | None:
        return self._components.get(component_id)

    @property
    def position_component(self) -> PositionComponent | None:
        return self.get_component(ComponentID.POSITION)

    @property
    def graphics(self) -> GraphicsComponent | None:
        return self.get_component(ComponentID.GRAPHICS)

    @property
    def collider(self) -> ColliderComponent | None:
        return self.get_component(ComponentID.COLLIDER)

    @property
    def position(self) -> Vector2:
        component = self.position_component
        return Vector2() if component is None else component.position

    def set_position(self, x: float, y: float) -> None:
        component = self.position_component
        if component is not None:
            component.set_position(x, y)
        graphics = self.graphics
        if graphics is not None:
            graphics.set_position(Vector2(x, y))

    def has_component(self, mask: Bitmask) -> bool:
        """True when the entity holds every component kind set in ``mask``."""
        return self.component_set.contains(mask)

    def mark_deleted(self) -> None:
        self.deleted = True


class Fire(Entity):
    """A fireball that flies in a straight line for a limited number of frames."""

    START_TIME_TO_LIVE = 150

    def __init__(self) -> None:
        super().__init__(EntityType.FIRE)
        self.ttl_component = TTLComponent(self.START_TIME_TO_LIVE)
        self.add_component(self.ttl_component)
        self.velocity_component = VelocityComponent()
        self.add_component(self.velocity_component)
        self.archetype_id = ArchetypeID.FIREBALL

    @property
    def ttl(self) -> int:
        return self.ttl_component.ttl


class _StaticEntity(Entity):
    """A pickup that does not move and collides with its texture's bounds."""

    def init(self, texture_file: str | Path, scale: float, graphics: GraphicsComponent) -> None:
        super().init(texture_file, scale, graphics)
        self.archetype_id = ArchetypeID.STATIC_ENTITY
        current = self.graphics
        width, height = current.texture_size()
        sprite_scale = current.scale()
        collider = ColliderComponent(bbox_size=Vector2(width * sprite_scale.x, height * sprite_scale.y))
        self.add_component(collider)
        if self.collider is not None:
            self.collider.set_bounding_box_location(self.position)


class Potion(_StaticEntity):
    """Restores some of the player's health when collected."""

    HEALTH = 10

    def __init__(self) -> None:
        super().__init__(EntityType.POTION)

    @property
    def health(self) -> int:
        return self.HEALTH

    def init(self, texture_file: str | Path, scale: float, graphics: GraphicsComponent) -> None:
        super().init(texture_file, scale, graphics)


class Log(_StaticEntity):
    """Gives the player wood when chopped."""

    WOOD = 15

    def __init__(self) -> None:
        super().__init__(EntityType.LOG)

    @property
    def wood(self) -> int:
        return self.WOOD

    def init(self, texture_file: str | Path, scale: float, graphics: GraphicsComponent) -> None:
        super().init(texture_file, scale, graphics)
"""Systems that process every entity holding a given set of components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Container

import pygame

from dwarfgame.bitmask import Bitmask
from dwarfgame.components import ComponentID
from dwarfgame.entities import Entity
from dwarfgame.inputs import PlayerInputComponent
from dwarfgame.vector2 import Vector2

_WATCHED_KEYS = (
    pygame.K_w,
    pygame.K_a,
    pygame.K_s,
    pygame.K_d,
    pygame.K_UP,
    pygame.K_LEFT,
    pygame.K_DOWN,
    pygame.K_RIGHT,
    pygame.K_SPACE,
    pygame.K_LSHIFT,
    pygame.K_ESCAPE,
    pygame.K_RETURN,
)


def _pressed_keys() -> frozenset[int]:
    """Codes of the game's keys currently held; empty when no display is open."""
    try:
        state = pygame.key.get_pressed()
    except pygame.error:
        return frozenset()
    return frozenset(key for key in _WATCHED_KEYS if state[key])


class System(ABC):
    """Updates entities that hold all of the components in ``required``."""

    required: ClassVar[tuple[ComponentID, ...]] = ()

    def __init__(self) -> None:
        self.component_mask = Bitmask()
        for component_id in self.required:
            self.component_mask.turn_on_bit(int(component_id))

    def validate(self, entity: Entity) -> bool:
        """True when the system has requirements and the entity meets them all."""
        return self.component_mask.mask != 0 and entity.has_component(self.component_mask)

    @abstractmethod
    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        """Process ``entity`` for a frame lasting ``elapsed`` seconds."""


class TTLSystem(System):
    """Counts down lifetimes and deletes entities whose time is up."""

    required = (ComponentID.TTL,)

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        ttl = entity.get_component(ComponentID.TTL)
        if ttl is None:
            return
        ttl.decrement()
        if ttl.ttl <= 0:
            entity.mark_deleted()


class InputSystem(System):
    """Turns held keys into player commands, after stopping the entity."""

    required = (ComponentID.INPUT, ComponentID.POSITION)

    def __init__(self, key_source: Callable[[], Container[int]] | None = None) -> None:
        super().__init__()
        self.key_source = key_source or _pressed_keys

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        component = entity.get_component(ComponentID.INPUT)
        if not isinstance(component, PlayerInputComponent):
            return
        velocity = entity.get_component(ComponentID.VELOCITY)
        if velocity is not None:
            velocity.set_velocity(0.0, 0.0)
        for command in component.handler.handle_input(self.key_source()):
            command.execute(game)


class MovementSystem(System):
    """Moves entities along their velocity, scaled by speed and elapsed time."""

    required = (ComponentID.POSITION, ComponentID.VELOCITY)

    def __init__(self) -> None:
        super().__init__()
        self.target_x = 0.0
        self.target_y = 0.0
        self.movement_x = 0.0
        self.movement_y = 0.0

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        velocity = entity.get_component(ComponentID.VELOCITY)
        position = entity.get_component(ComponentID.POSITION)
        if velocity is None or position is None:
            return
        step = velocity.velocity * (velocity.speed * elapsed)
        moved = position.position + step
        position.set_position(moved.x, moved.y)


class GraphicsSystem(System):
    """Moves each entity's drawing to its position, animates it and draws it."""

    required = (ComponentID.POSITION, ComponentID.GRAPHICS)

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        graphics = entity.get_component(ComponentID.GRAPHICS)
        position = entity.get_component(ComponentID.POSITION)
        graphics.update(game, elapsed, position.position)
        graphics.draw(game.window)


class GameplaySystem(System):
    """Runs the entity's gameplay state logic."""

    required = (ComponentID.STATE,)

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        entity.get_component(ComponentID.STATE).update(entity, game, elapsed)


class ColliderSystem(System):
    """Keeps each bounding box on top of its entity's position."""

    required = (ComponentID.POSITION, ComponentID.COLLIDER)

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        collider = entity.get_component(ComponentID.COLLIDER)
        position: Vector2 = entity.position
        collider.set_bounding_box_location(position)


class PrintDebugSystem(System):
    """Draws the outline of every bounding box."""

    required = (ComponentID.COLLIDER,)

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        entity.get_component(ComponentID.COLLIDER).draw(game.window)
"""Runs the game's systems over its entities using one of three storage schemes."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable

from dwarfgame.archetypes import ArchetypeID, ArchetypeManager, SystemType
from dwarfgame.entities import Entity
from dwarfgame.packed_array import PackedArrayManager
from dwarfgame.systems import (
    ColliderSystem,
    GameplaySystem,
    GraphicsSystem,
    InputSystem,
    MovementSystem,
    PrintDebugSystem,
    System,
    TTLSystem,
)


class EcsMethod(IntEnum):
    BIG_ARRAY = 0
    ARCHETYPES = 1
    PACKED_ARRAY = 2


class EcsSystemHandler:
    """Builds the systems for the game's ECS method and applies them each frame."""

    def __init__(self) -> None:
        self.archetype_manager: ArchetypeManager | None = None
        self.packed_array_manager: PackedArrayManager | None = None
        self.logic_systems: list[System] = []
        self.graphics_systems: list[System] = []

    def populate(self, game: Any) -> None:
        """Create the systems according to ``game.ecs_method`` and ``game.draw_debug``."""
        ttl = TTLSystem()
        inputs = InputSystem()
        movement = MovementSystem()
        gameplay = GameplaySystem()
        collider = ColliderSystem()
        graphics = GraphicsSystem()
        debug = PrintDebugSystem()

        method = game.ecs_method
        if method == EcsMethod.BIG_ARRAY:
            self.logic_systems = [ttl, inputs, movement, gameplay, collider]
            self.graphics_systems = [graphics]
            if game.draw_debug:
                self.graphics_systems.append(debug)
            print("Big Array ECS")
        elif method == EcsMethod.ARCHETYPES:
            manager = ArchetypeManager()
            manager.add_archetype_systems(ArchetypeID.STATIC_ENTITY, [collider], graphics)
            manager.add_archetype_systems(
                ArchetypeID.DWARF_PLAYER, [inputs, movement, gameplay, collider], graphics
            )
            manager.add_archetype_systems(ArchetypeID.FIREBALL, [ttl, movement], graphics)
            if game.draw_debug:
                manager.add_debug(ArchetypeID.DWARF_PLAYER, debug)
                manager.add_debug(ArchetypeID.STATIC_ENTITY, debug)
            self.archetype_manager = manager
            print("Archetypes ECS")
        elif method == EcsMethod.PACKED_ARRAY:
            self.packed_array_manager = PackedArrayManager()
            self.logic_systems = [ttl, inputs, movement, gameplay, collider]
            self.graphics_systems = [graphics]
            if game.draw_debug:
                self.graphics_systems.append(debug)

    def update(self, elapsed: float, game: Any, system_type: SystemType) -> None:
        """Apply the logic or graphics systems to the game's live entities."""
        method = game.ecs_method
        if method == EcsMethod.BIG_ARRAY:
            self._update_big_array(elapsed, game, list(game.entities), system_type)
        elif method == EcsMethod.ARCHETYPES:
            self._update_archetypes(elapsed, game, list(game.entities), system_type)
        elif method == EcsMethod.PACKED_ARRAY:
            entities = list(self.packed_array_manager.entities)
            self._update_big_array(elapsed, game, entities, system_type)

    def _systems_for(self, system_type: SystemType) -> list[System]:
        if system_type is SystemType.LOGIC:
            return self.logic_systems
        if system_type is SystemType.GRAPHICS:
            return self.graphics_systems
        return []

    def _update_big_array(
        self, elapsed: float, game: Any, entities: Iterable[Entity], system_type: SystemType
    ) -> None:
        entities = list(entities)
        for system in self._systems_for(system_type):
            for entity in entities:
                if not entity.deleted and system.validate(entity):
                    system.update(entity, game, elapsed)

    def _update_archetypes(
        self, elapsed: float, game: Any, entities: Iterable[Entity], system_type: SystemType
    ) -> None:
        for entity in entities:
            if entity.deleted:
                continue
            for system in self.archetype_manager.get_systems(entity.archetype_id, system_type):
                system.update(entity, game, elapsed)
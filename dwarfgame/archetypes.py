"""Mapping from entity archetypes to the systems that process them."""

from __future__ import annotations

import logging
from collections import defaultdict
from enum import Enum, auto
from typing import Any, Iterable

logger = logging.getLogger(__name__)


class ArchetypeID(Enum):
    STATIC_ENTITY = auto()
    DWARF_PLAYER = auto()
    FIREBALL = auto()


class SystemType(Enum):
    LOGIC = auto()
    GRAPHICS = auto()


class ArchetypeManager:
    """Holds, per archetype, a list of logic systems and a list of graphics systems."""

    def __init__(self) -> None:
        self._systems: defaultdict[ArchetypeID, tuple[list[Any], list[Any]]] = defaultdict(
            lambda: ([], [])
        )

    def add_archetype_systems(
        self, archetype_id: ArchetypeID, logic_systems: Iterable[Any], graphics_system: Any
    ) -> None:
        """Set the systems of an archetype, replacing any previous ones."""
        self._systems[archetype_id] = (list(logic_systems), [graphics_system])

    def add_debug(self, archetype_id: ArchetypeID, system: Any) -> None:
        """Append an extra graphics system to an archetype."""
        self._systems[archetype_id][1].append(system)

    def get_systems(self, archetype_id: ArchetypeID, system_type: SystemType) -> list[Any]:
        """A copy of the archetype's systems of the given kind."""
        logic, graphics = self._systems[archetype_id]
        if system_type is SystemType.LOGIC:
            return list(logic)
        if system_type is SystemType.GRAPHICS:
            return list(graphics)
        logger.error("Unknown system type: %r", system_type)
        return []
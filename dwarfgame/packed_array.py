"""Dense storage of entities with constant-time lookup and removal by id."""

from __future__ import annotations

from typing import Any


class PackedArrayManager:
    """Keeps entities contiguous in a list, indexed by their id."""

    def __init__(self) -> None:
        self._dense: list[Any] = []
        self._sparse: dict[int, int] = {}

    @property
    def entities(self) -> list[Any]:
        """The live, contiguous list of stored entities."""
        return self._dense

    def __len__(self) -> int:
        return len(self._dense)

    def add_entity(self, entity: Any) -> None:
        self._sparse[entity.id] = len(self._dense)
        self._dense.append(entity)

    def remove_entity(self, entity_id: int) -> None:
        """Remove an entity by swapping the last one into its slot; unknown ids are ignored."""
        index = self._sparse.get(entity_id)
        if index is None:
            return
        moved = self._dense[-1]
        self._dense[index] = moved
        self._sparse[moved.id] = index
        self._dense.pop()
        del self._sparse[entity_id]

    def get_entity(self, entity_id: int) -> Any | None:
        index = self._sparse.get(entity_id)
        return None if index is None else self._dense[index]
"""Event subjects, observers and the achievement tracker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class EventType(Enum):
    UNDEFINED = -1
    COLLECT_POTION = 0
    SHOUT = 1


class AchievementType(Enum):
    UNDEFINED = -1
    COLLECTED_ALL_POTIONS = 0
    SHOUT_5_TIMES = 1


class Observer(ABC):
    """Something that reacts to events raised by a subject."""

    @abstractmethod
    def on_notify(self, entity: Any, event: EventType) -> bool:
        """Handle ``event`` raised for ``entity``."""


class Subject:
    """Keeps a list of observers and forwards events to them."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove the first registration of ``observer``; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, entity: Any, event: EventType) -> None:
        # Observers may unregister themselves while being notified.
        for observer in list(self._observers):
            observer.on_notify(entity, event)


_MESSAGES = {
    AchievementType.COLLECTED_ALL_POTIONS: "Achievement Unlocked: Collected All Potions",
    AchievementType.SHOUT_5_TIMES: "Achievement Unlocked: Shouted 5 Times",
}


class AchievementManager(Observer):
    """Counts player events and unlocks achievements when goals are reached."""

    POTION_GOAL = 6
    SHOUT_GOAL = 5

    def __init__(self) -> None:
        self.potion_counter = 0
        self.shout_counter = 0
        self.unlocked: list[AchievementType] = []

    def attach(self, player: Any) -> None:
        """Listen to the player's potion and shout subjects."""
        player.potion_collected.add_observer(self)
        player.shout_triggered.add_observer(self)

    def on_notify(self, entity: Any, event: EventType) -> bool:
        if event is EventType.COLLECT_POTION:
            self.potion_counter += 1
            if self.potion_counter >= self.POTION_GOAL:
                self._unlock(entity, AchievementType.COLLECTED_ALL_POTIONS)
                return True
            return False
        if event is EventType.SHOUT:
            self.shout_counter += 1
            if self.shout_counter >= self.SHOUT_GOAL:
                self._unlock(entity, AchievementType.SHOUT_5_TIMES)
                return True
            return False
        return False

    def _unlock(self, entity: Any, achievement: AchievementType) -> None:
        print(_MESSAGES[achievement])
        self.unlocked.append(achievement)
        if achievement is AchievementType.COLLECTED_ALL_POTIONS:
            entity.potion_collected.remove_observer(self)
        else:
            entity.shout_triggered.remove_observer(self)
"""Commands triggered by input and executed against the game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from dwarfgame.components import ComponentID


class Command(ABC):
    """An action that can be executed on a game."""

    @abstractmethod
    def execute(self, game: Any) -> None:
        """Carry out the action on ``game``."""


class SwitchCommand(Command):
    """Switch between the WASD and arrow-key control schemes."""

    def execute(self, game: Any) -> None:
        game.toggle_control()


class PauseCommand(Command):
    """Pause or resume the game."""

    def execute(self, game: Any) -> None:
        game.toggle_pause()


def _player_velocity(game: Any) -> Any:
    return game.player.get_component(ComponentID.VELOCITY)


def _player_state(game: Any) -> Any:
    return game.player.get_component(ComponentID.STATE)


class MoveRightCommand(Command):
    def execute(self, game: Any) -> None:
        velocity = _player_velocity(game)
        velocity.set_velocity(1.0, velocity.velocity.y)


class MoveLeftCommand(Command):
    def execute(self, game: Any) -> None:
        velocity = _player_velocity(game)
        velocity.set_velocity(-1.0, velocity.velocity.y)


class MoveUpCommand(Command):
    def execute(self, game: Any) -> None:
        velocity = _player_velocity(game)
        velocity.set_velocity(velocity.velocity.x, -1.0)


class MoveDownCommand(Command):
    def execute(self, game: Any) -> None:
        velocity = _player_velocity(game)
        velocity.set_velocity(velocity.velocity.x, 1.0)


class AttackCommand(Command):
    """Start the player's axe attack."""

    def execute(self, game: Any) -> None:
        _player_state(game).attacking = True


class ShoutCommand(Command):
    """Start the player's shout, which may throw a fireball."""

    def execute(self, game: Any) -> None:
        _player_state(game).shouting = True
"""Keyboard handling: game-level keys and the player's movement keys."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Container

import pygame

from dwarfgame.commands import (
    AttackCommand,
    Command,
    MoveDownCommand,
    MoveLeftCommand,
    MoveRightCommand,
    MoveUpCommand,
    PauseCommand,
    ShoutCommand,
    SwitchCommand,
)
from dwarfgame.components import Component, ComponentID


class ControlType(IntEnum):
    UNDEFINED = -1
    WASD = 0
    ARROWS = 1


class InputHandler:
    """Turns presses of Escape and Enter into pause and control-switch commands.

    A key fires once when it goes down and again only after being released.
    """

    def __init__(self) -> None:
        self.pause = PauseCommand()
        self.enter = SwitchCommand()
        self._escape_held = False
        self._enter_held = False

    def handle_input(self, pressed: Container[int]) -> Command | None:
        """The command for the keys in ``pressed`` (codes of held keys), if any."""
        if pygame.K_ESCAPE in pressed:
            if not self._escape_held:
                self._escape_held = True
                return self.pause
        else:
            self._escape_held = False

        if pygame.K_RETURN in pressed:
            if not self._enter_held:
                self._enter_held = True
                return self.enter
        else:
            self._enter_held = False
        return None


class PlayerInputHandler:
    """Maps held keys to the player's movement, attack and shout commands."""

    def __init__(self) -> None:
        self.move_right = MoveRightCommand()
        self.move_left = MoveLeftCommand()
        self.move_up = MoveUpCommand()
        self.move_down = MoveDownCommand()
        self.attack = AttackCommand()
        self.shout = ShoutCommand()
        self.active_commands: dict[int, Command] = {}
        self.update_keys(ControlType.WASD)

    def handle_input(self, pressed: Container[int]) -> list[Command]:
        """Commands for the held keys: movement first, then attack, then shout."""
        commands = [command for key, command in self.active_commands.items() if key in pressed]
        if pygame.K_SPACE in pressed:
            commands.append(self.attack)
        if pygame.K_LSHIFT in pressed:
            commands.append(self.shout)
        return commands

    def update_keys(self, control: int) -> None:
        """Bind the movement commands to WASD (0) or the arrow keys (1)."""
        if control == ControlType.WASD:
            self.active_commands = {
                pygame.K_a: self.move_left,
                pygame.K_d: self.move_right,
                pygame.K_s: self.move_down,
                pygame.K_w: self.move_up,
            }
        elif control == ControlType.ARROWS:
            self.active_commands = {
                pygame.K_LEFT: self.move_left,
                pygame.K_RIGHT: self.move_right,
                pygame.K_UP: self.move_up,
                pygame.K_DOWN: self.move_down,
            }
        else:
            self.active_commands = {}


class InputComponent(Component):
    """Marks an entity as driven by input."""

    component_id: ClassVar[ComponentID] = ComponentID.INPUT


class PlayerInputComponent(InputComponent):
    """Input component holding the player's key bindings."""

    def __init__(self) -> None:
        self.handler = PlayerInputHandler()
"""Gameplay logic components, chiefly the player's action state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from dwarfgame.audio import get_audio_manager
from dwarfgame.components import Component, ComponentID, VelocityComponent
from dwarfgame.entities import Entity, EntityType, Fire
from dwarfgame.graphics_component import SpriteGraphics
from dwarfgame.spritesheet import Direction
from dwarfgame.vector2 import Vector2

FIRE_TEXTURE = "img/fire.png"
FIRE_SOUND = "FireBall.flac"
AXE_SOUND = "AxeSwing.wav"


class LogicComponent(Component, ABC):
    """A component that runs gameplay logic each frame."""

    @abstractmethod
    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        """Advance the logic of ``entity`` by ``elapsed`` seconds."""


@dataclass(eq=False)
class PlayerStateComponent(LogicComponent):
    """The player's attack and shout state, wood supply and fireball cooldown."""

    component_id: ClassVar[ComponentID] = ComponentID.STATE

    velocity: VelocityComponent
    attacking: bool = False
    shouting: bool = False
    max_wood: int = 100
    wood: int = 0
    shooting_cost: int = 20
    shoot_cooldown: float = 0.0
    shoot_cooldown_time: float = 3.0
    fire_speed: float = 200.0
    axe_audio: bool = False

    def update(self, entity: Entity, game: Any, elapsed: float) -> None:
        """Pick the player's animation and throw a fireball when a shout allows it."""
        if entity.type is not EntityType.PLAYER:
            return
        graphics = entity.graphics
        self._finish_actions(graphics)

        if self.attacking:
            graphics.set_animation("Attack", True, False)
            if graphics.is_in_action() and not self.axe_audio:
                get_audio_manager().play_sound(AXE_SOUND)
                self.axe_audio = True
        elif self.shouting:
            graphics.set_animation("Shout", True, False)
        else:
            vx, vy = self.velocity.velocity.x, self.velocity.velocity.y
            if vx > 0:
                graphics.set_animation("Walk", True, True)
                graphics.set_sprite_direction(Direction.RIGHT)
            elif vx < 0:
                graphics.set_animation("Walk", True, True)
                graphics.set_sprite_direction(Direction.LEFT)
            elif vy == 0:
                graphics.set_animation("Idle", True, True)
            else:
                graphics.set_animation("Walk", True, True)

        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= elapsed
        if (
            self.shouting
            and graphics.is_in_action()
            and self.wood >= self.shooting_cost
            and self.shoot_cooldown <= 0
        ):
            entity.shout_trigger()
            game.add_entity(self.create_fire(entity))
            self.wood -= self.shooting_cost
            self.shoot_cooldown = self.shoot_cooldown_time

        self._finish_actions(graphics)

    def _finish_actions(self, graphics: Any) -> None:
        if self.attacking and not graphics.is_playing():
            self.attacking = False
            self.axe_audio = False
        if self.shouting and not graphics.is_playing():
            self.shouting = False

    def add_wood(self, amount: int) -> None:
        """Add ``amount`` of wood, keeping the total within [0, max_wood]."""
        self.wood = max(0, min(self.wood + amount, self.max_wood))
        print(f"Collide with wood (Wood collected: {amount}, Total Player Wood: {self.wood})")

    def create_fire(self, player: Entity) -> Fire:
        """A fireball starting at the player's centre, flying the way the player faces."""
        graphics = player.graphics
        width, height = graphics.texture_size()
        start = player.position + Vector2(width * 0.5, height * 0.5)

        fire = Fire()
        fire.init(FIRE_TEXTURE, 1.0, SpriteGraphics())
        fire.set_position(start.x, start.y)

        speed = self.fire_speed
        if graphics.sprite_direction() is Direction.LEFT:
            speed = -speed
        fire.velocity_component.set_velocity(speed, 0.0)

        get_audio_manager().play_sound(FIRE_SOUND)
        return fire
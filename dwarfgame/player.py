"""The player-controlled dwarf."""

from __future__ import annotations

from dwarfgame.archetypes import ArchetypeID
from dwarfgame.audio import get_audio_manager
from dwarfgame.components import HealthComponent, VelocityComponent
from dwarfgame.entities import Entity, EntityType
from dwarfgame.inputs import PlayerInputComponent
from dwarfgame.logic import PlayerStateComponent
from dwarfgame.observer import EventType, Subject

COLLECT_SOUND = "CollectItemAudio.wav"


class Player(Entity):
    """The dwarf: moves, chops logs for wood, drinks potions and shouts fireballs."""

    PLAYER_SPEED = 100.0
    STARTING_HEALTH = 60
    MAX_HEALTH = 100
    MAX_WOOD = 100
    SHOOTING_COST = 20
    FIRE_SPEED = 200.0
    SHOOT_COOLDOWN_TIME = 3.0

    def __init__(self) -> None:
        super().__init__(EntityType.PLAYER)
        self.input_component = PlayerInputComponent()
        self.add_component(self.input_component)
        self.health_component = HealthComponent(self.STARTING_HEALTH, self.MAX_HEALTH)
        self.add_component(self.health_component)
        self.velocity = VelocityComponent(speed=self.PLAYER_SPEED)
        self.add_component(self.velocity)
        self.state = PlayerStateComponent(
            velocity=self.velocity,
            attacking=False,
            shouting=False,
            max_wood=self.MAX_WOOD,
            wood=0,
            shooting_cost=self.SHOOTING_COST,
            shoot_cooldown=0.0,
            shoot_cooldown_time=self.SHOOT_COOLDOWN_TIME,
            fire_speed=self.FIRE_SPEED,
        )
        self.add_component(self.state)
        self.archetype_id = ArchetypeID.DWARF_PLAYER
        self.potion_collected = Subject()
        self.shout_triggered = Subject()

    @property
    def has_sprite_sheet(self) -> bool:
        return self.is_sprite_sheet

    @property
    def health(self) -> int:
        return self.health_component.health

    def position_sprite(self, row: int, col: int, sprite_wh: int, tile_scale: float) -> None:
        """Stand the player on the bottom of grid cell (col, row), centred sideways."""
        graphics = self.graphics
        scale = graphics.sprite_scale()
        _, texture_height = graphics.texture_size()
        cell = sprite_wh * tile_scale
        x = col * cell
        y = row * cell
        offset_y = cell - scale.y * texture_height
        offset_x = offset_y * 0.5
        self.set_position(x + offset_x, y + offset_y)
        self.velocity.set_velocity(0.0, 0.0)

    def intersects(self, other: Entity) -> bool:
        """True when the other entity's box touches the player's; False without colliders."""
        own = self.collider
        theirs = other.collider
        if own is None or theirs is None:
            return False
        return own.intersects(theirs.bounding_box)

    def collect_potion(self) -> None:
        self.potion_collected.notify(self, EventType.COLLECT_POTION)

    def shout_trigger(self) -> None:
        self.shout_triggered.notify(self, EventType.SHOUT)

    def handle_potion_collision(self, entity: Entity) -> None:
        """Drink the potion: restore health and remove it from the game."""
        restored = entity.health
        self.health_component.change_health(restored)
        entity.mark_deleted()
        self.collect_potion()
        get_audio_manager().play_sound(COLLECT_SOUND)
        print(
            f"Collide with potion (health restored: {restored}, "
            f"player health: {self.health_component.health})"
        )

    def handle_log_collision(self, entity: Entity) -> None:
        """Chop the log for wood when an attack is in its action frames."""
        if self.state.attacking and self.graphics.is_in_action():
            self.state.add_wood(entity.wood)
            entity.mark_deleted()
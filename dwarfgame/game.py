"""The game: level loading, entities, the per-frame update and rendering."""

from __future__ import annotations

import sys
import time
from typing import Callable, Container, Iterable

import pygame

from dwarfgame.archetypes import SystemType
from dwarfgame.audio import get_audio_manager
from dwarfgame.board import Board, TileType
from dwarfgame.ecs import EcsMethod, EcsSystemHandler
from dwarfgame.entities import Entity, EntityType, Log, Potion
from dwarfgame.graphics_component import GraphicsComponent, SpriteGraphics, SpriteSheetGraphics
from dwarfgame.inputs import ControlType, InputHandler, PlayerInputComponent
from dwarfgame.observer import AchievementManager
from dwarfgame.packed_array import PackedArrayManager
from dwarfgame.player import Player
from dwarfgame.window import Window

FONT_FILE = "font/AmaticSC-Regular.ttf"
WINDOW_TITLE = "Mini-Game"
LOG_TEXTURE = "./img/log.png"
POTION_TEXTURE = "./img/potion.png"
PLAYER_SPRITE_SHEET = "./img/DwarfSpriteSheet_data.txt"

_GAME_KEYS = (pygame.K_ESCAPE, pygame.K_RETURN)


def _held_game_keys() -> frozenset[int]:
    """Codes of the pause and switch keys currently held; empty without a display."""
    try:
        state = pygame.key.get_pressed()
    except pygame.error:
        return frozenset()
    return frozenset(key for key in _GAME_KEYS if state[key])


class Game:
    """Owns the window, the board and the entities, and runs each frame."""

    SPRITE_WH = 50
    TILE_SCALE = 2.0
    ITEM_SCALE = 1.0

    def __init__(
        self,
        ecs_method: EcsMethod = EcsMethod.BIG_ARRAY,
        draw_debug: bool = True,
        key_source: Callable[[], Container[int]] | None = None,
    ) -> None:
        self.paused = False
        self.draw_debug = draw_debug
        self.ecs_method = ecs_method
        self.window = Window()
        self.board: Board | None = None
        self.entities: list[Entity] = []
        self.id_counter = 0
        self.player: Player | None = None
        self.input_handler = InputHandler()
        self.key_source = key_source or _held_game_keys
        self.current_control = ControlType.WASD
        self.achievement_manager = AchievementManager()
        self.collision_callbacks: dict[EntityType, Callable[[Entity], None]] = {}
        self._start = time.perf_counter()

        self.ecs_manager = EcsSystemHandler()
        self.ecs_manager.populate(self)
        print("WASD  Control")
        get_audio_manager()

    @property
    def elapsed(self) -> float:
        """Seconds since the game was created."""
        return time.perf_counter() - self._start

    @property
    def packed_array_manager(self) -> PackedArrayManager | None:
        return self.ecs_manager.packed_array_manager

    def _live_entities(self) -> Iterable[Entity]:
        if self.ecs_method == EcsMethod.PACKED_ARRAY:
            return list(self.packed_array_manager.entities)
        return list(self.entities)

    def init(self, lines: list[str]) -> None:
        """Build the board and entities from the lines of a level description.

        The last line closes the level and is not counted in its height.
        """
        if not lines:
            raise ValueError("No data in level file")
        height = len(lines) - 1

        self.window.load_font(FONT_FILE)
        self.window.title = WINDOW_TITLE

        width: int | None = None
        for row, line in enumerate(lines):
            if width is None:
                width = len(line)
                self.build_board(width, height)
                self.init_window(width, height)
            for col, cell in enumerate(line):
                self._place_cell(cell, col, row)

    def _place_cell(self, cell: str, col: int, row: int) -> None:
        board = self.board
        if cell == ".":
            board.add_tile(col, row, self.TILE_SCALE, TileType.CORRIDOR)
        elif cell == "w":
            board.add_tile(col, row, self.TILE_SCALE, TileType.WALL)
        elif cell == "x":
            self.add_entity(self.build_entity_at(Log, LOG_TEXTURE, col, row, SpriteGraphics()))
            board.add_tile(col, row, self.TILE_SCALE, TileType.CORRIDOR)
        elif cell == "p":
            self.add_entity(
                self.build_entity_at(Potion, POTION_TEXTURE, col, row, SpriteGraphics())
            )
            board.add_tile(col, row, self.TILE_SCALE, TileType.CORRIDOR)
        elif cell == "*":
            self._create_player(col, row)
            board.add_tile(col, row, self.TILE_SCALE, TileType.CORRIDOR)

    def _create_player(self, col: int, row: int) -> None:
        player = Player()
        self.player = player
        self.achievement_manager.attach(player)
        player.add_component(SpriteSheetGraphics())
        player.init_sprite_sheet(PLAYER_SPRITE_SHEET)
        player.position_sprite(row, col, self.SPRITE_WH, self.TILE_SCALE)
        self.add_entity(player)
        self.collision_callbacks[EntityType.POTION] = player.handle_potion_collision
        self.collision_callbacks[EntityType.LOG] = player.handle_log_collision

    def add_entity(self, entity: Entity) -> None:
        """Give the entity the next id and store it."""
        self.id_counter += 1
        entity.id = self.id_counter
        if self.ecs_method == EcsMethod.PACKED_ARRAY:
            self.packed_array_manager.add_entity(entity)
        else:
            self.entities.append(entity)

    def build_board(self, width: int, height: int) -> None:
        self.board = Board(width, height)

    def init_window(self, width: int, height: int) -> None:
        """Size the window to fit a board of ``width`` by ``height`` tiles and open it."""
        cell = self.SPRITE_WH * self.TILE_SCALE
        self.window.size = (int(width * cell), int(height * cell))
        self.window.redraw()

    def build_entity_at(
        self,
        entity_class: type[Entity],
        filename: str,
        col: int,
        row: int,
        graphics: GraphicsComponent,
    ) -> Entity:
        """Create an item entity centred in grid cell (col, row)."""
        entity = entity_class()
        x = col * self.SPRITE_WH * self.TILE_SCALE
        y = row * self.SPRITE_WH * self.TILE_SCALE
        centre = (self.TILE_SCALE - self.ITEM_SCALE) * self.SPRITE_WH * 0.5
        entity.init(filename, self.ITEM_SCALE, graphics)
        entity.set_position(x + centre, y + centre)
        return entity

    def handle_input(self) -> None:
        command = self.input_handler.handle_input(self.key_source())
        if command is not None:
            command.execute(self)

    def update(self, elapsed: float) -> None:
        """Run the logic systems, resolve player collisions and drop deleted entities."""
        if not self.paused:
            self.ecs_manager.update(elapsed, self, SystemType.LOGIC)
            self._resolve_collisions()
            self._remove_deleted()
        self.window.update()

    def _resolve_collisions(self) -> None:
        player = self.player
        if player is None:
            return
        for entity in self._live_entities():
            if entity is player or entity.type is EntityType.FIRE:
                continue
            if player.intersects(entity):
                callback = self.collision_callbacks.get(entity.type)
                if callback is not None:
                    callback(entity)

    def _remove_deleted(self) -> None:
        if self.ecs_method == EcsMethod.PACKED_ARRAY:
            manager = self.packed_array_manager
            for entity in list(manager.entities):
                if entity.deleted:
                    manager.remove_entity(entity.id)
        else:
            self.entities[:] = [entity for entity in self.entities if not entity.deleted]

    def render(self, elapsed: float) -> None:
        """Draw the board, the entities and the GUI for one frame."""
        self.window.begin_draw()
        if self.board is not None:
            self.board.draw(self.window)
        clamped = 0.0 if self.paused else elapsed
        self.ecs_manager.update(clamped, self, SystemType.GRAPHICS)
        self.window.draw_gui(self.paused)
        self.window.end_draw()

    def set_fps(self, fps: int) -> None:
        self.window.set_fps(fps)

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def toggle_control(self) -> None:
        """Switch between WASD and arrow-key movement and rebind the player's keys."""
        if self.current_control == ControlType.WASD:
            self.current_control = ControlType.ARROWS
            print("Switched to ARROWS Control")
        elif self.current_control == ControlType.ARROWS:
            self.current_control = ControlType.WASD
            print("Switched to WASD Control")

        component = None if self.player is None else self.player.input_component
        if isinstance(component, PlayerInputComponent):
            component.handler.update_keys(self.current_control)
        else:
            print("Warning: Player has no PlayerInputComponent!", file=sys.stderr)

    def get_entity(self, index: int) -> Entity:
        if not 0 <= index < len(self.entities):
            raise IndexError("Index is out of bounds.")
        return self.entities[index]
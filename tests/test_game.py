import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import shutil
from pathlib import Path

import pygame
import pytest

from dwarfgame.ecs import EcsMethod
from dwarfgame.entities import Fire, Log, Potion
from dwarfgame.game import Game
from dwarfgame.graphics_component import SpriteGraphics
from dwarfgame.inputs import ControlType
from dwarfgame.player import Player

WALL_COLOUR = (0, 0, 255)
FLOOR_COLOUR = (255, 0, 0)

SHEET = """# dwarf
Texture img/dwarf.png
Size 50 50
Scale 2 2
AnimationType Directional
Animation Idle 0 3 0 0.1 -1 -1
Animation Walk 0 3 1 0.1 -1 -1
Animation Attack 0 3 2 0.1 1 2
Animation Shout 0 3 3 0.1 1 2
"""

LEVEL = ["w.w", ".*p", "x..", ""]


def _save(path: Path, size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))


@pytest.fixture
def assets(tmp_path, monkeypatch):
    img = tmp_path / "img"
    img.mkdir()
    _save(img / "floor.png", (50, 50), FLOOR_COLOUR)
    _save(img / "wall.png", (50, 50), WALL_COLOUR)
    _save(img / "log.png", (50, 50), (120, 60, 0))
    _save(img / "potion.png", (50, 50), (200, 0, 200))
    _save(img / "fire.png", (20, 20), (255, 128, 0))
    _save(img / "dwarf.png", (200, 400), (0, 200, 0))
    (img / "DwarfSpriteSheet_data.txt").write_text(SHEET, encoding="utf-8")
    font_dir = tmp_path / "font"
    font_dir.mkdir()
    default_font = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(default_font, font_dir / "AmaticSC-Regular.ttf")
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    pygame.display.quit()


@pytest.fixture
def level_game(assets):
    game = Game()
    game.init(list(LEVEL))
    return game


def test_init_builds_board_from_lines(level_game):
    board = level_game.board
    assert (board.width, board.height) == (3, 3)
    assert board.num_tiles == 9
    assert str(board) == " w . w\n . . .\n . . .\n"


def test_init_creates_entities_in_reading_order(level_game):
    entities = level_game.entities
    assert [type(entity) for entity in entities] == [Player, Potion, Log]
    assert [entity.id for entity in entities] == [1, 2, 3]
    assert level_game.player is entities[0]


def test_init_sizes_window_to_board(level_game):
    assert level_game.window.size == (300, 300)
    assert level_game.window.title == "Mini-Game"


def test_init_rejects_empty_level():
    game = Game()
    with pytest.raises(ValueError, match="No data in level file"):
        game.init([])


def test_add_entity_assigns_increasing_ids():
    game = Game()
    first, second = Fire(), Fire()
    game.add_entity(first)
    game.add_entity(second)
    assert second.id == first.id + 1
    assert game.id_counter == second.id
    assert game.get_entity(1) is second


def test_get_entity_out_of_range():
    game = Game()
    with pytest.raises(IndexError, match="Index is out of bounds."):
        game.get_entity(0)


def test_packed_array_mode_stores_entities_in_manager():
    game = Game(ecs_method=EcsMethod.PACKED_ARRAY)
    fire = Fire()
    game.add_entity(fire)
    assert game.entities == []
    assert game.packed_array_manager.get_entity(fire.id) is fire


def test_packed_array_mode_removes_deleted_entities():
    game = Game(ecs_method=EcsMethod.PACKED_ARRAY)
    fire = Fire()
    game.add_entity(fire)
    fire.mark_deleted()
    game.update(0.0)
    assert game.packed_array_manager.get_entity(fire.id) is None


def test_update_counts_down_ttl():
    game = Game()
    fire = Fire()
    game.add_entity(fire)
    game.update(0.1)
    assert fire.ttl == Fire.START_TIME_TO_LIVE - 1


def test_update_while_paused_does_nothing():
    game = Game()
    fire = Fire()
    game.add_entity(fire)
    game.toggle_pause()
    game.update(0.1)
    assert fire.ttl == Fire.START_TIME_TO_LIVE


def test_update_removes_deleted_entities():
    game = Game()
    kept, dropped = Fire(), Fire()
    game.add_entity(kept)
    game.add_entity(dropped)
    dropped.mark_deleted()
    game.update(0.0)
    assert game.entities == [kept]


def test_toggle_pause_round_trip():
    game = Game()
    game.toggle_pause()
    assert game.paused is True
    game.toggle_pause()
    assert game.paused is False


def test_handle_input_pauses_once_per_press():
    held = {pygame.K_ESCAPE}
    game = Game(key_source=lambda: held)
    game.handle_input()
    assert game.paused is True
    game.handle_input()
    assert game.paused is True
    held.clear()
    game.handle_input()
    held.add(pygame.K_ESCAPE)
    game.handle_input()
    assert game.paused is False


def test_toggle_control_without_player_warns(capsys):
    game = Game()
    game.toggle_control()
    assert game.current_control == ControlType.ARROWS
    assert "Warning" in capsys.readouterr().err


def test_toggle_control_rebinds_player_keys(level_game):
    level_game.toggle_control()
    keys = set(level_game.player.input_component.handler.active_commands)
    assert pygame.K_UP in keys and pygame.K_w not in keys
    level_game.toggle_control()
    keys = set(level_game.player.input_component.handler.active_commands)
    assert pygame.K_w in keys and pygame.K_UP not in keys
    assert level_game.current_control == ControlType.WASD


def test_build_entity_at_spaces_items_by_cell(assets):
    game = Game()
    first = game.build_entity_at(Potion, "img/potion.png", 0, 0, SpriteGraphics())
    second = game.build_entity_at(Potion, "img/potion.png", 1, 2, SpriteGraphics())
    cell = Game.SPRITE_WH * Game.TILE_SCALE
    assert first.position.x == first.position.y
    assert second.position.x - first.position.x == pytest.approx(cell)
    assert second.position.y - first.position.y == pytest.approx(2 * cell)
    assert game.entities == []


def test_player_drinks_overlapping_potion(level_game):
    player = level_game.player
    potion = level_game.entities[1]
    potion.set_position(player.position.x, player.position.y)
    level_game.update(0.0)
    assert potion.deleted is True
    assert potion not in level_game.entities
    assert player.health == Player.STARTING_HEALTH + Potion.HEALTH
    assert level_game.achievement_manager.potion_counter == 1


def test_log_stays_without_attack(level_game):
    player = level_game.player
    log = level_game.entities[2]
    log.set_position(player.position.x, player.position.y)
    level_game.update(0.0)
    assert log in level_game.entities
    assert player.state.wood == 0


def test_render_draws_board(level_game):
    level_game.render(0.0)
    assert tuple(level_game.window.surface.get_at((5, 5)))[:3] == WALL_COLOUR


def test_set_fps_updates_text():
    game = Game()
    game.set_fps(60)
    assert game.window.fps_text == "FPS: 60"
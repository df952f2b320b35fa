import pygame
import pytest

from dwarfgame.board import Board, TextureType, Tile, TileType
from dwarfgame.vector2 import Vector2

FLOOR_SIZE = (5, 4)
WALL_SIZE = (7, 3)
MUSHROOM_SIZE = (2, 9)


class RecordingWindow:
    def __init__(self):
        self.calls = []

    def draw(self, image, position):
        self.calls.append((image.get_size(), position))


@pytest.fixture
def images(tmp_path, monkeypatch):
    img = tmp_path / "img"
    img.mkdir()
    pygame.image.save(pygame.Surface(FLOOR_SIZE), str(img / "floor.png"))
    pygame.image.save(pygame.Surface(WALL_SIZE), str(img / "wall.png"))
    pygame.image.save(pygame.Surface(MUSHROOM_SIZE), str(img / "mushroom50-50.png"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.parametrize(
    "kind, expected",
    [(0, FLOOR_SIZE), (1, WALL_SIZE), (2, MUSHROOM_SIZE), (-1, MUSHROOM_SIZE)],
)
def test_texture_type_loads_by_kind(images, kind, expected):
    texture = TextureType()
    texture.load_texture(kind)
    assert texture.size == expected


def test_texture_type_missing_image(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError, match="floor.png image not found"):
        TextureType().load_texture(0)


def test_board_constructor_requires_images(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        Board(2, 2)


def build_board():
    layout = [".w", "w."]
    board = Board(2, 2)
    for row, line in enumerate(layout):
        for col, cell in enumerate(line):
            kind = TileType.CORRIDOR if cell == "." else TileType.WALL
            board.add_tile(col, row, 2.0, kind)
    return board


def test_board_stores_tiles_in_order(images):
    board = build_board()
    assert board.num_tiles == board.width * board.height
    assert board.get(1, 0).type is TileType.WALL
    assert board.get(1, 1).type is TileType.CORRIDOR
    assert board[(0, 1)] is board.get(0, 1)
    assert (board.get(1, 0).x, board.get(1, 0).y) == (1, 0)


def test_board_tiles_share_textures(images):
    board = build_board()
    assert board.get(0, 0).texture is board.get(1, 1).texture is board.corridor
    assert board.get(1, 0).texture is board.wall


def test_board_get_out_of_range(images):
    board = build_board()
    with pytest.raises(IndexError, match="Out of bounds of the board."):
        board.get(0, 2)
    with pytest.raises(IndexError):
        board.get(-1, 0)


def test_board_add_tile_out_of_bounds(images):
    board = Board(2, 2)
    with pytest.raises(IndexError, match="Out of bounds of the board."):
        board.add_tile(2, 0, 1.0, TileType.WALL)
    assert board.num_tiles == 0


@pytest.mark.parametrize(
    "x, y, inside",
    [(0, 0, True), (2, 1, True), (3, 0, False), (0, 2, False), (-1, 0, False)],
)
def test_board_in_bounds(x, y, inside):
    board = Board()
    board.width, board.height = 3, 2
    assert board.in_bounds(x, y) is inside


def test_board_print(images, capsys):
    board = build_board()
    board.print()
    assert capsys.readouterr().out == " . w\n w .\n"


def test_board_draw_draws_every_tile(images):
    board = build_board()
    window = RecordingWindow()
    board.draw(window)
    assert len(window.calls) == board.num_tiles
    assert window.calls[0][1] == board.get(0, 0).screen_position


def test_tile_place_uses_texture_size(images):
    texture = TextureType()
    texture.load_texture(0)
    tile = Tile(TileType.CORRIDOR, texture)
    tile.place(2, 3, 2.0)
    assert tile.grid_position == (2, 3)
    assert tile.screen_position == Vector2(2 * FLOOR_SIZE[0] * 2.0, 3 * FLOOR_SIZE[1] * 2.0)


def test_tile_load_tile_missing_file(images):
    tile = Tile(TileType.WALL, TextureType())
    with pytest.raises(FileNotFoundError, match="Texture file not found: nowhere.png"):
        tile.load_tile(0, 0, 1.0, "nowhere.png")


def test_tile_load_tile_replaces_shared_texture(images):
    shared = TextureType()
    shared.load_texture(0)
    tile = Tile(TileType.CORRIDOR, shared)
    tile.load_tile(1, 1, 1.0, "img/wall.png")
    assert shared.size == WALL_SIZE
    assert tile.screen_position == Vector2(float(WALL_SIZE[0]), float(WALL_SIZE[1]))
    window = RecordingWindow()
    tile.draw(window)
    assert window.calls == [(WALL_SIZE, tile.screen_position)]
"""The tiled level board: textures, tiles and the grid that holds them."""

from __future__ import annotations

import sys
from enum import Enum, auto
from pathlib import Path
from typing import Any

import pygame

from dwarfgame.vector2 import Vector2

_TEXTURE_FILES = {0: "img/floor.png", 1: "img/wall.png"}
_FALLBACK_TEXTURE = "img/mushroom50-50.png"
_OUT_OF_BOUNDS = "Out of bounds of the board."


class TileType(Enum):
    CORRIDOR = auto()
    WALL = auto()


class TextureType:
    """A texture shared by every tile of one kind."""

    def __init__(self) -> None:
        self.texture: pygame.Surface | None = None

    @property
    def size(self) -> tuple[int, int]:
        return (0, 0) if self.texture is None else self.texture.get_size()

    def load_texture(self, kind: int) -> None:
        """Load the floor (0), wall (1) or fallback texture from ``img/``."""
        path = _TEXTURE_FILES.get(kind, _FALLBACK_TEXTURE)
        try:
            self.texture = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise FileNotFoundError(f"{Path(path).name} image not found") from exc


class Tile:
    """One cell of the board, drawn with a shared texture."""

    def __init__(self, tile_type: TileType, texture: TextureType) -> None:
        self.type = tile_type
        self.texture = texture
        self.grid_position: tuple[int, int] = (0, 0)
        self.scale = 1.0
        self.screen_position = Vector2()
        self.image: pygame.Surface | None = None
        self._scaled: tuple[Any, float, pygame.Surface] | None = None

    @property
    def x(self) -> int:
        return self.grid_position[0]

    @property
    def y(self) -> int:
        return self.grid_position[1]

    def place(self, x: int, y: int, scale: float) -> None:
        """Put the tile at grid cell (x, y), scaled by ``scale``."""
        self.grid_position = (x, y)
        self.scale = scale
        width, height = self.texture.size
        self.screen_position = Vector2(x * (width * scale), y * (height * scale))

    def load_default_texture(self) -> None:
        self.image = self.texture.texture

    def load_tile(self, x: int, y: int, scale: float, texture_filename: str = "") -> None:
        """Load ``texture_filename`` into the shared texture, or use it as is, then place."""
        if texture_filename:
            try:
                self.texture.texture = pygame.image.load(texture_filename)
            except (pygame.error, OSError) as exc:
                raise FileNotFoundError(f"Texture file not found: {texture_filename}") from exc
        self.load_default_texture()
        self.place(x, y, scale)

    def _scaled_image(self) -> pygame.Surface | None:
        if self.image is None:
            return None
        if self._scaled is None or self._scaled[0] is not self.image or self._scaled[1] != self.scale:
            width, height = self.image.get_size()
            size = (max(1, round(width * self.scale)), max(1, round(height * self.scale)))
            self._scaled = (self.image, self.scale, pygame.transform.scale(self.image, size))
        return self._scaled[2]

    def draw(self, window: Any) -> None:
        image = self._scaled_image()
        if image is not None:
            window.draw(image, self.screen_position)


class Board:
    """A width-by-height grid of tiles, filled row by row.

    Giving a non-zero size loads the floor and wall textures from ``img/``.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.grid: list[Tile] = []
        self.corridor = TextureType()
        self.wall = TextureType()
        if width or height:
            self.corridor.load_texture(0)
            self.wall.load_texture(1)

    @property
    def num_tiles(self) -> int:
        return len(self.grid)

    def __getitem__(self, pos: tuple[int, int]) -> Tile:
        x, y = pos
        return self.get(x, y)

    def get(self, x: int, y: int) -> Tile:
        index = y * self.width + x
        if not 0 <= index < len(self.grid):
            raise IndexError(_OUT_OF_BOUNDS)
        return self.grid[index]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def add_tile(self, x: int, y: int, scale: float, tile_type: TileType) -> None:
        """Append a tile placed at cell (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(_OUT_OF_BOUNDS)
        texture = self.corridor if tile_type is TileType.CORRIDOR else self.wall
        tile = Tile(tile_type, texture)
        tile.load_default_texture()
        tile.place(x, y, scale)
        self.grid.append(tile)

    def draw(self, window: Any) -> None:
        for row in range(self.height):
            for col in range(self.width):
                self.get(col, row).draw(window)

    def _row_text(self, row: int) -> str:
        cells = (
            "." if self.get(col, row).type is TileType.CORRIDOR else "w"
            for col in range(self.width)
        )
        return "".join(f" {cell}" for cell in cells) + "\n"

    def __str__(self) -> str:
        return "".join(self._row_text(row) for row in range(self.height))

    def print(self) -> None:
        """Write the board to standard output, '.' for corridors and 'w' for walls."""
        for row in range(self.height):
            sys.stdout.write(self._row_text(row))
        sys.stdout.flush()
"""Graphics components: a single sprite or an animated sprite sheet."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

import pygame

from dwarfgame.animation import AnimBase
from dwarfgame.components import Component, ComponentID
from dwarfgame.spritesheet import Direction, SpriteSheet
from dwarfgame.vector2 import Vector2


class GraphicsError(RuntimeError):
    """An operation was asked of a graphics component that does not support it."""


class GraphicsComponent(Component, ABC):
    """Interface shared by every way of drawing an entity."""

    component_id: ClassVar[ComponentID] = ComponentID.GRAPHICS

    @abstractmethod
    def init(self, texture_file: str | Path, scale: float) -> None:
        """Load a single texture drawn at ``scale``."""

    @abstractmethod
    def init_sprite_sheet(self, sprite_sheet_file: str | Path) -> None:
        """Load an animated sprite sheet description."""

    @abstractmethod
    def texture_size(self) -> tuple[int, int]:
        """Unscaled size of what is drawn."""

    @abstractmethod
    def sprite_size(self) -> tuple[int, int]:
        """Size of one frame of the sprite sheet."""

    @abstractmethod
    def scale(self) -> Vector2:
        """Scale of a single sprite."""

    @abstractmethod
    def sprite_scale(self) -> Vector2:
        """Scale of the sprite sheet frames."""

    @abstractmethod
    def set_position(self, position: Vector2) -> None:
        """Place the drawing at ``position``."""

    @abstractmethod
    def set_animation(self, name: str, play: bool, loop: bool) -> None:
        """Switch to the named animation."""

    @abstractmethod
    def sprite_direction(self) -> Direction:
        """Direction the sprite faces."""

    @abstractmethod
    def set_sprite_direction(self, direction: Direction) -> None:
        """Turn the sprite to face ``direction``."""

    @abstractmethod
    def sprite_sheet(self) -> SpriteSheet:
        """The underlying sprite sheet."""

    @abstractmethod
    def sprite(self) -> pygame.Surface | None:
        """The scaled image of a single sprite."""

    @abstractmethod
    def update(self, game: Any, elapsed: float, position: Vector2) -> None:
        """Follow ``position`` and advance any animation by ``elapsed`` seconds."""

    @abstractmethod
    def draw(self, window: Any) -> None:
        """Draw on ``window``."""

    def is_playing(self) -> bool:
        return self._current_animation().playing

    def is_in_action(self) -> bool:
        return self._current_animation().is_in_action()

    def _current_animation(self) -> AnimBase:
        animation = self.sprite_sheet().current_animation
        if animation is None:
            raise GraphicsError("No animation is set on the sprite sheet")
        return animation


class SpriteGraphics(GraphicsComponent):
    """A single, static texture."""

    def __init__(self) -> None:
        self.texture: pygame.Surface | None = None
        self.position = Vector2()
        self._scale = Vector2(1.0, 1.0)
        self._image: pygame.Surface | None = None

    def init(self, texture_file: str | Path, scale: float) -> None:
        """Load the texture; a file that cannot be loaded leaves the sprite empty."""
        try:
            self.texture = pygame.image.load(str(texture_file))
        except (pygame.error, OSError):
            self.texture = None
        self._scale = Vector2(scale, scale)
        self._image = None

    def init_sprite_sheet(self, sprite_sheet_file: str | Path) -> None:
        raise GraphicsError(
            "You are trying to initialise an object that requires a spritesheet "
            "as if it were a standard sprite"
        )

    def texture_size(self) -> tuple[int, int]:
        if self.texture is None:
            return (0, 0)
        return self.texture.get_size()

    def sprite_size(self) -> tuple[int, int]:
        raise GraphicsError(
            "A single sprite has no sprite sheet; use texture_size() instead"
        )

    def scale(self) -> Vector2:
        return self._scale

    def sprite_scale(self) -> Vector2:
        raise GraphicsError("A single sprite has no sprite sheet; use scale() instead")

    def set_position(self, position: Vector2) -> None:
        self.position = position

    def set_animation(self, name: str, play: bool, loop: bool) -> None:
        """Single sprites have no animations, so this does nothing."""

    def sprite_direction(self) -> Direction:
        raise GraphicsError("No spritesheet available")

    def set_sprite_direction(self, direction: Direction) -> None:
        """Single sprites have no directions, so this does nothing."""

    def sprite_sheet(self) -> SpriteSheet:
        raise GraphicsError("No spritesheet available")

    def sprite(self) -> pygame.Surface | None:
        if self.texture is None:
            return None
        if self._image is None:
            width, height = self.texture.get_size()
            size = (
                max(1, round(width * abs(self._scale.x))),
                max(1, round(height * abs(self._scale.y))),
            )
            self._image = pygame.transform.scale(self.texture, size)
        return self._image

    def update(self, game: Any, elapsed: float, position: Vector2) -> None:
        self.position = position

    def draw(self, window: Any) -> None:
        image = self.sprite()
        if image is not None:
            window.draw(image, self.position)


class SpriteSheetGraphics(GraphicsComponent):
    """An animated sprite sheet."""

    def __init__(self) -> None:
        self.sheet = SpriteSheet()

    def init(self, texture_file: str | Path, scale: float) -> None:
        raise GraphicsError(
            "You are trying to initialise a sprite object with an animated sprite sheet"
        )

    def init_sprite_sheet(self, sprite_sheet_file: str | Path) -> None:
        """Load the sheet and start the looping "Idle" animation."""
        self.sheet.load_sheet(sprite_sheet_file)
        self.sheet.set_animation("Idle", True, True)

    def texture_size(self) -> tuple[int, int]:
        return self.sheet.sprite_size

    def sprite_size(self) -> tuple[int, int]:
        return self.sheet.sprite_size

    def scale(self) -> Vector2:
        raise GraphicsError(
            "A sprite sheet has no single sprite scale; use sprite_scale() instead"
        )

    def sprite_scale(self) -> Vector2:
        return self.sheet.sprite_scale

    def set_position(self, position: Vector2) -> None:
        self.sheet.set_sprite_position(position)

    def set_animation(self, name: str, play: bool, loop: bool) -> None:
        self.sheet.set_animation(name, play, loop)

    def sprite_direction(self) -> Direction:
        return self.sheet.direction

    def set_sprite_direction(self, direction: Direction) -> None:
        self.sheet.set_sprite_direction(direction)

    def sprite_sheet(self) -> SpriteSheet:
        return self.sheet

    def sprite(self) -> pygame.Surface | None:
        raise GraphicsError("No sprite available")

    def update(self, game: Any, elapsed: float, position: Vector2) -> None:
        self.sheet.set_sprite_position(position)
        self.sheet.update(elapsed)

    def draw(self, window: Any) -> None:
        image = self.sheet.frame_image()
        if image is not None:
            window.draw(image, self.sheet.position)
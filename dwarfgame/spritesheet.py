"""Sprite sheets described by a small text file of textures and animations."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

import pygame

from dwarfgame.animation import AnimBase, AnimDirectional
from dwarfgame.vector2 import Vector2


class Direction(IntEnum):
    RIGHT = 0
    LEFT = 1


class SpriteSheetError(RuntimeError):
    """A sprite sheet description could not be loaded."""


class SpriteSheet:
    """A texture cut into equally sized frames, with named animations."""

    def __init__(self) -> None:
        self.texture: pygame.Surface | None = None
        self.sprite_size: tuple[int, int] = (0, 0)
        self.sprite_scale = Vector2(1.0, 1.0)
        self.position = Vector2()
        self.direction = Direction.RIGHT
        self.anim_type = ""
        self.animations: dict[str, AnimBase] = {}
        self.current_animation: AnimBase | None = None
        self.texture_rect: tuple[int, int, int, int] = (0, 0, 0, 0)

    @property
    def num_animations(self) -> int:
        return len(self.animations)

    def release_sheet(self) -> None:
        self.current_animation = None
        self.animations.clear()

    def set_sprite_scale(self, scale: Vector2) -> None:
        self.sprite_scale = scale

    def set_sprite_position(self, position: Vector2) -> None:
        self.position = position

    def set_sprite_direction(self, direction: Direction) -> None:
        if direction == self.direction:
            return
        self.direction = direction
        if self.current_animation is not None:
            self.current_animation.crop_sprite()

    def crop_sprite(self, rect: tuple[int, int, int, int]) -> None:
        self.texture_rect = tuple(rect)

    def load_sheet(self, path: str | Path) -> bool:
        """Read a sheet description, replacing any animations loaded before."""
        try:
            with open(path, encoding="utf-8") as sheet:
                lines = sheet.read().splitlines()
        except OSError as exc:
            raise SpriteSheetError(f"ERROR: failed loading spritesheet {path}") from exc

        self.release_sheet()
        for line in lines:
            if line.startswith("#"):
                continue
            tokens = line.split()
            if not tokens:
                continue
            kind, args = tokens[0], tokens[1:]
            if kind == "Texture":
                self._load_texture(args[0] if args else "")
            elif kind == "Size":
                self.sprite_size = (int(args[0]), int(args[1]))
            elif kind == "Scale":
                self.set_sprite_scale(Vector2(float(args[0]), float(args[1])))
            elif kind == "AnimationType":
                self.anim_type = args[0] if args else ""
            elif kind == "Animation":
                name = args[0] if args else ""
                self._add_animation(name, " ".join(args[1:]), path)
        return True

    def _load_texture(self, texture_file: str) -> None:
        try:
            self.texture = pygame.image.load(texture_file)
        except (pygame.error, OSError) as exc:
            raise SpriteSheetError(f"Texture file not found: {texture_file}") from exc

    def _add_animation(self, name: str, params: str, path: str | Path) -> None:
        if name in self.animations:
            raise SpriteSheetError(f"Duplicated animation: {name} in sprite sheet {path}")
        if self.anim_type != "Directional":
            raise SpriteSheetError(
                f"Unknown animation type: {self.anim_type} in sprite sheet {path}"
            )
        anim = AnimDirectional()
        anim.read_in(params)
        anim.sprite_sheet = self
        anim.name = name
        anim.reset()
        self.animations[name] = anim

    def set_animation(self, name: str, play: bool = False, loop: bool = False) -> bool:
        """Switch to animation ``name``; False if unknown or already current."""
        anim = self.animations.get(name)
        if anim is None or anim is self.current_animation:
            return False
        if self.current_animation is not None:
            self.current_animation.stop()
        self.current_animation = anim
        anim.loop = loop
        if play:
            anim.play()
        anim.crop_sprite()
        return True

    def update(self, elapsed: float) -> None:
        if self.current_animation is not None:
            self.current_animation.update(elapsed)

    def frame_image(self) -> pygame.Surface | None:
        """The current frame cut from the texture and scaled, or None without a texture."""
        if self.texture is None:
            return None
        rect = pygame.Rect(self.texture_rect).clip(self.texture.get_rect())
        if rect.width == 0 or rect.height == 0:
            return None
        image = self.texture.subsurface(rect)
        sx, sy = self.sprite_scale.x, self.sprite_scale.y
        size = (max(1, round(rect.width * abs(sx))), max(1, round(rect.height * abs(sy))))
        image = pygame.transform.scale(image, size)
        if sx < 0 or sy < 0:
            image = pygame.transform.flip(image, sx < 0, sy < 0)
        return image

    def draw(self, surface: pygame.Surface) -> None:
        image = self.frame_image()
        if image is not None:
            surface.blit(image, (self.position.x, self.position.y))
"""Game window: display surface, events, drawing and on-screen text."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pygame

from dwarfgame.rectangle import Rectangle
from dwarfgame.vector2 import Vector2

_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_GREEN = (0, 255, 0)
_BLUE = (0, 0, 255)
_OUTLINE_THICKNESS = 4


class Window:
    """A display window that can be recreated, toggled fullscreen and drawn on."""

    FONT_SIZE = 50
    PAUSED_TEXT = "PAUSED!"

    def __init__(self) -> None:
        self.title = ""
        self.size: tuple[int, int] = (0, 0)
        self.is_fullscreen = False
        self.is_done = False
        self.fps_text = ""
        self.surface: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._paused_font: pygame.font.Font | None = None
        self._paused_position = (0.0, 0.0)

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def load_font(self, font_file: str) -> None:
        """Load the GUI font used for the FPS and pause texts."""
        message = f"Font file not found for Window: {font_file}"
        if not Path(font_file).is_file():
            raise FileNotFoundError(message)
        pygame.font.init()
        try:
            self._font = pygame.font.Font(font_file, self.FONT_SIZE)
            self._paused_font = pygame.font.Font(font_file, self.FONT_SIZE + 10)
        except (pygame.error, OSError) as exc:
            raise FileNotFoundError(message) from exc

    def setup(self, title: str, size: tuple[int, int]) -> None:
        self.title = title
        self.size = tuple(size)
        self._create()

    def _create(self) -> None:
        pygame.display.init()
        flags = pygame.FULLSCREEN if self.is_fullscreen else 0
        self.surface = pygame.display.set_mode(self.size, flags)
        pygame.display.set_caption(self.title)
        self._paused_position = (self.size[0] * 0.5, 0.0)

    def _destroy(self) -> None:
        if self.surface is not None:
            pygame.display.quit()
            self.surface = None

    def close(self) -> None:
        self._destroy()

    def update(self) -> None:
        """Handle pending window events: close requests and the F5 fullscreen key."""
        if self.surface is None:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_done = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F5:
                self.toggle_fullscreen()

    def toggle_fullscreen(self) -> None:
        self.is_fullscreen = not self.is_fullscreen
        self.redraw()

    def redraw(self) -> None:
        """Recreate the window with the current size, title and mode."""
        self._destroy()
        self._create()

    def begin_draw(self) -> None:
        if self.surface is not None:
            self.surface.fill(_BLACK)

    def end_draw(self) -> None:
        if self.surface is not None:
            pygame.display.flip()

    def draw(self, image: pygame.Surface, position: Vector2 | tuple[float, float]) -> None:
        if self.surface is None:
            return
        if isinstance(position, Vector2):
            position = (position.x, position.y)
        self.surface.blit(image, position)

    def draw_outline(self, rect: Rectangle) -> None:
        """Draw the green outline of a rectangle."""
        if self.surface is None:
            return
        left, top = rect.top_left.x, rect.top_left.y
        width = rect.bottom_right.x - left
        height = rect.bottom_right.y - top
        pygame.draw.rect(
            self.surface, _GREEN, pygame.Rect(left, top, width, height), _OUTLINE_THICKNESS
        )

    def draw_gui(self, paused: bool) -> None:
        """Draw the FPS counter, and the pause banner when ``paused``."""
        if self.surface is None:
            return
        if self._font is not None and self.fps_text:
            self.surface.blit(self._font.render(self.fps_text, True, _RED), (0, 0))
        if paused and self._paused_font is not None:
            banner = self._paused_font.render(self.PAUSED_TEXT, True, _BLUE)
            self.surface.blit(banner, self._paused_position)

    def set_fps(self, fps: int) -> None:
        self.fps_text = f"FPS: {fps}"
"""Frame-based sprite animations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

_FIELDS = (
    ("start_frame", int),
    ("end_frame", int),
    ("frame_row", int),
    ("frame_time", float),
    ("frame_action_start", int),
    ("frame_action_end", int),
)


@dataclass(eq=False)
class AnimBase(ABC):
    """Common animation state: frame range, timing, looping and action window."""

    cur_frame: int = 0
    start_frame: int = 0
    end_frame: int = 0
    frame_row: int = 0
    frame_time: float = 1.0
    elapsed_time: float = 0.0
    frame_action_start: int = -1
    frame_action_end: int = -1
    loop: bool = False
    playing: bool = False
    name: str = ""
    sprite_sheet: Any = None

    def set_frame(self, frame: int) -> None:
        """Jump to ``frame`` if it lies within the animation's range."""
        low, high = sorted((self.start_frame, self.end_frame))
        if low <= frame <= high:
            self.cur_frame = frame

    def is_in_action(self) -> bool:
        """True when the current frame is within the action window (or none is set)."""
        if self.frame_action_start == -1 or self.frame_action_end == -1:
            return True
        return self.frame_action_start <= self.cur_frame <= self.frame_action_end

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def stop(self) -> None:
        self.playing = False
        self.reset()

    def reset(self) -> None:
        self.cur_frame = self.start_frame
        self.elapsed_time = 0.0
        self.crop_sprite()

    def update(self, elapsed: float) -> None:
        """Advance time; step one frame once ``frame_time`` has passed."""
        if not self.playing:
            return
        self.elapsed_time += elapsed
        if self.elapsed_time < self.frame_time:
            return
        self.frame_step()
        self.crop_sprite()
        self.elapsed_time = 0.0

    @abstractmethod
    def frame_step(self) -> None:
        """Move to the next frame."""

    @abstractmethod
    def crop_sprite(self) -> None:
        """Select the current frame's region on the sprite sheet."""

    @abstractmethod
    def read_in(self, text: str) -> None:
        """Read the animation's parameters from a line of a sheet description."""


class AnimDirectional(AnimBase):
    """Animation whose sheet holds one block of rows per facing direction."""

    def frame_step(self) -> None:
        forward = self.start_frame < self.end_frame
        self.cur_frame += 1 if forward else -1
        past_end = (forward and self.cur_frame > self.end_frame) or (
            self.start_frame > self.end_frame and self.cur_frame < self.end_frame
        )
        if not past_end:
            return
        if self.loop:
            self.cur_frame = self.start_frame
            return
        self.cur_frame = self.end_frame
        self.pause()

    def crop_sprite(self) -> None:
        sheet = self.sprite_sheet
        width, height = sheet.sprite_size
        x = width * self.cur_frame
        y = height * (self.frame_row + sheet.num_animations * int(sheet.direction))
        sheet.crop_sprite((x, y, width, height))

    def read_in(self, text: str) -> None:
        """Read start, end, row, frame time, action start and action end, in that order."""
        for (attr, kind), token in zip(_FIELDS, text.split()):
            try:
                value = kind(token)
            except ValueError as exc:
                raise ValueError(f"invalid value {token!r} for {attr}") from exc
            setattr(self, attr, value)
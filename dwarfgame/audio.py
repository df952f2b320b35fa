"""Sound playback and the shared audio service."""

from __future__ import annotations

import functools

import pygame


class AudioManager:
    """Plays one sound effect at a time."""

    def __init__(self) -> None:
        self.current_sound: pygame.mixer.Sound | None = None

    def play_sound(self, sound_id: str) -> None:
        """Play the sound file ``sound_id``; files that cannot be loaded are ignored."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            sound = pygame.mixer.Sound(sound_id)
        except (pygame.error, OSError):
            return
        if self.current_sound is not None:
            self.current_sound.stop()
        self.current_sound = sound
        sound.play()

    def stop_sound(self) -> None:
        if self.current_sound is not None:
            self.current_sound.stop()


@functools.lru_cache(maxsize=None)
def get_audio_manager() -> AudioManager:
    """The audio manager shared by the whole game."""
    return AudioManager()
"""AudioService

Central abstraction over pygame.mixer for the game's two sounds: the
looping background track and the one-shot collision effect.

Design:
- Singleton-style via get().
- Sounds are loaded and cached through AssetManager.
- Volumes come from settings (music_volume for the background track,
  sound_volume for everything else).
- When no audio device is available the mixer is retried with the SDL
  dummy driver; if that fails too the service stays silent.
"""

from __future__ import annotations

import os
from typing import Dict

import pygame

from rocket_dodge.asset_manager import AssetManager
from rocket_dodge.logger import get_logger
from rocket_dodge.settings import settings

log = get_logger("audio")

MUSIC_TRACKS = ("background_music",)


class AudioService:
    _instance: "AudioService | None" = None

    def __init__(self, sound_paths: Dict[str, str] | None = None) -> None:
        self.enabled = self._init_mixer()
        self._sfx: Dict[str, pygame.mixer.Sound] = {}
        self._am = AssetManager.get()
        if self.enabled:
            for name, path in (sound_paths or settings.SOUND_PATHS).items():
                self._sfx[name] = self._am.load_sound(name, path)
            self.apply_volumes()

    @staticmethod
    def _init_mixer() -> bool:
        if not pygame.get_init():
            pygame.init()
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
            return True
        except pygame.error as e:
            log.warn("Mixer init failed, retrying with dummy driver:", e)
        os.environ["SDL_AUDIODRIVER"] = "dummy"
        try:
            pygame.mixer.init()
            return True
        except pygame.error as e:
            log.warn("Audio disabled:", e)
            return False

    @classmethod
    def get(cls) -> "AudioService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # Volume management --------------------------------------------------
    def apply_volumes(self) -> None:
        for name, snd in self._sfx.items():
            if name in MUSIC_TRACKS:
                snd.set_volume(settings.music_volume)
            else:
                snd.set_volume(settings.sound_volume)

    # Playback ------------------------------------------------------------
    def play(self, name: str, loops: int = 0) -> None:
        """Play a registered sound; ``loops=-1`` repeats it forever."""
        if not self.enabled:
            return
        snd = self._sfx.get(name)
        if snd is None:
            log.warn("Unknown sound:", name)
            return
        snd.play(loops)


__all__ = ["AudioService"]

"""AssetManager

Centralized loading and caching for images, fonts and sounds. Every
pygame resource read goes through here so the rest of the code only deals
with names ("rocket", "arial", "collision_sound").

Design:
- Singleton-style access via `AssetManager.get()`.
- Images are registered under a short name and cached as surfaces.
- Fonts are registered by name; sized `pygame.font.Font` objects are
  created on first request and cached per (name, size).
- Sounds are registered by name and cached as `pygame.mixer.Sound`.
- Load failures (missing file, undecodable data) propagate to the caller.
"""

from __future__ import annotations

import os
from typing import Dict, Tuple

import pygame

from rocket_dodge.logger import get_logger

log = get_logger("assets")


class AssetManager:
    _instance: "AssetManager | None" = None

    def __init__(self, root: str = "") -> None:
        self.root = root
        self._images: Dict[str, pygame.Surface] = {}
        self._font_paths: Dict[str, str] = {}
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

    # Singleton accessor -------------------------------------------------
    @classmethod
    def get(cls) -> "AssetManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _full(self, rel_path: str) -> str:
        return os.path.join(self.root, rel_path) if self.root else rel_path

    # Image helpers ------------------------------------------------------
    def load_image(self, name: str, rel_path: str) -> pygame.Surface:
        surf = self._images.get(name)
        if surf is None:
            raw = pygame.image.load(self._full(rel_path))
            # convert() needs a display mode; headless tests keep the raw format.
            if pygame.display.get_init() and pygame.display.get_surface():
                raw = raw.convert_alpha()
            surf = raw
            self._images[name] = surf
            log.debug("image", name, "<-", rel_path, surf.get_size())
        return surf

    def get_image(self, name: str) -> pygame.Surface:
        return self._images[name]

    # Fonts --------------------------------------------------------------
    def load_font(self, name: str, rel_path: str) -> None:
        self._font_paths[name] = self._full(rel_path)

    def get_font(self, name: str, size: int) -> pygame.font.Font:
        key = (name, size)
        font = self._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(self._font_paths[name], size)
            self._fonts[key] = font
        return font

    # Sounds -------------------------------------------------------------
    def load_sound(self, name: str, rel_path: str) -> pygame.mixer.Sound:
        snd = self._sounds.get(name)
        if snd is None:
            snd = pygame.mixer.Sound(self._full(rel_path))
            self._sounds[name] = snd
            log.debug("sound", name, "<-", rel_path)
        return snd

    def load_all(self, image_paths, font_paths, sound_paths=None) -> None:
        for name, path in image_paths.items():
            self.load_image(name, path)
        for name, path in font_paths.items():
            self.load_font(name, path)
        for name, path in (sound_paths or {}).items():
            self.load_sound(name, path)


__all__ = ["AssetManager"]

import json
import os

import pygame

from rocket_dodge.logger import get_logger

log = get_logger("settings")


class Settings:
    """Runtime configuration.

    Defaults live here; ``data/settings.json`` may override volumes and key
    bindings. The file is only ever read, never written.
    """

    SETTINGS_FILE = "data/settings.json"

    # Fixed relative resource paths
    IMAGE_PATHS = {
        "rocket": "images/rocket.gif",
        "asteroid": "images/asteroid.gif",
        "title": "images/title.gif",
        "gameover": "images/gameover.gif",
    }
    SOUND_PATHS = {
        "background_music": "sounds/backgroundmusic.mp3",
        "collision_sound": "sounds/explosionnoise.mp3",
    }
    FONT_PATHS = {
        "arial": "arial.ttf",
    }

    def __init__(self, path: str | None = None):
        self.settings_file = path or self.SETTINGS_FILE
        self._music_volume = 1.0
        self._sound_volume = 1.0
        # Default key bindings (pygame key integers)
        self.key_bindings = {
            "TitleState": {
                "confirm": [pygame.K_RETURN, pygame.K_KP_ENTER],
            },
            "PlayingState": {
                "cancel": [pygame.K_ESCAPE],
                "up": [pygame.K_UP],
                "down": [pygame.K_DOWN],
                "left": [pygame.K_LEFT],
                "right": [pygame.K_RIGHT],
            },
        }
        self.load_settings()

    @staticmethod
    def _clamp_volume(value) -> float:
        return max(0.0, min(1.0, round(float(value) * 10) / 10))

    @property
    def music_volume(self):
        return self._music_volume

    @music_volume.setter
    def music_volume(self, value):
        self._music_volume = self._clamp_volume(value)

    @property
    def sound_volume(self):
        return self._sound_volume

    @sound_volume.setter
    def sound_volume(self, value):
        self._sound_volume = self._clamp_volume(value)

    def movement_keys(self):
        binds = self.key_bindings["PlayingState"]
        return {d: binds.get(d, []) for d in ("up", "down", "left", "right")}

    def load_settings(self):
        """Merge overrides from the JSON file over the defaults, if present."""
        if not os.path.exists(self.settings_file):
            return
        try:
            with open(self.settings_file, "r") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            log.warn("Error loading settings; using defaults", e)
            return
        self.music_volume = data.get("music_volume", self._music_volume)
        self.sound_volume = data.get("sound_volume", self._sound_volume)

        # Deep merge so missing actions keep their defaults
        loaded_bindings = data.get("key_bindings", {})
        for state, binds in loaded_bindings.items():
            if state in self.key_bindings:
                for action, keys in binds.items():
                    self.key_bindings[state][action] = list(keys)
        log.debug("Settings loaded from", self.settings_file)


settings = Settings()

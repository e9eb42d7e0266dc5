"""Service interfaces handed to the states.

States depend on narrow protocol-style interfaces instead of reaching
for singletons, which lets tests swap in recording fakes.

- AudioPort  -> AudioService.play
- ImagePort  -> AssetManager.get_image
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import pygame

from rocket_dodge.renderer import Renderer
from rocket_dodge.rng_service import RNGService


class AudioPort(Protocol):
    def play(self, name: str, loops: int = 0) -> None: ...  # noqa: D401


class ImagePort(Protocol):
    def get_image(self, name: str) -> pygame.Surface: ...


@dataclass
class ServiceContainer:
    audio: AudioPort
    images: ImagePort
    rng: RNGService
    renderer: Renderer

    def play(self, name: str, loops: int = 0) -> None:
        self.audio.play(name, loops=loops)


def build_services() -> ServiceContainer:
    """Factory wiring the default singletons together.

    Call after the window is open and resources are loaded.
    """
    from rocket_dodge.asset_manager import AssetManager
    from rocket_dodge.audio_service import AudioService

    am = AssetManager.get()
    return ServiceContainer(
        audio=AudioService.get(),
        images=am,
        rng=RNGService.get(),
        renderer=Renderer(am),
    )


__all__ = ["AudioPort", "ImagePort", "ServiceContainer", "build_services"]

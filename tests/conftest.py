import os
import sys
from pathlib import Path

import pygame
import pytest

# Ensure repository root is on sys.path for module imports (app, rocket_dodge)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless test mode
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from rocket_dodge.renderer import Renderer  # noqa: E402
from rocket_dodge.rng_service import RNGService  # noqa: E402
from rocket_dodge.services import ServiceContainer  # noqa: E402


class FakeDisplay:
    """Records draw calls and replays scripted event frames."""

    def __init__(self, frames=None, held=(), dt=1 / 60):
        self.frames = list(frames or [])
        self.held = set(held)
        self.dt = dt
        self.calls = []
        self.sleeps = []
        self.presented = 0
        self._quit = False

    def poll_events(self):
        events = self.frames.pop(0) if self.frames else []
        for e in events:
            if e.type == pygame.QUIT:
                self._quit = True
        return events

    def quit_requested(self):
        return self._quit

    def key_down(self, key):
        return key in self.held

    def delta(self):
        return self.dt

    def sleep(self, ms):
        self.sleeps.append(ms)

    def present(self, target_fps=0):
        self.presented += 1

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_image(self, image, x, y):
        self.calls.append(("image", image, x, y))

    def draw_text(self, text, color, font_name, size, x, y):
        self.calls.append(("text", text, size, x, y))

    def measure_text_width(self, text, font_name, size):
        return len(text) * size // 2

    def fill_circle(self, color, x, y, radius):
        self.calls.append(("circle", color, x, y, radius))

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]


class FakeAudio:
    def __init__(self):
        self.played = []

    def play(self, name, loops=0):
        self.played.append((name, loops))


class FakeImages:
    def __init__(self):
        self._images = {
            "rocket": pygame.Surface((40, 40)),
            "asteroid": pygame.Surface((40, 40)),
            "title": pygame.Surface((200, 100)),
            "gameover": pygame.Surface((300, 100)),
        }

    def get_image(self, name):
        return self._images[name]


@pytest.fixture
def fake_display():
    return FakeDisplay()


@pytest.fixture
def services():
    images = FakeImages()
    return ServiceContainer(audio=FakeAudio(), images=images, rng=RNGService(1234), renderer=Renderer(images))


@pytest.fixture
def make_display():
    return FakeDisplay

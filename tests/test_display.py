import pygame
import pytest

from rocket_dodge.asset_manager import AssetManager
from rocket_dodge.display import Display


@pytest.fixture(scope="module")
def display():
    pygame.init()
    d = Display(AssetManager())
    yield d
    pygame.quit()


def test_window_size(display):
    assert display.surface.get_size() == (800, 600)


def test_opaque_circle(display):
    display.clear((0, 0, 0))
    display.fill_circle((255, 200, 0, 255), 50, 50, 3)
    assert display.surface.get_at((50, 50))[:3] == (255, 200, 0)


def test_translucent_circle_blends(display):
    display.clear((0, 0, 0))
    display.fill_circle((255, 200, 0, 128), 50, 50, 3)
    r, g, b = display.surface.get_at((50, 50))[:3]
    assert 100 < r < 160
    assert b == 0


def test_quit_event_sets_flag(display):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    events = display.poll_events()
    assert any(e.type == pygame.QUIT for e in events)
    assert display.quit_requested()


def test_delta_and_keys(display):
    display.delta()
    display.sleep(5)
    assert display.delta() >= 0.0
    assert display.key_down(pygame.K_LEFT) is False


def test_draw_image_and_present(display):
    display.clear((0, 0, 0))
    img = pygame.Surface((4, 4))
    img.fill((10, 20, 30))
    display.draw_image(img, 5, 5)
    display.present(60)
    assert display.surface.get_at((6, 6))[:3] == (10, 20, 30)


def lit_offsets(surface, cx, cy, reach=5):
    return {
        (dx, dy)
        for dx in range(-reach, reach + 1)
        for dy in range(-reach, reach + 1)
        if surface.get_at((cx + dx, cy + dy))[:3] != (0, 0, 0)
    }


def test_translucent_circle_matches_opaque_footprint(display):
    display.clear((0, 0, 0))
    display.fill_circle((255, 200, 0, 255), 20, 20, 3)
    display.fill_circle((255, 200, 0, 128), 60, 20, 3)
    opaque = lit_offsets(display.surface, 20, 20)
    translucent = lit_offsets(display.surface, 60, 20)
    assert (3, 0) in opaque and (0, 3) in opaque
    assert translucent == opaque


def test_delta_includes_pacing_sleep(display):
    display.delta()
    display.present(0)
    display.sleep(30)
    assert display.delta() >= 0.025

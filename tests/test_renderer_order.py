import pygame

from rocket_dodge.entities import Asteroid
from rocket_dodge.renderer import Renderer
from rocket_dodge.rng_service import RNGService
from rocket_dodge.session import GameSession


def test_playfield_layer_order(services, fake_display):
    session = GameSession(pygame.Surface((40, 40)), pygame.Surface((20, 20)), RNGService(1))
    session.asteroids.append(Asteroid(100, 100, 3, session.asteroid_sprite))
    session.particles.emit(10, 10, count=2)
    seq = []
    services.renderer.render_playfield(fake_display, session, capture_sequence=seq)
    assert seq == ["clear", "rocket", "asteroids", "particles"]
    kinds = [c[0] for c in fake_display.calls]
    assert kinds == ["clear", "image", "image", "circle", "circle"]
    # Sprites are drawn centred on the entity position
    assert fake_display.calls[1][2:] == (380, 280)
    assert fake_display.calls[2][2:] == (90, 90)


def test_game_over_centres_score(services, fake_display):
    services.renderer.render_game_over(fake_display, 7)
    image_call = fake_display.calls[1]
    assert image_call[2:] == ((800 - 300) / 2, 50)
    text_call = fake_display.calls[2]
    assert text_call[1] == "SCORE: 7"
    width = fake_display.measure_text_width("SCORE: 7", "arial", 24)
    assert text_call[3:] == ((800 - width) / 2, 500)


def test_renderer_uses_image_names(fake_display):
    class Images:
        def __init__(self):
            self.requested = []

        def get_image(self, name):
            self.requested.append(name)
            return pygame.Surface((10, 10))

    images = Images()
    r = Renderer(images)
    r.render_title(fake_display, "x")
    r.render_game_over(fake_display, 0)
    assert images.requested == ["title", "gameover"]

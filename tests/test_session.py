import pygame

from rocket_dodge.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from rocket_dodge.entities import Asteroid, InputState
from rocket_dodge.rng_service import RNGService
from rocket_dodge.session import GameSession


def make_session(seed=1):
    return GameSession(pygame.Surface((40, 40)), pygame.Surface((40, 40)), RNGService(seed))


def far_asteroid(session, speed=4.0):
    a = Asteroid(0, -50, speed, session.asteroid_sprite)
    session.asteroids.append(a)
    return a


def test_spawn_cadence_appends_and_speeds_up():
    s = make_session()
    first = far_asteroid(s)
    s.tick(InputState(), 2.5)
    assert len(s.asteroids) == 1
    s.tick(InputState(), 2.5)
    assert len(s.asteroids) == 2
    assert first.speed == 4.5
    assert s.spawn_timer.elapsed == 0.0
    newcomer = s.asteroids[-1]
    assert 3.5 <= newcomer.speed < 8.5


def test_no_spawn_before_interval():
    s = make_session()
    for _ in range(299):
        s.tick(InputState(), 1 / 60)
    assert s.asteroids == []


def test_survival_ticks_and_displayed_score_are_distinct():
    s = make_session()
    far_asteroid(s)
    for _ in range(10):
        s.tick(InputState(), 0.01)
    assert s.survival_ticks == 10
    assert s.displayed_score == 1


def test_collision_emits_burst_at_asteroid_position():
    s = make_session()
    # One step above the rocket; it lands on the rocket centre this tick.
    a = Asteroid(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2 - 3, 3.0, s.asteroid_sprite)
    s.asteroids.append(a)
    hit = s.tick(InputState(), 1 / 60)
    assert hit is a
    assert s.game_over
    assert len(s.particles) == 50
    assert all((p.x, p.y) == (a.x, a.y) for p in s.particles)
    assert s.survival_ticks == 0


def test_collision_stops_updating_later_asteroids():
    s = make_session()
    s.asteroids.append(Asteroid(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2, 0.0, s.asteroid_sprite))
    later = far_asteroid(s, speed=6.0)
    s.tick(InputState(), 1 / 60)
    assert later.y == -50


def test_tick_after_game_over_is_inert():
    s = make_session()
    s.asteroids.append(Asteroid(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2, 0.0, s.asteroid_sprite))
    s.tick(InputState(), 1 / 60)
    assert s.tick(InputState(up=True), 1 / 60) is None
    assert s.rocket.y == SCREEN_HEIGHT / 2


def test_rocket_moves_during_tick():
    s = make_session()
    s.tick(InputState(left=True), 1 / 60)
    assert s.rocket.x == SCREEN_WIDTH / 2 - 5

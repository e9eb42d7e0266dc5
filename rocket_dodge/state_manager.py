"""Game state machine.

A small state manager drives the four screens of a round:

    TitleState -> PlayingState -> ExplodingState -> GameOverState -> (terminated)

plus the early exit from PlayingState when the cancel key is pressed.
Window-close requests are handled by the frame loop in ``app.py``, which
stops calling into the manager as soon as the display reports them.

Usage Example (see ``app.py`` for the runnable loop):

    sm = StateManager()
    sm.set(TitleState(services, player_name))
    while sm.running:
        events = display.poll_events()
        sm.handle_actions(router.process(events, sm.current.name))
        sm.handle_input(router.held(display.key_down))
        sm.update(display.delta())
        sm.render(display)
        display.present(TARGET_FPS)

Design Notes:
- Exactly one state is active and receives loop callbacks.
- States request transitions through ``self.manager``; ``terminate()``
  exits the active state and flips ``running`` off.
- ``frame_delay_ms`` lets a state ask the loop for a pacing sleep after
  its frame is presented (explosion pacing, game-over hold).
"""

from __future__ import annotations

from typing import Sequence

from rocket_dodge.constants import EXPLOSION_FRAME_DELAY_MS, GAME_OVER_DELAY_MS
from rocket_dodge.entities import InputState
from rocket_dodge.logger import get_logger
from rocket_dodge.services import ServiceContainer
from rocket_dodge.session import GameSession
from rocket_dodge.timer import PhaseTimer

_state_log = get_logger("state")


class State:
    """Base class for a screen of the game.

    All hooks are optional; the base implementations are no-ops.
    """

    name: str = "State"
    manager: "StateManager | None" = None

    # Lifecycle -----------------------------------------------------
    def on_enter(self, previous: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    def on_exit(self, next_state: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    # Main loop hooks -----------------------------------------------
    def handle_actions(self, actions: Sequence[str]) -> None:  # pragma: no cover - default no-op
        pass

    def handle_input(self, held: InputState) -> None:  # pragma: no cover - default no-op
        pass

    def update(self, dt: float) -> None:  # pragma: no cover - default no-op
        pass

    def render(self, display) -> None:  # pragma: no cover - default no-op
        pass

    @property
    def frame_delay_ms(self) -> int:
        return 0


class StateManager:
    """Holds the active state and swaps it on request.

    `set` replaces the active state (exit hook, then enter hook);
    `terminate` exits it and ends the run.
    """

    def __init__(self) -> None:
        self._current: State | None = None
        self.terminated = False

    @property
    def current(self) -> State | None:
        return self._current

    @property
    def running(self) -> bool:
        return not self.terminated and self._current is not None

    # Transitions ---------------------------------------------------
    def set(self, state: State) -> None:
        previous = self._current
        if previous is not None:
            previous.on_exit(state)
        state.manager = self
        self._current = state
        state.on_enter(previous)
        _state_log.info("state ->", state.name)

    def terminate(self) -> None:
        if self._current is not None:
            self._current.on_exit(None)
            self._current = None
        self.terminated = True
        _state_log.info("state -> Terminated")

    # Loop dispatch -------------------------------------------------
    def handle_actions(self, actions: Sequence[str]) -> None:
        if self.current:
            if actions:
                _state_log.debug("actions ->", self.current.name, actions)
            self.current.handle_actions(actions)

    def handle_input(self, held: InputState) -> None:
        if self.current:
            self.current.handle_input(held)

    def update(self, dt: float) -> None:
        if self.current:
            self.current.update(dt)

    def render(self, display) -> None:
        if self.current:
            self.current.render(display)

    def frame_delay_ms(self) -> int:
        return self.current.frame_delay_ms if self.current else 0


class TitleState(State):
    name = "TitleState"

    def __init__(self, services: ServiceContainer, player_name: str = "") -> None:
        self.services = services
        self.player_name = player_name
        self.confirmed = False

    def handle_actions(self, actions: Sequence[str]) -> None:
        if "confirm" in actions:
            self.confirmed = True

    def update(self, dt: float) -> None:
        if self.confirmed and self.manager:
            self.manager.set(PlayingState(self.services))

    def render(self, display) -> None:
        self.services.renderer.render_title(display, self.player_name)


class PlayingState(State):
    name = "PlayingState"

    def __init__(self, services: ServiceContainer, session: GameSession | None = None) -> None:
        self.services = services
        self.session = session or GameSession(
            services.images.get_image("rocket"),
            services.images.get_image("asteroid"),
            services.rng,
        )
        self.held = InputState()

    def handle_actions(self, actions: Sequence[str]) -> None:
        if "cancel" in actions and self.manager:
            _state_log.info("cancel pressed; survived", self.session.survival_ticks, "ticks")
            self.manager.terminate()

    def handle_input(self, held: InputState) -> None:
        self.held = held

    def update(self, dt: float) -> None:
        hit = self.session.tick(self.held, dt)
        if hit is not None:
            self.services.play("collision_sound")
            if self.manager:
                self.manager.set(ExplodingState(self.services, self.session))

    def render(self, display) -> None:
        self.services.renderer.render_playfield(display, self.session)


class ExplodingState(State):
    """Render-only interval after the collision while the burst plays out."""

    name = "ExplodingState"

    def __init__(self, services: ServiceContainer, session: GameSession) -> None:
        self.services = services
        self.session = session
        self.timer = PhaseTimer()

    def update(self, dt: float) -> None:
        if self.timer.expired:
            if self.manager:
                self.manager.set(
                    GameOverState(self.services, self.session.displayed_score, self.session.survival_ticks)
                )
            return
        self.session.particles.advance()
        self.timer.add(dt)

    def render(self, display) -> None:
        self.services.renderer.render_playfield(display, self.session)

    @property
    def frame_delay_ms(self) -> int:
        return 0 if self.timer.expired else EXPLOSION_FRAME_DELAY_MS


class GameOverState(State):
    """Shows the score once, holds it on screen, then ends the program."""

    name = "GameOverState"

    def __init__(self, services: ServiceContainer, score: int, survival_ticks: int = 0) -> None:
        self.services = services
        self.score = score
        self.survival_ticks = survival_ticks
        self.shown = False

    def on_enter(self, previous: "State | None") -> None:
        _state_log.info(f"game over: score={self.score} survived={self.survival_ticks} ticks")

    def update(self, dt: float) -> None:
        if self.shown:
            if self.manager:
                self.manager.terminate()
            return
        self.shown = True

    def render(self, display) -> None:
        self.services.renderer.render_game_over(display, self.score)

    @property
    def frame_delay_ms(self) -> int:
        return GAME_OVER_DELAY_MS if self.shown else 0


__all__ = [
    "State",
    "StateManager",
    "TitleState",
    "PlayingState",
    "ExplodingState",
    "GameOverState",
]

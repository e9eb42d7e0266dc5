"""Application entry point.

Reads the player's name from the terminal, opens the window, loads the
fixed resource set, starts the background music and runs the state loop
until the round ends, the cancel key is pressed or the window is closed.
"""

from __future__ import annotations

import pygame

from rocket_dodge.asset_manager import AssetManager
from rocket_dodge.audio_service import AudioService
from rocket_dodge.constants import TARGET_FPS
from rocket_dodge.display import Display
from rocket_dodge.input_router import InputRouter
from rocket_dodge.logger import get_logger
from rocket_dodge.services import build_services
from rocket_dodge.settings import settings
from rocket_dodge.state_manager import StateManager, TitleState

log = get_logger("app")


def read_player_name(prompt: str = "Enter your name: ") -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def run_loop(display, sm: StateManager, router: InputRouter) -> None:
    """Drive the state machine one tick per iteration until it stops."""
    while sm.running:
        # --- Single central event poll ---
        events = display.poll_events()
        if display.quit_requested():
            log.info("window closed")
            break

        # Input routing -> actions -> state handling
        sm.handle_actions(router.process(events, sm.current.name))
        sm.handle_input(router.held(display.key_down))

        # --- Update & Render cycle ---
        sm.update(display.delta())
        if not sm.running:
            break
        sm.render(display)
        display.present(TARGET_FPS)

        delay = sm.frame_delay_ms()
        if delay:
            display.sleep(delay)


def main() -> int:
    player_name = read_player_name()

    pygame.init()
    try:
        am = AssetManager.get()
        display = Display(am)
        am.load_all(settings.IMAGE_PATHS, settings.FONT_PATHS)
        audio = AudioService.get()
        audio.play("background_music", loops=-1)

        services = build_services()
        sm = StateManager()
        sm.set(TitleState(services, player_name))
        run_loop(display, sm, InputRouter())
    finally:
        # Graceful shutdown
        pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

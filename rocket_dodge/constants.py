"""Gameplay and tuning constants.

Centralizes numeric tuning values so entities, systems and states share
one source of truth instead of scattering magic numbers.
"""

# Window
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_CAPTION = "Rocket Dodge"
TARGET_FPS = 60  # present() frame cap for normal rendering
CLEAR_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)

# Rocket
ROCKET_SPEED = 5  # pixels per tick along each held axis

# Asteroids
ASTEROID_SPAWN_Y = -50  # spawn height above the top edge
ASTEROID_MIN_SPEED = 3  # initial speed lower bound (inclusive)
ASTEROID_SPEED_RANGE = 5  # initial speed in [MIN, MIN + RANGE)
ASTEROID_RESPAWN_MARGIN = 50  # pixels below the bottom edge before respawn
ASTEROID_SPAWN_INTERVAL = 5.0  # seconds of play between spawns
ASTEROID_SPEEDUP = 0.5  # speed added to every asteroid on each spawn

# Collision
COLLISION_SHRINK = 0.8  # forgiveness factor applied to both radii

# Particles
PARTICLE_BURST_COUNT = 50
PARTICLE_LIFESPAN = 60  # frames
PARTICLE_MAX_VELOCITY = 3  # components sampled in [-MAX, MAX)
PARTICLE_RADIUS = 3
PARTICLE_ALPHA_SCALE = 5  # alpha = lifespan * scale, clamped to 255
PARTICLE_COLOR = (255, 200, 0)

# Timers / Transitions
EXPLOSION_DURATION = 2.0  # seconds of measured time after the collision
EXPLOSION_FRAME_DELAY_MS = 100  # pacing sleep between explosion frames
GAME_OVER_DELAY_MS = 4000

# Layout
TITLE_IMAGE_Y = 50
GAME_OVER_IMAGE_Y = 50
TITLE_PROMPT = "Press Enter to Start"
TITLE_PROMPT_SIZE = 36
TITLE_PLAYER_SIZE = 24
TITLE_HINT = "Avoid the Asteroids! They will begin falling shortly after the Game Starts. Good Luck!"
TITLE_HINT_SIZE = 16
SCORE_TEXT_SIZE = 24
SCORE_BOTTOM_OFFSET = 100


__all__ = [name for name in globals().keys() if name.isupper()]

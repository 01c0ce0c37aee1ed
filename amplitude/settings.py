# amplitude/settings.py
from __future__ import annotations
import math

# Window / render
SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600
SCREEN_SIZE: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)
WINDOW_TITLE: str = "Amplitude"
FPS: int = 60

# Timestep (sub-stepped update)
MAX_STEP: float = 1.0 / 100.0    # largest slice a frame is cut into (s)
DT_CLAMP: float = 0.25           # longest frame the clock will report (s)

# Input
DAMPEN_KEY: str = "space"    # pygame key name

# Movement (px/sec) for trail and obstacles
MOVEMENT_SPEED: float = 150.0

# Wave front
WAVE_FRONT_FREQUENCY: float = 1.0        # Hz
WAVE_FRONT_AMPLITUDE: float = 70.0       # px, free swing
WAVE_FRONT_AMPLITUDE_SMALL: float = 20.0 # px, while dampening
WAVE_RADIUS: float = 16.0

# Life meter
LIFE_RECOVER: float = 10.0   # per second, key released
LIFE_DEPLETE: float = 20.0   # per second, key held
LIFE_MAXIMUM: float = 100.0
LIFE_MINIMUM: float = 0.0

# Obstacles
OBSTACLE_COUNTDOWN: float = 2.0          # seconds between spawns
OBSTACLE_ANGLE_FREQUENCY: float = 1.0    # turns per second
OBSTACLE_MARGIN: float = 32.0            # spawn this far past the right edge
OFFSCREEN_X: float = -32.0               # purge once x drops below this
TWO_PI: float = 2.0 * math.pi

# Obstacle sprite (None = draw the saw blade procedurally)
SAWBLADE_IMAGE: str | None = None
SAWBLADE_SIZE: int = 64
SAWBLADE_TEETH: int = 12

# Colors
BG_COLOR: tuple[int, int, int] = (255, 255, 255)
FREE_COLOR: tuple[int, int, int] = (255, 0, 0)       # trail at full amplitude
DAMPENED_COLOR: tuple[int, int, int] = (0, 0, 255)   # trail while dampening
SAWBLADE_RGB: tuple[int, int, int] = (90, 90, 100)
SAWBLADE_HUB_RGB: tuple[int, int, int] = (200, 200, 210)

# Life bar (HUD)
LIFE_BAR_MARGIN: int = 5
LIFE_BAR_HEIGHT: int = 16

# --- RNG (optional seed; None = random) ---
RNG_SEED: int | None = None

# Logging
LOG_LEVEL: str = "INFO"

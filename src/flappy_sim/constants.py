"""
constants.py: Centralized configuration for the simulation and the client.
"""

# -------- Display Config --------
DEFAULT_WIDTH = 480
DEFAULT_HEIGHT = 800
RENDER_FPS = 60
BASE_HEIGHT = 600               # Reference screen height all sizes are authored for

# -------- Player Config (reference units) --------
PLAYER_X = 80
PLAYER_SIZE = 40
PLAYER_START_Y_FRAC = 0.4       # Start y as a fraction of the viewport height
GRAVITY_ACCEL = 1400.0          # Vertical acceleration (units/s^2)
JUMP_IMPULSE = -420.0           # Velocity set by a jump (units/s)

# Animation bands: (exclusive upper velocity bound, frame index)
FRAME_UP = 0
FRAME_LEVEL = 1
FRAME_DIVE = 2
ANIMATION_BANDS = (
    (-50.0, FRAME_UP),
    (200.0, FRAME_LEVEL),
)

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 60             # Reference units
OBSTACLE_SPEED = 240.0          # Horizontal speed (reference units/s)
GAP_FRAC = 0.16                 # Gap height as a fraction of the viewport height
MIN_TOP_FRAC = 0.1              # Lowest gap top, fraction of viewport height
MAX_TOP_FRAC = 0.55             # Highest gap top (exclusive)
SPAWN_DISTANCE_FRAC = 0.55      # Spawn when last obstacle is left of this * width

# -------- Difficulty Config --------
DIFFICULTY_PER_POINT = 0.05

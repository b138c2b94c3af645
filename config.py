# config.py
import os

# Files in the user's home directory
HOME_DIR = os.path.expanduser("~")
HIGHSCORE_FILE = os.environ.get("TFLAP_HIGHSCORE_FILE",
                                os.path.join(HOME_DIR, ".tflap_highscore"))
LOG_FILE = os.environ.get("TFLAP_LOG_FILE", os.path.join(HOME_DIR, ".tflap.log"))
LOG_LEVEL = os.environ.get("TFLAP_LOG_LEVEL", "warning")

# Timing
TICK_RATE = 20  # Ticks per second
TICK_SECONDS = 1.0 / TICK_RATE  # Fixed physics step (dt)
MAX_FRAME_SKIP = 5  # Consecutive frames the renderer may drop when lagging

# Bird physics (rows, seconds)
GRAVITY = 120.0  # Downward acceleration, rows/s^2
JUMP_VELOCITY = -30.0  # Velocity after a jump, rows/s (negative = up)

# Bird geometry (terminal cells)
BIRD_X = 10  # Fixed column of the bird
BIRD_WIDTH = 1
BIRD_HEIGHT = 1
BIRD_CLEARANCE = 1  # Spare rows a gap must leave around the bird

# Pipes
PIPE_WIDTH = 6  # Columns
PIPE_GAP = 8  # Gap height in rows
GAP_MARGIN = 3  # Minimum rows between a gap and the screen edge
PIPE_SPEED = 1.0  # Columns scrolled per tick
SPAWN_INTERVAL = 40  # Columns between consecutive pipes
INITIAL_PIPES = 4  # Pipes queued at the start of a round

# Smallest terminal a round can be played in
MIN_SCREEN_HEIGHT = PIPE_GAP + 2 * GAP_MARGIN + 2
MIN_SCREEN_WIDTH = BIRD_X + PIPE_WIDTH + 2

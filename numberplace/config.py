"""
Tunable settings for the engine and the pygame front end.

Values are plain module constants. ``load_settings`` layers environment
overrides on top of the defaults for the command line entry point.
"""
import os

from .exceptions import InvalidInputError

# -------------------------------------------------------------------------
# DIFFICULTY
# -------------------------------------------------------------------------
# Number of cells blanked out of 81 for each difficulty tier.
REMOVAL_BUDGETS = {
    'easy': 30,
    'medium': 45,
    'hard': 55,
}
DEFAULT_DIFFICULTY = 'easy'

# -------------------------------------------------------------------------
# GENERATION
# -------------------------------------------------------------------------
# Fresh-seed retries before the generator gives up.
GENERATION_ATTEMPTS = 5
# Placements tried by one solve before the attempt is abandoned.
SOLVER_STEP_LIMIT = 200_000

# -------------------------------------------------------------------------
# FRONT END
# -------------------------------------------------------------------------
WINDOW_TITLE = "Number Place"
WINDOW_WIDTH = 520
WINDOW_HEIGHT = 760
GRID_X = 35
GRID_Y = 80
GRID_PIXELS = 450
CELL_PIXELS = GRID_PIXELS // 9
FPS = 60

# Mistake counter turns red above this many mistakes.
MISTAKE_ALERT_THRESHOLD = 2

COLORS = {
    'background': (248, 250, 252),
    'grid_bg': (255, 255, 255),
    'line_thick': (30, 41, 59),
    'line_thin': (203, 213, 225),
    'text': (15, 23, 42),
    'text_muted': (100, 116, 139),
    'correct': (37, 99, 235),
    'wrong': (220, 38, 38),
    'selected': (59, 130, 246),
    'same_digit': (191, 219, 254),
    'related': (239, 246, 255),
    'button': (37, 99, 235),
    'button_disabled': (203, 213, 225),
    'button_active': (30, 41, 59),
    'overlay': (255, 255, 255),
    'trophy': (234, 179, 8),
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def load_settings(environ=None):
    """
    Returns the run settings, reading NUMBERPLACE_DIFFICULTY,
    NUMBERPLACE_SEED and NUMBERPLACE_LOG_LEVEL when they are set. A seed
    that is not an integer or an unknown log level raises InvalidInputError.
    """
    if environ is None:
        environ = os.environ

    seed = environ.get('NUMBERPLACE_SEED', '').strip()
    if seed:
        try:
            seed = int(seed)
        except ValueError:
            raise InvalidInputError(f"NUMBERPLACE_SEED must be an integer, got {seed!r}") from None
    else:
        seed = None

    log_level = environ.get('NUMBERPLACE_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        raise InvalidInputError(
            f"NUMBERPLACE_LOG_LEVEL must be one of {choices}, got {log_level!r}"
        )

    return {
        'difficulty': environ.get('NUMBERPLACE_DIFFICULTY', DEFAULT_DIFFICULTY),
        'seed': seed,
        'log_level': log_level,
    }

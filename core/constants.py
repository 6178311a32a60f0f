"""Flat re-export of the configuration constants.

Import from here when a module needs constants from more than one of the
core.config submodules.
"""

from core.config.display import (  # noqa: F401
    BACKGROUND_COLOR,
    DISPLAY_SCALE,
    EXIT_MARGIN,
    FRAME_RATE,
    HIGHLIGHT_COLOR,
    HUD_BAND_FRACTION,
    HUD_COLOR,
    PLAYER_COLOR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TEXT_COLOR,
    play_band,
)
from core.config.entities import (  # noqa: F401
    COLLISION_COOLDOWN,
    COLLISION_DAMAGE,
    EXTRA_SPAWN_CHANCE,
    PLAYER_SPEED,
    PLAYER_START_HEALTH,
    PLAYER_START_SIZE,
    PLAYER_START_X,
    PLAYER_START_Y,
    TIER_TABLE,
)
from core.config.session import (  # noqa: F401
    AUTOPILOT_TURN_CHANCE,
    DEFAULT_DATA_DIR,
    DEFAULT_HEADLESS_FRAMES,
    MAX_ENEMIES,
    RECORDS_FILENAME,
    SEPARATOR_WIDTH,
    SNAPSHOT_FILENAME,
    SNAPSHOT_SCHEMA_VERSION,
    SPAWN_INTERVAL,
    VICTORY_SIZE,
)

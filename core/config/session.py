"""Session, spawning and persistence configuration constants."""

# Spawning
SPAWN_INTERVAL = 1.0  # Seconds between spawn attempts
MAX_ENEMIES = 10

# Winning: the player becomes the ruler of the sea past this size.
# Deliberately kept independent from the largest tier size.
VICTORY_SIZE = 1.2

# Persistence
DEFAULT_DATA_DIR = "data"
RECORDS_FILENAME = "game_records.json"
SNAPSHOT_FILENAME = "session_snapshot.json"
SNAPSHOT_SCHEMA_VERSION = 1

# Headless autopilot
DEFAULT_HEADLESS_FRAMES = 3600
AUTOPILOT_TURN_CHANCE = 0.02  # Per-frame chance the autopilot picks a new heading

# Console output
SEPARATOR_WIDTH = 60

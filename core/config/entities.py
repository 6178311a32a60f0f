"""Player and enemy fish configuration constants."""

# Player fish starting values
PLAYER_START_X = 400.0
PLAYER_START_Y = 300.0
PLAYER_START_SIZE = 0.25  # Just large enough to eat the smallest tier
PLAYER_START_HEALTH = 100
PLAYER_SPEED = 300.0  # Units per second

# Damage taken from touching an equal or larger fish
COLLISION_DAMAGE = 50
COLLISION_COOLDOWN = 1.0  # Seconds before another hit can land

# Enemy tiers, smallest first.
# name: (score, size, speed, growth, spawn_weight, color)
TIER_TABLE = {
    "TINY": (1, 0.2, 150.0, 0.010, 10, (255, 0, 0)),
    "SMALL": (2, 0.3, 140.0, 0.015, 9, (255, 69, 0)),
    "MEDIUM": (3, 0.4, 130.0, 0.020, 8, (255, 140, 0)),
    "LARGE": (4, 0.5, 120.0, 0.025, 7, (255, 215, 0)),
    "HUGE": (5, 0.6, 110.0, 0.030, 6, (128, 128, 128)),
    "GIANT": (6, 0.7, 100.0, 0.035, 5, (0, 160, 0)),
    "MASSIVE": (7, 0.8, 90.0, 0.040, 4, (0, 0, 255)),
    "COLOSSAL": (8, 0.9, 80.0, 0.045, 3, (128, 0, 128)),
    "TITANIC": (9, 1.0, 70.0, 0.050, 2, (255, 105, 180)),
    "LEGENDARY": (10, 1.1, 60.0, 0.060, 1, (212, 175, 55)),
}

# Chance that a spawned fish of the two smallest tiers brings a companion
EXTRA_SPAWN_CHANCE = {
    "TINY": 0.6,
    "SMALL": 0.4,
}

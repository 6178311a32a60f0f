"""Lightweight game configuration helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from core.config.display import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH
from core.config.entities import (
    COLLISION_COOLDOWN,
    COLLISION_DAMAGE,
    PLAYER_SPEED,
    PLAYER_START_HEALTH,
    PLAYER_START_SIZE,
)
from core.config.session import (
    DEFAULT_DATA_DIR,
    MAX_ENEMIES,
    RECORDS_FILENAME,
    SNAPSHOT_FILENAME,
    SPAWN_INTERVAL,
    VICTORY_SIZE,
)
from core.exceptions import ConfigurationError

DATA_DIR_ENV = "BIGFISH_DATA_DIR"


@dataclass
class DisplayConfig:
    """Window and frame rate settings."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    frame_rate: int = FRAME_RATE


@dataclass
class SpawnConfig:
    """Enemy population settings."""

    spawn_interval: float = SPAWN_INTERVAL
    max_enemies: int = MAX_ENEMIES


@dataclass
class PlayerConfig:
    """Player balancing settings."""

    start_size: float = PLAYER_START_SIZE
    start_health: int = PLAYER_START_HEALTH
    speed: float = PLAYER_SPEED
    collision_damage: int = COLLISION_DAMAGE
    collision_cooldown: float = COLLISION_COOLDOWN
    victory_size: float = VICTORY_SIZE


@dataclass
class PersistenceConfig:
    """Where the record ledger and session snapshot live."""

    data_dir: str = DEFAULT_DATA_DIR
    records_filename: str = RECORDS_FILENAME
    snapshot_filename: str = SNAPSHOT_FILENAME

    @property
    def records_path(self) -> Path:
        return Path(self.data_dir) / self.records_filename

    @property
    def snapshot_path(self) -> Path:
        return Path(self.data_dir) / self.snapshot_filename


@dataclass
class GameConfig:
    """Top-level configuration for a game process.

    Attributes:
        display: Window settings used by the frontend and the play area.
        spawn: Enemy spawner settings.
        player: Player balancing constants.
        persistence: File locations for the ledger and snapshot.
        seed: Optional seed for the game's random source.
    """

    display: DisplayConfig = field(default_factory=DisplayConfig)
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, seed: Optional[int] = None) -> "GameConfig":
        """Build a config, honouring ``BIGFISH_DATA_DIR`` when set."""
        config = cls(seed=seed)
        data_dir = os.getenv(DATA_DIR_ENV)
        if data_dir:
            config.persistence.data_dir = data_dir
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is out of range."""
        if self.display.screen_width <= 0 or self.display.screen_height <= 0:
            raise ConfigurationError(
                f"Screen size must be positive, got "
                f"{self.display.screen_width}x{self.display.screen_height}"
            )
        if self.spawn.spawn_interval <= 0:
            raise ConfigurationError(
                f"spawn_interval must be positive, got {self.spawn.spawn_interval}"
            )
        if self.spawn.max_enemies < 0:
            raise ConfigurationError(
                f"max_enemies cannot be negative, got {self.spawn.max_enemies}"
            )
        if self.player.victory_size <= 0:
            raise ConfigurationError(
                f"victory_size must be positive, got {self.player.victory_size}"
            )
        if self.player.collision_cooldown < 0:
            raise ConfigurationError(
                f"collision_cooldown cannot be negative, got {self.player.collision_cooldown}"
            )

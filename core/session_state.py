"""Per-session game state.

A SessionState is created fresh when a game starts, mutated every frame
while playing, snapshotted on pause and replaced wholesale on restart.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from core.config.entities import PLAYER_START_HEALTH, PLAYER_START_SIZE
from core.config.session import MAX_ENEMIES, SPAWN_INTERVAL
from core.entities.enemy import EnemyFish
from core.entities.player import PlayerFish, PlayerInput
from core.systems.spawning import EnemySpawner


@dataclass
class SessionState:
    """Everything needed to resume a game exactly where it stopped.

    ``health`` and ``size`` mirror the player fish for the HUD; they are
    synced at the end of every step.
    """

    spawner: EnemySpawner
    health: int = PLAYER_START_HEALTH
    size: float = PLAYER_START_SIZE
    score: int = 0
    player: PlayerFish = field(default_factory=PlayerFish)
    input: PlayerInput = field(default_factory=PlayerInput)
    enemies: List[EnemyFish] = field(default_factory=list)
    is_victory: bool = False
    frame: int = 0

    @classmethod
    def new(
        cls,
        rng: random.Random,
        spawn_interval: float = SPAWN_INTERVAL,
        max_enemies: int = MAX_ENEMIES,
        player: Optional[PlayerFish] = None,
    ) -> "SessionState":
        """Create a fresh session with an empty sea."""
        player = player if player is not None else PlayerFish()
        return cls(
            spawner=EnemySpawner(rng=rng, spawn_interval=spawn_interval, max_enemies=max_enemies),
            health=player.health,
            size=player.size,
            player=player,
        )

    def sync_display_fields(self) -> None:
        self.health = self.player.health
        self.size = self.player.size

    def living_enemies(self) -> List[EnemyFish]:
        return [enemy for enemy in self.enemies if enemy.is_alive]

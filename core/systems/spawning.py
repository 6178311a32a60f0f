"""Enemy spawning system.

This module keeps the enemy population topped up: it culls fish that were
eaten or swam off screen, and on a fixed interval introduces new fish whose
tier is drawn from a weighted lottery that favours small fish.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Sequence

from core.config.display import play_band
from core.config.session import MAX_ENEMIES, SPAWN_INTERVAL
from core.entities.enemy import EnemyFish, SwimDirection
from core.entities.tiers import ALL_TIERS, SMALLEST_TIER, FishTier
from core.systems.base import BaseSystem, SystemResult
from core.util.rng import require_rng_param

logger = logging.getLogger(__name__)


def candidate_tiers(controlled_size: float) -> List[FishTier]:
    """Tiers eligible to spawn for a player of the given size.

    Edible tiers (strictly smaller) keep food available; threat tiers
    (strictly larger) keep danger present. Only a tier of exactly the
    player's size is left out. If nothing qualifies the smallest tier is used.
    """
    edible = [tier for tier in ALL_TIERS if tier.size < controlled_size]
    threats = [tier for tier in ALL_TIERS if tier.size > controlled_size]
    candidates = edible + threats
    if not candidates:
        return [SMALLEST_TIER]
    return candidates


def choose_weighted_tier(candidates: Sequence[FishTier], rng: random.Random) -> FishTier:
    """Pick a tier by weighted lottery.

    Draws an integer in ``[0, total_weight)`` and walks the candidates,
    subtracting each weight until the draw lands inside a tier's span.

    Raises:
        ValueError: If candidates is empty
    """
    if not candidates:
        raise ValueError("Cannot choose a tier from an empty candidate list")

    total_weight = sum(tier.spawn_weight for tier in candidates)
    draw = rng.randrange(total_weight)
    for tier in candidates:
        if draw < tier.spawn_weight:
            return tier
        draw -= tier.spawn_weight

    # Unreachable while every weight is a positive integer
    return candidates[-1]


class EnemySpawner(BaseSystem):
    """Handles enemy culling and timed, weighted spawning.

    Attributes:
        spawn_timer: Seconds accumulated since the last spawn
        spawn_interval: Seconds between spawns
        max_enemies: Population cap
        rng: Random source for tier, direction, position and extra-spawn rolls
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        spawn_interval: float = SPAWN_INTERVAL,
        max_enemies: int = MAX_ENEMIES,
        spawn_timer: float = 0.0,
    ) -> None:
        """Initialize the spawner.

        Args:
            rng: Random number generator (required for determinism)
            spawn_interval: Seconds between spawns
            max_enemies: Maximum number of live enemies
            spawn_timer: Initial timer value (non-zero when restoring a snapshot)
        """
        super().__init__("EnemySpawner")
        self.rng = require_rng_param(rng, "EnemySpawner.__init__")
        self.spawn_timer: float = spawn_timer
        self.spawn_interval: float = spawn_interval
        self.max_enemies: int = max_enemies

    def update(
        self,
        delta_time: float,
        population: List[EnemyFish],
        screen_width: float,
        screen_height: float,
        controlled_size: float,
    ) -> SystemResult:
        """Cull, advance the timer and spawn if due.

        The population list is modified in place. Its length never exceeds
        ``max_enemies`` on return.
        """
        if not self.enabled:
            return SystemResult.skipped_result()

        before = len(population)
        population[:] = [
            enemy
            for enemy in population
            if enemy.is_alive and not enemy.is_out_of_bounds(screen_width)
        ]
        removed = before - len(population)

        self.spawn_timer += delta_time

        spawned = 0
        if len(population) < self.max_enemies and self.spawn_timer >= self.spawn_interval:
            spawned = self.spawn(population, screen_width, screen_height, controlled_size)
            self.spawn_timer = 0.0

        self._update_count += 1
        return SystemResult(
            entities_spawned=spawned,
            entities_removed=removed,
            details={"population": len(population)},
        )

    def spawn(
        self,
        population: List[EnemyFish],
        screen_width: float,
        screen_height: float,
        controlled_size: float,
    ) -> int:
        """Add one enemy, plus a possible companion for the smallest tiers.

        Returns:
            Number of fish added (0, 1 or 2)
        """
        if len(population) >= self.max_enemies:
            return 0

        tier = choose_weighted_tier(candidate_tiers(controlled_size), self.rng)
        population.append(self._create_enemy(tier, screen_width, screen_height))
        spawned = 1

        # Small fish tend to arrive in pairs
        chance = tier.extra_spawn_chance
        if chance > 0.0 and len(population) < self.max_enemies:
            if self.rng.random() < chance:
                population.append(self._create_enemy(tier, screen_width, screen_height))
                spawned += 1

        logger.debug(
            "Spawned %d %s fish (population %d/%d)",
            spawned,
            tier.name,
            len(population),
            self.max_enemies,
        )
        return spawned

    def _create_enemy(self, tier: FishTier, screen_width: float, screen_height: float) -> EnemyFish:
        direction = (
            SwimDirection.LEFT_TO_RIGHT if self.rng.random() < 0.5 else SwimDirection.RIGHT_TO_LEFT
        )
        start_y = self._spawn_y(tier, screen_height)
        return EnemyFish.spawn(tier, direction, start_y, screen_width)

    def _spawn_y(self, tier: FishTier, screen_height: float) -> float:
        """Uniform y inside the play band, inset so the fish is never clipped."""
        top, bottom = play_band(screen_height)
        radius = tier.display_size
        low = top + radius
        high = bottom - radius
        if high <= low:
            return (top + bottom) / 2.0
        return self.rng.uniform(low, high)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spawn_timer": self.spawn_timer,
            "spawn_interval": self.spawn_interval,
            "max_enemies": self.max_enemies,
        }

    def __eq__(self, other: object) -> bool:
        # The random source is not part of the spawner's persisted state
        if not isinstance(other, EnemySpawner):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"EnemySpawner(spawn_timer={self.spawn_timer}, "
            f"spawn_interval={self.spawn_interval}, max_enemies={self.max_enemies})"
        )

    def get_debug_info(self) -> Dict[str, Any]:
        info = super().get_debug_info()
        info.update(self.to_dict())
        return info

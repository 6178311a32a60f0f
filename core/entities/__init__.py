"""Entity value types: the player fish, enemy fish and their tiers."""

from core.entities.enemy import EnemyFish, SwimDirection
from core.entities.player import PlayerFish, PlayerInput
from core.entities.tiers import (
    ALL_TIERS,
    LARGEST_TIER,
    SMALLEST_TIER,
    TIER_STATS,
    FishTier,
    TierStats,
    tier_legend,
)

__all__ = [
    "ALL_TIERS",
    "EnemyFish",
    "FishTier",
    "LARGEST_TIER",
    "PlayerFish",
    "PlayerInput",
    "SMALLEST_TIER",
    "SwimDirection",
    "TIER_STATS",
    "TierStats",
    "tier_legend",
]

"""Enemy fish size tiers.

Tiers are a closed, ordered enumeration. Every per-tier number lives in a
single lookup table (built from ``core.config.entities.TIER_TABLE``) rather
than being spread across a class hierarchy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from core.config.display import DISPLAY_SCALE
from core.config.entities import EXTRA_SPAWN_CHANCE, TIER_TABLE


class FishTier(Enum):
    """The ten enemy size classes, smallest first."""

    TINY = 1
    SMALL = 2
    MEDIUM = 3
    LARGE = 4
    HUGE = 5
    GIANT = 6
    MASSIVE = 7
    COLOSSAL = 8
    TITANIC = 9
    LEGENDARY = 10

    @property
    def score(self) -> int:
        return TIER_STATS[self].score

    @property
    def size(self) -> float:
        return TIER_STATS[self].size

    @property
    def speed(self) -> float:
        return TIER_STATS[self].speed

    @property
    def growth(self) -> float:
        return TIER_STATS[self].growth

    @property
    def spawn_weight(self) -> int:
        return TIER_STATS[self].spawn_weight

    @property
    def display_size(self) -> float:
        """On-screen radius in pixels."""
        return TIER_STATS[self].size * DISPLAY_SCALE

    @property
    def extra_spawn_chance(self) -> float:
        return TIER_STATS[self].extra_spawn_chance


@dataclass(frozen=True)
class TierStats:
    """Constants attached to one tier.

    Attributes:
        score: Points awarded for eating a fish of this tier
        size: Physical size, compared against the player's size
        speed: Horizontal swim speed in units per second
        growth: Size the player gains by eating it
        spawn_weight: Relative lottery weight when spawning
        color: RGB colour used by the renderer
        extra_spawn_chance: Probability of spawning a companion of the same tier
    """

    score: int
    size: float
    speed: float
    growth: float
    spawn_weight: int
    color: Tuple[int, int, int]
    extra_spawn_chance: float = 0.0


def _build_tier_stats() -> Dict[FishTier, TierStats]:
    table = {}
    for tier in FishTier:
        score, size, speed, growth, weight, color = TIER_TABLE[tier.name]
        table[tier] = TierStats(
            score=score,
            size=size,
            speed=speed,
            growth=growth,
            spawn_weight=weight,
            color=color,
            extra_spawn_chance=EXTRA_SPAWN_CHANCE.get(tier.name, 0.0),
        )
    return table


TIER_STATS: Dict[FishTier, TierStats] = _build_tier_stats()

# All tiers in ascending size order
ALL_TIERS: List[FishTier] = sorted(FishTier, key=lambda t: t.value)

SMALLEST_TIER = ALL_TIERS[0]
LARGEST_TIER = ALL_TIERS[-1]


def tier_legend() -> List[str]:
    """Human-readable one-liners for the settings screen."""
    return [
        f"Lv{tier.value} {tier.name.title()}: {tier.score} pts, size {tier.size:.1f}"
        for tier in ALL_TIERS
    ]

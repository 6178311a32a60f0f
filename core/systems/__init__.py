"""Game systems package.

Each system owns one per-frame rule set and reports what it did:

- EnemySpawner (spawning.py): culls and spawns enemy fish
- CollisionResolver (collision.py): eating, damage, victory and wall clamping

The session calls them in a fixed order every frame; see core/session.py.
"""

from core.systems.base import BaseSystem, SystemResult
from core.systems.collision import CollisionOutcome, CollisionResolver, clamp_to_play_area
from core.systems.spawning import EnemySpawner, candidate_tiers, choose_weighted_tier

__all__ = [
    "BaseSystem",
    "CollisionOutcome",
    "CollisionResolver",
    "EnemySpawner",
    "SystemResult",
    "candidate_tiers",
    "choose_weighted_tier",
    "clamp_to_play_area",
]

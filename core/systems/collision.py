"""Collision resolution system.

Per frame, this system decides what happens when the player fish touches
enemy fish:

- A strictly smaller enemy is eaten: score and size go up.
- An equal or larger enemy bites: the player loses health, then is
  protected by a short cooldown so sustained contact does not drain
  health every frame.
- Growing past the victory size wins the game before any collision is
  considered.

It also keeps the player inside the play area. Persisting the outcome
(ledger record, phase change) is the session's job; the resolver only
reports it.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from core.config.display import play_band
from core.config.entities import COLLISION_COOLDOWN, COLLISION_DAMAGE
from core.config.session import VICTORY_SIZE
from core.entities.player import PlayerFish
from core.entities.tiers import FishTier
from core.events import EventBus, FishEatenEvent, PlayerDamagedEvent
from core.systems.base import BaseSystem

if TYPE_CHECKING:
    from core.session_state import SessionState

logger = logging.getLogger(__name__)


@dataclass
class CollisionOutcome:
    """What happened during one resolve() call.

    Attributes:
        eaten: Tiers of the fish the player ate, in order
        hits: Tiers of the fish that damaged the player
        score_gained: Total score added this frame
        damage_taken: Total health lost this frame
        victory: The player reached the victory size
        defeat: The player's health dropped to zero or below
    """

    eaten: List[FishTier] = field(default_factory=list)
    hits: List[FishTier] = field(default_factory=list)
    score_gained: int = 0
    damage_taken: int = 0
    victory: bool = False
    defeat: bool = False

    @property
    def session_over(self) -> bool:
        return self.victory or self.defeat


class CollisionResolver(BaseSystem):
    """Applies consumption, damage and victory rules to a session.

    Attributes:
        victory_size: Player size that wins the game (strictly greater than)
        damage: Health lost per hit
        cooldown: Seconds of protection after a hit
        event_bus: Optional bus for FishEatenEvent / PlayerDamagedEvent
    """

    def __init__(
        self,
        victory_size: float = VICTORY_SIZE,
        damage: int = COLLISION_DAMAGE,
        cooldown: float = COLLISION_COOLDOWN,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        super().__init__("CollisionResolver")
        self.victory_size = victory_size
        self.damage = damage
        self.cooldown = cooldown
        self.event_bus = event_bus

        self._total_eaten: int = 0
        self._total_hits: int = 0

    def resolve(self, state: "SessionState") -> CollisionOutcome:
        """Resolve victory and all player/enemy contacts for this frame.

        Sets ``state.is_victory`` on victory. Once victory or defeat is
        reached no further collisions are processed this frame.
        """
        outcome = CollisionOutcome()
        if not self.enabled:
            return outcome

        self._update_count += 1
        player = state.player

        if player.size > self.victory_size:
            state.is_victory = True
            outcome.victory = True
            logger.info("Victory: player size %.3f > %.2f", player.size, self.victory_size)
            return outcome

        for enemy in state.enemies:
            if not enemy.check_collision_with_player(player.position, player.display_size):
                continue

            tier = enemy.tier
            if player.size > tier.size:
                self._consume(state, tier, outcome)
                enemy.be_eaten()
            elif player.collision_cooldown <= 0.0:
                self._take_hit(state, tier, outcome)
                if player.health <= 0:
                    outcome.defeat = True
                    logger.info("Defeat: health %d, score %d", player.health, state.score)
                    break

        return outcome

    def _consume(self, state: "SessionState", tier: FishTier, outcome: CollisionOutcome) -> None:
        state.score += tier.score
        state.player.size += tier.growth
        state.size = state.player.size

        outcome.eaten.append(tier)
        outcome.score_gained += tier.score
        self._total_eaten += 1

        if self.event_bus is not None:
            self.event_bus.emit(
                FishEatenEvent(
                    frame=state.frame,
                    tier=tier.name,
                    score_gained=tier.score,
                    new_size=state.player.size,
                )
            )

    def _take_hit(self, state: "SessionState", tier: FishTier, outcome: CollisionOutcome) -> None:
        player = state.player
        player.health -= self.damage
        player.collision_cooldown = self.cooldown
        state.health = player.health

        outcome.hits.append(tier)
        outcome.damage_taken += self.damage
        self._total_hits += 1

        logger.debug("Hit by %s fish, health now %d", tier.name, player.health)
        if self.event_bus is not None:
            self.event_bus.emit(
                PlayerDamagedEvent(
                    frame=state.frame,
                    tier=tier.name,
                    damage=self.damage,
                    health=player.health,
                )
            )

    def get_debug_info(self):
        info = super().get_debug_info()
        info.update(total_eaten=self._total_eaten, total_hits=self._total_hits)
        return info


def clamp_to_play_area(player: PlayerFish, screen_width: float, screen_height: float) -> bool:
    """Keep the whole player fish inside the play band.

    A hard wall: the position is pinned and the velocity component into the
    wall is zeroed; nothing bounces.

    Returns:
        True if any edge clamped
    """
    top, bottom = play_band(screen_height)
    left, right = 0.0, float(screen_width)
    radius = player.display_size
    clamped = False

    if player.position.x - radius < left:
        player.position.x = left + radius
        player.velocity.x = 0.0
        clamped = True
    if player.position.x + radius > right:
        player.position.x = right - radius
        player.velocity.x = 0.0
        clamped = True

    if player.position.y - radius < top:
        player.position.y = top + radius
        player.velocity.y = 0.0
        clamped = True
    if player.position.y + radius > bottom:
        player.position.y = bottom - radius
        player.velocity.y = 0.0
        clamped = True

    return clamped

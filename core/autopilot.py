"""A simple computer player used by headless runs.

It reads the same RenderView a human would see and produces a PlayerInput:
flee the nearest threat if one is close, otherwise chase the nearest edible
fish, otherwise drift in a randomly changing direction.
"""

import random
from typing import Optional, Tuple

from core.config.session import AUTOPILOT_TURN_CHANCE
from core.entities.player import PlayerInput
from core.entities.tiers import FishTier
from core.render_view import EnemyView, RenderView
from core.util.rng import require_rng_param

THREAT_RADIUS = 150.0
# Dead zone so the autopilot does not jitter on an axis it is aligned with
AXIS_TOLERANCE = 4.0


def _intent_towards(dx: float, dy: float) -> PlayerInput:
    return PlayerInput(
        move_up=dy < -AXIS_TOLERANCE,
        move_down=dy > AXIS_TOLERANCE,
        move_left=dx < -AXIS_TOLERANCE,
        move_right=dx > AXIS_TOLERANCE,
    )


class Autopilot:
    """Chooses a PlayerInput for each frame.

    Attributes:
        rng: Random source for wandering (kept separate from the session RNG)
        heading: Current wandering direction as (dx, dy) in {-1, 0, 1}
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = require_rng_param(rng, "Autopilot.__init__")
        self.heading: Tuple[int, int] = (1, 0)

    def next_input(self, view: RenderView) -> PlayerInput:
        player = view.player
        threat = self._nearest(view, edible=False)
        if threat is not None:
            distance = ((threat.x - player.x) ** 2 + (threat.y - player.y) ** 2) ** 0.5
            if distance < THREAT_RADIUS + threat.display_size:
                return _intent_towards(player.x - threat.x, player.y - threat.y)

        prey = self._nearest(view, edible=True)
        if prey is not None:
            return _intent_towards(prey.x - player.x, prey.y - player.y)

        if self.rng.random() < AUTOPILOT_TURN_CHANCE:
            self.heading = (self.rng.choice((-1, 0, 1)), self.rng.choice((-1, 0, 1)))
        return _intent_towards(self.heading[0] * 10.0, self.heading[1] * 10.0)

    @staticmethod
    def _nearest(view: RenderView, edible: bool) -> Optional[EnemyView]:
        player = view.player
        best = None
        best_distance = float("inf")
        for enemy in view.enemies:
            is_edible = player.size > FishTier[enemy.tier].size
            if is_edible != edible:
                continue
            distance = (enemy.x - player.x) ** 2 + (enemy.y - player.y) ** 2
            if distance < best_distance:
                best, best_distance = enemy, distance
        return best

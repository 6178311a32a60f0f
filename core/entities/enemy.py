"""Autonomous enemy fish that cross the screen horizontally."""

from dataclasses import dataclass, field
from enum import Enum

from core.config.display import EXIT_MARGIN
from core.entities.tiers import FishTier
from core.math_utils import Vector2


class SwimDirection(Enum):
    """Which edge an enemy enters from."""

    LEFT_TO_RIGHT = "left_to_right"  # Enters on the left, swims right
    RIGHT_TO_LEFT = "right_to_left"  # Enters on the right, swims left


@dataclass
class EnemyFish:
    """An enemy fish of a fixed tier.

    Attributes:
        position: Centre of the fish
        velocity: Constant horizontal velocity set at spawn
        tier: Size class; fixes score, size, speed and growth
        direction: Direction of travel
        is_alive: False once eaten
    """

    tier: FishTier
    direction: SwimDirection
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    is_alive: bool = True

    @classmethod
    def spawn(
        cls, tier: FishTier, direction: SwimDirection, start_y: float, screen_width: float
    ) -> "EnemyFish":
        """Create a fish just outside the edge it enters from."""
        if direction is SwimDirection.LEFT_TO_RIGHT:
            start_x = -EXIT_MARGIN
            velocity = Vector2(tier.speed, 0.0)
        else:
            start_x = screen_width + EXIT_MARGIN
            velocity = Vector2(-tier.speed, 0.0)

        return cls(
            tier=tier,
            direction=direction,
            position=Vector2(start_x, start_y),
            velocity=velocity,
        )

    @property
    def display_size(self) -> float:
        """On-screen radius in pixels."""
        return self.tier.display_size

    def update(self, delta_time: float) -> None:
        if self.is_alive:
            self.position += self.velocity * delta_time

    def is_out_of_bounds(self, screen_width: float) -> bool:
        """True once the fish has left through the far edge."""
        if self.direction is SwimDirection.LEFT_TO_RIGHT:
            return self.position.x > screen_width + EXIT_MARGIN
        return self.position.x < -EXIT_MARGIN

    def check_collision_with_player(self, player_pos: Vector2, player_display_size: float) -> bool:
        """Circle proximity test against the player.

        The fish touch when their centres are closer than the mean of the two
        display sizes. Dead fish never collide.
        """
        if not self.is_alive:
            return False

        collision_distance = (self.display_size + player_display_size) / 2.0
        return self.position.distance_to(player_pos) < collision_distance

    def be_eaten(self) -> None:
        self.is_alive = False

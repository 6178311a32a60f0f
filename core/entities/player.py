"""The player-controlled fish and its input intents."""

from dataclasses import dataclass, field

from core.config.display import DISPLAY_SCALE
from core.config.entities import (
    PLAYER_SPEED,
    PLAYER_START_HEALTH,
    PLAYER_START_SIZE,
    PLAYER_START_X,
    PLAYER_START_Y,
)
from core.math_utils import Vector2


@dataclass
class PlayerInput:
    """One frame of player intent.

    Produced by the input collaborator (keyboard, autopilot, tests); the core
    never looks at devices directly.
    """

    move_up: bool = False
    move_down: bool = False
    move_left: bool = False
    move_right: bool = False
    pause: bool = False

    def movement_vector(self) -> Vector2:
        """Unit-length (or zero) direction requested by the movement keys."""
        direction = Vector2(0.0, 0.0)
        if self.move_up:
            direction.y -= 1.0
        if self.move_down:
            direction.y += 1.0
        if self.move_left:
            direction.x -= 1.0
        if self.move_right:
            direction.x += 1.0

        if direction.length() > 0.0:
            direction = direction.normalize()
        return direction


@dataclass
class PlayerFish:
    """The fish the player steers.

    Attributes:
        position: Centre of the fish in screen coordinates
        velocity: Velocity from the last update, in units per second
        size: Grows as the fish eats; never shrinks during a session
        health: Vitality; the session is lost at or below zero
        speed: Base movement speed
        collision_cooldown: Seconds until another hit can do damage
        facing_right: Which way the sprite faces
    """

    position: Vector2 = field(default_factory=lambda: Vector2(PLAYER_START_X, PLAYER_START_Y))
    velocity: Vector2 = field(default_factory=Vector2)
    size: float = PLAYER_START_SIZE
    health: int = PLAYER_START_HEALTH
    speed: float = PLAYER_SPEED
    collision_cooldown: float = 0.0
    facing_right: bool = True

    @property
    def display_size(self) -> float:
        """On-screen radius in pixels."""
        return self.size * DISPLAY_SCALE

    def update(self, delta_time: float, intent: PlayerInput) -> None:
        """Advance the fish by one frame.

        The cooldown counts down but is not clamped at zero; damage checks
        treat any non-positive value as expired.
        """
        if self.collision_cooldown > 0.0:
            self.collision_cooldown -= delta_time

        self.velocity = intent.movement_vector() * self.speed

        # Keep the previous facing when moving purely vertically
        if self.velocity.x > 0.0:
            self.facing_right = True
        elif self.velocity.x < 0.0:
            self.facing_right = False

        self.position += self.velocity * delta_time

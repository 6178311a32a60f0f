"""Read-only views of the game for the render layer.

The renderer draws from these frozen snapshots and never touches the live
session objects.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    size: float
    display_size: float
    facing_right: bool


@dataclass(frozen=True)
class EnemyView:
    x: float
    y: float
    tier: str
    direction: str
    display_size: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class RenderView:
    """Everything one frame of drawing needs.

    Attributes:
        phase: Current GamePhase value ("home", "playing", ...)
        player: The player fish
        enemies: Living enemy fish only
        health: HUD health
        size: HUD size
        score: HUD score
        is_victory: Whether the finished session was won
        notice: One-off message for the home screen (e.g. "No saved game found")
    """

    phase: str
    player: PlayerView
    enemies: Tuple[EnemyView, ...]
    health: int
    size: float
    score: int
    is_victory: bool
    notice: Optional[str] = None

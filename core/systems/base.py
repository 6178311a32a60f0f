"""Base class and result type for game systems.

Systems hold the per-frame rules (spawning, collision resolution). They are
initialized with their dependencies, can be switched off without code
changes, and report what they did through a SystemResult.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

__all__ = [
    "SystemResult",
    "BaseSystem",
]


@dataclass
class SystemResult:
    """Result of a system update cycle.

    Attributes:
        entities_spawned: Number of new entities created
        entities_removed: Number of entities removed
        skipped: Whether the update was skipped (system disabled)
        details: System-specific details (e.g., {"eaten": 2})
    """

    entities_spawned: int = 0
    entities_removed: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)


class BaseSystem:
    """Common bookkeeping shared by all game systems."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        """Whether this system should run during updates."""
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def update_count(self) -> int:
        """Number of updates that actually ran."""
        return self._update_count

    def get_debug_info(self) -> Dict[str, Any]:
        """Return debug information about this system's state."""
        return {
            "name": self._name,
            "enabled": self._enabled,
            "update_count": self._update_count,
        }

"""Event system for decoupling the game core from its observers.

A small synchronous publish-subscribe bus. The session emits events as the
simulation resolves collisions and changes phase; the frontend (sound,
flashing HUD, logs) and tests subscribe without the core knowing about them.

Usage:
------
    bus = EventBus()
    bus.subscribe(FishEatenEvent, lambda e: print(f"Ate a {e.tier} fish"))
    bus.emit(FishEatenEvent(frame=10, tier="TINY", score_gained=1, new_size=0.26))

Thread Safety:
--------------
Not thread-safe. The game runs a single driver thread.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")


@dataclass
class Event:
    """Base class for all events."""

    frame: int = 0  # Session frame when event occurred


@dataclass
class FishEatenEvent(Event):
    """Emitted when the player consumes an enemy fish."""

    tier: str = ""
    score_gained: int = 0
    new_size: float = 0.0


@dataclass
class PlayerDamagedEvent(Event):
    """Emitted when a larger fish hits the player."""

    tier: str = ""
    damage: int = 0
    health: int = 0


@dataclass
class SessionEndedEvent(Event):
    """Emitted when a session reaches victory or defeat."""

    victory: bool = False
    score: int = 0
    size: float = 0.0
    record_id: Optional[int] = None


@dataclass
class PhaseChangedEvent(Event):
    """Emitted on every game phase transition."""

    from_phase: str = ""
    to_phase: str = ""
    reason: str = ""


class EventBus:
    """Central hub for event publication and subscription.

    Example:
        bus = EventBus()
        unsubscribe = bus.subscribe(SessionEndedEvent, on_session_ended)
        ...
        unsubscribe()
    """

    def __init__(self) -> None:
        self._subscribers: Dict[Type[Event], List[Callable[[Any], None]]] = {}
        self._emit_count: int = 0

    def subscribe(
        self,
        event_type: Type[E],
        callback: Callable[[E], None],
    ) -> Callable[[], None]:
        """Subscribe to events of a specific type.

        Returns:
            Unsubscribe function - call it to remove the subscription
        """
        self._subscribers.setdefault(event_type, []).append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers.get(event_type, []):
                self._subscribers[event_type].remove(callback)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event to all subscribers of its exact type.

        Subscribers are called synchronously in subscription order. A
        subscriber that raises is logged and the remaining subscribers
        still receive the event.
        """
        event_type = type(event)
        self._emit_count += 1

        for callback in list(self._subscribers.get(event_type, [])):
            try:
                callback(event)
            except Exception as e:
                logger.error(
                    f"Error in event subscriber for {event_type.__name__}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def subscriber_count(self, event_type: Type[Event]) -> int:
        return len(self._subscribers.get(event_type, []))

    @property
    def total_emit_count(self) -> int:
        """Total number of events emitted."""
        return self._emit_count

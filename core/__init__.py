"""Core game simulation for Big Fish.

This package contains the pure game logic with no UI dependencies:

- entities: player fish, enemy fish and the tier table
- systems: enemy spawning and collision resolution
- session: the game phase state machine that drives a session
- persistence: the completed-game record ledger and the pause snapshot

Rendering and keyboard handling live in the ``rendering`` package and only
talk to the core through ``PlayerInput`` and ``RenderView``.
"""

from . import entities as entities
from . import persistence as persistence
from . import session as session
from . import systems as systems

__all__ = [
    "entities",
    "persistence",
    "session",
    "systems",
]

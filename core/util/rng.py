"""RNG utilities for deterministic gameplay.

Every random decision in the core (tier lottery, swim direction, spawn
height, companion rolls) goes through an explicitly passed
``random.Random``. These helpers fail loudly when one is missing instead of
silently creating an unseeded fallback.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not provided."""


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def __init__(self, rng: Optional[random.Random] = None):
            self.rng = require_rng_param(rng, "EnemySpawner.__init__")
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the session RNG explicitly.")
    return rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the session's random source; seeded runs are reproducible."""
    return random.Random(seed)

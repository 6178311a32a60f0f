"""Core utilities for the game."""

from core.util.rng import MissingRNGError, make_rng, require_rng_param

__all__ = [
    "MissingRNGError",
    "make_rng",
    "require_rng_param",
]

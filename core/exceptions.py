"""Big Fish exception hierarchy.

Centralised base classes so failures can be caught narrowly and diagnosed
by subsystem.
"""


class BigFishError(Exception):
    """Root of all Big Fish domain exceptions."""


class SessionError(BigFishError):
    """Errors in session orchestration (e.g. a negative frame delta)."""


class PersistenceError(BigFishError):
    """Errors during record ledger or snapshot save / load."""


class ConfigurationError(BigFishError):
    """Invalid or missing configuration."""

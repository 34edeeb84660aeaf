"""Exceptions raised by the game core."""


class SnakeError(Exception):
    """Base class for everything termsnake raises on purpose."""


class InvalidTransition(SnakeError):
    """A state change was requested that the current phase does not allow.

    Raised by ``GameState.tick()`` once the game is Won or Lost. This is a
    programming error in the caller, not a gameplay outcome.
    """


class NoFreeCellError(SnakeError):
    """Food placement was asked for on a board with no unoccupied cell."""


class ConfigError(SnakeError, ValueError):
    """A configuration value is out of range."""

"""
Exceptions raised by the board engine and the game session.
"""


class Tilt2048Error(Exception):
    """Base class for every error raised by this package."""


class InvalidDirectionError(Tilt2048Error, ValueError):
    """The direction is not one of left, up, right or down."""


class InvalidBoardError(Tilt2048Error, ValueError):
    """The board breaks the shape or tile-value invariants."""


class GameOverError(Tilt2048Error, RuntimeError):
    """A move was requested on a game that already ended."""

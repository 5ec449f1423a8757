# -*- coding: utf-8 -*-
"""
Set of value types returned by the board engine.
"""
from dataclasses import dataclass

from numpy import ndarray


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single move.

    Attributes
    ----------
    board : ndarray
        The board after the move and, if anything moved, the spawned tile.
    moved : bool
        Whether any cell changed position or value.
    score_delta : int
        Sum of the tiles created by merges during this move.
    spawned : tuple of int, optional
        Cell ``(row, col)`` of the tile added after the move, ``None`` if nothing moved.
    """

    board: ndarray
    moved: bool
    score_delta: int
    spawned: tuple[int, int] | None = None


@dataclass(frozen=True)
class GameStatus:
    """Terminal flags derived from a board."""

    won: bool
    stuck: bool

    @property
    def finished(self) -> bool:
        """True once the game reached 2048 or no move is left."""
        return self.won or self.stuck

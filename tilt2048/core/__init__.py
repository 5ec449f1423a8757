# -*- coding: utf-8 -*-
"""
Board engine of the 2048 game.

It includes functions for merging lines, sliding boards, spawning tiles, applying moves in the
four directions, validating boards and computing the win and stuck flags.
"""

from .errors import GameOverError, InvalidBoardError, InvalidDirectionError, Tilt2048Error
from .gameboard import (
    INITIAL_TILES,
    TILE_SPAWN_PROBS,
    WIN_TILE,
    apply_move,
    empty_board,
    evaluate_status,
    has_won,
    is_stuck,
    merge_line,
    new_game,
    slide_and_merge,
    spawn_tile,
    spawn_tile_at,
)
from .gamemove import Direction, can_move, legal_directions, parse_direction
from .types import GameStatus, MoveResult
from .validation import BOARD_SIZE, validate_board, validate_line

__all__ = [
    "BOARD_SIZE",
    "INITIAL_TILES",
    "TILE_SPAWN_PROBS",
    "WIN_TILE",
    "Direction",
    "GameStatus",
    "MoveResult",
    "GameOverError",
    "InvalidBoardError",
    "InvalidDirectionError",
    "Tilt2048Error",
    "apply_move",
    "can_move",
    "empty_board",
    "evaluate_status",
    "has_won",
    "is_stuck",
    "legal_directions",
    "merge_line",
    "new_game",
    "parse_direction",
    "slide_and_merge",
    "spawn_tile",
    "spawn_tile_at",
    "validate_board",
    "validate_line",
]

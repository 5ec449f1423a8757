# -*- coding: utf-8 -*-
"""
Rule engine of the 2048 sliding-tile puzzle.

Presentation layers only need ``new_game``, ``apply_move``, ``evaluate_status`` and the plain-data
helpers ``board_to_list`` / ``board_from_list``. ``TwentyFortyEight`` wraps them in a session that
tracks the score.
"""

from .core import (
    Direction,
    GameOverError,
    GameStatus,
    InvalidBoardError,
    InvalidDirectionError,
    MoveResult,
    Tilt2048Error,
    apply_move,
    evaluate_status,
    legal_directions,
    merge_line,
    new_game,
    spawn_tile,
)
from .envs import GameConfiguration, TwentyFortyEight
from .utils import board_from_list, board_to_list

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "GameConfiguration",
    "GameOverError",
    "GameStatus",
    "InvalidBoardError",
    "InvalidDirectionError",
    "MoveResult",
    "Tilt2048Error",
    "TwentyFortyEight",
    "apply_move",
    "board_from_list",
    "board_to_list",
    "evaluate_status",
    "legal_directions",
    "merge_line",
    "new_game",
    "spawn_tile",
]

# -*- coding: utf-8 -*-
"""
Game session configuration.
"""
from dataclasses import dataclass


@dataclass
class GameConfiguration:
    """
    Options of a game session.

    Attributes
    ----------
    seed : int, optional
        Seed of the session random generator. ``None`` draws fresh OS entropy.
    stop_on_win : bool
        End the game as soon as a 2048 tile appears. When False, play continues until the
        board is stuck.
    """

    seed: int | None = None
    stop_on_win: bool = True

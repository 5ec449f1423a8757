# -*- coding: utf-8 -*-
"""
Game session of the 2048 game.

This module provides the `TwentyFortyEight` class, which owns one board and its score, and the
`GameConfiguration` dataclass.
"""

from .config import GameConfiguration
from .twentyfortyeight import TwentyFortyEight

__all__ = ["GameConfiguration", "TwentyFortyEight"]

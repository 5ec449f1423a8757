# -*- coding: utf-8 -*-
"""
Utilities to turn boards into plain data and text.

The Matplotlib ``WindowBoard`` lives in ``tilt2048.utils.windows`` and is imported on demand, since
Matplotlib is an optional dependency.
"""

from .serialize import board_from_list, board_to_list, render_board

__all__ = ["board_from_list", "board_to_list", "render_board"]

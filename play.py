# -*- coding: utf-8 -*-
"""
Play 2048 with the arrow keys.

Backspace or ``r`` restarts the game, escape closes the window.
"""
import logging

from tilt2048.core import BOARD_SIZE, GameOverError
from tilt2048.envs import TwentyFortyEight
from tilt2048.utils.windows import WindowBoard

_logger = logging.getLogger(__name__)


def step(game: TwentyFortyEight, window: WindowBoard, action: str):
    """
    Apply a move and redraw the board if it changed.

    Parameters
    ----------
    game: TwentyFortyEight
        The game session
    window: WindowBoard
        Window showing the session
    action: str
        Name of the move
    """
    try:
        result = game.step(game.ACTIONS[action])
    except GameOverError:
        return
    if result.moved:
        window.draw(game.snapshot())
    if game.is_finished:
        _logger.info("Final score: %d", game.score)


def key_handler(game: TwentyFortyEight, window: WindowBoard, key: str):
    """Dispatch a key name to the session."""
    if key == "escape":
        window.close()
    elif key in ("backspace", "r"):
        game.reset()
        window.draw(game.snapshot())
    elif key in game.ACTIONS:
        step(game, window, key)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    session = TwentyFortyEight()
    window_board = WindowBoard(title="2048 Game", size=BOARD_SIZE)
    window_board.on_key(lambda key: key_handler(session, window_board, key))

    window_board.draw(session.snapshot())

    # Blocking event loop
    window_board.show()

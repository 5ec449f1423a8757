"""2048 game session holding one board, its score and its random generator."""

import logging
from typing import Any

from numpy import ndarray
from numpy.random import Generator, default_rng

from tilt2048.core.errors import GameOverError
from tilt2048.core.gameboard import apply_move, evaluate_status, new_game
from tilt2048.core.gamemove import Direction, DirectionLike, parse_direction
from tilt2048.core.types import GameStatus, MoveResult
from tilt2048.envs.config import GameConfiguration
from tilt2048.utils.serialize import board_to_list, render_board

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game session.

    This class owns a single board and applies the engine rules to it, keeping the running score
    in step with the board. Each instance has its own random generator; sessions share no state.
    """

    # ##: All Actions.
    ACTIONS = {'left': Direction.LEFT, 'up': Direction.UP, 'right': Direction.RIGHT, 'down': Direction.DOWN}

    def __init__(self, config: GameConfiguration | None = None, rng: Generator | None = None):
        """
        Initialize the session and deal the first two tiles.

        Parameters
        ----------
        config : GameConfiguration, optional
            Session options (default is ``GameConfiguration()``).
        rng : Generator, optional
            Random generator to use. Takes precedence over ``config.seed``.
        """
        self.config = config or GameConfiguration()
        self._rng = rng if rng is not None else default_rng(self.config.seed)
        self._board: ndarray = new_game(self._rng)
        self._score = 0
        self._moves = 0

    @property
    def board(self) -> ndarray:
        """Copy of the current board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        """Sum of every merge since the last reset."""
        return self._score

    @property
    def moves(self) -> int:
        """Number of moves that changed the board since the last reset."""
        return self._moves

    @property
    def status(self) -> GameStatus:
        """Win and stuck flags of the current board."""
        return evaluate_status(self._board)

    @property
    def is_finished(self) -> bool:
        """
        Check if the session accepts no more moves.

        Returns
        -------
        bool
            True if the board is stuck, or won while ``stop_on_win`` is set.
        """
        status = self.status
        return status.stuck or (status.won and self.config.stop_on_win)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Discard the current game and start a new one.

        Parameters
        ----------
        seed : int, optional
            Re-seed the session generator for a reproducible game.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._board = new_game(self._rng)
        self._score = 0
        self._moves = 0
        _logger.info('New game started')
        return self.board

    def step(self, direction: DirectionLike) -> MoveResult:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction, str or int
            The move to apply.

        Returns
        -------
        MoveResult
            Outcome of the move. The score is updated before this method returns.

        Raises
        ------
        GameOverError
            If the game already ended.
        InvalidDirectionError
            If the direction is unknown.
        """
        direction = parse_direction(direction)
        if self.is_finished:
            _logger.warning('Move %s rejected: the game is over', direction.name.lower())
            raise GameOverError('The game is over; call reset() to play again')

        result = apply_move(self._board, direction, rng=self._rng)
        _logger.debug(
            'Move %s: moved=%s score_delta=%d', direction.name.lower(), result.moved, result.score_delta
        )
        if not result.moved:
            return result

        self._board = result.board.copy()
        self._score += result.score_delta
        self._moves += 1

        status = self.status
        if status.won:
            _logger.info('2048 reached after %d moves, score %d', self._moves, self._score)
        if status.stuck:
            _logger.info('No move left after %d moves, score %d', self._moves, self._score)
        return result

    def snapshot(self) -> dict[str, Any]:
        """
        Plain-data view of the session.

        Returns
        -------
        dict
            ``board`` as nested lists of ints, ``score``, ``won`` and ``stuck``.
        """
        status = self.status
        return {
            'board': board_to_list(self._board),
            'score': self._score,
            'won': status.won,
            'stuck': status.stuck,
        }

    def render(self) -> str:
        """Text view of the board."""
        return render_board(self._board)

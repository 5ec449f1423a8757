"""
Move directions of the board engine and helpers to tell which of them would change a board.
"""

from enum import IntEnum

from numpy import ndarray

from tilt2048.core.errors import InvalidDirectionError
from tilt2048.core.validation import validate_board


class Direction(IntEnum):
    """
    Tilt direction of the board.

    The value is the number of counter-clockwise quarter turns (``numpy.rot90``) that brings
    the direction onto "left", so every move reduces to compacting rows to the left.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


DirectionLike = Direction | str | int


def parse_direction(value: DirectionLike) -> Direction:
    """
    Convert user input into a ``Direction``.

    Parameters
    ----------
    value : Direction, str or int
        A ``Direction``, its name in any case (``"left"``, ``"UP"``) or its value (0 to 3).

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    InvalidDirectionError
        If the value names no direction.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction[value.strip().upper()]
        except KeyError:
            raise InvalidDirectionError(f'Unknown direction: {value!r}') from None
    # ##: bool is an int subclass but never a valid direction.
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Direction(value)
        except ValueError:
            raise InvalidDirectionError(f'Unknown direction: {value!r}') from None
    raise InvalidDirectionError(f'Unknown direction: {value!r}')


def _can_move_direction(board: ndarray, direction: Direction) -> bool:
    """Check one direction on an already validated board, without rotating it."""
    if direction in (Direction.LEFT, Direction.RIGHT):
        near, far = board[:, :-1], board[:, 1:]
    else:
        near, far = board[:-1, :], board[1:, :]

    can_merge = (near != 0) & (near == far)
    if direction in (Direction.LEFT, Direction.UP):
        can_slide = (near == 0) & (far != 0)
    else:
        can_slide = (far == 0) & (near != 0)

    return bool(can_slide.any() or can_merge.any())


def can_move(board, direction: DirectionLike) -> bool:
    """
    Check if a move in a specific direction would change the board.

    Parameters
    ----------
    board : array_like
        The game board to check.
    direction : Direction, str or int
        Direction to check (see ``parse_direction``).

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Raises
    ------
    InvalidDirectionError
        If the direction is unknown.
    InvalidBoardError
        If the board breaks the engine invariants.

    Notes
    -----
    A move is possible if a tile has an empty cell on the side it moves toward, or if two
    adjacent tiles along the move axis hold the same value.
    """
    direction = parse_direction(direction)
    return _can_move_direction(validate_board(board), direction)


def legal_directions(board) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : array_like
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions, ordered by value. Empty when the board is stuck.
    """
    state = validate_board(board)
    return [direction for direction in Direction if _can_move_direction(state, direction)]

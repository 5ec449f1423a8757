"""
Plain-data representation of boards for display layers and snapshots.
"""

from numpy import asarray, ndarray

from tilt2048.core.errors import InvalidBoardError
from tilt2048.core.validation import BOARD_SIZE, validate_board


def board_to_list(board: ndarray, flat: bool = False) -> list[list[int]] | list[int]:
    """
    Convert a board into Python lists of ints.

    Parameters
    ----------
    board : ndarray
        The game board.
    flat : bool, optional
        Return a single row-major list of 16 values instead of 4 rows (default is False).

    Returns
    -------
    list
        Nested or flat list of plain ``int`` values.
    """
    state = validate_board(board)
    if flat:
        return [int(value) for value in state.ravel()]
    return [[int(value) for value in row] for row in state]


def board_from_list(data) -> ndarray:
    """
    Build a board from a nested (4 rows of 4) or flat (16 values) row-major sequence.

    Raises
    ------
    InvalidBoardError
        If the data cannot form a valid board.
    """
    try:
        state = asarray(data)
    except ValueError as error:
        raise InvalidBoardError(f'Board is not a rectangular grid: {error}') from error

    if state.ndim == 1:
        if state.size != BOARD_SIZE * BOARD_SIZE:
            raise InvalidBoardError(f'Expected {BOARD_SIZE * BOARD_SIZE} values, got {state.size}')
        state = state.reshape(BOARD_SIZE, BOARD_SIZE)
    return validate_board(state)


def render_board(board: ndarray) -> str:
    """Render the board as tab-separated rows, empty cells shown as ``.``."""
    return '\n'.join(' \t'.join(str(value) if value else '.' for value in row) for row in board_to_list(board))

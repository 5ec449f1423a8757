"""
Board and line validation shared by every public engine operation.
"""

from numpy import argwhere, asarray, int64, integer, issubdtype, ndarray

from tilt2048.core.errors import InvalidBoardError

# ##>: Side of the square board.
BOARD_SIZE = 4


def _as_int_array(values, what: str) -> ndarray:
    """Convert to a fresh ``int64`` array, refusing ragged input and non-integer dtypes."""
    try:
        state = asarray(values)
    except ValueError as error:
        raise InvalidBoardError(f'{what} is not a rectangular grid: {error}') from error

    if not issubdtype(state.dtype, integer):
        raise InvalidBoardError(f'{what} must hold integers, got dtype {state.dtype}')
    return state.astype(int64, copy=True)


def _check_tiles(state: ndarray, what: str) -> ndarray:
    """Reject negative values and values that are not powers of two >= 2."""
    negative = argwhere(state < 0)
    if len(negative):
        cell = tuple(int(i) for i in negative[0])
        raise InvalidBoardError(f'{what} has negative value {state[cell]} at cell {cell}')

    # ##>: A positive power of two has a single bit set; 1 is excluded since tiles start at 2.
    bad = argwhere((state != 0) & ((state == 1) | ((state & (state - 1)) != 0)))
    if len(bad):
        cell = tuple(int(i) for i in bad[0])
        raise InvalidBoardError(f'{what} value {state[cell]} at cell {cell} is not a power of two >= 2')
    return state


def validate_board(board) -> ndarray:
    """
    Check a board against the engine invariants and return it as an ``int64`` array.

    Parameters
    ----------
    board : array_like
        A 4x4 grid of non-negative integers, 0 for empty cells and powers of two >= 2 otherwise.

    Returns
    -------
    ndarray
        A fresh ``int64`` copy of the board. The caller's object is never returned.

    Raises
    ------
    InvalidBoardError
        If the board has the wrong shape, a non-integer dtype, a negative value or a value that
        is not a power of two.
    """
    state = _as_int_array(board, 'Board')
    if state.shape != (BOARD_SIZE, BOARD_SIZE):
        raise InvalidBoardError(f'Board must have shape {(BOARD_SIZE, BOARD_SIZE)}, got {state.shape}')
    return _check_tiles(state, 'Board')


def validate_line(line) -> ndarray:
    """Same checks as ``validate_board`` for a single row or column of any length."""
    state = _as_int_array(line, 'Line')
    if state.ndim != 1:
        raise InvalidBoardError(f'Line must be one-dimensional, got shape {state.shape}')
    return _check_tiles(state, 'Line')

"""
Core rules of the 2048 board: sliding and merging lines, spawning tiles, applying moves and
deriving the terminal status of a board.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import Generator, default_rng

from tilt2048.core.gamemove import DirectionLike, parse_direction
from tilt2048.core.types import GameStatus, MoveResult
from tilt2048.core.validation import BOARD_SIZE, validate_board, validate_line

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for sampling.
_TILE_VALUES = [2, 4]
_TILE_PROBS = [0.9, 0.1]

# ##>: Smallest tile value that wins the game.
WIN_TILE = 2048

# ##>: Number of tiles placed on a new board.
INITIAL_TILES = 2

RandomLike = Generator | int | None


def merge_line(line) -> tuple[ndarray, int]:
    """
    Compact a line to the left and merge adjacent equal values.

    Parameters
    ----------
    line : sequence of int
        One row or column of the board, read toward the side tiles move to.

    Returns
    -------
    merged_line : ndarray
        The line after compaction and merging, right-padded with zeros to its original length.
    score : int
        Sum of the tiles created by merges.

    Raises
    ------
    InvalidBoardError
        If the line holds anything but zeros and powers of two >= 2.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging runs from the start of the line toward the end.
    - A tile produced by a merge is not merged again in the same pass, so ``[2, 2, 2, 2]``
      gives ``[4, 4, 0, 0]``.
    """
    return _merge_values(validate_line(line))


def _merge_values(values: ndarray) -> tuple[ndarray, int]:
    """Merge an already validated line."""
    non_zero = values[values != 0]

    result = zeros_like(values)
    score = 0

    i = 0
    position = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result[position] = merged
            score += merged
            i += 2
        else:
            result[position] = non_zero[i]
            i += 1
        position += 1

    return result, score


def slide_and_merge(board: ndarray) -> tuple[ndarray, int]:
    """
    Slide every row of the board to the left and merge adjacent cells.

    Parameters
    ----------
    board : array_like
        The game board.

    Returns
    -------
    updated_board : ndarray
        The board after sliding and merging.
    score : int
        The total score obtained from all merges.

    Notes
    -----
    For other directions, rotate the board before calling this function.
    """
    return _slide_rows(validate_board(board))


def _slide_rows(board: ndarray) -> tuple[ndarray, int]:
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        merged_row, score_row = _merge_values(row)
        result[i] = merged_row
        score += score_row

    return result, score


def _place_tile(state: ndarray, rng: Generator) -> tuple[ndarray, tuple[int, int] | None]:
    """Write one random tile into a random empty cell of ``state`` (in-place)."""
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state, None

    row, col = available_cells[rng.integers(len(available_cells))]
    state[row, col] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return state, (int(row), int(col))


def spawn_tile_at(board, rng: RandomLike = None) -> tuple[ndarray, tuple[int, int] | None]:
    """
    Add one random tile to the board and report where it landed.

    Parameters
    ----------
    board : array_like
        The current game board. It is not modified.
    rng : Generator, int or None, optional
        Random source. An integer seeds a new generator; ``None`` uses a fresh OS-seeded one.

    Returns
    -------
    new_board : ndarray
        A copy of the board with one more tile, or an unchanged copy if the board was full.
    cell : tuple of int, optional
        The ``(row, col)`` of the new tile, ``None`` if the board was full.

    Notes
    -----
    The empty cell is chosen uniformly; the tile is a 2 with probability 0.9 and a 4 otherwise.
    """
    return _place_tile(validate_board(board), default_rng(rng))


def spawn_tile(board, rng: RandomLike = None) -> ndarray:
    """
    Add one random tile to an empty cell of the board.

    A full board is returned unchanged; this is not an error. See ``spawn_tile_at``.
    """
    new_board, _ = spawn_tile_at(board, rng=rng)
    return new_board


def empty_board() -> ndarray:
    """Return a board with no tile."""
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def new_game(rng: RandomLike = None) -> ndarray:
    """
    Create a fresh board holding two random tiles.

    Parameters
    ----------
    rng : Generator, int or None, optional
        Random source used for both tiles.

    Returns
    -------
    ndarray
        The new game board.
    """
    generator = default_rng(rng)
    state = empty_board()
    for _ in range(INITIAL_TILES):
        state, _ = _place_tile(state, generator)
    return state


def apply_move(board, direction: DirectionLike, rng: RandomLike = None) -> MoveResult:
    """
    Tilt the board in a direction, merge tiles and spawn a new one if anything moved.

    Parameters
    ----------
    board : array_like
        The current game board. It is not modified.
    direction : Direction, str or int
        The move to apply (see ``parse_direction``).
    rng : Generator, int or None, optional
        Random source for the spawned tile.

    Returns
    -------
    MoveResult
        The new board, whether it moved, the score gained and the spawned cell.

    Raises
    ------
    InvalidDirectionError
        If the direction is unknown.
    InvalidBoardError
        If the board breaks the engine invariants.

    Notes
    -----
    - The board is rotated counter-clockwise ``direction.value`` times so that the move becomes
      "left", merged row by row, then rotated back.
    - If the move changes nothing, the original board is returned with a zero score and no tile
      is spawned.
    """
    direction = parse_direction(direction)
    state = validate_board(board)

    rotated = rot90(state, k=direction.value)
    updated, score = _slide_rows(rotated)
    if (updated == rotated).all():
        return MoveResult(board=state, moved=False, score_delta=0)

    # ##: rot90 returns a view; copy before spawning in place.
    new_state = array(rot90(updated, k=-direction.value))
    new_state, cell = _place_tile(new_state, default_rng(rng))
    return MoveResult(board=new_state, moved=True, score_delta=score, spawned=cell)


def has_won(board: ndarray) -> bool:
    """True if a tile reached ``WIN_TILE``."""
    return bool(np_any(board >= WIN_TILE))


def is_stuck(board: ndarray) -> bool:
    """
    Check if no move in any direction can change the board.

    Notes
    -----
    The board is stuck when there are no empty cells AND no horizontally or vertically adjacent
    cells hold the same value.
    """
    return bool(
        np_all(board != 0) and not np_any(board[:-1] == board[1:]) and not np_any(board[:, :-1] == board[:, 1:])
    )


def evaluate_status(board) -> GameStatus:
    """
    Compute the terminal flags of a board.

    Parameters
    ----------
    board : array_like
        The game board.

    Returns
    -------
    GameStatus
        ``won`` if any tile is >= 2048, ``stuck`` if no move is possible. Both are independent;
        hosts should surface a win before a stuck board.
    """
    state = validate_board(board)
    return GameStatus(won=has_won(state), stuck=is_stuck(state))

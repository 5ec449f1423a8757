"""
Tests for the board engine: line merging, moves in the four directions, tile spawning and the
terminal status of a board.
"""

from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from tilt2048.core.errors import InvalidBoardError, InvalidDirectionError
from tilt2048.core.gameboard import (
    TILE_SPAWN_PROBS,
    apply_move,
    empty_board,
    evaluate_status,
    merge_line,
    new_game,
    slide_and_merge,
    spawn_tile,
    spawn_tile_at,
)
from tilt2048.core.gamemove import Direction

CHECKERBOARD = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


def random_board(rng, values=(0, 0, 2, 4, 8, 16)) -> np.ndarray:
    """Draw a valid board, mostly empty cells and small tiles."""
    return rng.choice(values, size=(4, 4)).astype(np.int64)


def without_spawn(result) -> np.ndarray:
    """Board of a move result before its new tile was added."""
    board = result.board.copy()
    if result.spawned is not None:
        board[result.spawned] = 0
    return board


class TestMergeLine(TestCase):
    """Compaction and merging of a single line."""

    def test_no_double_merge(self):
        """Merged tiles are not merged again in the same pass."""
        line, score = merge_line([2, 2, 2, 2])
        np.testing.assert_array_equal(line, [4, 4, 0, 0])
        self.assertEqual(score, 8)

    def test_merge_after_unmatched_tile(self):
        line, score = merge_line([4, 2, 2, 0])
        np.testing.assert_array_equal(line, [4, 4, 0, 0])
        self.assertEqual(score, 4)

    def test_merge_across_gaps(self):
        """Zeros are removed before looking for equal neighbours."""
        line, score = merge_line([0, 2, 0, 2])
        np.testing.assert_array_equal(line, [4, 0, 0, 0])
        self.assertEqual(score, 4)

    def test_two_pairs(self):
        line, score = merge_line([2, 2, 4, 4])
        np.testing.assert_array_equal(line, [4, 8, 0, 0])
        self.assertEqual(score, 12)

    def test_first_pair_wins(self):
        """Three equal tiles merge the two nearest the destination side."""
        line, score = merge_line([0, 8, 8, 8])
        np.testing.assert_array_equal(line, [16, 8, 0, 0])
        self.assertEqual(score, 16)

    def test_empty_line(self):
        line, score = merge_line([0, 0, 0, 0])
        np.testing.assert_array_equal(line, [0, 0, 0, 0])
        self.assertEqual(score, 0)

    def test_no_merge_packs_left(self):
        line, score = merge_line([0, 2, 0, 4])
        np.testing.assert_array_equal(line, [2, 4, 0, 0])
        self.assertEqual(score, 0)

    def test_full_line_without_merge(self):
        line, score = merge_line([2, 4, 8, 16])
        np.testing.assert_array_equal(line, [2, 4, 8, 16])
        self.assertEqual(score, 0)

    def test_rejects_invalid_values(self):
        """Lines are checked like boards: no odd values, no 1, no negatives, no floats."""
        for line in ([3, 3], [1, 1, 0, 0], [-2, 2, 0, 0], [2.0, 2.0, 0, 0]):
            with self.subTest(line=line):
                with self.assertRaises(InvalidBoardError):
                    merge_line(line)

    def test_any_length(self):
        line, score = merge_line([2, 2, 4, 0, 4, 8])
        np.testing.assert_array_equal(line, [4, 8, 8, 0, 0, 0])
        self.assertEqual(score, 12)


class TestSlideAndMerge(TestCase):
    def test_slide_and_merge(self):
        """Every row is slid and merged on its own."""
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        result, score = slide_and_merge(board)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        self.assertEqual(score, 28)
        np.testing.assert_array_equal(result, expected)


class TestApplyMove(TestCase):
    """Moves in all directions, including the spawned tile."""

    def test_left_does_not_merge_across_rows(self):
        board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2]])
        result = apply_move(board, Direction.LEFT, rng=default_rng(1))

        self.assertTrue(result.moved)
        self.assertEqual(result.score_delta, 0)

        # ##>: Rows compacted without merging, plus exactly one new tile in a formerly empty cell.
        self.assertEqual(np.count_nonzero(result.board), 3)
        self.assertNotIn(result.spawned, [(0, 0), (3, 0)])
        self.assertIn(result.board[result.spawned], (2, 4))

        expected = np.zeros((4, 4), dtype=int)
        expected[0, 0] = expected[3, 0] = 2
        np.testing.assert_array_equal(without_spawn(result), expected)

    def test_up_merges_column(self):
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = apply_move(board, "up", rng=default_rng(2))
        self.assertEqual(result.score_delta, 4)
        self.assertEqual(result.board[0, 0], 4)

    def test_down_merges_column(self):
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = apply_move(board, "down", rng=default_rng(3))
        self.assertEqual(result.score_delta, 4)
        self.assertEqual(result.board[3, 0], 4)
        self.assertEqual(without_spawn(result)[0, 0], 0)

    def test_right_merges_row(self):
        board = np.array([[0, 2, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = apply_move(board, Direction.RIGHT, rng=default_rng(4))
        self.assertEqual(result.score_delta, 4)
        self.assertEqual(result.board[0, 3], 4)

    def test_score_sums_all_lines(self):
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        result = apply_move(board, Direction.LEFT, rng=default_rng(5))
        self.assertEqual(result.score_delta, 28)

    def test_no_op_move(self):
        """A move that changes nothing returns the same board, no score and no new tile."""
        board = np.array([[2, 4, 8, 16], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = apply_move(board, Direction.LEFT, rng=default_rng(6))

        self.assertFalse(result.moved)
        self.assertEqual(result.score_delta, 0)
        self.assertIsNone(result.spawned)
        np.testing.assert_array_equal(result.board, board)

    def test_stuck_board_never_moves(self):
        for direction in Direction:
            result = apply_move(CHECKERBOARD, direction, rng=default_rng(7))
            self.assertFalse(result.moved)
            np.testing.assert_array_equal(result.board, CHECKERBOARD)

    def test_input_not_mutated(self):
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        original = board.copy()
        apply_move(board, Direction.LEFT, rng=default_rng(8))
        np.testing.assert_array_equal(board, original)

    def test_accepts_nested_lists(self):
        result = apply_move([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4], "left", rng=default_rng(9))
        self.assertEqual(result.board[0, 0], 4)

    def test_rotation_symmetry(self):
        """All four directions agree with mirrored or transposed left moves."""
        rng = default_rng(10)
        for _ in range(50):
            board = random_board(rng)
            expected = {
                Direction.LEFT: slide_and_merge(board)[0],
                Direction.RIGHT: np.fliplr(slide_and_merge(np.fliplr(board))[0]),
                Direction.UP: slide_and_merge(board.T)[0].T,
                Direction.DOWN: np.flipud(slide_and_merge(np.flipud(board).T)[0].T),
            }
            for direction, after in expected.items():
                result = apply_move(board, direction, rng=rng)
                self.assertEqual(result.moved, not np.array_equal(after, board))
                np.testing.assert_array_equal(without_spawn(result), after)

    def test_tile_count_and_conservation(self):
        """A move adds at most one tile, and a move that changes nothing is a no-op."""
        rng = default_rng(11)
        for _ in range(200):
            board = random_board(rng)
            for direction in Direction:
                result = apply_move(board, direction, rng=rng)
                self.assertLessEqual(np.count_nonzero(result.board), np.count_nonzero(board) + 1)
                if result.moved:
                    self.assertIsNotNone(result.spawned)
                    self.assertEqual(np.count_nonzero(result.board), np.count_nonzero(without_spawn(result)) + 1)
                else:
                    np.testing.assert_array_equal(result.board, board)
                    self.assertEqual(result.score_delta, 0)

    def test_seeded_moves_are_reproducible(self):
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 4, 0], [0, 0, 0, 0]])
        first = apply_move(board, Direction.UP, rng=42)
        second = apply_move(board, Direction.UP, rng=42)
        np.testing.assert_array_equal(first.board, second.board)
        self.assertEqual(first.spawned, second.spawned)

    def test_invalid_direction(self):
        with self.assertRaises(InvalidDirectionError):
            apply_move(empty_board(), "diagonal")
        with self.assertRaises(ValueError):
            apply_move(empty_board(), 4)

    def test_invalid_board(self):
        with self.assertRaises(InvalidBoardError):
            apply_move(np.zeros((3, 3), dtype=int), Direction.LEFT)
        with self.assertRaises(InvalidBoardError):
            apply_move([[3, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4], Direction.LEFT)


class TestSpawnTile(TestCase):
    def test_spawn_on_empty_board(self):
        board = spawn_tile(empty_board(), rng=default_rng(0))
        self.assertEqual(np.count_nonzero(board), 1)
        self.assertIn(board[board != 0][0], (2, 4))

    def test_spawn_does_not_mutate_input(self):
        board = empty_board()
        spawn_tile(board, rng=default_rng(0))
        self.assertEqual(np.count_nonzero(board), 0)

    def test_spawn_on_full_board_is_noop(self):
        board, cell = spawn_tile_at(CHECKERBOARD, rng=default_rng(0))
        self.assertIsNone(cell)
        np.testing.assert_array_equal(board, CHECKERBOARD)
        self.assertIsNot(board, CHECKERBOARD)

    def test_spawn_fills_only_empty_cell(self):
        board = CHECKERBOARD.copy()
        board[2, 1] = 0
        new_board, cell = spawn_tile_at(board, rng=default_rng(0))
        self.assertEqual(cell, (2, 1))
        self.assertIn(new_board[2, 1], (2, 4))

    def test_spawn_distribution(self):
        """Tiles are 4 about one time in ten, and every empty cell can be picked."""
        rng = default_rng(1234)
        fours = 0
        cells = set()
        trials = 2000
        for _ in range(trials):
            board, cell = spawn_tile_at(empty_board(), rng=rng)
            cells.add(cell)
            fours += int(board[cell] == 4)

        self.assertAlmostEqual(fours / trials, TILE_SPAWN_PROBS[4], delta=0.03)
        self.assertEqual(len(cells), 16)


class TestNewGame(TestCase):
    def test_two_tiles(self):
        board = new_game(rng=default_rng(0))
        self.assertEqual(board.shape, (4, 4))
        self.assertEqual(np.count_nonzero(board), 2)
        self.assertTrue(np.all(np.isin(board[board != 0], [2, 4])))

    def test_seed_reproducibility(self):
        np.testing.assert_array_equal(new_game(rng=42), new_game(rng=42))


class TestEvaluateStatus(TestCase):
    def test_win(self):
        board = np.zeros((4, 4), dtype=int)
        board[1, 2] = 2048
        status = evaluate_status(board)
        self.assertTrue(status.won)
        self.assertFalse(status.stuck)
        self.assertTrue(status.finished)

    def test_above_win_tile(self):
        board = np.zeros((4, 4), dtype=int)
        board[0, 0] = 4096
        self.assertTrue(evaluate_status(board).won)

    def test_stuck(self):
        status = evaluate_status(CHECKERBOARD)
        self.assertTrue(status.stuck)
        self.assertFalse(status.won)

    def test_adjacent_pair_not_stuck(self):
        board = CHECKERBOARD.copy()
        board[0, 0] = 4
        self.assertFalse(evaluate_status(board).stuck)

    def test_vertical_pair_not_stuck(self):
        board = CHECKERBOARD.copy()
        board[1, 3] = 4
        self.assertFalse(evaluate_status(board).stuck)

    def test_empty_cell_not_stuck(self):
        board = CHECKERBOARD.copy()
        board[3, 3] = 0
        self.assertFalse(evaluate_status(board).stuck)

    def test_won_and_stuck(self):
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8, 16, 32, 64]])
        status = evaluate_status(board)
        self.assertTrue(status.won)
        self.assertTrue(status.stuck)

    def test_new_board(self):
        status = evaluate_status(new_game(rng=0))
        self.assertFalse(status.won)
        self.assertFalse(status.finished)


if __name__ == "__main__":
    main()
